"""Application configuration."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables and an optional .env file.

    Priority: environment variables > .env > defaults
    """

    model_config = SettingsConfigDict(
        env_prefix="CANVAS_TURTLE_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Surface
    canvas_width: int = Field(default=500, gt=0)
    canvas_height: int = Field(default=500, gt=0)
    default_canvas: str = "canvas"  # Surface name a TurtleConfig binds to by default
    background: str = "#FFFFFF"

    # Pointer events are reported in CSS pixels on a 2x backing store
    pointer_scale: float = 2.0

    # Turtle defaults
    pen_color: str = "#00F"
    fill_color: str = "#00F"
    line_width: float = Field(default=1.0, gt=0)
    dot_radius: float = 10.0

    # Logging
    log_json: bool = False
    log_level: str = "INFO"
    log_file: str | None = None
    error_log_file: str | None = None  # ERROR and above only


settings = Settings()
