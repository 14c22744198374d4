"""Logging configuration for turtle programs and the CLI.

Provides either human-readable lines or JSON records with:
- Category detection (turtle, surface, events, cli, system)
- Extra fields passed through ``logger.info(..., extra={...})``
- Optional rotating log files
"""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import TextIO


class StructuredFormatter(logging.Formatter):
    """JSON formatter, one object per line."""

    # Map logger names to categories
    CATEGORY_MAP = {
        "canvas_turtle.turtle": "turtle",
        "canvas_turtle.commands": "turtle",
        "canvas_turtle.script": "turtle",
        "canvas_turtle.surface": "surface",
        "canvas_turtle.rendering": "surface",
        "canvas_turtle.canvas": "surface",
        "canvas_turtle.registry": "surface",
        "canvas_turtle.events": "events",
        "canvas_turtle.user_input": "events",
        "canvas_turtle.cli": "cli",
        "canvas_turtle.config": "system",
    }

    # Attributes every LogRecord carries; anything else came in through extra=
    STANDARD_FIELDS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message"}

    def _get_category(self, logger_name: str) -> str:
        """Determine category from logger name."""
        for prefix, cat in self.CATEGORY_MAP.items():
            if logger_name.startswith(prefix):
                return cat
        return "system"

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_record: dict = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "category": self._get_category(record.name),
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Collect extra fields
        extra = {}
        for key, value in record.__dict__.items():
            if key not in self.STANDARD_FIELDS and not key.startswith("_"):
                # Try to serialize, fall back to str()
                try:
                    json.dumps(value)
                    extra[key] = value
                except (TypeError, ValueError):
                    extra[key] = str(value)
        if extra:
            log_record["extra"] = extra

        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_record)


class ErrorFilter(logging.Filter):
    """Filter that only allows ERROR and CRITICAL level logs."""

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno >= logging.ERROR


def _rotating_handler(path: str, formatter: logging.Formatter) -> RotatingFileHandler:
    """10MB files, three backups, parent directories created."""
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(path, maxBytes=10 * 1024 * 1024, backupCount=3, encoding="utf-8")
    handler.setFormatter(formatter)
    return handler


def configure_logging(
    *,
    json_format: bool = False,
    log_level: int | str = logging.INFO,
    log_file: str | None = None,
    error_log_file: str | None = None,
    stream: TextIO | None = None,
) -> None:
    """Configure application logging.

    Args:
        json_format: Use JSON formatting instead of plain lines
        log_level: Minimum log level (int or level name)
        log_file: Path to main log file (None for stream only)
        error_log_file: Path to error-only log file (None to skip)
        stream: Stream to write to (default: sys.stderr)
    """
    import sys

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter: logging.Formatter
    if json_format:
        formatter = StructuredFormatter()
    else:
        formatter = logging.Formatter(
            "%(asctime)s %(levelname)5s [%(name)s] %(message)s",
            datefmt="%H:%M:%S",
        )

    stream_handler = logging.StreamHandler(stream or sys.stderr)
    stream_handler.setFormatter(formatter)
    root_logger.addHandler(stream_handler)

    if log_file:
        root_logger.addHandler(_rotating_handler(log_file, formatter))

    if error_log_file:
        error_handler = _rotating_handler(error_log_file, formatter)
        error_handler.addFilter(ErrorFilter())
        root_logger.addHandler(error_handler)

    # Pillow logs every plugin import at DEBUG
    logging.getLogger("PIL").setLevel(logging.WARNING)


def setup_cli_logging(verbose: bool = False) -> None:
    """Configure logging for the command line from settings."""
    from canvas_turtle.config import settings

    configure_logging(
        json_format=settings.log_json,
        log_level=logging.DEBUG if verbose else settings.log_level.upper(),
        log_file=settings.log_file,
        error_log_file=settings.error_log_file,
    )
