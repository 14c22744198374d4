"""Tests for the command line interface."""

from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from canvas_turtle.cli import app

runner = CliRunner()

PNG_MAGIC = b"\x89PNG\r\n\x1a\n"


@pytest.fixture(autouse=True)
def _no_logging_setup():
    """Keep the CLI from reconfiguring the root logger during tests."""
    with patch("canvas_turtle.logging_config.setup_cli_logging"):
        yield


@pytest.fixture
def program(tmp_path: Path) -> Path:
    path = tmp_path / "square.py"
    path.write_text(
        "make_turtle()\nrepeat(4, lambda: (forward(50), right(90)))\n", encoding="utf-8"
    )
    return path


class TestRender:
    def test_png(self, program: Path, tmp_path: Path) -> None:
        out = tmp_path / "out.png"
        result = runner.invoke(app, ["render", str(program), "-o", str(out)])
        assert result.exit_code == 0, result.output
        assert out.read_bytes().startswith(PNG_MAGIC)
        assert "4 op(s)" in result.output

    def test_svg_from_extension(self, program: Path, tmp_path: Path) -> None:
        out = tmp_path / "out.svg"
        result = runner.invoke(
            app, ["render", str(program), "-o", str(out), "-w", "200", "-h", "100"]
        )
        assert result.exit_code == 0, result.output
        svg = out.read_text(encoding="utf-8")
        assert 'width="200" height="100"' in svg
        assert svg.count("<path") == 4

    def test_explicit_format(self, program: Path, tmp_path: Path) -> None:
        out = tmp_path / "drawing.out"
        result = runner.invoke(app, ["render", str(program), "-o", str(out), "--format", "svg"])
        assert result.exit_code == 0, result.output
        assert out.read_text(encoding="utf-8").startswith("<svg")

    def test_failing_program(self, tmp_path: Path) -> None:
        bad = tmp_path / "bad.py"
        bad.write_text("make_turtle()\nundefined_name\n", encoding="utf-8")
        result = runner.invoke(app, ["render", str(bad), "-o", str(tmp_path / "x.png")])
        assert result.exit_code == 1
        assert "failed" in result.output
        assert not (tmp_path / "x.png").exists()

    def test_bad_pen_color(self, tmp_path: Path) -> None:
        bad = tmp_path / "color.py"
        bad.write_text("make_turtle()\nset_pen_color('notacolor')\nforward(10)\n", encoding="utf-8")
        result = runner.invoke(app, ["render", str(bad), "-o", str(tmp_path / "c.png")])
        assert result.exit_code == 1
        assert not isinstance(result.exception, ValueError)
        assert "failed" in result.output
        assert not (tmp_path / "c.png").exists()

    def test_bad_background(self, program: Path, tmp_path: Path) -> None:
        out = tmp_path / "bg.png"
        result = runner.invoke(app, ["render", str(program), "-o", str(out), "-b", "nope"])
        assert result.exit_code == 1
        assert not isinstance(result.exception, ValueError)
        assert "Could not write" in result.output
        assert not out.exists()

    def test_missing_program(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["render", str(tmp_path / "nope.py")])
        assert result.exit_code != 0

    def test_program_without_turtle(self, tmp_path: Path) -> None:
        empty = tmp_path / "empty.py"
        empty.write_text("x = 1\n", encoding="utf-8")
        result = runner.invoke(app, ["render", str(empty), "-o", str(tmp_path / "e.png")])
        assert result.exit_code == 0
        assert "make_turtle()" in result.output


class TestDemo:
    def test_demo_png(self, tmp_path: Path) -> None:
        out = tmp_path / "star.png"
        result = runner.invoke(app, ["demo", "star", "-o", str(out)])
        assert result.exit_code == 0, result.output
        assert out.read_bytes().startswith(PNG_MAGIC)

    def test_demo_svg(self, tmp_path: Path) -> None:
        out = tmp_path / "flower.svg"
        result = runner.invoke(app, ["demo", "filled_flower", "-o", str(out)])
        assert result.exit_code == 0, result.output
        assert "<circle" in out.read_text(encoding="utf-8")

    def test_demo_bad_background(self, tmp_path: Path) -> None:
        out = tmp_path / "square.png"
        result = runner.invoke(app, ["demo", "square", "-o", str(out), "-b", "nope"])
        assert result.exit_code == 1
        assert "Could not write" in result.output
        assert not out.exists()

    def test_unknown_demo(self) -> None:
        result = runner.invoke(app, ["demo", "nope"])
        assert result.exit_code == 1
        assert "Unknown demo" in result.output

    def test_list_demos(self) -> None:
        result = runner.invoke(app, ["demos"])
        assert result.exit_code == 0
        for name in ("square", "star", "spiral", "filled_flower"):
            assert name in result.output


def test_config_command() -> None:
    result = runner.invoke(app, ["config"])
    assert result.exit_code == 0
    assert "canvas_width" in result.output
    assert "pointer_scale" in result.output
