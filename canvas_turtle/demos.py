"""Built-in example drawings."""

from __future__ import annotations

from collections.abc import Callable

from canvas_turtle.turtle import Turtle


def square(t: Turtle, size: float = 150) -> None:
    """Outlined square centered on the origin."""
    t.pen_up()
    t.set_pos(-size / 2, -size / 2)
    t.pen_down()
    for _ in range(4):
        t.forward(size)
        t.right(90)


def star(t: Turtle, size: float = 200, points: int = 5) -> None:
    """Filled star polygon; ``points`` must be odd."""
    t.pen_up()
    t.set_pos(0, 0)
    t.set_heading(0)
    t.back(size / 2)
    t.pen_down()
    t.set_fill_color("gold")
    t.set_pen_color("darkorange")
    t.start_path()
    for _ in range(points):
        t.forward(size)
        t.right(180 - 180 / points)
    t.fill_path()


def spiral(t: Turtle, turns: int = 120, step: float = 2.0) -> None:
    """Square-ish spiral growing out from the center."""
    t.set_pen_color("#1a1a2e")
    for i in range(turns):
        t.forward(i * step)
        t.right(91)


def filled_flower(t: Turtle, petals: int = 12, radius: float = 90) -> None:
    """Ring of filled triangular petals with a dot in the middle."""
    colors = ["#e41a1c", "#377eb8", "#4daf4a", "#984ea3", "#ff7f00", "#a65628"]
    for i in range(petals):
        t.set_pos(0, 0)
        t.set_heading(i * 360 / petals)
        t.set_fill_color(colors[i % len(colors)])
        t.pen_up()
        t.start_path()
        t.forward(radius)
        t.right(150)
        t.forward(radius / 2)
        t.fill_path()
    t.set_pos(0, 0)
    t.set_pen_color("#ffcc00")
    t.dot(radius / 5)


DEMOS: dict[str, Callable[[Turtle], None]] = {
    "square": square,
    "star": star,
    "spiral": spiral,
    "filled_flower": filled_flower,
}


def get_demo(name: str) -> Callable[[Turtle], None]:
    """Look up a demo by name.

    Raises:
        KeyError: if there is no such demo
    """
    return DEMOS[name]
