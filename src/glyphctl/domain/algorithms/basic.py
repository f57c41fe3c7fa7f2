"""Basic compositions: containers, frames, and construction grids."""

from __future__ import annotations

from glyphctl.domain.algorithms._canvas import CENTER, Canvas
from glyphctl.domain.markup import Element, el, points, rotate


def container(c: Canvas) -> list[Element]:
    """Shape knocked out of a rounded square."""
    return [
        c.tile(18),
        c.icon(size=68, fill=c.foreground),
    ]


def frame(c: Canvas) -> list[Element]:
    weight = c.uniform(3, 5)
    return [
        c.tile(14, inset=8, fill="none", stroke=c.color, stroke_width=weight),
        c.icon(size=54),
    ]


def monogram(c: Canvas) -> list[Element]:
    """Letter on a badge with the shape tucked into a corner."""
    corner = c.rng.choice(((74, 26), (74, 74), (26, 74)))
    return [
        c.tile(22, inset=8),
        c.letter(size=50, x=46, y=52),
        el("circle", cx=corner[0], cy=corner[1], r=13, fill=c.accent),
        c.icon(size=16, cx=corner[0], cy=corner[1], fill=c.foreground),
    ]


def diamond(c: Canvas) -> list[Element]:
    return [
        el(
            "rect",
            x=20,
            y=20,
            width=60,
            height=60,
            rx=c.uniform(6, 12),
            fill=c.color,
            transform=rotate(45),
        ),
        c.icon(size=42, fill=c.foreground),
    ]


def grid(c: Canvas) -> list[Element]:
    """3x3 construction grid; each cell is lit with the shape by chance."""
    cell, gap = 22, 4
    origin = CENTER - (3 * cell + 2 * gap) / 2
    cells: list[Element] = []
    for row in range(3):
        for col in range(3):
            lit = (row, col) == (1, 1) or c.rng.random() > 0.35
            x = origin + col * (cell + gap)
            y = origin + row * (cell + gap)
            cells.append(
                el(
                    "rect",
                    x=x,
                    y=y,
                    width=cell,
                    height=cell,
                    rx=4,
                    fill=c.foreground if lit else c.light,
                    opacity=None if lit else 0.25,
                )
            )
            if lit:
                cells.append(c.icon(size=14, cx=x + cell / 2, cy=y + cell / 2))
    return [c.tile(16, inset=6), *cells]


def split(c: Canvas) -> list[Element]:
    """Two complementary halves with the shape bridging the seam."""
    clip = c.uid("clip")
    tilt = c.uniform(-12, 12)
    return [
        el("defs", el("clipPath", c.tile(18), id=clip)),
        el(
            "g",
            el("rect", x=0, y=0, width=50, height=100, fill=c.color),
            el("rect", x=50, y=0, width=50, height=100, fill=c.accent),
            clip_path=f"url(#{clip})",
            transform=rotate(tilt),
        ),
        c.icon(size=58, fill=c.foreground, angle=-tilt),
    ]


def corner(c: Canvas) -> list[Element]:
    reach = c.uniform(28, 40)
    return [
        c.tile(18),
        el("polygon", points=points([(90 - reach, 10), (90, 10), (90, 10 + reach)]), fill=c.accent),
        c.icon(size=50, cx=44, cy=56, fill=c.foreground),
    ]
