"""Pattern compositions: tilings, rings, and spirals of the shape."""

from __future__ import annotations

import math

from glyphctl.domain.algorithms._canvas import CENTER, Canvas
from glyphctl.domain.markup import Element, el, points

GOLDEN_ANGLE = 137.50776


def _polar(radius: float, degrees: float) -> tuple[float, float]:
    theta = math.radians(degrees)
    return CENTER + radius * math.cos(theta), CENTER + radius * math.sin(theta)


def _hexagon(cx: float, cy: float, radius: float) -> str:
    corners = [math.radians(60 * i - 30) for i in range(6)]
    return points((cx + radius * math.cos(t), cy + radius * math.sin(t)) for t in corners)


def tessellation(c: Canvas) -> list[Element]:
    """4x4 tiling with opacity cycling along the diagonals."""
    clip = c.uid("clip")
    turn = c.rng.choice((0, 90, 180, 270))
    tiles: list[Element] = []
    for row in range(4):
        for col in range(4):
            opacity = min(1.0, 0.3 + ((row + col) % 3) * 0.25)
            tiles.append(
                c.icon(
                    size=18,
                    cx=20 + col * 20,
                    cy=20 + row * 20,
                    fill=c.color,
                    opacity=opacity,
                    angle=turn if (row + col) % 2 else 0,
                )
            )
    return [
        el("defs", el("clipPath", c.tile(16, inset=8), id=clip)),
        el("g", *tiles, clip_path=f"url(#{clip})"),
    ]


def honeycomb(c: Canvas) -> list[Element]:
    radius = 14
    cells = [
        el(
            "polygon",
            points=_hexagon(*_polar(radius * 1.75, 60 * i), radius - 1),
            fill=c.color,
            opacity=round(c.uniform(0.25, 0.6), 2),
        )
        for i in range(6)
    ]
    return [
        *cells,
        el("polygon", points=_hexagon(CENTER, CENTER, radius + 2), fill=c.color),
        c.icon(size=18, fill=c.foreground),
    ]


def kaleidoscope(c: Canvas) -> list[Element]:
    """Mirrored copies of the shape in radial symmetry."""
    folds = c.rng.choice((6, 8))
    petals: list[Element] = []
    for i in range(folds):
        angle = 360 / folds * i
        x, y = _polar(22, angle - 90)
        mirrored = i % 2 == 1
        petals.append(
            c.icon(
                size=26,
                cx=x,
                cy=y,
                fill=c.accent if mirrored else c.color,
                angle=angle,
                opacity=0.75,
            )
        )
    return [*petals, el("circle", cx=CENTER, cy=CENTER, r=7, fill=c.dark)]


def spiral_golden(c: Canvas) -> list[Element]:
    count = c.randint(8, 11)
    start = c.uniform(0, 360)
    items: list[Element] = []
    for i in range(count, 0, -1):
        radius = 11 * math.sqrt(i)
        x, y = _polar(radius, start + i * GOLDEN_ANGLE)
        items.append(
            c.icon(
                size=max(8.0, 26 - 1.8 * i),
                cx=x,
                cy=y,
                opacity=round(1 - i / (count + 3), 2),
            )
        )
    items.append(c.icon(size=24))
    return items


def radial(c: Canvas) -> list[Element]:
    """5-7 copies on a ring of radius 28 around a larger center copy."""
    count = c.randint(5, 7)
    offset = c.uniform(0, 360 / count)
    ring: list[Element] = []
    for i in range(count):
        angle = 360 / count * i + offset
        x, y = _polar(28, angle)
        ring.append(c.icon(size=18, cx=x, cy=y, angle=angle, fill=c.accent))
    return [*ring, c.icon(size=30)]


def spiral(c: Canvas) -> list[Element]:
    count = c.randint(6, 9)
    turn = c.uniform(40, 60)
    items: list[Element] = []
    for i in range(count):
        x, y = _polar(6 + 4.5 * i, turn * i)
        opacity = round(0.35 + 0.65 * i / count, 2)
        items.append(c.icon(size=10 + 2 * i, cx=x, cy=y, angle=turn * i, opacity=opacity))
    return items


def wave(c: Canvas) -> list[Element]:
    """A horizontal run of the shape riding a sine curve."""
    count = 5
    phase = c.uniform(0, math.tau)
    amplitude = c.uniform(8, 14)
    return [
        c.icon(
            size=18,
            cx=14 + 18 * i,
            cy=CENTER + amplitude * math.sin(phase + i * 1.2),
            opacity=round(0.5 + 0.5 * (i + 1) / count, 2),
            fill=c.color if i % 2 else c.accent,
        )
        for i in range(count)
    ]
