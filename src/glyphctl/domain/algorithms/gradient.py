"""Gradient compositions."""

from __future__ import annotations

from glyphctl.domain.algorithms._canvas import Canvas
from glyphctl.domain.markup import Element, el


def gradient_linear(c: Canvas) -> list[Element]:
    """Gradient tile with the shape cut out through a mask."""
    mask = c.uid("mask")
    return [
        el(
            "defs",
            c.linear_gradient("fill", [(0, c.light), (1, c.color)], angle=c.uniform(20, 70)),
            el(
                "mask",
                el("rect", x=0, y=0, width=100, height=100, fill="#FFFFFF"),
                c.icon(size=62, fill="#000000"),
                id=mask,
            ),
        ),
        c.tile(18, fill=c.url("fill"), mask=f"url(#{mask})"),
    ]


def gradient_radial(c: Canvas) -> list[Element]:
    focus_x = c.uniform(0.3, 0.7)
    focus_y = c.uniform(0.3, 0.7)
    return [
        el(
            "defs",
            c.radial_gradient(
                "glow",
                [(0, c.light), (0.6, c.color), (1, c.dark)],
                cx=focus_x,
                cy=focus_y,
            ),
        ),
        c.tile(26, fill=c.url("glow")),
        c.icon(size=60, fill=c.foreground, opacity=0.95),
    ]


def gradient_mesh(c: Canvas) -> list[Element]:
    """Blurred color blobs clipped to a tile, shape on top."""
    clip = c.uid("clip")
    blobs = [
        el(
            "circle",
            cx=c.uniform(15, 85),
            cy=c.uniform(15, 85),
            r=c.uniform(22, 38),
            fill=color,
            opacity=c.uniform(0.55, 0.9),
        )
        for color in (c.color, c.accent, c.light, c.dark)
    ]
    return [
        el("defs", el("clipPath", c.tile(18), id=clip), c.blur_filter("soften", 9)),
        c.tile(18),
        el("g", *blobs, clip_path=f"url(#{clip})", filter=c.url("soften")),
        c.icon(size=58, fill=c.foreground),
    ]


def duotone(c: Canvas) -> list[Element]:
    dx = c.uniform(3, 7)
    dy = c.uniform(3, 7)
    return [
        c.icon(size=70, cx=50 + dx, cy=50 + dy, fill=c.accent, opacity=0.85),
        c.icon(size=70, cx=50 - dx / 2, cy=50 - dy / 2, fill=c.color),
    ]
