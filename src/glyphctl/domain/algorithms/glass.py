"""Glass and glow compositions built on SVG filters."""

from __future__ import annotations

from glyphctl.domain.algorithms._canvas import Canvas
from glyphctl.domain.colors import INK
from glyphctl.domain.markup import Element, el


def glassmorphism(c: Canvas) -> list[Element]:
    """Frosted pane over blurred color orbs."""
    return [
        el("defs", c.blur_filter("frost", 6)),
        el(
            "g",
            el("circle", cx=c.uniform(25, 40), cy=c.uniform(25, 40), r=24, fill=c.color),
            el("circle", cx=c.uniform(60, 75), cy=c.uniform(60, 75), r=22, fill=c.accent),
            filter=c.url("frost"),
        ),
        c.tile(
            20,
            inset=14,
            fill="#FFFFFF",
            fill_opacity=0.35,
            stroke="#FFFFFF",
            stroke_opacity=0.6,
            stroke_width=1.5,
        ),
        c.icon(size=46, fill=c.dark),
    ]


def neon_glow(c: Canvas) -> list[Element]:
    glow = c.uid("glow")
    return [
        el(
            "defs",
            el(
                "filter",
                el("feGaussianBlur", stdDeviation=c.uniform(1.5, 3), result="blur"),
                el(
                    "feMerge",
                    el("feMergeNode", in_="blur"),
                    el("feMergeNode", in_="SourceGraphic"),
                ),
                id=glow,
                x="-50%",
                y="-50%",
                width="200%",
                height="200%",
            ),
        ),
        c.tile(18, fill=INK),
        c.icon(size=58, stroke=c.light, stroke_width=2.5, filter=f"url(#{glow})"),
    ]


def soft_shadow(c: Canvas) -> list[Element]:
    shadow = c.uid("shadow")
    return [
        el(
            "defs",
            el(
                "filter",
                el(
                    "feDropShadow",
                    dx=0,
                    dy=c.uniform(3, 6),
                    stdDeviation=c.uniform(4, 7),
                    flood_color=c.color,
                    flood_opacity=0.35,
                ),
                id=shadow,
                x="-30%",
                y="-30%",
                width="160%",
                height="160%",
            ),
        ),
        c.tile(22, inset=14, fill="#FFFFFF", filter=f"url(#{shadow})"),
        c.icon(size=44),
    ]


def blur_gradient(c: Canvas) -> list[Element]:
    """Blurred gradient copy of the shape behind a sharp overlay."""
    return [
        el(
            "defs",
            c.linear_gradient("haze", [(0, c.accent), (1, c.color)], angle=c.uniform(0, 90)),
            c.blur_filter("haze-blur", 7),
        ),
        c.icon(size=76, fill=c.url("haze"), filter=c.url("haze-blur"), opacity=0.8),
        c.icon(size=56, fill=c.dark),
    ]
