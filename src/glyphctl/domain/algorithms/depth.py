"""Three-dimensional compositions: isometric faces, stacked layers, shadows."""

from __future__ import annotations

from glyphctl.domain.algorithms._canvas import Canvas
from glyphctl.domain.colors import adjust_hsl
from glyphctl.domain.markup import Element, el, points


def isometric(c: Canvas) -> list[Element]:
    """Cube with shaded faces; the shape sits sheared on the front face."""
    top = [(50, 12), (86, 31), (50, 50), (14, 31)]
    left = [(14, 31), (50, 50), (50, 90), (14, 71)]
    right = [(50, 50), (86, 31), (86, 71), (50, 90)]
    return [
        el("polygon", points=points(top), fill=c.light),
        el("polygon", points=points(left), fill=c.dark),
        el("polygon", points=points(right), fill=c.color),
        el(
            "g",
            c.icon(size=30, cx=0, cy=0, fill=c.foreground),
            transform="matrix(1 -0.53 0 1 68 62)",
        ),
    ]


def shadow_depth(c: Canvas) -> list[Element]:
    """Several offset shadow layers under the tile."""
    layers = c.randint(2, 4)
    shadows = [
        c.tile(
            18,
            fill=c.dark,
            opacity=round(0.12 * (layers - i), 2),
            transform=f"translate({3 * (i + 1)} {3 * (i + 1)})",
        )
        for i in range(layers)
    ]
    return [*reversed(shadows), c.tile(18), c.icon(size=62, fill=c.foreground)]


def layered_3d(c: Canvas) -> list[Element]:
    step = c.uniform(4, 7)
    colors = (c.dark, c.accent, c.color)
    return [
        c.icon(
            size=62,
            cx=50 + step * (1 - i),
            cy=50 + step * (1 - i),
            fill=color,
            opacity=(0.35, 0.65, None)[i],
        )
        for i, color in enumerate(colors)
    ]


def perspective(c: Canvas) -> list[Element]:
    """Shape skewed toward a vanishing point with a faint floor reflection."""
    skew = c.uniform(-0.25, -0.1)
    floor = adjust_hsl(c.color, lightness=35)
    return [
        el(
            "polygon",
            points=points([(22, 74), (78, 74), (94, 92), (6, 92)]),
            fill=floor,
            opacity=0.6,
        ),
        el("g", c.icon(size=52, cy=44), transform=f"matrix(1 0 {skew:.2f} 1 {-skew * 44:.2f} 0)"),
        el(
            "g",
            c.icon(size=52, cy=44, opacity=0.2),
            transform="matrix(1 0 0 -0.35 0 103)",
        ),
    ]
