"""Advanced compositions: orbits, bursts, seals, circuits, clusters."""

from __future__ import annotations

import math

from glyphctl.domain.algorithms._canvas import CENTER, Canvas
from glyphctl.domain.markup import Element, el, fmt, points, rotate


def _polar(radius: float, degrees: float) -> tuple[float, float]:
    theta = math.radians(degrees)
    return CENTER + radius * math.cos(theta), CENTER + radius * math.sin(theta)


def orbit(c: Canvas) -> list[Element]:
    """Satellites on tilted elliptical orbits around the shape."""
    parts: list[Element] = []
    for ring in range(2):
        tilt = c.uniform(-60, 60) + ring * 70
        parts.append(
            el(
                "ellipse",
                cx=CENTER,
                cy=CENTER,
                rx=42 - ring * 8,
                ry=16 + ring * 4,
                fill="none",
                stroke=c.accent,
                stroke_width=2,
                opacity=0.7,
                transform=rotate(tilt),
            )
        )
        angle = math.radians(c.uniform(0, 360))
        sx = CENTER + (42 - ring * 8) * math.cos(angle)
        sy = CENTER + (16 + ring * 4) * math.sin(angle)
        parts.append(el("circle", cx=sx, cy=sy, r=4, fill=c.color, transform=rotate(tilt)))
    parts.append(c.icon(size=36))
    return parts


def explosion(c: Canvas) -> list[Element]:
    rays = c.randint(8, 12)
    parts: list[Element] = []
    for i in range(rays):
        angle = 360 / rays * i
        length = c.uniform(30, 46)
        tip = _polar(length, angle)
        left = _polar(14, angle - 7)
        right = _polar(14, angle + 7)
        parts.append(
            el(
                "polygon",
                points=points([left, tip, right]),
                fill=c.accent if i % 2 else c.color,
                opacity=round(c.uniform(0.5, 1.0), 2),
            )
        )
    parts.append(el("circle", cx=CENTER, cy=CENTER, r=17, fill=c.color))
    parts.append(c.icon(size=22, fill=c.foreground))
    return parts


def _wave_path(baseline: float, amplitude: float, phase: float) -> str:
    steps = 8
    width = 100 / steps
    d = [f"M0 {fmt(baseline)}"]
    for i in range(steps):
        x0 = i * width
        ctrl_y = baseline + amplitude * math.sin(phase + i * math.pi / 2)
        d.append(f"Q{fmt(x0 + width / 2)} {fmt(ctrl_y)} {fmt(x0 + width)} {fmt(baseline)}")
    d.append("V100H0Z")
    return " ".join(d)


def wave_stack(c: Canvas) -> list[Element]:
    layers = c.randint(3, 4)
    phase = c.uniform(0, math.tau)
    clip = c.uid("clip")
    waves = [
        el(
            "path",
            d=_wave_path(58 + i * 10, 6 - i, phase + i * 0.9),
            fill=(c.light, c.accent, c.color, c.dark)[i],
            opacity=round(0.5 + 0.5 * (i + 1) / layers, 2),
        )
        for i in range(layers)
    ]
    return [
        el("defs", el("clipPath", c.tile(18), id=clip)),
        el("g", *waves, clip_path=f"url(#{clip})"),
        c.icon(size=34, cy=34),
    ]


def corner_accent(c: Canvas) -> list[Element]:
    """Shape framed by L-shaped flourishes on two opposite corners."""
    arm = c.uniform(14, 22)
    flip = c.rng.chance(0.5)
    corners = ((12, 12, 1, 1), (88, 88, -1, -1)) if flip else ((88, 12, -1, 1), (12, 88, 1, -1))
    lines: list[Element] = []
    for x, y, sx, sy in corners:
        lines.append(el("line", x1=x, y1=y, x2=x + sx * arm, y2=y, stroke=c.accent, stroke_width=3))
        lines.append(el("line", x1=x, y1=y, x2=x, y2=y + sy * arm, stroke=c.accent, stroke_width=3))
    return [*lines, c.icon(size=56)]


def seal(c: Canvas) -> list[Element]:
    """Stamp-style serrated rim around the shape."""
    teeth = c.rng.choice((20, 24, 28))
    rim = [_polar(46 if i % 2 == 0 else 41, 180 / teeth * i) for i in range(teeth * 2)]
    return [
        el("polygon", points=points(rim), fill=c.color),
        el(
            "circle",
            cx=CENTER,
            cy=CENTER,
            r=34,
            fill="none",
            stroke=c.foreground,
            stroke_width=1.2,
            stroke_dasharray="2 2",
        ),
        c.icon(size=40, fill=c.foreground),
    ]


def tech_circuit(c: Canvas) -> list[Element]:
    """Traces running in from the edges to pads around a central chip."""
    parts: list[Element] = []
    for side in range(4):
        for k in range(2):
            offset = 36 + k * 28
            if c.rng.random() < 0.25:
                continue
            inner = 26 + c.uniform(0, 6)
            if side == 0:
                x1, y1, x2, y2 = offset, 4, offset, inner
            elif side == 1:
                x1, y1, x2, y2 = 96, offset, 100 - inner, offset
            elif side == 2:
                x1, y1, x2, y2 = offset, 96, offset, 100 - inner
            else:
                x1, y1, x2, y2 = 4, offset, inner, offset
            parts.append(el("line", x1=x1, y1=y1, x2=x2, y2=y2, stroke=c.accent, stroke_width=2))
            parts.append(el("circle", cx=x1, cy=y1, r=2.5, fill=c.accent))
    return [
        *parts,
        el("rect", x=28, y=28, width=44, height=44, rx=8, fill=c.color),
        c.icon(size=30, fill=c.foreground),
    ]


_CLUSTER_SLOTS = ((50, 50, 34), (24, 28, 18), (76, 30, 16), (28, 76, 14), (74, 74, 20))


def cluster(c: Canvas) -> list[Element]:
    parts: list[Element] = []
    for i, (x, y, size) in enumerate(_CLUSTER_SLOTS):
        jitter_x = c.uniform(-3, 3)
        jitter_y = c.uniform(-3, 3)
        parts.append(
            c.icon(
                size=size,
                cx=x + jitter_x,
                cy=y + jitter_y,
                angle=c.uniform(-25, 25),
                fill=c.color if i == 0 else c.accent,
                opacity=None if i == 0 else round(c.uniform(0.45, 0.85), 2),
            )
        )
    return parts


def overlap(c: Canvas) -> list[Element]:
    """Translucent discs overlapping behind the shape."""
    spread = c.uniform(10, 16)
    discs = [
        el("circle", cx=CENTER - spread, cy=CENTER - spread / 2, r=30, fill=c.color, opacity=0.7),
        el("circle", cx=CENTER + spread, cy=CENTER - spread / 2, r=30, fill=c.accent, opacity=0.7),
        el("circle", cx=CENTER, cy=CENTER + spread, r=30, fill=c.light, opacity=0.6),
    ]
    return [*discs, c.icon(size=34, fill=c.dark)]
