"""Letter-driven compositions."""

from __future__ import annotations

from glyphctl.domain.algorithms._canvas import LETTER_FONT, Canvas
from glyphctl.domain.markup import Element, el


def letter_fill(c: Canvas) -> list[Element]:
    """The label's initial used as a mask over a field of the shape."""
    mask = c.uid("letter")
    field: list[Element] = [el("rect", x=0, y=0, width=100, height=100, fill=c.color)]
    for row in range(5):
        for col in range(5):
            field.append(
                c.icon(
                    size=12,
                    cx=10 + col * 20,
                    cy=10 + row * 20,
                    fill=c.accent,
                    angle=45 if (row + col) % 2 else 0,
                )
            )
    return [
        el("defs", el("mask", c.letter(size=96, y=54, fill="#FFFFFF"), id=mask)),
        el("g", *field, mask=f"url(#{mask})"),
    ]


def badge_text(c: Canvas) -> list[Element]:
    """Round badge with the shape above the full label."""
    word = c.wording.upper()[:12]
    return [
        el("circle", cx=50, cy=50, r=46, fill=c.color),
        el(
            "circle",
            cx=50,
            cy=50,
            r=39,
            fill="none",
            stroke=c.foreground,
            stroke_width=1.5,
            opacity=0.6,
        ),
        c.icon(size=36, cy=42, fill=c.foreground),
        el(
            "text",
            text=word,
            x=50,
            y=72,
            font_family=LETTER_FONT,
            font_size=max(6.0, 11 - 0.4 * len(word)),
            font_weight=700,
            letter_spacing=1.5,
            text_anchor="middle",
            fill=c.foreground,
        ),
    ]
