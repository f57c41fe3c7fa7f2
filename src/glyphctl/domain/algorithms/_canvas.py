"""Composition canvas shared by every algorithm builder.

A :class:`Canvas` bundles one composition request (shape, seed, color,
label) with the derived values builders need: the seeded random stream,
the accent/foreground palette, namespaced definition ids, and helpers
that place the shape inside the normalized 100x100 frame.

Builders receive a fresh canvas per call and read nothing else, so a
composition is a pure function of its request.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from functools import cached_property

from glyphctl.domain.colors import (
    WHITE,
    accent_for,
    adjust_hsl,
    foreground_for,
    resolve_primary,
)
from glyphctl.domain.markup import (
    CANVAS_SIZE,
    Element,
    clean_text,
    el,
    fmt,
    rotate,
    scale,
    translate,
)
from glyphctl.domain.seeds import SeededRandom, seed_hex
from glyphctl.domain.shapes import ShapePrimitive

CENTER = CANVAS_SIZE / 2
ICON_SIZE = 80
LETTER_FONT = "Inter, Helvetica, Arial, sans-serif"


@dataclass(frozen=True)
class Canvas:
    """One composition request plus derived palette and helpers."""

    algorithm_id: str
    shape: ShapePrimitive
    seed: int
    color: str
    label: str | None = None
    _rng: SeededRandom = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "color", resolve_primary(self.color))
        object.__setattr__(self, "_rng", SeededRandom(self.seed))

    # ── Palette ──────────────────────────────────────────────────────

    @cached_property
    def accent(self) -> str:
        return accent_for(self.color)

    @cached_property
    def foreground(self) -> str:
        return foreground_for(self.color)

    @cached_property
    def light(self) -> str:
        return adjust_hsl(self.color, lightness=20)

    @cached_property
    def dark(self) -> str:
        return adjust_hsl(self.color, lightness=-18)

    white = WHITE

    # ── Seeded draws ─────────────────────────────────────────────────

    @property
    def rng(self) -> SeededRandom:
        return self._rng

    def uniform(self, low: float, high: float) -> float:
        return self._rng.uniform(low, high)

    def randint(self, low: int, high: int) -> int:
        return self._rng.randint(low, high)

    # ── Ids and references ───────────────────────────────────────────

    @property
    def seed_hex(self) -> str:
        return seed_hex(self.seed)

    def uid(self, name: str) -> str:
        """Definition id namespaced by algorithm and seed."""
        return f"{self.algorithm_id}-{self.seed_hex}-{name}"

    def url(self, name: str) -> str:
        return f"url(#{self.uid(name)})"

    @property
    def wording(self) -> str:
        """The printable label, or the shape name when nothing printable is left."""
        return clean_text(self.label or "").strip() or self.shape.name

    @property
    def initial(self) -> str:
        return self.wording[0].upper()

    # ── Placement helpers ────────────────────────────────────────────

    def icon(
        self,
        *,
        size: float = ICON_SIZE,
        cx: float = CENTER,
        cy: float = CENTER,
        fill: str | None = None,
        angle: float = 0.0,
        opacity: float | None = None,
        stroke: str | None = None,
        stroke_width: float | None = None,
        **attrs: object,
    ) -> Element:
        """The shape scaled to *size* and centered on ``(cx, cy)``."""
        width, height = self.shape.view_box_size
        factor = size / max(width, height)
        tx = cx - factor * width / 2
        ty = cy - factor * height / 2
        transform = f"{translate(tx, ty)} {scale(factor)}"
        if angle:
            transform = f"{rotate(angle, cx, cy)} {transform}"
        path_attrs: dict[str, object] = {"d": self.shape.path_data}
        if stroke is not None:
            path_attrs.update(
                fill="none",
                stroke=stroke,
                stroke_width=(stroke_width or 1.5) / factor,
                stroke_linejoin="round",
            )
        else:
            path_attrs["fill"] = fill or self.color
        return el(
            "g",
            el("path", **path_attrs),
            transform=transform,
            opacity=opacity,
            **attrs,
        )

    def letter(
        self,
        *,
        size: float = 48,
        x: float = CENTER,
        y: float = CENTER,
        fill: str | None = None,
        text: str | None = None,
        **attrs: object,
    ) -> Element:
        return el(
            "text",
            text=text if text is not None else self.initial,
            x=x,
            y=y,
            font_family=LETTER_FONT,
            font_size=size,
            font_weight=700,
            text_anchor="middle",
            dominant_baseline="central",
            fill=fill or self.foreground,
            **attrs,
        )

    def tile(self, radius: float = 18, *, inset: float = 10, **attrs: object) -> Element:
        """Rounded square container."""
        side = CANVAS_SIZE - 2 * inset
        attrs.setdefault("fill", self.color)
        return el("rect", x=inset, y=inset, width=side, height=side, rx=radius, **attrs)

    def linear_gradient(
        self, name: str, stops: Sequence[tuple[float, str]], *, angle: float = 45.0
    ) -> Element:
        return el(
            "linearGradient",
            *(el("stop", offset=fmt(float(o)), stop_color=c) for o, c in stops),
            id=self.uid(name),
            gradientTransform=rotate(angle, 0.5, 0.5),
        )

    def radial_gradient(
        self,
        name: str,
        stops: Sequence[tuple[float, str]],
        *,
        cx: float = 0.5,
        cy: float = 0.5,
        r: float = 0.6,
    ) -> Element:
        return el(
            "radialGradient",
            *(el("stop", offset=fmt(float(o)), stop_color=c) for o, c in stops),
            id=self.uid(name),
            cx=cx,
            cy=cy,
            r=r,
        )

    def blur_filter(self, name: str, deviation: float) -> Element:
        return el(
            "filter",
            el("feGaussianBlur", stdDeviation=deviation),
            id=self.uid(name),
            x="-50%",
            y="-50%",
            width="200%",
            height="200%",
        )


Builder = Callable[[Canvas], Sequence[Element]]
