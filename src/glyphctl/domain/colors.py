"""Color token derivation and WCAG contrast helpers.

One primary color expands into a light and a dark semantic token set
(brand, neutral, state).  All arithmetic happens in HSL via
:mod:`colorsys`; hue is expressed in degrees and saturation/lightness
in percentage points, so adjustments such as "+10 saturation" read the
same here as in a design tool.

INVARIANT: ``contrast_ratio(brand.foreground, brand.DEFAULT) >= 4.5``
in both modes, for any input (malformed input degrades to a fallback
primary, it never raises).
"""

from __future__ import annotations

import colorsys
import re
from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel

DEFAULT_FALLBACK_PRIMARY = "#475569"
DEFAULT_MIN_CONTRAST = 4.5
DEFAULT_WARM_HUE_RANGES: tuple[tuple[float, float], ...] = ((0.0, 60.0), (300.0, 360.0))

WHITE = "#FFFFFF"
BLACK = "#000000"
INK = "#0F172A"

STATE_COLORS: dict[str, str] = {
    "success": "#22C55E",
    "error": "#EF4444",
    "warning": "#F59E0B",
    "info": "#3B82F6",
}

# (mode, temperature) -> background, surface, border, foreground, muted
_NEUTRAL_RAMPS: dict[tuple[str, str], tuple[str, str, str, str, str]] = {
    ("light", "warm"): ("#F8FAFC", "#FFFFFF", "#E2E8F0", "#0F172A", "#64748B"),
    ("light", "cool"): ("#F1F5F9", "#FFFFFF", "#CBD5E1", "#1E293B", "#475569"),
    ("dark", "warm"): ("#0F172A", "#1E293B", "#334155", "#F8FAFC", "#94A3B8"),
    ("dark", "cool"): ("#020617", "#0F172A", "#1E293B", "#F1F5F9", "#64748B"),
}

_HEX_RE = re.compile(r"^[0-9a-fA-F]{3}([0-9a-fA-F]{3})?$")


# ── Token models ─────────────────────────────────────────────────────


class BrandTokens(BaseModel):
    """Brand color plus its readable foreground and accent."""

    model_config = {"frozen": True}

    DEFAULT: str
    foreground: str
    accent: str


class NeutralTokens(BaseModel):
    model_config = {"frozen": True}

    background: str
    surface: str
    border: str
    foreground: str
    muted: str


class StateTokens(BaseModel):
    model_config = {"frozen": True}

    success: str
    error: str
    warning: str
    info: str


class ColorModeTokens(BaseModel):
    """Token set for one color mode."""

    model_config = {"frozen": True}

    brand: BrandTokens
    neutral: NeutralTokens
    state: StateTokens


class ColorTokenSystem(BaseModel):
    """Light and dark token sets derived from one primary color."""

    model_config = {"frozen": True}

    primary: str
    light: ColorModeTokens
    dark: ColorModeTokens


class ContrastReport(BaseModel):
    """WCAG 2.1 contrast verdict for a foreground/background pair."""

    model_config = {"frozen": True}

    foreground: str
    background: str
    ratio: float
    aa: bool
    aa_large: bool
    aaa: bool
    aaa_large: bool
    grade: str


# ── Hex / HSL conversion ─────────────────────────────────────────────


def normalize_hex(value: object) -> str | None:
    """Return ``#RRGGBB`` (uppercase) for a 3- or 6-digit hex string, else None.

    A leading ``#`` and surrounding whitespace are optional.
    """
    if not isinstance(value, str):
        return None
    raw = value.strip().lstrip("#")
    if not _HEX_RE.match(raw):
        return None
    if len(raw) == 3:
        raw = "".join(ch * 2 for ch in raw)
    return f"#{raw.upper()}"


def is_valid_hex(value: object) -> bool:
    return normalize_hex(value) is not None


def hex_to_rgb(value: str) -> tuple[int, int, int]:
    """Parse a hex color into 0-255 channels.  Raises ValueError if malformed."""
    normalized = normalize_hex(value)
    if normalized is None:
        raise ValueError(f"Invalid hex color: {value!r}")
    return (
        int(normalized[1:3], 16),
        int(normalized[3:5], 16),
        int(normalized[5:7], 16),
    )


def rgb_to_hex(r: float, g: float, b: float) -> str:
    channels = (max(0, min(255, round(c))) for c in (r, g, b))
    return "#" + "".join(f"{c:02X}" for c in channels)


def hex_to_hsl(value: str) -> tuple[float, float, float]:
    """Return ``(hue 0-360, saturation 0-100, lightness 0-100)``."""
    r, g, b = hex_to_rgb(value)
    h, lightness, s = colorsys.rgb_to_hls(r / 255, g / 255, b / 255)
    return h * 360, s * 100, lightness * 100


def hsl_to_hex(hue: float, saturation: float, lightness: float) -> str:
    h = (hue % 360) / 360
    s = max(0.0, min(100.0, saturation)) / 100
    lum = max(0.0, min(100.0, lightness)) / 100
    r, g, b = colorsys.hls_to_rgb(h, lum, s)
    return rgb_to_hex(r * 255, g * 255, b * 255)


def adjust_hsl(
    value: str,
    *,
    hue: float = 0.0,
    saturation: float = 0.0,
    lightness: float = 0.0,
) -> str:
    """Shift a color in HSL space; saturation/lightness are clamped to 0-100."""
    h, s, lum = hex_to_hsl(value)
    return hsl_to_hex(h + hue, s + saturation, lum + lightness)


def is_dark(value: str) -> bool:
    """YIQ perceived brightness below one half."""
    r, g, b = hex_to_rgb(value)
    brightness = (r * 299 + g * 587 + b * 114) / 1000 / 255
    return brightness < 0.5


# ── WCAG contrast ────────────────────────────────────────────────────


def _linearize(channel: int) -> float:
    c = channel / 255
    return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(value: str) -> float:
    r, g, b = hex_to_rgb(value)
    return 0.2126 * _linearize(r) + 0.7152 * _linearize(g) + 0.0722 * _linearize(b)


def contrast_ratio(foreground: str, background: str) -> float:
    """WCAG contrast ratio in ``[1, 21]``.  Invalid input yields 1.0."""
    if not (is_valid_hex(foreground) and is_valid_hex(background)):
        return 1.0
    l1 = relative_luminance(foreground)
    l2 = relative_luminance(background)
    lighter, darker = max(l1, l2), min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def contrast_grade(ratio: float) -> str:
    if ratio >= 7:
        return "aaa"
    if ratio >= 4.5:
        return "aa"
    if ratio >= 3:
        return "aa-large"
    return "fail"


def check_contrast(foreground: str, background: str) -> ContrastReport:
    ratio = contrast_ratio(foreground, background)
    return ContrastReport(
        foreground=normalize_hex(foreground) or str(foreground),
        background=normalize_hex(background) or str(background),
        ratio=round(ratio, 2),
        aa=ratio >= 4.5,
        aa_large=ratio >= 3,
        aaa=ratio >= 7,
        aaa_large=ratio >= 4.5,
        grade=contrast_grade(ratio),
    )


def readable_text_color(background: str) -> str:
    """Black or white, whichever reads better on *background*."""
    if not is_valid_hex(background):
        return BLACK
    return BLACK if relative_luminance(background) > 0.179 else WHITE


# ── Token derivation ─────────────────────────────────────────────────


def _is_warm(hue: float, ranges: Sequence[Sequence[float]]) -> bool:
    return any(low <= hue <= high for low, high in ranges)


def foreground_for(brand: str, min_contrast: float = DEFAULT_MIN_CONTRAST) -> str:
    """Preferred text color on *brand*, widened to pure black/white if needed."""
    preferred = WHITE if is_dark(brand) else INK
    if contrast_ratio(preferred, brand) >= min_contrast:
        return preferred
    # White or black always clears 4.5:1 against any sRGB color.
    return max((WHITE, INK, BLACK), key=lambda c: contrast_ratio(c, brand))


def accent_for(brand: str) -> str:
    return adjust_hsl(brand, hue=30, saturation=10)


def dark_mode_primary(primary: str) -> str:
    """Shift a primary so it holds up on dark surfaces."""
    if is_dark(primary):
        return adjust_hsl(adjust_hsl(primary, lightness=25), saturation=5)
    _, _, lightness = hex_to_hsl(primary)
    if lightness > 70:
        return adjust_hsl(adjust_hsl(primary, saturation=-10), lightness=-5)
    return adjust_hsl(primary, lightness=12)


def _neutrals(mode: str, warm: bool) -> NeutralTokens:
    background, surface, border, foreground, muted = _NEUTRAL_RAMPS[
        (mode, "warm" if warm else "cool")
    ]
    return NeutralTokens(
        background=background,
        surface=surface,
        border=border,
        foreground=foreground,
        muted=muted,
    )


def _mode_tokens(brand: str, mode: str, warm: bool, min_contrast: float) -> ColorModeTokens:
    return ColorModeTokens(
        brand=BrandTokens(
            DEFAULT=brand,
            foreground=foreground_for(brand, min_contrast),
            accent=accent_for(brand),
        ),
        neutral=_neutrals(mode, warm),
        state=StateTokens(**STATE_COLORS),
    )


def resolve_primary(value: object, fallback: str = DEFAULT_FALLBACK_PRIMARY) -> str:
    """Normalize *value*, substituting *fallback* when it is not a hex color."""
    return normalize_hex(value) or normalize_hex(fallback) or DEFAULT_FALLBACK_PRIMARY


def derive_color_system(
    primary_hex: object,
    *,
    warm_hue_ranges: Sequence[Sequence[float]] = DEFAULT_WARM_HUE_RANGES,
    min_contrast: float = DEFAULT_MIN_CONTRAST,
    fallback: str = DEFAULT_FALLBACK_PRIMARY,
) -> ColorTokenSystem:
    """Expand one primary color into light and dark token sets.

    Neutral temperature is judged from the input primary in both modes;
    the dark brand color is the shifted :func:`dark_mode_primary`.
    """
    primary = resolve_primary(primary_hex, fallback)
    hue, _, _ = hex_to_hsl(primary)
    warm = _is_warm(hue, warm_hue_ranges)
    return ColorTokenSystem(
        primary=primary,
        light=_mode_tokens(primary, "light", warm, min_contrast),
        dark=_mode_tokens(dark_mode_primary(primary), "dark", warm, min_contrast),
    )


def big_five(system: ColorTokenSystem) -> dict[str, dict[str, str]]:
    """Collapse a token system to the five swatches shown on a brand sheet."""
    out: dict[str, dict[str, str]] = {}
    for mode in ("light", "dark"):
        tokens: ColorModeTokens = getattr(system, mode)
        out[mode] = {
            "primary": tokens.brand.DEFAULT,
            "background": tokens.neutral.background,
            "surface": tokens.neutral.surface,
            "text": tokens.neutral.foreground,
            "accent": tokens.brand.accent,
        }
    return out


def tailwind_colors(system: ColorTokenSystem) -> dict[str, Any]:
    """Tailwind ``theme.extend.colors`` block; dark tokens get a ``-dark`` suffix."""
    colors: dict[str, Any] = {}
    for mode, suffix in (("light", ""), ("dark", "-dark")):
        tokens: ColorModeTokens = getattr(system, mode)
        colors[f"brand{suffix}"] = tokens.brand.model_dump()
        colors[f"neutral{suffix}"] = tokens.neutral.model_dump()
    colors.update(STATE_COLORS)
    return {"darkMode": "class", "theme": {"extend": {"colors": colors}}}
