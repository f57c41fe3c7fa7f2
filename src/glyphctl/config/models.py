"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, glyphctl.toml only contains
overrides.  An empty file (or no file at all) is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from glyphctl.domain.colors import (
    DEFAULT_FALLBACK_PRIMARY,
    DEFAULT_MIN_CONTRAST,
    DEFAULT_WARM_HUE_RANGES,
    normalize_hex,
)
from glyphctl.domain.quality import QualityThresholds

# --- glyphctl.toml sections ---


class EngineConfig(BaseModel):
    """[engine] section."""

    model_config = {"frozen": True}

    default_tier: str = "premium"
    default_count: int = Field(default=8, ge=1)
    max_batch: int = Field(default=64, ge=1)
    default_vibe: str = "modern"


class QualityConfig(BaseModel):
    """[quality] section."""

    model_config = {"frozen": True}

    min_overall: float = 6.5
    min_signals: int = 2
    generic_ceiling: float = 5.0
    complexity_weight: float = 0.35
    uniqueness_weight: float = 0.35
    negative_space_weight: float = 0.30

    def thresholds(self) -> QualityThresholds:
        return QualityThresholds(**self.model_dump())


class ColorConfig(BaseModel):
    """[color] section."""

    model_config = {"frozen": True}

    min_contrast: float = Field(default=DEFAULT_MIN_CONTRAST, ge=DEFAULT_MIN_CONTRAST, le=21.0)
    fallback_primary: str = DEFAULT_FALLBACK_PRIMARY
    warm_hue_ranges: list[tuple[float, float]] = Field(
        default_factory=lambda: [tuple(r) for r in DEFAULT_WARM_HUE_RANGES]
    )

    @field_validator("fallback_primary")
    @classmethod
    def _valid_fallback(cls, value: str) -> str:
        normalized = normalize_hex(value)
        if normalized is None:
            raise ValueError(f"fallback_primary must be a hex color, got {value!r}")
        return normalized


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    width: int = 120


class GlyphConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    engine: EngineConfig = Field(default_factory=EngineConfig)
    quality: QualityConfig = Field(default_factory=QualityConfig)
    color: ColorConfig = Field(default_factory=ColorConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
