"""BaseService — shared foundation for glyphctl services.

Every service receives the resolved :class:`GlyphSettings` at
construction time and turns raw request values (tier names, colors,
counts) into domain inputs, recording a warning whenever a value has to
be replaced by a default.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from glyphctl.domain.colors import normalize_hex
from glyphctl.domain.types import Tier

if TYPE_CHECKING:
    from glyphctl.config.settings import GlyphSettings

logger = logging.getLogger(__name__)


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class BrandService(BaseService):
            def strategy(self, name: str, vibe: str) -> ServiceResult:
                ...
    """

    def __init__(self, settings: GlyphSettings) -> None:
        self._settings = settings

    @property
    def settings(self) -> GlyphSettings:
        return self._settings

    def _resolve_tier(self, tier: str | None, warnings: list[str]) -> Tier:
        raw = tier or self._settings.engine.default_tier
        try:
            return Tier(raw.strip().lower())
        except ValueError:
            warnings.append(f"Unknown tier '{raw}', using free tier")
            logger.debug("Unknown tier %r, falling back to free", raw)
            return Tier.FREE

    def _resolve_color(
        self,
        color: str | None,
        warnings: list[str],
        *,
        default: str | None = None,
    ) -> str | None:
        """Normalize *color*; invalid input becomes *default* (or the config fallback)."""
        if color is None:
            return default
        normalized = normalize_hex(color)
        if normalized is not None:
            return normalized
        replacement = default or self._settings.color.fallback_primary
        warnings.append(f"Invalid color '{color}' replaced with {replacement}")
        logger.debug("Invalid color %r replaced with %s", color, replacement)
        return replacement

    def _resolve_vibe(self, vibe: str | None) -> str:
        return (vibe or self._settings.engine.default_vibe).strip().lower()
