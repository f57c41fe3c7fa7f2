"""BrandService — colors, contrast, layout, strategy, and full identities."""

from __future__ import annotations

import logging

from glyphctl.domain.colors import (
    ColorTokenSystem,
    big_five,
    check_contrast,
    derive_color_system,
    normalize_hex,
    tailwind_colors,
)
from glyphctl.domain.engine import build_identity, default_color_for, filter_passing, generate_batch
from glyphctl.domain.layouts import layout_variations, select_layout
from glyphctl.domain.strategy import ARCHETYPES, generate_strategy
from glyphctl.services.base import BaseService
from glyphctl.services.result import ErrorCode, ServiceResult
from glyphctl.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)


class BrandService(BaseService):
    """Derive the non-mark parts of a brand identity."""

    def _derive_colors(self, primary: str | None) -> ColorTokenSystem:
        cfg = self.settings.color
        return derive_color_system(
            primary,
            warm_hue_ranges=cfg.warm_hue_ranges,
            min_contrast=cfg.min_contrast,
            fallback=cfg.fallback_primary,
        )

    @traced
    def color_system(self, primary: str) -> ServiceResult:
        warnings: list[str] = []
        resolved = self._resolve_color(primary, warnings)
        system = self._derive_colors(resolved)
        return ServiceResult(
            ok=True,
            op="color_system",
            data={
                "input": primary,
                "tokens": system.model_dump(mode="json"),
                "big_five": big_five(system),
                "tailwind": tailwind_colors(system),
            },
            warnings=warnings,
        )

    @traced
    def contrast(self, foreground: str, background: str) -> ServiceResult:
        """WCAG report for an explicit color pair; invalid colors are errors here."""
        op = "contrast"
        bad = [c for c in (foreground, background) if normalize_hex(c) is None]
        if bad:
            return ServiceResult.failure(
                op,
                ErrorCode.INVALID_COLOR,
                f"Invalid color: {bad[0]}",
                invalid=bad,
            )
        report = check_contrast(foreground, background)
        return ServiceResult(ok=True, op=op, data=report.model_dump(mode="json"))

    @traced
    def layout(self, name: str, *, variations: int = 0) -> ServiceResult:
        chosen = select_layout(name)
        data: dict[str, object] = {"brand": name, **chosen.to_dict()}
        if variations > 0:
            data["variations"] = layout_variations(name, variations)
        return ServiceResult(ok=True, op="select_layout", data=data)

    @traced
    def strategy(self, name: str, vibe: str | None = None) -> ServiceResult:
        warnings: list[str] = []
        resolved = self._resolve_vibe(vibe)
        if resolved not in ARCHETYPES:
            warnings.append(f"Unknown vibe '{resolved}', using the modern archetype")
        result = generate_strategy(name, resolved)
        return ServiceResult(
            ok=True,
            op="brand_strategy",
            data={"name": name, "vibe": resolved, **result.model_dump(mode="json")},
            warnings=warnings,
        )

    @traced
    def identity(
        self,
        name: str,
        vibe: str | None = None,
        *,
        color: str | None = None,
        tier: str | None = None,
        count: int | None = None,
    ) -> ServiceResult:
        """Generate a batch, pick the best candidate, and attach the rest of the brand.

        The first passing candidate wins; when none passes, the top-ranked
        one is used and a warning says so.
        """
        op = "brand_identity"
        warnings: list[str] = []
        resolved_vibe = self._resolve_vibe(vibe)
        resolved_tier = self._resolve_tier(tier, warnings)
        primary = self._resolve_color(color, warnings, default=default_color_for(resolved_vibe))
        requested = self.settings.engine.default_count if count is None else count
        if requested < 1:
            return ServiceResult.failure(
                op,
                ErrorCode.INVALID_COUNT,
                f"Count must be at least 1, got {requested}",
                count=requested,
            )

        with trace_span("generate_batch"):
            candidates = generate_batch(
                name,
                resolved_vibe,
                requested,
                tier=resolved_tier,
                color_hex=primary,
                max_count=self.settings.engine.max_batch,
                thresholds=self.settings.thresholds,
            )
        passing = filter_passing(candidates)
        if not passing:
            warnings.append("No candidate passed the quality check; using the top-ranked mark")
        chosen = (passing or candidates)[0]
        logger.debug("Chose %s for %r out of %d candidates", chosen.id, name, len(candidates))

        with trace_span("derive_identity"):
            identity = build_identity(
                name,
                resolved_vibe,
                candidate=chosen,
                colors=self._derive_colors(chosen.color),
            )
        return ServiceResult(
            ok=True,
            op=op,
            data={"identity": identity.model_dump(mode="json"), "considered": len(candidates)},
            warnings=warnings,
        )
