"""GenerateService — batch generation, single composition, and scoring."""

from __future__ import annotations

import logging
from typing import Any

from glyphctl.domain.algorithms import get_by_id, list_for_tier
from glyphctl.domain.engine import (
    build_candidate,
    default_color_for,
    filter_passing,
    generate_all_styles,
    generate_batch,
)
from glyphctl.domain.markup import parse_markup
from glyphctl.domain.quality import score_quality
from glyphctl.domain.seeds import derive_seed
from glyphctl.domain.shapes import get_shape
from glyphctl.services.base import BaseService
from glyphctl.services.result import ErrorCode, ServiceResult
from glyphctl.services.telemetry import annotate, trace_span, traced

logger = logging.getLogger(__name__)


class GenerateService(BaseService):
    """Produce and score candidate marks."""

    @traced
    def generate_batch(
        self,
        name: str,
        category: str | None = None,
        count: int | None = None,
        *,
        tier: str | None = None,
        color: str | None = None,
        passing_only: bool = False,
    ) -> ServiceResult:
        """Generate *count* ranked candidates for *name* in *category*."""
        op = "generate_batch"
        warnings: list[str] = []
        requested = self.settings.engine.default_count if count is None else count
        if requested < 1:
            return ServiceResult.failure(
                op,
                ErrorCode.INVALID_COUNT,
                f"Count must be at least 1, got {requested}",
                count=requested,
            )
        limit = self.settings.engine.max_batch
        if requested > limit:
            warnings.append(f"Count {requested} clamped to {limit}")

        vibe = self._resolve_vibe(category)
        resolved_tier = self._resolve_tier(tier, warnings)
        primary = self._resolve_color(color, warnings, default=default_color_for(vibe))

        with trace_span("compose_and_score"):
            candidates = generate_batch(
                name,
                vibe,
                requested,
                tier=resolved_tier,
                color_hex=primary,
                max_count=limit,
                thresholds=self.settings.thresholds,
            )
        passing = filter_passing(candidates)
        annotate("candidates", len(candidates))
        logger.debug(
            "Generated %d candidates for %r (%s), %d passing",
            len(candidates),
            name,
            vibe,
            len(passing),
        )
        items = passing if passing_only else candidates
        if passing_only and not passing:
            warnings.append("No candidate passed the quality check")

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "name": name,
                "category": vibe,
                "tier": str(resolved_tier),
                "count": len(items),
                "passing": len(passing),
                "items": [c.model_dump(mode="json") for c in items],
            },
            warnings=warnings,
        )

    @traced
    def generate_styles(
        self,
        name: str,
        category: str | None = None,
        *,
        tier: str | None = None,
        color: str | None = None,
    ) -> ServiceResult:
        """One candidate per eligible style, for side-by-side comparison."""
        warnings: list[str] = []
        vibe = self._resolve_vibe(category)
        resolved_tier = self._resolve_tier(tier, warnings)
        primary = self._resolve_color(color, warnings, default=default_color_for(vibe))
        candidates = generate_all_styles(
            name,
            vibe,
            tier=resolved_tier,
            color_hex=primary,
            thresholds=self.settings.thresholds,
        )
        return ServiceResult(
            ok=True,
            op="generate_styles",
            data={
                "name": name,
                "category": vibe,
                "tier": str(resolved_tier),
                "count": len(candidates),
                "items": [c.model_dump(mode="json") for c in candidates],
            },
            warnings=warnings,
        )

    @traced
    def compose(
        self,
        name: str,
        algorithm_id: str,
        *,
        shape_id: str | None = None,
        category: str | None = None,
        color: str | None = None,
        seed: int | None = None,
    ) -> ServiceResult:
        """Compose one mark with an explicitly chosen algorithm."""
        op = "compose"
        variant = get_by_id(algorithm_id)
        if variant is None:
            return ServiceResult.failure(
                op,
                ErrorCode.UNKNOWN_ALGORITHM,
                f"Unknown algorithm: {algorithm_id}",
                algorithm_id=algorithm_id,
                valid=[v.id for v in list_for_tier("premium")],
            )
        if shape_id is not None and get_shape(shape_id) is None:
            return ServiceResult.failure(
                op,
                ErrorCode.UNKNOWN_SHAPE,
                f"Unknown shape: {shape_id}",
                shape_id=shape_id,
            )

        warnings: list[str] = []
        vibe = self._resolve_vibe(category)
        primary = self._resolve_color(color, warnings, default=default_color_for(vibe))
        resolved_seed = derive_seed(name, salt=vibe) if seed is None else abs(seed)
        candidate = build_candidate(
            variant,
            name,
            vibe,
            resolved_seed,
            0,
            primary or default_color_for(vibe),
            self.settings.thresholds,
            shape=get_shape(shape_id) if shape_id else None,
        )
        data = candidate.model_dump(mode="json")
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    @traced
    def score(self, markup: str, algorithm_name: str = "") -> ServiceResult:
        """Score externally supplied markup."""
        op = "score_quality"
        if not markup or not markup.strip():
            return ServiceResult.failure(op, ErrorCode.EMPTY_MARKUP, "No markup to score")
        warnings: list[str] = []
        if not parse_markup(markup):
            warnings.append("No markup elements found; scored as having no structure")
        result = score_quality(markup, algorithm_name, self.settings.thresholds)
        data: dict[str, Any] = {"algorithm_name": algorithm_name, **result.model_dump(mode="json")}
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)
