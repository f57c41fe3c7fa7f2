"""Batch orchestration: seeds -> algorithm -> shape -> markup -> score.

Each candidate is generated in isolation from its siblings, so a batch
is just a ranked collection of independent, fully rendered marks.  The
markup string on a :class:`GeneratedCandidate` is final: previews and
exports both read it verbatim.
"""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel

from glyphctl.domain.algorithms import (
    AlgorithmVariant,
    algorithm_concept,
    list_for_tier,
    select_for_seed,
)
from glyphctl.domain.colors import ColorTokenSystem, derive_color_system, resolve_primary
from glyphctl.domain.layouts import select_layout
from glyphctl.domain.markup import VIEW_BOX, render_svg
from glyphctl.domain.quality import (
    DEFAULT_THRESHOLDS,
    QualityScore,
    QualityThresholds,
    score_quality,
)
from glyphctl.domain.seeds import derive_seed, seed_hex
from glyphctl.domain.shapes import ShapePrimitive, select_shape
from glyphctl.domain.strategy import BrandStrategy, generate_strategy
from glyphctl.domain.types import Tier

DEFAULT_BATCH_LIMIT = 64

CATEGORY_COLORS: dict[str, str] = {
    "tech": "#2563EB",
    "nature": "#15803D",
    "minimalist": "#0F172A",
    "bold": "#DC2626",
    "modern": "#7C3AED",
    "creative": "#DB2777",
}
DEFAULT_CATEGORY_COLOR = "#4F46E5"


class GeneratedCandidate(BaseModel):
    """One composed, scored mark."""

    model_config = {"frozen": True}

    id: str
    index: int
    algorithm_id: str
    algorithm_name: str
    shape_id: str
    seed: int
    seed_hex: str
    color: str
    markup: str
    view_box: str
    quality_score: float
    quality_breakdown: QualityScore
    concept: str


class BrandIdentity(BaseModel):
    """A chosen mark with its color system, layout, and strategy.

    Export steps take this value as input and never regenerate any part
    of it.
    """

    model_config = {"frozen": True}

    name: str
    vibe: str
    candidate: GeneratedCandidate
    colors: ColorTokenSystem
    layout_id: str
    layout_name: str
    strategy: BrandStrategy


def default_color_for(category: str | None) -> str:
    return CATEGORY_COLORS.get((category or "").strip().lower(), DEFAULT_CATEGORY_COLOR)


def _normalize_category(category: str | None) -> str:
    return (category or "").strip().lower()


def build_candidate(
    variant: AlgorithmVariant,
    name: str,
    category: str,
    seed: int,
    index: int,
    color: str,
    thresholds: QualityThresholds = DEFAULT_THRESHOLDS,
    *,
    shape: ShapePrimitive | None = None,
) -> GeneratedCandidate:
    """Compose and score *variant* for an already-derived seed.

    The shape is drawn from the category pool unless pinned by *shape*.
    """
    shape = shape or select_shape(seed, category)
    elements = variant.build(shape, seed, color, name or None)
    score = score_quality(elements, variant.name, thresholds)
    return GeneratedCandidate(
        id=f"{variant.id}-{seed_hex(seed)}",
        index=index,
        algorithm_id=variant.id,
        algorithm_name=variant.name,
        shape_id=shape.id,
        seed=seed,
        seed_hex=seed_hex(seed),
        color=color,
        markup=render_svg(elements, view_box=VIEW_BOX),
        view_box=VIEW_BOX,
        quality_score=score.overall_score,
        quality_breakdown=score,
        concept=algorithm_concept(variant, shape, name or None),
    )


def generate_candidate(
    name: str,
    category: str,
    index: int,
    *,
    tier: str = Tier.PREMIUM,
    color_hex: str | None = None,
    thresholds: QualityThresholds = DEFAULT_THRESHOLDS,
) -> GeneratedCandidate:
    """Candidate *index* of the batch for ``(name, category)``.

    The algorithm walks the tier-filtered catalog from a per-request base
    seed, so consecutive indexes land on distinct styles.
    """
    category = _normalize_category(category)
    base_seed = derive_seed(name, salt=category)
    seed = derive_seed(name, salt=category, timestamp=index)
    variant = select_for_seed(base_seed + index, tier)
    color = resolve_primary(color_hex, default_color_for(category))
    return build_candidate(variant, name, category, seed, index, color, thresholds)


def rank_candidates(candidates: Iterable[GeneratedCandidate]) -> list[GeneratedCandidate]:
    """Highest score first; ties keep generation order."""
    return sorted(candidates, key=lambda c: (-c.quality_score, c.index))


def filter_passing(candidates: Iterable[GeneratedCandidate]) -> list[GeneratedCandidate]:
    return [c for c in candidates if c.quality_breakdown.passes_quality_check]


def generate_batch(
    name: str,
    category: str,
    count: int,
    *,
    tier: str = Tier.PREMIUM,
    color_hex: str | None = None,
    max_count: int = DEFAULT_BATCH_LIMIT,
    thresholds: QualityThresholds = DEFAULT_THRESHOLDS,
) -> list[GeneratedCandidate]:
    """Generate up to *count* ranked candidates.

    *count* is clamped to ``[0, max_count]``; a non-positive count yields
    an empty list.
    """
    total = max(0, min(int(count), max_count))
    candidates = [
        generate_candidate(
            name,
            category,
            i,
            tier=tier,
            color_hex=color_hex,
            thresholds=thresholds,
        )
        for i in range(total)
    ]
    return rank_candidates(candidates)


def generate_all_styles(
    name: str,
    category: str,
    *,
    tier: str = Tier.PREMIUM,
    color_hex: str | None = None,
    thresholds: QualityThresholds = DEFAULT_THRESHOLDS,
) -> list[GeneratedCandidate]:
    """One candidate per eligible style, all from the same seed, in catalog order."""
    category = _normalize_category(category)
    seed = derive_seed(name, salt=category)
    color = resolve_primary(color_hex, default_color_for(category))
    return [
        build_candidate(variant, name, category, seed, i, color, thresholds)
        for i, variant in enumerate(list_for_tier(tier))
    ]


def build_identity(
    name: str,
    vibe: str,
    *,
    candidate: GeneratedCandidate,
    colors: ColorTokenSystem | None = None,
) -> BrandIdentity:
    """Attach color tokens, layout, and strategy to a chosen candidate."""
    layout = select_layout(name)
    return BrandIdentity(
        name=name,
        vibe=_normalize_category(vibe),
        candidate=candidate,
        colors=colors or derive_color_system(candidate.color),
        layout_id=layout.id,
        layout_name=layout.name,
        strategy=generate_strategy(name, vibe),
    )
