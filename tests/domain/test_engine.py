"""Tests for batch generation and identity assembly."""

import xml.etree.ElementTree as ET

import pytest

from glyphctl.domain.algorithms import get_by_id, list_for_tier
from glyphctl.domain.colors import contrast_ratio
from glyphctl.domain.engine import (
    CATEGORY_COLORS,
    DEFAULT_CATEGORY_COLOR,
    BrandIdentity,
    build_candidate,
    build_identity,
    default_color_for,
    filter_passing,
    generate_all_styles,
    generate_batch,
    generate_candidate,
    rank_candidates,
)
from glyphctl.domain.markup import SVG_NS
from glyphctl.domain.quality import QualityThresholds
from glyphctl.domain.shapes import get_shape
from glyphctl.domain.types import Tier


class TestGenerateBatch:
    def test_nova_tech_scenario(self) -> None:
        batch = generate_batch("Nova", "tech", 8)
        eligible = {v.id for v in list_for_tier(Tier.PREMIUM)}
        assert len(batch) == 8
        for candidate in batch:
            assert candidate.markup.startswith("<svg")
            assert 0 <= candidate.quality_score <= 10
            assert candidate.algorithm_id in eligible

    def test_free_tier_only_uses_free_styles(self) -> None:
        free = {v.id for v in list_for_tier(Tier.FREE)}
        batch = generate_batch("Nova", "tech", 10, tier=Tier.FREE)
        assert {c.algorithm_id for c in batch} <= free

    def test_deterministic(self) -> None:
        first = generate_batch("Nova", "tech", 6)
        second = generate_batch("Nova", "tech", 6)
        assert [c.markup for c in first] == [c.markup for c in second]

    def test_ranked_by_score(self) -> None:
        batch = generate_batch("Acme", "bold", 12)
        scores = [c.quality_score for c in batch]
        assert scores == sorted(scores, reverse=True)

    def test_consecutive_indexes_use_distinct_styles(self) -> None:
        batch = generate_batch("Acme", "modern", 8)
        assert len({c.algorithm_id for c in batch}) == 8

    @pytest.mark.parametrize("count", [0, -3])
    def test_non_positive_count(self, count: int) -> None:
        assert generate_batch("Nova", "tech", count) == []

    def test_count_clamped(self) -> None:
        assert len(generate_batch("Nova", "tech", 500, max_count=5)) == 5

    def test_candidate_ids_unique(self) -> None:
        batch = generate_batch("Nova", "tech", 16)
        assert len({c.id for c in batch}) == 16

    def test_candidate_is_independent_of_batch_size(self) -> None:
        small = {c.index: c.markup for c in generate_batch("Nova", "tech", 3)}
        large = {c.index: c.markup for c in generate_batch("Nova", "tech", 9)}
        for index, markup in small.items():
            assert large[index] == markup


class TestCandidate:
    def test_fields(self) -> None:
        candidate = generate_candidate("Nova", "tech", 0)
        assert candidate.id == f"{candidate.algorithm_id}-{candidate.seed_hex}"
        assert candidate.view_box == "0 0 100 100"
        assert candidate.color == CATEGORY_COLORS["tech"]
        assert candidate.quality_score == candidate.quality_breakdown.overall_score
        assert candidate.concept

    def test_explicit_color(self) -> None:
        candidate = generate_candidate("Nova", "tech", 0, color_hex="#ff4500")
        assert candidate.color == "#FF4500"

    def test_invalid_color_uses_category_default(self) -> None:
        candidate = generate_candidate("Nova", "nature", 0, color_hex="bogus")
        assert candidate.color == CATEGORY_COLORS["nature"]

    def test_category_normalized(self) -> None:
        assert generate_candidate("Nova", " TECH ", 1) == generate_candidate("Nova", "tech", 1)

    def test_pinned_shape(self) -> None:
        shape = get_shape("tech-bolt")
        variant = get_by_id("orbit")
        candidate = build_candidate(variant, "Nova", "tech", 7, 0, "#2563EB", shape=shape)
        assert candidate.shape_id == "tech-bolt"

    def test_thresholds_flow_into_score(self) -> None:
        impossible = QualityThresholds(min_overall=10.1)
        candidate = generate_candidate("Nova", "tech", 0, thresholds=impossible)
        assert candidate.quality_breakdown.passes_quality_check is False

    def test_default_colors(self) -> None:
        assert default_color_for("TECH") == CATEGORY_COLORS["tech"]
        assert default_color_for("unknown") == DEFAULT_CATEGORY_COLOR
        assert default_color_for(None) == DEFAULT_CATEGORY_COLOR


class TestRanking:
    def test_ties_keep_generation_order(self) -> None:
        a = generate_candidate("Nova", "tech", 0)
        b = a.model_copy(update={"index": 1})
        assert rank_candidates([b, a]) == [a, b]

    def test_filter_passing(self) -> None:
        batch = generate_batch("Nova", "tech", 12)
        passing = filter_passing(batch)
        assert all(c.quality_breakdown.passes_quality_check for c in passing)


class TestAllStyles:
    def test_one_per_style(self) -> None:
        styles = generate_all_styles("Nova", "tech", tier=Tier.FREE)
        assert [c.algorithm_id for c in styles] == [v.id for v in list_for_tier(Tier.FREE)]
        assert len({c.seed for c in styles}) == 1

    @pytest.mark.parametrize("name", ["Ac\x0bme", "\x01", "A\x00B", "  \x1f  "])
    def test_control_characters_still_well_formed(self, name: str) -> None:
        for candidate in generate_all_styles(name, "tech"):
            root = ET.fromstring(candidate.markup)
            assert root.tag == f"{{{SVG_NS}}}svg", candidate.algorithm_id

    def test_control_only_name_falls_back_to_shape_name(self) -> None:
        styles = generate_all_styles("\x01", "tech")
        badge = next(c for c in styles if c.algorithm_id == "badge_text")
        texts = [e.text for e in ET.fromstring(badge.markup).iter(f"{{{SVG_NS}}}text")]
        assert texts and all(t and t.strip() for t in texts)


class TestIdentity:
    def test_assembles_all_parts(self) -> None:
        candidate = generate_batch("Nova", "tech", 4)[0]
        identity = build_identity("Nova", "tech", candidate=candidate)
        assert isinstance(identity, BrandIdentity)
        assert identity.candidate.markup == candidate.markup
        assert identity.colors.primary == candidate.color
        assert identity.layout_id == "icon-top"
        assert identity.strategy.archetype == "The Innovator"
        brand = identity.colors.light.brand
        assert contrast_ratio(brand.foreground, brand.DEFAULT) >= 4.5

    def test_frozen(self) -> None:
        candidate = generate_candidate("Nova", "tech", 0)
        identity = build_identity("Nova", "tech", candidate=candidate)
        with pytest.raises(Exception):
            identity.name = "Other"  # type: ignore[misc]

    def test_json_round_trip_keeps_markup(self) -> None:
        candidate = generate_candidate("Nova", "tech", 0)
        identity = build_identity("Nova", "tech", candidate=candidate)
        restored = BrandIdentity.model_validate_json(identity.model_dump_json())
        assert restored.candidate.markup == candidate.markup
