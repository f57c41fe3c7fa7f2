"""Tests for GenerateService."""

from __future__ import annotations

from pathlib import Path

import pytest

from glyphctl.config.settings import GlyphSettings
from glyphctl.domain.algorithms import FREE_ALGORITHM_IDS, list_all
from glyphctl.services.generate import GenerateService


@pytest.fixture
def svc(settings: GlyphSettings) -> GenerateService:
    return GenerateService(settings)


class TestGenerateBatch:
    def test_returns_ranked_candidates(self, svc: GenerateService) -> None:
        result = svc.generate_batch("Nova", "tech", 6)
        assert result.ok
        assert result.op == "generate_batch"
        assert result.data["name"] == "Nova"
        assert result.data["category"] == "tech"
        assert result.data["tier"] == "premium"
        assert result.data["count"] == 6
        scores = [item["quality_score"] for item in result.data["items"]]
        assert scores == sorted(scores, reverse=True)

    def test_passing_count_matches_items(self, svc: GenerateService) -> None:
        result = svc.generate_batch("Nova", "tech", 10)
        items = result.data["items"]
        passing = [i for i in items if i["quality_breakdown"]["passes_quality_check"]]
        assert result.data["passing"] == len(passing)

    def test_default_count_from_settings(self, svc: GenerateService) -> None:
        result = svc.generate_batch("Nova", "tech")
        assert result.data["count"] == svc.settings.engine.default_count

    def test_default_category(self, svc: GenerateService) -> None:
        result = svc.generate_batch("Nova")
        assert result.data["category"] == "modern"

    @pytest.mark.parametrize("count", [0, -3])
    def test_non_positive_count_is_error(self, svc: GenerateService, count: int) -> None:
        result = svc.generate_batch("Nova", "tech", count)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_COUNT"
        assert result.error.detail == {"count": count}

    def test_count_clamped_with_warning(self, svc: GenerateService) -> None:
        limit = svc.settings.engine.max_batch
        result = svc.generate_batch("Nova", "tech", limit + 10)
        assert result.ok
        assert result.data["count"] == limit
        assert f"Count {limit + 10} clamped to {limit}" in result.warnings

    def test_free_tier_restricts_algorithms(self, svc: GenerateService) -> None:
        result = svc.generate_batch("Nova", "tech", 12, tier="free")
        assert result.data["tier"] == "free"
        assert {i["algorithm_id"] for i in result.data["items"]} <= set(FREE_ALGORITHM_IDS)

    def test_unknown_tier_warns(self, svc: GenerateService) -> None:
        result = svc.generate_batch("Nova", "tech", 2, tier="platinum")
        assert result.ok
        assert result.data["tier"] == "free"
        assert any("platinum" in w for w in result.warnings)

    def test_explicit_color(self, svc: GenerateService) -> None:
        result = svc.generate_batch("Nova", "tech", 3, color="ff4500")
        assert {i["color"] for i in result.data["items"]} == {"#FF4500"}

    def test_invalid_color_falls_back_to_category_default(self, svc: GenerateService) -> None:
        result = svc.generate_batch("Nova", "tech", 3, color="not-a-color")
        assert result.ok
        assert {i["color"] for i in result.data["items"]} == {"#2563EB"}
        assert any("not-a-color" in w for w in result.warnings)

    def test_deterministic(self, svc: GenerateService) -> None:
        first = svc.generate_batch("Acme", "bold", 5)
        second = svc.generate_batch("Acme", "bold", 5)
        assert first.data == second.data

    def test_passing_only(self, svc: GenerateService) -> None:
        result = svc.generate_batch("Nova", "tech", 12, passing_only=True)
        items = result.data["items"]
        assert all(i["quality_breakdown"]["passes_quality_check"] for i in items)
        assert result.data["count"] == len(items) == result.data["passing"]

    def test_passing_only_warns_when_nothing_passes(self, project_root: Path) -> None:
        (project_root / "glyphctl.toml").write_text("[quality]\nmin_overall = 11.0\n")
        strict = GlyphSettings.from_cli(project_root=project_root)
        result = GenerateService(strict).generate_batch("Nova", "tech", 4, passing_only=True)
        assert result.ok
        assert result.data["items"] == []
        assert "No candidate passed the quality check" in result.warnings


class TestGenerateStyles:
    def test_one_per_premium_style(self, svc: GenerateService) -> None:
        result = svc.generate_styles("Nova", "tech")
        assert result.ok
        assert result.op == "generate_styles"
        ids = [i["algorithm_id"] for i in result.data["items"]]
        assert ids == [v.id for v in list_all()]

    def test_free_tier(self, svc: GenerateService) -> None:
        result = svc.generate_styles("Nova", "tech", tier="free")
        ids = [i["algorithm_id"] for i in result.data["items"]]
        assert ids == list(FREE_ALGORITHM_IDS)


class TestCompose:
    def test_compose_known_algorithm(self, svc: GenerateService) -> None:
        result = svc.compose("Nova", "orbit", category="tech")
        assert result.ok
        assert result.op == "compose"
        assert result.data["algorithm_id"] == "orbit"
        assert result.data["markup"].startswith("<svg")
        assert result.data["id"].startswith("orbit-")

    def test_unknown_algorithm(self, svc: GenerateService) -> None:
        result = svc.compose("Nova", "nope")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "UNKNOWN_ALGORITHM"
        assert "container" in result.error.detail["valid"]

    def test_unknown_shape(self, svc: GenerateService) -> None:
        result = svc.compose("Nova", "orbit", shape_id="no-such-shape")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "UNKNOWN_SHAPE"

    def test_pinned_shape(self, svc: GenerateService) -> None:
        result = svc.compose("Nova", "container", shape_id="cont-badge-hex")
        assert result.ok
        assert result.data["shape_id"] == "cont-badge-hex"

    def test_explicit_seed(self, svc: GenerateService) -> None:
        first = svc.compose("Nova", "grid", seed=1234)
        second = svc.compose("Other", "grid", seed=1234)
        assert first.data["seed"] == second.data["seed"] == 1234
        assert first.data["shape_id"] == second.data["shape_id"]

    def test_negative_seed_uses_magnitude(self, svc: GenerateService) -> None:
        result = svc.compose("Nova", "grid", seed=-99)
        assert result.data["seed"] == 99

    def test_repeatable(self, svc: GenerateService) -> None:
        assert svc.compose("Nova", "seal").data == svc.compose("Nova", "seal").data


class TestScore:
    def test_scores_markup(self, svc: GenerateService) -> None:
        markup = svc.compose("Nova", "orbit").data["markup"]
        result = svc.score(markup, "Orbit")
        assert result.ok
        assert result.op == "score_quality"
        assert result.data["algorithm_name"] == "Orbit"
        assert 1 <= result.data["geometric_complexity"] <= 10
        assert "metrics" in result.data

    def test_score_matches_candidate(self, svc: GenerateService) -> None:
        candidate = svc.compose("Nova", "kaleidoscope").data
        result = svc.score(candidate["markup"], candidate["algorithm_name"])
        assert result.data["overall_score"] == candidate["quality_score"]

    @pytest.mark.parametrize("markup", ["", "   \n"])
    def test_empty_markup_is_error(self, svc: GenerateService, markup: str) -> None:
        result = svc.score(markup)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "EMPTY_MARKUP"

    def test_non_markup_warns(self, svc: GenerateService) -> None:
        result = svc.score("just some words")
        assert result.ok
        assert result.data["geometric_complexity"] == 3
        assert result.warnings == ["No markup elements found; scored as having no structure"]
