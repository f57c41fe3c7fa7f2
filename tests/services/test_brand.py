"""Tests for BrandService."""

from __future__ import annotations

from pathlib import Path

import pytest

from glyphctl.config.settings import GlyphSettings
from glyphctl.domain.colors import contrast_ratio
from glyphctl.domain.layouts import LAYOUTS
from glyphctl.services.brand import BrandService


@pytest.fixture
def svc(settings: GlyphSettings) -> BrandService:
    return BrandService(settings)


class TestColorSystem:
    def test_derives_tokens(self, svc: BrandService) -> None:
        result = svc.color_system("#FF4500")
        assert result.ok
        assert result.op == "color_system"
        assert result.data["input"] == "#FF4500"
        tokens = result.data["tokens"]
        assert tokens["primary"] == "#FF4500"
        assert tokens["light"]["brand"]["DEFAULT"] == "#FF4500"
        assert set(result.data["big_five"]) == {"light", "dark"}
        assert result.data["tailwind"]["darkMode"] == "class"
        assert result.warnings == []

    def test_foreground_contrast_in_both_modes(self, svc: BrandService) -> None:
        tokens = svc.color_system("#FFD700").data["tokens"]
        for mode in ("light", "dark"):
            brand = tokens[mode]["brand"]
            assert contrast_ratio(brand["foreground"], brand["DEFAULT"]) >= 4.5

    def test_invalid_color_uses_fallback(self, svc: BrandService) -> None:
        result = svc.color_system("blurple")
        assert result.ok
        assert result.data["tokens"]["primary"] == "#475569"
        assert result.warnings == ["Invalid color 'blurple' replaced with #475569"]

    def test_fallback_from_config(self, project_root: Path) -> None:
        (project_root / "glyphctl.toml").write_text('[color]\nfallback_primary = "#112233"\n')
        svc = BrandService(GlyphSettings.from_cli(project_root=project_root))
        result = svc.color_system("nope")
        assert result.data["tokens"]["primary"] == "#112233"


class TestContrast:
    def test_report(self, svc: BrandService) -> None:
        result = svc.contrast("#000000", "#ffffff")
        assert result.ok
        assert result.op == "contrast"
        assert result.data["ratio"] == 21.0
        assert result.data["grade"] == "aaa"
        assert result.data["background"] == "#FFFFFF"

    def test_mid_grey(self, svc: BrandService) -> None:
        result = svc.contrast("#777777", "#FFFFFF")
        assert result.data["aa"] is False
        assert result.data["aa_large"] is True
        assert result.data["grade"] == "aa-large"

    def test_invalid_color_is_error(self, svc: BrandService) -> None:
        result = svc.contrast("#000000", "white")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_COLOR"
        assert result.error.detail == {"invalid": ["white"]}


class TestLayout:
    def test_selects_layout(self, svc: BrandService) -> None:
        result = svc.layout("Nova")
        assert result.ok
        assert result.op == "select_layout"
        assert result.data["brand"] == "Nova"
        assert result.data["id"] == "icon-top"
        assert result.data["name"] == "Stacked"
        assert "variations" not in result.data

    def test_variations(self, svc: BrandService) -> None:
        result = svc.layout("Nova", variations=3)
        variations = result.data["variations"]
        assert len(variations) == len(set(variations)) == 3
        assert set(variations) <= {lay.id for lay in LAYOUTS}


class TestStrategy:
    def test_known_vibe(self, svc: BrandService) -> None:
        result = svc.strategy("Acctual", "tech")
        assert result.ok
        assert result.op == "brand_strategy"
        assert result.data["vibe"] == "tech"
        assert result.data["archetype"] == "The Innovator"
        assert result.data["tagline"] == "Beyond boundaries."
        assert result.warnings == []

    def test_default_vibe(self, svc: BrandService) -> None:
        result = svc.strategy("Acme")
        assert result.data["vibe"] == "modern"
        assert result.data["archetype"] == "The Creator"

    def test_unknown_vibe_warns(self, svc: BrandService) -> None:
        result = svc.strategy("Acme", "whimsical")
        assert result.ok
        assert result.data["archetype"] == "The Creator"
        assert result.warnings == ["Unknown vibe 'whimsical', using the modern archetype"]


class TestIdentity:
    def test_builds_identity(self, svc: BrandService) -> None:
        result = svc.identity("Nova", "tech", count=6)
        assert result.ok
        assert result.op == "brand_identity"
        identity = result.data["identity"]
        assert identity["name"] == "Nova"
        assert identity["vibe"] == "tech"
        assert identity["layout_id"] == "icon-top"
        assert identity["strategy"]["archetype"] == "The Innovator"
        assert identity["colors"]["primary"] == identity["candidate"]["color"]
        assert result.data["considered"] == 6

    def test_prefers_passing_candidate(self, svc: BrandService) -> None:
        batch = svc.identity("Nova", "tech", count=12)
        candidate = batch.data["identity"]["candidate"]
        if not batch.warnings:
            assert candidate["quality_breakdown"]["passes_quality_check"]

    def test_deterministic(self, svc: BrandService) -> None:
        first = svc.identity("Acme", "bold", count=4)
        second = svc.identity("Acme", "bold", count=4)
        assert first.data == second.data

    def test_explicit_color(self, svc: BrandService) -> None:
        result = svc.identity("Acme", "bold", color="#00aa88", count=2)
        assert result.data["identity"]["candidate"]["color"] == "#00AA88"

    def test_invalid_count(self, svc: BrandService) -> None:
        result = svc.identity("Acme", count=0)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_COUNT"

    def test_warns_when_nothing_passes(self, project_root: Path) -> None:
        (project_root / "glyphctl.toml").write_text("[quality]\nmin_overall = 11.0\n")
        svc = BrandService(GlyphSettings.from_cli(project_root=project_root))
        result = svc.identity("Acme", "bold", count=3)
        assert result.ok
        assert any("top-ranked" in w for w in result.warnings)
