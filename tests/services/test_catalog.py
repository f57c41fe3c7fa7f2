"""Tests for CatalogService."""

from __future__ import annotations

import pytest

from glyphctl.config.settings import GlyphSettings
from glyphctl.domain.algorithms import FREE_ALGORITHM_IDS
from glyphctl.domain.shapes import list_shapes
from glyphctl.services.catalog import CatalogService


@pytest.fixture
def svc(settings: GlyphSettings) -> CatalogService:
    return CatalogService(settings)


class TestAlgorithms:
    def test_lists_everything(self, svc: CatalogService) -> None:
        result = svc.algorithms()
        assert result.ok
        assert result.op == "list_algorithms"
        assert result.data["count"] == 36
        assert len(result.data["items"]) == 36

    def test_item_shape(self, svc: CatalogService) -> None:
        item = svc.algorithms().data["items"][0]
        assert set(item) == {"id", "name", "category", "tier", "description"}

    def test_free_tier(self, svc: CatalogService) -> None:
        result = svc.algorithms(tier="free")
        assert [i["id"] for i in result.data["items"]] == list(FREE_ALGORITHM_IDS)

    def test_category_filter(self, svc: CatalogService) -> None:
        result = svc.algorithms(category="Glass")
        assert result.data["count"] == 4
        assert {i["category"] for i in result.data["items"]} == {"glass"}

    def test_tier_and_category(self, svc: CatalogService) -> None:
        result = svc.algorithms(tier="free", category="gradient")
        assert result.data["count"] == 0

    def test_unknown_tier_warns(self, svc: CatalogService) -> None:
        result = svc.algorithms(tier="vip")
        assert result.data["count"] == len(FREE_ALGORITHM_IDS)
        assert result.warnings


class TestShapes:
    def test_all_shapes(self, svc: CatalogService) -> None:
        result = svc.shapes()
        assert result.op == "list_shapes"
        assert result.data["count"] == len(list_shapes())

    def test_vibe_filter(self, svc: CatalogService) -> None:
        result = svc.shapes(vibe="tech")
        assert 0 < result.data["count"] <= len(list_shapes())
        for item in result.data["items"]:
            assert "tech" in item["tags"] or item["category"] == "tech"

    def test_unmatched_vibe_returns_all(self, svc: CatalogService) -> None:
        assert svc.shapes(vibe="zzz").data["count"] == len(list_shapes())


class TestLayouts:
    def test_all_layouts(self, svc: CatalogService) -> None:
        result = svc.layouts()
        assert result.op == "list_layouts"
        assert result.data["count"] == 6

    def test_app_use_case_is_square(self, svc: CatalogService) -> None:
        items = svc.layouts(use_case="app").data["items"]
        assert items
        assert {i["aspect_ratio"] for i in items} == {"square"}

    def test_website_use_case_shows_text(self, svc: CatalogService) -> None:
        items = svc.layouts(use_case="website").data["items"]
        assert all(i["shows_text"] for i in items)
        assert "icon-only" not in {i["id"] for i in items}
