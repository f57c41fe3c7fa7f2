"""CatalogService — browse algorithms, shapes, and layouts."""

from __future__ import annotations

from glyphctl.domain.algorithms import list_all, list_by_category, list_for_tier
from glyphctl.domain.layouts import LAYOUTS, layouts_for_use_case
from glyphctl.domain.shapes import list_shapes, shapes_for_vibe
from glyphctl.services.base import BaseService
from glyphctl.services.result import ServiceResult
from glyphctl.services.telemetry import traced


class CatalogService(BaseService):
    """Read-only views over the static catalogs."""

    @traced
    def algorithms(self, *, tier: str | None = None, category: str | None = None) -> ServiceResult:
        warnings: list[str] = []
        variants = list_all() if tier is None else list_for_tier(self._resolve_tier(tier, warnings))
        if category is not None:
            allowed = {v.id for v in list_by_category(category.strip().lower())}
            variants = [v for v in variants if v.id in allowed]
        items = [v.to_dict() for v in variants]
        return ServiceResult(
            ok=True,
            op="list_algorithms",
            data={"count": len(items), "items": items},
            warnings=warnings,
        )

    @traced
    def shapes(self, *, vibe: str | None = None) -> ServiceResult:
        shapes = shapes_for_vibe(vibe) if vibe else list_shapes()
        items = [s.to_dict() for s in shapes]
        return ServiceResult(ok=True, op="list_shapes", data={"count": len(items), "items": items})

    @traced
    def layouts(self, *, use_case: str | None = None) -> ServiceResult:
        layouts = layouts_for_use_case(use_case) if use_case else LAYOUTS
        items = [lay.to_dict() for lay in layouts]
        return ServiceResult(ok=True, op="list_layouts", data={"count": len(items), "items": items})
