"""Command group: browse the algorithm, shape, and layout catalogs."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from glyphctl.commands._base import TIER_CHOICE, USE_CASE_CHOICE, GlyphGroup

if TYPE_CHECKING:
    from glyphctl.commands._context import AppContext


@click.group(
    cls=GlyphGroup,
    examples="""\
  glyphctl catalog algorithms
  glyphctl catalog algorithms --tier free
  glyphctl catalog shapes --vibe nature
  glyphctl catalog layouts --use-case social""",
)
def catalog() -> None:
    """List the built-in algorithms, shapes, and layouts."""


@catalog.command(
    examples="""\
  glyphctl catalog algorithms
  glyphctl catalog algorithms --tier free
  glyphctl catalog algorithms --category glass""",
)
@click.option("--tier", type=TIER_CHOICE, default=None, help="Tier filter.")
@click.option("--category", default=None, help="Category filter, e.g. gradient or 3d.")
@click.pass_obj
def algorithms(app: AppContext, tier: str | None, category: str | None) -> None:
    """List composition algorithms."""
    from glyphctl.services.catalog import CatalogService

    app.emit(CatalogService(app.settings).algorithms(tier=tier, category=category))


@catalog.command(
    examples="""\
  glyphctl catalog shapes
  glyphctl catalog shapes --vibe tech""",
)
@click.option("--vibe", default=None, help="Only shapes matching this vibe.")
@click.pass_obj
def shapes(app: AppContext, vibe: str | None) -> None:
    """List shape primitives."""
    from glyphctl.services.catalog import CatalogService

    app.emit(CatalogService(app.settings).shapes(vibe=vibe))


@catalog.command(
    examples="""\
  glyphctl catalog layouts
  glyphctl catalog layouts --use-case website""",
)
@click.option(
    "--use-case",
    type=USE_CASE_CHOICE,
    default=None,
    help="Only layouts suited to this use case.",
)
@click.pass_obj
def layouts(app: AppContext, use_case: str | None) -> None:
    """List layout archetypes."""
    from glyphctl.services.catalog import CatalogService

    app.emit(CatalogService(app.settings).layouts(use_case=use_case))
