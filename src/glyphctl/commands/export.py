"""Command group: export marks and color tokens to files."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from glyphctl.commands._base import TIER_CHOICE, TOKEN_FORMAT_CHOICE, GlyphGroup

if TYPE_CHECKING:
    from glyphctl.commands._context import AppContext

_EXPORT_EXAMPLES = """\
  glyphctl export svg Acme --output acme.svg
  glyphctl export svg Acme --vibe tech --color "#2563EB" > acme.svg
  glyphctl export tokens "#2563EB" --format tailwind --output tokens.json
  glyphctl export tokens "#2563EB" --format css"""


@click.group(cls=GlyphGroup, examples=_EXPORT_EXAMPLES)
def export() -> None:
    """Export identity artifacts in portable formats."""


@export.command(
    examples="""\
  glyphctl export svg Acme --output acme.svg
  glyphctl export svg Acme --vibe nature --tier free""",
)
@click.argument("name")
@click.option("--vibe", default=None, help="Style hint, e.g. tech.")
@click.option("--color", default=None, help="Primary color as hex.")
@click.option("--tier", type=TIER_CHOICE, default=None, help="Algorithm tier.")
@click.option("--output", type=click.Path(dir_okay=False), default=None, help="Target SVG file.")
@click.pass_obj
def svg(
    app: AppContext,
    name: str,
    vibe: str | None,
    color: str | None,
    tier: str | None,
    output: str | None,
) -> None:
    """Export the identity mark for NAME as an SVG file (stdout without --output)."""
    from glyphctl.domain.engine import BrandIdentity
    from glyphctl.services.brand import BrandService
    from glyphctl.services.export import ExportService

    built = BrandService(app.settings).identity(name, vibe, color=color, tier=tier)
    if not built.ok:
        app.emit(built)
        return
    for warning in built.warnings:
        click.echo(f"WARNING: {warning}", err=True)
    identity = BrandIdentity.model_validate(built.data["identity"])
    target = Path(output) if output else None
    app.emit(ExportService(app.settings).export_svg(identity, target))


@export.command(
    examples="""\
  glyphctl export tokens "#2563EB"
  glyphctl export tokens "#2563EB" --format tailwind --output tailwind.colors.json
  glyphctl export tokens "#15803D" --format css --output brand.css""",
)
@click.argument("primary")
@click.option(
    "--format",
    "fmt",
    type=TOKEN_FORMAT_CHOICE,
    default="json",
    help="Token file format.",
)
@click.option("--output", type=click.Path(dir_okay=False), default=None, help="Target file.")
@click.pass_obj
def tokens(app: AppContext, primary: str, fmt: str, output: str | None) -> None:
    """Export the color tokens derived from PRIMARY (stdout without --output)."""
    from glyphctl.domain.colors import ColorTokenSystem
    from glyphctl.services.brand import BrandService
    from glyphctl.services.export import ExportService

    derived = BrandService(app.settings).color_system(primary)
    for warning in derived.warnings:
        click.echo(f"WARNING: {warning}", err=True)
    system = ColorTokenSystem.model_validate(derived.data["tokens"])
    target = Path(output) if output else None
    app.emit(ExportService(app.settings).export_tokens(system, target, fmt=fmt))
