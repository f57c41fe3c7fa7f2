"""Commands: color tokens, contrast, layout, strategy, and full identity."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from glyphctl.commands._base import TIER_CHOICE, GlyphCommand

if TYPE_CHECKING:
    from glyphctl.commands._context import AppContext


@click.command(
    cls=GlyphCommand,
    examples="""\
  glyphctl colors "#2563EB"
  glyphctl colors 2563eb
  glyphctl --json colors "#DC2626" | jq '.data.tailwind'""",
)
@click.argument("primary")
@click.pass_obj
def colors(app: AppContext, primary: str) -> None:
    """Derive light and dark color tokens from PRIMARY."""
    from glyphctl.services.brand import BrandService

    app.emit(BrandService(app.settings).color_system(primary))


@click.command(
    cls=GlyphCommand,
    examples="""\
  glyphctl contrast "#FFFFFF" "#2563EB"
  glyphctl contrast 777 fff""",
)
@click.argument("foreground")
@click.argument("background")
@click.pass_obj
def contrast(app: AppContext, foreground: str, background: str) -> None:
    """Check the WCAG contrast of FOREGROUND on BACKGROUND."""
    from glyphctl.services.brand import BrandService

    app.emit(BrandService(app.settings).contrast(foreground, background))


@click.command(
    cls=GlyphCommand,
    examples="""\
  glyphctl layout Acme
  glyphctl layout Acme --variations 3""",
)
@click.argument("name")
@click.option("--variations", type=int, default=0, help="Also list N alternative layouts.")
@click.pass_obj
def layout(app: AppContext, name: str, variations: int) -> None:
    """Pick the logo layout archetype for NAME."""
    from glyphctl.services.brand import BrandService

    app.emit(BrandService(app.settings).layout(name, variations=variations))


@click.command(
    cls=GlyphCommand,
    examples="""\
  glyphctl strategy Acme
  glyphctl strategy Acme --vibe nature""",
)
@click.argument("name")
@click.option("--vibe", default=None, help="minimalist, tech, nature, bold, or modern.")
@click.pass_obj
def strategy(app: AppContext, name: str, vibe: str | None) -> None:
    """Write brand strategy copy for NAME."""
    from glyphctl.services.brand import BrandService

    app.emit(BrandService(app.settings).strategy(name, vibe))


@click.command(
    cls=GlyphCommand,
    examples="""\
  glyphctl identity Acme
  glyphctl identity Acme --vibe bold --color "#DC2626"
  glyphctl --json identity Acme > acme.json""",
)
@click.argument("name")
@click.option("--vibe", default=None, help="Style hint, e.g. tech.")
@click.option("--color", default=None, help="Primary color as hex.")
@click.option("--tier", type=TIER_CHOICE, default=None, help="Algorithm tier.")
@click.option("-n", "--count", type=int, default=None, help="Candidates to consider.")
@click.pass_obj
def identity(
    app: AppContext,
    name: str,
    vibe: str | None,
    color: str | None,
    tier: str | None,
    count: int | None,
) -> None:
    """Assemble a complete brand identity for NAME."""
    from glyphctl.services.brand import BrandService

    app.emit(
        BrandService(app.settings).identity(name, vibe, color=color, tier=tier, count=count)
    )
