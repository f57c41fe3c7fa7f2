"""Commands: generate candidates, compose one mark, score markup."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

import click

from glyphctl.commands._base import TIER_CHOICE, GlyphCommand

if TYPE_CHECKING:
    from glyphctl.commands._context import AppContext


@click.command(
    cls=GlyphCommand,
    examples="""\
  glyphctl generate Acme
  glyphctl generate Acme --category tech --count 12
  glyphctl generate Acme --tier free --color "#0EA5E9"
  glyphctl generate Acme --passing-only
  glyphctl generate Acme --all-styles
  glyphctl --json generate Acme | jq '.data.items[0].markup'""",
)
@click.argument("name")
@click.option("--category", "--vibe", "category", default=None, help="Style hint, e.g. tech.")
@click.option("-n", "--count", type=int, default=None, help="Number of candidates.")
@click.option("--tier", type=TIER_CHOICE, default=None, help="Algorithm tier.")
@click.option("--color", default=None, help="Primary color as hex.")
@click.option("--passing-only", is_flag=True, help="Drop candidates that fail the quality check.")
@click.option("--all-styles", is_flag=True, help="One candidate per available style.")
@click.pass_obj
def generate(
    app: AppContext,
    name: str,
    category: str | None,
    count: int | None,
    tier: str | None,
    color: str | None,
    passing_only: bool,
    all_styles: bool,
) -> None:
    """Generate ranked logo candidates for NAME."""
    from glyphctl.services.generate import GenerateService

    svc = GenerateService(app.settings)
    if all_styles:
        app.emit(svc.generate_styles(name, category, tier=tier, color=color))
    else:
        app.emit(
            svc.generate_batch(
                name,
                category,
                count,
                tier=tier,
                color=color,
                passing_only=passing_only,
            )
        )


@click.command(
    cls=GlyphCommand,
    examples="""\
  glyphctl compose Acme orbit
  glyphctl compose Acme honeycomb --shape cont-badge-hex --color "#15803D"
  glyphctl compose Acme seal --seed 42
  glyphctl -q compose Acme kaleidoscope > mark.svg""",
)
@click.argument("name")
@click.argument("algorithm")
@click.option("--shape", "shape_id", default=None, help="Shape id (see catalog shapes).")
@click.option("--category", "--vibe", "category", default=None, help="Style hint, e.g. tech.")
@click.option("--color", default=None, help="Primary color as hex.")
@click.option("--seed", type=int, default=None, help="Explicit seed; derived from NAME if unset.")
@click.pass_obj
def compose(
    app: AppContext,
    name: str,
    algorithm: str,
    shape_id: str | None,
    category: str | None,
    color: str | None,
    seed: int | None,
) -> None:
    """Compose one mark for NAME with ALGORITHM."""
    from glyphctl.services.generate import GenerateService

    app.emit(
        GenerateService(app.settings).compose(
            name,
            algorithm,
            shape_id=shape_id,
            category=category,
            color=color,
            seed=seed,
        )
    )


@click.command(
    cls=GlyphCommand,
    examples="""\
  glyphctl score mark.svg
  glyphctl score mark.svg --algorithm monogram
  glyphctl -q compose Acme orbit | glyphctl score -""",
)
@click.argument("source", type=click.File("r"), default="-")
@click.option("--algorithm", "algorithm_name", default="", help="Algorithm that made the markup.")
@click.pass_obj
def score(app: AppContext, source: TextIO, algorithm_name: str) -> None:
    """Score vector markup from SOURCE (a file, or - for stdin)."""
    from glyphctl.services.generate import GenerateService

    markup = source.read()
    app.emit(GenerateService(app.settings).score(markup, algorithm_name))
