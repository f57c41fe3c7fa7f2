"""Shared Click plumbing for glyphctl commands.

Every command and group built here understands ``--examples``: an eager
flag that prints the command's example invocations and exits, which
keeps ``--help`` down to options and arguments.  The option choices
used by several commands are derived from the domain enums so the CLI
and the catalogs cannot drift apart.
"""

from __future__ import annotations

from typing import Any

import click

from glyphctl.domain.types import Tier, UseCase
from glyphctl.services.export import TOKEN_FORMATS

TIER_CHOICE = click.Choice([t.value for t in Tier], case_sensitive=False)
USE_CASE_CHOICE = click.Choice([u.value for u in UseCase], case_sensitive=False)
TOKEN_FORMAT_CHOICE = click.Choice(list(TOKEN_FORMATS))


def _print_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    examples = getattr(ctx.command, "examples", None) or ""
    click.echo(f"Examples for '{ctx.command_path}':\n")
    click.echo(examples)
    ctx.exit(0)


class _ExamplesMixin:
    """Adds an ``examples`` keyword and the matching ``--examples`` flag."""

    params: list[click.Parameter]

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=_print_examples,
                    help="Show usage examples.",
                )
            )


class GlyphCommand(_ExamplesMixin, click.Command):
    """A command with optional ``--examples``."""


class GlyphGroup(_ExamplesMixin, click.Group):
    """A group whose subcommands default to :class:`GlyphCommand`."""

    command_class = GlyphCommand
