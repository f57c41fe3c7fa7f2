"""Subcommand modules for glyphctl.

Provides register_commands() which uses deferred imports to keep
``glyphctl --help`` fast as the catalogs grow.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group.

    2 groups (have subcommands) + 8 standalone commands.
    """
    # --- Groups ---
    from glyphctl.commands.catalog import catalog
    from glyphctl.commands.export import export

    cli.add_command(catalog)
    cli.add_command(export)

    # --- Standalone commands ---
    from glyphctl.commands.brand import colors, contrast, identity, layout, strategy
    from glyphctl.commands.generate import compose, generate, score

    cli.add_command(generate)
    cli.add_command(compose)
    cli.add_command(score)
    cli.add_command(colors)
    cli.add_command(contrast)
    cli.add_command(layout)
    cli.add_command(strategy)
    cli.add_command(identity)
