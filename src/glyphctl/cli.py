"""Root CLI group for glyphctl with global flags and command registration."""

from __future__ import annotations

import click

from glyphctl import __version__
from glyphctl.commands import register_commands
from glyphctl.commands._context import AppContext
from glyphctl.config.logging import bind_context, clear_context
from glyphctl.config.settings import GlyphSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="glyphctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with timing and debug logs.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """glyphctl — deterministic brand marks, color tokens, and quality scores."""
    ctx.ensure_object(dict)
    settings = GlyphSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    clear_context()
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
    else:
        bind_context(command=ctx.invoked_subcommand)


register_commands(cli)
