"""Tests for --examples flag on CLI commands.

Parametrized to cover all commands that define examples text.
"""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from glyphctl.cli import cli

# (CLI args, expected keywords in output)
EXAMPLES_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["generate", "--examples"], ["glyphctl generate Acme", "--all-styles"]),
    (["compose", "--examples"], ["--shape cont-badge-hex", "--seed 42"]),
    (["score", "--examples"], ["glyphctl score mark.svg"]),
    (["colors", "--examples"], ["glyphctl colors"]),
    (["contrast", "--examples"], ["glyphctl contrast"]),
    (["layout", "--examples"], ["--variations 3"]),
    (["strategy", "--examples"], ["--vibe nature"]),
    (["identity", "--examples"], ["glyphctl identity Acme"]),
    (["catalog", "--examples"], ["glyphctl catalog algorithms", "glyphctl catalog shapes"]),
    (["catalog", "algorithms", "--examples"], ["--tier free"]),
    (["catalog", "shapes", "--examples"], ["--vibe tech"]),
    (["catalog", "layouts", "--examples"], ["--use-case website"]),
    (["export", "--examples"], ["glyphctl export svg", "glyphctl export tokens"]),
    (["export", "svg", "--examples"], ["--output acme.svg"]),
    (["export", "tokens", "--examples"], ["--format css"]),
]


def _examples_id(item: tuple[list[str], list[str]]) -> str:
    """Generate a readable test ID from args."""
    args, _ = item
    return "_".join(a for a in args if a != "--examples")


@pytest.mark.usefixtures("_isolated_cwd")
@pytest.mark.parametrize(
    "args,expected_keywords",
    EXAMPLES_COMMANDS,
    ids=[_examples_id(item) for item in EXAMPLES_COMMANDS],
)
def test_examples_flag(
    cli_runner: CliRunner, args: list[str], expected_keywords: list[str]
) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    assert "Examples for" in result.output
    for kw in expected_keywords:
        assert kw in result.output, f"Expected '{kw}' in examples output for {args}"


@pytest.mark.usefixtures("_isolated_cwd")
class TestExamplesInHelp:
    """Test that --examples appears in --help output for commands that have it."""

    @pytest.mark.parametrize(
        "args",
        [
            ["generate", "--help"],
            ["compose", "--help"],
            ["identity", "--help"],
            ["catalog", "--help"],
            ["catalog", "shapes", "--help"],
            ["export", "--help"],
            ["export", "tokens", "--help"],
        ],
    )
    def test_examples_in_help(self, cli_runner: CliRunner, args: list[str]) -> None:
        result = cli_runner.invoke(cli, args)
        assert result.exit_code == 0
        assert "--examples" in result.output


@pytest.mark.usefixtures("_isolated_cwd")
class TestExamplesEagerExit:
    """Test that --examples exits before validation (eager option)."""

    def test_examples_skips_required_args(self, cli_runner: CliRunner) -> None:
        # 'compose' requires NAME and ALGORITHM, but --examples should work without them
        result = cli_runner.invoke(cli, ["compose", "--examples"])
        assert result.exit_code == 0
        assert "Examples for" in result.output

    def test_examples_skips_required_args_contrast(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["contrast", "--examples"])
        assert result.exit_code == 0

    def test_examples_skips_stdin_read(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["score", "--examples"], input="<svg/>")
        assert result.exit_code == 0
        assert "OK" not in result.output
