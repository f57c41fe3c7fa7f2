"""Tests for the colors, contrast, layout, strategy, and identity commands."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from glyphctl.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestColorsCommand:
    def test_token_table(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["colors", "#FF4500"])
        assert result.exit_code == 0
        assert "color_system" in result.stdout
        assert "#FF4500" in result.stdout
        assert "brand.foreground" in result.stdout

    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "colors", "2563eb"])
        payload = json.loads(result.stdout)
        assert payload["data"]["tokens"]["primary"] == "#2563EB"
        assert "tailwind" in payload["data"]

    def test_invalid_color_falls_back(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["colors", "sky"])
        assert result.exit_code == 0
        assert "#475569" in result.stdout
        assert "WARNING: Invalid color 'sky'" in result.stderr


@pytest.mark.usefixtures("_isolated_cwd")
class TestContrastCommand:
    def test_report(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["contrast", "777", "fff"])
        assert result.exit_code == 0
        assert "aa-large" in result.stdout

    def test_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "contrast", "#000", "#fff"])
        assert result.stdout.strip() == "OK: contrast"

    def test_invalid_color_fails(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "contrast", "#000", "white"])
        assert result.exit_code == 1
        payload = json.loads(result.stderr)
        assert payload["error"]["code"] == "INVALID_COLOR"
        assert result.stdout == ""


@pytest.mark.usefixtures("_isolated_cwd")
class TestLayoutCommand:
    def test_layout(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["layout", "Nova"])
        assert result.exit_code == 0
        assert "icon-top" in result.stdout

    def test_variations(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "layout", "Nova", "--variations", "2"])
        assert len(json.loads(result.stdout)["data"]["variations"]) == 2


@pytest.mark.usefixtures("_isolated_cwd")
class TestStrategyCommand:
    def test_strategy(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["strategy", "Acctual", "--vibe", "tech"])
        assert result.exit_code == 0
        assert "The Innovator" in result.stdout
        assert "Beyond boundaries." in result.stdout

    def test_unknown_vibe_warns(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["strategy", "Acme", "--vibe", "retro"])
        assert result.exit_code == 0
        assert "The Creator" in result.stdout
        assert "WARNING: Unknown vibe 'retro'" in result.stderr

    def test_json_warnings_stay_in_payload(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "strategy", "Acme", "--vibe", "retro"])
        assert json.loads(result.stdout)["warnings"]
        assert "WARNING" not in result.stderr


@pytest.mark.usefixtures("_isolated_cwd")
class TestIdentityCommand:
    def test_identity(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["identity", "Nova", "--vibe", "tech", "-n", "3"])
        assert result.exit_code == 0
        assert "brand_identity" in result.stdout
        assert "icon-top" in result.stdout
        assert "The Innovator" in result.stdout

    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "identity", "Nova", "--color", "#DC2626", "-n", "2"]
        )
        identity = json.loads(result.stdout)["data"]["identity"]
        assert identity["candidate"]["color"] == "#DC2626"
        assert identity["colors"]["primary"] == "#DC2626"

    def test_zero_count_fails(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["identity", "Nova", "-n", "0"])
        assert result.exit_code == 1
        assert "INVALID_COUNT" not in result.stdout
        assert "Count must be at least 1" in result.stderr
