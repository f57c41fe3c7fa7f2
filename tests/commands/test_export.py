"""Tests for the export command group."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from glyphctl.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestExportSvg:
    def test_stdout_is_identity_markup(self, cli_runner: CliRunner) -> None:
        built = cli_runner.invoke(cli, ["--json", "identity", "Nova", "--vibe", "tech"])
        markup = json.loads(built.stdout)["data"]["identity"]["candidate"]["markup"]
        result = cli_runner.invoke(cli, ["export", "svg", "Nova", "--vibe", "tech"])
        assert result.exit_code == 0
        assert result.stdout.rstrip("\n") == markup

    def test_writes_file(self, cli_runner: CliRunner, project_root: Path) -> None:
        target = project_root / "out" / "nova.svg"
        result = cli_runner.invoke(cli, ["export", "svg", "Nova", "--output", str(target)])
        assert result.exit_code == 0
        assert "export_svg" in result.stdout
        assert str(target) in result.stdout
        assert target.read_text(encoding="utf-8").startswith("<svg")

    def test_file_matches_compose_preview(
        self, cli_runner: CliRunner, project_root: Path
    ) -> None:
        built = json.loads(cli_runner.invoke(cli, ["--json", "identity", "Acme"]).stdout)
        candidate = built["data"]["identity"]["candidate"]
        target = project_root / "acme.svg"
        cli_runner.invoke(cli, ["export", "svg", "Acme", "--output", str(target)])
        assert target.read_text(encoding="utf-8") == candidate["markup"]

    def test_unwritable_target(self, cli_runner: CliRunner, project_root: Path) -> None:
        (project_root / "blocker").write_text("")
        target = project_root / "blocker" / "nova.svg"
        args = ["--json", "export", "svg", "Nova", "--output", str(target)]
        result = cli_runner.invoke(cli, args)
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["code"] == "EXPORT_FAILED"


@pytest.mark.usefixtures("_isolated_cwd")
class TestExportTokens:
    def test_json_stdout(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["export", "tokens", "#2563EB"])
        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["tokens"]["primary"] == "#2563EB"

    def test_tailwind_file(self, cli_runner: CliRunner, project_root: Path) -> None:
        target = project_root / "tailwind.colors.json"
        result = cli_runner.invoke(
            cli, ["export", "tokens", "#2563EB", "--format", "tailwind", "--output", str(target)]
        )
        assert result.exit_code == 0
        payload = json.loads(target.read_text(encoding="utf-8"))
        assert payload["darkMode"] == "class"

    def test_css_stdout(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["export", "tokens", "15803d", "--format", "css"])
        assert result.exit_code == 0
        assert result.stdout.startswith(":root {")
        assert "--brand: #15803D;" in result.stdout

    def test_invalid_primary_warns_and_falls_back(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["export", "tokens", "moss", "--format", "css"])
        assert result.exit_code == 0
        assert "--brand: #475569;" in result.stdout
        assert "WARNING: Invalid color 'moss'" in result.stderr

    def test_bad_format_rejected_by_click(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["export", "tokens", "#2563EB", "--format", "yaml"])
        assert result.exit_code == 2
