"""Tests for the generate, compose, and score commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from glyphctl.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestGenerateCommand:
    def test_human_table(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["generate", "Nova", "--category", "tech", "-n", "4"])
        assert result.exit_code == 0
        assert "OK" in result.output
        assert "generate_batch" in result.output
        assert "4 candidates" in result.output

    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "generate", "Nova", "--vibe", "tech", "-n", "3"])
        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["ok"] is True
        assert payload["data"]["count"] == 3
        assert payload["data"]["items"][0]["markup"].startswith("<svg")

    def test_quiet_prints_ids(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "generate", "Nova", "-n", "3"])
        assert result.exit_code == 0
        assert len(result.stdout.strip().splitlines()) == 3

    def test_deterministic_across_invocations(self, cli_runner: CliRunner) -> None:
        args = ["--json", "generate", "Acme", "--category", "bold", "-n", "5"]
        first = cli_runner.invoke(cli, args)
        second = cli_runner.invoke(cli, args)
        assert first.stdout == second.stdout

    def test_free_tier(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "generate", "Nova", "--tier", "FREE"])
        payload = json.loads(result.stdout)
        assert payload["data"]["tier"] == "free"

    def test_invalid_tier_rejected_by_click(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["generate", "Nova", "--tier", "gold"])
        assert result.exit_code == 2

    def test_zero_count_fails(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["generate", "Nova", "-n", "0"])
        assert result.exit_code == 1
        assert "ERROR" in result.stderr
        assert "Count must be at least 1" in result.stderr
        assert result.stdout == ""

    def test_zero_count_json_on_stderr(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "generate", "Nova", "-n", "0"])
        assert result.exit_code == 1
        payload = json.loads(result.stderr)
        assert payload["error"]["code"] == "INVALID_COUNT"

    def test_invalid_color_warns_on_stderr(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["generate", "Nova", "-n", "2", "--color", "teal"])
        assert result.exit_code == 0
        assert "WARNING: Invalid color 'teal'" in result.stderr
        assert "WARNING" not in result.stdout

    def test_all_styles(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "generate", "Nova", "--all-styles"])
        payload = json.loads(result.stdout)
        assert payload["op"] == "generate_styles"
        assert payload["data"]["count"] == 36

    def test_passing_only(self, cli_runner: CliRunner) -> None:
        args = ["--json", "generate", "Nova", "-n", "10", "--passing-only"]
        result = cli_runner.invoke(cli, args)
        items = json.loads(result.stdout)["data"]["items"]
        assert all(i["quality_breakdown"]["passes_quality_check"] for i in items)

    def test_config_default_count(self, cli_runner: CliRunner, project_root: Path) -> None:
        (project_root / "glyphctl.toml").write_text("[engine]\ndefault_count = 2\n")
        result = cli_runner.invoke(cli, ["--json", "generate", "Nova"])
        assert json.loads(result.stdout)["data"]["count"] == 2

    def test_verbose_shows_telemetry(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-v", "generate", "Nova", "-n", "2"])
        assert result.exit_code == 0
        assert "GenerateService.generate_batch" in result.stdout
        assert "compose_and_score" in result.stdout


@pytest.mark.usefixtures("_isolated_cwd")
class TestComposeCommand:
    def test_human_output_includes_markup(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["compose", "Nova", "orbit"])
        assert result.exit_code == 0
        assert "orbit-" in result.stdout
        assert "<svg" in result.stdout

    def test_quiet_prints_only_markup(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "compose", "Nova", "seal", "--seed", "42"])
        assert result.exit_code == 0
        assert result.stdout.startswith("<svg")
        assert result.stdout.rstrip().endswith("</svg>")

    def test_pinned_shape(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "compose", "Nova", "container", "--shape", "cont-badge-hex"]
        )
        assert json.loads(result.stdout)["data"]["shape_id"] == "cont-badge-hex"

    def test_unknown_algorithm(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["compose", "Nova", "nope"])
        assert result.exit_code == 1
        assert "Unknown algorithm: nope" in result.stderr

    def test_unknown_shape(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "compose", "Nova", "orbit", "--shape", "x"])
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["code"] == "UNKNOWN_SHAPE"


@pytest.mark.usefixtures("_isolated_cwd")
class TestScoreCommand:
    def test_score_from_stdin(self, cli_runner: CliRunner) -> None:
        markup = cli_runner.invoke(cli, ["-q", "compose", "Nova", "kaleidoscope"]).stdout
        result = cli_runner.invoke(cli, ["--json", "score", "-"], input=markup)
        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["op"] == "score_quality"
        assert 1 <= payload["data"]["uniqueness"] <= 10

    def test_score_from_file(self, cli_runner: CliRunner, project_root: Path) -> None:
        path = project_root / "mark.svg"
        path.write_text('<svg viewBox="0 0 100 100"><text x="50" y="50">A</text></svg>')
        result = cli_runner.invoke(cli, ["-q", "score", str(path)])
        assert result.exit_code == 0
        assert float(result.stdout.strip()) < 6.5

    def test_score_human(self, cli_runner: CliRunner, project_root: Path) -> None:
        path = project_root / "mark.svg"
        path.write_text('<svg><path d="M0 0"/><path d="M1 1"/><polygon points="0,0 1,1"/></svg>')
        result = cli_runner.invoke(cli, ["score", str(path), "--algorithm", "Orbit"])
        assert result.exit_code == 0
        assert "overall_score" in result.stdout
        assert "geometric construction" in result.stdout

    def test_empty_input_fails(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["score"], input="")
        assert result.exit_code == 1
        assert "No markup to score" in result.stderr

    def test_missing_file(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["score", "does-not-exist.svg"])
        assert result.exit_code == 2
