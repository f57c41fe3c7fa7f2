"""Shared pytest fixtures for glyphctl tests."""

from __future__ import annotations

import os
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from glyphctl.config.settings import GlyphSettings
from glyphctl.services.telemetry import _current_span, disable_telemetry


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def project_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temp working directory with no config file and no GLYPHCTL_* env vars."""
    for key in list(os.environ):
        if key.startswith("GLYPHCTL_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def settings(project_root: Path) -> GlyphSettings:
    """Default settings rooted at an isolated temp directory."""
    return GlyphSettings.from_cli(project_root=project_root)


@pytest.fixture
def _isolated_cwd(project_root: Path) -> None:
    """Run CLI tests from a clean directory.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test
    classes.
    """


@pytest.fixture(autouse=True)
def _reset_telemetry() -> Generator[None]:
    """``-v`` invocations enable telemetry for the whole thread; turn it back off."""
    yield
    disable_telemetry()
    _current_span.set(None)
