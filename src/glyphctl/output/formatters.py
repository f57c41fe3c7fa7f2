"""Rich/JSON output helpers.

The CLI renders a ServiceResult either for humans (Rich tables and
panels) or for machines (``--json``). This module picks the mode; the
per-operation layouts live in :mod:`glyphctl.output.renderers`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from glyphctl.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from glyphctl.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Which output mode the global CLI flags selected."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    width: int | None = None


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
    json_output: bool = False,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        settings: Output mode; takes precedence over *json_output*.
        json_output: Shortcut for ``OutputSettings(json_output=True)``.
    """
    settings = settings or OutputSettings(json_output=json_output)
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose, width=settings.width)
