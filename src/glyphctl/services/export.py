"""ExportService — write a finished identity to disk.

Exports read the stored markup and token values of a :class:`BrandIdentity`
(or a bare candidate); nothing is regenerated here, so an exported file is
byte-identical to what the generating command showed.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from glyphctl.domain.colors import ColorTokenSystem, big_five, tailwind_colors
from glyphctl.domain.engine import BrandIdentity, GeneratedCandidate
from glyphctl.services.base import BaseService
from glyphctl.services.result import ErrorCode, ServiceResult
from glyphctl.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)

TOKEN_FORMATS: tuple[str, ...] = ("json", "tailwind", "css")


def render_css_variables(colors: ColorTokenSystem) -> str:
    """Render the light and dark token modes as CSS custom properties."""
    lines = [":root {"]
    lines.extend(_css_block(colors.light.model_dump()))
    lines.append("}")
    lines.append("")
    lines.append(".dark {")
    lines.extend(_css_block(colors.dark.model_dump()))
    lines.append("}")
    return "\n".join(lines) + "\n"


def _css_block(mode: dict[str, dict[str, str]]) -> list[str]:
    out: list[str] = []
    for group, tokens in mode.items():
        for key, value in tokens.items():
            suffix = "" if key == "DEFAULT" else f"-{key}"
            out.append(f"  --{group}{suffix}: {value};")
    return out


def render_tokens(colors: ColorTokenSystem, fmt: str) -> str:
    if fmt == "tailwind":
        return json.dumps(tailwind_colors(colors), indent=2) + "\n"
    if fmt == "css":
        return render_css_variables(colors)
    payload = {"tokens": colors.model_dump(mode="json"), "big_five": big_five(colors)}
    return json.dumps(payload, indent=2) + "\n"


class ExportService(BaseService):
    """Serialize identities and token systems into portable files."""

    @traced
    def export_svg(
        self,
        source: BrandIdentity | GeneratedCandidate,
        output: Path | None = None,
    ) -> ServiceResult:
        """Write the candidate's markup verbatim, or return it when *output* is None."""
        op = "export_svg"
        candidate = source.candidate if isinstance(source, BrandIdentity) else source
        content = candidate.markup
        data: dict[str, object] = {
            "id": candidate.id,
            "algorithm_id": candidate.algorithm_id,
            "bytes": len(content.encode("utf-8")),
        }
        if output is None:
            data["content"] = content
            return ServiceResult(ok=True, op=op, data=data)

        try:
            _write_text(output, content)
        except OSError as exc:
            return ServiceResult.failure(
                op,
                ErrorCode.EXPORT_FAILED,
                f"Could not write {output}: {exc}",
                path=str(output),
            )
        data["path"] = str(output)
        return ServiceResult(ok=True, op=op, data=data)

    @traced
    def export_tokens(
        self,
        colors: ColorTokenSystem,
        output: Path | None = None,
        *,
        fmt: str = "json",
    ) -> ServiceResult:
        op = "export_tokens"
        fmt = fmt.strip().lower()
        if fmt not in TOKEN_FORMATS:
            return ServiceResult.failure(
                op,
                ErrorCode.INVALID_FORMAT,
                f"Unknown token format '{fmt}'",
                valid=list(TOKEN_FORMATS),
            )
        content = render_tokens(colors, fmt)
        data: dict[str, object] = {"format": fmt, "primary": colors.primary}
        if output is None:
            data["content"] = content
            return ServiceResult(ok=True, op=op, data=data)

        try:
            _write_text(output, content)
        except OSError as exc:
            return ServiceResult.failure(
                op,
                ErrorCode.EXPORT_FAILED,
                f"Could not write {output}: {exc}",
                path=str(output),
            )
        data["path"] = str(output)
        return ServiceResult(ok=True, op=op, data=data)


def _write_text(path: Path, content: str) -> None:
    with trace_span("write_file"):
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    logger.debug("Wrote %d chars to %s", len(content), path)
