"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from glyphctl.output.console import create_console, get_output, swatch, verdict

if TYPE_CHECKING:
    from rich.console import Console

    from glyphctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    width: int | None = None,
) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console(width=width)

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    # Exports without a target file print the file body itself
    content = result.data.get("content")
    if isinstance(content, str):
        return content.rstrip("\n")

    items = result.data.get("items")
    if items and isinstance(items, list):
        return "\n".join(_extract_id(item) for item in items if _extract_id(item))

    if result.op == "compose":
        return str(result.data.get("markup", ""))
    if result.op == "score_quality":
        return str(result.data.get("overall_score", ""))

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _extract_id(item: Any) -> str:
    if isinstance(item, dict):
        val = item.get("id")
        return "" if val is None else str(val)
    return ""


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="glyph.ok")
    op = Text(f"  {result.op}", style="glyph.op")
    console.print(label, op, sep="")


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="glyph.key")
    if key == "id" or key.endswith("_id"):
        v = Text(str(value), style="glyph.id")
    elif key == "path":
        v = Text(str(value), style="glyph.path")
    elif key in ("name", "title"):
        v = Text(str(value), style="glyph.title")
    elif key.endswith("score"):
        v = Text(str(value), style="glyph.score")
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


def _raw(console: Console, content: str) -> None:
    """Print markup or file content untouched (no wrapping, no Rich markup)."""
    console.print(content.rstrip("\n"), markup=False, emoji=False, soft_wrap=True)


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry span tree (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))

    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(f"    {k}: {v}")


def _render_telemetry_tree(
    console: Console,
    span_data: dict[str, Any],
    indent: int = 4,
) -> None:
    """Render a hierarchical span tree with color-coded timing."""
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)

    if duration > 1000:
        style = "bold red"
    elif duration > 100:
        style = "yellow"
    else:
        style = "dim"

    line = f"{prefix}[{style}]{duration:>8.2f}ms[/{style}]  {name}"
    annotations = span_data.get("annotations") or {}
    if annotations:
        line += "  (" + ", ".join(f"{ak}={av}" for ak, av in annotations.items()) + ")"

    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


def _catalog_table(items: list[dict[str, Any]], columns: list[str]) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    for col in columns:
        style = "glyph.id" if col == "id" else None
        table.add_column(col.replace("_", " ").title(), style=style, no_wrap=col == "id")
    for item in items:
        row: list[str] = []
        for col in columns:
            val = item.get(col, "")
            row.append(", ".join(val) if isinstance(val, list) else str(val))
        table.add_row(*row)
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="glyph.error")
    op = Text(f"  {result.op}", style="glyph.op")
    sep = Text(" — ")
    console.print(label, op, sep, msg)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Generation renderers ──────────────────────────────────────────────


def _render_candidates(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render generate_batch / generate_styles as a ranked table."""
    d = result.data
    _status_line(console, result)
    for key in ("name", "category", "tier"):
        if key in d:
            _field(console, key, d[key])

    items: list[dict[str, Any]] = d.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("ID", style="glyph.id", no_wrap=True)
    table.add_column("Algorithm")
    table.add_column("Shape")
    table.add_column("Color")
    table.add_column("Score", style="glyph.score", justify="right")
    table.add_column("Quality")
    if verbose:
        table.add_column("Concept", style="dim")

    for item in items:
        breakdown = item.get("quality_breakdown", {})
        row: list[Any] = [
            str(item.get("index", "")),
            str(item.get("id", "")),
            str(item.get("algorithm_name", "")),
            str(item.get("shape_id", "")),
            swatch(str(item.get("color", ""))),
            f"{float(item.get('quality_score', 0.0)):.1f}",
            verdict(bool(breakdown.get("passes_quality_check"))),
        ]
        if verbose:
            row.append(str(item.get("concept", "")))
        table.add_row(*row)

    console.print()
    console.print(table)
    summary = f"\n{d.get('count', len(items))} candidates"
    if "passing" in d:
        summary += f", {d['passing']} passing"
    console.print(summary)
    if verbose:
        _render_meta(console, result)


def _render_candidate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a single composed candidate followed by its markup."""
    d = result.data
    _status_line(console, result)
    for key in ("id", "algorithm_id", "shape_id", "seed", "seed_hex", "quality_score"):
        if key in d:
            _field(console, key, d[key])
    console.print(Text("  color: ", style="glyph.key"), swatch(str(d.get("color", ""))))
    breakdown = d.get("quality_breakdown", {})
    console.print(
        Text("  quality: ", style="glyph.key"),
        verdict(bool(breakdown.get("passes_quality_check"))),
    )
    if verbose:
        _field(console, "concept", d.get("concept", ""))
    console.print()
    _raw(console, str(d.get("markup", "")))
    if verbose:
        _render_meta(console, result)


_SIGNAL_LABELS: tuple[tuple[str, str], ...] = (
    ("has_geometric_construction", "geometric construction"),
    ("has_negative_space", "negative space"),
    ("has_asymmetry", "asymmetry"),
    ("has_abstract_integration", "abstract integration"),
    ("has_depth_or_dimension", "depth or dimension"),
    ("has_unique_letterform", "unique letterform"),
)


def _render_score(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "overall_score", d.get("overall_score"))
    for key in ("geometric_complexity", "uniqueness", "negative_space_usage"):
        _field(console, key, f"{d.get(key)}/10")
    _field(console, "signals", f"{d.get('signal_count')}/6")
    _field(console, "generic", d.get("is_generic"))
    console.print(
        Text("  quality: ", style="glyph.key"),
        verdict(bool(d.get("passes_quality_check"))),
    )

    metrics = d.get("metrics", {})
    if metrics:
        table = Table(show_header=True, pad_edge=False, expand=False)
        table.add_column("Signal")
        table.add_column("Present")
        for key, label in _SIGNAL_LABELS:
            table.add_row(label, "yes" if metrics.get(key) else "no")
        console.print()
        console.print(table)
    if verbose:
        _render_meta(console, result)


# ── Brand renderers ───────────────────────────────────────────────────


def _token_table(tokens: dict[str, Any]) -> Table:
    table = Table(show_header=True, pad_edge=False, expand=False)
    table.add_column("Token")
    table.add_column("Light")
    table.add_column("Dark")
    light = tokens.get("light", {})
    dark = tokens.get("dark", {})
    for group in ("brand", "neutral", "state"):
        for key, value in light.get(group, {}).items():
            label = group if key == "DEFAULT" else f"{group}.{key}"
            table.add_row(label, swatch(value), swatch(dark.get(group, {}).get(key, "")))
    return table


def _render_colors(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    tokens = d.get("tokens", {})
    _status_line(console, result)
    console.print(Text("  primary: ", style="glyph.key"), swatch(str(tokens.get("primary", ""))))
    console.print()
    console.print(_token_table(tokens))
    if verbose:
        console.print()
        console.print(Text("  tailwind:", style="dim"))
        _raw(console, _json.dumps(d.get("tailwind", {}), indent=2))
        _render_meta(console, result)


def _render_contrast(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    console.print(
        Text("  pair: ", style="glyph.key"),
        swatch(str(d.get("foreground", ""))),
        Text(" on "),
        swatch(str(d.get("background", ""))),
    )
    _field(console, "ratio", f"{d.get('ratio')}:1")
    _field(console, "grade", d.get("grade"))
    table = Table(show_header=True, pad_edge=False, expand=False)
    table.add_column("Level")
    table.add_column("Result")
    for key, label in (
        ("aa", "AA"),
        ("aa_large", "AA large"),
        ("aaa", "AAA"),
        ("aaa_large", "AAA large"),
    ):
        table.add_row(label, verdict(bool(d.get(key))))
    console.print()
    console.print(table)
    if verbose:
        _render_meta(console, result)


def _render_layout(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    for key in ("brand", "id", "name", "description", "aspect_ratio", "shows_icon", "shows_text"):
        if key in d:
            _field(console, key, d[key])
    if d.get("variations"):
        _field(console, "variations", ", ".join(d["variations"]))
    if verbose:
        _render_meta(console, result)


def _strategy_body(s: dict[str, Any]) -> str:
    voice = s.get("voice", {})
    marketing = s.get("marketing", {})
    lines = [
        f"archetype: {s.get('archetype', '')}",
        f"tagline: {s.get('tagline', '')}",
        "",
        f"mission: {s.get('mission', '')}",
        f"vision: {s.get('vision', '')}",
        f"values: {', '.join(s.get('values', []))}",
        f"audience: {s.get('audience', '')}",
        "",
        f"voice: {voice.get('tone', '')}",
    ]
    lines.extend(f"  do: {item}" for item in voice.get("dos", []))
    lines.extend(f"  don't: {item}" for item in voice.get("donts", []))
    lines.extend(
        [
            "",
            f"headline: {marketing.get('headline', '')}",
            f"subhead: {marketing.get('subhead', '')}",
            f"about: {marketing.get('about', '')}",
        ]
    )
    return "\n".join(lines)


def _render_strategy(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    title = f"{d.get('name', '?')} — {d.get('vibe', '')}"
    console.print(Panel(_strategy_body(d), title=title, border_style="dim", expand=False))
    if verbose:
        _render_meta(console, result)


def _render_identity(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    ident = result.data.get("identity", {})
    candidate = ident.get("candidate", {})
    _status_line(console, result)
    for key in ("name", "vibe", "layout_id", "layout_name"):
        if key in ident:
            _field(console, key, ident[key])
    _field(console, "mark", candidate.get("id", ""))
    _field(console, "algorithm", candidate.get("algorithm_name", ""))
    _field(console, "quality_score", candidate.get("quality_score", ""))
    _field(console, "considered", result.data.get("considered", ""))
    console.print()
    console.print(_token_table(ident.get("colors", {})))
    strategy = ident.get("strategy", {})
    if strategy:
        console.print()
        console.print(
            Panel(_strategy_body(strategy), title="strategy", border_style="dim", expand=False)
        )
    if verbose:
        console.print()
        _raw(console, str(candidate.get("markup", "")))
        _render_meta(console, result)


# ── Catalog renderers ─────────────────────────────────────────────────

_CATALOG_COLUMNS: dict[str, list[str]] = {
    "list_algorithms": ["id", "name", "category", "tier"],
    "list_shapes": ["id", "name", "category", "complexity"],
    "list_layouts": ["id", "name", "aspect_ratio", "shows_icon", "shows_text"],
}


def _render_catalog(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items = result.data.get("items", [])
    columns = list(_CATALOG_COLUMNS.get(result.op, ["id", "name"]))
    if verbose:
        columns.append("tags" if result.op == "list_shapes" else "description")
    console.print(_catalog_table(items, columns))
    console.print(f"\n{result.data.get('count', len(items))} items")


# ── Export renderer ───────────────────────────────────────────────────


def _render_export(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """File exports report the path; stdout exports print the body only."""
    d = result.data
    if "content" in d:
        _raw(console, str(d["content"]))
        return
    _status_line(console, result)
    for key in ("path", "id", "format", "primary", "bytes"):
        if key in d:
            _field(console, key, d[key])
    if verbose:
        _render_meta(console, result)


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    # Generation
    "generate_batch": _render_candidates,
    "generate_styles": _render_candidates,
    "compose": _render_candidate,
    "score_quality": _render_score,
    # Brand
    "color_system": _render_colors,
    "contrast": _render_contrast,
    "select_layout": _render_layout,
    "brand_strategy": _render_strategy,
    "brand_identity": _render_identity,
    # Catalog
    "list_algorithms": _render_catalog,
    "list_shapes": _render_catalog,
    "list_layouts": _render_catalog,
    # Export
    "export_svg": _render_export,
    "export_tokens": _render_export,
}
