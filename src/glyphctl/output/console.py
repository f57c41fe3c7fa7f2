"""Rich Console factory and theme for glyphctl output.

Consoles render into a StringIO buffer so every renderer still returns a
plain ``str``. Rich drops color codes on its own when there is no
terminal (tests, pipes).
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.text import Text
from rich.theme import Theme

from glyphctl.domain.colors import normalize_hex, readable_text_color

GLYPH_THEME = Theme(
    {
        "glyph.ok": "bold green",
        "glyph.error": "bold red",
        "glyph.warning": "bold yellow",
        "glyph.op": "bold cyan",
        "glyph.key": "dim",
        "glyph.id": "bold blue",
        "glyph.path": "dim",
        "glyph.title": "bold",
        "glyph.score": "magenta",
        "glyph.pass": "green",
        "glyph.fail": "red",
    }
)

DEFAULT_WIDTH = 120


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width; ``[output] width`` feeds this.
    """
    return Console(
        file=StringIO(),
        theme=GLYPH_THEME,
        no_color=no_color,
        highlight=False,
        width=width or DEFAULT_WIDTH,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def swatch(hex_color: str) -> Text:
    """A hex label drawn on its own color, with a readable text color."""
    normalized = normalize_hex(hex_color)
    if normalized is None:
        return Text(str(hex_color))
    text_color = readable_text_color(normalized)
    return Text(f" {normalized} ", style=f"{text_color} on {normalized}")


def verdict(flag: bool) -> Text:
    return Text("pass", style="glyph.pass") if flag else Text("fail", style="glyph.fail")
