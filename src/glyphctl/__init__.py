"""glyphctl — deterministic brand-mark generation and scoring."""

__version__ = "0.4.0"
