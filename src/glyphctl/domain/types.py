"""Catalog enums shared across the domain layer.

Values match the identifiers used in exported markup, config files,
and CLI choices, so they are plain strings at runtime.
"""

from __future__ import annotations

from enum import StrEnum


class Tier(StrEnum):
    """Access tier of an algorithm variant."""

    FREE = "free"
    PREMIUM = "premium"


class AlgorithmCategory(StrEnum):
    """Visual family an algorithm variant belongs to."""

    BASIC = "basic"
    GRADIENT = "gradient"
    DEPTH = "3d"
    GLASS = "glass"
    PATTERN = "pattern"
    TYPOGRAPHY = "typography"
    ADVANCED = "advanced"


class ShapeCategory(StrEnum):
    """Families of the shape primitive catalog."""

    TECH = "tech"
    ORGANIC = "organic"
    ABSTRACT = "abstract"
    MARK = "mark"
    CONTAINER = "container"
    NATURE = "nature"
    MINIMAL = "minimal"
    BOLD = "bold"
    CREATIVE = "creative"
    GEOMETRIC = "geometric"


class Complexity(StrEnum):
    """Visual detail level of a shape primitive."""

    SIMPLE = "simple"
    MODERATE = "moderate"
    DETAILED = "detailed"


class AspectRatio(StrEnum):
    """Frame proportions of a layout archetype."""

    SQUARE = "square"
    WIDE = "wide"
    TALL = "tall"


class Vibe(StrEnum):
    """Coarse style hints understood by the strategy and shape selectors."""

    MINIMALIST = "minimalist"
    TECH = "tech"
    NATURE = "nature"
    BOLD = "bold"
    MODERN = "modern"


class UseCase(StrEnum):
    """Where a finished mark will be shown."""

    APP = "app"
    WEBSITE = "website"
    PRINT = "print"
    SOCIAL = "social"
