"""Shape primitive catalog.

Pure data: each primitive is a named SVG path fragment with the view box
it was drawn in.  Composition algorithms reference primitives by value
and never mutate them.  Tags double as vibe keywords so a request's
style hint can narrow the candidate pool.
"""

from __future__ import annotations

from dataclasses import dataclass

from glyphctl.domain.seeds import SeededRandom
from glyphctl.domain.types import Complexity, ShapeCategory

ICON_VIEW_BOX = "0 0 24 24"


@dataclass(frozen=True)
class ShapePrimitive:
    """An immutable vector path fragment."""

    id: str
    name: str
    category: ShapeCategory
    path_data: str
    view_box: str = ICON_VIEW_BOX
    tags: tuple[str, ...] = ()
    complexity: Complexity = Complexity.SIMPLE

    @property
    def view_box_size(self) -> tuple[float, float]:
        """Width and height declared by the view box."""
        parts = self.view_box.replace(",", " ").split()
        try:
            return float(parts[2]), float(parts[3])
        except (IndexError, ValueError):
            return 24.0, 24.0

    def to_dict(self) -> dict[str, object]:
        return {
            "id": self.id,
            "name": self.name,
            "category": str(self.category),
            "view_box": self.view_box,
            "tags": list(self.tags),
            "complexity": str(self.complexity),
        }


def _shape(
    id: str,
    name: str,
    category: ShapeCategory,
    path_data: str,
    tags: tuple[str, ...],
    complexity: Complexity = Complexity.SIMPLE,
    view_box: str = ICON_VIEW_BOX,
) -> ShapePrimitive:
    return ShapePrimitive(
        id=id,
        name=name,
        category=category,
        path_data=path_data,
        view_box=view_box,
        tags=tags,
        complexity=complexity,
    )


_T = ShapeCategory
_C = Complexity

SHAPES: tuple[ShapePrimitive, ...] = (
    # Signature marks
    _shape(
        "ref-dynamic-wing",
        "Dynamic Wing",
        _T.ABSTRACT,
        "M10 70C30 30 60 15 90 20 65 30 45 50 35 80zM40 82C55 60 72 48 92 44 75 58 62 72 58 88z",
        ("modern", "bold", "motion"),
        _C.MODERATE,
        "0 0 100 100",
    ),
    _shape(
        "ref-sharp-s",
        "Sharp S",
        _T.ABSTRACT,
        "M18 4H9a5 5 0 0 0 0 10h6a2 2 0 0 1 0 4H6v3h9a5 5 0 0 0 0-10H9a2 2 0 0 1 0-4h9z",
        ("modern", "bold", "letter"),
        _C.MODERATE,
    ),
    # Tech
    _shape("tech-bolt", "Bolt", _T.TECH, "M7 2v11h3v9l7-12h-4l4-8z", ("tech", "bold", "energy")),
    _shape(
        "tech-grid-2x2",
        "Grid 2x2",
        _T.TECH,
        "M4 4h7v7H4zM13 4h7v7h-7zM4 13h7v7H4zM13 13h7v7h-7z",
        ("tech", "minimalist", "grid"),
    ),
    _shape(
        "tech-grid-3x3",
        "Grid 3x3",
        _T.TECH,
        "M3 3h5v5H3zM9.5 3h5v5h-5zM16 3h5v5h-5zM3 9.5h5v5H3zM9.5 9.5h5v5h-5z"
        "M16 9.5h5v5h-5zM3 16h5v5H3zM9.5 16h5v5h-5zM16 16h5v5h-5z",
        ("tech", "grid"),
        _C.MODERATE,
    ),
    _shape(
        "tech-circuit-corner",
        "Circuit Corner",
        _T.TECH,
        "M4 4h6v2H6v4H4zM20 20h-6v-2h4v-4h2zM11 11h2v2h-2z",
        ("tech", "circuit"),
    ),
    _shape(
        "tech-brackets",
        "Brackets",
        _T.TECH,
        "M8 4H5v16h3v-2H7V6h1zM16 4h3v16h-3v-2h1V6h-1z",
        ("tech", "code", "minimalist"),
    ),
    _shape(
        "tech-node-network",
        "Node Network",
        _T.TECH,
        "M12 3a2 2 0 1 1 0 4 2 2 0 0 1 0-4zM5 15a2 2 0 1 1 0 4 2 2 0 0 1 0-4z"
        "M19 15a2 2 0 1 1 0 4 2 2 0 0 1 0-4zM11.5 7h1v4.5l5.5 4-.6.8L12 12.4l-5.4 3.9-.6-.8 5.5-4z",
        ("tech", "network", "connection"),
        _C.DETAILED,
    ),
    _shape(
        "tech-pixel-cloud",
        "Pixel Cloud",
        _T.TECH,
        "M6 10h4V6h4v4h4v4h2v4H4v-4h2z",
        ("tech", "cloud"),
    ),
    _shape(
        "tech-cpu",
        "Processor",
        _T.TECH,
        "M7 7h10v10H7zM9 2h2v3H9zM13 2h2v3h-2zM9 19h2v3H9zM13 19h2v3h-2z"
        "M2 9h3v2H2zM2 13h3v2H2zM19 9h3v2h-3zM19 13h3v2h-3z",
        ("tech", "hardware"),
        _C.DETAILED,
    ),
    _shape(
        "tech-signal",
        "Signal",
        _T.TECH,
        "M3 18h3v3H3zM8 14h3v7H8zM13 10h3v11h-3zM18 5h3v16h-3z",
        ("tech", "growth", "data"),
    ),
    _shape(
        "tech-terminal",
        "Terminal",
        _T.TECH,
        "M3 4h18v16H3zM6 9l3 3-3 3 1 1 4-4-4-4zM12 15h6v1.5h-6z",
        ("tech", "code"),
        _C.MODERATE,
    ),
    _shape(
        "tech-layers",
        "Layers",
        _T.TECH,
        "M12 2l10 5-10 5L2 7zM2 12l10 5 10-5v2l-10 5-10-5z",
        ("tech", "modern", "stack"),
        _C.MODERATE,
    ),
    _shape(
        "tech-blockchain",
        "Chain Blocks",
        _T.TECH,
        "M3 3h7v7H3zM14 14h7v7h-7zM10 6h4v1.5h-4zM16.5 10H18v4h-1.5z",
        ("tech", "finance", "connection"),
        _C.MODERATE,
    ),
    # Organic
    _shape(
        "org-leaf-single",
        "Leaf",
        _T.ORGANIC,
        "M5 19C5 10 10 4 20 4c0 10-6 15-15 15zM6 18l8-8",
        ("nature", "growth", "eco"),
    ),
    _shape(
        "org-drop",
        "Drop",
        _T.ORGANIC,
        "M12 2.69l5.66 5.66a8 8 0 1 1-11.31 0L12 2.69z",
        ("nature", "minimalist", "water"),
    ),
    _shape(
        "org-sun-rays",
        "Sun",
        _T.ORGANIC,
        "M12 8a4 4 0 1 1 0 8 4 4 0 0 1 0-8zM11 1h2v4h-2zM11 19h2v4h-2zM1 11h4v2H1zM19 11h4v2h-4z",
        ("nature", "energy", "warm"),
        _C.MODERATE,
    ),
    _shape(
        "org-pebble",
        "Pebble",
        _T.ORGANIC,
        "M4 13c0-5 4-9 9-9s7 4 7 8-3 8-8 8-8-2-8-7z",
        ("nature", "minimalist", "soft"),
    ),
    # Abstract
    _shape(
        "abs-swoosh",
        "Swoosh",
        _T.ABSTRACT,
        "M2 16c6-8 14-10 20-8-6 0-12 4-16 10z",
        ("modern", "motion", "bold"),
    ),
    _shape(
        "abs-infinity",
        "Infinity",
        _T.ABSTRACT,
        "M7 8a4 4 0 1 0 0 8c2 0 3.5-1.5 5-4s3-4 5-4a4 4 0 1 1 0 8c-2 0-3.5-1.5-5-4S9 8 7 8z",
        ("modern", "connection"),
        _C.MODERATE,
    ),
    _shape(
        "abs-spiral",
        "Spiral",
        _T.ABSTRACT,
        "M12 12a1 1 0 0 1 2 0 3 3 0 0 1-6 0 5 5 0 0 1 10 0 7 7 0 0 1-14 0",
        ("modern", "creative", "nature"),
        _C.MODERATE,
    ),
    _shape(
        "abs-split-ring",
        "Split Ring",
        _T.ABSTRACT,
        "M12 2a10 10 0 0 1 0 20v-4a6 6 0 0 0 0-12zM11 6.1a6 6 0 0 0 0 11.8v4A10 10 0 0 1 11 2z",
        ("modern", "minimalist"),
    ),
    # Marks
    _shape(
        "mark-star-4",
        "Four-Point Star",
        _T.MARK,
        "M12 2l2.5 8.5L22 12l-7.5 1.5L12 22l-2.5-8.5L2 12l7.5-1.5L12 2z",
        ("bold", "creative", "spark"),
    ),
    _shape(
        "mark-crown",
        "Crown",
        _T.MARK,
        "M3 18h18l-1-10-5 4-3-6-3 6-5-4z",
        ("bold", "premium"),
    ),
    _shape(
        "mark-lightning-filled",
        "Lightning",
        _T.MARK,
        "M13 2L4 14h7l-2 8 11-13h-7z",
        ("bold", "energy", "tech"),
    ),
    _shape(
        "mark-check",
        "Check",
        _T.MARK,
        "M4 12l5 5L20 6l-2-2-9 9-3-3z",
        ("minimalist", "trust"),
    ),
    # Containers
    _shape(
        "cont-shield-simple",
        "Shield",
        _T.CONTAINER,
        "M12 1L3 5v6c0 5.55 3.84 10.74 9 12 5.16-1.26 9-6.45 9-12V5l-9-4z",
        ("modern", "trust", "security"),
    ),
    _shape(
        "cont-badge-hex",
        "Hex Badge",
        _T.CONTAINER,
        "M12 2l9 4v12l-9 4-9-4V6l9-4z",
        ("tech", "modern", "badge"),
    ),
    _shape(
        "cont-circle",
        "Circle",
        _T.CONTAINER,
        "M12 2a10 10 0 1 1 0 20 10 10 0 0 1 0-20z",
        ("minimalist", "modern"),
    ),
    # Nature
    _shape(
        "nature-tree",
        "Tree",
        _T.NATURE,
        "M12 2L6 10h3L5 16h4l-3 6h12l-3-6h4l-4-6h3L12 2z",
        ("nature", "growth"),
        _C.MODERATE,
    ),
    _shape(
        "nature-mountain",
        "Mountain",
        _T.NATURE,
        "M12 4l-8 16h16L12 4zm0 5l4 8H8l4-8z",
        ("nature", "adventure", "minimalist"),
    ),
    _shape(
        "nature-wave",
        "Wave",
        _T.NATURE,
        "M2 12c2-2 4-2 6 0s4 2 6 0 4-2 6 0M2 16c2-2 4-2 6 0s4 2 6 0 4-2 6 0",
        ("nature", "water", "motion"),
    ),
    _shape(
        "nature-flower",
        "Flower",
        _T.NATURE,
        "M12 8a3 3 0 1 1 0 6 3 3 0 0 1 0-6zM12 2a3 3 0 0 1 0 6 3 3 0 0 1 0-6z"
        "M12 14a3 3 0 0 1 0 6 3 3 0 0 1 0-6zM6 8a3 3 0 0 1 0 6 3 3 0 0 1 0-6z"
        "M18 8a3 3 0 0 1 0 6 3 3 0 0 1 0-6z",
        ("nature", "creative", "soft"),
        _C.DETAILED,
    ),
    _shape(
        "nature-feather",
        "Feather",
        _T.NATURE,
        "M20 4C12 4 6 10 6 18l-2 2 1 1 2-2c8 0 13-6 13-15zM9 15l7-7",
        ("nature", "soft", "creative"),
    ),
    # Minimal
    _shape(
        "min-chevron", "Chevron", _T.MINIMAL, "M6 4l8 8-8 8h4l8-8-8-8z", ("minimalist", "motion")
    ),
    _shape("min-corner", "Corner", _T.MINIMAL, "M4 4h16v4H8v12H4z", ("minimalist", "architecture")),
    _shape(
        "min-dot-line",
        "Dot Line",
        _T.MINIMAL,
        "M6 10a2 2 0 1 1 0 4 2 2 0 0 1 0-4zM11 11h10v2H11z",
        ("minimalist", "tech"),
    ),
    _shape("min-slash", "Slash", _T.MINIMAL, "M15 3h4L9 21H5z", ("minimalist", "bold")),
    _shape(
        "min-bar-trio",
        "Bar Trio",
        _T.MINIMAL,
        "M4 5h16v3H4zM4 10.5h12v3H4zM4 16h8v3H4z",
        ("minimalist", "data"),
    ),
    # Bold
    _shape("bold-arrow-up", "Arrow Up", _T.BOLD, "M12 2l9 9h-6v11H9V11H3z", ("bold", "growth")),
    _shape(
        "bold-diamond",
        "Diamond",
        _T.BOLD,
        "M12 1l11 11-11 11L1 12z",
        ("bold", "premium", "minimalist"),
    ),
    _shape("bold-flash", "Flash", _T.BOLD, "M14 1L5 13h6l-3 10 11-14h-6l3-8z", ("bold", "energy")),
    _shape(
        "bold-rocket",
        "Rocket",
        _T.BOLD,
        "M12 2c4 3 6 7 6 12l-3 3H9l-3-3c0-5 2-9 6-12z"
        "M12 8a2 2 0 1 0 0 4 2 2 0 0 0 0-4zM9 18h6l-3 4z",
        ("bold", "tech", "growth"),
        _C.MODERATE,
    ),
    _shape(
        "bold-cube",
        "Cube",
        _T.BOLD,
        "M12 2l9 5v10l-9 5-9-5V7zM12 12l9-5M12 12v10M12 12L3 7",
        ("bold", "tech", "3d"),
        _C.MODERATE,
    ),
    # Creative
    _shape(
        "creative-puzzle",
        "Puzzle",
        _T.CREATIVE,
        "M4 4h6a2 2 0 1 1 4 0h6v6a2 2 0 1 0 0 4v6h-6a2 2 0 1 0-4 0H4v-6a2 2 0 1 1 0-4z",
        ("creative", "modern", "connection"),
        _C.MODERATE,
    ),
    _shape(
        "creative-spark",
        "Spark",
        _T.CREATIVE,
        "M12 2l1.5 7.5L21 8l-6 4.5 6 4.5-7.5-1.5L12 23l-1.5-7.5L3 17l6-4.5L3 8l7.5 1.5z",
        ("creative", "bold", "energy"),
        _C.MODERATE,
    ),
    _shape(
        "creative-orbit",
        "Orbit",
        _T.CREATIVE,
        "M12 9a3 3 0 1 1 0 6 3 3 0 0 1 0-6zM2 12c0-3 4.5-5 10-5s10 2 10 5-4.5 5-10 5S2 15 2 12z",
        ("creative", "tech", "modern"),
        _C.MODERATE,
    ),
    _shape(
        "creative-helix",
        "Helix",
        _T.CREATIVE,
        "M7 2c0 5 10 5 10 10S7 17 7 22h2c0-4 10-5 10-10S9 7 9 2z",
        ("creative", "nature", "science"),
        _C.MODERATE,
    ),
    _shape(
        "creative-atom",
        "Atom",
        _T.CREATIVE,
        "M12 10a2 2 0 1 1 0 4 2 2 0 0 1 0-4z"
        "M12 2c2 0 3.5 4.5 3.5 10S14 22 12 22s-3.5-4.5-3.5-10S10 2 12 2z",
        ("creative", "tech", "science"),
        _C.DETAILED,
    ),
    # Geometric
    _shape(
        "geo-octagon",
        "Octagon",
        _T.GEOMETRIC,
        "M8 2h8l6 6v8l-6 6H8l-6-6V8z",
        ("tech", "minimalist"),
    ),
    _shape(
        "geo-triangle",
        "Triangle",
        _T.GEOMETRIC,
        "M12 3l10 18H2z",
        ("modern", "minimalist", "bold"),
    ),
)

SHAPES_BY_ID: dict[str, ShapePrimitive] = {s.id: s for s in SHAPES}

DEFAULT_SHAPE = SHAPES[0]


def list_shapes() -> tuple[ShapePrimitive, ...]:
    return SHAPES


def get_shape(shape_id: str) -> ShapePrimitive | None:
    return SHAPES_BY_ID.get(shape_id)


def resolve_shape(shape_id: str | None) -> ShapePrimitive:
    """Look up *shape_id*, falling back to the first catalog entry."""
    if shape_id is None:
        return DEFAULT_SHAPE
    return SHAPES_BY_ID.get(shape_id, DEFAULT_SHAPE)


def shapes_for_vibe(vibe: str | None) -> tuple[ShapePrimitive, ...]:
    """Shapes tagged with *vibe*; the full catalog when nothing matches."""
    if not vibe:
        return SHAPES
    key = vibe.strip().lower()
    matched = tuple(s for s in SHAPES if key in s.tags or s.category == key)
    return matched or SHAPES


def shapes_by_category(category: str) -> tuple[ShapePrimitive, ...]:
    return tuple(s for s in SHAPES if s.category == category)


def shapes_by_complexity(complexity: str) -> tuple[ShapePrimitive, ...]:
    return tuple(s for s in SHAPES if s.complexity == complexity)


def select_shape(seed: int, vibe: str | None = None) -> ShapePrimitive:
    """Seeded pick from the vibe-filtered pool."""
    return SeededRandom(seed).choice(shapes_for_vibe(vibe))
