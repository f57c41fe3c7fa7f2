"""Layout archetype catalog and name-keyed selection."""

from __future__ import annotations

from dataclasses import asdict, dataclass

from glyphctl.domain.seeds import SeededRandom, derive_seed
from glyphctl.domain.types import AspectRatio, UseCase


@dataclass(frozen=True)
class LayoutDefinition:
    """How icon and text are arranged in a finished lockup."""

    id: str
    name: str
    description: str
    aspect_ratio: AspectRatio
    shows_icon: bool
    shows_text: bool

    def to_dict(self) -> dict[str, object]:
        data = asdict(self)
        data["aspect_ratio"] = str(self.aspect_ratio)
        return data


LAYOUTS: tuple[LayoutDefinition, ...] = (
    LayoutDefinition(
        "lettermark",
        "Lettermark",
        "Single stylized initial letter",
        AspectRatio.SQUARE,
        False,
        True,
    ),
    LayoutDefinition(
        "wordmark", "Wordmark", "Styled brand name with no icon", AspectRatio.WIDE, False, True
    ),
    LayoutDefinition(
        "icon-top", "Stacked", "Icon centered above brand name", AspectRatio.SQUARE, True, True
    ),
    LayoutDefinition(
        "icon-left", "Horizontal", "Icon beside brand name", AspectRatio.WIDE, True, True
    ),
    LayoutDefinition(
        "badge", "Badge", "Text inside a shape (emblem style)", AspectRatio.SQUARE, True, True
    ),
    LayoutDefinition(
        "icon-only",
        "Symbol",
        "Just the icon (for favicons/app icons)",
        AspectRatio.SQUARE,
        True,
        False,
    ),
)

LAYOUTS_BY_ID: dict[str, LayoutDefinition] = {layout.id: layout for layout in LAYOUTS}

DEFAULT_LAYOUT = LAYOUTS[0]


def select_layout(name: str) -> LayoutDefinition:
    """Pick a layout from the sum of the name's code points.

    Stable across processes: no hashing salt, no random state.
    """
    total = sum(ord(ch) for ch in (name or ""))
    return LAYOUTS[total % len(LAYOUTS)]


def get_layout(layout_id: str | None) -> LayoutDefinition:
    """Look up *layout_id*, falling back to the lettermark layout."""
    if layout_id is None:
        return DEFAULT_LAYOUT
    return LAYOUTS_BY_ID.get(layout_id, DEFAULT_LAYOUT)


def layouts_for_use_case(use_case: str) -> tuple[LayoutDefinition, ...]:
    try:
        case = UseCase(use_case)
    except ValueError:
        return LAYOUTS
    if case is UseCase.APP:
        return tuple(lay for lay in LAYOUTS if lay.aspect_ratio is AspectRatio.SQUARE)
    if case is UseCase.WEBSITE:
        return tuple(lay for lay in LAYOUTS if lay.shows_text)
    if case is UseCase.SOCIAL:
        return tuple(lay for lay in LAYOUTS if lay.aspect_ratio is not AspectRatio.TALL)
    return LAYOUTS


def layout_variations(name: str, count: int = 4) -> list[str]:
    """Distinct layout ids for *name*, shuffled deterministically."""
    rng = SeededRandom(derive_seed(name, salt="layouts"))
    return [lay.id for lay in rng.shuffled(LAYOUTS)[: max(0, min(count, len(LAYOUTS)))]]
