"""Static quality scoring for composed marks.

The scorer reads the markup IR (parsing SVG text first when handed a
string) and asks structural questions: how many paths, any polygons,
masks, gradients, transforms, translucent fills.  Those features roll
up into six quality signals and three 1-10 sub-scores, with penalties
for the two classic generic patterns: a bare letter, and a letter
centered in a plain circle.

INVARIANT: Scoring never raises.  Markup that cannot be analysed has no
features and therefore scores low.

INVARIANT: Sub-scores and the overall score are non-decreasing in every
structural feature; only the anti-pattern inputs (text, a plain
container circle) can pull a score down.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, fields

from pydantic import BaseModel

from glyphctl.domain.markup import Element, iter_elements, parse_markup

PREMIUM_LETTERMARK_ALGORITHMS: tuple[str, ...] = (
    "Geometric Deconstruction",
    "Prism Deconstruct",
    "Fragment Assembly",
    "Negative Space Letter",
    "Void Form",
    "Inverse Mark",
    "Layered Dimensional",
    "Depth Stack",
    "Shadow Planes",
    "Abstract Integration",
    "Geometric Blend",
    "Compositional Mark",
    "Architectural Letter",
    "Blueprint Mark",
    "Construction Plan",
    "Dynamic Asymmetric",
    "Offset Energy",
    "Tilt Mark",
    "Monogram Fusion",
    "Mark Integration",
    "Signature Blend",
)

_OPACITY_ATTRS = ("opacity", "fill-opacity", "stroke-opacity")
_GRADIENT_TAGS = ("linearGradient", "radialGradient")


@dataclass(frozen=True)
class QualityThresholds:
    """Tunable constants of the scorer."""

    min_overall: float = 6.5
    min_signals: int = 2
    generic_ceiling: float = 5.0
    complexity_weight: float = 0.35
    uniqueness_weight: float = 0.35
    negative_space_weight: float = 0.30


DEFAULT_THRESHOLDS = QualityThresholds()


@dataclass(frozen=True)
class MarkupFeatures:
    """Structural facts extracted from a mark."""

    multiple_paths: bool = False
    polygons: bool = False
    multiple_circles: bool = False
    transforms: bool = False
    gradients: bool = False
    masks: bool = False
    multiple_lines: bool = False
    multiple_rects: bool = False
    opacity_variation: bool = False
    # anti-pattern inputs
    has_text: bool = False
    centered_text: bool = False
    container_circle: bool = False

    @property
    def simple_text_only(self) -> bool:
        return self.has_text and not (self.multiple_paths or self.polygons or self.multiple_rects)

    @property
    def basic_circle_container(self) -> bool:
        return self.container_circle and not self.masks

    @property
    def centered_text_only(self) -> bool:
        return self.centered_text and not (self.transforms or self.multiple_paths)

    def to_dict(self) -> dict[str, bool]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


class QualityMetrics(BaseModel):
    model_config = {"frozen": True}

    has_geometric_construction: bool
    has_negative_space: bool
    has_asymmetry: bool
    has_abstract_integration: bool
    has_depth_or_dimension: bool
    has_unique_letterform: bool

    @property
    def signal_count(self) -> int:
        return sum(1 for value in self.model_dump().values() if value)


class QualityScore(BaseModel):
    """Verdict for one mark."""

    model_config = {"frozen": True}

    geometric_complexity: int
    uniqueness: int
    negative_space_usage: int
    overall_score: float
    is_generic: bool
    passes_quality_check: bool
    signal_count: int
    metrics: QualityMetrics


# ── Feature extraction ───────────────────────────────────────────────


def _is_fractional(value: str | None) -> bool:
    if value is None:
        return False
    try:
        number = float(value.strip().rstrip("%"))
    except ValueError:
        return False
    if value.strip().endswith("%"):
        number /= 100
    return 0 < number < 1


def _in_container_range(radius: str | None) -> bool:
    if radius is None:
        return False
    try:
        return 40 <= float(radius) <= 45
    except ValueError:
        return False


def extract_features(elements: Sequence[Element]) -> MarkupFeatures:
    counts: dict[str, int] = {}
    transforms = opacity = centered = circle_container = False
    for element in iter_elements(elements):
        counts[element.tag] = counts.get(element.tag, 0) + 1
        transforms = transforms or element.has("transform")
        opacity = opacity or any(_is_fractional(element.get(a)) for a in _OPACITY_ATTRS)
        if element.tag == "text" and element.get("text-anchor") == "middle":
            centered = True
        if element.tag == "circle" and _in_container_range(element.get("r")):
            circle_container = True
    return MarkupFeatures(
        multiple_paths=counts.get("path", 0) > 1,
        polygons=counts.get("polygon", 0) > 0,
        multiple_circles=counts.get("circle", 0) > 2,
        transforms=transforms,
        gradients=any(counts.get(tag, 0) for tag in _GRADIENT_TAGS),
        masks=counts.get("mask", 0) > 0,
        multiple_lines=counts.get("line", 0) > 1,
        multiple_rects=counts.get("rect", 0) > 1,
        opacity_variation=opacity,
        has_text=counts.get("text", 0) > 0,
        centered_text=centered,
        container_circle=circle_container,
    )


def derive_metrics(f: MarkupFeatures) -> QualityMetrics:
    return QualityMetrics(
        has_geometric_construction=(
            f.multiple_paths or f.polygons or (f.multiple_rects and f.transforms)
        ),
        has_negative_space=f.masks or (f.polygons and f.multiple_paths),
        has_asymmetry=f.transforms or f.opacity_variation,
        has_abstract_integration=(f.polygons or f.multiple_circles) and f.multiple_paths,
        has_depth_or_dimension=f.gradients or f.opacity_variation or f.transforms,
        has_unique_letterform=f.multiple_lines or f.polygons or f.masks,
    )


# ── Scoring ──────────────────────────────────────────────────────────


def is_premium_lettermark(algorithm_name: str) -> bool:
    return any(name in algorithm_name for name in PREMIUM_LETTERMARK_ALGORITHMS)


def _clamp(value: int) -> int:
    return max(1, min(10, value))


def score_features(
    features: MarkupFeatures,
    algorithm_name: str = "",
    thresholds: QualityThresholds = DEFAULT_THRESHOLDS,
) -> QualityScore:
    """Turn extracted features into a :class:`QualityScore`."""
    m = derive_metrics(features)
    signals = m.signal_count
    premium = is_premium_lettermark(algorithm_name or "")

    geometric = 3
    geometric += 2 if m.has_geometric_construction else 0
    geometric += 1 if features.multiple_paths else 0
    geometric += 2 if features.polygons else 0
    geometric += 1 if features.transforms else 0
    geometric += 1 if features.multiple_lines else 0
    geometric = min(10, geometric)

    uniqueness = 4
    uniqueness += 2 if m.has_negative_space else 0
    uniqueness += 1 if m.has_asymmetry else 0
    uniqueness += 2 if m.has_unique_letterform else 0
    uniqueness += 1 if premium else 0
    uniqueness = min(10, uniqueness)

    negative = 3
    negative += 4 if features.masks else 0
    negative += 2 if m.has_abstract_integration else 0
    negative += 1 if features.polygons and features.multiple_paths else 0
    negative = min(10, negative)

    if features.simple_text_only and not features.transforms:
        geometric = _clamp(geometric - 4)
        uniqueness = _clamp(uniqueness - 4)
    if features.basic_circle_container and features.centered_text_only:
        geometric = _clamp(geometric - 3)
        uniqueness = _clamp(uniqueness - 3)

    if premium:
        geometric = _clamp(geometric + 1)
        uniqueness = _clamp(uniqueness + 1)
        negative = _clamp(negative + 1)

    ceiling = thresholds.generic_ceiling
    is_generic = geometric < ceiling and uniqueness < ceiling and signals < thresholds.min_signals
    overall = round(
        geometric * thresholds.complexity_weight
        + uniqueness * thresholds.uniqueness_weight
        + negative * thresholds.negative_space_weight,
        1,
    )
    passes = (
        overall >= thresholds.min_overall
        and signals >= thresholds.min_signals
        and not is_generic
    )
    return QualityScore(
        geometric_complexity=geometric,
        uniqueness=uniqueness,
        negative_space_usage=negative,
        overall_score=overall,
        is_generic=is_generic,
        passes_quality_check=passes,
        signal_count=signals,
        metrics=m,
    )


def score_quality(
    markup: str | Sequence[Element],
    algorithm_name: str = "",
    thresholds: QualityThresholds = DEFAULT_THRESHOLDS,
) -> QualityScore:
    """Score SVG text or an already-built element tree."""
    elements = parse_markup(markup) if isinstance(markup, str) else tuple(markup)
    return score_features(extract_features(elements), algorithm_name, thresholds)


# ── Lettermark recommendations ───────────────────────────────────────

_DIAGONAL_LETTERS = frozenset("AKMNVWXYZ")
_ROUND_LETTERS = frozenset("CGOQS")
_STRAIGHT_LETTERS = frozenset("BDEFHILPRT")
_HOOKED_LETTERS = frozenset("JU")


def recommended_lettermark_algorithm(letter: str) -> str:
    """Suggest a lettermark construction from the anatomy of *letter*."""
    initial = (letter or "").strip()[:1].upper()
    if initial in _DIAGONAL_LETTERS:
        return "Geometric Deconstruction"
    if initial in _ROUND_LETTERS:
        return "Negative Space Letter"
    if initial in _STRAIGHT_LETTERS:
        return "Architectural Letter"
    if initial in _HOOKED_LETTERS:
        return "Monogram Fusion"
    return "Layered Dimensional"
