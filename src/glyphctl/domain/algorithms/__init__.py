"""Algorithm registry and seed-driven selection.

Thirty-six composition styles across seven categories.  Each
:class:`AlgorithmVariant` pairs catalog metadata with a pure builder;
:meth:`AlgorithmVariant.compose` turns ``(shape, seed, color, label)``
into a standalone SVG string in the normalized 100x100 frame.

INVARIANT: Composition reads nothing but its arguments, so the markup
previewed for a candidate is byte-identical to the markup exported.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from glyphctl.domain.algorithms import advanced, basic, depth, glass, gradient, pattern, typography
from glyphctl.domain.algorithms._canvas import Builder, Canvas
from glyphctl.domain.markup import VIEW_BOX, Element, render_svg
from glyphctl.domain.shapes import ShapePrimitive
from glyphctl.domain.types import AlgorithmCategory, Tier

DEFAULT_ALGORITHM_ID = "container"
FREE_ALGORITHM_IDS: tuple[str, ...] = ("container", "frame", "monogram", "diamond", "grid")


@dataclass(frozen=True)
class AlgorithmVariant:
    """A named composition style."""

    id: str
    name: str
    category: AlgorithmCategory
    tier: Tier
    description: str
    builder: Builder

    def build(
        self, shape: ShapePrimitive, seed: int, color_hex: str, label: str | None = None
    ) -> Sequence[Element]:
        """Return the markup IR for one composition."""
        canvas = Canvas(
            algorithm_id=self.id,
            shape=shape,
            seed=seed,
            color=color_hex,
            label=label,
        )
        return tuple(self.builder(canvas))

    def compose(
        self, shape: ShapePrimitive, seed: int, color_hex: str, label: str | None = None
    ) -> str:
        return render_svg(self.build(shape, seed, color_hex, label), view_box=VIEW_BOX)

    def to_dict(self) -> dict[str, str]:
        return {
            "id": self.id,
            "name": self.name,
            "category": str(self.category),
            "tier": str(self.tier),
            "description": self.description,
        }


ALGORITHM_REGISTRY: dict[str, AlgorithmVariant] = {}


def _register(
    id: str,
    name: str,
    category: AlgorithmCategory,
    description: str,
    builder: Callable[[Canvas], Sequence[Element]],
) -> None:
    tier = Tier.FREE if id in FREE_ALGORITHM_IDS else Tier.PREMIUM
    ALGORITHM_REGISTRY[id] = AlgorithmVariant(
        id=id,
        name=name,
        category=category,
        tier=tier,
        description=description,
        builder=builder,
    )


def _register_algorithms() -> None:
    """Populate :data:`ALGORITHM_REGISTRY` in catalog order."""
    cat = AlgorithmCategory
    catalog = (
        # Basic (free)
        ("container", "Container", cat.BASIC, basic.container,
         "Shape cut out of rounded square with negative space"),
        ("frame", "Frame", cat.BASIC, basic.frame,
         "Shape centered inside a bordered frame"),
        ("monogram", "Monogram", cat.BASIC, basic.monogram,
         "Letter badge with shape accent in corner"),
        ("diamond", "Diamond", cat.BASIC, basic.diamond,
         "Shape in 45 degree rotated container"),
        ("grid", "Grid", cat.BASIC, basic.grid,
         "3x3 construction pattern with cells"),
        # Gradient
        ("gradient_linear", "Linear Gradient", cat.GRADIENT, gradient.gradient_linear,
         "Shape with smooth linear gradient fill"),
        ("gradient_radial", "Radial Gradient", cat.GRADIENT, gradient.gradient_radial,
         "Shape with radial gradient emanating from center"),
        ("gradient_mesh", "Mesh Gradient", cat.GRADIENT, gradient.gradient_mesh,
         "Complex mesh gradient background with shape overlay"),
        ("duotone", "Duotone", cat.GRADIENT, gradient.duotone,
         "Two-color split composition"),
        # 3D
        ("isometric", "Isometric", cat.DEPTH, depth.isometric,
         "Shape rendered in isometric 3D perspective"),
        ("shadow_depth", "Shadow Depth", cat.DEPTH, depth.shadow_depth,
         "Multiple shadow layers creating depth illusion"),
        ("layered_3d", "Layered 3D", cat.DEPTH, depth.layered_3d,
         "Stacked layers with offset creating 3D stack effect"),
        ("perspective", "Perspective", cat.DEPTH, depth.perspective,
         "Shape with vanishing point perspective transform"),
        # Glass
        ("glassmorphism", "Glassmorphism", cat.GLASS, glass.glassmorphism,
         "Frosted glass effect with blur and transparency"),
        ("neon_glow", "Neon Glow", cat.GLASS, glass.neon_glow,
         "Outer glow effect with color bleed"),
        ("soft_shadow", "Soft Shadow", cat.GLASS, glass.soft_shadow,
         "Soft, diffused shadow beneath shape"),
        ("blur_gradient", "Blur Gradient", cat.GLASS, glass.blur_gradient,
         "Blurred shape background with sharp overlay"),
        # Pattern
        ("tessellation", "Tessellation", cat.PATTERN, pattern.tessellation,
         "Repeating shape pattern in tile formation"),
        ("honeycomb", "Honeycomb", cat.PATTERN, pattern.honeycomb,
         "Hexagonal grid with shape integration"),
        ("kaleidoscope", "Kaleidoscope", cat.PATTERN, pattern.kaleidoscope,
         "Radial symmetry with mirrored shapes"),
        ("spiral_golden", "Golden Spiral", cat.PATTERN, pattern.spiral_golden,
         "Golden ratio spiral composition"),
        # Typography
        ("letter_fill", "Letter Fill", cat.TYPOGRAPHY, typography.letter_fill,
         "Letter outline filled with shape pattern"),
        ("badge_text", "Badge Text", cat.TYPOGRAPHY, typography.badge_text,
         "Shape badge with integrated text"),
        # Advanced
        ("orbit", "Orbit", cat.ADVANCED, advanced.orbit,
         "Multiple shapes orbiting central element"),
        ("explosion", "Explosion", cat.ADVANCED, advanced.explosion,
         "Shapes radiating outward from center"),
        ("wave_stack", "Wave Stack", cat.ADVANCED, advanced.wave_stack,
         "Multiple wave layers with depth"),
        ("corner_accent", "Corner Accent", cat.ADVANCED, advanced.corner_accent,
         "Shape with decorative corner flourishes"),
        ("seal", "Seal", cat.ADVANCED, advanced.seal,
         "Official seal/stamp style composition"),
        ("tech_circuit", "Tech Circuit", cat.ADVANCED, advanced.tech_circuit,
         "Shape with circuit line accents"),
        ("radial", "Radial", cat.PATTERN, pattern.radial,
         "Shapes arranged in circular pattern"),
        ("cluster", "Cluster", cat.ADVANCED, advanced.cluster,
         "Organic grouping of shapes"),
        ("overlap", "Overlap", cat.ADVANCED, advanced.overlap,
         "Layered shapes with opacity"),
        ("spiral", "Spiral", cat.PATTERN, pattern.spiral,
         "Shapes in spiral pattern"),
        ("wave", "Wave", cat.PATTERN, pattern.wave,
         "Horizontal wave of shapes"),
        ("split", "Split", cat.BASIC, basic.split,
         "Two complementary halves with negative space"),
        ("corner", "Corner", cat.BASIC, basic.corner,
         "Shape in corner with accent"),
    )
    for id, name, category, builder, description in catalog:
        _register(id, name, category, description, builder)


_register_algorithms()


# ── Lookup and selection ─────────────────────────────────────────────


def list_all() -> list[AlgorithmVariant]:
    return list(ALGORITHM_REGISTRY.values())


def get_by_id(algorithm_id: str) -> AlgorithmVariant | None:
    return ALGORITHM_REGISTRY.get(algorithm_id)


def resolve(algorithm_id: str | None) -> AlgorithmVariant:
    """Look up *algorithm_id*, falling back to the default container style."""
    if algorithm_id and algorithm_id in ALGORITHM_REGISTRY:
        return ALGORITHM_REGISTRY[algorithm_id]
    return ALGORITHM_REGISTRY[DEFAULT_ALGORITHM_ID]


def is_free(algorithm_id: str) -> bool:
    return algorithm_id in FREE_ALGORITHM_IDS


def _coerce_tier(tier: object) -> Tier:
    try:
        return Tier(str(tier).lower())
    except ValueError:
        return Tier.FREE


def list_for_tier(tier: object) -> list[AlgorithmVariant]:
    """Free tier sees the five free styles; premium sees everything.

    Unrecognized tiers are treated as free.
    """
    if _coerce_tier(tier) is Tier.PREMIUM:
        return list_all()
    return [v for v in ALGORITHM_REGISTRY.values() if v.tier is Tier.FREE]


def list_by_category(category: str) -> list[AlgorithmVariant]:
    return [v for v in ALGORITHM_REGISTRY.values() if v.category == category]


def select_for_seed(seed: int, tier: object = Tier.PREMIUM) -> AlgorithmVariant:
    """Modulo-index *seed* into the tier-filtered catalog."""
    eligible = list_for_tier(tier)
    return eligible[abs(seed) % len(eligible)]


def compose_markup(
    shape: ShapePrimitive,
    algorithm: AlgorithmVariant | str,
    seed: int,
    color_hex: str,
    label: str | None = None,
) -> str:
    """Compose *shape* with *algorithm* (a variant or an id) into SVG markup."""
    variant = algorithm if isinstance(algorithm, AlgorithmVariant) else resolve(algorithm)
    return variant.compose(shape, seed, color_hex, label)


def algorithm_concept(
    variant: AlgorithmVariant, shape: ShapePrimitive, label: str | None = None
) -> str:
    """One-line human description of a composition."""
    subject = f"the {shape.name.lower()} mark"
    if label and variant.category is AlgorithmCategory.TYPOGRAPHY:
        subject = f"{label.strip()} with {subject}"
    return f"{variant.name}: {subject}. {variant.description}."


__all__ = [
    "ALGORITHM_REGISTRY",
    "DEFAULT_ALGORITHM_ID",
    "FREE_ALGORITHM_IDS",
    "AlgorithmVariant",
    "Canvas",
    "algorithm_concept",
    "compose_markup",
    "get_by_id",
    "is_free",
    "list_all",
    "list_by_category",
    "list_for_tier",
    "resolve",
    "select_for_seed",
]
