"""Brand strategy copy from archetype template banks.

Five archetypes, one per vibe.  Selection within a bank is keyed on the
length of the brand name, so a name always gets the same tagline.
Everything else is template interpolation over the archetype's traits.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel

from glyphctl.domain.types import Vibe

DEFAULT_VIBE = Vibe.MODERN


@dataclass(frozen=True)
class Archetype:
    name: str
    traits: tuple[str, str, str]
    values: tuple[str, ...]
    audience: str
    voice: str
    taglines: tuple[str, ...]


ARCHETYPES: dict[str, Archetype] = {
    Vibe.MINIMALIST: Archetype(
        name="The Essentialist",
        traits=("Clarity", "Peace", "Simplicity"),
        values=("Less is More", "Function over Form", "Mindfulness", "Subtraction"),
        audience="Design-conscious leaders who value clarity and purpose.",
        voice="Calm, concise, and intentional.",
        taglines=(
            "Simply better.",
            "Design for clarity.",
            "Less but better.",
            "Focus on the essential.",
        ),
    ),
    Vibe.TECH: Archetype(
        name="The Innovator",
        traits=("Future-focused", "Smart", "Efficient"),
        values=("Innovation", "Speed", "Scale", "Disruption"),
        audience="Early adopters and forward-thinking enterprises.",
        voice="Visionary, technical, and confident.",
        taglines=(
            "Building the future.",
            "Accelerating what's possible.",
            "Intelligence inside.",
            "Beyond boundaries.",
        ),
    ),
    Vibe.NATURE: Archetype(
        name="The Guardian",
        traits=("Organic", "Sustainable", "Grounded"),
        values=("Sustainability", "Growth", "Balance", "Authenticity"),
        audience="Eco-conscious consumers seeking genuine connection.",
        voice="Warm, nurturing, and authentic.",
        taglines=("Rooted in nature.", "Naturally superior.", "Earth first.", "Growth in harmony."),
    ),
    Vibe.BOLD: Archetype(
        name="The Maverick",
        traits=("Fearless", "Loud", "Impactful"),
        values=("Courage", "Impact", "Truth", "Power"),
        audience="Trendsetters and those who refuse to blend in.",
        voice="Provocative, energetic, and raw.",
        taglines=(
            "Defy expectation.",
            "Make some noise.",
            "Unapologetically us.",
            "Lead the pack.",
        ),
    ),
    Vibe.MODERN: Archetype(
        name="The Creator",
        traits=("Polished", "Reliable", "Creative"),
        values=("Quality", "Craftsmanship", "Trust", "Excellence"),
        audience="Professionals who appreciate thoughtful design.",
        voice="Professional, open, and stylish.",
        taglines=(
            "Designed for life.",
            "Quality in every detail.",
            "Elevate your day.",
            "The new standard.",
        ),
    ),
}


class BrandVoice(BaseModel):
    model_config = {"frozen": True}

    tone: str
    dos: list[str]
    donts: list[str]


class MarketingCopy(BaseModel):
    model_config = {"frozen": True}

    headline: str
    subhead: str
    about: str


class BrandStrategy(BaseModel):
    """Positioning copy for one (name, vibe) pair."""

    model_config = {"frozen": True}

    archetype: str
    tagline: str
    mission: str
    vision: str
    values: list[str]
    audience: str
    voice: BrandVoice
    marketing: MarketingCopy


def archetype_for_vibe(vibe: str | None) -> Archetype:
    """Return the bank for *vibe*; unknown vibes get the modern bank."""
    key = (vibe or "").strip().lower()
    return ARCHETYPES.get(key, ARCHETYPES[DEFAULT_VIBE])


def list_archetypes() -> list[tuple[str, Archetype]]:
    return [(str(vibe), archetype) for vibe, archetype in ARCHETYPES.items()]


def generate_strategy(name: str, vibe: str | None) -> BrandStrategy:
    bank = archetype_for_vibe(vibe)
    name = name or ""
    vibe_text = (vibe or "").strip().lower() or str(DEFAULT_VIBE)
    seed = len(name)
    first, second, third = bank.traits
    return BrandStrategy(
        archetype=bank.name,
        tagline=bank.taglines[seed % len(bank.taglines)],
        mission=f"To bring {first.lower()} and {second.lower()} to a world that needs it.",
        vision=f"A future where {name} defines the standard for {vibe_text} innovation.",
        values=list(bank.values),
        audience=bank.audience,
        voice=BrandVoice(
            tone=bank.voice,
            dos=[f"Be {first.lower()}", "Focus on the user benefit", "Keep it simple"],
            donts=[
                "Don't overcomplicate",
                f"Don't be {'timid' if vibe_text == Vibe.BOLD else 'aggressive'}",
                "Avoid jargon",
            ],
        ),
        marketing=MarketingCopy(
            headline=f"{first}. {second}.",
            subhead=f"We are {name}. We believe in {third.lower()} above all else.",
            about=(
                f"{name} was founded on a simple premise: that {vibe_text} design "
                f"shouldn't be a luxury. We combine {first.lower()} thinking with "
                f"{second.lower()} execution."
            ),
        ),
    )
