"""
Layout Variant Catalog

Static table of section kinds and the layout variants each kind supports.
This is the single source of truth for what the theme editor may offer and
what the section resolver must render.

Each section kind has its own variant enum, so a variant id can only be
interpreted within its kind (``split`` for hero is not ``split`` for contact).

Examples:
    >>> is_valid_variant("projects", "grid")
    True
    >>> is_valid_variant("education", "split")
    False
    >>> coerce_variant("contact", "carousel")
    <ContactLayout.CENTERED: 'centered'>
"""

from enum import Enum
from typing import Dict, Optional, Tuple, Type, Union


class SectionKind(str, Enum):
    HERO = "hero"
    ABOUT = "about"
    EXPERIENCE = "experience"
    PROJECTS = "projects"
    EDUCATION = "education"
    CONTACT = "contact"


class HeaderStyle(str, Enum):
    """Page header arrangement. Separate from section layouts."""

    STANDARD = "standard"
    CENTERED = "centered"
    MINIMAL = "minimal"


class HeroLayout(str, Enum):
    STANDARD = "standard"
    CENTERED = "centered"
    SPLIT = "split"
    MINIMAL = "minimal"


class AboutLayout(str, Enum):
    CENTERED = "centered"
    STANDARD = "standard"


class ExperienceLayout(str, Enum):
    STANDARD = "standard"
    SPLIT = "split"
    CARDS = "cards"
    MINIMAL = "minimal"


class ProjectsLayout(str, Enum):
    GRID = "grid"
    CARDS = "cards"
    STANDARD = "standard"
    MINIMAL = "minimal"


class EducationLayout(str, Enum):
    STANDARD = "standard"
    CARDS = "cards"


class ContactLayout(str, Enum):
    CENTERED = "centered"
    SPLIT = "split"
    MINIMAL = "minimal"


LayoutVariant = Union[
    HeroLayout, AboutLayout, ExperienceLayout, ProjectsLayout, EducationLayout, ContactLayout
]

# Enum member order is the order the editor offers variants in
LAYOUT_CATALOG: Dict[SectionKind, Type[Enum]] = {
    SectionKind.HERO: HeroLayout,
    SectionKind.ABOUT: AboutLayout,
    SectionKind.EXPERIENCE: ExperienceLayout,
    SectionKind.PROJECTS: ProjectsLayout,
    SectionKind.EDUCATION: EducationLayout,
    SectionKind.CONTACT: ContactLayout,
}

# Variant used when a section is initialized or a stored variant is unrecognized
DEFAULT_VARIANTS: Dict[SectionKind, LayoutVariant] = {
    SectionKind.HERO: HeroLayout.SPLIT,
    SectionKind.ABOUT: AboutLayout.CENTERED,
    SectionKind.EXPERIENCE: ExperienceLayout.STANDARD,
    SectionKind.PROJECTS: ProjectsLayout.GRID,
    SectionKind.EDUCATION: EducationLayout.STANDARD,
    SectionKind.CONTACT: ContactLayout.CENTERED,
}

DEFAULT_HEADER_STYLE = HeaderStyle.STANDARD


def section_kind(kind: Union[str, SectionKind]) -> SectionKind:
    """
    Normalize a section kind given as a string.

    Raises:
        ValueError: If kind is not a known section kind
    """
    try:
        return SectionKind(kind)
    except ValueError:
        valid = [k.value for k in SectionKind]
        raise ValueError(f"Unknown section kind '{kind}'. Valid kinds: {valid}") from None


def variants_for(kind: Union[str, SectionKind]) -> Tuple[str, ...]:
    """Variant ids valid for a section kind, in catalog order."""
    return tuple(v.value for v in LAYOUT_CATALOG[section_kind(kind)])


def is_valid_variant(kind: Union[str, SectionKind], variant: Optional[str]) -> bool:
    """Check whether variant is in the catalog set for kind."""
    return variant in variants_for(kind)


def default_variant(kind: Union[str, SectionKind]) -> LayoutVariant:
    """Default variant for a section kind."""
    return DEFAULT_VARIANTS[section_kind(kind)]


def coerce_variant(kind: Union[str, SectionKind], variant: Optional[str]) -> LayoutVariant:
    """
    Interpret a raw variant id for a section kind.

    Unrecognized or missing ids fall back to the kind's default instead of
    failing: stored configurations may predate catalog changes.

    Args:
        kind: Section kind
        variant: Raw variant id (may be stale, empty or None)

    Returns:
        Member of the kind's variant enum
    """
    layout_enum = LAYOUT_CATALOG[section_kind(kind)]
    try:
        return layout_enum(variant)
    except ValueError:
        return default_variant(kind)


def coerce_header_style(style: Optional[str]) -> HeaderStyle:
    """Interpret a raw header style, falling back to the default style."""
    try:
        return HeaderStyle(style)
    except ValueError:
        return DEFAULT_HEADER_STYLE
