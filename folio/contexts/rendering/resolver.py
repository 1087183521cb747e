"""
Section Resolver

Turns one section's configuration plus its slice of portfolio data into either
nothing (the section is hidden) or a SectionInstruction: the validated layout
variant, the structural arrangement that variant implies, the content to place
into it, and the resolved style context.

Variants change structure, not only styling. Each section kind has an explicit
decision table from its variant enum to a frozen arrangement record, e.g. the
split experience layout moves dates into their own column and the minimal
projects layout drops descriptions and technology tags. Tables are checked
against the catalog at import time, so a catalog variant without a row is an
import error rather than a blank section.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Sequence, Tuple, Union

from folio.contexts.portfolio.model import Education, Experience, Portfolio, Profile, Project
from folio.contexts.rendering.logger import _log_warning
from folio.contexts.theming.cascade import StyleContext
from folio.contexts.theming.catalog import (
    LAYOUT_CATALOG,
    AboutLayout,
    ContactLayout,
    EducationLayout,
    ExperienceLayout,
    HeroLayout,
    LayoutVariant,
    ProjectsLayout,
    SectionKind,
    coerce_variant,
    is_valid_variant,
    section_kind,
)
from folio.contexts.theming.theme import SectionConfig

# --- Arrangements (one record type per section kind) ---


@dataclass(frozen=True)
class HeroArrangement:
    align: str  # "left" | "center"
    show_avatar: bool
    avatar_shape: str  # "portrait" | "round"
    oversized_name: bool
    center_actions: bool  # summary block and action row centered under the name
    wide: bool


@dataclass(frozen=True)
class AboutArrangement:
    align: str
    wide: bool


@dataclass(frozen=True)
class ExperienceArrangement:
    columns: int
    heading_align: str
    accent_rule: bool
    date_column: bool  # dates in a separate column instead of beside the role
    show_description: bool
    item_style: str  # "timeline" | "row" | "card" | "divider"
    current_label: str
    wide: bool


@dataclass(frozen=True)
class ProjectsArrangement:
    columns: int
    accent_rule: bool
    thumbnail: Optional[str]  # "card" | "side" | None
    show_description: bool
    max_technologies: int
    link_style: str  # "button" | "icon"
    item_style: str  # "card" | "row" | "divider"
    wide: bool


@dataclass(frozen=True)
class EducationArrangement:
    columns: int
    accent_rule: bool
    wide: bool


@dataclass(frozen=True)
class ContactArrangement:
    columns: int
    align: str
    call_to_action: bool
    contact_form: bool
    wide: bool


Arrangement = Union[
    HeroArrangement,
    AboutArrangement,
    ExperienceArrangement,
    ProjectsArrangement,
    EducationArrangement,
    ContactArrangement,
]

# --- Decision tables ---

HERO_TABLE: Dict[HeroLayout, HeroArrangement] = {
    HeroLayout.STANDARD: HeroArrangement(
        align="center",
        show_avatar=True,
        avatar_shape="round",
        oversized_name=False,
        center_actions=False,
        wide=False,
    ),
    HeroLayout.CENTERED: HeroArrangement(
        align="center",
        show_avatar=True,
        avatar_shape="round",
        oversized_name=False,
        center_actions=True,
        wide=False,
    ),
    HeroLayout.SPLIT: HeroArrangement(
        align="left",
        show_avatar=True,
        avatar_shape="portrait",
        oversized_name=False,
        center_actions=False,
        wide=True,
    ),
    HeroLayout.MINIMAL: HeroArrangement(
        align="center",
        show_avatar=False,
        avatar_shape="round",
        oversized_name=True,
        center_actions=False,
        wide=False,
    ),
}

ABOUT_TABLE: Dict[AboutLayout, AboutArrangement] = {
    AboutLayout.CENTERED: AboutArrangement(align="center", wide=False),
    AboutLayout.STANDARD: AboutArrangement(align="left", wide=False),
}

EXPERIENCE_TABLE: Dict[ExperienceLayout, ExperienceArrangement] = {
    ExperienceLayout.STANDARD: ExperienceArrangement(
        columns=1,
        heading_align="center",
        accent_rule=True,
        date_column=False,
        show_description=True,
        item_style="timeline",
        current_label="Present",
        wide=False,
    ),
    ExperienceLayout.SPLIT: ExperienceArrangement(
        columns=1,
        heading_align="left",
        accent_rule=True,
        date_column=True,
        show_description=True,
        item_style="row",
        current_label="Now",
        wide=True,
    ),
    ExperienceLayout.CARDS: ExperienceArrangement(
        columns=2,
        heading_align="center",
        accent_rule=True,
        date_column=False,
        show_description=True,
        item_style="card",
        current_label="Present",
        wide=False,
    ),
    ExperienceLayout.MINIMAL: ExperienceArrangement(
        columns=1,
        heading_align="center",
        accent_rule=False,
        date_column=False,
        show_description=False,
        item_style="divider",
        current_label="Present",
        wide=False,
    ),
}

PROJECTS_TABLE: Dict[ProjectsLayout, ProjectsArrangement] = {
    ProjectsLayout.GRID: ProjectsArrangement(
        columns=3,
        accent_rule=True,
        thumbnail="card",
        show_description=True,
        max_technologies=2,
        link_style="button",
        item_style="card",
        wide=False,
    ),
    ProjectsLayout.CARDS: ProjectsArrangement(
        columns=2,
        accent_rule=True,
        thumbnail="card",
        show_description=True,
        max_technologies=4,
        link_style="button",
        item_style="card",
        wide=False,
    ),
    ProjectsLayout.STANDARD: ProjectsArrangement(
        columns=1,
        accent_rule=True,
        thumbnail="side",
        show_description=True,
        max_technologies=4,
        link_style="button",
        item_style="row",
        wide=False,
    ),
    ProjectsLayout.MINIMAL: ProjectsArrangement(
        columns=1,
        accent_rule=False,
        thumbnail=None,
        show_description=False,
        max_technologies=0,
        link_style="icon",
        item_style="divider",
        wide=False,
    ),
}

EDUCATION_TABLE: Dict[EducationLayout, EducationArrangement] = {
    EducationLayout.STANDARD: EducationArrangement(columns=1, accent_rule=True, wide=False),
    EducationLayout.CARDS: EducationArrangement(columns=2, accent_rule=True, wide=False),
}

CONTACT_TABLE: Dict[ContactLayout, ContactArrangement] = {
    ContactLayout.CENTERED: ContactArrangement(
        columns=1, align="center", call_to_action=True, contact_form=False, wide=False
    ),
    ContactLayout.SPLIT: ContactArrangement(
        columns=2, align="left", call_to_action=False, contact_form=True, wide=True
    ),
    ContactLayout.MINIMAL: ContactArrangement(
        columns=1, align="center", call_to_action=True, contact_form=False, wide=False
    ),
}

DECISION_TABLES: Dict[SectionKind, Dict[Any, Arrangement]] = {
    SectionKind.HERO: HERO_TABLE,
    SectionKind.ABOUT: ABOUT_TABLE,
    SectionKind.EXPERIENCE: EXPERIENCE_TABLE,
    SectionKind.PROJECTS: PROJECTS_TABLE,
    SectionKind.EDUCATION: EDUCATION_TABLE,
    SectionKind.CONTACT: CONTACT_TABLE,
}


def _check_tables_cover_catalog() -> None:
    for kind, layout_enum in LAYOUT_CATALOG.items():
        table = DECISION_TABLES.get(kind, {})
        missing = [variant.value for variant in layout_enum if variant not in table]
        if missing:
            raise ImportError(f"No arrangement for {kind.value} layouts: {missing}")


_check_tables_cover_catalog()


# --- Content placed into a variant's slots ---


@dataclass(frozen=True)
class SocialLink:
    kind: str  # "github" | "linkedin" | "email"
    url: str


@dataclass(frozen=True)
class HeroContent:
    full_name: str
    title: str
    summary: str
    avatar: Optional[str]
    links: Tuple[SocialLink, ...]


@dataclass(frozen=True)
class AboutContent:
    summary: str
    skills: Tuple[str, ...]


@dataclass(frozen=True)
class ExperienceItem:
    id: str
    role: str
    company: str
    start_date: str
    end_label: str
    description: Optional[str]

    @property
    def date_range(self) -> str:
        return " - ".join(part for part in (self.start_date, self.end_label) if part)


@dataclass(frozen=True)
class ProjectItem:
    id: str
    title: str
    description: Optional[str]
    technologies: Tuple[str, ...]
    link: Optional[str]


@dataclass(frozen=True)
class EducationItem:
    id: str
    institution: str
    degree: str
    year: str


@dataclass(frozen=True)
class EntryListContent:
    """Content for list sections. An empty tuple still renders the section container."""

    heading: str
    items: Tuple[Any, ...]


@dataclass(frozen=True)
class ContactContent:
    headline: str
    blurb: str
    email: str
    links: Tuple[SocialLink, ...]


SectionContent = Union[HeroContent, AboutContent, EntryListContent, ContactContent]


@dataclass(frozen=True)
class SectionInstruction:
    """
    Fully specified instruction for rendering one visible section.

    Attributes:
        kind: Section kind
        variant: Catalog variant actually used (the configured one, or the default)
        style: Resolved style context
        arrangement: Structural arrangement from the kind's decision table
        content: Data placed into the arrangement
    """

    kind: SectionKind
    variant: LayoutVariant
    style: StyleContext
    arrangement: Arrangement
    content: SectionContent

    @property
    def anchor(self) -> str:
        return self.kind.value


# --- Per-kind content builders ---


def _social_links(profile: Profile, kinds: Sequence[str]) -> Tuple[SocialLink, ...]:
    """Links for the given kinds, in that order, skipping fields the profile leaves empty."""
    urls = {
        "github": profile.github,
        "linkedin": profile.linkedin,
        "email": f"mailto:{profile.email}" if profile.email else None,
    }
    return tuple(SocialLink(kind, urls[kind]) for kind in kinds if urls[kind])


def _hero_content(arrangement: HeroArrangement, profile: Profile) -> HeroContent:
    show_avatar = arrangement.show_avatar and bool(profile.profile_picture)
    return HeroContent(
        full_name=profile.full_name,
        title=profile.title,
        summary=profile.summary,
        avatar=profile.profile_picture if show_avatar else None,
        links=_social_links(profile, ("github", "linkedin")),
    )


def _about_content(arrangement: AboutArrangement, profile: Profile) -> AboutContent:
    return AboutContent(summary=profile.summary, skills=tuple(profile.skills))


def _experience_content(
    arrangement: ExperienceArrangement, entries: Sequence[Experience]
) -> EntryListContent:
    items = tuple(
        ExperienceItem(
            id=exp.id,
            role=exp.role,
            company=exp.company,
            start_date=exp.start_date,
            end_label=arrangement.current_label if exp.current else exp.end_date,
            description=exp.description if arrangement.show_description else None,
        )
        for exp in entries
    )
    return EntryListContent(heading="Experience", items=items)


def _projects_content(
    arrangement: ProjectsArrangement, entries: Sequence[Project]
) -> EntryListContent:
    items = tuple(
        ProjectItem(
            id=proj.id,
            title=proj.title,
            description=proj.description if arrangement.show_description else None,
            technologies=tuple(proj.technologies[: arrangement.max_technologies]),
            link=proj.link or None,
        )
        for proj in entries
    )
    return EntryListContent(heading="Selected Works", items=items)


def _education_content(
    arrangement: EducationArrangement, entries: Sequence[Education]
) -> EntryListContent:
    items = tuple(
        EducationItem(id=edu.id, institution=edu.institution, degree=edu.degree, year=edu.year)
        for edu in entries
    )
    return EntryListContent(heading="Education", items=items)


def _contact_content(arrangement: ContactArrangement, profile: Profile) -> ContactContent:
    return ContactContent(
        headline="Get In Touch",
        blurb="I'm currently open to new opportunities. Let's build something great together.",
        email=profile.email,
        links=_social_links(profile, ("linkedin", "github", "email")),
    )


CONTENT_BUILDERS: Dict[SectionKind, Callable[[Any, Any], SectionContent]] = {
    SectionKind.HERO: _hero_content,
    SectionKind.ABOUT: _about_content,
    SectionKind.EXPERIENCE: _experience_content,
    SectionKind.PROJECTS: _projects_content,
    SectionKind.EDUCATION: _education_content,
    SectionKind.CONTACT: _contact_content,
}


def section_data(kind: Union[str, SectionKind], portfolio: Portfolio) -> Any:
    """
    Slice of portfolio data a section kind renders.

    Profile-based sections get the profile; list sections get their entries.
    """
    kind = section_kind(kind)
    if kind in (SectionKind.HERO, SectionKind.ABOUT, SectionKind.CONTACT):
        return portfolio.profile
    elif kind == SectionKind.EXPERIENCE:
        return portfolio.experience
    elif kind == SectionKind.PROJECTS:
        return portfolio.projects
    elif kind == SectionKind.EDUCATION:
        return portfolio.education
    raise ValueError(f"No data slice for section kind '{kind.value}'")


def resolve_section(
    kind: Union[str, SectionKind],
    config: SectionConfig,
    data: Any,
    style: StyleContext,
) -> Optional[SectionInstruction]:
    """
    Resolve one section into a render instruction.

    Args:
        kind: Section kind
        config: The section's configuration
        data: The section's data slice (see section_data())
        style: Style context from the theme cascade

    Returns:
        None when the section is hidden, otherwise a SectionInstruction.
        Hidden is decided by ``config.visible`` alone; an empty entry list
        still yields an instruction with zero items.
    """
    kind = section_kind(kind)
    if not config.visible:
        return None

    variant = coerce_variant(kind, config.layout)
    if not is_valid_variant(kind, config.layout):
        _log_warning(f"Unknown {kind.value} layout '{config.layout}', using '{variant.value}'")

    arrangement = DECISION_TABLES[kind][variant]
    content = CONTENT_BUILDERS[kind](arrangement, data)

    return SectionInstruction(
        kind=kind,
        variant=variant,
        style=style,
        arrangement=arrangement,
        content=content,
    )
