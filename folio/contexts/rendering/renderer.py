"""
Document Renderer

Assembles a rendered portfolio from a Portfolio and its custom theme. Sections
are resolved in a fixed order; the navigation index is built in the same pass
from the same resolution results, so a section is navigable exactly when it is
rendered.

Rendering is read-only and deterministic: rendering the same portfolio twice
yields equal RenderedDocument values.
"""

import time
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple, Union

from folio.contexts.portfolio.exceptions import ConfigurationError, UnsupportedTemplateError
from folio.contexts.portfolio.model import Portfolio
from folio.contexts.rendering.logger import log_render_result
from folio.contexts.rendering.resolver import SectionInstruction, resolve_section, section_data
from folio.contexts.theming.cascade import StyleContext, resolve_root_style, resolve_style
from folio.contexts.theming.catalog import HeaderStyle, SectionKind, coerce_header_style, section_kind

# About is available but not part of the default page
DEFAULT_SECTION_ORDER: Tuple[SectionKind, ...] = (
    SectionKind.HERO,
    SectionKind.EXPERIENCE,
    SectionKind.PROJECTS,
    SectionKind.EDUCATION,
    SectionKind.CONTACT,
)

NAV_LABELS = {
    SectionKind.HERO: "Home",
    SectionKind.ABOUT: "About",
    SectionKind.EXPERIENCE: "Experience",
    SectionKind.PROJECTS: "Work",
    SectionKind.EDUCATION: "Education",
    SectionKind.CONTACT: "Contact",
}

SectionResolverFn = Callable[..., Optional[SectionInstruction]]


@dataclass(frozen=True)
class NavEntry:
    kind: SectionKind
    anchor: str
    label: str


@dataclass(frozen=True)
class PageHeader:
    """
    Page header (brand + navigation bar).

    Attributes:
        brand: Name shown in the header, linking to the top of the page
        style: Header arrangement
        text_color: Follows the hero section's text color
        collapsed_menu: Minimal headers show a menu toggle instead of inline links
    """

    brand: str
    style: HeaderStyle
    text_color: str
    collapsed_menu: bool


@dataclass(frozen=True)
class RenderedDocument:
    """
    Output of one render.

    Attributes:
        portfolio_id: Id of the rendered portfolio
        template_id: Always "custom" for this renderer
        root_style: Page-level fonts and colors
        header: Page header
        sections: Instructions for visible sections, in page order
        navigation: One entry per rendered section, in page order
    """

    portfolio_id: str
    template_id: str
    root_style: StyleContext
    header: PageHeader
    sections: Tuple[SectionInstruction, ...]
    navigation: Tuple[NavEntry, ...]

    def section(self, kind: Union[str, SectionKind]) -> Optional[SectionInstruction]:
        """The instruction for a kind, or None if the section was omitted."""
        kind = section_kind(kind)
        for instruction in self.sections:
            if instruction.kind == kind:
                return instruction
        return None

    @property
    def nav_anchors(self) -> Tuple[str, ...]:
        return tuple(entry.anchor for entry in self.navigation)


def _normalize_order(section_order: Sequence[Union[str, SectionKind]]) -> Tuple[SectionKind, ...]:
    order = tuple(section_kind(kind) for kind in section_order)
    duplicates = {kind.value for kind in order if order.count(kind) > 1}
    if duplicates:
        raise ValueError(f"Section order lists kinds more than once: {sorted(duplicates)}")
    return order


def render_document(
    portfolio: Portfolio,
    section_order: Sequence[Union[str, SectionKind]] = DEFAULT_SECTION_ORDER,
    resolve: SectionResolverFn = resolve_section,
) -> RenderedDocument:
    """
    Render a custom-template portfolio.

    Args:
        portfolio: Portfolio to render (read only)
        section_order: Section kinds in page order (default: DEFAULT_SECTION_ORDER)
        resolve: Section resolver, replaceable by a memoizing wrapper with the
                 same signature as resolve_section()

    Returns:
        RenderedDocument with sections and navigation from one resolution pass

    Raises:
        UnsupportedTemplateError: If the portfolio uses a fixed template
        ConfigurationError: If the portfolio uses the custom template without a theme
        ValueError: If section_order repeats or names unknown kinds
    """
    if not portfolio.is_custom:
        raise UnsupportedTemplateError(portfolio.template_id)

    theme = portfolio.custom_theme
    if theme is None:
        raise ConfigurationError(
            f"Portfolio '{portfolio.id}' uses the custom template but has no theme configuration"
        )

    start = time.perf_counter()
    order = _normalize_order(section_order)

    sections = []
    navigation = []
    for kind in order:
        instruction = resolve(
            kind,
            theme.section(kind),
            section_data(kind, portfolio),
            resolve_style(theme, kind),
        )
        if instruction is None:
            continue
        sections.append(instruction)
        navigation.append(NavEntry(kind=kind, anchor=instruction.anchor, label=NAV_LABELS[kind]))

    header_style = coerce_header_style(theme.header_style)
    header = PageHeader(
        brand=portfolio.profile.full_name,
        style=header_style,
        text_color=resolve_style(theme, SectionKind.HERO).text_color,
        collapsed_menu=header_style == HeaderStyle.MINIMAL,
    )

    document = RenderedDocument(
        portfolio_id=portfolio.id,
        template_id=portfolio.template_id,
        root_style=resolve_root_style(theme),
        header=header,
        sections=tuple(sections),
        navigation=tuple(navigation),
    )
    log_render_result(portfolio.name, document, time.perf_counter() - start)
    return document
