"""
Theme Cascade

Merges global theme tokens with section-level overrides into one concrete
style context per section. Sections override background and text colors only;
fonts and primary/accent colors always come from the global tokens.
"""

from dataclasses import dataclass
from typing import Optional, Union

from folio.contexts.theming.catalog import SectionKind, section_kind
from folio.contexts.theming.defaults import (
    DEFAULT_BACKGROUND_COLOR,
    DEFAULT_COLORS,
    DEFAULT_FONTS,
    DEFAULT_TEXT_COLOR,
)
from folio.contexts.theming.theme import ThemeConfig


@dataclass(frozen=True)
class StyleContext:
    """Concrete style values for one section. Every field is always set."""

    heading_font: str
    body_font: str
    primary_color: str
    accent_color: str
    background_color: str
    text_color: str


def _token(value: Optional[str], fallback: str) -> str:
    # Blank tokens count as absent
    if value is None or not str(value).strip():
        return fallback
    return value


def resolve_style(theme: ThemeConfig, kind: Union[str, SectionKind]) -> StyleContext:
    """
    Resolve the style context for one section.

    Args:
        theme: Custom theme configuration
        kind: Section kind

    Returns:
        StyleContext with global tokens beneath the section's color overrides
    """
    kind = section_kind(kind)
    heading_font = _token(theme.heading_font, DEFAULT_FONTS["heading_font"])
    body_font = _token(theme.body_font, DEFAULT_FONTS["body_font"])
    primary_color = _token(theme.primary_color, DEFAULT_COLORS["primary_color"])
    accent_color = _token(theme.accent_color, DEFAULT_COLORS["accent_color"])

    config = theme.section(kind)
    background_color = _token(config.background_color, DEFAULT_BACKGROUND_COLOR)
    text_color = _token(config.text_color, DEFAULT_TEXT_COLOR)

    return StyleContext(
        heading_font=heading_font,
        body_font=body_font,
        primary_color=primary_color,
        accent_color=accent_color,
        background_color=background_color,
        text_color=text_color,
    )


def resolve_root_style(theme: ThemeConfig) -> StyleContext:
    """Page-level style: global tokens on the default page colors."""
    return StyleContext(
        heading_font=_token(theme.heading_font, DEFAULT_FONTS["heading_font"]),
        body_font=_token(theme.body_font, DEFAULT_FONTS["body_font"]),
        primary_color=_token(theme.primary_color, DEFAULT_COLORS["primary_color"]),
        accent_color=_token(theme.accent_color, DEFAULT_COLORS["accent_color"]),
        background_color=DEFAULT_BACKGROUND_COLOR,
        text_color=DEFAULT_TEXT_COLOR,
    )
