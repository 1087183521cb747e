"""
Theme Configuration

Structured representation of the custom theme: global typography and color
tokens, the page header style, and one SectionConfig per section kind.

Both classes are frozen. Editing produces new instances (see
folio.contexts.editing.editor) so a renderer never observes a half-applied
change.

Layout ids are stored as given. A stored id that the catalog no longer knows
survives a save/load round trip unchanged and is corrected to the kind's
default when the section is resolved for rendering.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Union

from folio.contexts.theming.catalog import SectionKind, section_kind
from folio.contexts.theming.defaults import (
    get_default_section_config,
    get_default_theme,
)


@dataclass(frozen=True)
class SectionConfig:
    """
    Display settings for one section.

    Attributes:
        visible: Whether the section (and its navigation entry) is rendered
        background_color: Opaque color token
        text_color: Opaque color token
        layout: Variant id, valid within the section kind's catalog set
    """

    visible: bool
    background_color: str
    text_color: str
    layout: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "visible": self.visible,
            "background_color": self.background_color,
            "text_color": self.text_color,
            "layout": self.layout,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], kind: SectionKind) -> "SectionConfig":
        """Build from a stored dict, taking missing fields from the kind's defaults."""
        merged = {**get_default_section_config(kind), **(data or {})}
        return cls(
            visible=bool(merged["visible"]),
            background_color=merged["background_color"],
            text_color=merged["text_color"],
            layout=merged["layout"],
        )

    @classmethod
    def default(cls, kind: SectionKind) -> "SectionConfig":
        return cls.from_dict({}, kind)


@dataclass(frozen=True)
class ThemeConfig:
    """
    Complete custom theme.

    Attributes:
        heading_font: Typeface for headings
        body_font: Typeface for body text
        primary_color: Global primary color token
        accent_color: Global accent color token
        header_style: "standard", "centered" or "minimal"
        sections: Section kind -> SectionConfig, one entry per kind
    """

    heading_font: str
    body_font: str
    primary_color: str
    accent_color: str
    header_style: str
    sections: Dict[SectionKind, SectionConfig] = field(default_factory=dict)

    def __post_init__(self):
        # Fill every kind so rendering, editing and serialization agree
        given = {section_kind(kind): config for kind, config in self.sections.items()}
        full = {kind: given.get(kind) or SectionConfig.default(kind) for kind in SectionKind}
        object.__setattr__(self, "sections", full)

    def section(self, kind: Union[str, SectionKind]) -> SectionConfig:
        """
        Get the config for a section kind.

        Kinds missing from ``sections`` get the default config.
        """
        kind = section_kind(kind)
        config = self.sections.get(kind)
        return config if config is not None else SectionConfig.default(kind)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "heading_font": self.heading_font,
            "body_font": self.body_font,
            "primary_color": self.primary_color,
            "accent_color": self.accent_color,
            "header_style": self.header_style,
            "sections": {kind.value: config.to_dict() for kind, config in self.sections.items()},
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ThemeConfig":
        """
        Build from a stored dict.

        Fields and section kinds missing from the payload are filled with
        defaults. Unknown section kinds in the payload are ignored.
        """
        defaults = get_default_theme()
        data = data or {}
        stored_sections = data.get("sections") or {}

        sections = {}
        for kind in SectionKind:
            sections[kind] = SectionConfig.from_dict(stored_sections.get(kind.value), kind)

        return cls(
            heading_font=data.get("heading_font", defaults["heading_font"]),
            body_font=data.get("body_font", defaults["body_font"]),
            primary_color=data.get("primary_color", defaults["primary_color"]),
            accent_color=data.get("accent_color", defaults["accent_color"]),
            header_style=data.get("header_style", defaults["header_style"]),
            sections=sections,
        )

    @classmethod
    def default(cls) -> "ThemeConfig":
        """Theme with every section visible and default fonts, colors and layouts."""
        return cls.from_dict(get_default_theme())
