"""
Theme Editor

Mutation operations for the custom theme. Every operation takes a ThemeConfig
and returns a new one; the input is never modified, so readers holding the old
value never see a partial change.

Policy for out-of-catalog choices: clamp. An unknown layout becomes the
section kind's default variant and an unknown header style becomes
"standard", each with a logged warning. Color and font tokens are opaque, but
blank tokens are refused here at the editor boundary.

Examples:
    >>> theme = ThemeConfig.default()
    >>> theme = set_layout(theme, "experience", "split")
    >>> theme = apply_palette(theme, "#0EA5E9", "#F472B6")
    >>> theme = set_visibility(theme, "education", False)
"""

from dataclasses import replace
from pathlib import Path
from typing import Optional, Union

from folio.contexts.editing.logger import _log_debug, _log_warning
from folio.contexts.theming.catalog import (
    SectionKind,
    coerce_header_style,
    coerce_variant,
    is_valid_variant,
    section_kind,
)
from folio.contexts.theming.defaults import get_palette
from folio.contexts.theming.theme import ThemeConfig

Kind = Union[str, SectionKind]


def _clean_token(value: str, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValueError(f"{field_name} cannot be blank")
    return str(value).strip()


def _with_section(theme: ThemeConfig, kind: SectionKind, **changes) -> ThemeConfig:
    sections = dict(theme.sections)
    sections[kind] = replace(theme.section(kind), **changes)
    return replace(theme, sections=sections)


def set_visibility(theme: ThemeConfig, kind: Kind, visible: bool) -> ThemeConfig:
    """
    Show or hide a section.

    Raises:
        ValueError: If kind is not a known section kind
    """
    kind = section_kind(kind)
    _log_debug(f"{kind.value}: visible={bool(visible)}")
    return _with_section(theme, kind, visible=bool(visible))


def set_layout(theme: ThemeConfig, kind: Kind, variant: str) -> ThemeConfig:
    """
    Choose a layout variant for a section.

    Variants outside the kind's catalog set are clamped to the kind's default.

    Returns:
        Theme whose section layout is ``variant`` if valid, else the default variant
    """
    kind = section_kind(kind)
    layout = coerce_variant(kind, variant)
    if not is_valid_variant(kind, variant):
        _log_warning(
            f"'{variant}' is not a {kind.value} layout, using default '{layout.value}'"
        )
    return _with_section(theme, kind, layout=layout.value)


def set_colors(
    theme: ThemeConfig,
    kind: Kind,
    background: Optional[str] = None,
    text: Optional[str] = None,
) -> ThemeConfig:
    """
    Set a section's background and/or text color. None leaves a color unchanged.

    Raises:
        ValueError: If a given color is blank
    """
    kind = section_kind(kind)
    changes = {}
    if background is not None:
        changes["background_color"] = _clean_token(background, "background color")
    if text is not None:
        changes["text_color"] = _clean_token(text, "text color")
    if not changes:
        return theme
    return _with_section(theme, kind, **changes)


def set_global_tokens(
    theme: ThemeConfig,
    heading_font: Optional[str] = None,
    body_font: Optional[str] = None,
    primary_color: Optional[str] = None,
    accent_color: Optional[str] = None,
) -> ThemeConfig:
    """
    Set global fonts and colors. None leaves a token unchanged.

    Raises:
        ValueError: If a given token is blank
    """
    changes = {}
    if heading_font is not None:
        changes["heading_font"] = _clean_token(heading_font, "heading font")
    if body_font is not None:
        changes["body_font"] = _clean_token(body_font, "body font")
    if primary_color is not None:
        changes["primary_color"] = _clean_token(primary_color, "primary color")
    if accent_color is not None:
        changes["accent_color"] = _clean_token(accent_color, "accent color")
    return replace(theme, **changes) if changes else theme


def set_header_style(theme: ThemeConfig, style: str) -> ThemeConfig:
    """Set the header style, clamping unknown styles to "standard"."""
    header_style = coerce_header_style(style)
    if header_style.value != style:
        _log_warning(f"'{style}' is not a header style, using '{header_style.value}'")
    return replace(theme, header_style=header_style.value)


def apply_palette(theme: ThemeConfig, primary: str, accent: str) -> ThemeConfig:
    """
    Set primary and accent colors together.

    Both tokens are validated before either is applied, and the result is a
    single new ThemeConfig, so no reader can see one color changed without
    the other.

    Raises:
        ValueError: If either color is blank (theme unchanged)
    """
    primary = _clean_token(primary, "primary color")
    accent = _clean_token(accent, "accent color")
    return replace(theme, primary_color=primary, accent_color=accent)


def apply_named_palette(theme: ThemeConfig, palette_name: str, config_path: Path = None) -> ThemeConfig:
    """
    Apply one of the preset palettes (e.g., "ocean").

    Raises:
        ValueError: If palette not found
    """
    palette = get_palette(palette_name, config_path)
    _log_debug(f"Applying palette {palette['name']}")
    return apply_palette(theme, palette["primary"], palette["accent"])
