"""Unit tests for theme configuration and the theme cascade."""

from dataclasses import replace

import pytest

from folio.contexts.editing import set_visibility
from folio.contexts.theming import (
    SectionConfig,
    SectionKind,
    ThemeConfig,
    resolve_root_style,
    resolve_style,
)
from folio.contexts.theming.defaults import (
    DEFAULT_BACKGROUND_COLOR,
    DEFAULT_TEXT_COLOR,
    font_choices,
    get_palette,
)


@pytest.mark.unit
def test_default_theme_is_complete():
    theme = ThemeConfig.default()

    assert set(theme.sections) == set(SectionKind)
    assert all(config.visible for config in theme.sections.values())
    assert theme.header_style == "standard"
    assert theme.section("hero").layout == "split"
    assert theme.section("contact").background_color == "#111827"


@pytest.mark.unit
def test_from_dict_fills_missing_fields():
    theme = ThemeConfig.from_dict(
        {"primary_color": "#000000", "sections": {"projects": {"layout": "minimal"}}}
    )

    assert theme.primary_color == "#000000"
    assert theme.heading_font == "Inter"
    assert theme.section("projects").layout == "minimal"
    assert theme.section("projects").visible is True
    assert set(theme.sections) == set(SectionKind)


@pytest.mark.unit
def test_stale_layout_survives_round_trip():
    """Stored layouts are kept verbatim; interpretation happens at render time."""
    theme = ThemeConfig.from_dict({"sections": {"experience": {"layout": "timeline"}}})

    assert theme.section("experience").layout == "timeline"
    assert ThemeConfig.from_dict(theme.to_dict()) == theme


@pytest.mark.unit
def test_resolve_style_merges_global_and_section_tokens():
    theme = ThemeConfig.default()
    theme = replace(
        theme,
        heading_font="Playfair Display",
        primary_color="#0EA5E9",
        sections={
            **theme.sections,
            SectionKind.PROJECTS: replace(theme.section("projects"), background_color="#000000"),
        },
    )

    style = resolve_style(theme, "projects")

    assert style.heading_font == "Playfair Display"
    assert style.primary_color == "#0EA5E9"
    assert style.background_color == "#000000"
    assert style.text_color == theme.section("projects").text_color


@pytest.mark.unit
def test_resolve_style_blank_tokens_fall_back():
    theme = ThemeConfig.default()
    about = replace(theme.section("about"), background_color=" ", text_color="")
    theme = replace(theme, body_font="  ", sections={**theme.sections, SectionKind.ABOUT: about})
    style = resolve_style(theme, "about")

    assert style.body_font == "Inter"
    assert style.background_color == DEFAULT_BACKGROUND_COLOR
    assert style.text_color == DEFAULT_TEXT_COLOR


@pytest.mark.unit
def test_section_fallback_when_kind_missing():
    theme = replace(ThemeConfig.default(), sections={})
    assert theme.section("education") == SectionConfig.default(SectionKind.EDUCATION)
    assert set(theme.sections) == set(SectionKind)


@pytest.mark.unit
def test_partial_theme_colors_stable_across_edits():
    theme = ThemeConfig(
        heading_font="Inter",
        body_font="Inter",
        primary_color="#3B82F6",
        accent_color="#10B981",
        header_style="standard",
    )
    before = resolve_style(theme, "contact")
    after = resolve_style(set_visibility(theme, "contact", True), "contact")

    assert before.background_color == "#111827"
    assert after == before
    assert theme.section("contact").background_color == before.background_color


@pytest.mark.unit
def test_partial_theme_survives_dict_round_trip():
    theme = ThemeConfig(
        heading_font="Inter",
        body_font="Inter",
        primary_color="#3B82F6",
        accent_color="#10B981",
        header_style="centered",
        sections={"hero": SectionConfig(True, "#000000", "#ffffff", "centered")},
    )
    assert ThemeConfig.from_dict(theme.to_dict()) == theme
    assert theme.section(SectionKind.HERO).layout == "centered"


@pytest.mark.unit
def test_root_style_uses_page_colors():
    root = resolve_root_style(ThemeConfig.default())
    assert root.background_color == DEFAULT_BACKGROUND_COLOR
    assert root.accent_color == "#10B981"


@pytest.mark.unit
def test_presets():
    assert "Inter" in font_choices()
    assert get_palette("Ocean") == {"name": "Ocean", "primary": "#0EA5E9", "accent": "#F472B6"}

    with pytest.raises(ValueError, match="not found"):
        get_palette("neon")
