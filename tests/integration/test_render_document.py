"""
Integration tests for whole-document rendering.
Tests: theme configuration + portfolio data -> sections and navigation.
"""

from dataclasses import replace

import pytest

from folio.contexts.editing import set_header_style, set_layout, set_visibility
from folio.contexts.portfolio import (
    ConfigurationError,
    Portfolio,
    UnsupportedTemplateError,
    new_portfolio,
)
from folio.contexts.rendering import DEFAULT_SECTION_ORDER, render_document


@pytest.mark.integration
def test_default_render(custom_portfolio):
    document = render_document(custom_portfolio)

    kinds = [section.kind.value for section in document.sections]
    assert kinds == ["hero", "experience", "projects", "education", "contact"]
    assert [entry.label for entry in document.navigation] == [
        "Home",
        "Experience",
        "Work",
        "Education",
        "Contact",
    ]
    assert document.header.brand == "Ada Lovelace"
    assert document.template_id == "custom"


@pytest.mark.integration
def test_hidden_sections_absent_from_output_and_navigation(custom_portfolio):
    theme = set_visibility(custom_portfolio.custom_theme, "projects", False)
    theme = set_visibility(theme, "contact", False)
    custom_portfolio.custom_theme = theme

    document = render_document(custom_portfolio)

    assert document.section("projects") is None
    assert "projects" not in document.nav_anchors
    assert "contact" not in document.nav_anchors
    assert [s.anchor for s in document.sections] == list(document.nav_anchors)


@pytest.mark.integration
def test_rendering_is_idempotent(custom_portfolio):
    before = custom_portfolio.to_dict()
    assert render_document(custom_portfolio) == render_document(custom_portfolio)
    assert custom_portfolio.to_dict() == before


@pytest.mark.integration
def test_empty_education_cards_navigable(custom_portfolio):
    custom_portfolio.education = []
    custom_portfolio.custom_theme = set_layout(custom_portfolio.custom_theme, "education", "cards")

    document = render_document(custom_portfolio)

    assert document.section("education").content.items == ()
    assert "education" in document.nav_anchors


@pytest.mark.integration
def test_stale_layout_renders_default(custom_portfolio):
    theme = custom_portfolio.custom_theme
    sections = dict(theme.sections)
    kind = next(k for k in sections if k.value == "projects")
    sections[kind] = replace(sections[kind], layout="masonry")
    custom_portfolio.custom_theme = replace(theme, sections=sections)

    document = render_document(custom_portfolio)
    assert document.section("projects").variant.value == "grid"


@pytest.mark.integration
def test_custom_section_order_includes_about(custom_portfolio):
    document = render_document(custom_portfolio, section_order=["hero", "about", "contact"])
    assert document.nav_anchors == ("hero", "about", "contact")
    assert document.section("about").content.skills == ("Mathematics", "Notation")


@pytest.mark.integration
def test_duplicate_section_order_rejected(custom_portfolio):
    with pytest.raises(ValueError, match="more than once"):
        render_document(custom_portfolio, section_order=["hero", "hero"])


@pytest.mark.integration
def test_minimal_header_collapses_menu(custom_portfolio):
    custom_portfolio.custom_theme = set_header_style(custom_portfolio.custom_theme, "minimal")
    header = render_document(custom_portfolio).header
    assert header.collapsed_menu is True
    assert header.text_color == custom_portfolio.custom_theme.section("hero").text_color


@pytest.mark.integration
def test_fixed_template_unsupported(custom_portfolio):
    custom_portfolio.template_id = "classic"
    with pytest.raises(UnsupportedTemplateError):
        render_document(custom_portfolio)


@pytest.mark.integration
def test_custom_without_theme_rejected(custom_portfolio):
    # Bypass construction checks to simulate a corrupted working copy
    custom_portfolio.custom_theme = None
    with pytest.raises(ConfigurationError):
        render_document(custom_portfolio)

    with pytest.raises(ConfigurationError):
        Portfolio.from_dict({"id": "p", "name": "x", "template_id": "custom"})


@pytest.mark.integration
def test_new_custom_portfolio_renders(ids):
    portfolio = new_portfolio(template_id="custom", ids=ids)
    document = render_document(portfolio)
    assert len(document.sections) == len(DEFAULT_SECTION_ORDER)
