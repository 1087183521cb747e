"""Unit tests for the portfolio document model."""

import pytest

from folio.contexts.portfolio import (
    ConfigurationError,
    Experience,
    IdGenerator,
    Portfolio,
    TemplateId,
    new_portfolio,
)
from folio.contexts.theming import ThemeConfig


@pytest.mark.unit
def test_custom_without_theme_rejected():
    with pytest.raises(ConfigurationError, match="no theme configuration"):
        Portfolio(id="p", name="Broken", template_id="custom", custom_theme=None)


@pytest.mark.unit
def test_fixed_template_without_theme_allowed():
    portfolio = Portfolio(id="p", name="Plain", template_id="classic")
    assert not portfolio.is_custom


@pytest.mark.unit
def test_unknown_template_rejected():
    with pytest.raises(ConfigurationError, match="Unknown template"):
        Portfolio(id="p", name="?", template_id="retro")


@pytest.mark.unit
def test_id_generator_strictly_increasing():
    ids = IdGenerator()
    issued = [int(ids.next_id()) for _ in range(50)]
    assert issued == sorted(set(issued))


@pytest.mark.unit
def test_new_portfolio(ids):
    portfolio = new_portfolio(name="Mine", template_id="custom", email="me@example.com", ids=ids)

    assert portfolio.profile.email == "me@example.com"
    assert portfolio.custom_theme == ThemeConfig.default()
    for collection in ("experience", "projects", "education", "certifications", "languages"):
        assert len(portfolio.entries(collection)) == 1

    all_ids = [portfolio.id] + [
        entry.id
        for collection in ("experience", "projects", "education", "certifications", "languages")
        for entry in portfolio.entries(collection)
    ]
    assert len(set(all_ids)) == len(all_ids)


@pytest.mark.unit
def test_dict_round_trip(custom_portfolio):
    restored = Portfolio.from_dict(custom_portfolio.to_dict())
    assert restored == custom_portfolio


@pytest.mark.unit
def test_round_trip_keeps_zero_timestamp(custom_portfolio):
    custom_portfolio.last_modified = 0
    assert Portfolio.from_dict(custom_portfolio.to_dict()).last_modified == 0


@pytest.mark.unit
def test_round_trip_with_partial_theme(custom_portfolio):
    custom_portfolio.custom_theme = ThemeConfig(
        heading_font="Inter",
        body_font="Inter",
        primary_color="#3B82F6",
        accent_color="#10B981",
        header_style="standard",
    )
    assert Portfolio.from_dict(custom_portfolio.to_dict()) == custom_portfolio


@pytest.mark.unit
def test_from_dict_ignores_unknown_entry_fields():
    entry = Experience.from_dict({"id": 17, "role": "Dev", "legacyField": True})
    assert entry.id == "17"
    assert entry.role == "Dev"


@pytest.mark.unit
def test_removing_entry_keeps_other_ids(custom_portfolio):
    custom_portfolio.experience.pop(0)
    assert custom_portfolio.find_entry("experience", "e2").role == "Translator"
    assert custom_portfolio.find_entry("experience", "e1") is None


@pytest.mark.unit
def test_unknown_collection(custom_portfolio):
    with pytest.raises(ValueError, match="Unknown collection"):
        custom_portfolio.entries("awards")


@pytest.mark.unit
def test_copy_is_independent(custom_portfolio):
    working = custom_portfolio.copy()
    working.profile.skills.append("Poetry")
    assert "Poetry" not in custom_portfolio.profile.skills


@pytest.mark.unit
def test_template_ids():
    assert TemplateId("custom") is TemplateId.CUSTOM
    assert len(TemplateId) == 9
