"""Shared fixtures for Folio tests."""

import pytest

from folio.contexts.portfolio import (
    Education,
    Experience,
    IdGenerator,
    Portfolio,
    Profile,
    Project,
)
from folio.contexts.theming import ThemeConfig


@pytest.fixture
def ids():
    return IdGenerator()


@pytest.fixture
def profile():
    return Profile(
        full_name="Ada Lovelace",
        title="Analytical Engineer",
        email="ada@example.com",
        summary="Writes programs for engines that do not exist yet.",
        linkedin="https://linkedin.com/in/ada",
        github="https://github.com/ada",
        skills=["Mathematics", "Notation"],
        profile_picture="data:image/png;base64,AAAA",
    )


@pytest.fixture
def custom_portfolio(profile):
    """Custom-template portfolio with the default theme and a few entries."""
    return Portfolio(
        id="p1",
        name="Ada's Portfolio",
        template_id="custom",
        profile=profile,
        experience=[
            Experience(
                id="e1",
                company="Analytical Engine Co",
                role="Lead Programmer",
                start_date="1842",
                end_date="",
                current=True,
                description="Wrote the first published algorithm.",
            ),
            Experience(
                id="e2",
                company="Babbage Lab",
                role="Translator",
                start_date="1840",
                end_date="1842",
                description="Translated and annotated Menabrea's paper.",
            ),
        ],
        projects=[
            Project(
                id="pr1",
                title="Note G",
                description="Bernoulli numbers on the Analytical Engine.",
                link="https://example.com/note-g",
                technologies=["Punch cards", "Loops", "Variables", "Tables", "Ink"],
            )
        ],
        education=[Education(id="ed1", institution="Home tutoring", degree="Mathematics", year="1835")],
        custom_theme=ThemeConfig.default(),
        last_modified=1_700_000_000_000,
    )
