"""Unit tests for text enhancement."""

import asyncio

import pytest

from folio.contexts.editing import EditingSession, EnhancementTarget, TextEnhancer, enhance_field
from folio.contexts.editing.enhancement import DRAFT_SUMMARY_BUDGET, TOKEN_BUDGETS
from folio.contexts.portfolio import Profile
from folio.utils.llm import LLMResponse


class FakeProvider:
    """Provider double returning a fixed rewrite (or raising)."""

    def __init__(self, reply="Improved text.", error=None, on_call=None):
        self.reply = reply
        self.error = error
        self.on_call = on_call
        self.prompts = []
        self.budgets = []

    def generate(self, system_prompt, user_prompt, max_tokens=None):
        self.prompts.append(user_prompt)
        self.budgets.append(max_tokens)
        if self.on_call:
            self.on_call()
        if self.error:
            raise self.error
        return LLMResponse(content=self.reply, model="fake", input_tokens=1, output_tokens=1)


@pytest.mark.unit
def test_enhance_returns_rewrite():
    enhancer = TextEnhancer(provider=FakeProvider("  Sharper summary.  "))
    assert enhancer.enhance("A summary", "summary") == "Sharper summary."


@pytest.mark.unit
def test_enhance_uses_budget_per_kind():
    provider = FakeProvider('"Quoted rewrite."')
    enhancer = TextEnhancer(provider=provider)

    assert enhancer.enhance("A summary", "summary") == "Quoted rewrite."
    enhancer.enhance("Wrote programs", "experience")
    enhancer.generate_summary(Profile(title="Engineer"), [])

    assert provider.budgets == [
        TOKEN_BUDGETS["summary"],
        TOKEN_BUDGETS["experience"],
        DRAFT_SUMMARY_BUDGET,
    ]


@pytest.mark.unit
def test_enhance_falls_back_on_failure():
    enhancer = TextEnhancer(provider=FakeProvider(error=RuntimeError("rate limited")))
    assert enhancer.enhance("Original", "experience") == "Original"


@pytest.mark.unit
def test_enhance_empty_reply_keeps_original():
    enhancer = TextEnhancer(provider=FakeProvider(""))
    assert enhancer.enhance("Original", "summary") == "Original"


@pytest.mark.unit
def test_enhance_blank_text_skips_provider():
    provider = FakeProvider()
    assert TextEnhancer(provider=provider).enhance("  ", "summary") == "  "
    assert provider.prompts == []


@pytest.mark.unit
def test_enhance_unknown_kind():
    with pytest.raises(ValueError, match="Unknown enhancement kind"):
        TextEnhancer(provider=FakeProvider()).enhance("text", "haiku")


@pytest.mark.unit
def test_enhancer_without_provider_returns_input(monkeypatch):
    monkeypatch.setenv("LLM_PROVIDER", "nonexistent")
    enhancer = TextEnhancer()
    assert enhancer.enhance("Keep me", "summary") == "Keep me"
    assert enhancer.generate_summary(None, []) == ""


@pytest.mark.unit
def test_generate_summary_uses_profile(custom_portfolio):
    provider = FakeProvider("Drafted summary.")
    summary = TextEnhancer(provider=provider).generate_summary(
        custom_portfolio.profile, custom_portfolio.experience
    )

    assert summary == "Drafted summary."
    assert "Analytical Engineer" in provider.prompts[0]
    assert "Lead Programmer at Analytical Engine Co" in provider.prompts[0]


@pytest.mark.unit
def test_enhance_field_applies_by_identity(custom_portfolio):
    session = EditingSession(custom_portfolio)
    enhancer = TextEnhancer(provider=FakeProvider("Led the first algorithm."))

    # Reorder while nothing is in flight; the target is the id, not the position
    session.add_entry("experience", role="Intern")
    applied = asyncio.run(enhance_field(session, EnhancementTarget.experience("e1"), enhancer))

    assert applied is True
    assert session.portfolio.find_entry("experience", "e1").description == "Led the first algorithm."
    assert session.portfolio.find_entry("experience", "e2").description.startswith("Translated")


@pytest.mark.unit
def test_enhance_field_summary(custom_portfolio):
    session = EditingSession(custom_portfolio)
    enhancer = TextEnhancer(provider=FakeProvider("Punchier."))

    assert asyncio.run(enhance_field(session, EnhancementTarget.summary(), enhancer)) is True
    assert session.portfolio.profile.summary == "Punchier."


@pytest.mark.unit
def test_enhance_field_stale_target_is_noop(custom_portfolio):
    session = EditingSession(custom_portfolio)
    # Entry is deleted while the request is in flight
    provider = FakeProvider(
        "Too late.", on_call=lambda: session.remove_entry("experience", "e1")
    )
    before = [entry.to_dict() for entry in session.portfolio.experience if entry.id != "e1"]

    applied = asyncio.run(
        enhance_field(session, EnhancementTarget.experience("e1"), TextEnhancer(provider=provider))
    )

    assert applied is False
    assert [entry.to_dict() for entry in session.portfolio.experience] == before


@pytest.mark.unit
def test_enhance_field_missing_target(custom_portfolio):
    session = EditingSession(custom_portfolio)
    provider = FakeProvider()
    applied = asyncio.run(
        enhance_field(session, EnhancementTarget.experience("gone"), TextEnhancer(provider=provider))
    )
    assert applied is False
    assert provider.prompts == []
