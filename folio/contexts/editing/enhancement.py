"""
Text Enhancement

Boundary to the LLM text-rewriting service. The engine treats it as a string
to string function that degrades to the original text on any failure; a
failure is logged, never raised to the user.

Results arrive asynchronously and are applied by stable identity (the profile
summary, or an experience entry id), so a result for an entry deleted in the
meantime is dropped.
"""

import asyncio
from dataclasses import dataclass
from typing import List, Optional

from folio.contexts.editing.logger import _log_debug, _log_warning
from folio.contexts.portfolio.model import Experience, Profile
from folio.utils.llm import LLMProvider, get_provider

SUMMARY = "summary"
EXPERIENCE = "experience"

SYSTEM_PROMPT = "You are an editor for professional portfolio websites. Reply with the rewritten text only."

PROMPTS = {
    SUMMARY: (
        "Rewrite the following professional summary to be more engaging, concise, and "
        'impactful. Keep it under 4 sentences. Text: "{text}"'
    ),
    EXPERIENCE: (
        "Rewrite the following job description bullet points to be result-oriented, using "
        "strong action verbs. Maintain the core meaning but improve professional tone. "
        'Text: "{text}"'
    ),
}

SUMMARY_FROM_PROFILE_PROMPT = """Write a professional LinkedIn-style summary (max 80 words) for a {title} based on the following context:
Skills: {skills}
Experience history: {history}

Make it sound confident and ready for new opportunities."""

# Output budget per request kind; rewrites are a few sentences at most
TOKEN_BUDGETS = {
    SUMMARY: 200,
    EXPERIENCE: 400,
}
DRAFT_SUMMARY_BUDGET = 160


@dataclass(frozen=True)
class EnhancementTarget:
    """
    Stable identity of a field an enhancement result is written back to.

    Attributes:
        field: "summary" for the profile summary, or an experience field name
        entry_id: Experience entry id; None for the profile summary
    """

    field: str
    entry_id: Optional[str] = None

    @property
    def kind(self) -> str:
        return SUMMARY if self.entry_id is None else EXPERIENCE

    @classmethod
    def summary(cls) -> "EnhancementTarget":
        return cls(field="summary")

    @classmethod
    def experience(cls, entry_id: str, field: str = "description") -> "EnhancementTarget":
        return cls(field=field, entry_id=entry_id)


class TextEnhancer:
    """
    Rewrites text through an LLM provider.

    The provider is created lazily from LLM_PROVIDER on first use; if it
    cannot be created (missing SDK or API key) every call returns its input.
    """

    def __init__(self, provider: LLMProvider = None):
        self._provider = provider
        self._provider_failed = False

    def _get_provider(self) -> Optional[LLMProvider]:
        if self._provider is None and not self._provider_failed:
            try:
                self._provider = get_provider()
            except (ImportError, ValueError) as e:
                _log_warning(f"Text enhancement unavailable: {e}")
                self._provider_failed = True
        return self._provider

    def enhance(self, text: str, kind: str) -> str:
        """
        Rewrite text of the given kind.

        Args:
            text: Text to rewrite
            kind: "summary" or "experience"

        Returns:
            Rewritten text, or ``text`` unchanged on any failure
        """
        if kind not in PROMPTS:
            raise ValueError(f"Unknown enhancement kind '{kind}'. Use 'summary' or 'experience'")
        if not text.strip():
            return text

        provider = self._get_provider()
        if provider is None:
            return text

        try:
            response = provider.generate(
                SYSTEM_PROMPT, PROMPTS[kind].format(text=text), max_tokens=TOKEN_BUDGETS[kind]
            )
        except Exception as e:
            _log_warning(f"Enhancement failed, keeping original text: {e}")
            return text

        improved = response.text
        _log_debug(f"Enhanced {kind} ({response.input_tokens}+{response.output_tokens} tokens)")
        return improved or text

    def generate_summary(self, profile: Profile, experience: List[Experience]) -> str:
        """
        Draft a summary from the profile's title, skills and experience.

        Returns:
            Summary text, or "" on any failure
        """
        provider = self._get_provider()
        if provider is None:
            return ""

        prompt = SUMMARY_FROM_PROFILE_PROMPT.format(
            title=profile.title or "professional",
            skills=", ".join(profile.skills),
            history=", ".join(f"{exp.role} at {exp.company}" for exp in experience),
        )
        try:
            response = provider.generate(SYSTEM_PROMPT, prompt, max_tokens=DRAFT_SUMMARY_BUDGET)
        except Exception as e:
            _log_warning(f"Summary generation failed: {e}")
            return ""
        return response.text


async def enhance_field(session, target: EnhancementTarget, enhancer: TextEnhancer) -> bool:
    """
    Enhance one field of a session's portfolio.

    Reads the field, awaits the rewrite in a worker thread, then applies the
    result by identity. If the target entry was deleted while the request was
    in flight, the result is discarded.

    Args:
        session: EditingSession holding the portfolio
        target: Field to enhance
        enhancer: TextEnhancer to use

    Returns:
        True if the result was applied, False if the target no longer exists
    """
    text = session.read_target(target)
    if text is None:
        return False
    improved = await asyncio.to_thread(enhancer.enhance, text, target.kind)
    return session.apply_enhancement(target, improved)
