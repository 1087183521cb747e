"""
LLM client for portfolio text rewriting.

Wraps the Anthropic and OpenAI chat APIs behind one ``generate`` call with a
per-call output budget and retries on transient overload. The editing context
uses it to rewrite summaries and experience descriptions, which are short, so
budgets stay small and replies are cleaned of the quoting models tend to echo.

Configuration (environment, via .env):
    LLM_PROVIDER: "anthropic" or "openai" (default: openai)
    LLM_MODEL: Model name overriding the provider default
    LLM_MAX_TOKENS: Default output budget per call (default: 512)
"""

import os
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import partial
from typing import Callable, Dict, Optional, Type, TypeVar

from dotenv import load_dotenv
from loguru import logger

load_dotenv()

DEFAULT_PROVIDER = "openai"
DEFAULT_MODELS = {
    "anthropic": "claude-sonnet-4-20250514",
    "openai": "gpt-4o-mini",
}
DEFAULT_MAX_TOKENS = int(os.getenv("LLM_MAX_TOKENS", "512"))

# Rewrites are interactive; give up quickly
MAX_RETRIES = 3
BASE_DELAY = 1.0
QUOTE_PAIRS = {'"': '"', "'": "'", "“": "”"}

T = TypeVar("T")


def _retry_with_backoff(
    operation: Callable[[], T],
    retryable_exception: Type[Exception],
    error_message: str,
) -> T:
    """
    Run operation, retrying with exponential backoff on one exception type.

    Args:
        operation: Callable that performs the request and returns its result
        retryable_exception: Exception type that triggers a retry
        error_message: Prefix for the retry warning (e.g., "API overloaded")
    """
    for attempt in range(MAX_RETRIES):
        try:
            return operation()
        except retryable_exception:
            if attempt == MAX_RETRIES - 1:
                raise
            delay = BASE_DELAY * (2**attempt)
            logger.warning(
                f"{error_message}, retrying in {delay:.1f}s... "
                f"(attempt {attempt + 1}/{MAX_RETRIES})"
            )
            time.sleep(delay)


def clean_reply(text: Optional[str]) -> str:
    """
    Strip whitespace and one pair of wrapping quotes from a model reply.

    Prompts quote the text to rewrite, and models often answer in kind.
    """
    text = (text or "").strip()
    for opening, closing in QUOTE_PAIRS.items():
        if len(text) >= 2 and text.startswith(opening) and text.endswith(closing):
            return text[1:-1].strip()
    return text


@dataclass
class LLMResponse:
    """Reply from a provider, with token usage for logging."""

    content: str
    model: str
    input_tokens: int
    output_tokens: int

    @property
    def text(self) -> str:
        return clean_reply(self.content)


class LLMProvider(ABC):
    """
    Base for chat providers.

    Subclasses set ``_provider_prefix``, ``_retryable_exception`` and
    ``_retry_message``, implement ``_call_api``, and call ``update_model``
    from ``__init__``.
    """

    _provider_prefix: str
    _retryable_exception: Type[Exception]
    _retry_message: str

    name: str
    model: str
    max_tokens: int = DEFAULT_MAX_TOKENS

    def update_model(self, model: str):
        """Switch model and refresh the display name."""
        self.model = model
        self.name = f"{self._provider_prefix}/{model}"

    @abstractmethod
    def _call_api(self, system_prompt: str, user_prompt: str, max_tokens: int) -> LLMResponse:
        """Make a single API call (no retries)."""

    def generate(
        self, system_prompt: str, user_prompt: str, max_tokens: Optional[int] = None
    ) -> LLMResponse:
        """
        Generate a reply, retrying on transient errors.

        Args:
            system_prompt: Instructions for the model
            user_prompt: Request text
            max_tokens: Output budget for this call (default: provider's max_tokens)
        """
        budget = max_tokens if max_tokens is not None else self.max_tokens
        return _retry_with_backoff(
            partial(self._call_api, system_prompt, user_prompt, budget),
            self._retryable_exception,
            self._retry_message,
        )


def _require_key(env_var: str) -> str:
    api_key = os.getenv(env_var)
    if not api_key:
        raise ValueError(f"{env_var} environment variable not set")
    return api_key


class AnthropicProvider(LLMProvider):
    """Anthropic Claude provider."""

    _provider_prefix = "anthropic"
    _retry_message = "API overloaded"

    def __init__(self, model: str = DEFAULT_MODELS["anthropic"], max_tokens: int = DEFAULT_MAX_TOKENS):
        # SDK is heavy, only load if this provider is used
        try:
            import anthropic
        except ImportError:
            raise ImportError("anthropic package required. Install with: pip install folio[llm]")

        self.client = anthropic.Anthropic(api_key=_require_key("ANTHROPIC_API_KEY"))
        self._retryable_exception = anthropic.OverloadedError
        self.max_tokens = max_tokens
        self.update_model(model)

    def _call_api(self, system_prompt: str, user_prompt: str, max_tokens: int) -> LLMResponse:
        response = self.client.messages.create(
            model=self.model,
            max_tokens=max_tokens,
            system=system_prompt,
            messages=[{"role": "user", "content": user_prompt}],
        )
        return LLMResponse(
            content=response.content[0].text,
            model=self.model,
            input_tokens=response.usage.input_tokens,
            output_tokens=response.usage.output_tokens,
        )


class OpenAIProvider(LLMProvider):
    """OpenAI chat completions provider."""

    _provider_prefix = "openai"
    _retry_message = "Rate limit hit"

    def __init__(self, model: str = DEFAULT_MODELS["openai"], max_tokens: int = DEFAULT_MAX_TOKENS):
        try:
            import openai
        except ImportError:
            raise ImportError("openai package required. Install with: pip install folio[llm]")

        self.client = openai.OpenAI(api_key=_require_key("OPENAI_API_KEY"))
        self._retryable_exception = openai.RateLimitError
        self.max_tokens = max_tokens
        self.update_model(model)

    def _call_api(self, system_prompt: str, user_prompt: str, max_tokens: int) -> LLMResponse:
        response = self.client.chat.completions.create(
            model=self.model,
            max_tokens=max_tokens,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
        )
        return LLMResponse(
            content=response.choices[0].message.content,
            model=self.model,
            input_tokens=response.usage.prompt_tokens,
            output_tokens=response.usage.completion_tokens,
        )


PROVIDERS: Dict[str, Type[LLMProvider]] = {
    "anthropic": AnthropicProvider,
    "openai": OpenAIProvider,
}


def get_provider(provider_name: str = None, model: str = None) -> LLMProvider:
    """
    Create the configured provider.

    Args:
        provider_name: "anthropic" or "openai" (default: LLM_PROVIDER)
        model: Model name (default: LLM_MODEL, then the provider default)

    Raises:
        ValueError: Unknown provider or missing API key
        ImportError: Provider SDK not installed
    """
    if provider_name is None:
        provider_name = os.getenv("LLM_PROVIDER", DEFAULT_PROVIDER)
    provider_name = provider_name.lower()

    if provider_name not in PROVIDERS:
        raise ValueError(f"Unknown provider: {provider_name}. Use 'anthropic' or 'openai'")

    model = model or os.getenv("LLM_MODEL") or DEFAULT_MODELS[provider_name]
    return PROVIDERS[provider_name](model=model)
