"""Unit tests for the LLM provider helpers."""

import pytest

from folio.utils import llm


class Overloaded(Exception):
    pass


@pytest.fixture(autouse=True)
def no_sleep(monkeypatch):
    monkeypatch.setattr(llm.time, "sleep", lambda seconds: None)


@pytest.mark.unit
def test_retry_succeeds_after_transient_errors():
    calls = []

    def operation():
        calls.append(1)
        if len(calls) < llm.MAX_RETRIES:
            raise Overloaded()
        return "ok"

    assert llm._retry_with_backoff(operation, Overloaded, "overloaded") == "ok"
    assert len(calls) == llm.MAX_RETRIES


@pytest.mark.unit
def test_retry_gives_up():
    def operation():
        raise Overloaded()

    with pytest.raises(Overloaded):
        llm._retry_with_backoff(operation, Overloaded, "overloaded")


@pytest.mark.unit
def test_other_errors_not_retried():
    calls = []

    def operation():
        calls.append(1)
        raise KeyError("bad")

    with pytest.raises(KeyError):
        llm._retry_with_backoff(operation, Overloaded, "overloaded")
    assert len(calls) == 1


@pytest.mark.unit
def test_get_provider_unknown():
    with pytest.raises(ValueError, match="Unknown provider"):
        llm.get_provider("cohere")


class RecordingProvider(llm.LLMProvider):
    _provider_prefix = "recording"
    _retryable_exception = Overloaded
    _retry_message = "overloaded"

    def __init__(self, max_tokens=300):
        self.max_tokens = max_tokens
        self.budgets = []
        self.update_model("echo-1")

    def _call_api(self, system_prompt, user_prompt, max_tokens):
        self.budgets.append(max_tokens)
        return llm.LLMResponse(user_prompt, self.model, 1, 1)


@pytest.mark.unit
def test_generate_budget_defaults_to_provider():
    provider = RecordingProvider()
    provider.generate("system", "hi")
    provider.generate("system", "hi", max_tokens=50)

    assert provider.budgets == [300, 50]
    assert provider.name == "recording/echo-1"


@pytest.mark.unit
def test_clean_reply_strips_wrapping_quotes():
    assert llm.clean_reply('  "Led the team."  ') == "Led the team."
    assert llm.clean_reply("“Shipped it.”") == "Shipped it."
    assert llm.clean_reply('Said "hello" twice') == 'Said "hello" twice'
    assert llm.clean_reply(None) == ""


@pytest.mark.unit
def test_get_provider_reads_model_from_env(monkeypatch):
    created = {}

    class Dummy:
        def __init__(self, model):
            created["model"] = model

    monkeypatch.setitem(llm.PROVIDERS, "openai", Dummy)
    monkeypatch.setenv("LLM_PROVIDER", "OpenAI")
    monkeypatch.setenv("LLM_MODEL", "gpt-test")
    llm.get_provider()
    assert created["model"] == "gpt-test"

    monkeypatch.delenv("LLM_MODEL")
    llm.get_provider()
    assert created["model"] == llm.DEFAULT_MODELS["openai"]
