"""Test the end-to-end summary pipeline."""

from unittest.mock import MagicMock

import pytest

from src.llm.base_llm import BaseLLM
from src.llm.message import Message
from src.models.errors import (
    ModelInstantiationFailed,
    NoModelsAvailable,
    SummaryGenerationFailed,
    SummaryPipelineError,
)
from src.providers.base import BaseProvider
from src.providers.models import ModelInfo
from src.providers.registry import ProviderRegistry
from src.services.summary.summary_service import SummaryService


class RecordingLLM(BaseLLM):
    """Stores what it was asked and answers with a fixed summary."""

    def __init__(self, model: str, answer: str = "summary body") -> None:
        self.model = model
        self.answer = answer
        self.calls: list[tuple[str, list[dict]]] = []

    def complete(self, messages):  # pragma: no cover - generate is overridden
        raise AssertionError("complete should not be called directly")

    def generate(self, system, messages):
        self.calls.append((system, messages))
        return self.answer


class StaticProvider(BaseProvider):
    """Provider whose catalog is fixed and whose generators are recorded."""

    def __init__(self, name: str, models: list[str], error: Exception | None = None) -> None:
        super().__init__([ModelInfo(m, m, name, 8192) for m in models])
        self.name = name
        self.error = error
        self.generators: list[RecordingLLM] = []

    def get_model_instance(self, model, env, api_keys, provider_settings):
        if self.error:
            raise self.error
        llm = RecordingLLM(model)
        self.generators.append(llm)
        return llm


@pytest.fixture()
def google() -> StaticProvider:
    return StaticProvider("Google", ["gemini-2.0-flash-exp", "gemini-1.5-pro"])


@pytest.fixture()
def openai() -> StaticProvider:
    return StaticProvider("OpenAI", ["gpt-4o-mini"])


@pytest.fixture()
def service(google: StaticProvider, openai: StaticProvider) -> SummaryService:
    registry = ProviderRegistry(
        [google, openai], default_provider="Google", default_model="gemini-2.0-flash-exp"
    )
    return SummaryService(registry)


def test_end_to_end_scenario(service: SummaryService, google: StaticProvider) -> None:
    history = [
        Message(id="u1", role="user", content="hi"),
        Message(id="a1", role="assistant", content="<think>x</think>hello"),
    ]

    result = service.create_summary(history)

    assert len(google.generators) == 1
    system, messages = google.generators[0].calls[0]
    assert messages == [
        {"role": "user", "content": "hi"},
        {"role": "assistant", "content": "hello"},
    ]
    assert "# Project Overview" in system
    assert "# Next Actions" in system
    assert result.summary == "summary body"
    assert result.chat_id == "a1"


def test_only_messages_after_checkpoint_are_summarized(
    service: SummaryService, google: StaticProvider
) -> None:
    history = [Message(id=f"m{i}", role="user", content=f"turn {i}") for i in range(1, 8)]
    history[4] = Message(
        id="m5",
        role="assistant",
        content="turn 5",
        annotations=[{"type": "chatSummary", "chatId": "m3", "summary": "old"}],
    )

    result = service.create_summary(history)

    _, messages = google.generators[0].calls[0]
    assert [m["content"] for m in messages] == ["turn 4", "turn 5", "turn 6", "turn 7"]
    assert result.chat_id == "m7"


def test_empty_history_has_no_anchor(service: SummaryService) -> None:
    result = service.create_summary([])

    assert result.chat_id is None


def test_user_directive_selects_provider_and_model(
    service: SummaryService, google: StaticProvider, openai: StaticProvider
) -> None:
    history = [
        Message(id="1", role="user", content="[Model: gpt-4o-mini]\n\n[Provider: OpenAI]\n\nhi"),
    ]

    service.create_summary(history)

    assert google.generators == []
    assert openai.generators[0].model == "gpt-4o-mini"
    _, messages = openai.generators[0].calls[0]
    assert messages == [{"role": "user", "content": "hi"}]


def test_input_history_is_not_modified(service: SummaryService) -> None:
    history = [Message(id="a", role="assistant", content="<think>x</think>hello")]

    service.create_summary(history)

    assert history[0].content == "<think>x</think>hello"


def test_no_models_is_surfaced_generically() -> None:
    empty = StaticProvider("Empty", [])
    service = SummaryService(ProviderRegistry([empty], "Empty", "anything"))

    with pytest.raises(NoModelsAvailable) as exc_info:
        service.create_summary([Message(id="1", role="user", content="hi")])

    assert str(exc_info.value) == "Summary generation failed"


def test_factory_errors_are_surfaced_generically() -> None:
    broken = StaticProvider("Broken", ["m"], error=RuntimeError("invalid credentials"))
    service = SummaryService(ProviderRegistry([broken], "Broken", "m"))

    with pytest.raises(ModelInstantiationFailed) as exc_info:
        service.create_summary([Message(id="1", role="user", content="hi")])

    assert "invalid credentials" not in str(exc_info.value)


def test_unexpected_errors_become_generation_failures(service: SummaryService) -> None:
    service.resolver = MagicMock()
    service.resolver.resolve.side_effect = KeyError("boom")

    with pytest.raises(SummaryGenerationFailed) as exc_info:
        service.create_summary([Message(id="1", role="user", content="hi")])

    assert isinstance(exc_info.value, SummaryPipelineError)
    assert str(exc_info.value) == "Summary generation failed"
