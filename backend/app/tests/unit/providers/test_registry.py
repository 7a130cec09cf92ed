"""Test the provider registry."""

from types import SimpleNamespace

import pytest

from src.providers.google import GoogleProvider
from src.providers.ollama import OllamaProvider
from src.providers.openai_provider import OpenAIProvider
from src.providers.registry import ProviderRegistry, build_default_registry


def _settings(**overrides):
    values = {
        "DEFAULT_PROVIDER": "Google",
        "DEFAULT_MODEL": "gemini-2.0-flash-exp",
        "GOOGLE_GENERATIVE_AI_API_KEY": None,
        "OPENAI_API_KEY": None,
        "OLLAMA_API_BASE_URL": "http://ollama:11434",
        "OLLAMA_TIMEOUT_SECONDS": 30,
    }
    values.update(overrides)
    return SimpleNamespace(**values)


def test_default_registry_contains_shipped_providers() -> None:
    registry = build_default_registry(_settings())

    assert registry.names() == ["Google", "OpenAI", "Ollama"]
    assert isinstance(registry.default_provider, GoogleProvider)
    assert registry.default_model == "gemini-2.0-flash-exp"
    assert "Ollama" in registry
    assert len(registry) == 3


def test_unknown_provider_resolves_to_default() -> None:
    registry = build_default_registry(_settings(DEFAULT_PROVIDER="OpenAI"))

    assert registry.get("Nope") is None
    assert isinstance(registry.resolve("Nope"), OpenAIProvider)
    assert isinstance(registry.resolve(None), OpenAIProvider)
    assert isinstance(registry.resolve("Ollama"), OllamaProvider)


def test_default_provider_must_be_registered() -> None:
    with pytest.raises(ValueError):
        build_default_registry(_settings(DEFAULT_PROVIDER="Anthropic"))


def test_duplicate_names_are_rejected() -> None:
    with pytest.raises(ValueError):
        ProviderRegistry([GoogleProvider(), GoogleProvider()], "Google", "x")


def test_registry_mapping_is_read_only() -> None:
    registry = build_default_registry(_settings())

    with pytest.raises(TypeError):
        registry._providers["Evil"] = GoogleProvider()  # type: ignore[index]
