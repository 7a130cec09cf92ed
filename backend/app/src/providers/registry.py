"""Immutable catalog of LLM providers built once at startup."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Iterator, Mapping, Optional, Sequence

from .base import BaseProvider
from .google import GoogleProvider
from .ollama import OllamaProvider
from .openai_provider import OpenAIProvider

if TYPE_CHECKING:  # configs reads the environment on import
    from configs import Settings


class ProviderRegistry:
    """Read-only mapping of provider name to provider, with global defaults."""

    def __init__(
        self,
        providers: Sequence[BaseProvider],
        default_provider: str,
        default_model: str,
    ) -> None:
        by_name = {p.name: p for p in providers}
        if len(by_name) != len(providers):
            raise ValueError("Provider names must be unique")
        if default_provider not in by_name:
            raise ValueError(f"Default provider {default_provider!r} is not registered")

        self._providers: Mapping[str, BaseProvider] = MappingProxyType(by_name)
        self._default_provider = by_name[default_provider]
        self._default_model = default_model

    @property
    def default_provider(self) -> BaseProvider:
        return self._default_provider

    @property
    def default_model(self) -> str:
        return self._default_model

    def get(self, name: Optional[str]) -> Optional[BaseProvider]:
        """Return the provider registered under ``name``, if any."""
        if not name:
            return None
        return self._providers.get(name)

    def resolve(self, name: Optional[str]) -> BaseProvider:
        """Return the named provider, or the default one when unknown."""
        return self.get(name) or self._default_provider

    def names(self) -> list[str]:
        return list(self._providers)

    def __iter__(self) -> Iterator[BaseProvider]:
        return iter(self._providers.values())

    def __len__(self) -> int:
        return len(self._providers)

    def __contains__(self, name: object) -> bool:
        return name in self._providers


def build_default_registry(settings: "Settings") -> ProviderRegistry:
    """Wire the shipped providers from application settings."""
    providers: list[BaseProvider] = [
        GoogleProvider(default_api_key=settings.GOOGLE_GENERATIVE_AI_API_KEY),
        OpenAIProvider(default_api_key=settings.OPENAI_API_KEY),
        OllamaProvider(
            base_url=settings.OLLAMA_API_BASE_URL,
            timeout=settings.OLLAMA_TIMEOUT_SECONDS,
        ),
    ]
    return ProviderRegistry(
        providers,
        default_provider=settings.DEFAULT_PROVIDER,
        default_model=settings.DEFAULT_MODEL,
    )
