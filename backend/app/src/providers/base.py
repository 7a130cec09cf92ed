"""Base class shared by every LLM provider."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Mapping, Optional, Sequence

from src.llm.base_llm import BaseLLM

from .models import ModelInfo, ProviderSetting

ApiKeys = Mapping[str, str]
ProviderSettings = Mapping[str, ProviderSetting]
ServerEnv = Mapping[str, str]


class BaseProvider(ABC):
    """Uniform capability: static models, optional dynamic models, instantiate."""

    name: str
    api_token_key: Optional[str] = None
    supports_dynamic_models: bool = False

    def __init__(
        self,
        static_models: Sequence[ModelInfo] = (),
        default_api_key: Optional[str] = None,
    ) -> None:
        self._static_models: tuple[ModelInfo, ...] = tuple(static_models)
        self._default_api_key = default_api_key

    def list_static_models(self) -> list[ModelInfo]:
        """Return a copy of the models known at startup."""
        return list(self._static_models)

    def list_dynamic_models(
        self,
        api_keys: ApiKeys,
        provider_settings: ProviderSettings,
        env: ServerEnv,
    ) -> list[ModelInfo]:
        """Ask the provider for its current catalog (network call)."""
        return []

    @abstractmethod
    def get_model_instance(
        self,
        model: str,
        env: ServerEnv,
        api_keys: ApiKeys,
        provider_settings: ProviderSettings,
    ) -> BaseLLM:
        """Build a callable generator for ``model``."""
        raise NotImplementedError

    def get_api_key(self, api_keys: ApiKeys, env: ServerEnv) -> Optional[str]:
        """Request key first, then server env, then the configured default."""
        key = api_keys.get(self.name)
        if not key and self.api_token_key:
            key = env.get(self.api_token_key)
        return key or self._default_api_key

    def get_settings(self, provider_settings: ProviderSettings) -> ProviderSetting:
        """Return the request settings for this provider or an empty default."""
        return provider_settings.get(self.name) or ProviderSetting()
