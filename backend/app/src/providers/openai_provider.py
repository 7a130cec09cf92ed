"""OpenAI provider with dynamic model listing."""

from __future__ import annotations

import logging

from openai import OpenAI, OpenAIError

from src.llm.base_llm import BaseLLM
from src.llm.utils.openai_llm import OpenAILLM

from .base import ApiKeys, BaseProvider, ProviderSettings, ServerEnv
from .models import ModelInfo

logger = logging.getLogger("providers.openai")

DYNAMIC_CONTEXT_LENGTH = 32_000

OPENAI_STATIC_MODELS = (
    ModelInfo("gpt-4o-mini", "GPT-4o Mini", "OpenAI", 128_000),
    ModelInfo("gpt-4o", "GPT-4o", "OpenAI", 128_000),
)


class OpenAIProvider(BaseProvider):
    """OpenAI chat models; extra models are listed from /v1/models."""

    name = "OpenAI"
    api_token_key = "OPENAI_API_KEY"
    supports_dynamic_models = True

    def __init__(self, default_api_key: str | None = None) -> None:
        super().__init__(OPENAI_STATIC_MODELS, default_api_key)

    def _client(self, api_key: str, provider_settings: ProviderSettings) -> OpenAI:
        base_url = self.get_settings(provider_settings).base_url
        if base_url:
            return OpenAI(api_key=api_key, base_url=base_url)
        return OpenAI(api_key=api_key)

    def list_dynamic_models(
        self,
        api_keys: ApiKeys,
        provider_settings: ProviderSettings,
        env: ServerEnv,
    ) -> list[ModelInfo]:
        api_key = self.get_api_key(api_keys, env)
        if not api_key:
            logger.debug("No API key for %s, skipping dynamic model listing", self.name)
            return []

        try:
            page = self._client(api_key, provider_settings).models.list()
        except OpenAIError as exc:
            logger.error("Failed to list %s models: %s", self.name, exc)
            return []

        static_names = {m.name for m in self._static_models}
        return [
            ModelInfo(item.id, item.id, self.name, DYNAMIC_CONTEXT_LENGTH)
            for item in page
            if item.id.startswith(("gpt-", "o1", "o3", "o4")) and item.id not in static_names
        ]

    def get_model_instance(
        self,
        model: str,
        env: ServerEnv,
        api_keys: ApiKeys,
        provider_settings: ProviderSettings,
    ) -> BaseLLM:
        api_key = self.get_api_key(api_keys, env)
        if not api_key:
            raise ValueError(f"Missing API key for {self.name} provider")
        base_url = self.get_settings(provider_settings).base_url
        return OpenAILLM(model=model, api_key=api_key, base_url=base_url)
