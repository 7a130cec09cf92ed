"""Ollama provider: local models discovered through /api/tags."""

from __future__ import annotations

import logging

from src.llm.base_llm import BaseLLM
from src.llm.utils.ollama_llm import OllamaLLM
from src.services.ollama.ollama_client import OllamaClient, OllamaError

from .base import ApiKeys, BaseProvider, ProviderSettings, ServerEnv
from .models import ModelInfo

logger = logging.getLogger("providers.ollama")

DEFAULT_OLLAMA_URL = "http://localhost:11434"
DYNAMIC_CONTEXT_LENGTH = 8_000

OLLAMA_STATIC_MODELS = (
    ModelInfo("llama2", "Llama 2 (Local)", "Ollama", 4096),
    ModelInfo("codellama", "CodeLlama (Local)", "Ollama", 4096),
)


class OllamaProvider(BaseProvider):
    """Self-hosted models; no API key involved."""

    name = "Ollama"
    supports_dynamic_models = True

    def __init__(self, base_url: str = DEFAULT_OLLAMA_URL, timeout: int = 120) -> None:
        super().__init__(OLLAMA_STATIC_MODELS)
        self._default_base_url = base_url
        self._timeout = timeout

    def base_url(self, provider_settings: ProviderSettings, env: ServerEnv) -> str:
        """Request settings first, then server env, then the configured URL."""
        return (
            self.get_settings(provider_settings).base_url
            or env.get("OLLAMA_API_BASE_URL")
            or self._default_base_url
        )

    def client(self, provider_settings: ProviderSettings, env: ServerEnv) -> OllamaClient:
        return OllamaClient(self.base_url(provider_settings, env), timeout=self._timeout)

    def list_dynamic_models(
        self,
        api_keys: ApiKeys,
        provider_settings: ProviderSettings,
        env: ServerEnv,
    ) -> list[ModelInfo]:
        try:
            raw_models = self.client(provider_settings, env).list_models()
        except OllamaError as exc:
            logger.error("Failed to list Ollama models: %s", exc)
            return []

        static_names = {m.name for m in self._static_models}
        models: list[ModelInfo] = []
        for raw in raw_models:
            name = str(raw.get("name") or "")
            if not name or name in static_names:
                continue
            models.append(ModelInfo(name, name, self.name, DYNAMIC_CONTEXT_LENGTH))
        return models

    def get_model_instance(
        self,
        model: str,
        env: ServerEnv,
        api_keys: ApiKeys,
        provider_settings: ProviderSettings,
    ) -> BaseLLM:
        return OllamaLLM(model=model, client=self.client(provider_settings, env))
