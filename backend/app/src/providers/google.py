"""Google Gemini provider, called through its OpenAI-compatible endpoint."""

from __future__ import annotations

from src.llm.base_llm import BaseLLM
from src.llm.utils.openai_llm import OpenAILLM

from .base import ApiKeys, BaseProvider, ProviderSettings, ServerEnv
from .models import ModelInfo

GEMINI_OPENAI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"

GOOGLE_STATIC_MODELS = (
    ModelInfo("gemini-2.0-flash-exp", "Gemini 2.0 Flash", "Google", 1_000_000),
    ModelInfo("gemini-1.5-pro", "Gemini 1.5 Pro", "Google", 2_000_000),
    ModelInfo("gemini-1.5-flash-latest", "Gemini 1.5 Flash", "Google", 1_000_000),
)


class GoogleProvider(BaseProvider):
    """Gemini models; the catalog is static."""

    name = "Google"
    api_token_key = "GOOGLE_GENERATIVE_AI_API_KEY"

    def __init__(self, default_api_key: str | None = None) -> None:
        super().__init__(GOOGLE_STATIC_MODELS, default_api_key)

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
        base_url = self.get_settings(provider_settings).base_url or GEMINI_OPENAI_BASE_URL
        return OpenAILLM(model=model, api_key=api_key, base_url=base_url)
