"""Resolve a provider/model pair to a callable text generator."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Optional

from src.llm.base_llm import BaseLLM
from src.models.errors import ModelInstantiationFailed, NoModelsAvailable
from src.providers.base import BaseProvider, ProviderSettings
from src.providers.models import ModelInfo, ProviderSetting
from src.providers.registry import ProviderRegistry

from .utils import sanitize_log_input

logger = logging.getLogger("summary.resolver")


@dataclass(frozen=True)
class ResolvedModel:
    """Provider, chosen model and the generator built for it."""

    provider: BaseProvider
    model: ModelInfo
    generator: BaseLLM


def _find(models: list[ModelInfo], name: str) -> Optional[ModelInfo]:
    return next((m for m in models if m.name == name), None)


class ModelResolver:
    """Static list first, then static + dynamic, then the first model available."""

    def __init__(self, registry: ProviderRegistry) -> None:
        self.registry = registry

    def _dynamic_models(
        self,
        provider: BaseProvider,
        api_keys: Mapping[str, str],
        provider_settings: ProviderSettings,
        env: Mapping[str, str],
    ) -> list[ModelInfo]:
        if not provider.supports_dynamic_models:
            return []
        if not provider.get_settings(provider_settings).enabled:
            logger.debug("Provider %s disabled, skipping dynamic models", provider.name)
            return []
        try:
            return list(provider.list_dynamic_models(api_keys, provider_settings, env))
        except Exception as exc:
            logger.error(
                "Dynamic model listing failed for %s: %s",
                sanitize_log_input(provider.name),
                sanitize_log_input(exc, 300),
            )
            return []

    def resolve_model(
        self,
        provider: BaseProvider,
        model_name: str,
        api_keys: Mapping[str, str],
        provider_settings: ProviderSettings,
        env: Mapping[str, str],
    ) -> ModelInfo:
        """Pick the model descriptor, falling back to the first one listed."""
        static_models = provider.list_static_models()
        details = _find(static_models, model_name)
        if details:
            return details

        models = static_models + self._dynamic_models(provider, api_keys, provider_settings, env)
        if not models:
            raise NoModelsAvailable(sanitize_log_input(provider.name))

        details = _find(models, model_name)
        if details:
            return details

        logger.warning(
            "Model not found, using fallback: %s -> %s",
            sanitize_log_input(model_name),
            sanitize_log_input(models[0].name),
        )
        return models[0]

    def resolve(
        self,
        provider_name: Optional[str],
        model_name: Optional[str],
        api_keys: Optional[Mapping[str, str]] = None,
        provider_settings: Optional[Mapping[str, ProviderSetting]] = None,
        env: Optional[Mapping[str, str]] = None,
    ) -> ResolvedModel:
        """Return provider, model and generator for the requested names."""
        api_keys = api_keys or {}
        provider_settings = provider_settings or {}
        env = env or {}

        provider = self.registry.resolve(provider_name)
        model = self.resolve_model(
            provider,
            model_name or self.registry.default_model,
            api_keys,
            provider_settings,
            env,
        )

        try:
            generator = provider.get_model_instance(
                model=model.name,
                env=env,
                api_keys=api_keys,
                provider_settings=provider_settings,
            )
        except Exception as exc:
            raise ModelInstantiationFailed(
                sanitize_log_input(provider.name),
                sanitize_log_input(model.name),
                detail=sanitize_log_input(exc, 300),
            ) from exc

        return ResolvedModel(provider=provider, model=model, generator=generator)
