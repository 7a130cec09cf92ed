"""Orchestrate sanitize -> locate -> resolve -> invoke for one conversation."""

from __future__ import annotations

from functools import lru_cache
from typing import Mapping, Optional, Sequence

from configs import settings
from src.llm.message import Message
from src.logger_config import get_logger
from src.models.errors import SummaryGenerationFailed, SummaryPipelineError
from src.providers.models import ProviderSetting
from src.providers.registry import ProviderRegistry, build_default_registry

from .checkpoint import locate_new_messages
from .invoker import SummaryInvoker
from .models import SummaryResult
from .resolver import ModelResolver
from .sanitizer import sanitize_messages
from .utils import sanitize_log_input

logger = get_logger(__name__)


class SummaryService:
    """Compress a conversation history into a checkpointed summary."""

    def __init__(
        self,
        registry: ProviderRegistry,
        resolver: Optional[ModelResolver] = None,
        invoker: Optional[SummaryInvoker] = None,
    ) -> None:
        self.registry = registry
        self.resolver = resolver or ModelResolver(registry)
        self.invoker = invoker or SummaryInvoker()

    def create_summary(
        self,
        messages: Sequence[Message],
        api_keys: Optional[Mapping[str, str]] = None,
        provider_settings: Optional[Mapping[str, ProviderSetting]] = None,
        env: Optional[Mapping[str, str]] = None,
    ) -> SummaryResult:
        """
        Summarize the messages written since the last checkpoint.

        Args:
            messages: Full conversation history, oldest first. Not modified.
            api_keys: Provider name -> API key, forwarded to providers.
            provider_settings: Provider name -> settings, forwarded to providers.
            env: Server environment, forwarded to providers.

        Returns:
            SummaryResult whose ``chat_id`` is the id of the last message in the
            history (None for an empty history). Persisting it is up to the caller.

        Raises:
            SummaryPipelineError: for every fatal condition; the message is generic.
        """
        try:
            history = sanitize_messages(
                messages,
                default_model=self.registry.default_model,
                default_provider=self.registry.default_provider.name,
            )
            lookup = locate_new_messages(history.messages)
            resolved = self.resolver.resolve(
                history.provider,
                history.model,
                api_keys=api_keys,
                provider_settings=provider_settings,
                env=env,
            )

            logger.debug(
                "Processing %d messages with %s/%s",
                len(lookup.new_messages),
                sanitize_log_input(resolved.provider.name),
                sanitize_log_input(resolved.model.name),
            )

            anchor_id = history.messages[-1].id if history.messages else None
            return self.invoker.invoke(lookup.new_messages, resolved.generator, anchor_id)
        except SummaryPipelineError as exc:
            logger.error("Failed to create summary: %s", sanitize_log_input(exc.detail, 500))
            raise
        except Exception as exc:
            logger.error(
                "Unexpected error while creating summary: %s: %s",
                type(exc).__name__,
                sanitize_log_input(exc, 500),
            )
            raise SummaryGenerationFailed(sanitize_log_input(exc, 500)) from exc


@lru_cache(maxsize=1)
def get_provider_registry() -> ProviderRegistry:
    """Registry built once per process from the application settings."""
    return build_default_registry(settings)


@lru_cache(maxsize=1)
def get_summary_service() -> SummaryService:
    """FastAPI dependency returning the process-wide summary service."""
    return SummaryService(get_provider_registry())
