"""Summary endpoints.

Compress a conversation into a checkpointed summary and expose the model
catalog used to pick the summarizing model.
"""
import os

from fastapi import APIRouter, Depends, HTTPException, status

from src.logger_config import get_logger
from src.models.errors import SummaryPipelineError
from src.models.summary_models import (
    CreateSummaryRequest,
    LocalModelStatus,
    ModelCatalogResponse,
    ModelInfoModel,
    ProviderModelsModel,
    SummaryResponse,
)
from src.providers.ollama import OllamaProvider
from src.providers.registry import ProviderRegistry
from src.services.summary.summary_service import (
    SummaryService,
    get_provider_registry,
    get_summary_service,
)

logger = get_logger(__name__)

summary_router = APIRouter(prefix="/summary", tags=["Summary"])


@summary_router.post(
    "/create",
    responses={
        200: {"model": SummaryResponse, "description": "Successful Response"},
        500: {"description": "Summary generation failed"},
    },
)
def create_summary(
    data: CreateSummaryRequest,
    summary_service: SummaryService = Depends(get_summary_service),
) -> SummaryResponse:
    """
    Summarize the messages written since the last checkpoint.

    Args:
        data (CreateSummaryRequest): Conversation history plus optional
        per-provider API keys and settings.

    Returns:
        SummaryResponse with the summary text and the new checkpoint anchor.
    """
    try:
        result = summary_service.create_summary(
            [m.to_message() for m in data.messages],
            api_keys=data.api_keys,
            provider_settings={
                name: setting.to_setting() for name, setting in data.provider_settings.items()
            },
            env=dict(os.environ),
        )
    except SummaryPipelineError as e:
        # detalhes ficam no log, o cliente recebe só a mensagem genérica
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)
        )

    return SummaryResponse(summary=result.summary, chat_id=result.chat_id)


@summary_router.get("/models")
def list_models(
    registry: ProviderRegistry = Depends(get_provider_registry),
) -> ModelCatalogResponse:
    """Return every provider with its static models and the global defaults."""
    providers = [
        ProviderModelsModel(
            name=provider.name,
            dynamic=provider.supports_dynamic_models,
            models=[
                ModelInfoModel(
                    name=m.name,
                    label=m.label,
                    provider=m.provider,
                    context_length=m.context_length,
                )
                for m in provider.list_static_models()
            ],
        )
        for provider in registry
    ]
    return ModelCatalogResponse(
        default_provider=registry.default_provider.name,
        default_model=registry.default_model,
        providers=providers,
    )


@summary_router.get("/ollama/status")
def ollama_status(
    registry: ProviderRegistry = Depends(get_provider_registry),
) -> LocalModelStatus:
    """Liveness probe for the local Ollama server."""
    provider = registry.get(OllamaProvider.name)
    if not isinstance(provider, OllamaProvider):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Ollama not configured")

    client = provider.client({}, dict(os.environ))
    available = client.is_available()
    logger.info("Ollama at %s available=%s", client.base_url, available)
    return LocalModelStatus(available=available, base_url=client.base_url)
