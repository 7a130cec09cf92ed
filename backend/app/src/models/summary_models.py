"""Request/response models for the summary endpoints."""

from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from src.llm.message import ContentPart, Message
from src.providers.models import ProviderSetting


class ContentPartModel(BaseModel):
    """Typed part of a structured message body."""

    type: str = Field(..., description="Part type, e.g. 'text' or 'image'.")
    text: Optional[str] = Field(default=None, description="Text of a 'text' part.")
    image: Optional[str] = Field(default=None, description="Image URL or data URI.")


class ChatMessageModel(BaseModel):
    """One chat turn as sent by the front end."""

    id: str = Field(..., description="Message id, unique within the conversation.")
    role: Literal["user", "assistant", "system"] = Field(..., description="Author role.")
    content: Union[str, List[ContentPartModel]] = Field(
        ..., description="Plain text or ordered content parts."
    )
    annotations: List[Any] = Field(
        default_factory=list,
        description="Side-channel records; summary checkpoints use type 'chatSummary'.",
    )

    def to_message(self) -> Message:
        """Convert to the immutable pipeline message."""
        if isinstance(self.content, str):
            content: Union[str, list[ContentPart]] = self.content
        else:
            content = [ContentPart(type=p.type, text=p.text, image=p.image) for p in self.content]
        return Message(
            id=self.id,
            role=self.role,
            content=content,
            annotations=list(self.annotations),
        )


class ProviderSettingModel(BaseModel):
    """Client-side provider settings."""

    model_config = ConfigDict(populate_by_name=True)

    enabled: bool = True
    base_url: Optional[str] = Field(default=None, alias="baseUrl")

    def to_setting(self) -> ProviderSetting:
        return ProviderSetting(enabled=self.enabled, base_url=self.base_url)


class CreateSummaryRequest(BaseModel):
    """Payload of POST /summary/create."""

    model_config = ConfigDict(populate_by_name=True)

    messages: List[ChatMessageModel] = Field(..., description="Full history, oldest first.")
    api_keys: Dict[str, str] = Field(default_factory=dict, alias="apiKeys")
    provider_settings: Dict[str, ProviderSettingModel] = Field(
        default_factory=dict, alias="providerSettings"
    )


class SummaryResponse(BaseModel):
    """Generated summary and the checkpoint anchor to persist."""

    model_config = ConfigDict(populate_by_name=True)

    summary: str = Field(..., description="Raw model output.")
    chat_id: Optional[str] = Field(
        default=None,
        alias="chatId",
        description="Id of the last message covered by the summary.",
    )


class ModelInfoModel(BaseModel):
    """Model exposed by a provider."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    label: str
    provider: str
    context_length: int = Field(..., alias="contextLength")


class ProviderModelsModel(BaseModel):
    """Provider and its static catalog."""

    name: str
    dynamic: bool = Field(..., description="Whether more models are listed at request time.")
    models: List[ModelInfoModel]


class ModelCatalogResponse(BaseModel):
    """Response of GET /summary/models."""

    model_config = ConfigDict(populate_by_name=True)

    default_provider: str = Field(..., alias="defaultProvider")
    default_model: str = Field(..., alias="defaultModel")
    providers: List[ProviderModelsModel]


class LocalModelStatus(BaseModel):
    """Response of GET /summary/ollama/status."""

    available: bool
    base_url: str = Field(..., alias="baseUrl")

    model_config = ConfigDict(populate_by_name=True)
