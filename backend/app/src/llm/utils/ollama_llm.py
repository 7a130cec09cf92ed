"""Text generator backed by a self-hosted Ollama server."""

from typing import Any

from src.llm.base_llm import BaseLLM
from src.services.ollama.ollama_client import OllamaClient


class OllamaLLM(BaseLLM):
    """Send chat requests to Ollama's /api/chat endpoint."""

    def __init__(self, model: str, client: OllamaClient) -> None:
        self.model = model
        self.client = client

    def complete(self, messages: list[dict[str, Any]]) -> str:
        """Return the assistant content of a non-streamed chat call."""
        data = self.client.chat(model=self.model, messages=messages)
        message = data.get("message") or {}
        return str(message.get("content") or "")
