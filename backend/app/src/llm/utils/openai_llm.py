"""OpenAI ChatCompletion client wrapper, also used for OpenAI-compatible APIs."""

import os
from typing import Any, Optional, cast

from openai import OpenAI

from src.llm.base_llm import BaseLLM


class OpenAILLM(BaseLLM):
    """Wrapper around the OpenAI client to provide the complete method."""

    def __init__(
        self,
        model: str = "gpt-4o-mini",
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
    ) -> None:
        """Initialize client with model name and API key from env by default.

        Args:
            model: Model name sent with every request.
            api_key: API key (defaults to env OPENAI_API_KEY).
            base_url: Alternative OpenAI-compatible endpoint (Gemini, proxies).
        """
        self.model = model
        self._api_key = api_key or os.getenv("OPENAI_API_KEY")
        if base_url:
            self.client = OpenAI(api_key=self._api_key, base_url=base_url)
        else:
            self.client = OpenAI(api_key=self._api_key)

    def complete(self, messages: list[dict[str, Any]]) -> str:
        """Call chat completions and return only the content string."""
        # Build explicit call for mypy compatibility; cast dynamic dicts to Any
        response = self.client.chat.completions.create(
            model=self.model,
            messages=cast(Any, messages),
        )
        return response.choices[0].message.content or ""
