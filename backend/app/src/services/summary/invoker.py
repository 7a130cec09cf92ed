"""Call the resolved model with the structured summary instruction."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from src.llm.base_llm import BaseLLM
from src.llm.message import Message, extract_text_content
from src.llm.prompt_loader import PromptLoader
from src.models.errors import SummaryGenerationFailed

from .models import SummaryResult
from .utils import sanitize_log_input

logger = logging.getLogger("summary.invoker")

SUMMARY_PROMPT_NAME = "summary"


class SummaryInvoker:
    """Build the summary request and package the model answer."""

    def __init__(self, prompt_loader: Optional[PromptLoader] = None) -> None:
        self.prompt_loader = prompt_loader or PromptLoader()

    @property
    def system_prompt(self) -> str:
        return self.prompt_loader.get_system_prompt(SUMMARY_PROMPT_NAME)

    def invoke(
        self,
        new_messages: Sequence[Message],
        generator: BaseLLM,
        anchor_id: Optional[str],
    ) -> SummaryResult:
        """Summarize ``new_messages``; ``anchor_id`` becomes the new checkpoint id."""
        payload = [
            {"role": message.role, "content": extract_text_content(message)}
            for message in new_messages
        ]
        try:
            text = generator.generate(self.system_prompt, payload)
        except Exception as exc:
            logger.error(
                "Failed to create summary with model %s: %s: %s",
                sanitize_log_input(getattr(generator, "model", "")),
                type(exc).__name__,
                sanitize_log_input(exc, 500),
            )
            raise SummaryGenerationFailed(sanitize_log_input(exc, 500)) from exc

        return SummaryResult(summary=text, chat_id=anchor_id)
