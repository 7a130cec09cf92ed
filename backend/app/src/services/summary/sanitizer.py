"""Normalize chat turns before they are summarized.

User turns lose their ``[Model: ...]`` / ``[Provider: ...]`` directives (the
last ones seen pick the model for the run), assistant turns lose reasoning
blocks and have action bodies collapsed, system turns are left alone.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, replace
from typing import Callable, Optional, Sequence

from src.llm.message import ContentPart, ExtractedMessageMetadata, Message, extract_text_content

from .utils import sanitize_log_input

logger = logging.getLogger("summary.sanitizer")

MODEL_REGEX = re.compile(r"\[Model: (.*?)\]\n\n")
PROVIDER_REGEX = re.compile(r"\[Provider: (.*?)\]\n\n")

ACTION_REGEX = re.compile(r"(<boltAction\b[^>]*>)(.*?)(</boltAction>)", re.DOTALL)
ACTION_PLACEHOLDER = "\n...\n"

THOUGHT_REGEXES = (
    re.compile(r'<div class=\\?"__boltThought__\\?">.*?</div>', re.DOTALL),
    re.compile(r"<think>.*?</think>", re.DOTALL),
)


@dataclass(frozen=True)
class SanitizedHistory:
    """Sanitized messages plus the model/provider in effect after the last turn."""

    messages: list[Message]
    model: str
    provider: str


def _last_match(regex: re.Pattern[str], text: str) -> Optional[str]:
    matches = regex.findall(text)
    return matches[-1] if matches else None


def _until_stable(clean: Callable[[str], str], text: str) -> str:
    while True:
        cleaned = clean(text)
        if cleaned == text:
            return text
        text = cleaned


def _consume_directives(text: str) -> tuple[str, Optional[str], Optional[str]]:
    """Strip directives until none is left; removing one can expose another."""
    model = provider = None
    while True:
        model = _last_match(MODEL_REGEX, text) or model
        provider = _last_match(PROVIDER_REGEX, text) or provider
        stripped = PROVIDER_REGEX.sub("", MODEL_REGEX.sub("", text))
        if stripped == text:
            return text, model, provider
        text = stripped


def _strip_directives(text: str) -> str:
    return _consume_directives(text)[0]


def extract_properties_from_message(message: Message) -> ExtractedMessageMetadata:
    """Pull model/provider directives out of a user message."""
    _, model, provider = _consume_directives(extract_text_content(message))

    if isinstance(message.content, str):
        content: str | list[ContentPart] = _strip_directives(message.content)
    else:
        content = [
            replace(part, text=_strip_directives(part.text or ""))
            if part.type == "text"
            else part
            for part in message.content
        ]
    return ExtractedMessageMetadata(content=content, model=model, provider=provider)


def simplify_actions(text: str) -> str:
    """Keep action tags but hide their bodies (file contents, commands)."""
    return ACTION_REGEX.sub(lambda m: f"{m.group(1)}{ACTION_PLACEHOLDER}{m.group(3)}", text)


def strip_thoughts(text: str) -> str:
    """Drop reasoning blocks; unterminated blocks are left untouched."""
    for regex in THOUGHT_REGEXES:
        text = regex.sub("", text)
    return text


def _clean_assistant(message: Message) -> Message:
    text = extract_text_content(message)
    return replace(
        message,
        content=_until_stable(lambda t: simplify_actions(strip_thoughts(t)), text),
    )


def sanitize_messages(
    messages: Sequence[Message],
    default_model: str,
    default_provider: str,
) -> SanitizedHistory:
    """Return new, cleaned messages and the model/provider to summarize with."""
    current_model = default_model
    current_provider = default_provider
    processed: list[Message] = []

    for message in messages:
        try:
            if message.role == "user":
                metadata = extract_properties_from_message(message)
                if metadata.model:
                    current_model = metadata.model
                if metadata.provider:
                    current_provider = metadata.provider
                cleaned = replace(message, content=metadata.content)
                flat = _strip_directives(extract_text_content(cleaned))
                processed.append(replace(cleaned, content=flat))
            elif message.role == "assistant":
                processed.append(_clean_assistant(message))
            else:
                processed.append(message)
        except Exception:  # pragma: no cover - keep the turn as-is
            logger.warning(
                "Could not sanitize message %s, keeping original content",
                sanitize_log_input(message.id),
                exc_info=True,
            )
            processed.append(replace(message))

    return SanitizedHistory(messages=processed, model=current_model, provider=current_provider)
