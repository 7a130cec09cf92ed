"""Find the latest summary checkpoint and the messages written after it."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from src.llm.message import Message, SummaryCheckpoint

from .utils import sanitize_log_input, strip_control_chars

logger = logging.getLogger("summary.checkpoint")

CHECKPOINT_TYPE = "chatSummary"


@dataclass(frozen=True)
class CheckpointLookup:
    """Result of scanning a history for the most recent checkpoint."""

    checkpoint: Optional[SummaryCheckpoint]
    new_messages: list[Message]


def _as_checkpoint(annotation: Any) -> Optional[SummaryCheckpoint]:
    if not isinstance(annotation, dict) or annotation.get("type") != CHECKPOINT_TYPE:
        return None
    chat_id = annotation.get("chatId")
    summary = annotation.get("summary")
    return SummaryCheckpoint(
        chat_id=chat_id if isinstance(chat_id, str) else None,
        summary=summary if isinstance(summary, str) else "",
    )


def find_latest_checkpoint(messages: Sequence[Message]) -> Optional[SummaryCheckpoint]:
    """Return the newest ``chatSummary`` annotation in the history."""
    for message in reversed(messages):
        for annotation in reversed(message.annotations or []):
            checkpoint = _as_checkpoint(annotation)
            if checkpoint is not None:
                return checkpoint
    return None


def find_message_index(messages: Sequence[Message], chat_id: Any) -> int:
    """Index of the message whose id matches the sanitized ``chat_id``, or -1."""
    if not chat_id or not isinstance(chat_id, str):
        return -1

    sanitized = strip_control_chars(chat_id)
    if not sanitized:
        return -1

    for index, message in enumerate(messages):
        if message.id == sanitized:
            return index
    return -1


def locate_new_messages(messages: Sequence[Message]) -> CheckpointLookup:
    """Split the history at the latest usable checkpoint."""
    checkpoint = find_latest_checkpoint(messages)
    if checkpoint is None:
        return CheckpointLookup(checkpoint=None, new_messages=list(messages))

    index = find_message_index(messages, checkpoint.chat_id)
    if index == -1:
        logger.info(
            "Checkpoint anchor %s not found in history, summarizing everything",
            sanitize_log_input(checkpoint.chat_id),
        )
        return CheckpointLookup(checkpoint=None, new_messages=list(messages))

    usable = SummaryCheckpoint(chat_id=messages[index].id, summary=checkpoint.summary)
    return CheckpointLookup(checkpoint=usable, new_messages=list(messages[index + 1:]))
