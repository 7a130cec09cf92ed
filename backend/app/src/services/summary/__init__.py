"""Conversation summarization pipeline."""

from .checkpoint import CheckpointLookup, find_message_index, locate_new_messages
from .invoker import SummaryInvoker
from .models import SummaryResult
from .resolver import ModelResolver, ResolvedModel
from .sanitizer import SanitizedHistory, sanitize_messages
from .summary_service import SummaryService

__all__ = [
    "CheckpointLookup",
    "ModelResolver",
    "ResolvedModel",
    "SanitizedHistory",
    "SummaryInvoker",
    "SummaryResult",
    "SummaryService",
    "find_message_index",
    "locate_new_messages",
    "sanitize_messages",
]
