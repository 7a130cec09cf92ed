"""Value objects produced by the summary pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class SummaryResult:
    """Generated summary and the id of the last message it covers."""

    summary: str
    chat_id: Optional[str] = None

