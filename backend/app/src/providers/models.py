"""Domain models for LLM providers and their model catalogs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class ModelInfo:
    """Single model offered by a provider."""

    name: str
    label: str
    provider: str
    context_length: int

    def __post_init__(self) -> None:
        if self.context_length <= 0:
            raise ValueError(f"context_length must be positive for model {self.name!r}")


@dataclass(frozen=True, slots=True)
class ProviderSetting:
    """Per-request provider configuration coming from the client."""

    enabled: bool = True
    base_url: Optional[str] = None
