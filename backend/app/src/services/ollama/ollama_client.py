"""HTTP client for a self-hosted Ollama inference endpoint."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

import requests


class OllamaError(RuntimeError):
    """Raised when the Ollama API answers with an error or cannot be reached."""


class OllamaClient:
    """Thin wrapper around the Ollama REST endpoints."""

    def __init__(self, base_url: str = "http://localhost:11434", timeout: int = 120) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.logger = logging.getLogger("ollama.client")

    def is_available(self) -> bool:
        """Liveness probe: True when GET /api/tags answers 200."""
        try:
            response = requests.get(f"{self.base_url}/api/tags", timeout=5)
            return response.ok
        except requests.exceptions.RequestException as req_err:
            self.logger.debug("Ollama not reachable at %s: %s", self.base_url, req_err)
            return False

    def list_models(self) -> List[Dict[str, Any]]:
        """Return the installed models as reported by /api/tags."""
        try:
            response = requests.get(f"{self.base_url}/api/tags", timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as req_err:
            raise OllamaError(f"Failed to fetch Ollama models: {req_err}") from req_err

        data = response.json() or {}
        models = data.get("models") or []
        # older servers answer a plain list of names
        return [m if isinstance(m, dict) else {"name": str(m)} for m in models]

    def chat(
        self,
        model: str,
        messages: List[Dict[str, Any]],
    ) -> Dict[str, Any]:
        """Run a non-streamed chat completion."""
        payload: Dict[str, Any] = {"model": model, "messages": messages, "stream": False}

        try:
            response = requests.post(
                f"{self.base_url}/api/chat", json=payload, timeout=self.timeout
            )
            response.raise_for_status()
        except requests.exceptions.HTTPError as http_err:
            status = getattr(http_err.response, "status_code", None)
            raise OllamaError(f"Ollama API error (HTTP {status}): {http_err}") from http_err
        except requests.exceptions.RequestException as req_err:
            raise OllamaError(f"Ollama request failed: {req_err}") from req_err

        return response.json()  # type: ignore[no-any-return]
