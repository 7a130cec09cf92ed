"""Base LLM interface used by the summary pipeline."""

from typing import Any, Dict, List


class BaseLLM:
    """Abstract base class for chat-compatible text generators."""

    model: str = ""

    def complete(self, messages: List[Dict[str, Any]]) -> str:
        """
        Generate a text answer from a chat-formatted history.

        Args:
            messages (List[Dict[str, str]]): Messages in the
                [{"role": "user"|"assistant"|"system", "content": "..."}] format.

        Returns:
            str: Raw text produced by the model.
        """
        raise NotImplementedError

    def generate(self, system: str, messages: List[Dict[str, Any]]) -> str:
        """Prepend ``system`` as a system message and return the raw completion."""
        payload: List[Dict[str, Any]] = [{"role": "system", "content": system}]
        payload.extend(messages)
        return self.complete(payload)
