"""Fatal errors raised by the summary pipeline."""

from __future__ import annotations

GENERIC_FAILURE_MESSAGE = "Summary generation failed"


class SummaryPipelineError(RuntimeError):
    """Base class: the message is always generic, details stay in ``detail``."""

    def __init__(self, detail: str = "") -> None:
        super().__init__(GENERIC_FAILURE_MESSAGE)
        self.detail = detail


class NoModelsAvailable(SummaryPipelineError):
    """Provider has no static models and its dynamic lookup returned nothing."""

    def __init__(self, provider: str) -> None:
        super().__init__(f"No models found for provider: {provider}")
        self.provider = provider


class ModelInstantiationFailed(SummaryPipelineError):
    """Provider factory raised while building the model client."""

    def __init__(self, provider: str, model: str, detail: str = "") -> None:
        super().__init__(detail or f"Could not instantiate {provider}/{model}")
        self.provider = provider
        self.model = model


class SummaryGenerationFailed(SummaryPipelineError):
    """Generation call failed, or an unexpected error happened during the run."""
