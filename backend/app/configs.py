"""Application settings loaded from environment variables.

Defines all environment-driven configuration used by the summary service.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed configuration model for the application."""

    # Provider/model picked when a conversation carries no directive
    DEFAULT_PROVIDER: str = "Google"
    DEFAULT_MODEL: str = "gemini-2.0-flash-exp"

    # LLM credentials (per-request apiKeys take precedence)
    OPENAI_API_KEY: Optional[str] = None
    GOOGLE_GENERATIVE_AI_API_KEY: Optional[str] = None

    # Local inference
    OLLAMA_API_BASE_URL: str = "http://localhost:11434"
    OLLAMA_TIMEOUT_SECONDS: int = 120

    # API parameters
    ROOT_PATH_BACKEND: str = ""
    ALLOWED_ORIGINS: list[str] = ["*"]
    LOG_LEVEL: str = "INFO"

    # repository-level .env, overridden by a local one
    model_config = SettingsConfigDict(env_file=("../../.env", ".env"), extra="ignore")


settings = Settings()
