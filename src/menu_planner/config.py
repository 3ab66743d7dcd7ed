"""Application configuration."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from menu_planner.services.completion import CompletionOptions

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    openai_api_key: str | None = None
    openai_model: str = "gpt-4o-mini"
    openai_max_output_tokens: int = 4096
    openai_max_retries: int = 5
    openai_timeout_seconds: float = 60.0
    retry_base_delay_seconds: float = 1.0
    retry_max_delay_seconds: float = 30.0
    menu_language: str = "English"
    additional_notes: str = "No sugar"
    profile_path: Path | None = None
    output_path: Path = Path("result.json")
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    def completion_options(self) -> CompletionOptions:
        """Build per-call completion options from settings."""
        return CompletionOptions(
            model=self.openai_model,
            max_output_tokens=self.openai_max_output_tokens,
            max_retries=self.openai_max_retries,
        )
