from __future__ import annotations

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Local dev: load from .env automatically.
    # In production: you typically inject real env vars instead.
    # Fields can be set by name too, e.g. Settings(max_suggestion_attempts=7).
    # Empty env vars (common in .env templates) fall back to the defaults.
    model_config = SettingsConfigDict(
        env_prefix="",
        extra="ignore",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        populate_by_name=True,
    )

    # Env vars:
    # - REGISTRY_MAX_SUGGESTION_ATTEMPTS: numeric suffixes tried before suggest_alternatives gives up
    # - REGISTRY_UNBOUNDED_SUGGESTIONS: "true" to search forever instead (may never return)
    # - LOG_LEVEL (optional)
    max_suggestion_attempts: Optional[int] = Field(
        default=10_000, ge=1, validation_alias="REGISTRY_MAX_SUGGESTION_ATTEMPTS"
    )
    unbounded_suggestions: bool = Field(default=False, validation_alias="REGISTRY_UNBOUNDED_SUGGESTIONS")

    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    def model_post_init(self, __context):  # type: ignore[override]
        if self.unbounded_suggestions:
            self.max_suggestion_attempts = None
        self.log_level = (self.log_level or "INFO").upper().strip()


def get_settings() -> Settings:
    """Load settings from environment.

    Keep this as the single canonical constructor for Settings(). Tests can
    monkeypatch env vars or this function.
    """
    return Settings()
