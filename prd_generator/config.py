"""Configuration management using Pydantic Settings.

Priority order:
1. Environment variables (highest priority, for Cloud Run)
2. Google Cloud Secret Manager (for secrets like the service account key)
3. .env file (for local development fallback)

Settings are resolved once and passed explicitly to the LLM factory and the
UI client. Request handlers never read the environment themselves.
"""

import os
from functools import lru_cache
from typing import Any

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _get_secret_value(key: str) -> str | None:
    """Lazy import to avoid circular dependency."""
    # Only try Secret Manager if we have a project ID
    project_id = os.environ.get("GOOGLE_PROJECT_ID")
    if not project_id:
        return None

    try:
        from prd_generator.secret_manager import get_app_secret

        return get_app_secret(key)
    except Exception:
        return None


class Settings(BaseSettings):
    """Application settings with Secret Manager integration.

    Configuration is loaded from:
    1. Environment variables (highest priority)
    2. Secret Manager (for sensitive values)
    3. .env file (local development fallback)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Google Cloud
    google_project_id: str | None = None
    google_location: str = "us-central1"
    environment: str = "dev"
    service_account_file: str | None = None
    service_account_key: str | None = None  # JSON key content

    # Vertex AI
    llm_model: str = "gemini-2.0-flash"
    llm_temperature: float = 0.7

    # Output budgets
    idea_max_tokens: int = 256  # ~20 short lines
    prd_max_tokens: int = 1024  # multi-section document

    # API server
    cors_origins: str = "*"  # Comma-separated
    log_level: str = "INFO"

    # UI client
    api_url: str = "http://localhost:8000"
    api_timeout: float = 120.0  # 2 minutes for LLM operations
    copy_ack_seconds: float = 1.5

    @model_validator(mode="before")
    @classmethod
    def load_secrets_from_secret_manager(cls, data: dict[str, Any]) -> dict[str, Any]:
        """Load secret values from Secret Manager if not already set.

        This allows Secret Manager to be the single source of truth while
        still allowing environment variables to override.
        """
        secret_fields = ["service_account_key"]

        for field in secret_fields:
            # Skip if already set via env var or .env
            if data.get(field):
                continue

            value = _get_secret_value(field)
            if value:
                data[field] = value

        return data

    @property
    def cors_origin_list(self) -> list[str]:
        """CORS origins split into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
