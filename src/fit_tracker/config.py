"""Application configuration."""

import os

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")
_PLACEHOLDER_MARKERS = ("your-project", "your-anon-key", "your-service-key")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_anon_key: str
    supabase_service_key: str
    openai_api_key: str
    openai_model: str = "gpt-5-mini"
    openai_reasoning_effort: str = "low"
    openai_store: bool = False
    default_calorie_goal: int = 2000
    log_level: str = "INFO"
    cors_allowed_origins: str | None = None
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @field_validator("supabase_url", "supabase_anon_key", "supabase_service_key")
    @classmethod
    def _reject_placeholders(cls, value: str) -> str:
        if not value.strip() or any(
            marker in value for marker in _PLACEHOLDER_MARKERS
        ):
            raise ValueError(
                "Supabase credentials are missing or still set to placeholders"
            )
        return value


def parse_allowed_origins(raw: str | None) -> list[str]:
    """Parse allowed CORS origins from env."""
    if raw is None:
        return ["*"]
    cleaned = raw.strip()
    if cleaned in {"", "*"}:
        return ["*"]
    origins = [chunk.strip().rstrip("/") for chunk in cleaned.split(",")]
    return [origin for origin in origins if origin] or ["*"]
