"""
Engine settings and configuration management.

Uses pydantic-settings for environment variable loading.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Assessment Engine"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Completion service (OpenAI-compatible chat completions)
    completion_api_key: str = ""
    completion_base_url: str = "https://api.openai.com/v1"
    completion_model: str = "gpt-3.5-turbo"
    completion_timeout_seconds: float = 60.0

    # Langfuse tracing
    langfuse_enabled: bool = False
    langfuse_public_key: str = ""
    langfuse_secret_key: str = ""
    langfuse_base_url: str = "https://cloud.langfuse.com"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
