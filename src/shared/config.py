"""
Application configuration using Pydantic Settings.
Loads from environment variables and .env file.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # MongoDB
    mongodb_uri: str = Field(default="mongodb://localhost:27017")
    mongodb_database: str = Field(default="job_portal")

    # OpenAI / LLM
    openai_api_key: SecretStr = Field(default=SecretStr(""))
    openai_model: str = Field(default="gpt-4o-mini")
    openai_temperature: float = Field(default=0.2)

    # Inference retry policy
    inference_max_retries: int = Field(
        default=3, description="Retries after the first attempt (4 tries total)"
    )
    inference_initial_backoff: float = Field(
        default=1.0, description="Seconds to wait before the first retry, doubled each retry"
    )
    inference_request_timeout: float = Field(
        default=60.0, description="Per-attempt HTTP timeout in seconds"
    )
    inference_call_timeout: Optional[float] = Field(
        default=None, description="Overall deadline for one call, retries included"
    )

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
