"""Application settings and configuration management."""

from functools import lru_cache
from typing import List

from pydantic import Field, ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Application
    app_name: str = Field(default="Chapter Search")
    app_version: str = Field(default="1.0.0")
    debug: bool = Field(default=False)

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)
    workers: int = Field(default=1)

    # Index
    manifest: str = Field(default="uikit")  # bundled manifest to serve

    # Search Configuration
    min_query_length: int = Field(default=2, ge=1)
    keyword_summary_size: int = Field(default=5, ge=0)

    # Messages shown instead of results
    prompt_message: str = Field(default="Введите запрос для поиска")
    prompt_hint: str = Field(default="Минимум {min_query_length} символа")
    no_results_message: str = Field(default="Ничего не найдено")
    no_results_hint: str = Field(default="Попробуйте другой запрос")

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")

    # CORS
    cors_origins: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:8080", "http://localhost:8000"]
    )

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"  # Ignore extra environment variables
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
