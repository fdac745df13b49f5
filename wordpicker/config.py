"""Application configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from typing import Any, Literal

import structlog
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # API (constants, not from env)
    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "wordpicker API"
    VERSION: str = "0.1.0"

    # Environment
    ENVIRONMENT: Literal["development", "production", "test"] = "development"

    # CORS
    CORS_ORIGINS: list[str] = ["*"]

    # Dictionary lookups
    DICTIONARY_API_URL: str = "https://api.dictionaryapi.dev/api/v2/entries/en"
    DICTIONARY_TIMEOUT: float = 30.0

    # Article input. None means no cap is enforced.
    MAX_ARTICLE_LENGTH: int | None = None

    # Sessions kept in memory; the oldest is evicted beyond this
    MAX_PICKER_SESSIONS: int = 100

    @field_validator("DICTIONARY_API_URL", mode="after")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        """Strip whitespace and trailing slashes from the dictionary URL."""
        return value.strip().rstrip("/")

    @field_validator("DICTIONARY_TIMEOUT", mode="after")
    @classmethod
    def validate_timeout(cls, value: float) -> float:
        """Dictionary timeout must be positive."""
        if value <= 0:
            msg = "DICTIONARY_TIMEOUT must be positive"
            raise ValueError(msg)
        return value

    @field_validator("MAX_ARTICLE_LENGTH", mode="after")
    @classmethod
    def validate_max_article_length(cls, value: int | None) -> int | None:
        """Article length cap must be positive when set."""
        if value is not None and value <= 0:
            msg = "MAX_ARTICLE_LENGTH must be positive when set"
            raise ValueError(msg)
        return value

    @field_validator("MAX_PICKER_SESSIONS", mode="after")
    @classmethod
    def validate_max_picker_sessions(cls, value: int) -> int:
        """At least one session must fit in memory."""
        if value <= 0:
            msg = "MAX_PICKER_SESSIONS must be positive"
            raise ValueError(msg)
        return value


def configure_logging(environment: str = "development") -> None:
    """Configure structured logging with structlog."""
    # Determine if we should use JSON output (production) or console output (dev)
    use_json = environment == "production"

    # Configure stdlib logging
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.DEBUG if environment == "development" else logging.INFO,
    )

    processors: list[Callable[..., Any]] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if use_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
