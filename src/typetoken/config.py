"""typetoken configuration management."""

import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Validator settings loaded from environment (TYPETOKEN_*)."""

    model_config = SettingsConfigDict(
        env_prefix="TYPETOKEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = "WARNING"

    # Email syntax options (deliverability is never checked)
    email_allow_smtputf8: bool = True
    email_allow_quoted_local: bool = False
    email_allow_domain_literal: bool = False

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is a standard logging level name."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Apply the configured level to the package logger."""
    settings = settings or get_settings()
    logging.getLogger("typetoken").setLevel(settings.log_level)
