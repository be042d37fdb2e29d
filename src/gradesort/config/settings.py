"""
Configuration management for grade ordering.

All configuration comes from environment variables or .env file.
"""

from functools import lru_cache
from typing import Any, Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gradesort.config.constants import DEFAULT_LOG_LEVEL, ENV_FILE, ENV_PREFIX, LOG_LEVELS
from gradesort.core.exceptions import ConfigurationError, InvalidArgumentError
from gradesort.core.models import SortDirection, parse_direction


class Settings(BaseSettings):
    """Settings loaded from ``GRADE_SORT_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        env_prefix=ENV_PREFIX,
        case_sensitive=False,
        extra="ignore"
    )

    # Direction used when a sort helper is called without one
    default_direction: SortDirection = SortDirection.ASCENDING

    # Logging
    log_level: str = Field(default=DEFAULT_LOG_LEVEL)
    log_file: Optional[str] = None

    # Validators
    @field_validator('default_direction', mode='before')
    @classmethod
    def validate_direction(cls, v: Any) -> SortDirection:
        """Accept "asc"/"desc" style aliases."""
        try:
            return parse_direction(v)
        except InvalidArgumentError as e:
            raise ValueError(e.message) from e

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one loguru knows."""
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of: {', '.join(LOG_LEVELS)}")
        return level


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Raises:
        ConfigurationError: If the environment holds invalid values
    """
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(
            "Invalid grade sort configuration",
            {'errors': [err['msg'] for err in e.errors()]}
        ) from e


def reload_settings() -> Settings:
    """Reload settings from environment."""
    get_settings.cache_clear()
    return get_settings()
