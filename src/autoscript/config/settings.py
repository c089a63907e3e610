"""Configuration management for autoscript using pydantic-settings.

Engine limits and logging behaviour can be set from environment variables
(prefix ``AUTOSCRIPT_``) or a ``.env`` file.
"""

from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class EngineSettings(BaseSettings):
    """Settings for the automation script engine.

    Examples:
        AUTOSCRIPT_MAX_CALL_DEPTH=128
        AUTOSCRIPT_LOG_LEVEL=DEBUG
        AUTOSCRIPT_STRUCTURED_LOGGING=true
    """

    model_config = SettingsConfigDict(
        env_prefix="AUTOSCRIPT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Execution limits
    max_call_depth: int = Field(
        default=64,
        ge=1,
        description="Maximum nesting of automation function calls before StackOverflowError",
    )

    # Typing
    widen_integer_to_double: bool = Field(
        default=True,
        description="Accept integer values where a double is declared",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING", description="Log level for engine loggers"
    )
    structured_logging: bool = Field(default=False, description="Render logs as JSON")

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value


# Singleton instance
_settings: EngineSettings | None = None


def get_settings() -> EngineSettings:
    """Get the singleton settings instance.

    Returns:
        EngineSettings instance
    """
    global _settings

    if _settings is None:
        _settings = EngineSettings()

    return _settings


def reset_settings() -> None:
    """Reset the settings singleton (mainly for testing)."""
    global _settings
    _settings = None
