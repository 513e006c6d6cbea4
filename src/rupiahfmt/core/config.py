"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings

from rupiahfmt.core.exceptions import ConfigurationError


class FormatConfig(BaseSettings):
    """Display formatting for AmountFormatter."""

    model_config = {"env_prefix": "RUPIAHFMT_FORMAT_"}

    currency_prefix: str = "Rp."
    grouping_separator: str = "."

    @field_validator("grouping_separator")
    @classmethod
    def _single_non_digit(cls, value: str) -> str:
        if len(value) != 1 or value.isdigit():
            raise ValueError("grouping_separator must be a single non-digit character")
        return value


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "RUPIAHFMT_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"

    formatting: FormatConfig = Field(default_factory=FormatConfig)


def load_settings(**overrides: Any) -> AppSettings:
    """Build AppSettings from the environment plus explicit overrides.

    Raises:
        ConfigurationError: if any value fails validation.
    """
    try:
        return AppSettings(**overrides)
    except ValidationError as exc:
        raise ConfigurationError(str(exc)) from exc
