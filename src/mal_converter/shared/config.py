"""Environment-aware configuration with validation.

This module provides centralized configuration management using Pydantic Settings.
Environment variables are validated at startup to fail fast on misconfigurations;
command-line flags are applied on top with ``Settings.model_copy``.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ValidationMode = Literal["lenient", "strict"]
CsvLayout = Literal["header", "positional"]


class Settings(BaseSettings):
    """Converter settings loaded from environment variables.

    Every setting has a default, so the converter runs with no environment
    at all. Settings are cached to avoid repeated parsing.

    Example:
        >>> settings = get_settings()
        >>> print(settings.validation_mode)
        'strict'
    """

    model_config = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Pipeline behaviour
    validation_mode: ValidationMode = Field(
        default="strict",
        alias="MAL_VALIDATION_MODE",
        description="'strict' skips invalid rows, 'lenient' defaults them",
    )
    csv_layout: CsvLayout = Field(
        default="header",
        alias="MAL_CSV_LAYOUT",
        description="Look up columns by header name or by position",
    )
    input_encoding: str = Field(
        default="utf-8-sig",
        alias="MAL_INPUT_ENCODING",
        description="Text encoding of the input CSV",
    )
    output_suffix: str = Field(
        default="_mal.xml",
        alias="MAL_OUTPUT_SUFFIX",
        description="Replaces the '.csv' suffix of the input path",
    )

    # <myinfo> header
    user_id: str = Field(
        default="123456789",
        alias="MAL_USER_ID",
        description="User id written to the export header",
    )
    user_name: str = Field(
        default="volx",
        alias="MAL_USER_NAME",
        description="User name written to the export header",
    )
    user_export_type: str = Field(
        default="2",
        alias="MAL_USER_EXPORT_TYPE",
        description="MAL export type marker (2 = manga list)",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        alias="LOG_LEVEL",
        description="Logging level",
    )

    @field_validator("output_suffix", mode="before")
    @classmethod
    def validate_output_suffix(cls, v: str) -> str:
        """Refuse suffixes that would write the output over a CSV input."""
        if not v or v.lower().endswith(".csv"):
            raise ValueError("Output suffix must be non-empty and must not end with '.csv'")
        return v

    @property
    def is_strict(self) -> bool:
        """Check if invalid rows are rejected instead of defaulted."""
        return self.validation_mode == "strict"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached converter settings.

    Settings are loaded once and cached for the lifetime of the process.

    Returns:
        Validated Settings instance

    Raises:
        ValidationError: If an environment variable holds an invalid value
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache.

    Useful for testing when environment variables change.
    """
    get_settings.cache_clear()
