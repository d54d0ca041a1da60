"""
Configuration Management for finledger

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
Every knob the ledger exposes is read from LEDGER_* variables or a .env
file, and validated once at startup.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LedgerSettings(BaseSettings):
    """
    Ledger settings.

    Loads configuration from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="LEDGER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Persistence
    data_file: Path = Field(
        default=Path("finances.json"),
        description="Path of the JSON file holding the ledger"
    )
    json_indent: int = Field(
        default=2,
        ge=0,
        le=8,
        description="Indentation used when writing the ledger file"
    )
    save_retry_attempts: int = Field(
        default=3,
        ge=1,
        le=10,
        description="How many times a failing save is attempted"
    )
    save_retry_wait_seconds: float = Field(
        default=0.2,
        ge=0.0,
        le=5.0,
        description="Base wait between save attempts (exponential backoff)"
    )

    # Reporting
    recent_limit: int = Field(
        default=10,
        ge=1,
        description="Default number of entries returned by recent transactions"
    )
    top_categories_limit: int = Field(
        default=5,
        ge=1,
        description="Number of expense categories kept in a monthly report"
    )

    @field_validator('data_file')
    @classmethod
    def validate_data_file(cls, v: Path) -> Path:
        """A directory can never be used as the ledger file."""
        if v.is_dir():
            raise ValueError(f"Ledger data file points to a directory: {v}")
        return v


@lru_cache()
def get_settings() -> LedgerSettings:
    """
    Get ledger settings (cached).

    Call get_settings.cache_clear() to reload if needed.
    """
    return LedgerSettings()
