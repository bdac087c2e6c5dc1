"""
Centralized configuration for honey-health.

Uses Pydantic BaseSettings for environment variable integration
and validation. All configurable values should be defined here.

Configuration sources (in order of precedence):
1. Explicit constructor arguments
2. Environment variables (HONEYHEALTH_*)
3. .env file
4. Default values

Example:
    from honeyhealth.config import get_config

    config = get_config()
    print(config.model_paths)  # From HONEYHEALTH_MODEL_PATHS or default

    # Override at runtime
    config = get_config(last_written_days=7)
"""

from __future__ import annotations

import os
from typing import Annotated, Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class HoneyHealthConfig(BaseSettings):
    """
    Central configuration for honey-health.

    All settings can be overridden via environment variables
    prefixed with HONEYHEALTH_.

    Example:
        export HONEYHEALTH_MODEL_PATHS=semconv/model,local/model
        export HONEYHEALTH_LOG_LEVEL=debug
    """

    model_config = SettingsConfigDict(
        env_prefix="HONEYHEALTH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Service identification
    service_name: str = Field(
        default="honey-health",
        description="Service name for log and telemetry attribution",
    )

    # Convention model
    model_paths: Annotated[list[str], NoDecode] = Field(
        default_factory=list,
        description="Roots of semantic convention model directories",
    )

    # Report
    report_output: str = Field(
        default="hh_report.csv",
        description="Path of the CSV dataset comparison report",
    )
    last_written_days: int = Field(
        default=30,
        ge=1,
        description="Ignore datasets and columns not written within this many days",
    )

    # Logging
    log_level: Literal["debug", "info", "warning", "error"] = Field(
        default="info",
        description="Logging level for honey-health",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log output format (json for log pipelines, text for console)",
    )

    @field_validator("model_paths", mode="before")
    @classmethod
    def split_paths(cls, v: object) -> object:
        """Accept a comma-separated string as well as a list."""
        if isinstance(v, str):
            return [p.strip() for p in v.split(",") if p.strip()]
        return v

    @field_validator("model_paths")
    @classmethod
    def expand_paths(cls, v: list[str]) -> list[str]:
        """Expand ~ and environment variables in paths."""
        return [os.path.expanduser(os.path.expandvars(p)) for p in v]


# Global singleton
_config: Optional[HoneyHealthConfig] = None


def get_config(**overrides) -> HoneyHealthConfig:
    """
    Get the global configuration instance.

    Creates a singleton on first call. Subsequent calls return
    the same instance unless overrides are provided.

    Args:
        **overrides: Override any config values

    Returns:
        HoneyHealthConfig instance
    """
    global _config

    if overrides or _config is None:
        _config = HoneyHealthConfig(**overrides)

    return _config


def reset_config() -> None:
    """Reset the global configuration (for testing)."""
    global _config
    _config = None
