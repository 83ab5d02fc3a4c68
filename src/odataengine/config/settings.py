"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for services.

Usage:
    from odataengine.config import ServiceSettings

    # Load from environment variables (ODATA_*)
    settings = ServiceSettings()

    # Or override with explicit values
    settings = ServiceSettings(service_root="/odata/v2", max_top=500)
"""

from __future__ import annotations

import logging

try:
    from pydantic import field_validator
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install odataengine"
    ) from e


class ServiceSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for an OData service and its request definitions.

    Attributes:
        service_root: Path prefix of every resource path (no trailing slash).
        logger_name: Name of the logger used by the service agent.
        max_top: Largest page size accepted by top(); None for no limit.
        log_level: Level set on the service logger by configure_logging().

    Environment Variables:
        ODATA_SERVICE_ROOT
        ODATA_LOGGER_NAME
        ODATA_MAX_TOP
        ODATA_LOG_LEVEL
    """

    model_config = SettingsConfigDict(
        env_prefix="ODATA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    service_root: str = ""
    logger_name: str = "odataengine"
    max_top: int | None = None
    log_level: str = "WARNING"

    @field_validator("service_root")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("max_top")
    @classmethod
    def _non_negative(cls, value: int | None) -> int | None:
        if value is not None and value < 0:
            raise ValueError("max_top must be non-negative")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return level
