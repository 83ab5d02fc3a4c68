"""Configuration module using Pydantic Settings.

Provides typed service configuration with environment variable support.

Usage:
    from odataengine.config import ServiceSettings

    settings = ServiceSettings(service_root="/odata")
"""

from odataengine.config.settings import ServiceSettings

__all__ = [
    "ServiceSettings",
]
