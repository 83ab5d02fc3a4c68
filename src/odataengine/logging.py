"""Logging setup for odataengine.

Every service agent logs through the logger named by
``ServiceSettings.logger_name``: shortcut collisions at WARNING, resolved
paths and fetched URLs at DEBUG. The library never installs handlers on its
own; applications that want this output call configure_logging() with the
same settings they hand to the agent.

Usage:
    settings = ServiceSettings(log_level="DEBUG")
    configure_logging(settings)
    agent = Agent(settings, transport=transport)
"""

from __future__ import annotations

import logging
from typing import TextIO

from odataengine.config import ServiceSettings

DEFAULT_FORMAT = "%(levelname)s %(name)s: %(message)s"


class _ServiceHandler(logging.StreamHandler):
    """Stream handler installed by configure_logging()."""


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def configure_logging(
    settings: ServiceSettings | None = None,
    stream: TextIO | None = None,
    fmt: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Send the service logger's records to stream at the configured level.

    Calling again replaces the handler of the previous call, so each service
    logger has at most one.

    Args:
        settings: Supplies logger_name and log_level. Loaded from the environment if omitted.
        stream: Destination; stderr if omitted.
        fmt: Record format.

    Returns:
        The configured service logger.
    """
    settings = settings if settings is not None else ServiceSettings()
    logger = get_logger(settings.logger_name)
    for handler in [h for h in logger.handlers if isinstance(h, _ServiceHandler)]:
        logger.removeHandler(handler)

    handler = _ServiceHandler(stream)
    handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)
    logger.setLevel(settings.log_level)
    return logger
