"""Service agent: settings, logger and transport shared by resources."""

from __future__ import annotations

import logging
from typing import Any

from odataengine.config import ServiceSettings
from odataengine.core.errors import UnsupportedOperationError
from odataengine.logging import get_logger
from odataengine.resource.protocol import Transport


class Agent:
    """Bundles what every resource of one service needs.

    Args:
        settings: Service configuration. Loaded from the environment if omitted.
        transport: Executes resolved URLs. Terminal operations fail without one.
        logger: Diagnostic sink. Defaults to the logger named in settings.
    """

    def __init__(
        self,
        settings: ServiceSettings | None = None,
        transport: Transport | None = None,
        logger: logging.Logger | None = None,
    ):
        self.settings = settings if settings is not None else ServiceSettings()
        self.transport = transport
        self.logger = logger if logger is not None else get_logger(self.settings.logger_name)

    def execute(self, url: str) -> Any:
        """Hand url to the transport and return its result (value or awaitable).

        Raises:
            UnsupportedOperationError: If no transport is configured.
        """
        if self.transport is None:
            raise UnsupportedOperationError(f"No transport configured to fetch {url}")
        self.logger.debug("GET %s", url)
        return self.transport.get(url)
