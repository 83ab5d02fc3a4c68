"""Protocols for the collaborators of a request definition.

A RequestDefinition never performs I/O. It reads the entity type model and
base paths from its Resource, and hands terminal operations back to it. The
Resource in turn hands the resolved URL to a Transport.

Usage:
    agent = Agent(transport=my_transport)
    people = EntitySet(agent, "People", model)
    people.request().key({"ID": 7}).select("Name").get()
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from odataengine.core.capabilities import Capability
    from odataengine.core.model import EntityTypeModel, NavigationProperty
    from odataengine.request import RequestDefinition


class Logger(Protocol):
    """Diagnostic sink. logging.Logger satisfies this."""

    def warning(self, msg: str, *args: Any) -> None: ...

    def debug(self, msg: str, *args: Any) -> None: ...


class AgentLike(Protocol):
    """Holder of the logger shared by the resources of one service."""

    logger: Logger


@runtime_checkable
class Transport(Protocol):
    """Executes a resolved request. May return a value or an awaitable."""

    def get(self, url: str) -> Any:
        """Fetch url."""
        ...


class Resource(Protocol):
    """Owning resource of a request definition (typically an entity set)."""

    agent: AgentLike
    entity_type_model: EntityTypeModel
    capabilities: frozenset[Capability]
    max_top: int | None  # largest $top accepted; None for no limit

    def count(self, request: RequestDefinition) -> Any:
        """Execute a $count request for the request's current state."""
        ...

    def execute_get(self, request: RequestDefinition) -> Any:
        """Execute the request at its calculated path."""
        ...

    def create_navigation_property(
        self, request: RequestDefinition, navigation_property: NavigationProperty
    ) -> Any:
        """Create the association object for one navigation property."""
        ...

    def get_list_resource_path(self) -> str:
        """Base path of the collection."""
        ...

    def get_single_resource_path(self, key_value: Mapping[str, Any]) -> str:
        """Base path of the entity addressed by key_value."""
        ...

    def url_query(self, parameters: Mapping[str, str]) -> str:
        """Encode query parameters into a query string (without '?')."""
        ...
