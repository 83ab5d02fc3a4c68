"""Entity set: reference implementation of the Resource protocol.

Usage:
    agent = Agent(ServiceSettings(service_root="/odata"), transport=transport)
    products = EntitySet(agent, "Products", model)

    products.request().filter({"Category": "Books"}).orderby("-Price").get(10)
    # transport.get("/odata/Products?$filter=...&$orderby=Price%20desc&$top=10")
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from odataengine.core.capabilities import Capability, default_capabilities
from odataengine.core.errors import UnsupportedOperationError
from odataengine.core.key import format_key_predicate
from odataengine.core.model import EntityTypeModel, NavigationProperty
from odataengine.core.path import calculate_count_path
from odataengine.core.query import format_query_string
from odataengine.request import RequestDefinition
from odataengine.resource.agent import Agent
from odataengine.resource.association import Association


class EntitySet:
    """Named collection of entities of one entity type.

    Args:
        agent: Service agent supplying settings, logger and transport.
        name: Entity set name as it appears in resource paths.
        entity_type_model: Schema of the entities in this set.
        capabilities: Supported operations. Derived from the stream flag if omitted.
    """

    def __init__(
        self,
        agent: Agent,
        name: str,
        entity_type_model: EntityTypeModel,
        capabilities: frozenset[Capability] | None = None,
    ):
        self.agent = agent
        self.name = name
        self.entity_type_model = entity_type_model
        self.capabilities = (
            capabilities
            if capabilities is not None
            else default_capabilities(entity_type_model.has_stream)
        )

    def __repr__(self) -> str:
        return f"EntitySet({self.name!r})"

    @property
    def max_top(self) -> int | None:
        """Largest page size accepted by top()."""
        return self.agent.settings.max_top

    def request(self, parameters: Mapping[str, Any] | None = None) -> RequestDefinition:
        """Start a new request definition with associations registered."""
        return RequestDefinition(self, parameters).register_associations()

    # Paths

    def get_list_resource_path(self) -> str:
        return f"{self.agent.settings.service_root}/{self.name}"

    def get_single_resource_path(self, key_value: Mapping[str, Any]) -> str:
        predicate = format_key_predicate(self.entity_type_model.key, key_value)
        return f"{self.get_list_resource_path()}{predicate}"

    def url_query(self, parameters: Mapping[str, str]) -> str:
        return format_query_string(parameters)

    # Execution

    def create_navigation_property(
        self, request: RequestDefinition, navigation_property: NavigationProperty
    ) -> Association:
        return Association(request, navigation_property)

    def execute_get(self, request: RequestDefinition) -> Any:
        """Fetch the request at its calculated path."""
        path = request.path if request.path is not None else request.calculate_path()
        return self.agent.execute(path)

    def count(self, request: RequestDefinition) -> Any:
        """Fetch the number of entities matching the request.

        Raises:
            UnsupportedOperationError: If this set does not support counting.
        """
        if Capability.COUNT not in self.capabilities:
            raise UnsupportedOperationError(f"Resource {self.name} doesn't support count")
        path = calculate_count_path(
            self.get_list_resource_path,
            lambda: self.get_single_resource_path(request.key_value),
            is_list=request.is_list,
            query=self.url_query(request.query_parameters.non_empty()),
        )
        return self.agent.execute(path)
