"""Fluent request definition for entity-set resources.

Usage:
    request = RequestDefinition(entity_set, {})

    # Collection query
    request.filter({"Category": "Books"}).orderby("-Price").select("Name", "Price").get(10)

    # Single entity
    request.key({"ID": 42}).expand("Supplier").get()
    request.get({"ID": 42})

    # Navigation properties
    request.register_associations()
    request.navigation_properties["Supplier"]  # always present
    request.Supplier                           # shortcut, unless the name collides

Gotcha: builder methods only record state. Nothing is fetched until get()
or count() hands the request back to its resource.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from odataengine.core.capabilities import Capability
from odataengine.core.encoding import encode_uri_component
from odataengine.core.errors import InvalidArgumentError, UnsupportedOperationError
from odataengine.core.key import validate_key
from odataengine.core.path import calculate_path, resolve_state
from odataengine.core.query import Filter, QueryParameterStore, Sorter, format_field_list
from odataengine.request.associations import AssociationRegistrar
from odataengine.request.dispatch import KeyFilter, TopCount, resolve_get_call

if TYPE_CHECKING:
    from odataengine.resource.protocol import Resource


def _check_page_value(option: str, value: Any, limit: int | None = None) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{option} must be a non-negative integer, got {value!r}")
    if value < 0:
        raise InvalidArgumentError(f"{option} must be a non-negative integer, got {value}")
    if limit is not None and value > limit:
        raise InvalidArgumentError(f"{option} of {value} exceeds the limit of {limit}")
    return value


class RequestDefinition:
    """Accumulates the intent of one request against a resource.

    Args:
        resource: Owning resource (borrowed for the request's lifetime).
        parameters: Initial query parameters, already encoded.

    Attributes:
        filter_class: Encoder constructed from a filter definition.
        sorter_class: Encoder constructed from (entity type model, definitions).
    """

    filter_class: type = Filter
    sorter_class: type = Sorter

    def __init__(self, resource: Resource, parameters: Mapping[str, Any] | None = None):
        self._resource = resource
        self._key_value: dict[str, Any] = {}
        self._query_parameters = QueryParameterStore(parameters)
        self._path: str | None = None
        self._associations = AssociationRegistrar(self._is_reserved)

    def __repr__(self) -> str:
        return (
            f"RequestDefinition(key={self._key_value!r}, "
            f"parameters={dict(self._query_parameters)!r})"
        )

    # State

    @property
    def resource(self) -> Resource:
        return self._resource

    @property
    def key_value(self) -> dict[str, Any]:
        """Copy of the current key (empty until key() succeeds)."""
        return dict(self._key_value)

    @property
    def query_parameters(self) -> QueryParameterStore:
        return self._query_parameters

    @property
    def navigation_properties(self) -> Mapping[str, Any]:
        """Every registered association, by navigation property name."""
        return MappingProxyType(self._associations.namespace)

    @property
    def path(self) -> str | None:
        """Path from the last calculate_path(); None after any mutation."""
        return self._path

    @property
    def is_list(self) -> bool:
        """True while no key is set (the request denotes a collection)."""
        return not self._key_value

    # Builder

    def key(self, candidate: Any) -> RequestDefinition:
        """Address a single entity.

        Raises:
            InvalidKeyShapeError: If candidate is not a mapping.
            MissingKeyFieldError: If a key field has no value.
        """
        self._key_value = validate_key(self._resource.entity_type_model.key, candidate)
        self._path = None
        return self

    def top(self, count: Any) -> RequestDefinition:
        """Limit the number of entities returned ($top).

        Raises:
            InvalidArgumentError: If count is not a non-negative int or exceeds max_top.
        """
        limit = self._resource.max_top
        return self.set_query_parameter("$top", str(_check_page_value("$top", count, limit)))

    def skip(self, count: Any) -> RequestDefinition:
        """Skip the first count entities ($skip)."""
        return self.set_query_parameter("$skip", str(_check_page_value("$skip", count)))

    def filter(self, definition: Any) -> RequestDefinition:
        encoder = self.filter_class(definition)
        return self.set_query_parameter("$filter", encoder.to_uri_component())

    def orderby(self, *definitions: Any) -> RequestDefinition:
        """Sort by one or more definitions, most significant first."""
        if not definitions:
            raise InvalidArgumentError("orderby() requires at least one sort definition")
        encoder = self.sorter_class(self._resource.entity_type_model, list(definitions))
        return self.set_query_parameter("$orderby", encoder.to_uri_component())

    def select(self, *fields: str) -> RequestDefinition:
        return self.set_query_parameter("$select", format_field_list("select()", fields))

    def expand(self, *fields: str) -> RequestDefinition:
        return self.set_query_parameter("$expand", format_field_list("expand()", fields))

    def parameter(self, name: str, value: Any) -> RequestDefinition:
        """Set a custom query parameter; the value is URI-encoded.

        Raises:
            UnsupportedOperationError: If the resource doesn't support parameters.
            InvalidArgumentError: If name is empty.
        """
        capabilities = getattr(self._resource, "capabilities", frozenset())
        if Capability.PARAMETERS not in capabilities:
            raise UnsupportedOperationError(
                f"Resource {self._resource!r} doesn't support parameters"
            )
        if not isinstance(name, str) or not name:
            raise InvalidArgumentError(f"Invalid parameter name: {name!r}")
        encoded = "" if value is None else encode_uri_component(str(value))
        return self.set_query_parameter(name, encoded)

    def parameters(self, parameters: Mapping[str, Any]) -> RequestDefinition:
        """Set several custom parameters; stops at the first failure."""
        for name, value in parameters.items():
            self.parameter(name, value)
        return self

    def set_query_parameter(self, name: str, value: str) -> RequestDefinition:
        """Record an already-encoded query parameter, replacing any previous value."""
        self._query_parameters[name] = value
        self._path = None
        return self

    # Associations

    def register_associations(self) -> RequestDefinition:
        """Expose every navigation property of the entity type.

        Each association is always reachable through navigation_properties.
        Names that collide with existing members get no shortcut; a warning
        is logged through the resource's agent instead.
        """
        resource = self._resource
        self._associations.register(
            resource.entity_type_model.navigation_properties,
            lambda prop: resource.create_navigation_property(self, prop),
            resource.agent.logger,
        )
        return self

    def _is_reserved(self, name: str) -> bool:
        return hasattr(type(self), name) or name in vars(self)

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails, so shortcuts never shadow members.
        associations = self.__dict__.get("_associations")
        if associations is not None and name in associations.shortcuts:
            return associations.shortcuts[name]
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(self._associations.shortcuts))

    # Resolution and execution

    def calculate_path(self) -> str:
        """Resolve and store the final resource path."""
        resource = self._resource
        has_stream = bool(getattr(resource.entity_type_model, "has_stream", False))
        query = resource.url_query(self._query_parameters.non_empty())
        self._path = calculate_path(
            resource.get_list_resource_path,
            lambda: resource.get_single_resource_path(self._key_value),
            has_stream=has_stream,
            is_list=self.is_list,
            query=query,
        )
        resource.agent.logger.debug(
            "Resolved %s path: %s", resolve_state(has_stream, self.is_list).value, self._path
        )
        return self._path

    def get(self, *args: Any) -> Any:
        """Execute the request.

        Forms:
            get()          execute as configured
            get(10)        top(10), then execute
            get({"ID": 1}) key({"ID": 1}), then execute

        Raises:
            InvalidArgumentError: For any other argument shape, before any state changes.
        """
        call = resolve_get_call(*args)
        if isinstance(call, TopCount):
            self.top(call.count)
        elif isinstance(call, KeyFilter):
            self.key(call.key)
        self.calculate_path()
        return self._resource.execute_get(self)

    def count(self) -> Any:
        """Execute a count of the entities this request denotes.

        The request path is resolved first, as for get(); the resource then
        derives the $count path from the same state.
        """
        self.calculate_path()
        return self._resource.count(self)
