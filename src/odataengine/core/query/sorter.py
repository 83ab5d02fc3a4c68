"""Sort encoder: sort definitions to $orderby clauses."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from odataengine.core.encoding import encode_uri_component
from odataengine.core.errors import InvalidArgumentError
from odataengine.core.model import EntityTypeModel
from odataengine.core.query.models import SortField


def parse_sort_definition(definition: Any) -> SortField:
    """Normalize one sort definition to a SortField.

    Accepts a SortField, a property name ("Name"), a descending shorthand
    ("-Name"), or an explicit clause ("Name desc", "Name asc").

    Raises:
        InvalidArgumentError: If the definition is empty or malformed.
    """
    if isinstance(definition, SortField):
        return definition
    if not isinstance(definition, str) or not definition.strip():
        raise InvalidArgumentError(f"Invalid sort definition: {definition!r}")

    text = definition.strip()
    if text.startswith("-"):
        parts = text[1:].split()
        if len(parts) != 1:
            raise InvalidArgumentError(
                f"Invalid sort definition: {definition!r} ('-' takes a bare field name)"
            )
        return SortField(parts[0], descending=True)

    parts = text.split()
    if len(parts) == 1:
        return SortField(parts[0])
    if len(parts) == 2 and parts[1].lower() in ("asc", "desc"):
        return SortField(parts[0], descending=parts[1].lower() == "desc")
    raise InvalidArgumentError(f"Invalid sort definition: {definition!r}")


class Sorter:
    """Encodes an ordered list of sort definitions for the $orderby option."""

    def __init__(self, entity_type_model: EntityTypeModel, definitions: Sequence[Any]):
        if not definitions:
            raise InvalidArgumentError("At least one sort definition is required")
        fields = [parse_sort_definition(d) for d in definitions]
        for sort_field in fields:
            if not sort_field.field:
                raise InvalidArgumentError("Sort field name is empty")
            if not entity_type_model.has_property(sort_field.field):
                raise InvalidArgumentError(
                    f"Unknown sort field '{sort_field.field}' for {entity_type_model.name}"
                )
        self._fields = tuple(fields)

    @property
    def fields(self) -> tuple[SortField, ...]:
        return self._fields

    def to_clause(self) -> str:
        """Unencoded $orderby clause, e.g. "Name,Price desc"."""
        return ",".join(f"{f.field} desc" if f.descending else f.field for f in self._fields)

    def to_uri_component(self) -> str:
        return encode_uri_component(self.to_clause())
