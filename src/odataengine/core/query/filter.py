"""Filter encoder: structured filter definitions to $filter expressions.

Usage:
    Filter("Price gt 10").to_uri_component()
    Filter(FilterCondition("Name", FilterOperator.EQ, "O'Neil")).to_uri_component()
    Filter({"Category": "Books", "InStock": True}).to_uri_component()

    # Typed fields render like key predicates: "ID eq 5L"
    Filter(FilterCondition("ID", FilterOperator.EQ, 5, type=EdmInt64))
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from odataengine.core.encoding import encode_uri_component, format_literal
from odataengine.core.errors import InvalidArgumentError
from odataengine.core.model import EdmType
from odataengine.core.query.models import FilterCondition, FilterGroup, FilterOperator

_FUNCTION_OPERATORS = {
    FilterOperator.STARTSWITH,
    FilterOperator.ENDSWITH,
}


def _literal(value: Any, edm_type: EdmType | None = None) -> str:
    try:
        if edm_type is not None and value is not None:
            return edm_type.format(value)
        return format_literal(value)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(str(e)) from e


def _operator(condition: FilterCondition) -> FilterOperator:
    if isinstance(condition.operator, FilterOperator):
        return condition.operator
    try:
        return FilterOperator(str(condition.operator).lower())
    except ValueError as e:
        raise InvalidArgumentError(
            f"Unknown filter operator {condition.operator!r} on {condition.field}"
        ) from e


def _build_condition(condition: FilterCondition) -> str:
    if not condition.field:
        raise InvalidArgumentError("Filter condition has no field")
    operator = _operator(condition)
    field, value = condition.field, condition.value

    if operator in _FUNCTION_OPERATORS:
        return f"{operator.value}({field},{_literal(value, condition.type)})"
    if operator == FilterOperator.CONTAINS:
        return f"substringof({_literal(value, condition.type)},{field})"
    if operator == FilterOperator.IN:
        if isinstance(value, str | bytes) or not hasattr(value, "__iter__"):
            raise InvalidArgumentError(f"'in' filter on {field} needs a collection value")
        items = [f"{field} eq {_literal(v, condition.type)}" for v in value]
        if not items:
            raise InvalidArgumentError(f"'in' filter on {field} has no values")
        if len(items) == 1:
            return items[0]
        return " or ".join(f"({item})" for item in items)
    return f"{field} {operator.value} {_literal(value, condition.type)}"


def build_filter_expression(definition: Any) -> str | None:
    """Convert a filter definition to an (unencoded) filter expression.

    Args:
        definition: Expression string, FilterCondition, FilterGroup, or a
            mapping of property name to value (equalities joined with "and").

    Returns:
        Expression text, or None for an empty group.

    Raises:
        InvalidArgumentError: If the definition has an unsupported shape.
    """
    if isinstance(definition, str):
        return definition.strip() or None

    if isinstance(definition, FilterCondition):
        return _build_condition(definition)

    if isinstance(definition, Mapping):
        group = FilterGroup(
            [FilterCondition(str(k), FilterOperator.EQ, v) for k, v in definition.items()]
        )
        return build_filter_expression(group)

    if isinstance(definition, FilterGroup):
        if definition.operator not in ("and", "or"):
            raise InvalidArgumentError(f"Unknown filter group operator: {definition.operator}")
        children = [build_filter_expression(f) for f in definition.filters]
        children = [c for c in children if c is not None]

        if not children:
            return None
        if len(children) == 1:
            return children[0]

        joiner = f" {definition.operator} "
        return joiner.join(f"({c})" for c in children)

    raise InvalidArgumentError(f"Invalid filter definition: {definition!r}")


class Filter:
    """Encodes one filter definition for the $filter query option."""

    def __init__(self, definition: Any):
        if definition is None:
            raise InvalidArgumentError("Filter definition is required")
        expression = build_filter_expression(definition)
        if expression is None:
            raise InvalidArgumentError(f"Filter definition is empty: {definition!r}")
        self._expression = expression

    @property
    def expression(self) -> str:
        """The unencoded filter expression."""
        return self._expression

    def to_uri_component(self) -> str:
        """Filter expression encoded for use as a query-string value."""
        return encode_uri_component(self._expression)
