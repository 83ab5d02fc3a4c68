"""Query models: parameter store, filter conditions and sort fields.

Usage:
    store = QueryParameterStore({"$top": "10"})
    store["$filter"] = "Name%20eq%20'x'"

    cond = FilterCondition("Price", FilterOperator.GT, 10)
    group = FilterGroup([cond, FilterCondition("Name", FilterOperator.STARTSWITH, "A")])
    sort = SortField("Price", descending=True)
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, MutableMapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from odataengine.core.model import EdmType


class QueryParameterStore(MutableMapping[str, str]):
    """Mapping from query parameter name to its encoded value.

    At most one entry per name; later writes overwrite earlier ones.
    """

    def __init__(self, seed: Mapping[str, Any] | None = None):
        self._values: dict[str, str] = {}
        if seed:
            for name, value in seed.items():
                self[name] = value

    def __getitem__(self, name: str) -> str:
        return self._values[name]

    def __setitem__(self, name: str, value: Any) -> None:
        self._values[name] = "" if value is None else str(value)

    def __delitem__(self, name: str) -> None:
        del self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"QueryParameterStore({self._values!r})"

    def non_empty(self) -> dict[str, str]:
        """Parameters whose value is not the empty string."""
        return {name: value for name, value in self._values.items() if value != ""}


class FilterOperator(Enum):
    """Operators for filter conditions."""

    EQ = "eq"
    NE = "ne"
    GT = "gt"
    GE = "ge"
    LT = "lt"
    LE = "le"
    IN = "in"  # value is a collection; expands to "or"ed equalities
    CONTAINS = "contains"  # rendered as substringof()
    STARTSWITH = "startswith"
    ENDSWITH = "endswith"


@dataclass(slots=True)
class FilterCondition:
    """Single filter condition.

    Attributes:
        field: Property path to filter on (supports navigation: "Category/Name").
        operator: Comparison operator (a FilterOperator or its name, e.g. "eq").
        value: Value to compare against.
        type: Primitive type of the field. When set, values are formatted like
            key predicates of that type (e.g. EdmInt64 renders 5 as "5L").
    """

    field: str
    operator: FilterOperator | str
    value: Any
    type: EdmType | None = None


@dataclass(slots=True)
class FilterGroup:
    """Group of conditions combined with AND/OR.

    Attributes:
        filters: List of FilterCondition or nested FilterGroup.
        operator: How to combine filters ("and" or "or").
    """

    filters: list[FilterCondition | FilterGroup] = field(default_factory=list)
    operator: str = "and"  # "and" or "or"


@dataclass(frozen=True, slots=True)
class SortField:
    """One sort criterion."""

    field: str
    descending: bool = False
