"""Query functionality: parameter store, filter and sort encoders."""

from odataengine.core.query.filter import Filter, build_filter_expression
from odataengine.core.query.models import (
    FilterCondition,
    FilterGroup,
    FilterOperator,
    QueryParameterStore,
    SortField,
)
from odataengine.core.query.operations import (
    SYSTEM_QUERY_OPTIONS,
    format_field_list,
    format_query_string,
)
from odataengine.core.query.sorter import Sorter, parse_sort_definition

__all__ = [
    # Models
    "QueryParameterStore",
    "FilterCondition",
    "FilterGroup",
    "FilterOperator",
    "SortField",
    # Encoders
    "Filter",
    "Sorter",
    "build_filter_expression",
    "parse_sort_definition",
    # Operations
    "SYSTEM_QUERY_OPTIONS",
    "format_field_list",
    "format_query_string",
]
