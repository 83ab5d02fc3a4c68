"""URI encoding and literal formatting helpers."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Any
from urllib.parse import quote
from uuid import UUID

# Characters left unescaped by ECMAScript's encodeURIComponent.
_COMPONENT_SAFE = "-_.!~*'()"

# Larger integers need the Edm.Int64 "L" suffix.
_INT32_MIN, _INT32_MAX = -(2**31), 2**31 - 1


def encode_uri_component(value: str) -> str:
    """Percent-encode a value for use inside a query-string component.

    Example:
        encode_uri_component("Name eq 'O''Brien'") -> "Name%20eq%20'O''Brien'"
    """
    return quote(value, safe=_COMPONENT_SAFE)


def format_literal(value: Any) -> str:
    """Format a Python value as an OData v2 URI literal (unencoded).

    Key predicates and filter expressions share these forms, so a value
    addresses and filters the same entity identically.

    Args:
        value: str, bool, None, int, float, Decimal, UUID, date or datetime.

    Returns:
        Literal text, e.g. "'Paddy O''Brian'", "42", "42000000000L", "1.5M",
        "guid'...'", "datetime'2024-01-31T00:00:00'", "true", "null".

    Raises:
        TypeError: If the value has no literal representation.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return "'" + value.replace("'", "''") + "'"
    if isinstance(value, int):
        return str(value) if _INT32_MIN <= value <= _INT32_MAX else f"{value}L"
    if isinstance(value, float):
        return f"{value!r}D"
    if isinstance(value, Decimal):
        return f"{value}M"
    if isinstance(value, UUID):
        return f"guid'{value}'"
    if isinstance(value, datetime):
        return f"datetime'{value.isoformat()}'"
    if isinstance(value, date):
        # Edm.DateTime is the only date-bearing type in v2
        return f"datetime'{datetime.combine(value, datetime.min.time()).isoformat()}'"
    raise TypeError(f"Cannot format {type(value).__name__} as a URI literal: {value!r}")
