"""Primitive EDM types and their value formatters.

Usage:
    EdmString.format("O'Neil")   # "'O''Neil'"
    EdmInt64.format(42)          # "42L"
    EdmInt64.format_body(42)     # "42"
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Any
from uuid import UUID

from odataengine.core.encoding import format_literal


def _string_body(value: Any) -> Any:
    return str(value)


def _identity(value: Any) -> Any:
    return value


@dataclass(frozen=True, slots=True)
class EdmType:
    """A primitive type with URI and body formatters.

    Attributes:
        name: Qualified type name, e.g. "Edm.String".
        uri_format: Callable rendering a value as a URI literal.
        body_format: Callable rendering a value for a JSON request body.
    """

    name: str
    uri_format: Callable[[Any], str] = field(default=format_literal, compare=False)
    body_format: Callable[[Any], Any] = field(default=_identity, compare=False)

    def format(self, value: Any) -> str:
        """Render value as a URI literal (not percent-encoded)."""
        return self.uri_format(value)

    def format_body(self, value: Any) -> Any:
        """Render value for inclusion in a JSON request body."""
        return self.body_format(value)


def _format_string(value: Any) -> str:
    return format_literal(str(value))


def _format_int(value: Any) -> str:
    return str(int(value))


def _format_int64(value: Any) -> str:
    return f"{int(value)}L"


def _format_decimal(value: Any) -> str:
    return format_literal(Decimal(str(value)))


def _format_guid(value: Any) -> str:
    return format_literal(UUID(str(value)))


def _format_datetime(value: Any) -> str:
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    if not isinstance(value, date):
        raise TypeError(f"Cannot format {value!r} as Edm.DateTime")
    return format_literal(value)


def _datetime_body(value: Any) -> Any:
    return value.isoformat() if isinstance(value, date) else value


def _format_boolean(value: Any) -> str:
    return format_literal(bool(value))


EdmString = EdmType("Edm.String", _format_string, _string_body)
EdmInt32 = EdmType("Edm.Int32", _format_int, int)
EdmInt64 = EdmType("Edm.Int64", _format_int64, _string_body)
EdmDecimal = EdmType("Edm.Decimal", _format_decimal, _string_body)
EdmBoolean = EdmType("Edm.Boolean", _format_boolean, bool)
EdmGuid = EdmType("Edm.Guid", _format_guid, _string_body)
EdmDateTime = EdmType("Edm.DateTime", _format_datetime, _datetime_body)

DEFAULT_TYPE = EdmString

PRIMITIVE_TYPES: dict[str, EdmType] = {
    t.name: t
    for t in (EdmString, EdmInt32, EdmInt64, EdmDecimal, EdmBoolean, EdmGuid, EdmDateTime)
}


def resolve_type(name: str | None) -> EdmType:
    """Look up a primitive type by name, falling back to the default type.

    Raises:
        KeyError: If name is given but is not a known primitive type.
    """
    if name is None:
        return DEFAULT_TYPE
    try:
        return PRIMITIVE_TYPES[name]
    except KeyError:
        raise KeyError(f"Unknown primitive type: {name}") from None
