"""Key validation and key predicate formatting."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from odataengine.core.encoding import encode_uri_component
from odataengine.core.errors import InvalidKeyShapeError, MissingKeyFieldError
from odataengine.core.model import DEFAULT_TYPE, KeyField


def validate_key(schema: Sequence[KeyField], candidate: Any) -> dict[str, Any]:
    """Extract a complete key from candidate according to the key schema.

    Only schema fields are copied; anything else in candidate is ignored.
    Nothing is returned unless every schema field has a value.

    Args:
        schema: Ordered key fields of the entity type.
        candidate: Mapping from key field name to value.

    Returns:
        New dict holding exactly the schema fields, in schema order.

    Raises:
        InvalidKeyShapeError: If candidate is None, not a mapping, or a sequence.
        MissingKeyFieldError: If a schema field has no value in candidate.
    """
    if candidate is None or not isinstance(candidate, Mapping) or isinstance(candidate, Sequence):
        raise InvalidKeyShapeError(f"Key is not plain object: {candidate!r}")

    key_value: dict[str, Any] = {}
    for key_field in schema:
        value = candidate.get(key_field.name)
        if value is None:
            raise MissingKeyFieldError(key_field.name)
        key_value[key_field.name] = value
    return key_value


def format_key_predicate(schema: Sequence[KeyField], key_value: Mapping[str, Any]) -> str:
    """Render a key as a URI-escaped path predicate.

    Single keys render as "(<literal>)", composite keys as
    "(K1=<literal>,K2=<literal>)". An empty key renders as "".

    Example:
        format_key_predicate((KeyField("ID", EdmInt32),), {"ID": 42}) -> "(42)"
    """
    if not key_value:
        return ""
    if len(schema) == 1:
        only = schema[0]
        return "(" + _format_component(only, key_value[only.name]) + ")"
    parts = [f"{k.name}={_format_component(k, key_value[k.name])}" for k in schema]
    return "(" + ",".join(parts) + ")"


def _format_component(key_field: KeyField, value: Any) -> str:
    edm_type = getattr(key_field, "type", None) or DEFAULT_TYPE
    return encode_uri_component(edm_type.format(value))
