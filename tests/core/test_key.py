"""Tests for key validation and key predicates.

Critical Invariants:
- Only mappings are accepted as keys (sequences are rejected even though iterable)
- All key fields are required; extra fields are ignored
"""

from uuid import UUID

import pytest

from odataengine import (
    EdmGuid,
    EdmInt32,
    EdmInt64,
    InvalidKeyShapeError,
    KeyField,
    MissingKeyFieldError,
)
from odataengine.core.key import format_key_predicate, validate_key

SCHEMA = (KeyField("OrderID", EdmInt32), KeyField("Line", EdmInt32))


@pytest.mark.parametrize("candidate", [None, 10, [], ["OrderID"], "OrderID", b"x", object()])
def test_validate_key_rejects_non_mappings(candidate):
    with pytest.raises(InvalidKeyShapeError, match="not plain object"):
        validate_key(SCHEMA, candidate)


def test_validate_key_keeps_schema_order_and_drops_extras():
    key = validate_key(SCHEMA, {"Line": 2, "Extra": "x", "OrderID": 1})

    assert key == {"OrderID": 1, "Line": 2}
    assert list(key) == ["OrderID", "Line"]


@pytest.mark.parametrize(
    ("candidate", "missing"),
    [
        ({"Line": 2}, "OrderID"),
        ({"OrderID": 1}, "Line"),
        ({"OrderID": 1, "Line": None}, "Line"),
        ({}, "OrderID"),
    ],
    ids=["first", "second", "none_value", "empty"],
)
def test_validate_key_requires_every_field(candidate, missing):
    with pytest.raises(MissingKeyFieldError) as excinfo:
        validate_key(SCHEMA, candidate)

    assert excinfo.value.field == missing
    assert missing in str(excinfo.value)


def test_validate_key_accepts_falsy_values():
    """Zero and empty string are valid key values; only absence is missing."""
    assert validate_key(SCHEMA, {"OrderID": 0, "Line": 0}) == {"OrderID": 0, "Line": 0}


def test_empty_schema_accepts_any_mapping():
    assert validate_key((), {"anything": 1}) == {}


@pytest.mark.parametrize(
    ("schema", "key", "expected"),
    [
        ((KeyField("ID", EdmInt32),), {"ID": 42}, "(42)"),
        ((KeyField("ID", EdmInt64),), {"ID": 42}, "(42L)"),
        ((KeyField("Name"),), {"Name": "Salt & Pepper"}, "('Salt%20%26%20Pepper')"),
        ((KeyField("Name"),), {"Name": "O'Neil"}, "('O''Neil')"),
        (
            (KeyField("ID", EdmGuid),),
            {"ID": UUID("12345678-1234-5678-1234-567812345678")},
            "(guid'12345678-1234-5678-1234-567812345678')",
        ),
        (SCHEMA, {"OrderID": 1, "Line": 2}, "(OrderID=1,Line=2)"),
        (SCHEMA, {}, ""),
    ],
    ids=["int32", "int64", "escaped_string", "quote", "guid", "composite", "empty"],
)
def test_format_key_predicate(schema, key, expected):
    assert format_key_predicate(schema, key) == expected
