"""Tests for the entity type model, primitive types and literal encoding."""

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

import pytest

from odataengine import (
    EdmBoolean,
    EdmDateTime,
    EdmDecimal,
    EdmGuid,
    EdmInt32,
    EdmInt64,
    EdmString,
    EntityTypeModel,
    KeyField,
    NavigationProperty,
)
from odataengine.core.encoding import encode_uri_component, format_literal
from odataengine.core.model import DEFAULT_TYPE, resolve_type


@pytest.mark.parametrize(
    ("edm_type", "value", "uri", "body"),
    [
        (EdmString, "O'Neil", "'O''Neil'", "O'Neil"),
        (EdmString, 7, "'7'", "7"),
        (EdmInt32, "12", "12", 12),
        (EdmInt64, 12, "12L", "12"),
        (EdmDecimal, Decimal("1.50"), "1.50M", "1.50"),
        (EdmBoolean, True, "true", True),
        (
            EdmGuid,
            "12345678-1234-5678-1234-567812345678",
            "guid'12345678-1234-5678-1234-567812345678'",
            "12345678-1234-5678-1234-567812345678",
        ),
        (
            EdmDateTime,
            datetime(2024, 5, 1, 12, 30),
            "datetime'2024-05-01T12:30:00'",
            "2024-05-01T12:30:00",
        ),
    ],
    ids=["string", "string_coerced", "int32", "int64", "decimal", "boolean", "guid", "datetime"],
)
def test_primitive_type_formatters(edm_type, value, uri, body):
    assert edm_type.format(value) == uri
    assert edm_type.format_body(value) == body


def test_key_field_defaults_to_string_type():
    assert KeyField("Code").type is DEFAULT_TYPE is EdmString


def test_resolve_type():
    assert resolve_type("Edm.Int64") is EdmInt64
    assert resolve_type(None) is DEFAULT_TYPE
    with pytest.raises(KeyError, match="Edm.Nope"):
        resolve_type("Edm.Nope")


def test_model_from_dict_fills_defaults():
    model = EntityTypeModel.from_dict(
        {
            "name": "Document",
            "key": [{"name": "ID", "type": "Edm.Guid"}, {"name": "Rev"}],
            "navigation_properties": [{"name": "Owner", "target": "People"}],
            "has_stream": True,
        }
    )

    assert model.key == (KeyField("ID", EdmGuid), KeyField("Rev", EdmString))
    assert model.navigation_properties == (NavigationProperty("Owner", "People", False),)
    assert model.has_stream
    assert model.properties == ()


def test_model_dict_round_trip():
    original = EntityTypeModel(
        name="OrderLine",
        key=(KeyField("OrderID", EdmInt32), KeyField("Line", EdmInt32)),
        navigation_properties=(NavigationProperty("Product"),),
        properties=("Quantity",),
    )

    assert EntityTypeModel.from_dict(original.to_dict()) == original


def test_has_property_includes_key_names():
    model = EntityTypeModel(key=(KeyField("ID"),), properties=("Name",))

    assert model.has_property("ID")
    assert model.has_property("Name")
    assert not model.has_property("Price")


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, "null"),
        (False, "false"),
        ("it's", "'it''s'"),
        (3, "3"),
        (3_000_000_000, "3000000000L"),
        (1.5, "1.5D"),
        (Decimal("2.50"), "2.50M"),
        (
            UUID("12345678-1234-5678-1234-567812345678"),
            "guid'12345678-1234-5678-1234-567812345678'",
        ),
        (datetime(2024, 1, 31, 8, 15), "datetime'2024-01-31T08:15:00'"),
        (date(2024, 1, 31), "datetime'2024-01-31T00:00:00'"),
    ],
    ids=[
        "null", "bool", "string", "int32", "int64", "double", "decimal", "guid", "datetime", "date"
    ],
)
def test_format_literal(value, expected):
    assert format_literal(value) == expected


def test_format_literal_rejects_unknown_types():
    with pytest.raises(TypeError):
        format_literal(object())


def test_encode_uri_component_matches_component_rules():
    assert encode_uri_component("a b&c=d/e,f'(g)*") == "a%20b%26c%3Dd%2Fe%2Cf'(g)*"


@pytest.mark.parametrize(
    ("edm_type", "value"),
    [
        (EdmGuid, UUID("12345678-1234-5678-1234-567812345678")),
        (EdmDecimal, Decimal("7.25")),
        (EdmDateTime, datetime(2024, 5, 1, 12, 30)),
        (EdmString, "O'Neil"),
        (EdmBoolean, True),
    ],
    ids=["guid", "decimal", "datetime", "string", "boolean"],
)
def test_typed_and_plain_literals_agree(edm_type, value):
    """CRITICAL: Key predicates and filters render the same value identically."""
    assert edm_type.format(value) == format_literal(value)
