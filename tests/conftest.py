"""Shared test fixtures."""

import sys
from unittest.mock import MagicMock

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from odataengine import (
    Agent,
    EdmInt32,
    EntitySet,
    EntityTypeModel,
    KeyField,
    NavigationProperty,
    RequestDefinition,
    ServiceSettings,
)
from odataengine.core.query import format_query_string


class FakeResource:
    """Resource double with recording collaborators and fixed base paths."""

    def __init__(self, model: EntityTypeModel, capabilities=frozenset()):
        self.agent = MagicMock()
        self.entity_type_model = model
        self.capabilities = capabilities
        self.max_top = None
        self.count = MagicMock(name="count")
        self.execute_get = MagicMock(name="execute_get")
        self.created = []

    def create_navigation_property(self, request, navigation_property):
        association = object()
        self.created.append((request, navigation_property, association))
        return association

    def get_list_resource_path(self):
        return "path"

    def get_single_resource_path(self, key_value):
        return "path"

    def url_query(self, parameters):
        return format_query_string(parameters)


class RecordingTransport:
    """Transport double that records requested URLs."""

    def __init__(self, response=None):
        self.urls: list[str] = []
        self.response = response

    def get(self, url: str):
        self.urls.append(url)
        return self.response


@pytest.fixture
def two_key_model():
    """Entity type with a composite key KEY1, KEY2."""
    return EntityTypeModel(name="Pair", key=(KeyField("KEY1"), KeyField("KEY2")))


@pytest.fixture
def resource(two_key_model):
    """Resource double without parameter support."""
    return FakeResource(two_key_model)


@pytest.fixture
def request_definition(resource):
    """Fresh RequestDefinition on the resource double."""
    return RequestDefinition(resource, {})


@pytest.fixture
def product_model():
    return EntityTypeModel(
        name="Product",
        key=(KeyField("ID", EdmInt32),),
        navigation_properties=(NavigationProperty("Supplier", target="Suppliers"),),
        properties=("ID", "Name", "Price", "Category"),
    )


@pytest.fixture
def transport():
    return RecordingTransport(response={"value": []})


@pytest.fixture
def agent(transport):
    return Agent(ServiceSettings(service_root="/odata/"), transport=transport)


@pytest.fixture
def products(agent, product_model):
    """Entity set backed by a recording transport."""
    return EntitySet(agent, "Products", product_model)
