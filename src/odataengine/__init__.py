"""odataengine: fluent request definitions for OData entity sets.

Usage:
    from odataengine import Agent, EntitySet, EntityTypeModel, KeyField, EdmInt32

    model = EntityTypeModel(name="Product", key=(KeyField("ID", EdmInt32),))
    products = EntitySet(Agent(transport=transport), "Products", model)

    products.request().filter("Price gt 10").orderby("-Price").get(5)
    # transport.get("/Products?$filter=Price%20gt%2010&$orderby=Price%20desc&$top=5")

    products.request().get({"ID": 42})
    # transport.get("/Products(42)")
"""

__version__ = "0.1.0"

# Configuration
from odataengine.config import ServiceSettings

# Core primitives
from odataengine.core import (
    Capability,
    EdmType,
    EntityTypeModel,
    Filter,
    FilterCondition,
    FilterGroup,
    FilterOperator,
    InvalidArgumentError,
    InvalidKeyShapeError,
    KeyField,
    MissingKeyFieldError,
    NavigationProperty,
    ODataEngineError,
    QueryParameterStore,
    Sorter,
    SortField,
    UnsupportedOperationError,
    calculate_path,
)
from odataengine.core.model import (
    EdmBoolean,
    EdmDateTime,
    EdmDecimal,
    EdmGuid,
    EdmInt32,
    EdmInt64,
    EdmString,
)

# Request definitions
from odataengine.request import RequestDefinition

# Resources
from odataengine.resource import (
    Agent,
    Association,
    EntitySet,
    Resource,
    Transport,
)

__all__ = [
    # Version
    "__version__",
    # Config
    "ServiceSettings",
    # Model
    "EntityTypeModel",
    "KeyField",
    "NavigationProperty",
    "EdmType",
    "EdmString",
    "EdmInt32",
    "EdmInt64",
    "EdmDecimal",
    "EdmBoolean",
    "EdmGuid",
    "EdmDateTime",
    # Query
    "QueryParameterStore",
    "Filter",
    "FilterCondition",
    "FilterGroup",
    "FilterOperator",
    "Sorter",
    "SortField",
    "calculate_path",
    # Errors
    "ODataEngineError",
    "InvalidArgumentError",
    "InvalidKeyShapeError",
    "MissingKeyFieldError",
    "UnsupportedOperationError",
    # Request
    "RequestDefinition",
    # Resources
    "Capability",
    "Resource",
    "Transport",
    "Agent",
    "EntitySet",
    "Association",
]
