"""Core functionalities: stateless models, validators and encoders.

Architecture Note:
    core/ contains pure building blocks with no I/O. The stateful request
    builder lives in request/, resource collaborators in resource/.
"""

from odataengine.core.capabilities import Capability, default_capabilities
from odataengine.core.encoding import encode_uri_component, format_literal
from odataengine.core.errors import (
    InvalidArgumentError,
    InvalidKeyShapeError,
    MissingKeyFieldError,
    ODataEngineError,
    UnsupportedOperationError,
)
from odataengine.core.key import format_key_predicate, validate_key
from odataengine.core.model import (
    EdmType,
    EntityTypeModel,
    KeyField,
    NavigationProperty,
)
from odataengine.core.path import PathState, calculate_count_path, calculate_path, resolve_state
from odataengine.core.query import (
    Filter,
    FilterCondition,
    FilterGroup,
    FilterOperator,
    QueryParameterStore,
    SortField,
    Sorter,
)

__all__ = [
    # Capabilities
    "Capability",
    "default_capabilities",
    # Errors
    "ODataEngineError",
    "InvalidArgumentError",
    "InvalidKeyShapeError",
    "MissingKeyFieldError",
    "UnsupportedOperationError",
    # Encoding
    "encode_uri_component",
    "format_literal",
    # Model
    "EntityTypeModel",
    "KeyField",
    "NavigationProperty",
    "EdmType",
    # Key
    "validate_key",
    "format_key_predicate",
    # Query
    "QueryParameterStore",
    "Filter",
    "FilterCondition",
    "FilterGroup",
    "FilterOperator",
    "Sorter",
    "SortField",
    # Path
    "PathState",
    "calculate_path",
    "calculate_count_path",
    "resolve_state",
]
