"""Entity type model and primitive types."""

from odataengine.core.model.models import EntityTypeModel, KeyField, NavigationProperty
from odataengine.core.model.types import (
    DEFAULT_TYPE,
    PRIMITIVE_TYPES,
    EdmBoolean,
    EdmDateTime,
    EdmDecimal,
    EdmGuid,
    EdmInt32,
    EdmInt64,
    EdmString,
    EdmType,
    resolve_type,
)

__all__ = [
    # Models
    "EntityTypeModel",
    "KeyField",
    "NavigationProperty",
    # Types
    "EdmType",
    "EdmString",
    "EdmInt32",
    "EdmInt64",
    "EdmDecimal",
    "EdmBoolean",
    "EdmGuid",
    "EdmDateTime",
    "DEFAULT_TYPE",
    "PRIMITIVE_TYPES",
    "resolve_type",
]
