"""Key functionality: validation against a key schema and path predicates."""

from odataengine.core.key.operations import format_key_predicate, validate_key

__all__ = [
    "validate_key",
    "format_key_predicate",
]
