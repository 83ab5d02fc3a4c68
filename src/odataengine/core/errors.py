"""Error hierarchy for request definitions.

All errors are raised synchronously by the builder before any state is
mutated for the failing call.
"""

from __future__ import annotations


class ODataEngineError(Exception):
    """Base class for every error raised by odataengine."""

    pass


class InvalidArgumentError(ODataEngineError, ValueError):
    """Raised when an operation receives arguments of the wrong arity or shape."""

    pass


class InvalidKeyShapeError(InvalidArgumentError):
    """Raised when a key candidate is absent, not a mapping, or sequence-shaped."""

    pass


class MissingKeyFieldError(ODataEngineError, KeyError):
    """Raised when a required key field has no value in the key candidate."""

    def __init__(self, field: str, message: str | None = None):
        self.field = field
        super().__init__(message or f"Missing value for key field '{field}'")

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0])


class UnsupportedOperationError(ODataEngineError):
    """Raised when the owning resource does not support the requested operation."""

    pass
