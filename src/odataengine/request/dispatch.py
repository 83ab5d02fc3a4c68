"""Call forms accepted by RequestDefinition.get().

Usage:
    resolve_get_call()            # NoArgs()
    resolve_get_call(10)          # TopCount(10)
    resolve_get_call({"ID": 1})   # KeyFilter({"ID": 1})
    resolve_get_call("ID")        # raises InvalidArgumentError
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from odataengine.core.errors import InvalidArgumentError


@dataclass(frozen=True)
class NoArgs:
    """Execute the request as currently configured."""

    pass


@dataclass(frozen=True)
class TopCount:
    """Limit the page size, then execute."""

    count: int | float


@dataclass(frozen=True)
class KeyFilter:
    """Address one entity by key, then execute."""

    key: Mapping[str, Any]


GetCall = NoArgs | TopCount | KeyFilter


def resolve_get_call(*args: Any) -> GetCall:
    """Classify the positional arguments of get().

    Numbers select a page size, mappings select a key. Anything else,
    including any second argument, is rejected.

    Raises:
        InvalidArgumentError: If the arguments match no call form.
    """
    if not args:
        return NoArgs()
    if len(args) > 1:
        raise InvalidArgumentError(
            f"get() takes at most one argument (page size or key), got {len(args)}: {args!r}"
        )
    (arg,) = args
    if isinstance(arg, int | float) and not isinstance(arg, bool):
        return TopCount(arg)
    if isinstance(arg, Mapping):
        return KeyFilter(arg)
    raise InvalidArgumentError(f"get() expects a page size or a key mapping, got {arg!r}")
