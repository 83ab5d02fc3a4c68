"""Resource path calculation.

The final path of a request is a pure function of the resource's base paths,
the stream flag, whether a key is set, and the encoded query string:

    stream  -> <single>/$value        (query not appended)
    list    -> <list>[?<query>]
    entity  -> <single>[?<query>]

$count paths follow the same list/entity split with "/$count" appended.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

STREAM_SEGMENT = "$value"
COUNT_SEGMENT = "$count"


class PathState(Enum):
    """Shape of the resolved request."""

    STREAM = "stream"
    LIST = "list"
    ENTITY = "entity"


def resolve_state(has_stream: bool, is_list: bool) -> PathState:
    """Pick the request shape; first match wins (stream, list, entity)."""
    if has_stream:
        return PathState.STREAM
    if is_list:
        return PathState.LIST
    return PathState.ENTITY


def calculate_path(
    list_path: Callable[[], str],
    single_path: Callable[[], str],
    *,
    has_stream: bool,
    is_list: bool,
    query: str,
) -> str:
    """Compute the final resource path.

    Base paths are passed as callables so only the one the state needs is
    evaluated.

    Args:
        list_path: Returns the collection base path.
        single_path: Returns the single-entity base path.
        has_stream: Entity type exposes a media stream.
        is_list: No key has been set.
        query: Encoded query string (may be empty).

    Returns:
        Resolved path string.
    """
    state = resolve_state(has_stream, is_list)
    if state is PathState.STREAM:
        return f"{single_path()}/{STREAM_SEGMENT}"
    base = list_path() if state is PathState.LIST else single_path()
    return f"{base}?{query}" if query else base


def calculate_count_path(
    list_path: Callable[[], str],
    single_path: Callable[[], str],
    *,
    is_list: bool,
    query: str,
) -> str:
    """Compute the $count path for the same request state.

    Counts address entities, never media content: a stream entity type
    resolves like any other list or entity, and the query is kept.

    Example:
        calculate_count_path(lambda: "/Docs", ..., is_list=True, query="$filter=x")
        -> "/Docs/$count?$filter=x"
    """
    state = resolve_state(False, is_list)
    base = list_path() if state is PathState.LIST else single_path()
    path = f"{base}/{COUNT_SEGMENT}"
    return f"{path}?{query}" if query else path
