"""Query option formatting utilities."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from odataengine.core.encoding import encode_uri_component
from odataengine.core.errors import InvalidArgumentError

SYSTEM_QUERY_OPTIONS = ("$filter", "$orderby", "$select", "$expand", "$top", "$skip")


def format_field_list(option: str, fields: Sequence[str]) -> str:
    """Encode a $select/$expand field list as a query-string value.

    Navigation paths ("Category/Name") are kept as written; duplicates are
    dropped, first occurrence wins.

    Args:
        option: Query option name, used in error messages.
        fields: Requested property names or paths.

    Returns:
        Comma-joined, URI-encoded field list.

    Raises:
        InvalidArgumentError: If fields is empty or contains a non-string or blank entry.
    """
    if not fields:
        raise InvalidArgumentError(f"{option} requires at least one field")
    seen: dict[str, None] = {}
    for f in fields:
        if not isinstance(f, str) or not f.strip():
            raise InvalidArgumentError(f"Invalid {option} field: {f!r}")
        seen.setdefault(f.strip(), None)
    return encode_uri_component(",".join(seen))


def format_query_string(parameters: Mapping[str, str]) -> str:
    """Join already-encoded parameters into a query string.

    System query options come first in protocol order, custom parameters
    follow in name order. Empty values are skipped.

    Example:
        format_query_string({"$top": "5", "x": "1"}) -> "$top=5&x=1"
    """
    ordered = [name for name in SYSTEM_QUERY_OPTIONS if name in parameters]
    ordered += sorted(name for name in parameters if name not in SYSTEM_QUERY_OPTIONS)
    return "&".join(
        f"{encode_uri_component(name).replace('%24', '$')}={parameters[name]}"
        for name in ordered
        if parameters[name] != ""
    )
