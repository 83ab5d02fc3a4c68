"""Capability descriptor for resources.

A resource declares the operations it supports; request definitions check
the descriptor before recording state that depends on them.
"""

from __future__ import annotations

from enum import Enum


class Capability(Enum):
    """Operations a resource supports beyond plain fetches."""

    PARAMETERS = "parameters"  # arbitrary query parameters
    COUNT = "count"  # $count requests
    STREAM = "stream"  # media content at $value


def default_capabilities(has_stream: bool) -> frozenset[Capability]:
    """Capabilities of an entity set with the given stream flag.

    Stream fetches take no query parameters.
    """
    if has_stream:
        return frozenset({Capability.COUNT, Capability.STREAM})
    return frozenset({Capability.COUNT, Capability.PARAMETERS})
