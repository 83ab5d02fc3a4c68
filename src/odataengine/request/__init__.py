"""Request definitions: the fluent builder and its call-form dispatch."""

from odataengine.request.associations import AssociationRegistrar
from odataengine.request.definition import RequestDefinition
from odataengine.request.dispatch import GetCall, KeyFilter, NoArgs, TopCount, resolve_get_call

__all__ = [
    "RequestDefinition",
    "AssociationRegistrar",
    # Dispatch
    "GetCall",
    "NoArgs",
    "TopCount",
    "KeyFilter",
    "resolve_get_call",
]
