"""Resource collaborators: protocols, capabilities and the entity set."""

from odataengine.core.capabilities import Capability, default_capabilities
from odataengine.resource.agent import Agent
from odataengine.resource.association import Association
from odataengine.resource.entity_set import EntitySet
from odataengine.resource.protocol import Logger, Resource, Transport

__all__ = [
    # Protocols
    "Resource",
    "Transport",
    "Logger",
    # Capabilities
    "Capability",
    "default_capabilities",
    # Implementations
    "Agent",
    "EntitySet",
    "Association",
]
