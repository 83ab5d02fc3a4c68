"""Entity type model: key schema, navigation properties and stream flag.

Usage:
    model = EntityTypeModel(
        name="OrderLine",
        key=(KeyField("OrderID", EdmInt32), KeyField("Line", EdmInt32)),
        navigation_properties=(NavigationProperty("Product"),),
    )

    # Or from plain metadata
    model = EntityTypeModel.from_dict({
        "name": "Document",
        "key": [{"name": "ID", "type": "Edm.Guid"}],
        "has_stream": True,
    })
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from odataengine.core.model.types import DEFAULT_TYPE, EdmType, resolve_type


@dataclass(frozen=True, slots=True)
class KeyField:
    """One component of an entity key.

    A field declared without a type formats its values with the default type.
    """

    name: str
    type: EdmType = DEFAULT_TYPE


@dataclass(frozen=True, slots=True)
class NavigationProperty:
    """Named relationship from one entity type to another.

    Attributes:
        name: Property name as it appears in resource paths.
        target: Name of the target entity set, if known.
        many: True when the relationship points at a collection.
    """

    name: str
    target: str | None = None
    many: bool = False


@dataclass(frozen=True, slots=True)
class EntityTypeModel:
    """Read-only schema of an entity type.

    Attributes:
        name: Entity type name.
        key: Ordered key schema. All fields are required to address one entity.
        navigation_properties: Relationships exposed as associations.
        has_stream: True for media entities whose content lives at $value.
        properties: Structural property names (used to validate sort fields).
    """

    name: str = ""
    key: tuple[KeyField, ...] = ()
    navigation_properties: tuple[NavigationProperty, ...] = ()
    has_stream: bool = False
    properties: tuple[str, ...] = ()

    def key_names(self) -> tuple[str, ...]:
        """Names of the key fields, in schema order."""
        return tuple(k.name for k in self.key)

    def has_property(self, name: str) -> bool:
        """Check whether name is a known structural or key property.

        Models that declare no properties accept any name.
        """
        if not self.properties:
            return True
        return name in self.properties or name in self.key_names()

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain metadata dictionary."""
        return {
            "name": self.name,
            "key": [{"name": k.name, "type": k.type.name} for k in self.key],
            "navigation_properties": [
                {"name": p.name, "target": p.target, "many": p.many}
                for p in self.navigation_properties
            ],
            "has_stream": self.has_stream,
            "properties": list(self.properties),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EntityTypeModel:
        """Create from a plain metadata dictionary.

        Missing key types fall back to the default type.
        """
        return cls(
            name=data.get("name", ""),
            key=tuple(
                KeyField(k["name"], resolve_type(k.get("type"))) for k in data.get("key", [])
            ),
            navigation_properties=tuple(
                NavigationProperty(p["name"], p.get("target"), p.get("many", False))
                for p in data.get("navigation_properties", [])
            ),
            has_stream=data.get("has_stream", False),
            properties=tuple(data.get("properties", [])),
        )
