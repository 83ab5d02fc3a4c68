"""Association handles for navigation properties."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from odataengine.core.errors import MissingKeyFieldError
from odataengine.core.model import NavigationProperty

if TYPE_CHECKING:
    from odataengine.request import RequestDefinition


class Association:
    """Navigation from one keyed entity to its related entity or entities.

    Created lazily by the owning entity set when a request registers its
    associations. Resolving the path requires the parent request to be keyed.

    Args:
        parent: Request definition the association hangs off.
        navigation_property: The relationship this handle represents.
    """

    def __init__(self, parent: RequestDefinition, navigation_property: NavigationProperty):
        self._parent = parent
        self._navigation_property = navigation_property

    @property
    def name(self) -> str:
        return self._navigation_property.name

    @property
    def navigation_property(self) -> NavigationProperty:
        return self._navigation_property

    @property
    def path(self) -> str:
        """Parent entity path followed by the navigation property name.

        Raises:
            MissingKeyFieldError: If the parent request has no key.
        """
        if self._parent.is_list:
            key_names = [k.name for k in self._parent.resource.entity_type_model.key]
            raise MissingKeyFieldError(
                key_names[0] if key_names else "",
                f"Association '{self.name}' requires a keyed parent request",
            )
        resource = self._parent.resource
        return f"{resource.get_single_resource_path(self._parent.key_value)}/{self.name}"

    def get(self) -> Any:
        """Fetch the related entity or entities through the parent's agent."""
        return self._parent.resource.agent.execute(self.path)

    def __repr__(self) -> str:
        return f"Association({self.name!r})"
