"""Navigation property registration with collision detection."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any

from odataengine.core.model import NavigationProperty

if TYPE_CHECKING:
    from odataengine.resource.protocol import Logger


class AssociationRegistrar:
    """Two-tier registry of association objects.

    ``namespace`` is authoritative: every navigation property lands there.
    ``shortcuts`` is best-effort: a name is only added when it does not
    collide with a reserved member or a shortcut already taken by another
    association.

    Args:
        is_reserved: Returns True for names owned by the host object.
    """

    def __init__(self, is_reserved: Callable[[str], bool]):
        self._is_reserved = is_reserved
        self.namespace: dict[str, Any] = {}
        self.shortcuts: dict[str, Any] = {}

    def register(
        self,
        navigation_properties: Iterable[NavigationProperty],
        factory: Callable[[NavigationProperty], Any],
        logger: Logger,
    ) -> None:
        """Create (or reuse) one association per navigation property.

        Args:
            navigation_properties: Properties to expose.
            factory: Creates the association object for one property.
            logger: Receives one warning per colliding shortcut name.
        """
        for prop in navigation_properties:
            # Reused associations already got their shortcut (or warning).
            if prop.name in self.namespace:
                continue
            association = factory(prop)
            self.namespace[prop.name] = association

            if prop.name in self.shortcuts or self._is_reserved(prop.name):
                logger.warning(
                    f"Navigation property '{prop.name}' collides with an existing member; "
                    f"use navigation_properties['{prop.name}'] instead"
                )
                continue
            self.shortcuts[prop.name] = association
