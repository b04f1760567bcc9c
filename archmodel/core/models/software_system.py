"""
Software system model — the top-level unit of delivered software.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from archmodel.core.models.container import Container
from archmodel.core.models.element import Element, Location
from archmodel.core.models.errors import InvalidArgumentError
from archmodel.core.models.tags import Tags
from archmodel.core.models.validation import require_name

if TYPE_CHECKING:
    from archmodel.core.models.model import Model

logger = logging.getLogger(__name__)


class SoftwareSystem(Element):
    """A software system and the containers it is made of."""

    TYPE_TAGS = (Tags.ELEMENT, Tags.SOFTWARE_SYSTEM)
    REQUIRED_TAGS = (Tags.ELEMENT, Tags.SOFTWARE_SYSTEM)

    def __init__(
        self,
        model: Model,
        element_id: str,
        name: str,
        description: str = "",
        location: Location = Location.UNSPECIFIED,
    ):
        super().__init__(model, element_id, name, description)
        self.location: Location = Location(location)
        self._containers: list[Container] = []

    @property
    def containers(self) -> list[Container]:
        return list(self._containers)

    def get_container_with_name(self, name: str) -> Container | None:
        """Look up one of this system's containers by name."""
        for container in self._containers:
            if container.name == name:
                return container
        return None

    def add_container(
        self, name: str, description: str = "", technology: str = ""
    ) -> Container:
        """Create a container inside this software system.

        Raises:
            InvalidArgumentError: If the name is blank or already used by
                another container of this system.
        """
        require_name(name)
        if self.get_container_with_name(name) is not None:
            raise InvalidArgumentError(
                f"A container named '{name}' already exists for this software system."
            )

        container = Container(
            self._model,
            self._model.next_id(),
            self,
            name,
            description,
            technology,
        )
        self._containers.append(container)
        self._model.register(container)
        logger.debug("Added container %s (id=%s)", container.canonical_name, container.id)
        return container

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["location"] = self.location.value
        data["containers"] = [c.to_dict() for c in self._containers]
        return data
