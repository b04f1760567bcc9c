"""
Container instance — one deployed occurrence of a container.

Instances are created only by ``DeploymentNode.add``, which assigns the
instance number. The container reference is a cache: clearing it keeps
``container_id``, which stays the durable identity.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from archmodel.core.models.container import Container
from archmodel.core.models.element import Element
from archmodel.core.models.health_check import HttpHealthCheck
from archmodel.core.models.instance import (
    ElementInstance,
    instance_canonical_name,
    instance_tags,
    new_health_check,
    resolve_element,
)
from archmodel.core.models.tags import Tags

if TYPE_CHECKING:
    from archmodel.core.models.deployment_node import DeploymentNode
    from archmodel.core.models.model import Model
    from archmodel.core.models.software_system import SoftwareSystem

logger = logging.getLogger(__name__)


class ContainerInstance(ElementInstance, Element):
    """A container placed on a deployment node.

    Tags read as the container's tags followed by ``Container Instance``
    and then any tags added to the instance itself.
    """

    TYPE_TAGS = (Tags.CONTAINER_INSTANCE,)
    REQUIRED_TAGS = (Tags.ELEMENT, Tags.CONTAINER, Tags.CONTAINER_INSTANCE)

    def __init__(
        self,
        model: Model,
        element_id: str,
        container: Container,
        deployment_node: DeploymentNode,
        instance_id: int,
    ):
        super().__init__(model, element_id, None)
        self._container: Container | None = container
        self._container_id: str = container.id
        self._deployment_node = deployment_node
        self._instance_id = instance_id
        self._health_checks: list[HttpHealthCheck] = []

    # ── Underlying container ─────────────────────────────────────

    @property
    def container(self) -> Container | None:
        return self._container

    @container.setter
    def container(self, value: Container | None) -> None:
        self._container = value
        if value is not None:
            self._container_id = value.id

    @property
    def container_id(self) -> str:
        return self._container_id

    @container_id.setter
    def container_id(self, value: str) -> None:
        self._container_id = value
        if self._container is not None and self._container.id != value:
            self._container = None

    @property
    def element(self) -> Container | None:
        return self._container

    @property
    def element_id(self) -> str:
        return self._container_id

    def _resolved_container(self) -> Container | None:
        return resolve_element(self._model, self._container, self._container_id, Container)

    # ── Instance identity ────────────────────────────────────────

    @property
    def instance_id(self) -> int:
        return self._instance_id

    @property
    def deployment_node(self) -> DeploymentNode:
        return self._deployment_node

    @property
    def parent(self) -> SoftwareSystem | None:
        """The software system that owns the container."""
        container = self._resolved_container()
        return container.parent if container is not None else None

    @property
    def canonical_name(self) -> str:
        return instance_canonical_name(
            self._resolved_container(), self._container_id, self._instance_id
        )

    @property
    def tag_list(self) -> list[str]:
        return instance_tags(self._resolved_container(), self._tags, self.REQUIRED_TAGS)

    # ── Health checks ────────────────────────────────────────────

    @property
    def health_checks(self) -> list[HttpHealthCheck]:
        return list(self._health_checks)

    def add_health_check(
        self,
        name: str | None,
        url: str | None,
        interval: int | None = None,
        timeout: int | None = None,
    ) -> HttpHealthCheck:
        """Add an HTTP health check to this instance.

        Interval and timeout default to the model settings (60 and 0
        seconds out of the box).

        Raises:
            InvalidArgumentError: If any field is invalid. Nothing is
                added in that case.
        """
        health_check = new_health_check(self._model, name, url, interval, timeout)
        self._health_checks.append(health_check)
        logger.debug("Added health check '%s' to %s", health_check.name, self.canonical_name)
        return health_check

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.pop("name", None)
        data["containerId"] = self._container_id
        data["instanceId"] = self._instance_id
        data["environment"] = self.environment
        data["healthChecks"] = [h.to_dict() for h in self._health_checks]
        return data
