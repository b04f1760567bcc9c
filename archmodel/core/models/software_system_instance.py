"""
Software system instance — a whole software system placed on a node.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from archmodel.core.models.element import Element
from archmodel.core.models.health_check import HttpHealthCheck
from archmodel.core.models.instance import (
    ElementInstance,
    instance_canonical_name,
    instance_tags,
    new_health_check,
    resolve_element,
)
from archmodel.core.models.software_system import SoftwareSystem
from archmodel.core.models.tags import Tags

if TYPE_CHECKING:
    from archmodel.core.models.deployment_node import DeploymentNode
    from archmodel.core.models.model import Model

logger = logging.getLogger(__name__)


class SoftwareSystemInstance(ElementInstance, Element):
    """A software system placed on a deployment node."""

    TYPE_TAGS = (Tags.SOFTWARE_SYSTEM_INSTANCE,)
    REQUIRED_TAGS = (Tags.ELEMENT, Tags.SOFTWARE_SYSTEM, Tags.SOFTWARE_SYSTEM_INSTANCE)

    def __init__(
        self,
        model: Model,
        element_id: str,
        software_system: SoftwareSystem,
        deployment_node: DeploymentNode,
        instance_id: int,
    ):
        super().__init__(model, element_id, None)
        self._software_system: SoftwareSystem | None = software_system
        self._software_system_id: str = software_system.id
        self._deployment_node = deployment_node
        self._instance_id = instance_id
        self._health_checks: list[HttpHealthCheck] = []

    @property
    def software_system(self) -> SoftwareSystem | None:
        return self._software_system

    @software_system.setter
    def software_system(self, value: SoftwareSystem | None) -> None:
        self._software_system = value
        if value is not None:
            self._software_system_id = value.id

    @property
    def software_system_id(self) -> str:
        return self._software_system_id

    @software_system_id.setter
    def software_system_id(self, value: str) -> None:
        self._software_system_id = value
        if self._software_system is not None and self._software_system.id != value:
            self._software_system = None

    @property
    def element(self) -> SoftwareSystem | None:
        return self._software_system

    @property
    def element_id(self) -> str:
        return self._software_system_id

    @property
    def instance_id(self) -> int:
        return self._instance_id

    @property
    def deployment_node(self) -> DeploymentNode:
        return self._deployment_node

    def _resolved_software_system(self) -> SoftwareSystem | None:
        return resolve_element(
            self._model, self._software_system, self._software_system_id, SoftwareSystem
        )

    @property
    def parent(self) -> None:
        # Software systems are top-level.
        return None

    @property
    def canonical_name(self) -> str:
        return instance_canonical_name(
            self._resolved_software_system(), self._software_system_id, self._instance_id
        )

    @property
    def tag_list(self) -> list[str]:
        return instance_tags(
            self._resolved_software_system(), self._tags, self.REQUIRED_TAGS
        )

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
        health_check = new_health_check(self._model, name, url, interval, timeout)
        self._health_checks.append(health_check)
        logger.debug("Added health check '%s' to %s", health_check.name, self.canonical_name)
        return health_check

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.pop("name", None)
        data["softwareSystemId"] = self._software_system_id
        data["instanceId"] = self._instance_id
        data["environment"] = self.environment
        data["healthChecks"] = [h.to_dict() for h in self._health_checks]
        return data
