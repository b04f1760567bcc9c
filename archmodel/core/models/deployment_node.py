"""
Deployment node — infrastructure (server, cluster, VM) that hosts instances.

Placing an element on a node creates an instance. Instance numbers are
scoped per underlying element across the whole model, not per node: the
second placement of a container anywhere gets number 2.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from archmodel.core.models.container import Container
from archmodel.core.models.container_instance import ContainerInstance
from archmodel.core.models.element import CANONICAL_NAME_SEPARATOR, Element, format_for_canonical_name
from archmodel.core.models.errors import InvalidArgumentError
from archmodel.core.models.software_system import SoftwareSystem
from archmodel.core.models.software_system_instance import SoftwareSystemInstance
from archmodel.core.models.tags import Tags
from archmodel.core.models.validation import require_name, require_positive_instances

if TYPE_CHECKING:
    from archmodel.core.models.model import Model

logger = logging.getLogger(__name__)

DEPLOYMENT_PREFIX = "Deployment"


class DeploymentNode(Element):
    """A node in a deployment environment.

    Nodes nest: a child node lives in its parent's environment.
    """

    TYPE_TAGS = (Tags.ELEMENT, Tags.DEPLOYMENT_NODE)
    REQUIRED_TAGS = (Tags.ELEMENT, Tags.DEPLOYMENT_NODE)

    def __init__(
        self,
        model: Model,
        element_id: str,
        name: str,
        description: str = "",
        technology: str = "",
        environment: str = "",
        instances: int = 1,
        parent: DeploymentNode | None = None,
    ):
        super().__init__(model, element_id, name, description)
        self.technology: str = technology or ""
        self._environment = environment
        self._parent = parent
        self._instances = require_positive_instances(instances)
        self._children: list[DeploymentNode] = []
        self._container_instances: list[ContainerInstance] = []
        self._software_system_instances: list[SoftwareSystemInstance] = []

    # ── Topology ─────────────────────────────────────────────────

    @property
    def environment(self) -> str:
        return self._environment

    @property
    def parent(self) -> DeploymentNode | None:
        return self._parent

    @property
    def instances(self) -> int:
        """Number of physical nodes this node stands for."""
        return self._instances

    @instances.setter
    def instances(self, value: int) -> None:
        self._instances = require_positive_instances(value)

    @property
    def children(self) -> list[DeploymentNode]:
        return list(self._children)

    @property
    def container_instances(self) -> list[ContainerInstance]:
        return list(self._container_instances)

    @property
    def software_system_instances(self) -> list[SoftwareSystemInstance]:
        return list(self._software_system_instances)

    @property
    def canonical_name(self) -> str:
        if self._parent is not None:
            prefix = self._parent.canonical_name
        else:
            prefix = (
                CANONICAL_NAME_SEPARATOR + DEPLOYMENT_PREFIX
                + CANONICAL_NAME_SEPARATOR + format_for_canonical_name(self._environment)
            )
        return prefix + CANONICAL_NAME_SEPARATOR + format_for_canonical_name(self.name)

    def get_deployment_node_with_name(self, name: str) -> DeploymentNode | None:
        """Look up a direct child node by name."""
        for child in self._children:
            if child.name == name:
                return child
        return None

    def add_deployment_node(
        self,
        name: str,
        description: str = "",
        technology: str = "",
        instances: int = 1,
    ) -> DeploymentNode:
        """Create a child node in this node's environment.

        Raises:
            InvalidArgumentError: If the name is blank or already used by
                a sibling, or ``instances`` is not a positive integer.
        """
        require_name(name)
        if self.get_deployment_node_with_name(name) is not None:
            raise InvalidArgumentError(f"A deployment node named '{name}' already exists.")
        require_positive_instances(instances)

        child = DeploymentNode(
            self._model,
            self._model.next_id(),
            name,
            description,
            technology,
            environment=self._environment,
            instances=instances,
            parent=self,
        )
        self._children.append(child)
        self._model.register(child)
        logger.debug("Added deployment node %s (id=%s)", child.canonical_name, child.id)
        return child

    # ── Instance placement ───────────────────────────────────────

    def add(
        self,
        element: Container | SoftwareSystem | None,
        replicate_relationships: bool | None = None,
    ) -> ContainerInstance | SoftwareSystemInstance:
        """Deploy an element on this node, returning the new instance.

        Args:
            element: The container or software system to place.
            replicate_relationships: Copy the element's relationships onto
                instances in the same environment. None uses the model
                settings.

        Raises:
            InvalidArgumentError: If no element is given, or the element
                kind can't be deployed.
        """
        if element is None:
            raise InvalidArgumentError("A container must be specified.")
        if isinstance(element, Container):
            instance = self._place(element, ContainerInstance)
            self._container_instances.append(instance)
        elif isinstance(element, SoftwareSystem):
            instance = self._place(element, SoftwareSystemInstance)
            self._software_system_instances.append(instance)
        else:
            raise InvalidArgumentError(
                f"{element.__class__.__name__} elements cannot be deployed."
            )

        if replicate_relationships is None:
            replicate_relationships = self._model.settings.replicate_relationships
        if replicate_relationships:
            self._model.replicate_relationships(instance)
        return instance

    def _place(self, element, instance_cls):
        """Number, build and register an instance of ``element``."""
        instance_id = self._model.next_instance_id(element)
        instance = instance_cls(
            self._model,
            self._model.next_id(),
            element,
            self,
            instance_id,
        )
        self._model.register(instance)
        logger.debug(
            "Deployed %s on %s (instance id=%s)",
            instance.canonical_name,
            self.canonical_name,
            instance.id,
        )
        return instance

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["technology"] = self.technology
        data["environment"] = self._environment
        data["instances"] = self._instances
        data["children"] = [c.to_dict() for c in self._children]
        data["containerInstances"] = [i.to_dict() for i in self._container_instances]
        data["softwareSystemInstances"] = [
            i.to_dict() for i in self._software_system_instances
        ]
        return data
