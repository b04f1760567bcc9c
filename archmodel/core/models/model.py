"""
Model — the registry and single owner of every element and relationship.

The model hands out ids, answers lookups, numbers instances and
registers relationships. Elements hold plain back-references to it.
Construction is single-threaded; callers that share a model across
threads must guard the whole model with one lock.
"""

from __future__ import annotations

import logging
from typing import Any

from archmodel.core.config.settings import ModelSettings
from archmodel.core.models.container_instance import ContainerInstance
from archmodel.core.models.deployment_node import DeploymentNode
from archmodel.core.models.element import Element, Location
from archmodel.core.models.errors import InvalidArgumentError
from archmodel.core.models.instance import ElementInstance
from archmodel.core.models.relationship import InteractionStyle, Relationship
from archmodel.core.models.software_system import SoftwareSystem
from archmodel.core.models.software_system_instance import SoftwareSystemInstance
from archmodel.core.models.validation import require_name, require_positive_instances

logger = logging.getLogger(__name__)


class Model:
    """Registry for a single architecture model.

    Features:
        - Sequential string ids shared by elements and relationships
        - Software system and deployment node creation
        - Per-element instance numbering across all deployment nodes
        - Relationship registration with duplicate rejection
        - Relationship replication between instances
    """

    def __init__(self, settings: ModelSettings | None = None):
        self._settings = settings or ModelSettings()
        self._last_id = 0
        self._elements: dict[str, Element] = {}
        self._relationships: dict[str, Relationship] = {}
        self._software_systems: list[SoftwareSystem] = []
        self._deployment_nodes: list[DeploymentNode] = []

    @property
    def settings(self) -> ModelSettings:
        return self._settings

    # ── Ids and registration ─────────────────────────────────────

    def next_id(self) -> str:
        """Allocate the next id. Call only once validation has passed."""
        self._last_id += 1
        return str(self._last_id)

    def register(self, element: Element) -> None:
        """Add a newly built element to the id index."""
        if element.id in self._elements:
            raise InvalidArgumentError(f"An element with id '{element.id}' already exists.")
        self._elements[element.id] = element

    # ── Lookups ──────────────────────────────────────────────────

    @property
    def elements(self) -> list[Element]:
        return list(self._elements.values())

    @property
    def relationships(self) -> list[Relationship]:
        return list(self._relationships.values())

    @property
    def software_systems(self) -> list[SoftwareSystem]:
        return list(self._software_systems)

    @property
    def deployment_nodes(self) -> list[DeploymentNode]:
        """Top-level deployment nodes, across all environments."""
        return list(self._deployment_nodes)

    @property
    def environments(self) -> list[str]:
        return list(dict.fromkeys(n.environment for n in self._deployment_nodes))

    @property
    def container_instances(self) -> list[ContainerInstance]:
        return [e for e in self._elements.values() if isinstance(e, ContainerInstance)]

    @property
    def software_system_instances(self) -> list[SoftwareSystemInstance]:
        return [e for e in self._elements.values() if isinstance(e, SoftwareSystemInstance)]

    def get_element(self, element_id: str) -> Element | None:
        return self._elements.get(element_id)

    def get_relationship(self, relationship_id: str) -> Relationship | None:
        return self._relationships.get(relationship_id)

    def get_software_system_with_name(self, name: str) -> SoftwareSystem | None:
        for system in self._software_systems:
            if system.name == name:
                return system
        return None

    def get_deployment_node_with_name(
        self, name: str, environment: str | None = None
    ) -> DeploymentNode | None:
        """Look up a top-level deployment node in an environment."""
        environment = environment or self._settings.default_environment
        for node in self._deployment_nodes:
            if node.name == name and node.environment == environment:
                return node
        return None

    # ── Element creation ─────────────────────────────────────────

    def add_software_system(
        self,
        location: Location | str,
        name: str,
        description: str = "",
    ) -> SoftwareSystem:
        """Create a software system.

        Raises:
            InvalidArgumentError: If the name is blank or already taken.
        """
        require_name(name)
        if self.get_software_system_with_name(name) is not None:
            raise InvalidArgumentError(f"A software system named '{name}' already exists.")

        system = SoftwareSystem(self, self.next_id(), name, description, Location(location))
        self._software_systems.append(system)
        self.register(system)
        logger.debug("Added software system %s (id=%s)", system.canonical_name, system.id)
        return system

    def add_deployment_node(
        self,
        name: str,
        description: str = "",
        technology: str = "",
        environment: str | None = None,
        instances: int = 1,
    ) -> DeploymentNode:
        """Create a top-level deployment node.

        Args:
            environment: Deployment environment; the settings default
                (``"Default"``) when None or blank.

        Raises:
            InvalidArgumentError: If the name is blank or already used in
                the environment, or ``instances`` is not positive.
        """
        require_name(name)
        environment = (environment or "").strip() or self._settings.default_environment
        if self.get_deployment_node_with_name(name, environment) is not None:
            raise InvalidArgumentError(f"A deployment node named '{name}' already exists.")
        require_positive_instances(instances)

        node = DeploymentNode(
            self,
            self.next_id(),
            name,
            description,
            technology,
            environment=environment,
            instances=instances,
        )
        self._deployment_nodes.append(node)
        self.register(node)
        logger.debug("Added deployment node %s (id=%s)", node.canonical_name, node.id)
        return node

    # ── Instance numbering ───────────────────────────────────────

    def instances_of(self, element: Element) -> list[ElementInstance]:
        """Every instance of ``element``, on any deployment node."""
        return [
            e for e in self._elements.values()
            if isinstance(e, ElementInstance) and e.element_id == element.id
        ]

    def next_instance_id(self, element: Element) -> int:
        """The number the next placement of ``element`` gets.

        One more than the highest number in use for that element, or 1.
        """
        return max((i.instance_id for i in self.instances_of(element)), default=0) + 1

    # ── Relationships ────────────────────────────────────────────

    def add_relationship(
        self,
        source: Element,
        destination: Element | None,
        description: str = "",
        technology: str = "",
        interaction_style: InteractionStyle | str | None = None,
    ) -> Relationship | None:
        """Register a relationship from ``source`` to ``destination``.

        Returns:
            The new relationship, or None when ``source`` already has a
            relationship with the same description to ``destination``.

        Raises:
            InvalidArgumentError: If no destination is given.
        """
        if destination is None:
            raise InvalidArgumentError("The destination of a relationship must be specified.")

        description = description or ""
        if source.has_efferent_relationship_with(destination, description):
            logger.warning(
                "Relationship %s -> %s ('%s') already exists, not adding it again",
                source.canonical_name,
                destination.canonical_name,
                description,
            )
            return None

        relationship = Relationship(
            id=self.next_id(),
            source=source,
            destination=destination,
            description=description,
            technology=technology or "",
            interaction_style=InteractionStyle(interaction_style or InteractionStyle.SYNCHRONOUS),
        )
        source._attach_relationship(relationship)
        self._relationships[relationship.id] = relationship
        logger.debug(
            "Added relationship %s -> %s (id=%s)",
            source.canonical_name,
            destination.canonical_name,
            relationship.id,
        )
        return relationship

    def replicate_relationships(self, instance: ElementInstance) -> list[Relationship]:
        """Copy element-level relationships onto ``instance``.

        For each other instance of the same kind in the same environment,
        relationships between the two underlying elements are recreated
        between the two instances, in both directions.

        Returns:
            The relationships that were added.
        """
        element = instance.element
        if element is None:
            return []

        added: list[Relationship] = []
        for other in self._elements.values():
            if other is instance or type(other) is not type(instance):
                continue
            if other.environment != instance.environment or other.element is None:
                continue
            for rel in element.relationships:
                if rel.destination is other.element:
                    added.extend(self._replicate(rel, instance, other))
            for rel in other.element.relationships:
                if rel.destination is element:
                    added.extend(self._replicate(rel, other, instance))
        return added

    def _replicate(
        self, original: Relationship, source: Element, destination: Element
    ) -> list[Relationship]:
        rel = self.add_relationship(
            source,
            destination,
            original.description,
            original.technology,
            original.interaction_style,
        )
        if rel is None:
            return []
        rel.linked_relationship_id = original.id
        return [rel]

    def to_dict(self) -> dict[str, Any]:
        """Flat view for external serializers."""
        return {
            "softwareSystems": [s.to_dict() for s in self._software_systems],
            "deploymentNodes": [n.to_dict() for n in self._deployment_nodes],
        }
