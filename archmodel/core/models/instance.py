"""
Element instances — deployed occurrences of a structural element.

``ElementInstance`` is the contract shared by container instances and
software system instances. The behaviour common to every instance kind
(tag composition, canonical naming, element lookup, health check
construction) lives in plain helper functions here, which each concrete
instance class calls.

An instance's identity is its element's identity plus a sequence number;
it has no name of its own.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import TYPE_CHECKING, TypeVar

from archmodel.core.models.element import CANONICAL_NAME_SEPARATOR
from archmodel.core.models.health_check import HttpHealthCheck

if TYPE_CHECKING:
    from archmodel.core.models.deployment_node import DeploymentNode
    from archmodel.core.models.element import Element
    from archmodel.core.models.model import Model

logger = logging.getLogger(__name__)

E = TypeVar("E")


class ElementInstance(ABC):
    """Contract for a placement of one element onto one deployment node."""

    @property
    @abstractmethod
    def element(self) -> Element | None:
        """The underlying element, or None if the reference was cleared."""

    @property
    @abstractmethod
    def element_id(self) -> str:
        """Durable id of the underlying element."""

    @property
    @abstractmethod
    def instance_id(self) -> int:
        """Sequence number among instances of the same element (1-based)."""

    @property
    @abstractmethod
    def deployment_node(self) -> DeploymentNode:
        """The node this instance is deployed on."""

    @property
    @abstractmethod
    def health_checks(self) -> list[HttpHealthCheck]:
        """Health checks, in the order they were added."""

    @abstractmethod
    def add_health_check(
        self,
        name: str | None,
        url: str | None,
        interval: int | None = None,
        timeout: int | None = None,
    ) -> HttpHealthCheck:
        """Validate and append a new health check."""

    # An instance is identified by element name + instance number, so it
    # never stores a name. Assignments are accepted and dropped.
    @property
    def name(self) -> str | None:
        return None

    @name.setter
    def name(self, value: str | None) -> None:
        if value is not None:
            logger.debug("Ignoring name %r for instance of element %s", value, self.element_id)

    @property
    def environment(self) -> str:
        return self.deployment_node.environment


def instance_tags(
    element: Element | None,
    own_tags: Iterable[str],
    required: Iterable[str] = (),
) -> list[str]:
    """The element's full tag list, then the instance's own tags.

    When the element can't be resolved, the ``required`` tags stand in for
    its tag list, so every required tag is still reported. Duplicates keep
    their first position.
    """
    inherited = element.tag_list if element is not None else list(required)
    return list(dict.fromkeys([*inherited, *own_tags]))


def instance_canonical_name(element: Element | None, element_id: str, instance_id: int) -> str:
    """``<element canonical name>[<instance id>]``.

    Falls back to the element id when the element can't be resolved.
    """
    if element is not None:
        base = element.canonical_name
    else:
        base = CANONICAL_NAME_SEPARATOR + element_id
    return f"{base}[{instance_id}]"


def resolve_element(
    model: Model | None,
    reference: E | None,
    element_id: str | None,
    kind: type[E],
) -> E | None:
    """Return the cached reference, else look the id up in the model."""
    if reference is not None:
        return reference
    if model is None or not element_id:
        return None
    element = model.get_element(element_id)
    return element if isinstance(element, kind) else None


def new_health_check(
    model: Model,
    name: str | None,
    url: str | None,
    interval: int | None,
    timeout: int | None,
) -> HttpHealthCheck:
    """Build a health check, filling unset values from the model settings."""
    settings = model.settings
    return HttpHealthCheck.create(
        name,
        url,
        settings.health_check_interval if interval is None else interval,
        settings.health_check_timeout if timeout is None else timeout,
    )
