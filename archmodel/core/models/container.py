"""
Container model — a deployable unit (application, data store) of a system.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from archmodel.core.models.element import Element
from archmodel.core.models.tags import Tags

if TYPE_CHECKING:
    from archmodel.core.models.model import Model
    from archmodel.core.models.software_system import SoftwareSystem


class Container(Element):
    """A container owned by a software system.

    Containers are created with ``SoftwareSystem.add_container`` and placed
    onto infrastructure with ``DeploymentNode.add``.
    """

    TYPE_TAGS = (Tags.ELEMENT, Tags.CONTAINER)
    REQUIRED_TAGS = (Tags.ELEMENT, Tags.CONTAINER)

    def __init__(
        self,
        model: Model,
        element_id: str,
        software_system: SoftwareSystem,
        name: str,
        description: str = "",
        technology: str = "",
    ):
        super().__init__(model, element_id, name, description)
        self._software_system = software_system
        self.technology: str = technology or ""

    @property
    def software_system(self) -> SoftwareSystem:
        return self._software_system

    @property
    def parent(self) -> SoftwareSystem:
        return self._software_system

    @property
    def canonical_name(self) -> str:
        return self._software_system.canonical_name + super().canonical_name

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["technology"] = self.technology
        return data
