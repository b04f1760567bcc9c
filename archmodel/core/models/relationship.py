"""
Relationship model — a directed "uses" edge between two elements.

Relationships are created through ``Element.uses`` and registered by the
owning model, which rejects duplicates.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from archmodel.core.models.tags import TagSet, Tags

if TYPE_CHECKING:
    from archmodel.core.models.element import Element


class InteractionStyle(StrEnum):
    """How the source talks to the destination."""

    SYNCHRONOUS = "Synchronous"
    ASYNCHRONOUS = "Asynchronous"


@dataclass(eq=False)
class Relationship:
    """A directed relationship from ``source`` to ``destination``.

    ``linked_relationship_id`` is set on relationships that were replicated
    between instances and points at the element-level original.
    """

    id: str
    source: Element = field(repr=False)
    destination: Element = field(repr=False)
    description: str = ""
    technology: str = ""
    interaction_style: InteractionStyle = InteractionStyle.SYNCHRONOUS
    linked_relationship_id: str | None = None
    _tags: TagSet = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._tags = TagSet(
            Tags.RELATIONSHIP,
            self.interaction_style.value,
            protected=(Tags.RELATIONSHIP,),
        )

    @property
    def source_id(self) -> str:
        return self.source.id

    @property
    def destination_id(self) -> str:
        return self.destination.id

    @property
    def tags(self) -> str:
        return str(self._tags)

    @property
    def tag_list(self) -> list[str]:
        return self._tags.as_list()

    def add_tags(self, *tags: str | None) -> None:
        self._tags.add(*tags)

    def remove_tag(self, tag: str | None) -> bool:
        return self._tags.remove(tag)

    def to_dict(self) -> dict[str, Any]:
        """Flat view for external serializers."""
        return {
            "id": self.id,
            "sourceId": self.source_id,
            "destinationId": self.destination_id,
            "description": self.description,
            "technology": self.technology,
            "interactionStyle": self.interaction_style.value,
            "tags": self.tags,
            "linkedRelationshipId": self.linked_relationship_id,
        }
