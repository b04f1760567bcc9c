"""
Element model — the named, taggable, identifiable node of the model graph.

Software systems, containers, deployment nodes and instances are all
elements. The owning ``Model`` assigns ids and is the single owner of
every element; elements only hold non-owning references back to it.
"""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from archmodel.core.models.errors import InvalidArgumentError
from archmodel.core.models.relationship import InteractionStyle, Relationship
from archmodel.core.models.tags import TagSet, Tags
from archmodel.core.models.validation import is_blank, is_url

if TYPE_CHECKING:
    from archmodel.core.models.model import Model

logger = logging.getLogger(__name__)

CANONICAL_NAME_SEPARATOR = "/"


class Location(StrEnum):
    """Whether a software system is inside or outside the enterprise."""

    INTERNAL = "Internal"
    EXTERNAL = "External"
    UNSPECIFIED = "Unspecified"


def format_for_canonical_name(name: str | None) -> str:
    """Strip separators so a name can sit inside a canonical path."""
    return (name or "").replace(CANONICAL_NAME_SEPARATOR, "")


class Element:
    """Base class for all model elements.

    Subclasses declare:
        TYPE_TAGS:     Tags the element's own tag set is seeded with.
        REQUIRED_TAGS: Tags that ``remove_tag`` refuses to drop.
    """

    TYPE_TAGS: tuple[str, ...] = (Tags.ELEMENT,)
    REQUIRED_TAGS: tuple[str, ...] = (Tags.ELEMENT,)

    def __init__(
        self,
        model: Model,
        element_id: str,
        name: str | None,
        description: str = "",
    ):
        self._model = model
        self._id = element_id
        self._name = name
        self.description: str = description or ""
        self._url: str | None = None
        self._properties: dict[str, str] = {}
        self._tags = TagSet(*self.TYPE_TAGS, protected=self.REQUIRED_TAGS)
        self._relationships: list[Relationship] = []

    # ── Identity ─────────────────────────────────────────────────

    @property
    def id(self) -> str:
        return self._id

    @property
    def model(self) -> Model:
        return self._model

    @property
    def name(self) -> str | None:
        return self._name

    @name.setter
    def name(self, value: str | None) -> None:
        self._name = value

    @property
    def parent(self) -> Element | None:
        """The element this one logically belongs to (None at top level)."""
        return None

    @property
    def canonical_name(self) -> str:
        return CANONICAL_NAME_SEPARATOR + format_for_canonical_name(self.name)

    # ── Descriptive fields ───────────────────────────────────────

    @property
    def url(self) -> str | None:
        return self._url

    @url.setter
    def url(self, value: str | None) -> None:
        if is_blank(value):
            self._url = None
            return
        if not is_url(value):
            raise InvalidArgumentError(f"{value} is not a valid URL.")
        self._url = value

    @property
    def properties(self) -> dict[str, str]:
        return dict(self._properties)

    def add_property(self, name: str | None, value: str | None) -> None:
        """Attach a name/value property, replacing any previous value."""
        if is_blank(name):
            raise InvalidArgumentError("A property name must be specified.")
        if is_blank(value):
            raise InvalidArgumentError("A property value must be specified.")
        self._properties[name] = value

    # ── Tags ─────────────────────────────────────────────────────

    @property
    def tag_list(self) -> list[str]:
        return self._tags.as_list()

    @property
    def tags(self) -> str:
        """Comma-joined tags, in insertion order."""
        return ",".join(self.tag_list)

    @property
    def required_tags(self) -> frozenset[str]:
        return self._tags.protected

    def add_tags(self, *tags: str | None) -> None:
        self._tags.add(*tags)

    def remove_tag(self, tag: str | None) -> bool:
        """Remove one of this element's tags. Required tags stay put."""
        removed = self._tags.remove(tag)
        if not removed and tag is not None and str(tag).strip() in self.required_tags:
            logger.debug("Kept required tag '%s' on %s", tag, self.canonical_name)
        return removed

    def has_tag(self, tag: str) -> bool:
        return tag in self.tag_list

    # ── Relationships ────────────────────────────────────────────

    @property
    def relationships(self) -> list[Relationship]:
        """Efferent relationships (this element is the source)."""
        return list(self._relationships)

    def uses(
        self,
        destination: Element | None,
        description: str = "",
        technology: str = "",
        interaction_style: InteractionStyle | None = None,
    ) -> Relationship | None:
        """Add a relationship from this element to ``destination``.

        Returns:
            The new relationship, or None if an identical one (same
            destination and description) already exists.

        Raises:
            InvalidArgumentError: If no destination is given.
        """
        return self._model.add_relationship(
            self, destination, description, technology, interaction_style
        )

    def get_efferent_relationship_with(
        self, destination: Element, description: str | None = None
    ) -> Relationship | None:
        """Find a relationship to ``destination``, optionally by description."""
        for rel in self._relationships:
            if rel.destination is not destination:
                continue
            if description is None or rel.description == description:
                return rel
        return None

    def has_efferent_relationship_with(
        self, destination: Element, description: str | None = None
    ) -> bool:
        return self.get_efferent_relationship_with(destination, description) is not None

    def _attach_relationship(self, relationship: Relationship) -> None:
        """Called by the model once a relationship is registered."""
        self._relationships.append(relationship)

    # ── Export view ──────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        """Flat view for external serializers."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "url": self.url,
            "tags": self.tags,
            "properties": self.properties,
            "relationships": [r.to_dict() for r in self._relationships],
        }

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} id={self.id!r} {self.canonical_name!r}>"
