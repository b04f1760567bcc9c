"""
Tags — ordered, de-duplicated labels attached to elements and relationships.

Each element seeds its tag set with its type tags. Those type tags are
the set's protected (required) tags: ``remove`` refuses them, so they
are always present no matter what callers do.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from enum import StrEnum


class Tags(StrEnum):
    """Built-in tag names."""

    ELEMENT = "Element"
    RELATIONSHIP = "Relationship"

    SOFTWARE_SYSTEM = "Software System"
    CONTAINER = "Container"
    DEPLOYMENT_NODE = "Deployment Node"
    CONTAINER_INSTANCE = "Container Instance"
    SOFTWARE_SYSTEM_INSTANCE = "Software System Instance"

    SYNCHRONOUS = "Synchronous"
    ASYNCHRONOUS = "Asynchronous"


class TagSet:
    """Ordered tag collection with a protected subset.

    Args:
        *tags: Initial tags, added in order.
        protected: Tags that ``remove`` must never drop.
    """

    def __init__(self, *tags: str | None, protected: Iterable[str] = ()):
        self._tags: list[str] = []
        self._protected = frozenset(str(t) for t in protected)
        self.add(*tags)

    @property
    def protected(self) -> frozenset[str]:
        return self._protected

    def add(self, *tags: str | None) -> None:
        """Append each non-blank tag that isn't already present."""
        for tag in tags:
            if tag is None:
                continue
            value = str(tag).strip()
            if value and value not in self._tags:
                self._tags.append(value)

    def remove(self, tag: str | None) -> bool:
        """Remove a tag.

        Protected tags are kept: the call is a no-op that returns False,
        as is removing a tag that isn't present.
        """
        if tag is None:
            return False
        value = str(tag).strip()
        if value in self._protected or value not in self._tags:
            return False
        self._tags.remove(value)
        return True

    def as_list(self) -> list[str]:
        return list(self._tags)

    def __contains__(self, tag: object) -> bool:
        return str(tag) in self._tags

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._tags))

    def __len__(self) -> int:
        return len(self._tags)

    def __str__(self) -> str:
        return join_tags(self._tags)

    def __repr__(self) -> str:
        return f"TagSet({self._tags!r})"


def join_tags(tags: Iterable[str]) -> str:
    """Comma-join tags, dropping empty ones."""
    return ",".join(t for t in tags if t)
