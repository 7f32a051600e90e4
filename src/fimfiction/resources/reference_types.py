"""Resource kinds and the (kind, id) references relationships are made of.

A relationship never embeds the resource it points at. It carries a
:class:`ResourceReference` which the caller resolves against the ``included``
side-table of a response (see :func:`fimfiction.resources.union.resolve`).
"""

from __future__ import annotations

from enum import Enum
from typing import ClassVar, Generic, Iterator, Optional, TypeVar

from pydantic import BaseModel, ConfigDict

from ._common_types import ResourceId, WireModel


class ResourceKind(str, Enum):
    """Discriminator values of every resource the API returns."""

    BLOG_POST = "blog_post"
    BOOKSHELF = "bookshelf"
    CHAPTER = "chapter"
    FOLLOW = "follow"
    GROUP = "group"
    GROUP_THREAD = "group_thread"
    PRIVATE_MESSAGE = "private_message"
    STORY = "story"
    STORY_TAG = "story_tag"
    USER = "user"


class ResourceReference(BaseModel):
    """Pointer to another resource by kind and id. Hashable."""

    model_config = ConfigDict(frozen=True)

    type: ResourceKind
    id: ResourceId

    def __str__(self) -> str:
        return f"{self.type.value}:{self.id}"


T = TypeVar("T")


class Relationship(WireModel, Generic[T]):
    """JSON:API relationship object; the reference(s) live under ``data``."""

    wire_nullable: ClassVar[frozenset[str]] = frozenset({"data"})

    data: T

    def references(self) -> list[ResourceReference]:
        if self.data is None:
            return []
        if isinstance(self.data, list):
            return list(self.data)
        return [self.data]


ToOne = Relationship[ResourceReference]
OptionalToOne = Relationship[Optional[ResourceReference]]
ToMany = Relationship[list[ResourceReference]]


class Relationships(WireModel):
    """Base for the per-kind relationship payloads."""

    def iter_references(self) -> Iterator[tuple[str, ResourceReference]]:
        """Yield ``(field, reference)`` for every populated relationship."""
        for name in type(self).model_fields:
            relationship = getattr(self, name)
            if relationship is None:
                continue
            for reference in relationship.references():
                yield name, reference


class NoRelationships(Relationships):
    """Relationship payload of kinds that point at nothing."""


__all__ = [
    "NoRelationships",
    "OptionalToOne",
    "Relationship",
    "Relationships",
    "ResourceKind",
    "ResourceReference",
    "ToMany",
    "ToOne",
]
