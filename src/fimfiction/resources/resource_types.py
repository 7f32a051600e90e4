"""Generic envelope shared by every resource kind."""

from __future__ import annotations

from typing import Generic, Optional, TypeVar

from pydantic import Field, JsonValue

from ._common_types import ResourceId, Url, WireModel
from .reference_types import Relationships, ResourceKind, ResourceReference

AttrT = TypeVar("AttrT", bound=WireModel)
RelT = TypeVar("RelT", bound=Relationships)


class TypedResource(WireModel, Generic[AttrT, RelT]):
    """A resource: an id paired with attribute and relationship payloads.

    ``relationships`` is ``None`` when the wire object carried none, which is
    the case for every resource delivered through ``included``. It is never
    filled in with an empty payload.
    """

    type: str
    id: ResourceId
    attributes: AttrT
    relationships: Optional[RelT] = None
    links: dict[str, Url] = Field(default_factory=dict)
    meta: dict[str, JsonValue] = Field(default_factory=dict)

    @property
    def kind(self) -> ResourceKind:
        return ResourceKind(self.type)

    @property
    def reference(self) -> ResourceReference:
        """Reference that points back at this resource."""
        return ResourceReference(type=self.kind, id=self.id)
