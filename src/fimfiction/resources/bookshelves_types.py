"""Types for the bookshelf resource."""

from __future__ import annotations

from typing import Literal, Optional

from ._common_types import Count, Flag, Icon, Privacy, Text, Timestamp, WireModel
from .reference_types import Relationships, ToOne
from .resource_types import TypedResource


class BookshelfAttributes(WireModel):
    name: Text
    privacy: Privacy
    description: Text
    # Hex string, unlike the color object carried by stories and users
    color: Text
    icon: Optional[Icon] = None
    num_stories: Count
    num_unread: Count
    track_unread: Flag
    quick_add: Flag
    email_on_update: Flag
    date_created: Timestamp
    date_modified: Timestamp
    order: Count


class BookshelfRelationships(Relationships):
    story: Optional[ToOne] = None
    user: Optional[ToOne] = None


class Bookshelf(TypedResource[BookshelfAttributes, BookshelfRelationships]):
    type: Literal["bookshelf"] = "bookshelf"


__all__ = ["Bookshelf", "BookshelfAttributes", "BookshelfRelationships"]
