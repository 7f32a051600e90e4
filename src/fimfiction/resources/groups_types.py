"""Types for group and group thread resources."""

from __future__ import annotations

from typing import Literal

from ._common_types import Count, Flag, Text, Timestamp, WireModel
from .reference_types import Relationships, ToOne
from .resource_types import TypedResource


class GroupAttributes(WireModel):
    name: Text
    description: Text
    description_html: Text
    num_members: Count
    num_stories: Count
    nsfw: Flag
    open: Flag
    hidden: Flag
    date_created: Timestamp


class GroupRelationships(Relationships):
    founder: ToOne


class Group(TypedResource[GroupAttributes, GroupRelationships]):
    type: Literal["group"] = "group"


class GroupThreadAttributes(WireModel):
    title: Text
    num_posts: Count
    date_created: Timestamp
    date_last_posted: Timestamp
    sticky: Flag
    locked: Flag


class GroupThreadRelationships(Relationships):
    creator: ToOne
    group: ToOne
    last_poster: ToOne


class GroupThread(TypedResource[GroupThreadAttributes, GroupThreadRelationships]):
    type: Literal["group_thread"] = "group_thread"


__all__ = [
    "Group",
    "GroupAttributes",
    "GroupRelationships",
    "GroupThread",
    "GroupThreadAttributes",
    "GroupThreadRelationships",
]
