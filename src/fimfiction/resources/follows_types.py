"""Types for the follow resource."""

from __future__ import annotations

from typing import Literal

from ._common_types import Timestamp, WireModel
from .reference_types import Relationships, ToOne
from .resource_types import TypedResource


class FollowAttributes(WireModel):
    date_followed: Timestamp


class FollowRelationships(Relationships):
    user: ToOne
    following: ToOne


class Follow(TypedResource[FollowAttributes, FollowRelationships]):
    type: Literal["follow"] = "follow"


__all__ = ["Follow", "FollowAttributes", "FollowRelationships"]
