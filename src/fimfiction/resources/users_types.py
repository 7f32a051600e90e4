"""Types for the user resource."""

from __future__ import annotations

from typing import Literal, Optional

from ._common_types import Avatar, Color, Count, Text, Timestamp, WireModel
from .reference_types import NoRelationships
from .resource_types import TypedResource


class UserAttributes(WireModel):
    name: Text
    # Only returned to a token holding the user's email scope
    email: Optional[Text] = None
    bio_html: Text
    num_followers: Count
    num_stories: Count
    num_blog_posts: Count
    date_joined: Timestamp
    avatar: Avatar
    color: Color


class User(TypedResource[UserAttributes, NoRelationships]):
    type: Literal["user"] = "user"


__all__ = ["User", "UserAttributes"]
