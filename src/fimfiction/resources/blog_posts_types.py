"""Types for the blog post resource.

See https://www.fimfiction.net/developers/api/v2/docs/resources#blog-post
"""

from __future__ import annotations

from typing import Literal, Optional

from ._common_types import Count, Flag, Text, Timestamp, WireModel
from .reference_types import OptionalToOne, Relationships, ToOne
from .resource_types import TypedResource


class BlogPostAttributes(WireModel):
    title: Text
    date_posted: Timestamp
    # HTML marked up, truncated intro of the post
    intro: Optional[Text] = None
    content_html: Optional[Text] = None
    num_views: Count
    num_comments: Count
    site_post: Flag
    # Only returned for site posts
    site_post_tag: Optional[Text] = None
    tags: list[Text]


class BlogPostRelationships(Relationships):
    author: ToOne
    tagged_story: Optional[OptionalToOne] = None


class BlogPost(TypedResource[BlogPostAttributes, BlogPostRelationships]):
    type: Literal["blog_post"] = "blog_post"


__all__ = ["BlogPost", "BlogPostAttributes", "BlogPostRelationships"]
