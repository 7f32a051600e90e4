"""Types for story and story tag resources."""

from __future__ import annotations

from typing import Literal, Optional

from ._common_types import (
    Color,
    CompletionStatus,
    ContentRating,
    Count,
    CoverImage,
    Flag,
    PublishStatus,
    TagType,
    Text,
    Timestamp,
    WireModel,
)
from .reference_types import NoRelationships, OptionalToOne, Relationships, ToMany, ToOne
from .resource_types import TypedResource


class StoryAttributes(WireModel):
    """Data the API returns about a single story.

    See https://www.fimfiction.net/developers/api/v2/docs/resources#story
    """

    title: Text
    short_description: Text
    description: Text
    description_html: Text
    # Effectively the same as checking status == "visible"
    published: Flag
    status: PublishStatus
    submitted: Flag
    date_published: Timestamp
    # Updated whenever any edit is made to the story
    date_modified: Timestamp
    # Only bumped when a chapter is added, at most once every 12 hours
    date_updated: Timestamp
    # Views of the most viewed chapter
    num_views: Count
    total_num_views: Count
    num_words: Count
    num_comments: Count
    # Primary color, derived from the cover art
    color: Color
    # Missing for stories without cover art
    cover_image: Optional[CoverImage] = None

    # undocumented
    num_chapters: Count
    rating: Count
    completion_status: CompletionStatus
    content_rating: ContentRating
    num_likes: Count
    num_dislikes: Count


class StoryRelationships(Relationships):
    author: ToOne
    tags: ToMany
    # Not returned by /stories/:id
    chapters: Optional[ToMany] = None
    prequel: Optional[OptionalToOne] = None


class Story(TypedResource[StoryAttributes, StoryRelationships]):
    type: Literal["story"] = "story"


class StoryTagAttributes(WireModel):
    name: Text
    description: Optional[Text] = None
    type: TagType
    num_stories: Count


class StoryTag(TypedResource[StoryTagAttributes, NoRelationships]):
    type: Literal["story_tag"] = "story_tag"


__all__ = [
    "Story",
    "StoryAttributes",
    "StoryRelationships",
    "StoryTag",
    "StoryTagAttributes",
]
