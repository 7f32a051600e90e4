"""Types for the chapter resource.

``content`` and the author's note fields are only present on some endpoints.
They decode to ``None`` when absent; an empty string is kept as ``""``.
"""

from __future__ import annotations

from typing import Literal, Optional

from ._common_types import Count, Flag, Position, Text, Timestamp, WireModel
from .reference_types import Relationships, ToOne
from .resource_types import TypedResource


class ChapterAttributes(WireModel):
    chapter_number: Count
    title: Text
    published: Flag
    num_views: Count
    num_words: Count
    date_published: Timestamp
    date_modified: Timestamp
    content: Optional[Text] = None
    content_html: Optional[Text] = None
    authors_note: Optional[Text] = None
    authors_note_html: Optional[Text] = None
    authors_note_position: Optional[Position] = None


class ChapterRelationships(Relationships):
    story: ToOne


class Chapter(TypedResource[ChapterAttributes, ChapterRelationships]):
    type: Literal["chapter"] = "chapter"


__all__ = ["Chapter", "ChapterAttributes", "ChapterRelationships"]
