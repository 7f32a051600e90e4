"""The envelope every endpoint responds with."""

from __future__ import annotations

from typing import Any, Generic, Mapping, Optional, TypeVar

from pydantic import Field, JsonValue, ValidationError

from ..errors import decode_error
from ..utils import load_json_object
from ._common_types import WIRE_CONTEXT, WireModel
from .blog_posts_types import BlogPost
from .bookshelves_types import Bookshelf
from .chapters_types import Chapter
from .groups_types import Group
from .private_messages_types import PrivateMessage
from .reference_types import ResourceReference
from .resource_types import TypedResource
from .stories_types import Story
from .union import AnyResource, index_included, resolve
from .users_types import User

T = TypeVar("T")


class ApiResponse(WireModel, Generic[T]):
    """Primary ``data`` plus the ``included`` resources it references.

    ``included`` may repeat the same (kind, id); lookups keep the last one.
    """

    data: T
    included: list[AnyResource] = Field(default_factory=list)
    # Relative to the site root, so kept as a plain string
    uri: str
    method: str
    debug: dict[str, JsonValue] = Field(default_factory=dict)

    def resolve(self, reference: ResourceReference) -> Optional[TypedResource[Any, Any]]:
        """Return the included resource ``reference`` points at, if present."""
        return resolve(reference, self.included)

    def index(self) -> dict[ResourceReference, TypedResource[Any, Any]]:
        return index_included(self.included)


ResourceResponse = ApiResponse[AnyResource]
BlogPostResponse = ApiResponse[BlogPost]
BookshelfResponse = ApiResponse[Bookshelf]
ChapterResponse = ApiResponse[Chapter]
GroupResponse = ApiResponse[Group]
PrivateMessageResponse = ApiResponse[PrivateMessage]
StoryResponse = ApiResponse[Story]
UserResponse = ApiResponse[User]


def decode_response(
    payload: bytes | str | Mapping[str, Any],
    data_type: Any = AnyResource,
) -> ApiResponse[Any]:
    """Decode a full endpoint response.

    Parameters
    ----------
    payload
        UTF-8 JSON text or an already parsed JSON object.
    data_type
        Expected type of ``data``: a resource class such as ``Story``, a
        ``list[...]`` of one, or the default ``AnyResource`` union.

    Raises
    ------
    DecodeError
        Subclass naming the offending field path, kind and id.
    """
    raw = load_json_object(payload)
    model = ResourceResponse if data_type is AnyResource else ApiResponse[data_type]
    try:
        return model.model_validate(raw, context=WIRE_CONTEXT)
    except ValidationError as exc:
        raise decode_error(exc, raw) from exc


__all__ = [
    "ApiResponse",
    "BlogPostResponse",
    "BookshelfResponse",
    "ChapterResponse",
    "GroupResponse",
    "PrivateMessageResponse",
    "ResourceResponse",
    "StoryResponse",
    "UserResponse",
    "decode_response",
]
