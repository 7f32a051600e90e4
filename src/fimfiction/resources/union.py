"""The resource union: decoding, encoding and reference resolution.

Decoding dispatches on the wire ``type`` field to exactly one of the ten
resource classes. An unknown ``type`` is an error, never a dropped record.
"""

from __future__ import annotations

import logging
from typing import Annotated, Any, Iterable, Mapping, Optional, Union

from pydantic import Field, TypeAdapter, ValidationError

from ..errors import decode_error
from ..utils import load_json_object
from ._common_types import WIRE_CONTEXT
from .blog_posts_types import BlogPost
from .bookshelves_types import Bookshelf
from .chapters_types import Chapter
from .follows_types import Follow
from .groups_types import Group, GroupThread
from .private_messages_types import PrivateMessage
from .reference_types import ResourceKind, ResourceReference
from .resource_types import TypedResource
from .stories_types import Story, StoryTag
from .users_types import User

_logger = logging.getLogger(__name__)

AnyResource = Annotated[
    Union[
        BlogPost,
        Bookshelf,
        Chapter,
        Follow,
        Group,
        GroupThread,
        PrivateMessage,
        Story,
        StoryTag,
        User,
    ],
    Field(discriminator="type"),
]

RESOURCE_CLASSES: dict[ResourceKind, type[TypedResource[Any, Any]]] = {
    ResourceKind.BLOG_POST: BlogPost,
    ResourceKind.BOOKSHELF: Bookshelf,
    ResourceKind.CHAPTER: Chapter,
    ResourceKind.FOLLOW: Follow,
    ResourceKind.GROUP: Group,
    ResourceKind.GROUP_THREAD: GroupThread,
    ResourceKind.PRIVATE_MESSAGE: PrivateMessage,
    ResourceKind.STORY: Story,
    ResourceKind.STORY_TAG: StoryTag,
    ResourceKind.USER: User,
}

_missing_kinds = set(ResourceKind) - set(RESOURCE_CLASSES)
if _missing_kinds:  # pragma: no cover - guards additions to ResourceKind
    raise RuntimeError(f"No resource class registered for {sorted(k.value for k in _missing_kinds)}")

_RESOURCE_ADAPTER: TypeAdapter[Any] = TypeAdapter(AnyResource)


def decode_resource(payload: bytes | str | Mapping[str, Any]) -> TypedResource[Any, Any]:
    """Decode one resource object into its concrete class.

    Parameters
    ----------
    payload
        UTF-8 JSON text or an already parsed JSON object.

    Returns
    -------
    TypedResource
        Instance of the class registered for the payload's ``type``.

    Raises
    ------
    DecodeError
        Subclass naming the offending field path, kind and id.
    """
    raw = load_json_object(payload)
    try:
        return _RESOURCE_ADAPTER.validate_python(raw, context=WIRE_CONTEXT)
    except ValidationError as exc:
        raise decode_error(exc, raw) from exc


def encode_resource(resource: TypedResource[Any, Any]) -> bytes:
    """Encode a resource back to its UTF-8 JSON wire form.

    Absent optional fields are omitted rather than written as ``null``; a
    relationship always carries ``data``, which is ``null`` when empty.
    """
    return resource.model_dump_json(by_alias=True).encode("utf-8")


def resource_class(kind: ResourceKind | str) -> type[TypedResource[Any, Any]]:
    """Return the resource class decoding the given kind."""
    return RESOURCE_CLASSES[ResourceKind(kind)]


def _matches(resource: TypedResource[Any, Any], reference: ResourceReference) -> bool:
    return resource.type == reference.type.value and resource.id == reference.id


def resolve(
    reference: ResourceReference,
    included: Iterable[TypedResource[Any, Any]],
) -> Optional[TypedResource[Any, Any]]:
    """Look up the included resource a reference points at.

    When the same (kind, id) appears more than once, the last occurrence wins.
    The API does not document how it treats such duplicates.

    Returns
    -------
    TypedResource or None
        The matching resource, or ``None`` if the response did not include it.
    """
    for resource in reversed(list(included)):
        if _matches(resource, reference):
            return resource
    return None


def index_included(
    included: Iterable[TypedResource[Any, Any]],
) -> dict[ResourceReference, TypedResource[Any, Any]]:
    """Map each included resource by its reference (last occurrence wins)."""
    index: dict[ResourceReference, TypedResource[Any, Any]] = {}
    for resource in included:
        reference = resource.reference
        if reference in index:
            _logger.warning("Duplicate included resource %s; keeping the last occurrence.", reference)
        index[reference] = resource
    return index


__all__ = [
    "AnyResource",
    "RESOURCE_CLASSES",
    "decode_resource",
    "encode_resource",
    "index_included",
    "resolve",
    "resource_class",
]
