"""Public package surface for the fimfiction Python client."""

from .client import DEFAULT_API_URL, Application
from .errors import (
    AuthorizationError,
    DecodeError,
    FimfictionError,
    MalformedPayload,
    MalformedTimestamp,
    MalformedURL,
    MissingRequiredAttribute,
    TypeMismatch,
    UnknownEnumValue,
    UnknownResourceType,
)
from .resources._common_types import (
    Avatar,
    Color,
    CompletionStatus,
    ContentRating,
    CoverImage,
    Icon,
    Position,
    Privacy,
    PublishStatus,
    TagType,
)
from .resources.blog_posts_types import BlogPost
from .resources.bookshelves_types import Bookshelf
from .resources.chapters_types import Chapter
from .resources.follows_types import Follow
from .resources.groups_types import Group, GroupThread
from .resources.private_messages_types import PrivateMessage
from .resources.reference_types import ResourceKind, ResourceReference
from .resources.resource_types import TypedResource
from .resources.response_types import (
    ApiResponse,
    BlogPostResponse,
    BookshelfResponse,
    ChapterResponse,
    GroupResponse,
    PrivateMessageResponse,
    StoryResponse,
    UserResponse,
    decode_response,
)
from .resources.stories_types import Story, StoryTag
from .resources.union import AnyResource, decode_resource, encode_resource, index_included, resolve
from .resources.users_types import User

__all__ = [
    "AnyResource",
    "ApiResponse",
    "Application",
    "AuthorizationError",
    "Avatar",
    "BlogPost",
    "BlogPostResponse",
    "Bookshelf",
    "BookshelfResponse",
    "Chapter",
    "ChapterResponse",
    "Color",
    "CompletionStatus",
    "ContentRating",
    "CoverImage",
    "DEFAULT_API_URL",
    "DecodeError",
    "FimfictionError",
    "Follow",
    "Group",
    "GroupResponse",
    "GroupThread",
    "Icon",
    "MalformedPayload",
    "MalformedTimestamp",
    "MalformedURL",
    "MissingRequiredAttribute",
    "Position",
    "Privacy",
    "PrivateMessage",
    "PrivateMessageResponse",
    "PublishStatus",
    "ResourceKind",
    "ResourceReference",
    "Story",
    "StoryResponse",
    "StoryTag",
    "TagType",
    "TypeMismatch",
    "TypedResource",
    "UnknownEnumValue",
    "UnknownResourceType",
    "User",
    "UserResponse",
    "decode_resource",
    "decode_response",
    "encode_resource",
    "index_included",
    "resolve",
]
