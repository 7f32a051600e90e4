"""Shared types for resource attributes.

This module contains:
- The frozen base model every wire object derives from
- Strict scalar aliases (counts, flags, text, URLs, timestamps, ids)
- Attribute value objects (color, cover image, avatar, icon)
- Closed string enumerations used by attribute fields
"""

from __future__ import annotations

import re
from datetime import datetime
from enum import Enum
from typing import Annotated, Any, ClassVar, Literal, Optional

from pydantic import (
    AwareDatetime,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    HttpUrl,
    PlainSerializer,
    SerializerFunctionWrapHandler,
    StrictBool,
    StrictStr,
    ValidationInfo,
    model_serializer,
)
from pydantic_core import PydanticCustomError


class WireModel(BaseModel):
    """Immutable model decoded from (and encoded back to) the wire.

    Unknown keys are kept so that re-encoding is lossless. Fields holding
    ``None`` are left out of the encoded form, so an absent field stays absent,
    unless the field is listed in ``wire_nullable``, where ``null`` is a value.
    """

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    wire_nullable: ClassVar[frozenset[str]] = frozenset()

    @model_serializer(mode="wrap")
    def serialize_present(self, handler: SerializerFunctionWrapHandler) -> Any:
        data = handler(self)
        if not isinstance(data, dict):
            return data
        for name, info in type(self).model_fields.items():
            if name in self.wire_nullable or getattr(self, name) is not None:
                continue
            data.pop(name, None)
            if info.alias:
                data.pop(info.alias, None)
        return data


# --- Shared Validation Mode --- #
ValidationMode = Literal["off", "warn", "strict"]

# Validation context of payloads parsed from JSON. Python-side construction
# runs without it and may pass ints and datetimes directly.
WIRE_CONTEXT: dict[str, Any] = {"wire": True}


def _from_wire(info: ValidationInfo) -> bool:
    return bool(info.context and info.context.get("wire"))


# --- Scalars --- #
Count = Annotated[int, Field(strict=True, ge=0)]
Byte = Annotated[int, Field(strict=True, ge=0, le=255)]
Flag = StrictBool
Text = StrictStr
Url = HttpUrl


def _require_timestamp_text(value: object, info: ValidationInfo) -> object:
    """Only ISO 8601 strings are timestamps; epoch numbers are rejected."""
    if isinstance(value, str):
        return value
    if isinstance(value, datetime) and not _from_wire(info):
        return value
    raise PydanticCustomError(
        "datetime_type",
        "Timestamp must be an ISO 8601 string with a UTC offset",
    )


Timestamp = Annotated[AwareDatetime, BeforeValidator(_require_timestamp_text)]

_DECIMAL_ID = re.compile(r"[0-9]+")


def _parse_resource_id(value: object, info: ValidationInfo) -> int:
    """Accept a decimal id string, or a non-negative int outside of wire decoding."""
    if isinstance(value, str) and _DECIMAL_ID.fullmatch(value):
        return int(value)
    if (
        isinstance(value, int)
        and not isinstance(value, bool)
        and value >= 0
        and not _from_wire(info)
    ):
        return value
    raise ValueError(f"Resource id must be a decimal string. Given [{value!r}]")


ResourceId = Annotated[
    int,
    BeforeValidator(_parse_resource_id),
    PlainSerializer(str, return_type=str, when_used="json"),
]


# --- Value Objects --- #
class Color(WireModel):
    """Color as serialized by the API, e.g. the primary color of a story."""

    hex: Text
    rgb: tuple[Byte, Byte, Byte]


class CoverImage(WireModel):
    """Links to a story's cover art, one per size."""

    thumbnail: Url
    medium: Url
    large: Url
    full: Url


AVATAR_SIZES: tuple[int, ...] = (16, 32, 48, 64, 96, 128, 192, 256, 384, 512)


class Avatar(WireModel):
    """Differently sized avatar images, keyed by pixel size on the wire.

    Sizes 16 and 192 are only returned by some endpoints.
    """

    size_16: Optional[Url] = Field(None, alias="16")
    size_32: Url = Field(alias="32")
    size_48: Url = Field(alias="48")
    size_64: Url = Field(alias="64")
    size_96: Url = Field(alias="96")
    size_128: Url = Field(alias="128")
    size_192: Optional[Url] = Field(None, alias="192")
    size_256: Url = Field(alias="256")
    size_384: Url = Field(alias="384")
    size_512: Url = Field(alias="512")

    def get(self, size: int) -> Optional[HttpUrl]:
        """Return the image URL for ``size`` pixels, or ``None`` if not provided."""
        if size not in AVATAR_SIZES:
            raise ValueError(f"Invalid avatar size: {size}")
        return getattr(self, f"size_{size}")

    def sizes(self) -> dict[int, HttpUrl]:
        """Return every provided size mapped to its URL."""
        available: dict[int, HttpUrl] = {}
        for size in AVATAR_SIZES:
            url = getattr(self, f"size_{size}")
            if url is not None:
                available[size] = url
        return available


class Icon(WireModel):
    """Font glyph descriptor (not a raster image)."""

    name: Text
    type: Text
    data: Text


# --- Enumerations --- #
class Position(str, Enum):
    """Placement of an author's note relative to chapter content."""

    TOP = "top"
    BOTTOM = "bottom"


class Privacy(str, Enum):
    PRIVATE = "private"
    UNLISTED = "unlisted"
    PUBLIC = "public"


class PublishStatus(str, Enum):
    VISIBLE = "visible"
    NOT_VISIBLE = "not_visible"
    APPROVE_QUEUE = "approve_queue"
    POST_QUEUE = "post_queue"


class CompletionStatus(str, Enum):
    INCOMPLETE = "incomplete"
    COMPLETE = "complete"
    HIATUS = "hiatus"
    CANCELLED = "cancelled"


class ContentRating(str, Enum):
    EVERYONE = "everyone"
    TEEN = "teen"
    MATURE = "mature"


class TagType(str, Enum):
    CHARACTER = "character"
    GENRE = "genre"
    RATING = "rating"
    CONTENT = "content"
    SERIES = "series"
    WARNING = "warning"
    UNIVERSE = "universe"


__all__ = [
    "AVATAR_SIZES",
    "Avatar",
    "Color",
    "CompletionStatus",
    "ContentRating",
    "CoverImage",
    "Icon",
    "Position",
    "Privacy",
    "PublishStatus",
    "ResourceId",
    "TagType",
    "WIRE_CONTEXT",
    "WireModel",
]
