"""Exception types raised by the fimfiction client.

Every schema violation surfaces as a single :class:`DecodeError` subclass that
names the JSON path of the offending field and, when it can be determined, the
kind and id of the resource enclosing it.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from pydantic import ValidationError

Path = tuple[str | int, ...]

# Keys of a resource object that are decoded against a per-kind schema.
_RESOURCE_MEMBERS = ("attributes", "relationships", "links", "meta")


class FimfictionError(Exception):
    """Base class for all errors raised by this package."""


class AuthorizationError(FimfictionError):
    """The token endpoint answered without a usable access token."""


class DecodeError(FimfictionError, ValueError):
    """A payload does not match the resource schema."""

    reason = "invalid value"

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        path: Sequence[str | int] = (),
        kind: Optional[str] = None,
        resource_id: Optional[str] = None,
        raw_value: Any = None,
    ) -> None:
        self.path: Path = tuple(path)
        self.kind = kind
        self.resource_id = resource_id
        self.raw_value = raw_value
        super().__init__(message or self._describe())

    @property
    def field(self) -> Optional[str]:
        """Name of the innermost named field in :attr:`path`."""
        for segment in reversed(self.path):
            if isinstance(segment, str):
                return segment
        return None

    @property
    def dotted_path(self) -> str:
        return ".".join(str(segment) for segment in self.path) or "<root>"

    def _describe(self) -> str:
        message = f"{self.dotted_path}: {self.reason}"
        if self.raw_value is not None:
            message += f" [{self.raw_value!r}]"
        if self.kind is not None:
            message += f" ({self.kind} {self.resource_id})" if self.resource_id else f" ({self.kind})"
        return message


class MalformedPayload(DecodeError):
    reason = "payload is not a JSON object"


class UnknownResourceType(DecodeError):
    reason = "unknown resource type"


class UnknownEnumValue(DecodeError):
    reason = "unknown enumeration value"


class MissingRequiredAttribute(DecodeError):
    reason = "missing required attribute"


class TypeMismatch(DecodeError):
    reason = "type mismatch"

    def __init__(self, message: Optional[str] = None, *, expected: Optional[str] = None, **kwargs: Any) -> None:
        self.expected = expected
        super().__init__(message, **kwargs)

    def _describe(self) -> str:
        message = super()._describe()
        if self.expected:
            message += f": {self.expected}"
        return message


class MalformedURL(DecodeError):
    reason = "malformed URL"


class MalformedTimestamp(DecodeError):
    reason = "malformed timestamp"


def _error_class(error_type: str, path: Path) -> type[DecodeError]:
    if error_type == "union_tag_invalid":
        return UnknownResourceType
    if error_type in ("missing", "union_tag_not_found"):
        return MissingRequiredAttribute
    if error_type == "enum":
        # The `type` of a relationship reference names a resource kind.
        if path and path[-1] == "type" and "relationships" in path:
            return UnknownResourceType
        return UnknownEnumValue
    if error_type.startswith("url"):
        return MalformedURL
    if error_type.startswith(("datetime", "timezone")):
        return MalformedTimestamp
    return TypeMismatch


def _locate(loc: Sequence[str | int], raw: Any) -> tuple[list[str | int], Optional[str], Optional[str]]:
    """Follow a pydantic error location through the raw payload.

    Discriminator tags inserted by pydantic into ``loc`` are dropped from the
    returned path; the innermost enclosing resource supplies kind and id.
    """
    path: list[str | int] = []
    kind: Optional[str] = None
    resource_id: Optional[str] = None
    node: Any = raw
    for segment in loc:
        if isinstance(node, Mapping):
            tag = node.get("type")
            if segment not in node and segment == tag:
                kind, resource_id = str(tag), _id_text(node.get("id"))
                continue
            if segment in _RESOURCE_MEMBERS and isinstance(tag, str):
                kind, resource_id = tag, _id_text(node.get("id"))
            node = node.get(segment)
        elif isinstance(node, list) and isinstance(segment, int) and 0 <= segment < len(node):
            node = node[segment]
        else:
            node = None
        path.append(segment)
    return path, kind, resource_id


def _id_text(value: Any) -> Optional[str]:
    return None if value is None else str(value)


def decode_error(exc: ValidationError, raw: Any) -> DecodeError:
    """Translate the first error of a pydantic ``ValidationError``."""
    first = exc.errors(include_url=False)[0]
    path, kind, resource_id = _locate(first["loc"], raw)
    error_type = first["type"]
    raw_value = first.get("input")
    if error_type == "union_tag_invalid":
        raw_value = first.get("ctx", {}).get("tag")
    elif error_type == "union_tag_not_found":
        path.append("type")
        raw_value = None
    elif error_type == "missing":
        raw_value = None
    elif isinstance(raw_value, (Mapping, list)):
        raw_value = None

    cls = _error_class(error_type, tuple(path))
    kwargs: dict[str, Any] = {"path": path, "kind": kind, "resource_id": resource_id, "raw_value": raw_value}
    if cls is TypeMismatch:
        kwargs["expected"] = first["msg"]
    return cls(**kwargs)
