"""Types for the private message resource (requires the read_pms scope)."""

from __future__ import annotations

from typing import Literal

from ._common_types import Flag, Text, Timestamp, WireModel
from .reference_types import Relationships, ToOne
from .resource_types import TypedResource


class PrivateMessageAttributes(WireModel):
    subject: Text
    content_html: Text
    date_sent: Timestamp
    read: Flag


class PrivateMessageRelationships(Relationships):
    sender: ToOne
    receiver: ToOne


class PrivateMessage(TypedResource[PrivateMessageAttributes, PrivateMessageRelationships]):
    type: Literal["private_message"] = "private_message"


__all__ = ["PrivateMessage", "PrivateMessageAttributes", "PrivateMessageRelationships"]
