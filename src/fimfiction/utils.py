"""Shared helpers for the fimfiction client."""

from __future__ import annotations

import json
from typing import Any, Mapping

from .errors import MalformedPayload


def load_json_object(payload: bytes | str | Mapping[str, Any]) -> Mapping[str, Any]:
    """Return ``payload`` as a JSON object, parsing raw text or bytes first.

    Raises
    ------
    MalformedPayload
        If the payload is not valid UTF-8 JSON or its top level is not an object.
    """
    if isinstance(payload, Mapping):
        return payload
    try:
        parsed = json.loads(payload)
    except (TypeError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise MalformedPayload(f"<root>: payload is not valid JSON: {exc}") from exc
    if not isinstance(parsed, dict):
        raise MalformedPayload(raw_value=type(parsed).__name__)
    return parsed
