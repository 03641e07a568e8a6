"""
Message decoding for agent execution logs.

Log entries arrive either as mappings or as JSON-serialized strings. A
string that fails to decode does not fail the build: it becomes a plain
text message attributed to an "unknown" source, with the original string
kept as content.
"""

import json
from collections.abc import Mapping
from typing import Any, Optional

from ..core.models import TraceKind
from ..utils.logger import debug

DEFAULT_KIND = TraceKind.TEXT_MESSAGE.value
UNKNOWN_SOURCE = "unknown"


def fallback_message(raw: Any) -> dict:
    """Build the literal fallback message for an undecodable entry."""
    return {"type": DEFAULT_KIND, "content": raw, "source": UNKNOWN_SOURCE}


def parse_message(raw: Any) -> Mapping:
    """Decode one log entry into a message mapping.

    Args:
        raw: Mapping, JSON string, or anything else found in the log

    Returns:
        The decoded mapping, or a fallback text message when the entry
        cannot be decoded into one
    """
    if isinstance(raw, Mapping):
        return raw

    if isinstance(raw, str):
        try:
            decoded = json.loads(raw)
        except (json.JSONDecodeError, RecursionError) as e:
            debug(f"Undecodable log entry, using text fallback: {e}")
            return fallback_message(raw)
        if isinstance(decoded, Mapping):
            return decoded

    return fallback_message(raw)


def coerce_log(value: Any) -> Optional[Mapping]:
    """Return a nested log as a mapping, decoding it if serialized."""
    if isinstance(value, Mapping):
        return value
    if isinstance(value, str):
        try:
            decoded = json.loads(value)
        except (json.JSONDecodeError, RecursionError):
            debug("Undecodable nested log, treating it as empty")
            return None
        if isinstance(decoded, Mapping):
            return decoded
    return None
