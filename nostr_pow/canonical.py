"""Canonical NIP-01 serialization and event id hashing."""

from __future__ import annotations

import hashlib
import json
import re

from .event import Event

_SURROGATE_PAIR = re.compile("[\ud800-\udbff][\udc00-\udfff]")
_LONE_SURROGATE = re.compile("[\ud800-\udfff]")


def serialize_event(event: Event) -> str:
    """Return the JSON array [0, pubkey, created_at, kind, tags, content].

    Compact separators and raw non-ASCII characters, byte-identical to what
    JavaScript's JSON.stringify produces for the same array. Unpaired
    surrogates are written as lowercase \\uXXXX escapes, as JSON.stringify
    does, so the result always encodes to UTF-8.
    """

    serialized = json.dumps(
        [0, event.pubkey, event.created_at, event.kind, event.tags, event.content],
        separators=(",", ":"),
        ensure_ascii=False,
    )
    if _LONE_SURROGATE.search(serialized) is None:
        return serialized
    serialized = _SURROGATE_PAIR.sub(_join_pair, serialized)
    return _LONE_SURROGATE.sub(lambda match: f"\\u{ord(match.group()):04x}", serialized)


def serialize_event_bytes(event: Event) -> bytes:
    return serialize_event(event).encode("utf-8")


def compute_event_id(event: Event) -> str:
    return hashlib.sha256(serialize_event_bytes(event)).hexdigest()


def _join_pair(match: re.Match[str]) -> str:
    high, low = match.group()
    return chr(0x10000 + ((ord(high) - 0xD800) << 10) + (ord(low) - 0xDC00))
