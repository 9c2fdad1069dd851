"""Nostr event record and wire-shape parsing."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from .errors import InvalidParameter

NONCE_TAG = "nonce"


@dataclass
class Event:
    pubkey: str
    created_at: int
    kind: int
    tags: list[list[str]] = field(default_factory=list)
    content: str = ""
    id: str | None = None
    sig: str | None = None

    @classmethod
    def from_dict(cls, raw: Mapping[str, object]) -> Event:
        """Build an Event from its JSON wire shape or raise InvalidParameter."""

        if not isinstance(raw, Mapping):
            raise InvalidParameter("event must be a mapping")
        return cls(
            pubkey=_require_str(raw.get("pubkey"), "pubkey"),
            created_at=_require_int(raw.get("created_at"), "created_at"),
            kind=_require_int(raw.get("kind"), "kind"),
            tags=_copy_tags(raw.get("tags")),
            content=_require_str(raw.get("content", ""), "content"),
            id=_optional_str(raw.get("id"), "id"),
            sig=_optional_str(raw.get("sig"), "sig"),
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "pubkey": self.pubkey,
            "created_at": self.created_at,
            "kind": self.kind,
            "tags": [list(tag) for tag in self.tags],
            "content": self.content,
        }
        if self.id is not None:
            out["id"] = self.id
        if self.sig is not None:
            out["sig"] = self.sig
        return out


def coerce_event(value: object) -> Event:
    """Return value as a checked Event; mappings are parsed into a new Event."""

    if isinstance(value, Event):
        check_event(value)
        return value
    if isinstance(value, Mapping):
        return Event.from_dict(value)
    raise InvalidParameter("event must be an Event or a mapping")


def check_event(event: Event) -> None:
    _require_str(event.pubkey, "pubkey")
    _require_int(event.created_at, "created_at")
    _require_int(event.kind, "kind")
    _require_str(event.content, "content")
    if not isinstance(event.tags, list):
        raise InvalidParameter("tags must be a list")
    for tag in event.tags:
        _check_tag(tag)


def strip_nonce_tags(event: Event) -> None:
    event.tags = [tag for tag in event.tags if not (tag and tag[0] == NONCE_TAG)]


def _copy_tags(raw: object) -> list[list[str]]:
    if raw is None:
        return []
    if not isinstance(raw, (list, tuple)):
        raise InvalidParameter("tags must be a list")
    out: list[list[str]] = []
    for entry in raw:
        if not isinstance(entry, (list, tuple)):
            raise InvalidParameter("malformed tag")
        tag = list(entry)
        _check_tag(tag)
        out.append(tag)
    return out


def _check_tag(tag: object) -> None:
    if not isinstance(tag, list):
        raise InvalidParameter("malformed tag")
    if not all(isinstance(item, str) for item in tag):
        raise InvalidParameter("tag values must be strings")


def _require_str(value: object, field_name: str) -> str:
    if not isinstance(value, str):
        raise InvalidParameter(f"{field_name} must be string")
    return value


def _optional_str(value: object, field_name: str) -> str | None:
    if value is None:
        return None
    return _require_str(value, field_name)


def _require_int(value: object, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameter(f"{field_name} must be int")
    return value
