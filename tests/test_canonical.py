from __future__ import annotations

import hashlib
import json
from pathlib import Path
from typing import TypedDict, cast

import yaml

from nostr_pow.canonical import compute_event_id, serialize_event, serialize_event_bytes
from nostr_pow.event import Event


class CanonicalVector(TypedDict):
    pubkey: str
    created_at: int
    kind: int
    tags: list[list[str]]
    content: str
    serialized: str
    id: str


def test_vectors_serialize_byte_exact() -> None:
    for vector in _load_vectors("canonical-events.yaml"):
        event = _event(vector)
        assert serialize_event(event) == vector["serialized"]
        assert serialize_event_bytes(event) == vector["serialized"].encode("utf-8")


def test_vectors_event_ids() -> None:
    for vector in _load_vectors("canonical-events.yaml"):
        assert compute_event_id(_event(vector)) == vector["id"]


def test_serialization_keeps_tag_order() -> None:
    event = Event(pubkey="abc", created_at=1, kind=1, tags=[["z"], ["a", "1"]], content="")
    assert serialize_event(event) == '[0,"abc",1,1,[["z"],["a","1"]],""]'


def test_serialization_ignores_id_and_sig() -> None:
    event = Event(pubkey="abc", created_at=1000, kind=1, content="hi")
    before = serialize_event(event)
    event.id = "ff" * 32
    event.sig = "ee" * 64
    assert serialize_event(event) == before


def test_compute_event_id_is_sha256_of_serialization() -> None:
    event = Event(pubkey="abc", created_at=1000, kind=1, content="hi")
    expected = hashlib.sha256(b'[0,"abc",1000,1,[],"hi"]').hexdigest()
    assert compute_event_id(event) == expected


def _event(vector: CanonicalVector) -> Event:
    return Event(
        pubkey=vector["pubkey"],
        created_at=vector["created_at"],
        kind=vector["kind"],
        tags=[list(tag) for tag in vector["tags"]],
        content=vector["content"],
    )


def _load_vectors(name: str) -> list[CanonicalVector]:
    vectors_path = Path(__file__).resolve().parent / "vectors" / name
    with vectors_path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle)

    if not isinstance(data, list):
        raise AssertionError(f"{name} must be a list")
    for item in data:
        if not isinstance(item, dict):
            raise AssertionError(f"{name} entries must be mappings")
    return cast(list[CanonicalVector], data)


def test_lone_surrogates_are_escaped() -> None:
    event = Event.from_dict(json.loads('{"pubkey":"abc","created_at":1000,"kind":1,"content":"a\\ud83d"}'))
    assert serialize_event(event) == '[0,"abc",1000,1,[],"a\\ud83d"]'
    assert compute_event_id(event) == "f7a50ef290868d19abf525ec86301481491e7a648d37532dda12a0b89d96913c"


def test_split_surrogate_pairs_are_joined() -> None:
    split = Event(pubkey="abc", created_at=1, kind=1, content="\ud83d\ude00")
    joined = Event(pubkey="abc", created_at=1, kind=1, content="😀")
    assert serialize_event_bytes(split) == serialize_event_bytes(joined)
