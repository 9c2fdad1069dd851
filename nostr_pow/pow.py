"""Proof-of-work helpers for event ids."""

from __future__ import annotations

from .event import NONCE_TAG, Event


def leading_zero_bits(data: bytes) -> int:
    count = 0
    for byte in data:
        if byte == 0:
            count += 8
            continue
        for bit in range(7, -1, -1):
            if byte & (1 << bit):
                return count
            count += 1
    return count


def count_leading_zero_bits(event_id: str) -> int:
    return leading_zero_bits(bytes.fromhex(event_id))


def meets_difficulty(event_id: str, difficulty: int) -> bool:
    if difficulty <= 0:
        return True
    return count_leading_zero_bits(event_id) >= difficulty


def committed_difficulty(event: Event) -> int | None:
    """Difficulty declared by the event's nonce tag, if any."""

    for tag in event.tags:
        if len(tag) >= 3 and tag[0] == NONCE_TAG:
            try:
                return int(tag[2])
            except ValueError:
                return None
    return None
