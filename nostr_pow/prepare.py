"""Split a serialized event around a placeholder nonce."""

from __future__ import annotations

import logging

from .canonical import serialize_event
from .difficulty import validate_difficulty
from .errors import InternalError
from .event import NONCE_TAG, Event, check_event, strip_nonce_tags

logger = logging.getLogger(__name__)

MAX_MARKER_ATTEMPTS = 4096


def find_marker(serialized: str, *, max_attempts: int = MAX_MARKER_ATTEMPTS) -> str:
    """Return the first <<i>> marker that does not occur in serialized."""

    for index in range(max_attempts):
        marker = f"<<{index}>>"
        if marker not in serialized:
            return marker
    raise InternalError(f"no free placeholder marker within {max_attempts} attempts")


def prepare(
    event: Event,
    difficulty: object,
    *,
    max_marker_attempts: int = MAX_MARKER_ATTEMPTS,
) -> tuple[bytes, bytes]:
    """Append a placeholder nonce tag to event and return (prefix, suffix).

    The placeholder occupies exactly the span the real nonce will take, so
    prefix + nonce + suffix is the canonical serialization of the event with
    that nonce in its nonce tag.
    """

    target = validate_difficulty(difficulty)
    check_event(event)

    strip_nonce_tags(event)
    marker = find_marker(serialize_event(event), max_attempts=max_marker_attempts)
    event.tags.append([NONCE_TAG, marker, str(target)])

    serialized = serialize_event(event)
    if serialized.count(marker) != 1:
        raise InternalError(f"placeholder marker {marker} is not unique")
    prefix, _, suffix = serialized.partition(marker)
    logger.debug("prepared event for difficulty %d with marker %s", target, marker)
    return prefix.encode("utf-8"), suffix.encode("utf-8")
