"""Embed a discovered nonce and compute the final event id."""

from __future__ import annotations

import logging

from .canonical import compute_event_id
from .errors import EngineError, InternalError
from .event import NONCE_TAG, Event

logger = logging.getLogger(__name__)


def finish(event: Event, nonce: object) -> Event:
    """Write nonce into the trailing nonce tag and set event.id."""

    if not event.tags or len(event.tags[-1]) < 2 or event.tags[-1][0] != NONCE_TAG:
        raise InternalError("event has no trailing nonce tag")
    event.tags[-1][1] = _nonce_str(nonce)
    event.id = compute_event_id(event)
    logger.debug("finished event %s with nonce %s", event.id, event.tags[-1][1])
    return event


def _nonce_str(nonce: object) -> str:
    if isinstance(nonce, str):
        return nonce
    if isinstance(nonce, int) and not isinstance(nonce, bool):
        return str(nonce)
    raise EngineError(f"engine returned a {type(nonce).__name__} nonce")
