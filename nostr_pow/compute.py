"""Public proof-of-work operations."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from .difficulty import validate_difficulty
from .engine import Engine, get_default_engine
from .errors import EngineError
from .event import Event, coerce_event
from .finish import finish
from .prepare import MAX_MARKER_ATTEMPTS, prepare

logger = logging.getLogger(__name__)


def compute_proof_of_work(
    event: Event | dict[str, object],
    difficulty: int,
    *,
    engine: Engine | None = None,
    max_marker_attempts: int = MAX_MARKER_ATTEMPTS,
) -> Event:
    """Mine event to difficulty, blocking the calling thread.

    Event instances are updated in place and returned; mappings are parsed
    into a new Event. Engine failures propagate unchanged.
    """

    target, prepared, prefix, suffix = _prepare(event, difficulty, max_marker_attempts)
    if engine is None:
        engine = get_default_engine()
    logger.debug("dispatching blocking search at difficulty %d", target)
    nonce = engine.search(prefix, suffix, target)
    return finish(prepared, nonce)


async def compute_proof_of_work_async(
    event: Event | dict[str, object],
    difficulty: int,
    *,
    engine: Engine | None = None,
    max_marker_attempts: int = MAX_MARKER_ATTEMPTS,
) -> Event:
    """Mine event to difficulty without blocking the running event loop.

    Every failure, argument errors included, is raised from the await.
    """

    target, prepared, prefix, suffix = _prepare(event, difficulty, max_marker_attempts)
    if engine is None:
        engine = get_default_engine()
    loop = asyncio.get_running_loop()
    future: asyncio.Future[str] = loop.create_future()

    def resolve(error: object, nonce: Optional[str]) -> None:
        if future.cancelled():
            logger.debug("search completed after the caller stopped waiting; ignoring")
            return
        if future.done():
            logger.warning("search engine reported completion more than once; ignoring")
            return
        if error is None:
            future.set_result(nonce)  # type: ignore[arg-type]
        elif isinstance(error, BaseException):
            future.set_exception(error)
        else:
            future.set_exception(EngineError(str(error)))

    def on_done(error: object, nonce: Optional[str]) -> None:
        if loop.is_closed():
            logger.debug("search completed after the event loop closed; ignoring")
            return
        try:
            loop.call_soon_threadsafe(resolve, error, nonce)
        except RuntimeError:
            # loop closed between the check and the call
            logger.debug("search completed after the event loop closed; ignoring")

    logger.debug("dispatching non-blocking search at difficulty %d", target)
    try:
        engine.start_search(prefix, suffix, target, on_done)
    except Exception as exc:
        resolve(exc, None)

    nonce = await future
    return finish(prepared, nonce)


def _prepare(
    event: Event | dict[str, object],
    difficulty: int,
    max_marker_attempts: int,
) -> tuple[int, Event, bytes, bytes]:
    target = validate_difficulty(difficulty)
    prepared = coerce_event(event)
    prefix, suffix = prepare(prepared, target, max_marker_attempts=max_marker_attempts)
    return target, prepared, prefix, suffix
