"""Nonce search engines.

An engine receives the serialized event split around the nonce and looks
for a decimal nonce whose SHA-256 over ``prefix + nonce + suffix`` has the
requested number of leading zero bits. Native engines can be plugged in
through the :class:`Engine` protocol; :class:`HashlibEngine` is a
pure-Python implementation of the same contract.
"""

from __future__ import annotations

import hashlib
import logging
import threading
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from .errors import EngineError
from .pow import leading_zero_bits

logger = logging.getLogger(__name__)

DoneFn = Callable[[Optional[BaseException], Optional[str]], None]


class Engine(Protocol):
    def search(self, prefix: bytes, suffix: bytes, difficulty: int) -> str:
        """Block until a qualifying nonce is found."""

    def start_search(self, prefix: bytes, suffix: bytes, difficulty: int, on_done: DoneFn) -> None:
        """Search off the calling thread and report through on_done exactly once."""


@dataclass
class EngineConfig:
    workers: int = 1
    batch_size: int = 1000
    max_nonce: int | None = None


class HashlibEngine:
    def __init__(self, *, config: EngineConfig | None = None) -> None:
        self._config = config or EngineConfig()
        if self._config.workers < 1:
            raise ValueError("workers must be positive")
        if self._config.batch_size < 1:
            raise ValueError("batch_size must be positive")

    def search(self, prefix: bytes, suffix: bytes, difficulty: int) -> str:
        _check_arguments(prefix, suffix, difficulty)
        workers = self._config.workers
        stop = threading.Event()
        lock = threading.Lock()
        found: list[int] = []

        def run(start: int) -> None:
            nonce = _scan(
                bytes(prefix),
                bytes(suffix),
                difficulty,
                start=start,
                step=workers,
                batch_size=self._config.batch_size,
                max_nonce=self._config.max_nonce,
                stop=stop,
            )
            if nonce is None:
                return
            with lock:
                if not found:
                    found.append(nonce)
                    stop.set()

        if workers == 1:
            run(0)
        else:
            threads = [threading.Thread(target=run, args=(start,), daemon=True) for start in range(workers)]
            for thread in threads:
                thread.start()
            for thread in threads:
                thread.join()

        if not found:
            raise EngineError(f"no nonce up to {self._config.max_nonce} meets difficulty {difficulty}")
        logger.debug("found nonce %d for difficulty %d", found[0], difficulty)
        return str(found[0])

    def start_search(self, prefix: bytes, suffix: bytes, difficulty: int, on_done: DoneFn) -> None:
        _check_arguments(prefix, suffix, difficulty)
        if not callable(on_done):
            raise EngineError("on_done must be callable")

        def run() -> None:
            try:
                nonce = self.search(prefix, suffix, difficulty)
            except Exception as exc:
                on_done(exc, None)
            else:
                on_done(None, nonce)

        threading.Thread(target=run, name="nostr-pow-search", daemon=True).start()


def _scan(
    prefix: bytes,
    suffix: bytes,
    difficulty: int,
    *,
    start: int,
    step: int,
    batch_size: int,
    max_nonce: int | None,
    stop: threading.Event,
) -> int | None:
    base = hashlib.sha256(prefix)
    nonce = start
    while not stop.is_set():
        for _ in range(batch_size):
            if max_nonce is not None and nonce > max_nonce:
                return None
            digest = base.copy()
            digest.update(str(nonce).encode("ascii"))
            digest.update(suffix)
            if leading_zero_bits(digest.digest()) >= difficulty:
                return nonce
            nonce += step
    return None


def _check_arguments(prefix: object, suffix: object, difficulty: object) -> None:
    if not isinstance(prefix, (bytes, bytearray)):
        raise EngineError("prefix must be bytes")
    if not isinstance(suffix, (bytes, bytearray)):
        raise EngineError("suffix must be bytes")
    if isinstance(difficulty, bool) or not isinstance(difficulty, int):
        raise EngineError("difficulty must be int")


_default_engine: Engine = HashlibEngine()


def get_default_engine() -> Engine:
    return _default_engine


def set_default_engine(engine: Engine) -> None:
    global _default_engine
    _default_engine = engine
