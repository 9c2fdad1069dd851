"""Error types raised by nostr-pow."""

from __future__ import annotations


class NostrPowError(Exception):
    """Base class for nostr-pow errors."""


class InvalidParameter(NostrPowError, ValueError):
    """Event shape or difficulty type is not acceptable."""


class DifficultyOutOfRange(NostrPowError, ValueError):
    """Difficulty is below zero or above MAX_DIFFICULTY."""


class InternalError(NostrPowError, RuntimeError):
    """Placeholder marker could not be placed."""


class EngineError(NostrPowError, RuntimeError):
    """Failure reported by a bundled search engine."""
