"""Proof-of-work mining protocol for Nostr events."""

from .canonical import compute_event_id, serialize_event, serialize_event_bytes
from .compute import compute_proof_of_work, compute_proof_of_work_async
from .difficulty import MAX_DIFFICULTY, validate_difficulty
from .engine import Engine, EngineConfig, HashlibEngine, get_default_engine, set_default_engine
from .errors import DifficultyOutOfRange, EngineError, InternalError, InvalidParameter, NostrPowError
from .event import Event
from .finish import finish
from .pow import committed_difficulty, count_leading_zero_bits, leading_zero_bits, meets_difficulty
from .prepare import MAX_MARKER_ATTEMPTS, find_marker, prepare

__all__ = [
    "Event",
    "serialize_event",
    "serialize_event_bytes",
    "compute_event_id",
    "compute_proof_of_work",
    "compute_proof_of_work_async",
    "MAX_DIFFICULTY",
    "validate_difficulty",
    "MAX_MARKER_ATTEMPTS",
    "find_marker",
    "prepare",
    "finish",
    "Engine",
    "EngineConfig",
    "HashlibEngine",
    "get_default_engine",
    "set_default_engine",
    "NostrPowError",
    "InvalidParameter",
    "DifficultyOutOfRange",
    "InternalError",
    "EngineError",
    "leading_zero_bits",
    "count_leading_zero_bits",
    "meets_difficulty",
    "committed_difficulty",
    "__version__",
]

__version__ = "0.1.0"
