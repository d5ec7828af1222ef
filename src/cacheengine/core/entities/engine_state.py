"""Engine lifecycle state."""

from enum import Enum


class EngineState(Enum):
    """Lifecycle state of an engine.

    UNINITIALIZED: Constructed, ``load()`` not called yet.
    ACTIVE: ``load()`` succeeded; data operations are allowed.
    CLOSED: ``close()`` was called; no further operations are valid.
    """

    UNINITIALIZED = "uninitialized"
    ACTIVE = "active"
    CLOSED = "closed"
