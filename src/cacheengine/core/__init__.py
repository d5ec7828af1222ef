"""Core domain layer for cacheengine."""

from cacheengine.core.engine import Engine, require_override
from cacheengine.core.entities import Datum, EngineConfig, EngineState
from cacheengine.core.exceptions import (
    BackendError,
    EngineClosedError,
    EngineError,
    EngineStateError,
)
from cacheengine.core.interfaces import IClock, IEngine, IIdGenerator

__all__ = [
    # Entities
    "Datum",
    "EngineConfig",
    "EngineState",
    # Interfaces
    "IEngine",
    "IIdGenerator",
    "IClock",
    # Base engine
    "Engine",
    "require_override",
    # Errors
    "EngineError",
    "BackendError",
    "EngineStateError",
    "EngineClosedError",
]
