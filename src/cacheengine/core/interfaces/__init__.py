"""Core interfaces (Protocol classes) for cacheengine."""

from cacheengine.core.interfaces.clock import IClock
from cacheengine.core.interfaces.engine import IEngine
from cacheengine.core.interfaces.id_generator import IIdGenerator

__all__ = [
    "IEngine",
    "IIdGenerator",
    "IClock",
]
