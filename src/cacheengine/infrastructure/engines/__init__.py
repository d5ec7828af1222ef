"""Concrete engines."""

from cacheengine.infrastructure.engines.memory import MemoryEngine, Record, create_store

__all__ = [
    "MemoryEngine",
    "Record",
    "create_store",
]
