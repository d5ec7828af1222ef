"""Infrastructure layer implementations for cacheengine."""

from cacheengine.infrastructure.engines import MemoryEngine, create_store

__all__ = [
    "MemoryEngine",
    "create_store",
]
