"""cacheengine - Contract for pluggable cache storage engines.

Defines the operations a storage backend must support to be used
interchangeably by a higher-level cache manager (get, set, delete,
ttl, load, flush, close), along with the shared scaffolding every
backend needs: instance ids, key prefixes and timestamp-to-TTL
conversion. An in-memory engine is included.

Writing an engine:
    from cacheengine import Datum, Engine

    class DictEngine(Engine):
        def __init__(self, config=None, cache=None, **kwargs):
            super().__init__(config, cache, **kwargs)
            self._data = {}

        async def _get(self, key):
            return self._data.get(key)

        async def _set(self, key, value, ttl):
            self._data[key] = value
            return value

        async def _delete(self, key):
            self._data.pop(key, None)

        async def _ttl(self, key, ttl):
            return ttl if key in self._data else None

        async def _load(self):
            return [Datum(key, value) for key, value in self._data.items()]

        async def _flush(self):
            self._data.clear()

Using an engine:
    from cacheengine import MemoryEngine

    engine = MemoryEngine({"prefix": "app:"}, cache=manager)
    records = await engine.load()
    await engine.set("user:1", {"name": "Alice"}, ttl=60_000)
    await engine.close()
"""

from cacheengine.core import (
    BackendError,
    Datum,
    Engine,
    EngineClosedError,
    EngineConfig,
    EngineError,
    EngineState,
    EngineStateError,
    IClock,
    IEngine,
    IIdGenerator,
    require_override,
)
from cacheengine.infrastructure import MemoryEngine, create_store
from cacheengine.utils import ShortIdGenerator, SystemClock

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Core entities
    "Datum",
    "EngineConfig",
    "EngineState",
    # Core interfaces
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
    # Infrastructure implementations
    "MemoryEngine",
    "create_store",
    # Defaults
    "ShortIdGenerator",
    "SystemClock",
]
