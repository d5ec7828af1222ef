"""In-memory engine implementation."""

import math
from collections.abc import Mapping
from typing import Any, NamedTuple

from cachetools import TLRUCache  # type: ignore[import-untyped]

from cacheengine.core.engine import Engine
from cacheengine.core.entities.datum import Datum
from cacheengine.core.entities.engine_config import EngineConfig
from cacheengine.core.interfaces.clock import IClock
from cacheengine.core.interfaces.id_generator import IIdGenerator
from cacheengine.utils.clock import SystemClock
from cacheengine.utils.keys import NamespacedKey, in_namespace, logical_key, namespaced_key
from cacheengine.utils.ttl import ttl_to_ts


class Record(NamedTuple):
    """A value held in the store with its absolute expiry (epoch ms)."""

    value: Any
    expires_at: float | None = None


def _time_to_use(key: NamespacedKey, record: Record, now: float) -> float:
    if record.expires_at is None:
        return math.inf
    # TLRUCache drops an item once now >= ttu; keep it alive through expires_at itself
    return math.nextafter(record.expires_at, math.inf)


def create_store(maxsize: float = math.inf, clock: IClock | None = None) -> TLRUCache:
    """Create a backing store for MemoryEngine.

    A store outlives the engines using it, so it can be passed to a
    new engine after the previous one was closed, or shared by
    engines with different prefixes.

    Args:
        maxsize: Maximum number of records; the least recently used
            record is evicted beyond it. Unbounded by default.
        clock: Callable returning epoch milliseconds, used to expire
            records. Should be the same clock the engines use.

    Returns:
        A TLRUCache keyed by (prefix, key) pairs.
    """
    return TLRUCache(maxsize=maxsize, ttu=_time_to_use, timer=clock or SystemClock())


class MemoryEngine(Engine):
    """Engine keeping records in process memory.

    Uses cachetools' TLRUCache so every record carries its own
    expiry. Records live in a store object rather than in the engine,
    which lets a closed engine be "reopened" by handing its store to
    a new engine.
    """

    def __init__(
        self,
        config: EngineConfig | Mapping[str, Any] | None = None,
        cache: Any | None = None,
        *,
        id_generator: IIdGenerator | None = None,
        clock: IClock | None = None,
        maxsize: float | None = None,
        store: TLRUCache | None = None,
    ) -> None:
        """Initialize the in-memory engine.

        ``maxsize`` and ``store`` may also be given as config options.

        Args:
            config: Engine configuration.
            cache: Optional owning cache manager.
            id_generator: Callable producing the engine id.
            clock: Callable returning epoch milliseconds.
            maxsize: Maximum number of records in a new store.
            store: Existing store to use instead of creating one.
        """
        super().__init__(config, cache, id_generator=id_generator, clock=clock)
        options = self.config.options

        if store is None:
            store = options.get("store")
        if store is None:
            if maxsize is None:
                maxsize = options.get("maxsize", math.inf)
            store = create_store(maxsize=maxsize, clock=self.clock)

        self._store: TLRUCache = store
        self.process_prefix(self.prefix)

    @property
    def store(self) -> TLRUCache:
        """Return the backing store. It stays usable after the engine is closed."""
        return self._store

    def process_prefix(self, prefix: str) -> None:
        """Namespace every key with the given prefix.

        Args:
            prefix: The prefix provided by the top-level cache.
        """
        self.prefix = prefix or ""

    async def _get(self, key: str) -> Any | None:
        record = self._store.get(namespaced_key(self.prefix, key))
        if record is None:
            return None
        return record.value

    async def _set(self, key: str, value: Any, ttl: float | None) -> Any:
        pkey = namespaced_key(self.prefix, key)
        # TLRUCache silently skips already-expired items, so drop the old one first
        self._store.pop(pkey, None)
        if ttl is None or ttl >= 0:
            self._store[pkey] = Record(value, ttl_to_ts(ttl, self.clock()))
        return value

    async def _delete(self, key: str) -> None:
        self._store.pop(namespaced_key(self.prefix, key), None)

    async def _ttl(self, key: str, ttl: float) -> float | None:
        pkey = namespaced_key(self.prefix, key)
        record = self._store.get(pkey)
        if record is None:
            return None

        self._store.pop(pkey, None)
        if ttl >= 0:
            self._store[pkey] = record._replace(expires_at=ttl_to_ts(ttl, self.clock()))
        return ttl

    async def _load(self) -> list[Datum]:
        records = []
        for pkey, record in self._live_items():
            records.append(
                Datum(
                    key=logical_key(self.prefix, pkey),
                    value=record.value,
                    ttl=self.ts_to_ttl(record.expires_at),
                )
            )
        return records

    async def _flush(self) -> None:
        self._store.expire()
        for pkey in self._namespace_keys():
            self._store.pop(pkey, None)

    def _namespace_keys(self) -> list[NamespacedKey]:
        # Iterating keys does not count as a use, so LRU order is untouched
        return [pkey for pkey in self._store.keys() if in_namespace(self.prefix, pkey)]

    def _live_items(self) -> list[tuple[NamespacedKey, Record]]:
        self._store.expire()
        items = []
        for pkey in self._namespace_keys():
            record = self._store.get(pkey)
            if record is not None:
                items.append((pkey, record))
        return items

    def __len__(self) -> int:
        """Return the number of live records in this engine's namespace."""
        self._store.expire()
        return len(self._namespace_keys())
