"""Abstract base class for cache storage engines."""

import abc
import logging
import numbers
import weakref
from collections.abc import Callable, Iterable, Mapping
from typing import Any, NoReturn

from cacheengine.core.entities.datum import Datum
from cacheengine.core.entities.engine_config import EngineConfig
from cacheengine.core.entities.engine_state import EngineState
from cacheengine.core.exceptions import EngineClosedError, EngineStateError
from cacheengine.core.interfaces.clock import IClock
from cacheengine.core.interfaces.id_generator import IIdGenerator
from cacheengine.utils.clock import SystemClock
from cacheengine.utils.ids import ShortIdGenerator
from cacheengine.utils.ttl import ts_to_ttl

logger = logging.getLogger(__name__)


def require_override(operation: str) -> NoReturn:
    """Fail because an engine did not provide its own implementation.

    Args:
        operation: Name of the contract operation.

    Raises:
        NotImplementedError: Always.
    """
    raise NotImplementedError(
        f"The engine must implement its own '{operation}', which must not call super()"
    )


class Engine(abc.ABC):
    """Base class for all cache storage engines.

    A cache manager constructs an engine, optionally hands it a
    prefix and a reference to itself, calls ``load()`` once and then
    drives ``get``/``set``/``delete``/``ttl``/``flush``. ``close()``
    releases the engine's resources but never its records.

    The public coroutines check the lifecycle state and arguments,
    then delegate to the underscore hooks. Subclasses implement the
    hooks and must not call the base implementations.

    Example:
        class DictEngine(Engine):
            async def _get(self, key):
                return self._data.get(key)
            ...

        engine = DictEngine({"prefix": "app:"}, cache=manager)
        records = await engine.load()
        await engine.set("k", 42, ttl=1000)
    """

    def __init__(
        self,
        config: EngineConfig | Mapping[str, Any] | None = None,
        cache: Any | None = None,
        *,
        id_generator: IIdGenerator | None = None,
        clock: IClock | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            config: Engine configuration, as an EngineConfig or a plain
                mapping of options.
            cache: Optional owning cache manager. Only a non-owning
                reference is kept.
            id_generator: Callable producing the engine id.
                Defaults to ShortIdGenerator.
            clock: Callable returning epoch milliseconds.
                Defaults to SystemClock.
        """
        if not isinstance(config, EngineConfig):
            config = EngineConfig.from_mapping(config)

        self._config = config
        self._id = (id_generator or ShortIdGenerator())()
        self._clock: IClock = clock or SystemClock()
        self._cache_ref = self._make_cache_ref(cache)
        self._state = EngineState.UNINITIALIZED
        self._loading = False
        self.prefix: str = config.prefix

    @staticmethod
    def _make_cache_ref(cache: Any | None) -> Callable[[], Any] | None:
        if cache is None:
            return None
        try:
            return weakref.ref(cache)
        except TypeError:
            # Not weak-referenceable (e.g. a dict)
            return lambda: cache

    @property
    def id(self) -> str:
        """Get the engine identifier."""
        return self._id

    @property
    def cache(self) -> Any | None:
        """Get the owning cache manager, or None if absent or collected."""
        if self._cache_ref is None:
            return None
        return self._cache_ref()

    @property
    def config(self) -> EngineConfig:
        """Get the engine configuration."""
        return self._config

    @property
    def state(self) -> EngineState:
        """Get the current lifecycle state."""
        return self._state

    @property
    def clock(self) -> IClock:
        """Get the clock used for TTL arithmetic."""
        return self._clock

    def ts_to_ttl(self, timestamp: float | None = None) -> float | None:
        """Convert a timestamp to a TTL.

        Args:
            timestamp: The expiry timestamp in milliseconds since epoch.

        Returns:
            The time until the timestamp in milliseconds, negative if
            the timestamp is in the past, or None if no timestamp.
        """
        return ts_to_ttl(timestamp, self._clock())

    def process_prefix(self, prefix: str) -> None:
        """Use the prefix provided by the owning cache, if any.

        Engines are not required to implement this.

        Args:
            prefix: The prefix provided by the top-level cache.
        """

    async def get(self, key: str) -> Any | None:
        """Get a value. Rarely used, since callers keep their own copy.

        Args:
            key: The key to get.

        Returns:
            The value stored in persistent data, or None.
        """
        self._check_key(key)
        self._ensure_active("get")
        return await self._get(key)

    async def set(self, key: str, value: Any, ttl: float | None = None) -> Any:
        """Set a value.

        Args:
            key: The key to set.
            value: The value to store.
            ttl: Optional TTL in milliseconds.

        Returns:
            The value stored.
        """
        self._check_key(key)
        if ttl is not None:
            self._check_ttl(ttl)
        self._ensure_active("set")
        return await self._set(key, value, ttl)

    async def delete(self, key: str) -> None:
        """Delete a value. Deleting a missing key is not an error.

        Args:
            key: The key to delete.
        """
        self._check_key(key)
        self._ensure_active("delete")
        await self._delete(key)

    async def ttl(self, key: str, ttl: float) -> float | None:
        """Update a value's TTL.

        Args:
            key: The key to update.
            ttl: The TTL in milliseconds.

        Returns:
            The new effective TTL, or None if the key does not exist.
        """
        self._check_key(key)
        self._check_ttl(ttl)
        self._ensure_active("ttl")
        return await self._ttl(key, ttl)

    async def load(self) -> list[Datum]:
        """Initialize the engine and load all previously persisted records.

        May only be called once per engine.

        Returns:
            The persisted records.

        Raises:
            EngineStateError: If the engine was already loaded or is
                being loaded.
            EngineClosedError: If the engine was closed.
        """
        if self._state is EngineState.CLOSED:
            self._reject(EngineClosedError("load"))
        if self._state is not EngineState.UNINITIALIZED or self._loading:
            self._reject(
                EngineStateError(
                    "load", self._state, "An engine may only be loaded once"
                )
            )

        self._loading = True
        try:
            records = list(await self._load())
        finally:
            self._loading = False

        # close() may have run while _load was awaiting
        if self._state is EngineState.UNINITIALIZED:
            self._state = EngineState.ACTIVE
        logger.debug("Loaded %d record(s) into %r", len(records), self)
        return records

    async def flush(self) -> bool:
        """Clear all records.

        Returns:
            Always True.
        """
        self._ensure_active("flush")
        await self._flush()
        logger.debug("Flushed %r", self)
        return True

    async def close(self) -> bool:
        """Close the engine's connection.

        This MUST NOT clear records, merely disconnect. Closing an
        already closed engine does nothing.

        Returns:
            Always True.
        """
        if self._state is EngineState.CLOSED:
            logger.debug("%r is already closed", self)
            return True

        await self._close()
        self._state = EngineState.CLOSED
        logger.debug("Closed %r", self)
        return True

    @abc.abstractmethod
    async def _get(self, key: str) -> Any | None:
        require_override("get")

    @abc.abstractmethod
    async def _set(self, key: str, value: Any, ttl: float | None) -> Any:
        require_override("set")

    @abc.abstractmethod
    async def _delete(self, key: str) -> None:
        require_override("delete")

    @abc.abstractmethod
    async def _ttl(self, key: str, ttl: float) -> float | None:
        require_override("ttl")

    @abc.abstractmethod
    async def _load(self) -> Iterable[Datum]:
        require_override("load")

    @abc.abstractmethod
    async def _flush(self) -> None:
        require_override("flush")

    async def _close(self) -> None:
        """Release external resources. Engines without any may skip this."""

    def _ensure_active(self, operation: str) -> None:
        if self._state is EngineState.ACTIVE:
            return
        if self._state is EngineState.CLOSED:
            self._reject(EngineClosedError(operation))
        self._reject(
            EngineStateError(
                operation,
                self._state,
                f"Cannot call '{operation}' before the engine is loaded",
            )
        )

    def _reject(self, error: EngineStateError) -> NoReturn:
        logger.warning("%r rejected '%s': %s", self, error.operation, error)
        raise error

    @staticmethod
    def _check_key(key: Any) -> None:
        if not isinstance(key, str):
            raise TypeError(f"key must be a str, not {type(key).__name__}")

    @staticmethod
    def _check_ttl(ttl: Any) -> None:
        if isinstance(ttl, bool) or not isinstance(ttl, numbers.Real):
            raise TypeError(f"ttl must be a number, not {type(ttl).__name__}")

    async def __aenter__(self) -> "Engine":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: type, exc_val: Exception, exc_tb: object) -> None:
        """Async context manager exit."""
        await self.close()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(id={self._id!r}, prefix={self.prefix!r}, "
            f"state={self._state.value!r})"
        )
