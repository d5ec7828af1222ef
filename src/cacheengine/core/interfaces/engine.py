"""Engine interface."""

from typing import Any, Protocol

from cacheengine.core.entities.datum import Datum
from cacheengine.core.entities.engine_state import EngineState


class IEngine(Protocol):
    """Contract for cache storage engines.

    This is the surface a cache manager relies on. Any object
    providing it can be used interchangeably, whether backed by
    memory, disk or a network store. Data operations are async
    since most engines perform I/O.
    """

    @property
    def id(self) -> str:
        """Process-unique identifier assigned at construction."""
        ...

    prefix: str

    @property
    def cache(self) -> Any | None:
        """The owning cache manager, if one was given."""
        ...

    @property
    def state(self) -> EngineState:
        """Current lifecycle state."""
        ...

    def ts_to_ttl(self, timestamp: float | None = None) -> float | None:
        """Convert an absolute expiry timestamp (ms) to a TTL (ms).

        Args:
            timestamp: Expiry time in milliseconds since epoch.

        Returns:
            Milliseconds until the timestamp, negative if it is in
            the past, or None if no timestamp was given.
        """
        ...

    def process_prefix(self, prefix: str) -> None:
        """Use the prefix provided by the owning cache, if any.

        Args:
            prefix: The key namespace prefix.
        """
        ...

    async def get(self, key: str) -> Any | None:
        """Retrieve a stored value.

        Args:
            key: The key to read.

        Returns:
            The stored value, or None if missing or expired.
        """
        ...

    async def set(self, key: str, value: Any, ttl: float | None = None) -> Any:
        """Store a value with optional TTL.

        Args:
            key: The key to write.
            value: The value to store.
            ttl: Optional time-to-live in milliseconds.

        Returns:
            The value stored.
        """
        ...

    async def delete(self, key: str) -> None:
        """Delete a value. Deleting a missing key is not an error.

        Args:
            key: The key to delete.
        """
        ...

    async def ttl(self, key: str, ttl: float) -> float | None:
        """Update the TTL of an existing entry.

        Args:
            key: The key to update.
            ttl: The new time-to-live in milliseconds.

        Returns:
            The new effective TTL, or None if the key is missing.
        """
        ...

    async def load(self) -> list[Datum]:
        """Initialize the engine and load previously persisted records.

        Returns:
            Every live record held by the backing store.
        """
        ...

    async def flush(self) -> bool:
        """Remove all records.

        Returns:
            Always True.
        """
        ...

    async def close(self) -> bool:
        """Release external resources without deleting records.

        Returns:
            Always True.
        """
        ...
