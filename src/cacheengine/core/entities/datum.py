"""Datum entity."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Datum:
    """Immutable record returned in bulk by an engine's ``load``.

    Represents a single persisted entry: its key, the stored value
    and the time remaining before it expires.
    """

    key: str
    value: Any
    ttl: float | None = None

    @property
    def is_expired(self) -> bool:
        """Check if the record had already expired when it was loaded.

        Returns:
            True if the TTL is set and negative, False otherwise.
        """
        if self.ttl is None:
            return False
        return self.ttl < 0
