"""Clock interface."""

from typing import Protocol


class IClock(Protocol):
    """Contract for wall-clock sources used for TTL arithmetic."""

    def __call__(self) -> float:
        """Return the current time in milliseconds since epoch."""
        ...
