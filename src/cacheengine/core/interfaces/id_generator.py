"""Identifier generator interface."""

from typing import Protocol


class IIdGenerator(Protocol):
    """Contract for producing engine identifiers.

    Each call must return a new string that is unique within the
    process with overwhelming probability.
    """

    def __call__(self) -> str:
        """Generate a new identifier.

        Returns:
            A unique, opaque string.
        """
        ...
