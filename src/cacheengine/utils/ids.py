"""Short random identifier generation."""

import secrets
import string

URL_SAFE_ALPHABET = string.ascii_letters + string.digits + "_-"


class ShortIdGenerator:
    """Generates short, URL-safe random identifiers.

    Uses the ``secrets`` CSPRNG, so ids are unpredictable and
    collisions are negligible for the number of engines a process
    creates.
    """

    def __init__(self, length: int = 10, alphabet: str = URL_SAFE_ALPHABET) -> None:
        """Initialize the generator.

        Args:
            length: Number of characters per id.
            alphabet: Characters to draw from.
        """
        if length < 1:
            raise ValueError("length must be at least 1")
        if len(set(alphabet)) < 2:
            raise ValueError("alphabet must contain at least two distinct characters")
        self._length = length
        self._alphabet = alphabet

    def __call__(self) -> str:
        """Generate a new identifier."""
        return "".join(secrets.choice(self._alphabet) for _ in range(self._length))

    @property
    def length(self) -> int:
        """Return the length of generated ids."""
        return self._length
