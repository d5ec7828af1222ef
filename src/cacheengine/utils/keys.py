"""Key namespacing utilities.

A physical key is a ``(prefix, key)`` pair, so two namespaces never
overlap, even when one prefix is a string prefix of another
(``"app"`` and ``"app2"``).
"""

NamespacedKey = tuple[str, str]


def namespaced_key(prefix: str, key: str) -> NamespacedKey:
    """Place a key inside a prefix namespace.

    Args:
        prefix: The namespace prefix (may be empty).
        key: The logical key.

    Returns:
        The physical key stored in the backend.
    """
    return (prefix, key)


def in_namespace(prefix: str, pkey: NamespacedKey) -> bool:
    """Check whether a physical key belongs to exactly this namespace."""
    return pkey[0] == prefix


def logical_key(prefix: str, pkey: NamespacedKey) -> str:
    """Recover the logical key from a physical key.

    Args:
        prefix: The namespace prefix.
        pkey: The physical key.

    Returns:
        The key without its namespace.

    Raises:
        ValueError: If the key belongs to another namespace.
    """
    if not in_namespace(prefix, pkey):
        raise ValueError(f"Key {pkey!r} is not in namespace {prefix!r}")
    return pkey[1]
