"""TTL arithmetic."""


def ts_to_ttl(timestamp: float | None, now: float) -> float | None:
    """Convert an absolute expiry timestamp to a TTL.

    A timestamp of None (or 0) means the entry never expires.
    A negative result means the timestamp is already in the past;
    callers treat that as expired, not as an error.

    Args:
        timestamp: Expiry time in milliseconds since epoch.
        now: Current time in milliseconds since epoch.

    Returns:
        Milliseconds until the timestamp, or None.
    """
    if not timestamp:
        return None
    return timestamp - now


def ttl_to_ts(ttl: float | None, now: float) -> float | None:
    """Convert a TTL to an absolute expiry timestamp.

    Args:
        ttl: Time-to-live in milliseconds, or None for no expiry.
        now: Current time in milliseconds since epoch.

    Returns:
        The expiry time in milliseconds since epoch, or None.
    """
    if ttl is None:
        return None
    return now + ttl
