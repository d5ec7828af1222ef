"""Shared helpers for engines."""

from cacheengine.utils.clock import SystemClock
from cacheengine.utils.ids import ShortIdGenerator
from cacheengine.utils.keys import NamespacedKey, in_namespace, logical_key, namespaced_key
from cacheengine.utils.ttl import ts_to_ttl, ttl_to_ts

__all__ = [
    "SystemClock",
    "ShortIdGenerator",
    "NamespacedKey",
    "namespaced_key",
    "in_namespace",
    "logical_key",
    "ts_to_ttl",
    "ttl_to_ts",
]
