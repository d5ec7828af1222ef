"""Tests for shared utilities."""

import string
import time

import pytest

from cacheengine.utils import (
    ShortIdGenerator,
    SystemClock,
    in_namespace,
    logical_key,
    namespaced_key,
    ts_to_ttl,
    ttl_to_ts,
)


class TestKeys:
    """Tests for key namespacing helpers."""

    def test_namespaced_key(self) -> None:
        """Test placing a key in a namespace."""
        assert namespaced_key("app:", "user:1") == ("app:", "user:1")

    def test_empty_prefix(self) -> None:
        """Test that the empty prefix is a namespace of its own."""
        assert in_namespace("", namespaced_key("", "k"))
        assert not in_namespace("", namespaced_key("app:", "k"))
        assert logical_key("", ("", "user:1")) == "user:1"

    def test_in_namespace(self) -> None:
        """Test namespace membership."""
        assert in_namespace("app:", ("app:", "k"))
        assert not in_namespace("app:", ("other:", "k"))

    def test_overlapping_prefixes(self) -> None:
        """Test that one prefix starting another does not share keys."""
        assert not in_namespace("app", namespaced_key("app2", "x"))
        assert namespaced_key("app", "2x") != namespaced_key("app2", "x")
        assert namespaced_key("app", "x:k") != namespaced_key("app:x", "k")

    def test_logical_key(self) -> None:
        """Test recovering the logical key."""
        assert logical_key("app:", ("app:", "app:k")) == "app:k"

    def test_logical_key_foreign_namespace(self) -> None:
        """Test that a key outside the namespace is rejected."""
        with pytest.raises(ValueError, match="is not in namespace"):
            logical_key("app", ("app2", "x"))


class TestTtl:
    """Tests for TTL arithmetic."""

    def test_future(self) -> None:
        """Test a timestamp in the future."""
        assert ts_to_ttl(1500, now=1000) == 500

    def test_past(self) -> None:
        """Test a timestamp in the past is negative, not an error."""
        assert ts_to_ttl(500, now=1000) == -500

    @pytest.mark.parametrize("timestamp", [None, 0])
    def test_absent(self, timestamp: float | None) -> None:
        """Test that an absent timestamp means no TTL."""
        assert ts_to_ttl(timestamp, now=1000) is None

    def test_ttl_to_ts(self) -> None:
        """Test converting a TTL back to a timestamp."""
        assert ttl_to_ts(500, now=1000) == 1500
        assert ttl_to_ts(None, now=1000) is None


class TestShortIdGenerator:
    """Tests for ShortIdGenerator."""

    def test_default_length(self) -> None:
        """Test generated ids have the configured length."""
        generator = ShortIdGenerator()

        assert generator.length == 10
        assert len(generator()) == 10

    def test_url_safe(self) -> None:
        """Test generated ids use URL-safe characters only."""
        allowed = set(string.ascii_letters + string.digits + "_-")

        assert set(ShortIdGenerator(length=200)()) <= allowed

    def test_unique(self) -> None:
        """Test ids do not repeat."""
        generator = ShortIdGenerator()

        assert len({generator() for _ in range(1000)}) == 1000

    def test_custom_alphabet(self) -> None:
        """Test drawing from a custom alphabet."""
        assert set(ShortIdGenerator(length=50, alphabet="ab")()) <= {"a", "b"}

    @pytest.mark.parametrize(
        ("kwargs", "message"),
        [
            ({"length": 0}, "length"),
            ({"alphabet": "aaaa"}, "alphabet"),
        ],
    )
    def test_invalid_arguments(self, kwargs: dict, message: str) -> None:
        """Test rejecting unusable settings."""
        with pytest.raises(ValueError, match=message):
            ShortIdGenerator(**kwargs)


class TestSystemClock:
    """Tests for SystemClock."""

    def test_returns_epoch_milliseconds(self) -> None:
        """Test the clock is in milliseconds since epoch."""
        before = int(time.time() * 1000)
        now = SystemClock()()
        after = int(time.time() * 1000)

        assert isinstance(now, int)
        assert before <= now <= after
