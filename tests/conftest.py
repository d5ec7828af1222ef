"""Pytest configuration for cacheengine tests."""

from collections.abc import Callable
from typing import Any

import pytest

from cacheengine import Datum, Engine


class FakeClock:
    """Manually advanced clock returning epoch milliseconds."""

    def __init__(self, now: float = 1_700_000_000_000) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


class SequentialIds:
    """Id generator returning engine-1, engine-2, ..."""

    def __init__(self) -> None:
        self.count = 0

    def __call__(self) -> str:
        self.count += 1
        return f"engine-{self.count}"


class DictEngine(Engine):
    """Minimal engine over a plain dict, without expiry."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.data: dict[str, Any] = {}
        self.close_calls = 0

    async def _get(self, key: str) -> Any | None:
        return self.data.get(key)

    async def _set(self, key: str, value: Any, ttl: float | None) -> Any:
        self.data[key] = value
        return value

    async def _delete(self, key: str) -> None:
        self.data.pop(key, None)

    async def _ttl(self, key: str, ttl: float) -> float | None:
        return ttl if key in self.data else None

    async def _load(self) -> list[Datum]:
        return [Datum(key, value) for key, value in self.data.items()]

    async def _flush(self) -> None:
        self.data.clear()

    async def _close(self) -> None:
        self.close_calls += 1


@pytest.fixture
def clock() -> FakeClock:
    """Create a fake clock for deterministic expiry."""
    return FakeClock()


@pytest.fixture
def ids() -> SequentialIds:
    """Create a predictable id generator."""
    return SequentialIds()


@pytest.fixture
def make_dict_engine(clock: FakeClock) -> Callable[..., DictEngine]:
    """Create a factory for unloaded dict engines."""

    def factory(*args: Any, **kwargs: Any) -> DictEngine:
        kwargs.setdefault("clock", clock)
        return DictEngine(*args, **kwargs)

    return factory


@pytest.fixture
def dict_engine(make_dict_engine: Callable[..., DictEngine]) -> DictEngine:
    """Create an unloaded dict engine."""
    return make_dict_engine()
