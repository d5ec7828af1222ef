"""Domain entities for cacheengine."""

from cacheengine.core.entities.datum import Datum
from cacheengine.core.entities.engine_config import EngineConfig
from cacheengine.core.entities.engine_state import EngineState

__all__ = [
    "Datum",
    "EngineConfig",
    "EngineState",
]
