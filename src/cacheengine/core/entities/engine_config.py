"""Engine configuration entity."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass
class EngineConfig:
    """Engine configuration.

    Holds the options a cache manager passes to an engine at
    construction time. Only ``prefix`` is understood by the base
    contract; everything else lives in ``options`` and is read by
    the concrete engine.

    Example:
        config = EngineConfig(prefix="app:", options={"maxsize": 100})
        config = EngineConfig.from_mapping({"prefix": "app:", "maxsize": 100})
    """

    prefix: str = ""
    options: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Normalize a missing prefix to an empty string."""
        if not self.prefix:
            self.prefix = ""

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any] | None) -> "EngineConfig":
        """Build a config from a plain mapping of options.

        Args:
            mapping: Options as a dict. ``prefix`` is lifted out,
                all other keys are kept as engine-specific options.

        Returns:
            A new EngineConfig instance.
        """
        options = dict(mapping or {})
        prefix = options.pop("prefix", None)
        return cls(prefix=prefix or "", options=options)
