"""Errors raised by engines."""

from cacheengine.core.entities.engine_state import EngineState


class EngineError(Exception):
    """Base class for engine errors."""

    pass


class BackendError(EngineError):
    """Raised by concrete engines when the backing store fails.

    Engines should chain the underlying error, e.g.
    ``raise BackendError("connection lost") from exc``.
    """

    pass


class EngineStateError(EngineError):
    """Raised when an operation is not valid in the engine's state."""

    def __init__(self, operation: str, state: EngineState, message: str | None = None) -> None:
        """Initialize the error.

        Args:
            operation: Name of the rejected operation.
            state: The engine state at the time of the call.
            message: Optional message; a default one is built otherwise.
        """
        self.operation = operation
        self.state = state
        super().__init__(
            message or f"Cannot call '{operation}' on an engine in state '{state.value}'"
        )


class EngineClosedError(EngineStateError):
    """Raised when an operation is attempted on a closed engine."""

    def __init__(self, operation: str) -> None:
        """Initialize the error.

        Args:
            operation: Name of the rejected operation.
        """
        super().__init__(
            operation,
            EngineState.CLOSED,
            f"Cannot call '{operation}' on a closed engine",
        )
