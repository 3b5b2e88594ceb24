"""Error types: dual struct+exception for callback contract violations."""

from __future__ import annotations

import msgspec

__all__ = [
    'InvalidCallbackShape',
    'InvalidCallbackShapeError',
]


class InvalidCallbackShape(msgspec.Struct, frozen=True, gc=False):
    """A callback returned the wrong shape - struct variant.

    This is the payload of the ``callback.invalid_shape`` log event.
    """

    operation: str
    received: str


class InvalidCallbackShapeError(TypeError):
    """A callback returned the wrong shape - exception variant.

    Raised by the synchronous container when a callback that must return a
    ``SyncOption`` returns anything else. This is a programmer error and is
    never recovered from inside a pipeline.
    """

    def __init__(self, operation: str, received: str) -> None:
        self.operation = operation
        self.received = received
        super().__init__(f'{operation}: callback must return a SyncOption, got {received}')

    def to_struct(self) -> InvalidCallbackShape:
        """Convert to struct for value-based handling."""
        return InvalidCallbackShape(self.operation, self.received)
