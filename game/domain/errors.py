"""
Exceptions raised by the snake domain.

Game outcomes (eating an apple, hitting the wall) are never exceptions; these
cover broken caller contracts and allocation failure only.
"""


class SnakeError(Exception):
    """Base class for all domain errors."""


class AllocationError(SnakeError, MemoryError):
    """The node pool could not hand out another body node. Fatal."""


class InvalidReleaseError(SnakeError, RuntimeError):
    """A node was released that the pool does not consider live."""


class EmptyBodyError(SnakeError, IndexError):
    """An operation needed at least one body segment but there were none."""


class BodyTornDownError(SnakeError, RuntimeError):
    """The body was used after teardown() already released its nodes."""
