"""
Tracking allocator for snake body nodes.

Every body segment is a BodyNode handed out by a NodePool and must be handed
back exactly once. At shutdown the pool can report whether anything is still
outstanding, which is how an ownership bug in the Body shows up as a leak.
"""

import logging
from typing import Dict, Optional

from .coordinate import Coordinate
from .errors import AllocationError, InvalidReleaseError

logger = logging.getLogger(__name__)


class BodyNode:
    """One doubly-linked body segment."""

    __slots__ = ("slot", "data", "prev", "next")

    def __init__(self, slot: int, data: Coordinate):
        self.slot = slot
        self.data = data
        self.prev: Optional["BodyNode"] = None
        self.next: Optional["BodyNode"] = None

    def __repr__(self):
        return f"<BodyNode slot={self.slot} data={self.data}>"


class NodePool:
    """
    Hands out BodyNodes and keeps track of which ones are still live.

    Attributes:
        capacity: optional upper bound on live nodes; reaching it makes
                  create() raise AllocationError
        total_allocations: number of nodes ever created by this pool
    """

    def __init__(self, capacity: Optional[int] = None):
        self.capacity = capacity
        self.total_allocations = 0
        self._live: Dict[int, BodyNode] = {}
        self._next_slot = 0

    @property
    def outstanding(self) -> int:
        """Number of nodes created but not yet destroyed."""
        return len(self._live)

    def create(self, data: Coordinate) -> BodyNode:
        if self.capacity is not None and len(self._live) >= self.capacity:
            raise AllocationError(
                f"Node pool exhausted ({self.capacity} live nodes)"
            )

        node = BodyNode(self._next_slot, data)
        self._live[node.slot] = node
        self._next_slot += 1
        self.total_allocations += 1
        return node

    def destroy(self, node: BodyNode) -> None:
        if self._live.get(node.slot) is not node:
            raise InvalidReleaseError(f"Release of a node that is not live: {node!r}")

        del self._live[node.slot]
        node.prev = None
        node.next = None

    def deinit(self) -> bool:
        """
        Check the pool for leaks.

        Returns:
            True if every node was released, False otherwise.
        """
        if not self._live:
            return True

        for node in self._live.values():
            logger.warning("Leaked body node: %r", node)
        logger.error(
            "%d of %d body nodes were never released",
            len(self._live),
            self.total_allocations,
        )
        return False

    def __repr__(self):
        return f"<NodePool outstanding={self.outstanding}, total={self.total_allocations}>"
