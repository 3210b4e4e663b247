"""
Body container - the ordered chain of segments that makes up the snake.
"""

from typing import Iterator, List, Optional

from .coordinate import Coordinate
from .errors import BodyTornDownError, EmptyBodyError
from .node_pool import BodyNode, NodePool


class Body:
    """
    Doubly-linked sequence of Coordinates, head at the front, tail at the back.

    The Body owns every node it links. Nodes come from the pool in
    grow_front() and go back to it in shrink_back() or teardown(), never
    anywhere else.
    """

    def __init__(self, pool: NodePool, head: Coordinate):
        self._pool = pool
        node = pool.create(Coordinate(*head))
        self._first: Optional[BodyNode] = node
        self._last: Optional[BodyNode] = node
        self._len = 1
        self._torn_down = False

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[Coordinate]:
        node = self._first
        while node is not None:
            yield node.data
            node = node.next

    def __contains__(self, pos) -> bool:
        return self.contains(pos)

    @property
    def head(self) -> Coordinate:
        """Return the head position (front element)."""
        if self._first is None:
            raise EmptyBodyError("head of an empty body")
        return self._first.data

    @property
    def tail(self) -> Coordinate:
        """Return the tail position (back element)."""
        if self._last is None:
            raise EmptyBodyError("tail of an empty body")
        return self._last.data

    def positions(self) -> List[Coordinate]:
        """Return all positions, head first."""
        return list(self)

    def grow_front(self, pos: Coordinate) -> None:
        """Link a freshly allocated node holding pos in front of the head."""
        self._check_alive()
        node = self._pool.create(Coordinate(*pos))
        node.next = self._first
        if self._first is not None:
            self._first.prev = node
        else:
            self._last = node
        self._first = node
        self._len += 1

    def shrink_back(self) -> None:
        """Unlink the tail node and release it to the pool."""
        self._check_alive()
        node = self._last
        if node is None:
            raise EmptyBodyError("shrink_back on an empty body")

        self._last = node.prev
        if self._last is not None:
            self._last.next = None
        else:
            self._first = None
        self._len -= 1
        self._pool.destroy(node)

    def contains(self, pos) -> bool:
        """Linear scan, head to tail, for a segment equal to pos."""
        node = self._first
        while node is not None:
            if node.data == pos:
                return True
            node = node.next
        return False

    def teardown(self) -> None:
        """Release every remaining node. Must be called exactly once."""
        self._check_alive()
        while self._last is not None:
            self.shrink_back()
        self._torn_down = True

    def _check_alive(self) -> None:
        if self._torn_down:
            raise BodyTornDownError("body was already torn down")

    def __repr__(self):
        return f"<Body len={self._len} positions={self.positions()}>"
