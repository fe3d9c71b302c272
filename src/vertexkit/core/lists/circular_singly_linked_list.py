"""
Circular singly linked list.

The last node always links back to ``head``, so walking ``next`` from any node
eventually returns to where it started. Positions passed to ``at`` wrap around
the ring.
"""

import logging
from typing import Any, Iterable, Iterator, List, Optional

from ..exceptions import InvalidIndexError
from .node import ListNode

logger = logging.getLogger(__name__)


class CircularSinglyLinkedList:
    """
    A singly linked list whose tail points back at its head.

    Attributes:
        head (Optional[ListNode]): First node, None when the list is empty
        size (int): Number of nodes in the ring
    """

    def __init__(self):
        self.head: Optional[ListNode] = None
        self.size = 0

    @classmethod
    def from_list(cls, items: Iterable[Any]) -> "CircularSinglyLinkedList":
        """Create a list pre-populated with ``items`` in order."""
        ring = cls()
        for item in items:
            ring.append(item)
        return ring

    @property
    def is_empty(self) -> bool:
        return self.size == 0

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[Any]:
        """Yield the stored data once around the ring, starting at ``head``."""
        if self.head is None:
            return
        current = self.head
        while True:
            yield current.data
            current = current.next
            if current is self.head:
                break

    def to_list(self) -> List[Any]:
        """Return the stored data as a Python list, starting at ``head``."""
        return list(self)

    def _last_node(self) -> ListNode:
        current = self.head
        while current.next is not self.head:
            current = current.next
        return current

    def at(self, n: int) -> ListNode:
        """
        Return the node at position ``n``.

        Positions past the end keep walking the ring, so ``at(size)`` is the
        head again.

        Args:
            n: Zero-based position

        Returns:
            ListNode: The node at that position

        Raises:
            InvalidIndexError: If ``n`` is negative or the list is empty
        """
        if n < 0:
            raise InvalidIndexError(f"Position must be non-negative, got {n}")
        if self.is_empty:
            raise InvalidIndexError(f"Cannot access position {n} of an empty list")

        current = self.head
        for _ in range(n):
            current = current.next
        return current

    def append(self, data: Any) -> None:
        """Add ``data`` at the end of the list."""
        node = ListNode(data)
        if self.is_empty:
            self.head = node
        else:
            self._last_node().next = node
        node.next = self.head
        self.size += 1

    def prepend(self, data: Any) -> None:
        """Add ``data`` at the beginning of the list."""
        node = ListNode(data)
        if self.is_empty:
            node.next = node
        else:
            node.next = self.head
            self._last_node().next = node
        self.head = node
        self.size += 1

    def pop(self) -> ListNode:
        """
        Remove and return the last node.

        Raises:
            InvalidIndexError: If the list is empty
        """
        if self.is_empty:
            raise InvalidIndexError("Cannot pop from an empty list")

        if self.size == 1:
            removed = self.head
            self.head = None
        else:
            before_last = self.head
            while before_last.next.next is not self.head:
                before_last = before_last.next
            removed = before_last.next
            before_last.next = self.head

        removed.next = None
        self.size -= 1
        logger.debug(f"Popped {removed.data!r}, {self.size} node(s) left")
        return removed

    def shift(self) -> ListNode:
        """
        Remove and return the first node.

        Raises:
            InvalidIndexError: If the list is empty
        """
        if self.is_empty:
            raise InvalidIndexError("Cannot shift from an empty list")

        removed = self.head
        if self.size == 1:
            self.head = None
        else:
            last = self._last_node()
            self.head = removed.next
            last.next = self.head

        removed.next = None
        self.size -= 1
        logger.debug(f"Shifted {removed.data!r}, {self.size} node(s) left")
        return removed

    def __repr__(self) -> str:
        return f"CircularSinglyLinkedList({self.to_list()!r})"
