"""Singly-linked list with head insertion and O(n) arbitrary removal."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False)
class SListNode:
    """A list element: its value and the following node."""

    value: Any
    next: Optional[SListNode] = None


class SList:
    """Singly-linked list headed by one forward reference."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[SListNode] = None
        for value in reversed(list(values)):
            self.insert_head(value)

    def first(self) -> Optional[SListNode]:
        """Return the first node, or None when empty."""
        return self._head

    def is_empty(self) -> bool:
        return self._head is None

    def insert_head(self, value: Any) -> SListNode:
        """Insert ``value`` at the front and return its node."""
        node = SListNode(value, self._head)
        self._head = node
        return node

    def insert_after(self, node: SListNode, value: Any) -> SListNode:
        """Insert ``value`` right after ``node`` and return the new node."""
        new = SListNode(value, node.next)
        node.next = new
        return new

    def remove_head(self) -> Any:
        """Remove the first node and return its value."""
        head = self._head
        if head is None:
            raise IndexError("remove from empty list")
        self._head = head.next
        head.next = None
        return head.value

    def remove_after(self, node: SListNode) -> Any:
        """Remove the node following ``node`` and return its value."""
        victim = node.next
        if victim is None:
            raise ValueError("no node follows the given node")
        node.next = victim.next
        victim.next = None
        return victim.value

    def remove(self, node: SListNode) -> Any:
        """Remove ``node`` from the list and return its value."""
        if self._head is node:
            return self.remove_head()
        current = self._head
        while current is not None and current.next is not node:
            current = current.next
        if current is None:
            raise ValueError("node is not in this list")
        return self.remove_after(current)

    def concat(self, other: SList) -> None:
        """Append all of ``other``'s nodes to this list, leaving ``other`` empty."""
        if other is self:
            raise ValueError("cannot concatenate a list with itself")
        if other._head is None:
            return
        if self._head is None:
            self._head = other._head
        else:
            tail = self._head
            while tail.next is not None:
                tail = tail.next
            tail.next = other._head
        other._head = None

    def swap(self, other: SList) -> None:
        """Exchange contents with ``other``."""
        self._head, other._head = other._head, self._head

    def _nodes(self) -> Iterator[SListNode]:
        node = self._head
        while node is not None:
            following = node.next
            yield node
            node = following

    def __iter__(self) -> Iterator[Any]:
        """Yield values front to back; the current node may be removed meanwhile."""
        for node in self._nodes():
            yield node.value

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())