"""Singly-linked tail queue: a singly-linked list that also tracks its tail."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False)
class STailQNode:
    """A queue element: its value and the following node."""

    value: Any
    next: Optional[STailQNode] = None


class STailQ:
    """FIFO-friendly singly-linked queue with O(1) append."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[STailQNode] = None
        self._tail: Optional[STailQNode] = None
        for value in values:
            self.insert_tail(value)

    def first(self) -> Optional[STailQNode]:
        return self._head

    def last(self) -> Optional[STailQNode]:
        return self._tail

    def is_empty(self) -> bool:
        return self._head is None

    def insert_head(self, value: Any) -> STailQNode:
        """Insert ``value`` at the front and return its node."""
        node = STailQNode(value, self._head)
        if self._head is None:
            self._tail = node
        self._head = node
        return node

    def insert_tail(self, value: Any) -> STailQNode:
        """Append ``value`` at the back and return its node."""
        node = STailQNode(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        return node

    def insert_after(self, node: STailQNode, value: Any) -> STailQNode:
        """Insert ``value`` right after ``node`` and return the new node."""
        new = STailQNode(value, node.next)
        node.next = new
        if new.next is None:
            self._tail = new
        return new

    def remove_head(self) -> Any:
        """Remove the first node and return its value."""
        head = self._head
        if head is None:
            raise IndexError("remove from empty queue")
        self._head = head.next
        if self._head is None:
            self._tail = None
        head.next = None
        return head.value

    def remove_after(self, node: STailQNode) -> Any:
        """Remove the node following ``node`` and return its value."""
        victim = node.next
        if victim is None:
            raise ValueError("no node follows the given node")
        node.next = victim.next
        if node.next is None:
            self._tail = node
        victim.next = None
        return victim.value

    def remove(self, node: STailQNode) -> Any:
        """Remove ``node`` from the queue and return its value."""
        if self._head is node:
            return self.remove_head()
        current = self._head
        while current is not None and current.next is not node:
            current = current.next
        if current is None:
            raise ValueError("node is not in this queue")
        return self.remove_after(current)

    def concat(self, other: STailQ) -> None:
        """Append all of ``other``'s nodes, leaving ``other`` empty."""
        if other is self:
            raise ValueError("cannot concatenate a queue with itself")
        if other._head is None:
            return
        if self._tail is None:
            self._head = other._head
        else:
            self._tail.next = other._head
        self._tail = other._tail
        other._head = None
        other._tail = None

    def swap(self, other: STailQ) -> None:
        """Exchange contents with ``other``."""
        self._head, other._head = other._head, self._head
        self._tail, other._tail = other._tail, self._tail

    def _nodes(self) -> Iterator[STailQNode]:
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