"""Doubly-linked tail queue: O(1) insertion at either end and O(1) removal."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False)
class TailQNode:
    """A queue element with links to its neighbours."""

    value: Any
    next: Optional[TailQNode] = field(default=None, repr=False)
    prev: Optional[TailQNode] = field(default=None, repr=False)
    _owner: Optional[TailQ] = field(default=None, repr=False, init=False)


class TailQ:
    """Doubly-linked queue that tracks both its head and its tail."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[TailQNode] = None
        self._tail: Optional[TailQNode] = None
        for value in values:
            self.insert_tail(value)

    def _check(self, node: TailQNode) -> None:
        if node._owner is not self:
            raise ValueError("node is not in this queue")

    def _new(self, value: Any) -> TailQNode:
        node = TailQNode(value)
        node._owner = self
        return node

    def first(self) -> Optional[TailQNode]:
        return self._head

    def last(self) -> Optional[TailQNode]:
        return self._tail

    def is_empty(self) -> bool:
        return self._head is None

    def insert_head(self, value: Any) -> TailQNode:
        """Insert ``value`` at the front and return its node."""
        node = self._new(value)
        node.next = self._head
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        return node

    def insert_tail(self, value: Any) -> TailQNode:
        """Append ``value`` at the back and return its node."""
        node = self._new(value)
        node.prev = self._tail
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        return node

    def insert_after(self, node: TailQNode, value: Any) -> TailQNode:
        """Insert ``value`` right after ``node`` and return the new node."""
        self._check(node)
        new = self._new(value)
        new.next = node.next
        new.prev = node
        if node.next is None:
            self._tail = new
        else:
            node.next.prev = new
        node.next = new
        return new

    def insert_before(self, node: TailQNode, value: Any) -> TailQNode:
        """Insert ``value`` right before ``node`` and return the new node."""
        self._check(node)
        new = self._new(value)
        new.next = node
        new.prev = node.prev
        if node.prev is None:
            self._head = new
        else:
            node.prev.next = new
        node.prev = new
        return new

    def remove(self, node: TailQNode) -> Any:
        """Unlink ``node`` and return its value."""
        self._check(node)
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        node.next = node.prev = None
        node._owner = None
        return node.value

    def concat(self, other: TailQ) -> None:
        """Append all of ``other``'s nodes, leaving ``other`` empty."""
        if other is self:
            raise ValueError("cannot concatenate a queue with itself")
        if other._head is None:
            return
        for node in other._nodes():
            node._owner = self
        if self._tail is None:
            self._head = other._head
        else:
            self._tail.next = other._head
            other._head.prev = self._tail
        self._tail = other._tail
        other._head = other._tail = None

    def swap(self, other: TailQ) -> None:
        """Exchange contents with ``other``."""
        self._head, other._head = other._head, self._head
        self._tail, other._tail = other._tail, self._tail
        for node in self._nodes():
            node._owner = self
        for node in other._nodes():
            node._owner = other

    def _nodes(self) -> Iterator[TailQNode]:
        node = self._head
        while node is not None:
            following = node.next
            yield node
            node = following

    def __iter__(self) -> Iterator[Any]:
        """Yield values front to back; the current node may be removed meanwhile."""
        for node in self._nodes():
            yield node.value

    def __reversed__(self) -> Iterator[Any]:
        """Yield values back to front; the current node may be removed meanwhile."""
        node = self._tail
        while node is not None:
            previous = node.prev
            yield node.value
            node = previous

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())