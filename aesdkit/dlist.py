"""Doubly-linked list: removal of any node in O(1), traversal both ways."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False)
class DListNode:
    """A list element with links to its neighbours."""

    value: Any
    next: Optional[DListNode] = field(default=None, repr=False)
    prev: Optional[DListNode] = field(default=None, repr=False)
    _owner: Optional[DList] = field(default=None, repr=False, init=False)


class DList:
    """Doubly-linked list headed by one forward reference."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[DListNode] = None
        for value in reversed(list(values)):
            self.insert_head(value)

    def _check(self, node: DListNode) -> None:
        if node._owner is not self:
            raise ValueError("node is not in this list")

    def first(self) -> Optional[DListNode]:
        """Return the first node, or None when empty."""
        return self._head

    def is_empty(self) -> bool:
        return self._head is None

    def insert_head(self, value: Any) -> DListNode:
        """Insert ``value`` at the front and return its node."""
        node = DListNode(value, next=self._head)
        node._owner = self
        if self._head is not None:
            self._head.prev = node
        self._head = node
        return node

    def insert_after(self, node: DListNode, value: Any) -> DListNode:
        """Insert ``value`` right after ``node`` and return the new node."""
        self._check(node)
        new = DListNode(value, next=node.next, prev=node)
        new._owner = self
        if node.next is not None:
            node.next.prev = new
        node.next = new
        return new

    def insert_before(self, node: DListNode, value: Any) -> DListNode:
        """Insert ``value`` right before ``node`` and return the new node."""
        self._check(node)
        new = DListNode(value, next=node, prev=node.prev)
        new._owner = self
        if node.prev is None:
            self._head = new
        else:
            node.prev.next = new
        node.prev = new
        return new

    def remove(self, node: DListNode) -> Any:
        """Unlink ``node`` and return its value."""
        self._check(node)
        if node.next is not None:
            node.next.prev = node.prev
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        node.next = node.prev = None
        node._owner = None
        return node.value

    def prev(self, node: DListNode) -> Optional[DListNode]:
        """Return the node before ``node``, or None when it is first."""
        self._check(node)
        return node.prev

    def concat(self, other: DList) -> None:
        """Append all of ``other``'s nodes to this list, leaving ``other`` empty."""
        if other is self:
            raise ValueError("cannot concatenate a list with itself")
        if other._head is None:
            return
        for node in other._nodes():
            node._owner = self
        if self._head is None:
            self._head = other._head
        else:
            tail = self._head
            while tail.next is not None:
                tail = tail.next
            tail.next = other._head
            other._head.prev = tail
        other._head = None

    def swap(self, other: DList) -> None:
        """Exchange contents with ``other``."""
        self._head, other._head = other._head, self._head
        for node in self._nodes():
            node._owner = self
        for node in other._nodes():
            node._owner = other

    def _nodes(self) -> Iterator[DListNode]:
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