"""Fixed-capacity first-in first-out ring buffer."""

from __future__ import annotations

from typing import Any, List, Optional

BUFFER_SIZE = 10


class RingBuffer:
    """Ring of ``capacity`` slots with separate read and write positions."""

    def __init__(self, capacity: int = BUFFER_SIZE) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._slots: List[Optional[Any]] = [None] * capacity
        self._head = 0
        self._tail = 0
        self._count = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    @property
    def full(self) -> bool:
        return self._count == len(self._slots)

    def put(self, value: Any) -> None:
        """Store ``value`` at the write position; raise BufferError when full."""
        if self.full:
            raise BufferError("ring buffer is full")
        self._slots[self._tail] = value
        self._tail = (self._tail + 1) % len(self._slots)
        self._count += 1

    def get(self) -> Any:
        """Remove and return the oldest value; raise IndexError when empty."""
        if self._count == 0:
            raise IndexError("get from empty ring buffer")
        value = self._slots[self._head]
        self._slots[self._head] = None
        self._head = (self._head + 1) % len(self._slots)
        self._count -= 1
        return value

    def __len__(self) -> int:
        return self._count


def create_circular_buffer(size: int = BUFFER_SIZE) -> RingBuffer:
    """Return a new, empty ring buffer of ``size`` slots."""
    return RingBuffer(size)