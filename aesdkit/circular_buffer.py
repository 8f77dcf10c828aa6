"""A fixed-size ring of write records that can be searched by byte position."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple, Union

MAX_WRITE_OPERATIONS_SUPPORTED = 10


@dataclass(frozen=True, eq=False)
class BufferEntry:
    """One stored write: the bytes it carried."""

    data: bytes

    @property
    def size(self) -> int:
        """Number of bytes held by the entry."""
        return len(self.data)


class CircularBuffer:
    """Ring of the most recent write records, overwriting the oldest when full.

    Any locking needed around the buffer is the caller's job.
    """

    def __init__(self, capacity: int = MAX_WRITE_OPERATIONS_SUPPORTED) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self.clear()

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def in_offs(self) -> int:
        """Slot where the next entry will be stored."""
        return self._in_offs

    @property
    def out_offs(self) -> int:
        """Slot holding the oldest entry."""
        return self._out_offs

    @property
    def full(self) -> bool:
        return self._full

    def clear(self) -> None:
        """Reset the buffer to its empty state."""
        self._slots: list[Optional[BufferEntry]] = [None] * self._capacity
        self._in_offs = 0
        self._out_offs = 0
        self._full = False

    def add_entry(
        self, entry: Union[BufferEntry, bytes, bytearray, None]
    ) -> Optional[BufferEntry]:
        """Store ``entry`` at the input slot.

        When the buffer is already full the oldest entry is overwritten and
        returned; otherwise None is returned. A None entry is ignored.
        """
        if entry is None:
            return None
        if isinstance(entry, (bytes, bytearray)):
            entry = BufferEntry(bytes(entry))
        if not isinstance(entry, BufferEntry):
            raise TypeError("entry must be a BufferEntry or bytes")

        evicted = None
        if self._full and self._in_offs == self._out_offs:
            evicted = self._slots[self._in_offs]
            self._out_offs = (self._out_offs + 1) % self._capacity

        self._slots[self._in_offs] = entry
        self._in_offs = (self._in_offs + 1) % self._capacity
        self._full = self._in_offs == self._out_offs
        return evicted

    def find_entry_offset_for_fpos(
        self, char_offset: int
    ) -> Optional[Tuple[BufferEntry, int]]:
        """Locate the entry holding byte ``char_offset`` of the concatenated contents.

        Returns ``(entry, offset_within_entry)``, or None when not enough data
        has been written. The search stops at the first empty entry.
        """
        if char_offset < 0:
            raise ValueError("char_offset must not be negative")
        start = 0
        for entry in self:
            if entry.size == 0:
                break
            if start <= char_offset < start + entry.size:
                return entry, char_offset - start
            start += entry.size
        return None

    def __iter__(self) -> Iterator[BufferEntry]:
        """Yield stored entries from oldest to newest."""
        for step in range(len(self)):
            entry = self._slots[(self._out_offs + step) % self._capacity]
            if entry is None:
                return
            yield entry

    def __len__(self) -> int:
        return self._capacity if self._full else self._in_offs