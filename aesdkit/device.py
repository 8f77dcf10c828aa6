"""A character device that stores newline-terminated writes in a circular buffer."""

from __future__ import annotations

import logging
import threading
from typing import Optional

from .circular_buffer import MAX_WRITE_OPERATIONS_SUPPORTED, CircularBuffer

logger = logging.getLogger("aesdchar")


class AesdDevice:
    """Holds the most recent complete write commands.

    Bytes written without a trailing newline are kept pending until a later
    write completes the command. Reads see the completed commands concatenated
    oldest first.
    """

    def __init__(self, capacity: int = MAX_WRITE_OPERATIONS_SUPPORTED) -> None:
        self._buffer = CircularBuffer(capacity)
        self._lock = threading.Lock()
        self._pending = bytearray()

    @property
    def pending(self) -> bytes:
        """Bytes written so far that do not yet end in a newline."""
        with self._lock:
            return bytes(self._pending)

    @property
    def buffer(self) -> CircularBuffer:
        return self._buffer

    def open(self) -> AesdFile:
        """Return a new file handle positioned at the start of the device."""
        logger.debug("open")
        return AesdFile(self)

    def read(self, count: int, offset: int) -> bytes:
        """Return up to ``count`` bytes starting at byte ``offset``."""
        logger.debug("read %d bytes with offset %d", count, offset)
        if count < 0:
            raise ValueError("count must not be negative")
        if offset < 0:
            raise ValueError("offset must not be negative")
        if count == 0:
            return b""
        chunks = []
        copied = 0
        with self._lock:
            while copied < count:
                found = self._buffer.find_entry_offset_for_fpos(offset + copied)
                if found is None:
                    break
                entry, entry_off = found
                to_copy = min(count - copied, entry.size - entry_off)
                chunks.append(entry.data[entry_off:entry_off + to_copy])
                copied += to_copy
        return b"".join(chunks)

    def write(self, data: bytes) -> int:
        """Accept ``data``; every completed line becomes one buffer entry.

        Returns the number of bytes accepted, which is always ``len(data)``.
        """
        data = bytes(data)
        logger.debug("write %d bytes", len(data))
        if not data:
            return 0
        with self._lock:
            self._pending += data
            while True:
                newline = self._pending.find(b"\n")
                if newline < 0:
                    break
                command = bytes(self._pending[:newline + 1])
                del self._pending[:newline + 1]
                self._buffer.add_entry(command)
        return len(data)

    def close(self) -> None:
        """Drop all stored commands and any pending bytes."""
        with self._lock:
            self._pending.clear()
            self._buffer.clear()


class AesdFile:
    """An open handle on an :class:`AesdDevice` with its own read position."""

    def __init__(self, device: AesdDevice) -> None:
        self._device: Optional[AesdDevice] = device
        self.position = 0

    @property
    def closed(self) -> bool:
        return self._device is None

    def _require_open(self) -> AesdDevice:
        if self._device is None:
            raise ValueError("I/O operation on closed file")
        return self._device

    def read(self, count: int) -> bytes:
        """Read up to ``count`` bytes at the current position and advance it."""
        data = self._require_open().read(count, self.position)
        self.position += len(data)
        return data

    def write(self, data: bytes) -> int:
        """Write ``data`` to the device; the read position is unaffected."""
        return self._require_open().write(data)

    def close(self) -> None:
        """Release the handle; the device keeps its contents."""
        if self._device is not None:
            logger.debug("release")
        self._device = None

    def __enter__(self) -> AesdFile:
        return self

    def __exit__(self, *args) -> None:
        self.close()