"""Start a thread that waits, holds a lock for a while, then releases it."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Any


@dataclass
class ThreadData:
    """What the worker thread needs, and whether it finished successfully."""

    mutex: Any
    wait_to_obtain_ms: int
    wait_to_release_ms: int
    thread_complete_success: bool = False


class _MutexThread(threading.Thread):
    """Worker thread carrying the :class:`ThreadData` it works on."""

    def __init__(self, thread_data: ThreadData) -> None:
        super().__init__(daemon=True)
        self.thread_data = thread_data

    def run(self) -> None:
        threadfunc(self.thread_data)


def threadfunc(thread_data: ThreadData) -> ThreadData:
    """Sleep, take the lock, sleep while holding it, release it; mark success."""
    time.sleep(thread_data.wait_to_obtain_ms / 1000)
    with thread_data.mutex:
        time.sleep(thread_data.wait_to_release_ms / 1000)
    thread_data.thread_complete_success = True
    return thread_data


def start_thread_obtaining_mutex(
    mutex: Any, wait_to_obtain_ms: int, wait_to_release_ms: int
) -> _MutexThread:
    """Start :func:`threadfunc` in a new thread without waiting for it.

    The returned thread exposes its :class:`ThreadData` as ``thread_data``;
    join it to wait for completion.
    """
    if wait_to_obtain_ms < 0 or wait_to_release_ms < 0:
        raise ValueError("wait times must not be negative")
    thread = _MutexThread(
        ThreadData(mutex, wait_to_obtain_ms, wait_to_release_ms)
    )
    thread.start()
    return thread