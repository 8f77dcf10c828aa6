"""Fill a singly-linked list with generated values or thread identifiers and read it back."""

from __future__ import annotations

import sys
import threading
from typing import List, Optional, Sequence

from .shannon import ShannonRandom
from .slist import SList


def random_values(count: int, rng: Optional[ShannonRandom] = None) -> List[int]:
    """Return ``count`` integers in [0, 1000) drawn from ``rng``."""
    if count < 0:
        raise ValueError("count must not be negative")
    rng = ShannonRandom() if rng is None else rng
    return [int(rng.random() * 1000.0) for _ in range(count)]


def slist_demo(n: int, rng: Optional[ShannonRandom] = None) -> List[str]:
    """Insert ``n`` random values at the head of a list, walk it, then drain it.

    Returns the report lines: one "Insert" line per value, a blank line, one
    "Read1" line per value while iterating, a blank line, and one "Read2"
    line per value as it is removed from the head.
    """
    values = random_values(n, rng)
    items = SList()
    lines = []
    for value in values:
        lines.append(f"Insert: {value}")
        items.insert_head(value)
    lines.append("")
    lines.extend(f"Read1: {value}" for value in items)
    lines.append("")
    while not items.is_empty():
        lines.append(f"Read2: {items.remove_head()}")
    return lines


def collect_thread_ids(count: int) -> List[int]:
    """Run ``count`` threads that each record their identifier in a shared list.

    The identifiers are inserted at the list head, so they come back newest
    thread first.
    """
    if count < 0:
        raise ValueError("count must not be negative")
    lock = threading.Lock()
    ids = SList()

    def record() -> None:
        with lock:
            ids.insert_head(threading.get_ident())

    threads = []
    for _ in range(count):
        thread = threading.Thread(target=record)
        thread.start()
        threads.append(thread)
    for thread in threads:
        thread.join()
    return list(ids)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry: ``queue_demo <n>``. Returns the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    usage = "Usage: queue_demo <n>"
    if len(args) != 1:
        print(usage)
        return 1
    try:
        n = int(args[0])
        lines = slist_demo(n)
    except ValueError:
        print(usage)
        return 1
    print("### SLIST ###")
    for line in lines:
        print(line)
    print("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())