"""Small exercises with threads: returning results, shared counters, per-thread work."""

from __future__ import annotations

import getopt
import sys
import threading
from typing import Any, Callable, List, Optional, Sequence

_stack_size_lock = threading.Lock()


def _run_in_thread(func: Callable[[], Any]) -> Any:
    """Run ``func`` in a new thread, wait for it and return its result."""
    result: List[Any] = []
    thread = threading.Thread(target=lambda: result.append(func()))
    thread.start()
    thread.join()
    if not result:
        raise RuntimeError("thread did not produce a result")
    return result[0]


def string_length_in_thread(text: str) -> int:
    """Print ``text`` from a new thread and return its length in bytes."""

    def work() -> int:
        print(text, end="")
        return len(text.encode())

    print("Message from main:")
    length = _run_in_thread(work)
    print(f"Thread returned {length}")
    return length


def result_from_thread() -> int:
    """Return the value a worker thread computes (always 42)."""
    return _run_in_thread(lambda: 42)


def counter_demo(thread_count: int = 2) -> int:
    """Have each of ``thread_count`` threads increment a shared counter under a lock.

    Returns the final counter value.
    """
    if thread_count < 0:
        raise ValueError("thread_count must not be negative")
    lock = threading.Lock()
    counter = 0

    def work() -> None:
        nonlocal counter
        with lock:
            counter += 1
            print(f"Thread ID: {threading.get_ident()}, Counter: {counter}")

    threads = [threading.Thread(target=work) for _ in range(thread_count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return counter


def upper_in_threads(
    strings: Sequence[str], stack_size: Optional[int] = None
) -> List[str]:
    """Upper-case each string in its own thread; results keep the input order.

    A positive ``stack_size`` is used for the worker threads; an invalid size
    raises ValueError.
    """
    results: List[Optional[str]] = [None] * len(strings)

    def work(number: int, text: str) -> None:
        print(f"Thread {number + 1}: argv_string={text}")
        results[number] = text.upper()

    threads = [
        threading.Thread(target=work, args=(number, text))
        for number, text in enumerate(strings)
    ]
    with _stack_size_lock:
        previous = None
        if stack_size is not None and stack_size > 0:
            previous = threading.stack_size(stack_size)
        try:
            for thread in threads:
                thread.start()
        finally:
            if previous is not None:
                threading.stack_size(previous)
    for thread in threads:
        thread.join()
    return [text if text is not None else "" for text in results]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry: ``thread_demos [-s stack-size] arg...``. Returns the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    usage = "Usage: thread_demos [-s stack-size] arg..."
    try:
        options, rest = getopt.getopt(args, "s:")
        stack_size = -1
        for _, value in options:
            stack_size = int(value, 0)
    except (getopt.GetoptError, ValueError):
        print(usage, file=sys.stderr)
        return 1
    try:
        results = upper_in_threads(rest, stack_size)
    except ValueError as exc:
        print(f"stack size: {exc}", file=sys.stderr)
        return 1
    for number, text in enumerate(results, start=1):
        print(f"Joined with thread {number}; returned value was {text}")
    return 0


if __name__ == "__main__":
    sys.exit(main())