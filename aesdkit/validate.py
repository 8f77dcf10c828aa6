"""Trivial functions used to check that an automated test setup works."""

from __future__ import annotations

import sys
from typing import Callable, Iterator, Optional, Sequence


def this_function_returns_true() -> bool:
    """Return True."""
    return True


def this_function_returns_false() -> bool:
    """Return False."""
    return False


def my_username() -> str:
    """Return the user name used for submissions."""
    return "todo-please-enter-your-username-here-in-my_username"


_CHECKS: tuple[Callable[[], bool], ...] = (
    this_function_returns_true,
    this_function_returns_false,
)


def _report_lines() -> Iterator[str]:
    """Call each check function and describe what it returned."""
    for check in _CHECKS:
        outcome = str(bool(check())).lower()
        yield f"{check.__name__} returned {outcome}"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print what the two check functions return."""
    sys.stdout.write("".join(f"{line}\n" for line in _report_lines()))
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())