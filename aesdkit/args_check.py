"""Check that exactly two command-line arguments were given, and describe errno values."""

from __future__ import annotations

import logging
import os
import sys
from typing import List, Optional, Sequence, Tuple

logger = logging.getLogger("args_check")


def check_arguments(args: Sequence[str]) -> Tuple[str, str]:
    """Return the two arguments; raise ValueError when there are not exactly two."""
    if not args:
        raise ValueError("You need two arguments but you only gave: None")
    if len(args) < 2:
        raise ValueError(f"You need two arguments but you only gave: {args[0]}")
    if len(args) > 2:
        raise ValueError(
            "You need only two arguments but you gave: "
            f"{args[0]} {args[1]} {args[2]}"
        )
    return args[0], args[1]


def describe_error(errnum: int) -> List[str]:
    """Return lines giving the message and the number of an errno value."""
    return [
        f"My error message is: {os.strerror(errnum)}",
        f"My error number is: {errnum}",
    ]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Validate the arguments, reporting a wrong count; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        check_arguments(args)
    except ValueError as exc:
        print(exc)
        logger.error("Invalid number of arguments: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())