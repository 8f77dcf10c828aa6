"""Write a string to a file, creating or truncating it."""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional, Sequence

logger = logging.getLogger("writer")

_FLAGS = os.O_WRONLY | os.O_TRUNC | os.O_CREAT
_MODE = 0o644


def create_file(path: str | os.PathLike) -> None:
    """Create ``path`` empty (mode 0644), truncating it if it exists.

    Raises OSError when the file cannot be opened.
    """
    try:
        fd = os.open(path, _FLAGS, _MODE)
    except OSError as exc:
        logger.error("File does not exist: %s", exc.strerror)
        raise
    os.close(fd)


def write_file(path: str | os.PathLike, text: str) -> int:
    """Replace the contents of ``path`` with ``text``; return bytes written."""
    try:
        fd = os.open(path, _FLAGS, _MODE)
    except OSError as exc:
        logger.error("File does not exist: %s", exc.strerror)
        raise
    data = text.encode()
    with os.fdopen(fd, "wb") as handle:
        handle.write(data)
    logger.debug("Writing %s to %s", text, path)
    return len(data)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry: ``writer <writefile> <writestr>``. Returns the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("You have not specified 'writefile' argument")
        return 1
    if len(args) < 2:
        print("You have not specified writestr argument")
        return 1
    if len(args) > 2:
        print(
            "You need only two arguments but you gave: "
            f"{args[0]} {args[1]} {args[2]} {os.strerror(0)}"
        )
        return 1
    try:
        write_file(args[0], args[1])
    except OSError as exc:
        print(f"File does not exist: {exc.strerror}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())