"""Format the current time in an RFC 2822-like style and print or store it."""

from __future__ import annotations

import os
import sys
import tempfile
from datetime import datetime
from typing import Optional, Sequence, Union

# "%r" spelled out so the result does not depend on the platform's strftime.
TIME_FORMAT = "%a %d %b %y %I:%M:%S %p %z"
DEFAULT_PATH = os.path.join(tempfile.gettempdir(), "time.txt")

When = Union[datetime, float, int, None]


def _local(when: When) -> datetime:
    if when is None:
        return datetime.now().astimezone()
    if isinstance(when, (int, float)):
        return datetime.fromtimestamp(when).astimezone()
    if when.tzinfo is None:
        return when.astimezone()
    return when


def format_timestamp(when: When = None) -> str:
    """Format ``when`` (now by default); naive datetimes are taken as local time."""
    return _local(when).strftime(TIME_FORMAT)


def write_timestamp(path: str | os.PathLike = DEFAULT_PATH, when: When = None) -> str:
    """Write the formatted time and a newline to ``path``, replacing it; return the text."""
    text = format_timestamp(when)
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(text + "\n")
    return text


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the current time, or write it to the file named by the first argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if args:
        try:
            write_timestamp(args[0])
        except OSError as exc:
            print(f"Error opening file: {exc.strerror}", file=sys.stderr)
            return 1
    else:
        print(format_timestamp())
    return 0


if __name__ == "__main__":
    sys.exit(main())