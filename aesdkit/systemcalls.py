"""Run commands through the shell or directly by path, and report how they ended."""

from __future__ import annotations

import os
import subprocess
from typing import IO, Optional, Sequence

_SHELL = "/bin/sh"
# A child that could not start the program exits with -1, seen as 255.
_EXEC_FAILED_STATUS = 255


def _executable_for(path: str) -> str:
    # The program is run by path only: a bare name refers to the current
    # directory, never to a PATH lookup.
    return path if os.path.dirname(path) else os.path.join(os.curdir, path)


def _run(
    argv: Sequence[str],
    executable: Optional[str] = None,
    stdout: Optional[IO[bytes]] = None,
) -> Optional[int]:
    """Run ``argv`` and return its return code, or None if it could not start."""
    program = executable if executable is not None else _executable_for(argv[0])
    try:
        completed = subprocess.run(
            list(argv), executable=program, stdout=stdout, check=False
        )
    except OSError:
        return None
    return completed.returncode


def _exit_status(returncode: Optional[int]) -> int:
    if returncode is None:
        return _EXEC_FAILED_STATUS
    if returncode < 0:
        return -1
    return returncode


def do_system(cmd: str) -> bool:
    """Run ``cmd`` through the shell; True only when it ran and exited with 0."""
    try:
        completed = subprocess.run(cmd, shell=True, check=False)
    except OSError:
        return False
    return completed.returncode == 0


def do_exec(*args: str) -> bool:
    """Run the program at ``args[0]`` with ``args`` as its argument vector.

    True when the program started and exited normally with status 0; False
    when it could not be started, was killed by a signal or exited non-zero.
    """
    if not args:
        return False
    return _run(args) == 0


def do_exec_redirect(outputfile: str | os.PathLike, *args: str) -> bool:
    """Like :func:`do_exec`, with the program's standard output sent to ``outputfile``.

    The output file is created or truncated (mode 0644) before the program
    runs; OSError is raised when it cannot be opened.
    """
    fd = os.open(outputfile, os.O_WRONLY | os.O_TRUNC | os.O_CREAT, 0o644)
    with os.fdopen(fd, "wb") as handle:
        if not args:
            return False
        return _run(args, stdout=handle) == 0


def my_system(cmd: str) -> int:
    """Run ``cmd`` with ``sh -c`` and return its exit status.

    Returns -1 when the shell was ended by a signal, and 255 when the shell
    itself could not be started.
    """
    return _exit_status(_run(["sh", "-c", cmd], executable=_SHELL))


def exec_and_wait(argv: Sequence[str]) -> int:
    """Run the program at ``argv[0]`` and return its exit status.

    Returns -1 when it was ended by a signal, and 255 when it could not be
    started.
    """
    if not argv:
        raise ValueError("argv must name a program")
    return _exit_status(_run(argv))