"""Output and process-control helpers in the manner of PHP."""

from __future__ import annotations

import subprocess
import sys

from phpfuncs.variables import strval

__all__ = [
    "echo",
    "print_",
    "print_r",
    "exec_",
    "exit_",
    "die",
]


def _join_operands(args) -> str:
    parts = []
    previous_is_string = False
    for index, value in enumerate(args):
        is_string = isinstance(value, str)
        if index > 0 and not is_string and not previous_is_string:
            parts.append(" ")
        parts.append(strval(value))
        previous_is_string = is_string
    return "".join(parts)


def echo(*args) -> None:
    """Write the arguments to standard output.

    A space goes between two neighbouring arguments when neither is a string.
    """
    sys.stdout.write(_join_operands(args))


def print_(value) -> None:
    """Write the textual form of ``value`` to standard error."""
    sys.stderr.write(strval(value))


def print_r(value) -> None:
    """Write a readable form of ``value`` to standard output."""
    sys.stdout.write(strval(value))


def exec_(command: str) -> int | None:
    """Run the program ``command`` without arguments and wait for it.

    Its input and output go to the null device. Returns its exit status,
    or None if it could not be started.
    """
    try:
        finished = subprocess.run(
            [command],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except OSError:
        return None
    return finished.returncode


def exit_(code: int) -> None:
    """Terminate with exit status ``code``."""
    sys.exit(code)


def die(code: int) -> None:
    """Alias of :func:`exit_`."""
    exit_(code)