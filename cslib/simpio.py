"""Simple line-oriented input from the console and from text streams.

The ``get_*`` functions read a line from standard input and, when the line
cannot be scanned as the requested kind of number, print a message and
give the user another chance.
"""

from __future__ import annotations

import re
import sys
from collections.abc import Callable
from typing import IO, TypeVar

__all__ = [
    "get_integer",
    "get_long",
    "get_real",
    "get_line",
    "read_line",
    "read_lines_from_stream",
    "read_lines_from_file",
]

_T = TypeVar("_T")

_INTEGER_RE = re.compile(r"\s*([-+]?\d+)\s*")
_INT_RANGE = (-(2**31), 2**31 - 1)
_LONG_RANGE = (-(2**63), 2**63 - 1)


def _scan_integer(text: str, bounds: tuple[int, int]) -> int | None:
    match = _INTEGER_RE.fullmatch(text)
    if match is None:
        return None
    value = int(match.group(1))
    low, high = bounds
    if not low <= value <= high:
        return None
    return value


def _scan_real(text: str) -> float | None:
    if "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def _read_until_valid(
    prompt: str, scan: Callable[[str], _T | None], kind: str, caller: str
) -> _T:
    while True:
        line = get_line(prompt)
        if line is None:
            raise EOFError(f"{caller}: unexpected end of file")
        value = scan(line)
        if value is not None:
            return value
        sys.stdout.write(f"Illegal {kind} format. Try again.\n")


def get_integer(prompt: str = "") -> int:
    """Read a line from standard input and return it as an integer.

    Values outside the 32-bit range are rejected like malformed input.
    """
    return _read_until_valid(
        prompt, lambda s: _scan_integer(s, _INT_RANGE), "integer", "get_integer"
    )


def get_long(prompt: str = "") -> int:
    """Read a line from standard input and return it as a 64-bit integer."""
    return _read_until_valid(
        prompt, lambda s: _scan_integer(s, _LONG_RANGE), "long", "get_long"
    )


def get_real(prompt: str = "") -> float:
    """Read a line from standard input and return it as a float."""
    return _read_until_valid(prompt, _scan_real, "real", "get_real")


def get_line(prompt: str = "") -> str | None:
    """Read a line from standard input without its newline.

    Returns None at end of file.
    """
    if prompt:
        sys.stdout.write(prompt)
        sys.stdout.flush()
    return read_line(sys.stdin)


def read_line(infile: IO[str]) -> str | None:
    """Read a line from ``infile`` without its newline, or None at end of file."""
    line = infile.readline()
    if line == "":
        return None
    if line.endswith("\n"):
        line = line[:-1]
    return line


def read_lines_from_stream(infile: IO[str]) -> list[str]:
    """Read every remaining line of ``infile``; the caller owns the stream."""
    lines: list[str] = []
    while (line := read_line(infile)) is not None:
        lines.append(line)
    return lines


def read_lines_from_file(filename: str) -> list[str]:
    """Read every line of a file; the name ``-`` means standard input."""
    if filename == "-":
        return read_lines_from_stream(sys.stdin)
    with open(filename, encoding="utf-8") as infile:
        return read_lines_from_stream(infile)