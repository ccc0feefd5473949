"""Command-line option scanning and shell-style argument splitting.

An option specification is a string that starts with the option name,
including its leading minus sign, optionally followed by whitespace and a
field naming the kind of value that follows in the next argument:

``<int>``, ``<double>``, ``<string>``, ``<char>``, ``<bool>``, or a list of
choices written ``x|y|z``.  Any other field is taken as a free string.  An
option with no field is a flag and is stored with the value ``"true"``.
"""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

__all__ = [
    "OptionError",
    "Options",
    "parse_options",
    "parse_shell_args",
    "show_usage",
]

_BOOL_WORDS = {
    "true": True,
    "t": True,
    "yes": True,
    "y": True,
    "on": True,
    "1": True,
    "false": False,
    "f": False,
    "no": False,
    "n": False,
    "off": False,
    "0": False,
}

_POINTS_PER_UNIT = {
    "": 1.0,
    "pt": 1.0,
    "px": 1.0,
    "in": 72.0,
    "i": 72.0,
    "cm": 72.0 / 2.54,
}

_UNITS_RE = re.compile(
    r"\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)\s*([A-Za-z]*)\s*"
)


class OptionError(ValueError):
    """Raised for malformed command lines or option values."""


def _parse_bool(text: str) -> bool:
    try:
        return _BOOL_WORDS[text.strip().lower()]
    except KeyError:
        raise OptionError(f"{text!r} is not a boolean value") from None


class Options(Mapping[str, str]):
    """Option bindings keyed by option name, plus the leftover arguments."""

    def __init__(self, values: Mapping[str, str] | None = None,
                 args: Iterable[str] = ()) -> None:
        self._values: dict[str, str] = dict(values or {})
        self.args: list[str] = list(args)

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def get(self, key: str, default: Any = None) -> Any:
        """Return the option's string value, or ``default`` if unset."""
        return self._values.get(key, default)

    def get_int(self, key: str, default: int) -> int:
        """Return the option as an integer, or ``default`` if unset."""
        value = self._values.get(key)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            raise OptionError(f"option {key}: {value!r} is not an integer") from None

    def get_double(self, key: str, default: float) -> float:
        """Return the option as a float, or ``default`` if unset."""
        value = self._values.get(key)
        if value is None:
            return default
        try:
            return float(value)
        except ValueError:
            raise OptionError(f"option {key}: {value!r} is not a number") from None

    def get_char(self, key: str, default: str) -> str:
        """Return the option as a single character, or ``default`` if unset."""
        value = self._values.get(key)
        if value is None:
            return default
        if len(value) != 1:
            raise OptionError(f"option {key}: {value!r} is not a single character")
        return value

    def get_bool(self, key: str, default: bool) -> bool:
        """Return the option as a boolean, or ``default`` if unset."""
        value = self._values.get(key)
        if value is None:
            return default
        return _parse_bool(value)

    def get_units(self, key: str, default: float) -> float:
        """Return a length option converted to points, or ``default`` if unset.

        The value is a number followed by ``in`` (or ``i``), ``cm``, ``pt``
        or ``px``; a bare number is taken as points.
        """
        value = self._values.get(key)
        if value is None:
            return default
        match = _UNITS_RE.fullmatch(value)
        if match is None:
            raise OptionError(f"option {key}: {value!r} is not a length")
        number, unit = match.groups()
        try:
            scale = _POINTS_PER_UNIT[unit.lower()]
        except KeyError:
            raise OptionError(f"option {key}: unknown unit {unit!r}") from None
        return float(number) * scale

    def __repr__(self) -> str:
        return f"Options({self._values!r}, args={self.args!r})"


def _parse_spec(spec: str) -> tuple[str, str | None]:
    name, _, field = spec.strip().partition(" ")
    if not name.startswith("-") or len(name) < 2:
        raise OptionError(f"bad option specification {spec!r}")
    field = field.strip()
    return name, field or None


def _check_value(name: str, field: str, value: str) -> None:
    if field == "<int>":
        try:
            int(value)
        except ValueError:
            raise OptionError(f"option {name} requires an integer, got {value!r}") from None
    elif field == "<double>":
        try:
            float(value)
        except ValueError:
            raise OptionError(f"option {name} requires a number, got {value!r}") from None
    elif field == "<char>":
        if len(value) != 1:
            raise OptionError(f"option {name} requires a single character, got {value!r}")
    elif field == "<bool>":
        _parse_bool(value)
    elif "|" in field and not field.startswith("<"):
        choices = field.split("|")
        if value not in choices:
            raise OptionError(
                f"option {name} must be one of {', '.join(choices)}, got {value!r}"
            )


def parse_options(args: Iterable[str], option_spec: Iterable[str]) -> Options:
    """Scan leading options from ``args`` according to ``option_spec``.

    Scanning stops at the first argument that is not an option (a lone
    ``-`` counts as an argument) or after ``--``; everything from there on
    is kept in ``Options.args``.
    """
    specs = dict(_parse_spec(spec) for spec in option_spec)
    values: dict[str, str] = {}
    rest: list[str] = []
    tokens = iter(args)
    for arg in tokens:
        if arg == "--":
            rest.extend(tokens)
            break
        if not arg.startswith("-") or arg == "-":
            rest.append(arg)
            rest.extend(tokens)
            break
        if arg not in specs:
            raise OptionError(f"unknown option {arg}")
        field = specs[arg]
        if field is None:
            values[arg] = "true"
            continue
        value = next(tokens, None)
        if value is None:
            raise OptionError(f"option {arg} requires a value")
        _check_value(arg, field, value)
        values[arg] = value
    return Options(values, rest)


def parse_shell_args(line: str) -> list[str]:
    """Split a line into arguments in the style of a Unix shell.

    Whitespace separates arguments, a backslash quotes the next character,
    and single or double quotation marks quote everything up to the
    matching mark.  No other metacharacters are recognised.
    """
    result: list[str] = []
    current: list[str] = []
    in_word = False
    quote: str | None = None
    chars = iter(line)
    for ch in chars:
        if quote is not None:
            if ch == quote:
                quote = None
            else:
                current.append(ch)
        elif ch in "'\"":
            quote = ch
            in_word = True
        elif ch == "\\":
            escaped = next(chars, None)
            if escaped is None:
                raise OptionError("backslash at end of line")
            current.append(escaped)
            in_word = True
        elif ch.isspace():
            if in_word:
                result.append("".join(current))
                current = []
                in_word = False
        else:
            current.append(ch)
            in_word = True
    if quote is not None:
        raise OptionError(f"unterminated {quote} quotation")
    if in_word:
        result.append("".join(current))
    return result


def show_usage(usage: str, spec: Iterable[str]) -> str:
    """Write a usage message listing the options to stderr and return it."""
    lines = [f"Usage: {usage}"]
    entries = [_parse_spec(s) for s in spec]
    if entries:
        lines.append("Options:")
        for name, field in entries:
            lines.append(f"  {name} {field}" if field else f"  {name}")
    text = "\n".join(lines) + "\n"
    sys.stderr.write(text)
    return text