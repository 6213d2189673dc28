"""Helpers for inspecting and converting values, in the manner of PHP."""

from __future__ import annotations

import dataclasses
import numbers
import re
import unicodedata
from collections.abc import Mapping, Sized

__all__ = [
    "boolval",
    "empty",
    "intval",
    "strval",
    "gettype",
    "is_bool",
    "is_numeric",
]

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_ASCII_INTEGER = re.compile(r"[+-]?[0-9]+")


def _is_number(value) -> bool:
    return isinstance(value, numbers.Number) and not isinstance(value, bool)


def boolval(value) -> bool:
    """Return the truth of a number or boolean.

    ``None`` counts as true; any other kind of value counts as false.
    """
    if isinstance(value, bool):
        return value
    if _is_number(value):
        return value != 0
    return value is None


def empty(value) -> bool:
    """Tell whether ``value`` is empty: None, false, zero, "", "0" or no items."""
    if value is None:
        return True
    if isinstance(value, bool):
        return not value
    if _is_number(value):
        return value == 0
    if isinstance(value, str):
        return value in ("", "0")
    if isinstance(value, Sized):
        return len(value) == 0
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return not dataclasses.fields(value)
    return False


def intval(s: str) -> int:
    """Parse the leading integer of ``s``; text after the digits is ignored.

    Raises ValueError when the digits are not ASCII or exceed 64 bits.
    """
    s = s.strip()
    sign = ""
    if s[:1] in ("-", "+"):
        sign, s = s[0], s[1:]
    digits = []
    for ch in s:
        if not unicodedata.category(ch).startswith("N"):
            break
        digits.append(ch)
    text = sign + ("".join(digits) or "0")
    if not _ASCII_INTEGER.fullmatch(text):
        raise ValueError(f"invalid integer: {text!r}")
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def _format_value(value) -> str:
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        text = repr(value)
        return text[:-2] if text.endswith(".0") else text
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(_format_value(item) for item in value) + "]"
    if isinstance(value, Mapping):
        items = list(value.items())
        try:
            items.sort(key=lambda pair: pair[0])
        except TypeError:
            pass
        body = " ".join(f"{_format_value(k)}:{_format_value(v)}" for k, v in items)
        return "map[" + body + "]"
    return str(value)


def strval(value) -> str:
    """Return the textual form of ``value``."""
    return _format_value(value)


def gettype(value) -> str:
    """Return the name of the type of ``value``."""
    return type(value).__name__


def is_bool(value) -> bool:
    """Tell whether ``value`` is a boolean."""
    return isinstance(value, bool)


def _is_string_numeric(text: str) -> bool:
    has_period = False
    for index, ch in enumerate(text):
        if ch == "-":
            if index != 0:
                return False
        elif ch == ".":
            if has_period:
                return False
            has_period = True
        elif ch not in "0123456789":
            return False
    return True


def is_numeric(value) -> bool:
    """Tell whether ``value`` is a number or a string made of a number.

    A numeric string holds ASCII digits, at most one period and an
    optional leading minus sign.
    """
    if _is_number(value):
        return True
    if isinstance(value, str):
        return _is_string_numeric(value)
    return False