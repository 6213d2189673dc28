"""Array helpers modelled on the PHP array function family."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Iterable, Mapping
from enum import IntEnum
from typing import Any

__all__ = [
    "KeyCase",
    "array",
    "count",
    "array_change_key_case",
    "array_chunk",
    "array_column",
    "array_count_values",
    "array_fill",
    "array_fill_keys",
    "array_flip",
    "array_intersect",
    "array_keys",
    "array_merge",
    "array_push",
    "array_reverse",
]


class KeyCase(IntEnum):
    """Target case for :func:`array_change_key_case`."""

    LOWER = 0
    UPPER = 1


def array(*args: Any) -> list[Any]:
    """Return the arguments as a list."""
    return list(args)


def count(values) -> int:
    """Return the number of elements."""
    return len(values)


def array_change_key_case(mapping: Mapping[str, Any], case: KeyCase | int) -> dict[str, Any]:
    """Return a copy of ``mapping`` with every key converted to ``case``.

    An unknown case gives an empty dictionary.
    """
    if case == KeyCase.UPPER:
        convert = str.upper
    elif case == KeyCase.LOWER:
        convert = str.lower
    else:
        return {}
    return {convert(key): value for key, value in mapping.items()}


def array_chunk(values: Iterable[Any], size: int) -> list[list[Any]]:
    """Split ``values`` into lists of ``size`` elements; the last may be shorter."""
    if size <= 0:
        raise ValueError("size must be positive")
    items = list(values)
    return [items[start:start + size] for start in range(0, len(items), size)]


def array_column(rows: Mapping[Any, Mapping[str, Any]], column_key: str) -> list[Any]:
    """Return the ``column_key`` value of every row that has one."""
    return [row[column_key] for row in rows.values() if column_key in row]


def array_count_values(values: Iterable[Hashable]) -> dict[Hashable, int]:
    """Count how often each value occurs."""
    return dict(Counter(values))


def array_fill(start_index: int, num: int, value: Any) -> dict[int, Any]:
    """Map ``num`` consecutive keys from ``start_index`` to ``value``."""
    if start_index < 0 or num < 0:
        raise ValueError("start_index and num must not be negative")
    return {key: value for key in range(start_index, start_index + num)}


def array_fill_keys(keys: Iterable[Hashable], value: Any) -> dict[Hashable, Any]:
    """Map every key to ``value``."""
    return dict.fromkeys(keys, value)


def array_flip(mapping: Mapping[Hashable, Hashable]) -> dict[Hashable, Hashable]:
    """Swap keys and values."""
    return {value: key for key, value in mapping.items()}


def array_intersect(first: Iterable[Hashable], second: Iterable[Hashable]) -> list[Hashable]:
    """Return the elements of ``second`` also in ``first``, counting repeats."""
    remaining = Counter(first)
    result = []
    for item in second:
        if remaining[item] > 0:
            result.append(item)
            remaining[item] -= 1
    return result


def array_keys(mapping: Mapping[str, Any]) -> list[str]:
    """Return the keys of ``mapping`` as a list."""
    return list(mapping)


def array_merge(*args: Iterable[Any]) -> list[Any]:
    """Concatenate the given sequences into one list."""
    return [item for values in args for item in values]


def array_push(target: list[Any], *args: Any) -> int:
    """Append ``args`` to ``target`` in place and return its new length."""
    target.extend(args)
    return len(target)


def array_reverse(values: list[Any]) -> list[Any]:
    """Reverse ``values`` in place and return it."""
    values.reverse()
    return values