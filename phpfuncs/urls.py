"""URL parsing and percent-encoding helpers."""

from __future__ import annotations

import re
from urllib.parse import SplitResult, quote, quote_plus, unquote, urlsplit

__all__ = [
    "parse_url",
    "parse_str",
    "rawurlencode",
    "rawurldecode",
    "urlencode",
    "urldecode",
]

_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def _unescape(s: str, plus_is_space: bool) -> str:
    match = _BAD_ESCAPE.search(s)
    if match:
        fragment = s[match.start():match.start() + 3]
        raise ValueError(f"invalid URL escape {fragment!r}")
    if plus_is_space:
        s = s.replace("+", " ")
    return unquote(s, errors="replace")


def parse_url(raw: str) -> SplitResult:
    """Split a URL into scheme, network location, path, query and fragment.

    Raises ValueError for control characters or a missing scheme before ``:``.
    """
    if any(ord(ch) < 0x20 or ord(ch) == 0x7F for ch in raw):
        raise ValueError("invalid control character in URL")
    if raw.startswith(":"):
        raise ValueError("missing protocol scheme")
    return urlsplit(raw)


def parse_str(query: str) -> dict[str, list[str]]:
    """Parse a query string into a mapping of names to all their values.

    Raises ValueError for bad escapes or a semicolon separator.
    """
    values: dict[str, list[str]] = {}
    for piece in query.split("&"):
        if not piece:
            continue
        if ";" in piece:
            raise ValueError("invalid semicolon separator in query")
        key, _, value = piece.partition("=")
        values.setdefault(_unescape(key, True), []).append(_unescape(value, True))
    return values


def rawurlencode(s: str) -> str:
    """Percent-encode ``s`` for use as a single path segment."""
    return quote(s, safe="$&+:=@")


def rawurldecode(s: str) -> str:
    """Decode percent escapes; ``+`` stays as it is."""
    return _unescape(s, False)


def urlencode(s: str) -> str:
    """Percent-encode ``s`` for a query string, spaces becoming ``+``."""
    return quote_plus(s, safe="")


def urldecode(s: str) -> str:
    """Decode a query-string value, ``+`` becoming a space."""
    return _unescape(s, True)