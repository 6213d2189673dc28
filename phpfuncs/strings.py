"""String helpers modelled on the PHP string function family."""

from __future__ import annotations

import html
import re
from enum import Enum

__all__ = [
    "PadType",
    "addcslashes",
    "addslashes",
    "chunk_split",
    "number_format",
    "bin2hex",
    "bindec",
    "hex2bin",
    "chr_",
    "ord_",
    "explode",
    "get_html_translation_table",
    "htmlspecialchars",
    "htmlspecialchars_decode",
    "implode",
    "join",
    "strip_tags",
    "trim",
    "ltrim",
    "rtrim",
    "nl2br",
    "str_pad",
    "str_repeat",
    "str_replace",
    "strtolower",
    "strtoupper",
    "strstr",
    "strpos",
    "stripos",
    "strrpos",
    "strripos",
    "strrchr",
    "strlen",
    "mb_strlen",
    "strrev",
    "substr",
    "mb_substr",
    "substr_count",
    "ucfirst",
    "ucwords",
]

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_BINARY = re.compile(r"[+-]?[01]+")
_HEX = re.compile(r"[+-]?[0-9a-fA-F]+")

_HTML_ESCAPES = {
    ord("<"): "&lt;",
    ord(">"): "&gt;",
    ord("&"): "&amp;",
    ord("'"): "&#39;",
    ord('"'): "&#34;",
}

_ANY_TAG = re.compile(r"<.+?>", re.DOTALL)
_STYLE_BLOCK = re.compile(r"<style.+?</style>", re.DOTALL)
_SCRIPT_BLOCK = re.compile(r"<script.+?</script>", re.DOTALL)
_WHITESPACE_RUN = re.compile(r"[\t\n\f\r ]{2,}")


class PadType(str, Enum):
    """Side on which :func:`str_pad` adds padding."""

    RIGHT = "STR_PAD_RIGHT"
    LEFT = "STR_PAD_LEFT"


def _parse_int64(text: str, base: int, pattern: re.Pattern) -> int:
    """Parse a signed 64-bit integer strictly, without prefixes or underscores."""
    if not pattern.fullmatch(text):
        raise ValueError(f"invalid base-{base} number: {text!r}")
    value = int(text, base)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise OverflowError(f"value out of 64-bit range: {text!r}")
    return value


def _format_int(value: int, spec: str) -> str:
    if value < 0:
        return "-" + format(-value, spec)
    return format(value, spec)


def addcslashes(s: str, char: str) -> str:
    """Put a backslash before every occurrence of ``char``."""
    return s.replace(char, "\\" + char) if char else s


def addslashes(s: str) -> str:
    """Put a backslash before single quotes, double quotes and backslashes."""
    return "".join("\\" + ch if ch in "'\"\\" else ch for ch in s)


def chunk_split(string: str, chunk_len: int, end: str) -> str:
    """Split ``string`` into chunks of ``chunk_len``, each followed by ``end``."""
    if chunk_len <= 0:
        return string
    return "".join(
        string[start:start + chunk_len] + end
        for start in range(0, len(string), chunk_len)
    )


def number_format(
    number: float,
    decimals: int = 0,
    dec_point: str = ".",
    thousands_sep: str = ",",
) -> str:
    """Format a number with grouped thousands and a fixed number of decimals."""
    if decimals < 0:
        raise ValueError("decimals must not be negative")
    negative = number < 0
    formatted = f"{abs(number):,.{decimals}f}"
    integer_part, _, fraction = formatted.partition(".")
    result = integer_part.replace(",", thousands_sep)
    if decimals > 0:
        result += dec_point + fraction
    return "-" + result if negative else result


def bin2hex(b: str) -> str:
    """Convert a binary number string to hexadecimal; ``""`` if it is invalid."""
    try:
        return _format_int(_parse_int64(b, 2, _BINARY), "x")
    except (ValueError, OverflowError):
        return ""


def bindec(b: str) -> int:
    """Convert a binary number string to an integer.

    Invalid input gives 0; values beyond 64 bits are clamped.
    """
    try:
        return _parse_int64(b, 2, _BINARY)
    except OverflowError:
        return _INT64_MIN if b.startswith("-") else _INT64_MAX
    except ValueError:
        return 0


def hex2bin(x: str) -> str:
    """Convert a hexadecimal number string to binary; ``""`` if it is invalid."""
    try:
        return _format_int(_parse_int64(x, 16, _HEX), "b")
    except (ValueError, OverflowError):
        return ""


def chr_(code: int) -> str:
    """Return the character for ``code`` taken modulo 256."""
    return chr(code % 256)


def ord_(char: str | bytes) -> int:
    """Return the code of a single character or byte."""
    if len(char) != 1:
        raise ValueError("expected exactly one character")
    return char[0] if isinstance(char, bytes) else ord(char)


def explode(s: str, sep: str) -> list[str]:
    """Split ``s`` on ``sep``; an empty separator splits into characters."""
    if sep == "":
        return list(s)
    return s.split(sep)


def get_html_translation_table() -> dict[str, str]:
    """Return the table of characters that :func:`htmlspecialchars` escapes."""
    return {
        '"': "&quot;",
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
    }


def htmlspecialchars(s: str) -> str:
    """Escape ``<``, ``>``, ``&``, ``'`` and ``"`` as HTML entities."""
    return s.translate(_HTML_ESCAPES)


def htmlspecialchars_decode(s: str) -> str:
    """Turn HTML entities back into characters."""
    return html.unescape(s)


def implode(pieces, sep: str) -> str:
    """Join the pieces with ``sep``."""
    return sep.join(pieces)


def join(pieces, sep: str) -> str:
    """Alias of :func:`implode`."""
    return implode(pieces, sep)


def strip_tags(s: str) -> str:
    """Remove HTML tags, style and script blocks, collapsing whitespace."""
    s = _ANY_TAG.sub(lambda match: match.group(0).lower(), s)
    s = _STYLE_BLOCK.sub("", s)
    s = _SCRIPT_BLOCK.sub("", s)
    s = _ANY_TAG.sub("\n", s)
    s = _WHITESPACE_RUN.sub("\n", s)
    return s.strip()


def trim(s: str, cutset: str = "") -> str:
    """Strip ``cutset`` characters from both ends, or whitespace if it is empty."""
    if cutset == "":
        return s.strip()
    return s.strip(cutset)


def ltrim(s: str, cutset: str) -> str:
    """Strip ``cutset`` characters from the start."""
    return s.lstrip(cutset)


def rtrim(s: str, cutset: str) -> str:
    """Strip ``cutset`` characters from the end."""
    return s.rstrip(cutset)


def nl2br(s: str) -> str:
    """Insert an HTML line break after every newline."""
    return s.replace("\n", "\n<br />")


def str_pad(
    s: str,
    length: int,
    pad_string: str = " ",
    pad_type: PadType | str = PadType.RIGHT,
) -> str:
    """Pad ``s`` to ``length`` characters with repetitions of ``pad_string``."""
    missing = length - len(s)
    if missing < 0:
        return s
    if not pad_string:
        raise ValueError("pad_string must not be empty")
    padding = (pad_string * (missing // len(pad_string) + 1))[:missing]
    if pad_type == PadType.LEFT:
        return padding + s
    return s + padding


def str_repeat(s: str, count: int) -> str:
    """Repeat ``s`` ``count`` times."""
    if count < 0:
        raise ValueError("count must not be negative")
    return s * count


def str_replace(s: str, old: str, new: str, count: int = -1) -> str:
    """Replace the first ``count`` occurrences of ``old``; all if ``count`` < 0."""
    return s.replace(old, new, count)


def strtolower(s: str) -> str:
    """Return ``s`` in lower case."""
    return s.lower()


def strtoupper(s: str) -> str:
    """Return ``s`` in upper case."""
    return s.upper()


def strstr(s: str, substr: str) -> int:
    """Return the index of the first occurrence of ``substr``, or -1."""
    return s.find(substr)


def strpos(s: str, substr: str) -> int:
    """Return the index of the first occurrence of ``substr``, or -1."""
    return s.find(substr)


def stripos(s: str, substr: str) -> int:
    """Case-insensitive :func:`strpos`."""
    return s.lower().find(substr.lower())


def strrpos(s: str, substr: str) -> int:
    """Return the index of the last occurrence of ``substr``, or -1."""
    return s.rfind(substr)


def strripos(s: str, substr: str) -> int:
    """Case-insensitive :func:`strrpos`."""
    return s.lower().rfind(substr.lower())


def strrchr(s: str, substr: str) -> str:
    """Return ``s`` from the last occurrence of ``substr``, or ``""``."""
    index = s.rfind(substr)
    return "" if index < 0 else s[index:]


def strlen(s: str) -> int:
    """Return the length of ``s`` in UTF-8 bytes."""
    return len(s.encode("utf-8"))


def mb_strlen(s: str) -> int:
    """Return the length of ``s`` in characters."""
    return len(s)


def strrev(s: str) -> str:
    """Reverse ``s`` character by character."""
    return s[::-1]


def _bounds(size: int, start: int, length: int | None) -> tuple[int, int]:
    if length is None:
        end = size
    elif length < 0:
        end = max(size + length, 0)
    else:
        end = min(start + length, size)
    if start < 0 or start > end:
        raise IndexError(f"slice [{start}:{end}] out of range for length {size}")
    return start, end


def substr(s: str, start: int, length: int | None = None) -> str:
    """Return part of ``s``, counting in UTF-8 bytes.

    A negative ``length`` leaves that many bytes off the end.
    """
    data = s.encode("utf-8")
    begin, end = _bounds(len(data), start, length)
    return data[begin:end].decode("utf-8", errors="replace")


def mb_substr(s: str, start: int, length: int | None = None) -> str:
    """Return part of ``s``, counting in characters."""
    begin, end = _bounds(len(s), start, length)
    return s[begin:end]


def substr_count(s: str, substr: str) -> int:
    """Count non-overlapping occurrences of ``substr``."""
    return s.count(substr)


def ucfirst(s: str) -> str:
    """Upper-case the first character."""
    return s[:1].upper() + s[1:]


def _is_separator(ch: str) -> bool:
    if ch.isascii():
        return not (ch.isalnum() or ch == "_")
    if ch.isalpha() or ch.isdigit():
        return False
    return ch.isspace()


def ucwords(s: str) -> str:
    """Upper-case the first letter of every word."""
    return "".join(
        ch.upper() if _is_separator(previous) else ch
        for previous, ch in zip(" " + s, s)
    )