"""Hashing, encoding and random-data helpers."""

from __future__ import annotations

import base64
import binascii
import hashlib
import json
import os
from typing import Any

__all__ = [
    "md5",
    "md5_file",
    "sha1",
    "sha1_file",
    "base64_encode",
    "base64_decode",
    "random_bytes",
    "json_encode",
    "json_decode",
]

_JSON_HTML_ESCAPES = str.maketrans(
    {
        "<": "\\u003c",
        ">": "\\u003e",
        "&": "\\u0026",
        "\u2028": "\\u2028",
        "\u2029": "\\u2029",
    }
)


def _file_digest(algorithm: str, filename) -> str:
    try:
        with open(filename, "rb") as handle:
            data = handle.read()
    except OSError:
        return ""
    return hashlib.new(algorithm, data).hexdigest()


def md5(s: str) -> str:
    """Hex MD5 digest of the UTF-8 bytes of ``s``."""
    return hashlib.md5(s.encode("utf-8")).hexdigest()


def md5_file(filename) -> str:
    """Hex MD5 digest of a file's contents, or ``""`` if it cannot be read."""
    return _file_digest("md5", filename)


def sha1(s: str) -> str:
    """Hex SHA-1 digest of the UTF-8 bytes of ``s``."""
    return hashlib.sha1(s.encode("utf-8")).hexdigest()


def sha1_file(filename) -> str:
    """Hex SHA-1 digest of a file's contents, or ``""`` if it cannot be read."""
    return _file_digest("sha1", filename)


def base64_encode(s: str) -> str:
    """Standard, padded base64 of the UTF-8 bytes of ``s``."""
    return base64.b64encode(s.encode("utf-8")).decode("ascii")


def base64_decode(s: str) -> str:
    """Decode standard, padded base64; line breaks are ignored.

    Raises ValueError on malformed input.
    """
    cleaned = s.replace("\r", "").replace("\n", "")
    try:
        data = base64.b64decode(cleaned, validate=True)
    except binascii.Error as exc:
        raise ValueError(f"illegal base64 data: {exc}") from exc
    return data.decode("utf-8", errors="replace")


def random_bytes(length: int) -> bytes:
    """Return ``length`` cryptographically secure random bytes."""
    if length < 0:
        raise ValueError("length must not be negative")
    return os.urandom(length)


def json_encode(value: Any) -> bytes:
    """Compact JSON with sorted keys and HTML-sensitive characters escaped.

    Raises ValueError for NaN or infinity and TypeError for unsupported values.
    """
    text = json.dumps(
        value,
        ensure_ascii=False,
        sort_keys=True,
        separators=(",", ":"),
        allow_nan=False,
    )
    return text.translate(_JSON_HTML_ESCAPES).encode("utf-8")


def json_decode(data: bytes | str) -> Any:
    """Parse a JSON document."""
    return json.loads(data)