"""PHP-style built-in functions for strings, arrays, math, dates, files and URLs."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "cli",
    "dates",
    "files",
    "hashing",
    "numeric",
    "output",
    "strings",
    "urls",
    "variables",
]