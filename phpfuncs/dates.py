"""Date and time helpers in the manner of PHP's date functions."""

from __future__ import annotations

import time as _clock
from collections.abc import Callable
from datetime import datetime, timedelta

__all__ = [
    "date",
    "date_add",
    "checkdate",
    "time_",
    "sleep",
    "usleep",
]

_MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
_WEEKDAYS = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
)


def _offset(moment: datetime, colon: bool) -> str:
    delta = moment.utcoffset() or timedelta(0)
    total = int(delta.total_seconds()) // 60
    sign = "-" if total < 0 else "+"
    hours, minutes = divmod(abs(total), 60)
    separator = ":" if colon else ""
    return f"{sign}{hours:02d}{separator}{minutes:02d}"


def _zone_name(moment: datetime) -> str:
    name = moment.tzname() or ""
    return name if name.isalpha() else _offset(moment, False)


def _hour12(moment: datetime) -> int:
    return moment.hour % 12 or 12


def _rfc2822(moment: datetime) -> str:
    return (
        f"{_WEEKDAYS[moment.weekday()][:3]}, {moment.day:02d} "
        f"{_MONTHS[moment.month - 1][:3]} {moment.year:04d} "
        f"{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d} "
        f"{_offset(moment, False)}"
    )


_FORMATTERS: dict[str, Callable[[datetime], str]] = {
    "Y": lambda m: f"{m.year:04d}",
    "y": lambda m: f"{m.year % 100:02d}",
    "m": lambda m: f"{m.month:02d}",
    "n": lambda m: str(m.month),
    "M": lambda m: _MONTHS[m.month - 1][:3],
    "F": lambda m: _MONTHS[m.month - 1],
    "d": lambda m: f"{m.day:02d}",
    "j": lambda m: str(m.day),
    "D": lambda m: _WEEKDAYS[m.weekday()][:3],
    "l": lambda m: _WEEKDAYS[m.weekday()],
    "g": lambda m: str(_hour12(m)),
    "G": lambda m: f"{m.hour:02d}",
    "h": lambda m: f"{_hour12(m):02d}",
    "H": lambda m: f"{m.hour:02d}",
    "a": lambda m: "pm" if m.hour >= 12 else "am",
    "A": lambda m: "PM" if m.hour >= 12 else "AM",
    "i": lambda m: f"{m.minute:02d}",
    "s": lambda m: f"{m.second:02d}",
    "T": _zone_name,
    "P": lambda m: _offset(m, True),
    "O": lambda m: _offset(m, False),
    "r": _rfc2822,
}


def date(format: str, moment: datetime | None = None) -> str:
    """Format ``moment`` (default: now, local time) with PHP date codes.

    Characters that are not format codes are copied unchanged. A naive
    ``moment`` is taken to be in local time.
    """
    if moment is None:
        moment = datetime.now().astimezone()
    elif moment.tzinfo is None:
        moment = moment.astimezone()
    return "".join(
        _FORMATTERS[ch](moment) if ch in _FORMATTERS else ch for ch in format
    )


def date_add(moment: datetime, years: int, months: int, days: int) -> datetime:
    """Add years, months and days, letting overflowing days roll forward.

    January 31 plus one month gives the start of March, as the
    February date that would result does not exist.
    """
    month_index = moment.month - 1 + months
    year = moment.year + years + month_index // 12
    month = month_index % 12 + 1
    first = moment.replace(year=year, month=month, day=1)
    return first + timedelta(days=moment.day - 1 + days)


def _is_leap_year(year: int) -> bool:
    if year % 100 == 0:
        return year % 400 == 0
    return year % 4 == 0


def checkdate(month: int, day: int, year: int) -> bool:
    """Tell whether the date is a valid Gregorian date in years 1 to 32767."""
    if month in (1, 3, 5, 7, 8, 10, 12):
        longest = 31
    elif month in (4, 6, 9, 11):
        longest = 30
    elif month == 2:
        longest = 29 if _is_leap_year(year) else 28
    else:
        return False
    if day > longest or day < 1:
        return False
    return 1 <= year <= 32767


def time_() -> int:
    """Return the current Unix timestamp in whole seconds."""
    return int(_clock.time())


def sleep(seconds: int) -> None:
    """Pause for ``seconds`` seconds; non-positive values return at once."""
    _clock.sleep(max(0, seconds))


def usleep(microseconds: int) -> None:
    """Pause for ``microseconds`` microseconds; non-positive values return at once."""
    _clock.sleep(max(0, microseconds) / 1_000_000)