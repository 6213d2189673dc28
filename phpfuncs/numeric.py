"""Mathematical helpers modelled on the PHP math function family."""

from __future__ import annotations

import cmath
import math
import random

__all__ = [
    "abs_", "acos", "acosh", "asin", "asinh", "atan2", "atan", "atanh",
    "base_convert", "ceil", "cos", "cosh", "decbin", "dechex", "decoct",
    "exp", "expm1", "floor", "is_finite", "is_infinite", "is_nan", "log",
    "log10", "log1p", "max_", "min_", "pi", "pow_", "rand", "round_",
    "sin", "sinh", "sqrt", "tan", "tanh",
]

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"

_random = random.Random()


def _check_base(base: int) -> None:
    if not 2 <= base <= 36:
        raise ValueError(f"base must be between 2 and 36, got {base}")


def _to_base(value: int, base: int) -> str:
    _check_base(base)
    if value == 0:
        return "0"
    negative = value < 0
    value = abs(value)
    digits = []
    while value:
        value, remainder = divmod(value, base)
        digits.append(_DIGITS[remainder])
    return ("-" if negative else "") + "".join(reversed(digits))


def _parse_int64(text: str, base: int) -> int:
    _check_base(base)
    body = text[1:] if text[:1] in ("+", "-") else text
    allowed = _DIGITS[:base]
    if not body or any(ch not in allowed for ch in body.lower()):
        raise ValueError(f"invalid base-{base} number: {text!r}")
    value = int(text, base)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"value out of 64-bit range: {text!r}")
    return value


def _nan_on_domain_error(func, x: float) -> float:
    try:
        return func(x)
    except ValueError:
        return math.nan


def _logarithm(func, x: float, pole: float) -> float:
    if x == pole:
        return -math.inf
    if x < pole:
        return math.nan
    return func(x)


def _is_odd_int(y: float) -> bool:
    return math.isfinite(y) and y == math.floor(y) and int(y) % 2 == 1


def _is_inf(value: float, sign: int) -> bool:
    if sign > 0:
        return value == math.inf
    if sign < 0:
        return value == -math.inf
    return math.isinf(value)


def abs_(x: float) -> float:
    """Absolute value."""
    return math.fabs(x)


def acos(x: complex) -> complex:
    """Complex arc cosine."""
    return cmath.acos(complex(x))


def acosh(x: complex) -> complex:
    """Complex inverse hyperbolic cosine."""
    return cmath.acosh(complex(x))


def asin(x: complex) -> complex:
    """Complex arc sine."""
    return cmath.asin(complex(x))


def asinh(x: complex) -> complex:
    """Complex inverse hyperbolic sine."""
    return cmath.asinh(complex(x))


def atan2(y: float, x: float) -> float:
    """Arc tangent of ``y / x`` using the signs of both to pick the quadrant."""
    return math.atan2(y, x)


def atan(x: complex) -> complex:
    """Complex arc tangent."""
    return cmath.atan(complex(x))


def atanh(x: complex) -> complex:
    """Complex inverse hyperbolic tangent."""
    return cmath.atanh(complex(x))


def base_convert(number: str, from_base: int, to_base: int) -> str:
    """Convert a signed 64-bit number string between bases 2 to 36."""
    _check_base(to_base)
    return _to_base(_parse_int64(number, from_base), to_base)


def ceil(x: float) -> float:
    """Round up to the next whole number."""
    if not math.isfinite(x):
        return x
    return math.copysign(float(math.ceil(x)), x)


def cos(x: float) -> float:
    """Cosine; NaN for infinite input."""
    return _nan_on_domain_error(math.cos, x)


def cosh(x: float) -> float:
    """Hyperbolic cosine."""
    try:
        return math.cosh(x)
    except OverflowError:
        return math.inf


def decbin(x: int) -> str:
    """Integer to binary text."""
    return _to_base(x, 2)


def dechex(x: int) -> str:
    """Integer to lower-case hexadecimal text."""
    return _to_base(x, 16)


def decoct(x: int) -> str:
    """Integer to octal text."""
    return _to_base(x, 8)


def exp(x: float) -> float:
    """``e`` raised to ``x``."""
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def expm1(x: float) -> float:
    """``exp(x) - 1``."""
    return exp(x) - 1


def floor(x: float) -> float:
    """Round down to the previous whole number."""
    if not math.isfinite(x):
        return x
    return math.copysign(float(math.floor(x)), x)


def is_finite(value: float, sign: int = 0) -> bool:
    """True unless ``value`` is infinite with the given sign.

    ``sign`` > 0 tests for +inf, < 0 for -inf and 0 for either.
    """
    return not _is_inf(value, sign)


def is_infinite(value: float, sign: int = 0) -> bool:
    """True if ``value`` is infinite with the given sign, as in :func:`is_finite`."""
    return _is_inf(value, sign)


def is_nan(value: float) -> bool:
    """True if ``value`` is NaN."""
    return math.isnan(value)


def log(x: float) -> float:
    """Natural logarithm; -inf at 0 and NaN below."""
    return _logarithm(math.log, x, 0.0)


def log10(x: float) -> float:
    """Base-10 logarithm; -inf at 0 and NaN below."""
    return _logarithm(math.log10, x, 0.0)


def log1p(x: float) -> float:
    """``log(1 + x)``; -inf at -1 and NaN below."""
    return _logarithm(math.log1p, x, -1.0)


def max_(x: float, y: float) -> float:
    """Larger of two numbers; +inf wins over NaN, NaN over everything else."""
    if x == math.inf or y == math.inf:
        return math.inf
    if math.isnan(x) or math.isnan(y):
        return math.nan
    if x == 0 and y == 0:
        return y if math.copysign(1.0, x) < 0 else x
    return x if x > y else y


def min_(x: float, y: float) -> float:
    """Smaller of two numbers; -inf wins over NaN, NaN over everything else."""
    if x == -math.inf or y == -math.inf:
        return -math.inf
    if math.isnan(x) or math.isnan(y):
        return math.nan
    if x == 0 and y == 0:
        return x if math.copysign(1.0, x) < 0 else y
    return x if x < y else y


def pi() -> float:
    """The constant pi."""
    return math.pi


def pow_(x: float, y: float) -> float:
    """``x`` raised to ``y``, giving inf or NaN instead of raising."""
    try:
        return math.pow(x, y)
    except ValueError:
        if x == 0:
            return math.copysign(math.inf, x) if _is_odd_int(y) else math.inf
        return math.nan
    except OverflowError:
        return -math.inf if x < 0 and _is_odd_int(y) else math.inf


def rand(*args: int) -> int:
    """Random integer.

    With one argument ``n`` >= 1 the result lies in 0..n; with ``lo < hi``
    it lies in lo..hi; otherwise it is any non-negative 63-bit integer.
    """
    if len(args) == 1 and args[0] >= 1:
        return _random.randint(0, args[0])
    if len(args) >= 2 and args[0] < args[1]:
        return _random.randint(args[0], args[1])
    return _random.getrandbits(63)


def round_(x: float) -> float:
    """Round to the nearest whole number, halves away from zero."""
    if not math.isfinite(x):
        return x
    whole = math.trunc(x)
    if abs(x - whole) >= 0.5:
        whole += 1 if x > 0 else -1
    return math.copysign(float(whole), x)


def sin(x: float) -> float:
    """Sine; NaN for infinite input."""
    return _nan_on_domain_error(math.sin, x)


def sinh(x: float) -> float:
    """Hyperbolic sine."""
    try:
        return math.sinh(x)
    except OverflowError:
        return math.copysign(math.inf, x)


def sqrt(x: float) -> float:
    """Square root; NaN for negative input."""
    if x < 0:
        return math.nan
    return math.sqrt(x)


def tan(x: float) -> float:
    """Tangent; NaN for infinite input."""
    return _nan_on_domain_error(math.tan, x)


def tanh(x: float) -> float:
    """Hyperbolic tangent."""
    return math.tanh(x)