"""
Numeric coercion of dynamically typed values to canonical `float` and 64-bit `int`.
"""

import math
from typing import Any

from .types import Float, Int, TypeMismatch

__all__ = ["TypeMismatch", "double", "long", "plus_one"]

_INT64_MODULUS = 1 << 64
_INT64_MIN = -(1 << 63)


def _wrap_int64(n: int) -> int:
    return (n - _INT64_MIN) % _INT64_MODULUS + _INT64_MIN


def _int_to_float(n: int) -> float:
    try:
        return float(n)
    except OverflowError:
        raise TypeMismatch(n, "int within float range") from None


def _truncate(x: float) -> int:
    # NaN and infinities convert to the minimal int64, as a 64-bit truncating conversion does
    if not math.isfinite(x):
        return _INT64_MIN
    return _wrap_int64(int(x))


def double(x: Any) -> float:
    """Coerces an integer or floating point value to `float`.

    Integers beyond the range of `float` raise `TypeMismatch`.
    """
    match x:
        case bool():
            pass
        case int():
            return _int_to_float(x)
        case Int(value):
            return _int_to_float(value)
        case float():
            return x
        case Float(value):
            return value
    raise TypeMismatch(x, "int or float")


def long(x: Any) -> int:
    """Coerces an integer or floating point value to a signed 64-bit `int`.

    Floating point values are truncated toward zero, NaN and infinities become the
    minimal 64-bit integer.
    """
    match x:
        case bool():
            pass
        case int():
            return _wrap_int64(x)
        case Int(value):
            return _wrap_int64(value)
        case float():
            return _truncate(x)
        case Float(value):
            return _truncate(value)
    raise TypeMismatch(x, "int or float")


def plus_one(x: Any) -> float:
    return double(x) + 1
