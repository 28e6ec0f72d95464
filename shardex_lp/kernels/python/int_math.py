"""
Integer arithmetic primitives (deterministic, integer-only).

Every pool-math formula is expressed as multiply-then-divide with an explicit
rounding direction:

- FLOOR for amounts the pool pays out (LP minted, tokens withdrawn),
- CEILING for amounts the pool must receive (tokens required for a deposit).

Results handed back to callers are bounded to the on-chain u64 range.
"""

from __future__ import annotations

import math
from enum import Enum, unique

from ...errors import AmountOverflowError, DivisionByZeroError


U64_MAX = (1 << 64) - 1  # 18_446_744_073_709_551_615


def _require_int(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")


def _require_non_negative(name: str, value: int) -> None:
    _require_int(name, value)
    if value < 0:
        raise ValueError(f"{name} must be non-negative: {value}")


def floor_divide(numerator: int, denominator: int) -> int:
    """floor(numerator / denominator) for non-negative operands."""
    _require_non_negative("numerator", numerator)
    _require_non_negative("denominator", denominator)
    if denominator == 0:
        raise DivisionByZeroError(f"division by zero: {numerator} / 0")
    return numerator // denominator


def ceiling_divide(numerator: int, denominator: int) -> int:
    """
    ceil(numerator / denominator) for non-negative operands.

    A zero numerator stays zero: a zero deposit requires zero tokens, never one.
    """
    q = floor_divide(numerator, denominator)
    if numerator != 0 and numerator % denominator != 0:
        q += 1
    return q


@unique
class Rounding(Enum):
    FLOOR = "floor"
    CEILING = "ceiling"

    def divide(self, numerator: int, denominator: int) -> int:
        if self is Rounding.FLOOR:
            return floor_divide(numerator, denominator)
        return ceiling_divide(numerator, denominator)


def mul_div(a: int, b: int, denominator: int, rounding: Rounding) -> int:
    """(a * b) / denominator with the product taken at full precision."""
    _require_non_negative("a", a)
    _require_non_negative("b", b)
    if not isinstance(rounding, Rounding):
        raise TypeError("rounding must be a Rounding")
    return rounding.divide(a * b, denominator)


def check_amount(name: str, value: int) -> int:
    _require_int(name, value)
    if value > U64_MAX:
        raise AmountOverflowError(name, value)
    return value


def integer_sqrt(n: int) -> int:
    """floor(sqrt(n)) over arbitrary-precision ints."""
    _require_non_negative("n", n)
    return math.isqrt(n)
