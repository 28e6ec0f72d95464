# [TESTER] v1

from __future__ import annotations

import pytest

from shardex_lp.errors import AmountOverflowError, DivisionByZeroError, ErrorKind
from shardex_lp.kernels.python.int_math import (
    U64_MAX,
    Rounding,
    ceiling_divide,
    check_amount,
    floor_divide,
    integer_sqrt,
    mul_div,
)


# ---------------------------------------------------------------------------
# floor / ceiling
# ---------------------------------------------------------------------------

class TestFloorDivide:
    def test_truncates(self):
        assert floor_divide(7, 2) == 3

    def test_exact(self):
        assert floor_divide(6, 2) == 3

    def test_zero_numerator(self):
        assert floor_divide(0, 5) == 0

    def test_division_by_zero(self):
        with pytest.raises(DivisionByZeroError) as exc_info:
            floor_divide(1, 0)
        assert exc_info.value.kind is ErrorKind.DIVISION_BY_ZERO

    def test_division_by_zero_is_a_zero_division_error(self):
        with pytest.raises(ZeroDivisionError):
            floor_divide(1, 0)

    def test_rejects_negative(self):
        with pytest.raises(ValueError, match="non-negative"):
            floor_divide(-1, 2)

    def test_rejects_bool(self):
        with pytest.raises(TypeError):
            floor_divide(True, 1)


class TestCeilingDivide:
    def test_rounds_up_on_remainder(self):
        assert ceiling_divide(7, 2) == 4

    def test_exact(self):
        assert ceiling_divide(6, 2) == 3

    def test_zero_numerator_stays_zero(self):
        assert ceiling_divide(0, 5) == 0
        assert ceiling_divide(0, 10**30) == 0

    def test_tiny_numerator_rounds_to_one(self):
        assert ceiling_divide(1, 10**30) == 1

    def test_division_by_zero(self):
        with pytest.raises(DivisionByZeroError):
            ceiling_divide(0, 0)


def test_rounding_enum_dispatches() -> None:
    assert Rounding.FLOOR.divide(5, 3) == 1
    assert Rounding.CEILING.divide(5, 3) == 2


def test_mul_div_multiplies_before_dividing() -> None:
    # Dividing first would give (3 // 2) * 3 == 3.
    assert mul_div(3, 3, 2, Rounding.FLOOR) == 4
    assert mul_div(3, 3, 2, Rounding.CEILING) == 5


def test_mul_div_requires_rounding_enum() -> None:
    with pytest.raises(TypeError, match="Rounding"):
        mul_div(1, 1, 1, "floor")  # type: ignore[arg-type]


def test_check_amount_u64_boundary() -> None:
    assert check_amount("x", U64_MAX) == 18_446_744_073_709_551_615
    with pytest.raises(AmountOverflowError) as exc_info:
        check_amount("x", U64_MAX + 1)
    assert exc_info.value.kind is ErrorKind.AMOUNT_OVERFLOW
    assert exc_info.value.value == U64_MAX + 1


def test_integer_sqrt_is_exact_for_big_ints() -> None:
    # Pick values where float sqrt would be wrong due to precision loss.
    n = (1 << 70) + 12345
    assert integer_sqrt(n * n) == n
    assert integer_sqrt(n * n - 1) == n - 1
    assert integer_sqrt(0) == 0
