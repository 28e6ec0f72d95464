from __future__ import annotations

import pytest

from shardex_lp.core.config import LpPolicy
from shardex_lp.core.slippage import apply_deposit_slippage, apply_lp_slippage, apply_withdrawal_slippage
from shardex_lp.errors import AmountOverflowError, ErrorKind, ToleranceOutOfRangeError
from shardex_lp.kernels.python.int_math import U64_MAX


def test_deposit_slippage_raises_maxima() -> None:
    assert apply_deposit_slippage(10_000, 20_000, 50) == (10_050, 20_100)


def test_deposit_slippage_rounds_up() -> None:
    # 1 * 1.001 -> 2, never 1
    assert apply_deposit_slippage(1, 999, 10) == (2, 1000)


def test_withdrawal_slippage_rounds_down() -> None:
    # 999 * 0.999 = 998.001 -> 998
    assert apply_withdrawal_slippage(1, 999, 10) == (0, 998)
    assert apply_withdrawal_slippage(1600, 3200, 100) == (1584, 3168)


def test_zero_amounts_stay_zero() -> None:
    assert apply_deposit_slippage(0, 0, 50) == (0, 0)
    assert apply_withdrawal_slippage(0, 0, 50) == (0, 0)


def test_lp_slippage_minimum() -> None:
    assert apply_lp_slippage(5000, 100) == 4950


@pytest.mark.parametrize("tolerance", [0, 9, 501, 10_000])
def test_tolerance_outside_default_policy(tolerance: int) -> None:
    with pytest.raises(ToleranceOutOfRangeError) as exc_info:
        apply_deposit_slippage(100, 100, tolerance)
    assert exc_info.value.kind is ErrorKind.TOLERANCE_OUT_OF_RANGE
    assert (exc_info.value.lo, exc_info.value.hi) == (10, 500)


def test_tolerance_bounds_are_inclusive() -> None:
    assert apply_withdrawal_slippage(10_000, 10_000, 10) == (9990, 9990)
    assert apply_withdrawal_slippage(10_000, 10_000, 500) == (9500, 9500)


def test_custom_policy_widens_range() -> None:
    policy = LpPolicy(max_slippage_bps=1000)
    assert apply_deposit_slippage(10_000, 10_000, 1000, policy=policy) == (11_000, 11_000)
    with pytest.raises(ToleranceOutOfRangeError):
        apply_lp_slippage(10_000, 1001, policy=policy)


def test_tolerance_must_be_int() -> None:
    with pytest.raises(TypeError):
        apply_deposit_slippage(1, 1, 0.5)  # type: ignore[arg-type]


def test_deposit_maximum_is_u64_bounded() -> None:
    with pytest.raises(AmountOverflowError):
        apply_deposit_slippage(U64_MAX, 0, 10)
