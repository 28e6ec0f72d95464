"""Property tests for the LP kernels and slippage bounds.

Uses Hypothesis over bounded domains chosen so every intermediate result stays
inside the u64 range.
"""

from __future__ import annotations

import importlib.util

import pytest

if importlib.util.find_spec("hypothesis") is None:  # pragma: no cover
    pytest.skip("hypothesis not installed", allow_module_level=True)

import hypothesis.strategies as st
from hypothesis import given, settings

from shardex_lp.core.slippage import apply_deposit_slippage, apply_withdrawal_slippage
from shardex_lp.errors import ZeroLpTokensError
from shardex_lp.kernels.python.int_math import Rounding, ceiling_divide, floor_divide, integer_sqrt
from shardex_lp.kernels.python.lp_math_v1 import (
    INITIAL_POOL_LP_AMOUNT,
    compute_deposit_lp_tokens,
    compute_required_tokens_for_lp,
    compute_single_token_deposit,
    compute_withdrawal_amounts,
)

AMOUNT = st.integers(min_value=1, max_value=10**9)
BIG = st.integers(min_value=0, max_value=10**40)
TOLERANCE = st.integers(min_value=10, max_value=500)


@given(n=BIG, d=st.integers(min_value=1, max_value=10**20))
def test_ceiling_at_least_floor(n: int, d: int) -> None:
    c = ceiling_divide(n, d)
    f = floor_divide(n, d)
    assert c >= f
    assert (c == f) == (n % d == 0)
    assert c - f <= 1


@given(d=st.integers(min_value=1, max_value=10**40))
def test_ceiling_of_zero_is_zero(d: int) -> None:
    assert ceiling_divide(0, d) == 0


@given(a=AMOUNT, b=AMOUNT, ra=BIG, rb=BIG)
def test_initial_deposit_is_constant(a: int, b: int, ra: int, rb: int) -> None:
    assert compute_deposit_lp_tokens(a, b, ra, rb, 0) == INITIAL_POOL_LP_AMOUNT


@given(a=AMOUNT, b=AMOUNT, ra=AMOUNT, rb=AMOUNT, s=AMOUNT)
def test_deposit_never_exceeds_either_estimate(a: int, b: int, ra: int, rb: int, s: int) -> None:
    try:
        lp = compute_deposit_lp_tokens(a, b, ra, rb, s)
    except ZeroLpTokensError:
        assert min(floor_divide(a * s, ra), floor_divide(b * s, rb)) == 0
        return
    assert lp <= floor_divide(a * s, ra)
    assert lp <= floor_divide(b * s, rb)


@settings(max_examples=300)
@given(a=AMOUNT, b=AMOUNT, ra=AMOUNT, rb=AMOUNT, s=AMOUNT)
def test_deposit_then_withdraw_returns_at_most_what_was_paid(a: int, b: int, ra: int, rb: int, s: int) -> None:
    try:
        lp = compute_deposit_lp_tokens(a, b, ra, rb, s)
    except ZeroLpTokensError:
        return
    paid_a, paid_b = compute_required_tokens_for_lp(lp, s, ra, rb, Rounding.CEILING)
    assert paid_a <= a and paid_b <= b

    out = compute_withdrawal_amounts(lp, s + lp, ra + paid_a, rb + paid_b, 0, 1)
    assert out.token_a <= paid_a
    assert out.token_b <= paid_b


@given(lp_raw=AMOUNT, s=AMOUNT, ra=AMOUNT, rb=AMOUNT, fee_num=st.integers(0, 100))
def test_withdrawal_never_exceeds_reserves(lp_raw: int, s: int, ra: int, rb: int, fee_num: int) -> None:
    lp = 1 + (lp_raw - 1) % s
    out = compute_withdrawal_amounts(lp, s, ra, rb, fee_num, 100)
    assert out.token_a <= ra and out.token_b <= rb
    assert out.fee_lp + out.effective_lp == lp


@given(a=AMOUNT, r=AMOUNT, s=AMOUNT)
def test_single_token_deposit_is_floor_of_exact_root(a: int, r: int, s: int) -> None:
    try:
        lp = compute_single_token_deposit(a, r, s)
    except ZeroLpTokensError:
        assert integer_sqrt(s * s * (r + a) // r) <= s
        return
    # (s + lp)^2 <= s^2 * (r + a) / r < (s + lp + 1)^2
    assert (s + lp) ** 2 * r <= s * s * (r + a)
    assert s * s * (r + a) < (s + lp + 1) ** 2 * r


@given(x=st.integers(0, 10**15), y=st.integers(0, 10**15), t1=TOLERANCE, t2=TOLERANCE)
def test_slippage_bounds_are_monotonic(x: int, y: int, t1: int, t2: int) -> None:
    lo, hi = min(t1, t2), max(t1, t2)
    max_lo = apply_deposit_slippage(x, y, lo)
    max_hi = apply_deposit_slippage(x, y, hi)
    assert max_lo[0] <= max_hi[0] and max_lo[1] <= max_hi[1]
    assert max_lo[0] >= x and max_lo[1] >= y

    min_lo = apply_withdrawal_slippage(x, y, lo)
    min_hi = apply_withdrawal_slippage(x, y, hi)
    assert min_lo[0] >= min_hi[0] and min_lo[1] >= min_hi[1]
    assert min_lo[0] <= x and min_lo[1] <= y
