"""
Slippage bounds for deposit and withdrawal instructions.

Basis-point arithmetic only. Maxima round up and minima round down, so a bound
is never tighter than the tolerance the user asked for.

    max_x = ceil(x * (10000 + t) / 10000)
    min_x = floor(x * (10000 - t) / 10000)
"""

from __future__ import annotations

from typing import Tuple

from ..errors import ToleranceOutOfRangeError
from ..kernels.python.int_math import Rounding, check_amount, mul_div
from .config import BPS_DENOM, DEFAULT_POLICY, LpPolicy


def check_tolerance(tolerance_bps: int, policy: LpPolicy = DEFAULT_POLICY) -> int:
    if not isinstance(tolerance_bps, int) or isinstance(tolerance_bps, bool):
        raise TypeError("tolerance_bps must be an int")
    if not (policy.min_slippage_bps <= tolerance_bps <= policy.max_slippage_bps):
        raise ToleranceOutOfRangeError(tolerance_bps, policy.min_slippage_bps, policy.max_slippage_bps)
    return tolerance_bps


def apply_deposit_slippage(
    required_a: int,
    required_b: int,
    tolerance_bps: int,
    *,
    policy: LpPolicy = DEFAULT_POLICY,
) -> Tuple[int, int]:
    """Maximum token amounts a deposit may pull."""
    t = check_tolerance(tolerance_bps, policy)
    max_a = mul_div(required_a, BPS_DENOM + t, BPS_DENOM, Rounding.CEILING)
    max_b = mul_div(required_b, BPS_DENOM + t, BPS_DENOM, Rounding.CEILING)
    return check_amount("max_a", max_a), check_amount("max_b", max_b)


def apply_withdrawal_slippage(
    expected_a: int,
    expected_b: int,
    tolerance_bps: int,
    *,
    policy: LpPolicy = DEFAULT_POLICY,
) -> Tuple[int, int]:
    """Minimum token amounts a withdrawal must return."""
    t = check_tolerance(tolerance_bps, policy)
    min_a = mul_div(expected_a, BPS_DENOM - t, BPS_DENOM, Rounding.FLOOR)
    min_b = mul_div(expected_b, BPS_DENOM - t, BPS_DENOM, Rounding.FLOOR)
    return check_amount("min_a", min_a), check_amount("min_b", min_b)


def apply_lp_slippage(expected_lp: int, tolerance_bps: int, *, policy: LpPolicy = DEFAULT_POLICY) -> int:
    """Minimum LP tokens a deposit must mint."""
    t = check_tolerance(tolerance_bps, policy)
    return check_amount("min_lp_tokens", mul_div(expected_lp, BPS_DENOM - t, BPS_DENOM, Rounding.FLOOR))
