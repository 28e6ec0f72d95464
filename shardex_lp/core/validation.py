"""
Pre-flight checks for deposit and withdrawal requests.

Checks never raise on bad user input: every problem is returned as a
`ValidationIssue` so a form can show all of them at once. Ratios and
percentages are compared by integer cross-multiplication.
"""

from __future__ import annotations

from typing import List, Sequence

from ..errors import ValidationFailed
from ..kernels.python.int_math import Rounding, ceiling_divide, mul_div
from .config import BPS_DENOM, DEFAULT_POLICY, LpPolicy
from .types import ValidationIssue, ValidationIssueKind


def validate_deposit(
    amount_a: int,
    amount_b: int,
    reserve_a: int,
    reserve_b: int,
    balance_a: int,
    balance_b: int,
    *,
    policy: LpPolicy = DEFAULT_POLICY,
) -> List[ValidationIssue]:
    """
    Check a two-sided deposit against the user's balances and the pool ratio.

    Ratio check (skipped for an empty pool):
        |amount_a * reserve_b - amount_b * reserve_a| * 10000
            <= ratio_tolerance_bps * amount_b * reserve_a
    """
    issues: List[ValidationIssue] = []

    for field, amount, balance, label in (
        ("amount_a", amount_a, balance_a, "Token A"),
        ("amount_b", amount_b, balance_b, "Token B"),
    ):
        if amount <= 0:
            issues.append(
                ValidationIssue(
                    kind=ValidationIssueKind.NON_POSITIVE_AMOUNT,
                    field=field,
                    value=amount,
                    message=f"{label} amount must be greater than 0",
                )
            )
        elif amount > balance:
            issues.append(
                ValidationIssue(
                    kind=ValidationIssueKind.INSUFFICIENT_BALANCE,
                    field=field,
                    value=amount,
                    message=f"Insufficient {label} balance: {amount} > {balance}",
                )
            )

    if reserve_a > 0 and reserve_b > 0 and amount_a > 0 and amount_b > 0:
        actual = amount_a * reserve_b
        expected = amount_b * reserve_a
        deviation = abs(actual - expected) * BPS_DENOM
        if deviation > policy.ratio_tolerance_bps * expected:
            issues.append(
                ValidationIssue(
                    kind=ValidationIssueKind.RATIO_MISMATCH,
                    field="amount_b",
                    value=ceiling_divide(deviation, expected),
                    message=(
                        "Amount ratio does not match pool ratio "
                        f"(off by more than {policy.ratio_tolerance_bps} bps). Please adjust your amounts."
                    ),
                )
            )

        if policy.min_deposit_bps > 0 and (
            amount_a * BPS_DENOM < reserve_a * policy.min_deposit_bps
            or amount_b * BPS_DENOM < reserve_b * policy.min_deposit_bps
        ):
            min_a = mul_div(reserve_a, policy.min_deposit_bps, BPS_DENOM, Rounding.CEILING)
            min_b = mul_div(reserve_b, policy.min_deposit_bps, BPS_DENOM, Rounding.CEILING)
            issues.append(
                ValidationIssue(
                    kind=ValidationIssueKind.DEPOSIT_TOO_SMALL,
                    field="amount_a",
                    value=amount_a,
                    message=(
                        f"Deposit amount too small. Minimum deposit: {min_a} A + {min_b} B "
                        f"({policy.min_deposit_bps} bps of pool)"
                    ),
                )
            )

    return issues


def validate_withdrawal(lp_token_amount: int, lp_balance: int) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    if lp_token_amount <= 0:
        issues.append(
            ValidationIssue(
                kind=ValidationIssueKind.NON_POSITIVE_AMOUNT,
                field="lp_token_amount",
                value=lp_token_amount,
                message="LP token amount must be greater than 0",
            )
        )
    elif lp_token_amount > lp_balance:
        issues.append(
            ValidationIssue(
                kind=ValidationIssueKind.INSUFFICIENT_BALANCE,
                field="lp_token_amount",
                value=lp_token_amount,
                message=f"Insufficient LP token balance: {lp_token_amount} > {lp_balance}",
            )
        )
    return issues


def validate_slippage_tolerance(tolerance_bps: int, *, policy: LpPolicy = DEFAULT_POLICY) -> List[ValidationIssue]:
    if policy.min_slippage_bps <= tolerance_bps <= policy.max_slippage_bps:
        return []
    return [
        ValidationIssue(
            kind=ValidationIssueKind.TOLERANCE_OUT_OF_RANGE,
            field="slippage_bps",
            value=tolerance_bps,
            message=(
                f"Slippage tolerance must be between {policy.min_slippage_bps} "
                f"and {policy.max_slippage_bps} bps"
            ),
        )
    ]


def compute_pool_share(user_lp: int, total_lp_after_deposit: int) -> int:
    """User's share of the pool in bps (2 implied decimals of a percent), floor-rounded."""
    if total_lp_after_deposit == 0:
        return 0
    if user_lp > total_lp_after_deposit:
        raise ValueError(f"user LP exceeds total supply: {user_lp} > {total_lp_after_deposit}")
    return mul_div(user_lp, BPS_DENOM, total_lp_after_deposit, Rounding.FLOOR)


def compute_price_impact_bps(amount_a: int, amount_b: int, reserve_a: int, reserve_b: int) -> int:
    """
    Relative change of the reserve_a/reserve_b price caused by a deposit, in bps.

    Rounded up so the displayed impact is never understated. An empty pool has
    no price yet and reports 0.
    """
    if reserve_a == 0 or reserve_b == 0:
        return 0
    new_a = reserve_a + amount_a
    new_b = reserve_b + amount_b
    diff = abs(new_a * reserve_b - reserve_a * new_b)
    return ceiling_divide(diff * BPS_DENOM, reserve_a * new_b)


def require_valid(issues: Sequence[ValidationIssue]) -> None:
    if issues:
        raise ValidationFailed(issues)
