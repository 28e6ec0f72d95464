"""
Liquidity math kernel (v1 semantics).

Mirrors the integer rounding of the on-chain constant-product pool program so
that client-built deposit/withdraw instructions are not rejected for being off
by one unit.

Rules:
- `lp_supply == 0` is the only trigger for the initial-deposit branch.
- LP tokens and withdrawn tokens round down; tokens required from a depositor
  round up (the rounding direction is always passed explicitly).
- Products are formed before any division.
- Every returned amount is checked against the u64 range.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

from ...errors import (
    DivisionByZeroError,
    InsufficientLiquidityError,
    InvalidInitialDepositError,
    ZeroLpSupplyError,
    ZeroLpTokensError,
    ZeroReservesError,
    ZeroSourceReserveError,
)
from .int_math import (
    Rounding,
    _require_int,
    _require_non_negative,
    check_amount,
    floor_divide,
    integer_sqrt,
    mul_div,
)


INITIAL_POOL_LP_AMOUNT = 1_000_000_000


class TokenAmounts(NamedTuple):
    token_a: int
    token_b: int


@dataclass(frozen=True)
class WithdrawalAmounts:
    token_a: int
    token_b: int
    fee_lp: int
    effective_lp: int


def compute_deposit_lp_tokens(
    amount_a: int,
    amount_b: int,
    reserve_a: int,
    reserve_b: int,
    lp_supply: int,
) -> int:
    """
    LP tokens minted for a two-sided deposit.

    Initial deposit (lp_supply == 0):
        lp = INITIAL_POOL_LP_AMOUNT   (any positive ratio is accepted)

    Subsequent deposits:
        lp = min(floor(amount_a * lp_supply / reserve_a),
                 floor(amount_b * lp_supply / reserve_b))
    """
    for name, v in (
        ("amount_a", amount_a),
        ("amount_b", amount_b),
        ("reserve_a", reserve_a),
        ("reserve_b", reserve_b),
        ("lp_supply", lp_supply),
    ):
        _require_int(name, v)
    for name, v in (("reserve_a", reserve_a), ("reserve_b", reserve_b), ("lp_supply", lp_supply)):
        _require_non_negative(name, v)

    if lp_supply == 0:
        if amount_a <= 0 or amount_b <= 0:
            raise InvalidInitialDepositError(
                f"initial deposit amounts must be positive: ({amount_a}, {amount_b})"
            )
        return INITIAL_POOL_LP_AMOUNT

    if amount_a < 0 or amount_b < 0:
        raise ValueError(f"deposit amounts must be non-negative: ({amount_a}, {amount_b})")
    if reserve_a == 0 or reserve_b == 0:
        raise ZeroReservesError(
            f"pool has lp_supply={lp_supply} but zero reserves: ({reserve_a}, {reserve_b})"
        )

    lp_from_a = mul_div(amount_a, lp_supply, reserve_a, Rounding.FLOOR)
    lp_from_b = mul_div(amount_b, lp_supply, reserve_b, Rounding.FLOOR)
    lp = min(lp_from_a, lp_from_b)
    if lp == 0:
        raise ZeroLpTokensError(
            f"deposit too small to mint LP: ({amount_a}, {amount_b}) against reserves ({reserve_a}, {reserve_b})"
        )
    return check_amount("lp_tokens", lp)


def compute_required_tokens_for_lp(
    lp_token_amount: int,
    lp_supply: int,
    reserve_a: int,
    reserve_b: int,
    rounding: Rounding,
) -> TokenAmounts:
    """
    Token amounts backing `lp_token_amount` LP tokens.

        token_x = rounding(lp_token_amount * reserve_x / lp_supply)

    Use CEILING when pricing a deposit and FLOOR when pricing a withdrawal.
    """
    if not isinstance(rounding, Rounding):
        raise TypeError("rounding must be a Rounding")
    for name, v in (
        ("lp_token_amount", lp_token_amount),
        ("lp_supply", lp_supply),
        ("reserve_a", reserve_a),
        ("reserve_b", reserve_b),
    ):
        _require_non_negative(name, v)
    if lp_supply == 0:
        raise ZeroLpSupplyError("cannot price LP tokens against an empty pool (lp_supply == 0)")

    token_a = mul_div(lp_token_amount, reserve_a, lp_supply, rounding)
    token_b = mul_div(lp_token_amount, reserve_b, lp_supply, rounding)
    return TokenAmounts(
        token_a=check_amount("token_a", token_a),
        token_b=check_amount("token_b", token_b),
    )


def compute_withdrawal_amounts(
    lp_token_amount: int,
    lp_supply: int,
    reserve_a: int,
    reserve_b: int,
    fee_numerator: int,
    fee_denominator: int,
) -> WithdrawalAmounts:
    """
    Tokens returned for burning `lp_token_amount`, after the withdrawal fee.

        fee          = floor(lp_token_amount * fee_numerator / fee_denominator)
        effective_lp = lp_token_amount - fee
        token_x      = floor(effective_lp * reserve_x / lp_supply)
    """
    _require_non_negative("fee_numerator", fee_numerator)
    _require_non_negative("fee_denominator", fee_denominator)
    _require_non_negative("lp_token_amount", lp_token_amount)
    if fee_denominator == 0:
        raise DivisionByZeroError("withdrawal fee denominator is zero")
    if fee_numerator > fee_denominator:
        raise ValueError(f"withdrawal fee exceeds 100%: {fee_numerator}/{fee_denominator}")

    fee = mul_div(lp_token_amount, fee_numerator, fee_denominator, Rounding.FLOOR)
    effective_lp = lp_token_amount - fee

    amounts = compute_required_tokens_for_lp(effective_lp, lp_supply, reserve_a, reserve_b, Rounding.FLOOR)
    if amounts.token_a > reserve_a or amounts.token_b > reserve_b:
        raise InsufficientLiquidityError(
            f"withdrawal ({amounts.token_a}, {amounts.token_b}) exceeds reserves ({reserve_a}, {reserve_b})"
        )
    return WithdrawalAmounts(
        token_a=amounts.token_a,
        token_b=amounts.token_b,
        fee_lp=check_amount("fee_lp", fee),
        effective_lp=check_amount("effective_lp", effective_lp),
    )


def compute_single_token_deposit(source_amount: int, source_reserve: int, lp_supply: int) -> int:
    """
    LP tokens minted for a one-sided deposit (Balancer-style).

        lp = floor(lp_supply * (sqrt(1 + source_amount / source_reserve) - 1))

    Evaluated exactly in integers:

        lp = isqrt(floor(lp_supply^2 * (source_reserve + source_amount) / source_reserve)) - lp_supply

    floor(sqrt(floor(y))) == floor(sqrt(y)) for y >= 0, so no precision is lost.
    """
    for name, v in (
        ("source_amount", source_amount),
        ("source_reserve", source_reserve),
        ("lp_supply", lp_supply),
    ):
        _require_non_negative(name, v)
    if source_reserve == 0:
        raise ZeroSourceReserveError("source reserve is zero")
    if lp_supply == 0:
        raise ZeroLpSupplyError("single-token deposit requires an existing pool (lp_supply == 0)")

    scaled = floor_divide(lp_supply * lp_supply * (source_reserve + source_amount), source_reserve)
    lp = integer_sqrt(scaled) - lp_supply
    if lp <= 0:
        raise ZeroLpTokensError(
            f"single-token deposit too small to mint LP: {source_amount} against reserve {source_reserve}"
        )
    return check_amount("lp_tokens", lp)


def compute_paired_amount(amount: int, reserve_in: int, reserve_out: int, rounding: Rounding) -> int:
    """
    Counterpart amount that keeps a deposit at the pool ratio.

        paired = rounding(amount * reserve_out / reserve_in)
    """
    _require_non_negative("amount", amount)
    _require_non_negative("reserve_in", reserve_in)
    _require_non_negative("reserve_out", reserve_out)
    if reserve_in == 0 or reserve_out == 0:
        raise ZeroReservesError(f"pool ratio undefined for reserves ({reserve_in}, {reserve_out})")
    return check_amount("paired_amount", mul_div(amount, reserve_out, reserve_in, rounding))
