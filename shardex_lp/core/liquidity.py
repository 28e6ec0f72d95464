"""
Liquidity quotes: deposit, withdrawal and single-token deposit.

Each quote reads only the `PoolSnapshot` it is given and returns the amounts to
show the user plus the slippage-bounded amounts to embed in the on-chain
instruction.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from ..kernels.python.int_math import Rounding
from ..kernels.python.lp_math_v1 import (
    compute_deposit_lp_tokens,
    compute_paired_amount,
    compute_required_tokens_for_lp,
    compute_single_token_deposit,
    compute_withdrawal_amounts,
)
from ..state.pools import Amount, PoolSnapshot, Side
from .config import DEFAULT_POLICY, LpPolicy
from .slippage import apply_deposit_slippage, apply_lp_slippage, apply_withdrawal_slippage
from .types import (
    ZERO_FEE,
    DepositQuote,
    SingleDepositQuote,
    ValidationIssue,
    WithdrawalFee,
    WithdrawalQuote,
)
from .validation import (
    compute_pool_share,
    compute_price_impact_bps,
    require_valid,
    validate_deposit,
    validate_slippage_tolerance,
    validate_withdrawal,
)

logger = logging.getLogger(__name__)


def _slippage(slippage_bps: Optional[int], policy: LpPolicy) -> int:
    return policy.default_slippage_bps if slippage_bps is None else slippage_bps


def quote_deposit(
    pool: PoolSnapshot,
    amount_a: Amount,
    amount_b: Amount,
    *,
    slippage_bps: Optional[int] = None,
    policy: LpPolicy = DEFAULT_POLICY,
) -> DepositQuote:
    """
    Quote a two-sided deposit.

    LP minted:
        initial:    INITIAL_POOL_LP_AMOUNT
        otherwise:  min(floor(amount_a * S / reserve_a), floor(amount_b * S / reserve_b))

    Tokens required for that LP are ceiling-rounded, so the pool program never
    needs more than the quoted maxima allow.

    Args:
        pool: Fresh pool snapshot
        amount_a: Desired amount of token A
        amount_b: Desired amount of token B
        slippage_bps: Tolerance in basis points (policy default when omitted)
        policy: Tolerance bounds

    Returns:
        DepositQuote

    Raises:
        LpMathError: If the deposit cannot be priced (see `shardex_lp.errors`)
    """
    slippage = _slippage(slippage_bps, policy)
    lp_tokens = compute_deposit_lp_tokens(amount_a, amount_b, pool.reserve_a, pool.reserve_b, pool.lp_supply)

    if pool.is_empty:
        required_a, required_b = amount_a, amount_b
    else:
        required_a, required_b = compute_required_tokens_for_lp(
            lp_tokens, pool.lp_supply, pool.reserve_a, pool.reserve_b, Rounding.CEILING
        )

    max_a, max_b = apply_deposit_slippage(required_a, required_b, slippage, policy=policy)
    quote = DepositQuote(
        lp_tokens=lp_tokens,
        min_lp_tokens=apply_lp_slippage(lp_tokens, slippage, policy=policy),
        required_a=required_a,
        required_b=required_b,
        max_a=max_a,
        max_b=max_b,
        pool_share_bps=compute_pool_share(lp_tokens, pool.lp_supply + lp_tokens),
        price_impact_bps=compute_price_impact_bps(required_a, required_b, pool.reserve_a, pool.reserve_b),
        is_initial=pool.is_empty,
    )
    logger.debug(
        "deposit quote pool=%s amounts=(%d, %d) lp=%d required=(%d, %d) max=(%d, %d)",
        pool.pool_id,
        amount_a,
        amount_b,
        quote.lp_tokens,
        quote.required_a,
        quote.required_b,
        quote.max_a,
        quote.max_b,
    )
    return quote


def quote_withdrawal(
    pool: PoolSnapshot,
    lp_token_amount: Amount,
    *,
    fee: WithdrawalFee = ZERO_FEE,
    slippage_bps: Optional[int] = None,
    policy: LpPolicy = DEFAULT_POLICY,
) -> WithdrawalQuote:
    """
    Quote an LP burn.

        fee_lp       = floor(lp * fee.numerator / fee.denominator)
        token_x      = floor((lp - fee_lp) * reserve_x / S)
        min_x        = floor(token_x * (10000 - slippage) / 10000)
    """
    slippage = _slippage(slippage_bps, policy)
    amounts = compute_withdrawal_amounts(
        lp_token_amount,
        pool.lp_supply,
        pool.reserve_a,
        pool.reserve_b,
        fee.numerator,
        fee.denominator,
    )
    min_a, min_b = apply_withdrawal_slippage(amounts.token_a, amounts.token_b, slippage, policy=policy)
    quote = WithdrawalQuote(
        fee_lp=amounts.fee_lp,
        effective_lp=amounts.effective_lp,
        token_a=amounts.token_a,
        token_b=amounts.token_b,
        min_a=min_a,
        min_b=min_b,
    )
    logger.debug(
        "withdrawal quote pool=%s lp=%d fee_lp=%d out=(%d, %d) min=(%d, %d)",
        pool.pool_id,
        lp_token_amount,
        quote.fee_lp,
        quote.token_a,
        quote.token_b,
        quote.min_a,
        quote.min_b,
    )
    return quote


def quote_single_token_deposit(
    pool: PoolSnapshot,
    source_amount: Amount,
    *,
    side: Side = Side.A,
    slippage_bps: Optional[int] = None,
    policy: LpPolicy = DEFAULT_POLICY,
) -> SingleDepositQuote:
    """Quote a one-sided deposit of token `side`."""
    slippage = _slippage(slippage_bps, policy)
    lp_tokens = compute_single_token_deposit(source_amount, pool.reserve(side), pool.lp_supply)
    quote = SingleDepositQuote(
        lp_tokens=lp_tokens,
        min_lp_tokens=apply_lp_slippage(lp_tokens, slippage, policy=policy),
        pool_share_bps=compute_pool_share(lp_tokens, pool.lp_supply + lp_tokens),
    )
    logger.debug(
        "single-token deposit quote pool=%s side=%s amount=%d lp=%d",
        pool.pool_id,
        side.value,
        source_amount,
        quote.lp_tokens,
    )
    return quote


def quote_paired_amount(pool: PoolSnapshot, amount: Amount, *, side: Side) -> Amount:
    """
    Amount of the other token that matches `amount` of token `side` at the pool ratio.

    Rounded up, so the side the user typed is the one that limits LP minting.
    """
    reserve_in, reserve_out = pool.reserves_for(side)
    return compute_paired_amount(amount, reserve_in, reserve_out, Rounding.CEILING)


def _reject(operation: str, pool: PoolSnapshot, issues: List[ValidationIssue]) -> None:
    if issues:
        logger.info(
            "%s rejected pool=%s issues=%s",
            operation,
            pool.pool_id,
            ", ".join(i.kind.value for i in issues),
        )
    require_valid(issues)


def prepare_deposit(
    pool: PoolSnapshot,
    amount_a: Amount,
    amount_b: Amount,
    balance_a: Amount,
    balance_b: Amount,
    *,
    slippage_bps: Optional[int] = None,
    policy: LpPolicy = DEFAULT_POLICY,
) -> DepositQuote:
    """
    Validate then quote a deposit.

    Raises:
        ValidationFailed: With every issue found, if any
    """
    slippage = _slippage(slippage_bps, policy)
    issues = validate_deposit(
        amount_a,
        amount_b,
        pool.reserve_a,
        pool.reserve_b,
        balance_a,
        balance_b,
        policy=policy,
    )
    issues.extend(validate_slippage_tolerance(slippage, policy=policy))
    _reject("deposit", pool, issues)
    return quote_deposit(pool, amount_a, amount_b, slippage_bps=slippage, policy=policy)


def prepare_withdrawal(
    pool: PoolSnapshot,
    lp_token_amount: Amount,
    lp_balance: Amount,
    *,
    fee: WithdrawalFee = ZERO_FEE,
    slippage_bps: Optional[int] = None,
    policy: LpPolicy = DEFAULT_POLICY,
) -> WithdrawalQuote:
    """
    Validate then quote a withdrawal.

    Raises:
        ValidationFailed: With every issue found, if any
    """
    slippage = _slippage(slippage_bps, policy)
    issues = validate_withdrawal(lp_token_amount, lp_balance)
    issues.extend(validate_slippage_tolerance(slippage, policy=policy))
    _reject("withdrawal", pool, issues)
    return quote_withdrawal(pool, lp_token_amount, fee=fee, slippage_bps=slippage, policy=policy)
