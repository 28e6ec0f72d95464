"""
Policy, validation and quote assembly on top of the LP kernels.
"""

from .config import DEFAULT_POLICY, LpPolicy, load_policy
from .liquidity import (
    prepare_deposit,
    prepare_withdrawal,
    quote_deposit,
    quote_paired_amount,
    quote_single_token_deposit,
    quote_withdrawal,
)
from .slippage import apply_deposit_slippage, apply_lp_slippage, apply_withdrawal_slippage
from .types import (
    ZERO_FEE,
    DepositQuote,
    SingleDepositQuote,
    ValidationIssue,
    ValidationIssueKind,
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

__all__ = [
    "DEFAULT_POLICY",
    "LpPolicy",
    "load_policy",
    "prepare_deposit",
    "prepare_withdrawal",
    "quote_deposit",
    "quote_paired_amount",
    "quote_single_token_deposit",
    "quote_withdrawal",
    "apply_deposit_slippage",
    "apply_lp_slippage",
    "apply_withdrawal_slippage",
    "ZERO_FEE",
    "DepositQuote",
    "SingleDepositQuote",
    "ValidationIssue",
    "ValidationIssueKind",
    "WithdrawalFee",
    "WithdrawalQuote",
    "compute_pool_share",
    "compute_price_impact_bps",
    "require_valid",
    "validate_deposit",
    "validate_slippage_tolerance",
    "validate_withdrawal",
]
