"""`shardex_lp`: integer-only LP token math for a sharded constant-product DEX.

Stateless: import the functions and pass pool snapshots and policies explicitly.

Public API:
- kernels: `compute_deposit_lp_tokens`, `compute_required_tokens_for_lp`,
  `compute_withdrawal_amounts`, `compute_single_token_deposit`
- slippage: `apply_deposit_slippage`, `apply_withdrawal_slippage`
- validation: `validate_deposit`, `validate_withdrawal`, `compute_pool_share`
- quotes: `quote_deposit`, `quote_withdrawal`, `prepare_deposit`, `prepare_withdrawal`
"""

from .errors import (
    AmountOverflowError,
    DivisionByZeroError,
    ErrorKind,
    InsufficientLiquidityError,
    InvalidInitialDepositError,
    LpMathError,
    ToleranceOutOfRangeError,
    ValidationFailed,
    ZeroLpSupplyError,
    ZeroLpTokensError,
    ZeroReservesError,
    ZeroSourceReserveError,
)
from .kernels.python.int_math import U64_MAX, Rounding, ceiling_divide, floor_divide
from .kernels.python.lp_math_v1 import (
    INITIAL_POOL_LP_AMOUNT,
    TokenAmounts,
    WithdrawalAmounts,
    compute_deposit_lp_tokens,
    compute_paired_amount,
    compute_required_tokens_for_lp,
    compute_single_token_deposit,
    compute_withdrawal_amounts,
)
from .state.pools import PoolSnapshot, Side
from .core import (
    DEFAULT_POLICY,
    ZERO_FEE,
    DepositQuote,
    LpPolicy,
    SingleDepositQuote,
    ValidationIssue,
    ValidationIssueKind,
    WithdrawalFee,
    WithdrawalQuote,
    apply_deposit_slippage,
    apply_lp_slippage,
    apply_withdrawal_slippage,
    compute_pool_share,
    compute_price_impact_bps,
    load_policy,
    prepare_deposit,
    prepare_withdrawal,
    quote_deposit,
    quote_paired_amount,
    quote_single_token_deposit,
    quote_withdrawal,
    require_valid,
    validate_deposit,
    validate_slippage_tolerance,
    validate_withdrawal,
)

__version__ = "0.1.0"

__all__ = [
    "AmountOverflowError",
    "DivisionByZeroError",
    "ErrorKind",
    "InsufficientLiquidityError",
    "InvalidInitialDepositError",
    "LpMathError",
    "ToleranceOutOfRangeError",
    "ValidationFailed",
    "ZeroLpSupplyError",
    "ZeroLpTokensError",
    "ZeroReservesError",
    "ZeroSourceReserveError",
    "U64_MAX",
    "Rounding",
    "ceiling_divide",
    "floor_divide",
    "INITIAL_POOL_LP_AMOUNT",
    "TokenAmounts",
    "WithdrawalAmounts",
    "compute_deposit_lp_tokens",
    "compute_paired_amount",
    "compute_required_tokens_for_lp",
    "compute_single_token_deposit",
    "compute_withdrawal_amounts",
    "PoolSnapshot",
    "Side",
    "DEFAULT_POLICY",
    "ZERO_FEE",
    "DepositQuote",
    "LpPolicy",
    "SingleDepositQuote",
    "ValidationIssue",
    "ValidationIssueKind",
    "WithdrawalFee",
    "WithdrawalQuote",
    "apply_deposit_slippage",
    "apply_lp_slippage",
    "apply_withdrawal_slippage",
    "compute_pool_share",
    "compute_price_impact_bps",
    "load_policy",
    "prepare_deposit",
    "prepare_withdrawal",
    "quote_deposit",
    "quote_paired_amount",
    "quote_single_token_deposit",
    "quote_withdrawal",
    "require_valid",
    "validate_deposit",
    "validate_slippage_tolerance",
    "validate_withdrawal",
]
