"""Value objects for the quote and validation layer.

All types are frozen dataclasses constructed fresh per call.

Units/conventions:
- amounts are raw integer token units,
- `*_bps` values are basis points (1/10_000); a pool share of 1234 bps reads as 12.34%.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, unique
from typing import Optional


@unique
class ValidationIssueKind(Enum):
    NON_POSITIVE_AMOUNT = "NonPositiveAmount"
    INSUFFICIENT_BALANCE = "InsufficientBalance"
    RATIO_MISMATCH = "RatioMismatch"
    DEPOSIT_TOO_SMALL = "DepositTooSmall"
    TOLERANCE_OUT_OF_RANGE = "ToleranceOutOfRange"


@dataclass(frozen=True)
class ValidationIssue:
    """One problem with a user request, addressed to a form field."""

    kind: ValidationIssueKind
    field: str
    value: Optional[int]
    message: str


@dataclass(frozen=True)
class WithdrawalFee:
    """Fraction of burned LP withheld by the pool, e.g. 1/5 for 20%."""

    numerator: int = 0
    denominator: int = 1

    def __post_init__(self) -> None:
        for name, v in (("numerator", self.numerator), ("denominator", self.denominator)):
            if not isinstance(v, int) or isinstance(v, bool):
                raise TypeError(f"{name} must be an int")
        if self.denominator <= 0:
            raise ValueError(f"fee denominator must be positive: {self.denominator}")
        if not (0 <= self.numerator <= self.denominator):
            raise ValueError(f"fee numerator must be in [0, {self.denominator}]: {self.numerator}")


ZERO_FEE = WithdrawalFee()


@dataclass(frozen=True)
class DepositQuote:
    lp_tokens: int
    min_lp_tokens: int
    # Token amounts the pool program will pull for `lp_tokens` (ceiling-rounded).
    required_a: int
    required_b: int
    # Slippage-bounded maxima to embed in the deposit instruction.
    max_a: int
    max_b: int
    pool_share_bps: int
    price_impact_bps: int
    is_initial: bool


@dataclass(frozen=True)
class WithdrawalQuote:
    fee_lp: int
    effective_lp: int
    token_a: int
    token_b: int
    min_a: int
    min_b: int


@dataclass(frozen=True)
class SingleDepositQuote:
    lp_tokens: int
    min_lp_tokens: int
    pool_share_bps: int
