"""Exception types for the LP calculation engine.

Arithmetic and structural failures are raised immediately by the kernels.
Validation problems are collected as ``ValidationIssue`` values and only turned
into ``ValidationFailed`` by callers that prefer exceptions.
"""

from __future__ import annotations

from enum import Enum, unique
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from .core.types import ValidationIssue


@unique
class ErrorKind(Enum):
    DIVISION_BY_ZERO = "DivisionByZero"
    AMOUNT_OVERFLOW = "AmountOverflow"
    ZERO_RESERVES = "ZeroReserves"
    ZERO_LP_SUPPLY = "ZeroLpSupply"
    ZERO_LP_TOKENS = "ZeroLpTokens"
    ZERO_SOURCE_RESERVE = "ZeroSourceReserve"
    INVALID_INITIAL_DEPOSIT = "InvalidInitialDeposit"
    INSUFFICIENT_LIQUIDITY = "InsufficientLiquidity"
    TOLERANCE_OUT_OF_RANGE = "ToleranceOutOfRange"
    VALIDATION_FAILED = "ValidationFailed"


class LpMathError(ValueError):
    """Base class; ``kind`` identifies the failure without string matching."""

    kind: ErrorKind


class DivisionByZeroError(LpMathError, ZeroDivisionError):
    kind = ErrorKind.DIVISION_BY_ZERO


class AmountOverflowError(LpMathError):
    """Raised when a returned amount does not fit in an unsigned 64-bit integer."""

    kind = ErrorKind.AMOUNT_OVERFLOW

    def __init__(self, name: str, value: int) -> None:
        self.name = name
        self.value = value
        super().__init__(f"{name} exceeds u64 range: {value}")


class ZeroReservesError(LpMathError):
    kind = ErrorKind.ZERO_RESERVES


class ZeroLpSupplyError(LpMathError):
    kind = ErrorKind.ZERO_LP_SUPPLY


class ZeroLpTokensError(LpMathError):
    kind = ErrorKind.ZERO_LP_TOKENS


class ZeroSourceReserveError(LpMathError):
    kind = ErrorKind.ZERO_SOURCE_RESERVE


class InvalidInitialDepositError(LpMathError):
    kind = ErrorKind.INVALID_INITIAL_DEPOSIT


class InsufficientLiquidityError(LpMathError):
    kind = ErrorKind.INSUFFICIENT_LIQUIDITY


class ToleranceOutOfRangeError(LpMathError):
    kind = ErrorKind.TOLERANCE_OUT_OF_RANGE

    def __init__(self, tolerance_bps: int, lo: int, hi: int) -> None:
        self.tolerance_bps = tolerance_bps
        self.lo = lo
        self.hi = hi
        super().__init__(f"slippage tolerance must be in [{lo}, {hi}] bps: {tolerance_bps}")


class ValidationFailed(LpMathError):
    """Raised by ``require_valid()`` with every collected issue attached."""

    kind = ErrorKind.VALIDATION_FAILED

    def __init__(self, issues: Sequence["ValidationIssue"]) -> None:
        self.issues = list(issues)
        super().__init__(f"validation failed: {'; '.join(i.message for i in self.issues)}")
