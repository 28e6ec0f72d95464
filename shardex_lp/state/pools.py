"""
Pool snapshot for LP quotes.

A snapshot is the caller's freshly-read view of one pool shard: two reserves
and the LP mint supply. It is immutable; state transitions return new
snapshots.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, unique
from typing import Tuple


Amount = int  # Non-negative integer in raw token units (arbitrary precision)


@unique
class Side(Enum):
    A = "a"
    B = "b"

    @property
    def other(self) -> "Side":
        return Side.B if self is Side.A else Side.A


@dataclass(frozen=True)
class PoolSnapshot:
    reserve_a: Amount
    reserve_b: Amount
    lp_supply: Amount
    pool_id: str = ""

    def __post_init__(self) -> None:
        for name, v in (
            ("reserve_a", self.reserve_a),
            ("reserve_b", self.reserve_b),
            ("lp_supply", self.lp_supply),
        ):
            if not isinstance(v, int) or isinstance(v, bool):
                raise TypeError(f"{name} must be an int")
            if v < 0:
                raise ValueError(f"{name} must be non-negative: {v}")
        if not isinstance(self.pool_id, str):
            raise TypeError("pool_id must be a string")

    @property
    def is_empty(self) -> bool:
        """True until the pool has received its first deposit."""
        return self.lp_supply == 0

    def reserve(self, side: Side) -> Amount:
        return self.reserve_a if side is Side.A else self.reserve_b

    def reserves_for(self, side: Side) -> Tuple[Amount, Amount]:
        """(reserve of `side`, reserve of the other side)."""
        return self.reserve(side), self.reserve(side.other)

    def after_deposit(self, amount_a: Amount, amount_b: Amount, lp_minted: Amount) -> "PoolSnapshot":
        return replace(
            self,
            reserve_a=self.reserve_a + amount_a,
            reserve_b=self.reserve_b + amount_b,
            lp_supply=self.lp_supply + lp_minted,
        )

    def after_withdrawal(self, amount_a: Amount, amount_b: Amount, lp_burned: Amount) -> "PoolSnapshot":
        if amount_a > self.reserve_a or amount_b > self.reserve_b:
            raise ValueError(
                f"withdrawal ({amount_a}, {amount_b}) exceeds reserves ({self.reserve_a}, {self.reserve_b})"
            )
        if lp_burned > self.lp_supply:
            raise ValueError(f"Cannot burn more LP than supply: {lp_burned} > {self.lp_supply}")
        return replace(
            self,
            reserve_a=self.reserve_a - amount_a,
            reserve_b=self.reserve_b - amount_b,
            lp_supply=self.lp_supply - lp_burned,
        )
