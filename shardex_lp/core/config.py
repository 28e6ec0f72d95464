"""
LP policy configuration.

Policy is plain data passed explicitly to the functions that need it. It can be
built from defaults, from environment variables, or from a YAML file.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping, Union

import yaml


BPS_DENOM = 10_000

ENV_PREFIX = "SHARDEX_LP_"


@dataclass(frozen=True)
class LpPolicy:
    # Accepted slippage tolerance range (0.1% .. 5%).
    min_slippage_bps: int = 10
    max_slippage_bps: int = 500
    default_slippage_bps: int = 50
    # Allowed deviation of a two-sided deposit from the pool ratio.
    ratio_tolerance_bps: int = 500
    # Deposits below this share of the reserves are rejected as dust.
    min_deposit_bps: int = 1

    def __post_init__(self) -> None:
        for f in fields(self):
            v = getattr(self, f.name)
            if not isinstance(v, int) or isinstance(v, bool):
                raise TypeError(f"{f.name} must be an int")
            if not (0 <= v <= BPS_DENOM):
                raise ValueError(f"{f.name} must be in [0, {BPS_DENOM}]: {v}")
        if self.min_slippage_bps > self.max_slippage_bps:
            raise ValueError(
                f"min_slippage_bps ({self.min_slippage_bps}) > max_slippage_bps ({self.max_slippage_bps})"
            )
        if not (self.min_slippage_bps <= self.default_slippage_bps <= self.max_slippage_bps):
            raise ValueError(
                f"default_slippage_bps must be in [{self.min_slippage_bps}, {self.max_slippage_bps}]: "
                f"{self.default_slippage_bps}"
            )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "LpPolicy":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"unknown policy keys: {', '.join(unknown)}")
        return cls(**dict(data))

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX) -> "LpPolicy":
        """
        Read overrides such as `SHARDEX_LP_MAX_SLIPPAGE_BPS=300`.

        Unset or unparseable variables keep the default; values are clamped to [0, 10000].
        """
        defaults = cls()
        values = {
            f.name: _env_int(prefix + f.name.upper(), getattr(defaults, f.name), lo=0, hi=BPS_DENOM)
            for f in fields(cls)
        }
        return cls(**values)


DEFAULT_POLICY = LpPolicy()


def _env_int(name: str, default: int, *, lo: int, hi: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return int(default)
    try:
        v = int(raw.strip())
    except ValueError:
        return int(default)
    if v < lo:
        return int(lo)
    if v > hi:
        return int(hi)
    return int(v)


def load_policy(path: Union[str, Path]) -> LpPolicy:
    """Load a policy from a YAML mapping; missing keys keep their defaults."""
    obj = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    if obj is None:
        return LpPolicy()
    if not isinstance(obj, Mapping):
        raise TypeError("policy YAML must be a mapping")
    return LpPolicy.from_mapping(obj)
