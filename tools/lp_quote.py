#!/usr/bin/env python3
"""
Offline LP quote tool.

Examples:
  python3 tools/lp_quote.py deposit --reserve-a 1000000 --reserve-b 2000000 --lp-supply 500000 \
      --amount-a 10000 --amount-b 20000
  python3 tools/lp_quote.py withdraw --reserve-a 1000000 --reserve-b 2000000 --lp-supply 500000 \
      --lp 1000 --fee 1/5
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Optional, Sequence

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from shardex_lp import (
    DEFAULT_POLICY,
    LpMathError,
    LpPolicy,
    PoolSnapshot,
    Side,
    ValidationFailed,
    WithdrawalFee,
    load_policy,
    prepare_deposit,
    prepare_withdrawal,
    quote_deposit,
    quote_single_token_deposit,
    quote_withdrawal,
)


def _parse_fee(value: str) -> WithdrawalFee:
    num, sep, den = value.partition("/")
    if not sep:
        raise argparse.ArgumentTypeError(f"fee must look like NUM/DEN: {value!r}")
    try:
        return WithdrawalFee(numerator=int(num), denominator=int(den))
    except (TypeError, ValueError) as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Deterministic LP deposit/withdrawal quotes (integer-only)")
    ap.add_argument("--policy", type=str, default="", help="YAML policy file")
    ap.add_argument("--slippage-bps", type=int, default=None)
    ap.add_argument("-v", "--verbose", action="store_true")

    sub = ap.add_subparsers(dest="command", required=True)

    def pool_args(p: argparse.ArgumentParser) -> None:
        p.add_argument("--reserve-a", type=int, required=True)
        p.add_argument("--reserve-b", type=int, required=True)
        p.add_argument("--lp-supply", type=int, required=True)

    dep = sub.add_parser("deposit", help="two-sided deposit")
    pool_args(dep)
    dep.add_argument("--amount-a", type=int, required=True)
    dep.add_argument("--amount-b", type=int, required=True)
    dep.add_argument("--balance-a", type=int, default=None, help="validate against this balance")
    dep.add_argument("--balance-b", type=int, default=None, help="validate against this balance")

    single = sub.add_parser("single", help="single-token deposit")
    pool_args(single)
    single.add_argument("--amount", type=int, required=True)
    single.add_argument("--side", choices=[s.value for s in Side], default=Side.A.value)

    wd = sub.add_parser("withdraw", help="LP burn")
    pool_args(wd)
    wd.add_argument("--lp", type=int, required=True)
    wd.add_argument("--fee", type=_parse_fee, default=WithdrawalFee())
    wd.add_argument("--lp-balance", type=int, default=None, help="validate against this balance")
    return ap


def _quote(args: argparse.Namespace, policy: LpPolicy) -> dict:
    pool = PoolSnapshot(reserve_a=args.reserve_a, reserve_b=args.reserve_b, lp_supply=args.lp_supply)
    if args.command == "deposit":
        if args.balance_a is not None or args.balance_b is not None:
            quote = prepare_deposit(
                pool,
                args.amount_a,
                args.amount_b,
                args.amount_a if args.balance_a is None else args.balance_a,
                args.amount_b if args.balance_b is None else args.balance_b,
                slippage_bps=args.slippage_bps,
                policy=policy,
            )
        else:
            quote = quote_deposit(pool, args.amount_a, args.amount_b, slippage_bps=args.slippage_bps, policy=policy)
    elif args.command == "single":
        quote = quote_single_token_deposit(
            pool, args.amount, side=Side(args.side), slippage_bps=args.slippage_bps, policy=policy
        )
    else:
        if args.lp_balance is not None:
            quote = prepare_withdrawal(
                pool, args.lp, args.lp_balance, fee=args.fee, slippage_bps=args.slippage_bps, policy=policy
            )
        else:
            quote = quote_withdrawal(pool, args.lp, fee=args.fee, slippage_bps=args.slippage_bps, policy=policy)
    return asdict(quote)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    policy = load_policy(args.policy) if args.policy else DEFAULT_POLICY

    try:
        out = {"ok": True, "quote": _quote(args, policy)}
    except ValidationFailed as exc:
        out = {
            "ok": False,
            "error": exc.kind.value,
            "issues": [{"kind": i.kind.value, "field": i.field, "message": i.message} for i in exc.issues],
        }
    except LpMathError as exc:
        out = {"ok": False, "error": exc.kind.value, "detail": str(exc)}

    print(json.dumps(out, indent=2, sort_keys=True))
    return 0 if out["ok"] else 1


if __name__ == "__main__":
    raise SystemExit(main())
