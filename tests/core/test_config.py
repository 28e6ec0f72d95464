from __future__ import annotations

import pytest

from shardex_lp.core.config import DEFAULT_POLICY, LpPolicy, load_policy


def test_defaults() -> None:
    assert DEFAULT_POLICY == LpPolicy(
        min_slippage_bps=10,
        max_slippage_bps=500,
        default_slippage_bps=50,
        ratio_tolerance_bps=500,
        min_deposit_bps=1,
    )


@pytest.mark.parametrize(
    "kwargs",
    [
        {"min_slippage_bps": 600},
        {"default_slippage_bps": 5},
        {"ratio_tolerance_bps": 10_001},
        {"min_deposit_bps": -1},
    ],
)
def test_invalid_policy_rejected(kwargs) -> None:
    with pytest.raises(ValueError):
        LpPolicy(**kwargs)


def test_bool_rejected() -> None:
    with pytest.raises(TypeError):
        LpPolicy(min_deposit_bps=True)


def test_from_env(monkeypatch) -> None:
    monkeypatch.setenv("SHARDEX_LP_MAX_SLIPPAGE_BPS", "300")
    monkeypatch.setenv("SHARDEX_LP_RATIO_TOLERANCE_BPS", "not-a-number")
    monkeypatch.setenv("SHARDEX_LP_MIN_DEPOSIT_BPS", "-5")
    policy = LpPolicy.from_env()
    assert policy.max_slippage_bps == 300
    assert policy.ratio_tolerance_bps == 500
    assert policy.min_deposit_bps == 0


def test_from_env_custom_prefix(monkeypatch) -> None:
    monkeypatch.setenv("SHARD7_DEFAULT_SLIPPAGE_BPS", "100")
    assert LpPolicy.from_env(prefix="SHARD7_").default_slippage_bps == 100


def test_load_policy_yaml(tmp_path) -> None:
    path = tmp_path / "policy.yaml"
    path.write_text("max_slippage_bps: 1000\nratio_tolerance_bps: 100\n", encoding="utf-8")
    policy = load_policy(path)
    assert policy.max_slippage_bps == 1000
    assert policy.ratio_tolerance_bps == 100
    assert policy.min_slippage_bps == 10


def test_load_policy_empty_file(tmp_path) -> None:
    path = tmp_path / "policy.yaml"
    path.write_text("", encoding="utf-8")
    assert load_policy(path) == DEFAULT_POLICY


def test_load_policy_unknown_key(tmp_path) -> None:
    path = tmp_path / "policy.yaml"
    path.write_text("max_slippage: 1000\n", encoding="utf-8")
    with pytest.raises(ValueError, match="unknown policy keys: max_slippage"):
        load_policy(path)


def test_load_policy_requires_mapping(tmp_path) -> None:
    path = tmp_path / "policy.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(TypeError, match="mapping"):
        load_policy(path)
