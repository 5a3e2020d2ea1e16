# tests/test_config.py

import pytest

from adaptive_core.config import EngineConfig

ENV_VARS = ("CAT_LEARNING_RATE", "CAT_THETA_MIN", "CAT_THETA_MAX", "CAT_SE_THRESHOLD")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    cfg = EngineConfig()
    assert cfg.learning_rate == 0.4
    assert cfg.bounds == (-3.0, 3.0)
    assert cfg.se_threshold == 0.3


@pytest.mark.parametrize(
    "kwargs",
    [
        {"learning_rate": 0.0},
        {"theta_min": 0.5},
        {"theta_max": -1.0},
        {"se_threshold": -0.1},
        {"learning_rate": float("inf")},
        {"theta_max": float("inf")},
        {"theta_min": float("-inf")},
        {"se_threshold": float("nan")},
        {"learning_rate": float("inf"), "theta_max": float("inf")},
    ],
)
def test_invalid_values(kwargs):
    with pytest.raises(ValueError):
        EngineConfig(**kwargs)


def test_from_env_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("CAT_LEARNING_RATE=0.5\nCAT_SE_THRESHOLD=0.25\n", encoding="utf-8")
    cfg = EngineConfig.from_env(env_file)
    assert cfg.learning_rate == 0.5
    assert cfg.se_threshold == 0.25
    assert cfg.theta_max == 3.0


def test_process_env_wins_over_file(tmp_path, monkeypatch):
    env_file = tmp_path / ".env"
    env_file.write_text("CAT_THETA_MAX=2.0\n", encoding="utf-8")
    monkeypatch.setenv("CAT_THETA_MAX", "4.0")
    assert EngineConfig.from_env(env_file).theta_max == 4.0


def test_from_env_rejects_garbage(tmp_path, monkeypatch):
    monkeypatch.setenv("CAT_LEARNING_RATE", "fast")
    with pytest.raises(ValueError, match="CAT_LEARNING_RATE"):
        EngineConfig.from_env(tmp_path / ".env")


@pytest.mark.parametrize("name", ["CAT_LEARNING_RATE", "CAT_THETA_MAX", "CAT_SE_THRESHOLD"])
def test_from_env_rejects_non_finite(tmp_path, name):
    env_file = tmp_path / ".env"
    env_file.write_text(f"{name}=inf\n", encoding="utf-8")
    with pytest.raises(ValueError, match="finite"):
        EngineConfig.from_env(env_file)
