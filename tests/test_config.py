"""Tests for configuration loading."""

import json
from pathlib import Path

import pytest

from officedays.config import SchedulerConfig, load_config


def test_defaults():
    cfg = load_config(None)
    assert cfg.history_months == 3
    assert cfg.lookback_limit == 2
    assert cfg.weights.recency_decay == 0.75
    assert cfg.weights.repetition_weight == 3.0
    assert cfg.strict_quotas is False


def test_missing_file_gives_defaults(tmp_path):
    assert load_config(tmp_path / "nope.yaml") == SchedulerConfig()


def test_load_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("lookback_limit: 3\nrepetition_weight: 1.5\nseed: 7\n")

    cfg = load_config(path)
    assert cfg.lookback_limit == 3
    assert cfg.repetition_weight == 1.5
    assert cfg.seed == 7


def test_load_nested_json(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"scheduler": {"strict_quotas": True, "history_months": 6}}))

    cfg = load_config(path)
    assert cfg.strict_quotas is True
    assert cfg.history_months == 6


def test_sample_config_loads():
    cfg = load_config(Path(__file__).parent.parent / "scheduler_config.yaml")
    assert cfg == SchedulerConfig()


def test_unknown_key_rejected(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("lookback: 2\n")
    with pytest.raises(ValueError, match="Unknown config keys"):
        load_config(path)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"lookback_limit": 0},
        {"history_months": -1},
        {"recency_decay": 1.5},
        {"repetition_weight": -1.0},
    ],
)
def test_invalid_values_rejected(kwargs):
    with pytest.raises(ValueError):
        SchedulerConfig(**kwargs)


@pytest.mark.parametrize(
    "text, key",
    [
        ("lookback_limit: two\n", "lookback_limit"),
        ("history_months: 1.5\n", "history_months"),
        ("recency_decay: high\n", "recency_decay"),
        ("strict_quotas: maybe\n", "strict_quotas"),
        ("seed: abc\n", "seed"),
    ],
)
def test_wrongly_typed_values_rejected(tmp_path, text, key):
    path = tmp_path / "config.yaml"
    path.write_text(text)
    with pytest.raises(ValueError, match=key):
        load_config(path)
