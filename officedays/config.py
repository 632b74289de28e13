"""Configuration loading (YAML or JSON) for the office-days scheduler."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from officedays.services.scoring import ScoringWeights


@dataclass
class SchedulerConfig:
    db_url: Optional[str] = None  # None = SQLite file in ~/.officedays
    history_months: int = 3  # months of stored schedules loaded as history
    lookback_limit: int = 2  # most recent months used for repetition scoring
    recency_decay: float = 0.75
    repetition_weight: float = 3.0
    seed: Optional[int] = None
    strict_quotas: bool = False  # raise instead of skipping unsupported quotas
    allow_past_months: bool = False
    export_dir: str = "."

    def __post_init__(self) -> None:
        for name in ("history_months", "lookback_limit", "seed"):
            value = getattr(self, name)
            if value is None and name == "seed":
                continue
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
        for name in ("recency_decay", "repetition_weight"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"{name} must be a number, got {value!r}")
        for name in ("strict_quotas", "allow_past_months"):
            if not isinstance(getattr(self, name), bool):
                raise ValueError(f"{name} must be true or false, got {getattr(self, name)!r}")
        for name in ("db_url", "export_dir"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                raise ValueError(f"{name} must be a string, got {value!r}")

        if self.lookback_limit < 1:
            raise ValueError("lookback_limit must be at least 1")
        if self.history_months < 0:
            raise ValueError("history_months must not be negative")
        if not 0.0 <= self.recency_decay <= 1.0:
            raise ValueError("recency_decay must be between 0 and 1")
        if self.repetition_weight < 0:
            raise ValueError("repetition_weight must not be negative")

    @property
    def weights(self) -> ScoringWeights:
        return ScoringWeights(
            lookback_limit=self.lookback_limit,
            recency_decay=float(self.recency_decay),
            repetition_weight=float(self.repetition_weight),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _read_raw(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        data = json.loads(text)
    else:
        data = yaml.safe_load(text)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")
    # Allow settings nested under a top-level "scheduler" key
    if isinstance(data.get("scheduler"), dict):
        data = data["scheduler"]
    return data


def load_config(path: str | Path | None = None) -> SchedulerConfig:
    """
    Load configuration from a YAML or JSON file.

    Args:
        path: Config file path; None or a missing file gives the defaults

    Returns:
        Validated SchedulerConfig

    Raises:
        ValueError: On unknown keys or invalid values
    """
    if path is None:
        return SchedulerConfig()

    path = Path(path)
    if not path.exists():
        print(f"[WARN] Config file not found at {path}, using defaults")
        return SchedulerConfig()

    data = _read_raw(path)
    known = {f.name for f in fields(SchedulerConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown config keys in {path}: {', '.join(unknown)}")

    cfg = SchedulerConfig(**data)
    print(f"[INFO] Configuration loaded from {path}")
    return cfg
