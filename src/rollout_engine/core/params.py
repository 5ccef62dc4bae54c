"""Rollout configuration schema and YAML helpers."""

from __future__ import annotations

from dataclasses import asdict, dataclass
import math
from pathlib import Path
from typing import Any

import yaml


@dataclass(frozen=True)
class RolloutConfig:
    """Horizon and early-stop settings for one rollout or a batch of them."""

    max_depth: int
    min_depth: int = 10
    window_size: int = 5
    threshold: float = 0.01
    adaptive: bool = False

    def validate(self) -> None:
        validate_depth(self.max_depth, name="max_depth")
        validate_depth(self.min_depth, name="min_depth")
        validate_window_size(self.window_size)
        validate_threshold(self.threshold)

    def to_dict(self) -> dict[str, Any]:
        """Convert config object to a plain dict."""
        return asdict(self)

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "RolloutConfig":
        """Create config object from a plain dict."""
        if "max_depth" not in payload:
            raise ValueError("Rollout config is missing 'max_depth'.")
        return cls(
            max_depth=payload["max_depth"],
            min_depth=payload.get("min_depth", 10),
            window_size=payload.get("window_size", 5),
            threshold=float(payload.get("threshold", 0.01)),
            adaptive=bool(payload.get("adaptive", False)),
        )


def validate_depth(value: int, *, name: str) -> int:
    """Reject negative or non-integral depths and return them as ``int``."""
    if not _is_integral(value) or value < 0:
        raise ValueError(f"{name} must be a non-negative integer, got {value!r}.")
    return int(value)


def validate_window_size(value: int) -> int:
    if not _is_integral(value) or value <= 0:
        raise ValueError(f"window_size must be a positive integer, got {value!r}.")
    return int(value)


def validate_threshold(value: float) -> float:
    try:
        threshold = float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"threshold must be a number, got {value!r}.") from exc
    if math.isnan(threshold) or threshold < 0.0:
        raise ValueError(f"threshold must be non-negative, got {value!r}.")
    return threshold


def save_rollout_config(config: RolloutConfig, output_path: Path) -> None:
    """Serialize rollout config to YAML."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(yaml.safe_dump(config.to_dict(), sort_keys=False))


def load_rollout_config(path: Path) -> RolloutConfig:
    """Load and validate rollout config from YAML."""
    payload = yaml.safe_load(path.read_text())
    if not isinstance(payload, dict):
        raise ValueError(f"Expected a mapping in rollout config YAML: {path}")
    config = RolloutConfig.from_dict(payload)
    config.validate()
    return config


def _is_integral(value: object) -> bool:
    if isinstance(value, bool):
        return False
    try:
        return int(value) == value  # type: ignore[call-overload]
    except (TypeError, ValueError, OverflowError):
        return False
