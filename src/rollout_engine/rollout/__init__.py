"""Rollout simulators for Monte-Carlo value estimation."""

from rollout_engine.rollout.engine import adaptive_rollout, rollout
from rollout_engine.rollout.estimate import ValueEstimate, estimate_value

__all__ = [
    "ValueEstimate",
    "adaptive_rollout",
    "estimate_value",
    "rollout",
]
