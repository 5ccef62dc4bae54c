"""Uniform-random rollouts over generative models."""

from rollout_engine.core.params import RolloutConfig
from rollout_engine.rollout.engine import adaptive_rollout, rollout
from rollout_engine.rollout.estimate import ValueEstimate, estimate_value

__all__ = [
    "RolloutConfig",
    "ValueEstimate",
    "adaptive_rollout",
    "estimate_value",
    "rollout",
]
