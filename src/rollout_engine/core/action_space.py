"""Uniform action sampling over fixed and state-dependent action spaces."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from rollout_engine.core.types import (
    Action,
    GenerativeModel,
    RandomSource,
    State,
    has_fixed_action_space,
)


@dataclass(frozen=True)
class FixedActionSampler:
    """Samples from ``[0, n_actions)`` resolved once before the rollout loop."""

    n_actions: int

    def sample(self, state: State, rng: RandomSource) -> Action:
        return int(rng.integers(0, self.n_actions))


@dataclass(frozen=True)
class VariableActionSampler:
    """Re-queries the model's action count for every sampled state."""

    model: GenerativeModel

    def sample(self, state: State, rng: RandomSource) -> Action:
        n_actions = _checked_action_count(self.model.action_count(state), state=state)
        return int(rng.integers(0, n_actions))


ActionSampler = Union[FixedActionSampler, VariableActionSampler]


def resolve_action_sampler(model: GenerativeModel, state: State) -> ActionSampler:
    """Pick the sampler matching the model's action-space capability.

    Fixed action spaces are queried a single time, using ``state`` as the
    (ignored) argument. Variable action spaces defer the query to each step.
    """
    if has_fixed_action_space(model):
        n_actions = _checked_action_count(model.action_count(state), state=state)
        return FixedActionSampler(n_actions=n_actions)
    return VariableActionSampler(model=model)


def _checked_action_count(raw: object, *, state: State) -> int:
    n_actions = int(raw)  # type: ignore[call-overload]
    if n_actions <= 0:
        raise ValueError(
            f"Model reported {n_actions} available actions in state {state!r}; "
            "expected at least 1."
        )
    return n_actions
