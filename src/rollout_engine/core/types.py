"""Shared state, action and capability types used across rollout modules."""

from __future__ import annotations

from typing import Any, Protocol


State = Any
Action = int


class RandomSource(Protocol):
    """Uniform integer source, e.g. ``numpy.random.Generator``.

    The engine borrows it for one call and never seeds or copies it.
    """

    def integers(self, low: int, high: int) -> Any: ...


class GenerativeModel(Protocol):
    """Sampling interface of a sequential decision process.

    Attributes:
        discount: Constant per-step discount in [0, 1].

    Models whose action count is the same in every state may also set a
    ``fixed_action_space = True`` attribute. ``action_count`` then ignores its
    argument and is queried once per rollout instead of once per step.
    """

    discount: float

    def sample_sr(self, state: State, action: Action) -> tuple[State, float]: ...

    def is_terminal(self, state: State) -> bool: ...

    def action_count(self, state: State) -> int: ...


def has_fixed_action_space(model: GenerativeModel) -> bool:
    """Return whether ``model`` declares a state-independent action count."""
    return bool(getattr(model, "fixed_action_space", False))
