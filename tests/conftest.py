"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from collections.abc import Callable, Sequence

import pytest


class ScriptedRng:
    """Uniform source that replays a fixed list of integer draws."""

    def __init__(self, draws: Sequence[int]) -> None:
        self._draws = list(draws)
        self.requests: list[tuple[int, int]] = []

    def integers(self, low: int, high: int) -> int:
        self.requests.append((low, high))
        if not self._draws:
            raise AssertionError("ScriptedRng ran out of draws.")
        value = self._draws.pop(0)
        assert low <= value < high, f"scripted draw {value} outside [{low}, {high})"
        return value


class SequenceModel:
    """Deterministic model whose state is the step index.

    Step ``i`` pays ``rewards[i % len(rewards)]`` regardless of the action and
    lands in state ``i + 1``. States listed in ``terminal_at`` are terminal.
    """

    fixed_action_space = True

    def __init__(
        self,
        rewards: Sequence[float],
        discount: float = 1.0,
        n_actions: int = 2,
        terminal_at: Sequence[int] = (),
    ) -> None:
        self.rewards = list(rewards)
        self.discount = discount
        self.n_actions = n_actions
        self.terminal_at = set(terminal_at)
        self.calls: list[tuple[int, int]] = []

    def action_count(self, state: int) -> int:
        return self.n_actions

    def is_terminal(self, state: int) -> bool:
        return state in self.terminal_at

    def sample_sr(self, state: int, action: int) -> tuple[int, float]:
        self.calls.append((state, action))
        return state + 1, float(self.rewards[state % len(self.rewards)])


@pytest.fixture
def scripted_rng() -> Callable[[Sequence[int]], ScriptedRng]:
    return ScriptedRng


@pytest.fixture
def sequence_model() -> Callable[..., SequenceModel]:
    return SequenceModel
