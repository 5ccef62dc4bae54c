"""Tabular generative model backed by dense transition and reward tensors."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

_PROB_ATOL = 1e-9


class TabularModel:
    """Finite MDP sampled from ``T[s, a, s']`` and ``R[s, a, s']``.

    The model owns its own generator for transition sampling. Action choice is
    left to the caller, so rollouts draw actions from a separate source.
    """

    fixed_action_space = True

    def __init__(
        self,
        transitions: np.ndarray,
        rewards: np.ndarray,
        discount: float,
        rng: np.random.Generator,
        terminal_states: Iterable[int] = (),
    ) -> None:
        transitions = np.asarray(transitions, dtype=np.float64)
        rewards = np.asarray(rewards, dtype=np.float64)
        _validate_tables(transitions=transitions, rewards=rewards)
        discount = float(discount)
        if not (0.0 <= discount <= 1.0):
            raise ValueError(f"discount must be in [0, 1], got {discount}.")

        self.n_states, self.n_actions, _ = transitions.shape
        terminals = frozenset(int(s) for s in terminal_states)
        invalid = [s for s in terminals if not (0 <= s < self.n_states)]
        if invalid:
            raise ValueError(
                f"Terminal state {invalid[0]} outside [0, {self.n_states - 1}]."
            )

        self.transitions = transitions
        self.rewards = rewards
        self.discount = discount
        self.terminal_states = terminals
        self._rng = rng

    def action_count(self, state: int | None = None) -> int:
        return self.n_actions

    def is_terminal(self, state: int) -> bool:
        return int(state) in self.terminal_states

    def sample_sr(self, state: int, action: int) -> tuple[int, float]:
        """Sample a next state and the reward of reaching it."""
        self._check_index(state, self.n_states, name="state")
        self._check_index(action, self.n_actions, name="action")
        probabilities = self.transitions[state, action]
        next_state = int(self._rng.choice(self.n_states, p=probabilities))
        return next_state, float(self.rewards[state, action, next_state])

    def expected_reward(self, state: int, action: int) -> float:
        """One-step expected reward of taking ``action`` in ``state``."""
        return float(
            np.dot(self.transitions[state, action], self.rewards[state, action])
        )

    @staticmethod
    def _check_index(value: int, size: int, *, name: str) -> None:
        if not (0 <= value < size):
            raise IndexError(f"Invalid {name} {value}. Expected in [0, {size - 1}].")


def _validate_tables(*, transitions: np.ndarray, rewards: np.ndarray) -> None:
    if transitions.ndim != 3 or transitions.shape[0] != transitions.shape[2]:
        raise ValueError(
            f"transitions must have shape (S, A, S), got {transitions.shape}."
        )
    if rewards.shape != transitions.shape:
        raise ValueError(
            f"rewards shape {rewards.shape} does not match transitions "
            f"shape {transitions.shape}."
        )
    if transitions.shape[0] == 0 or transitions.shape[1] == 0:
        raise ValueError("Model needs at least one state and one action.")
    if np.any(transitions < 0.0):
        raise ValueError("Transition probabilities must be non-negative.")

    totals = transitions.sum(axis=2)
    bad = np.argwhere(np.abs(totals - 1.0) > _PROB_ATOL)
    if bad.size:
        state, action = (int(i) for i in bad[0])
        raise ValueError(
            f"Transition row for state {state}, action {action} sums to "
            f"{totals[state, action]:.6f}, expected 1."
        )
