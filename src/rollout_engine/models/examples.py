"""Small example problems for exercising rollouts."""

from __future__ import annotations

import numpy as np

from rollout_engine.models.tabular import TabularModel

TIGER_LEFT = 0
TIGER_RIGHT = 1

A_LISTEN = 0
A_LEFT = 1
A_RIGHT = 2

TIGER_DISCOUNT = 0.95


def make_tiger_model(rng: np.random.Generator) -> TabularModel:
    """Build the tiger-door problem as a fully observable MDP.

    Actions are: 0-listen, 1-open-left, 2-open-right. Listening costs 1 and
    leaves the tiger in place. Opening the treasure door pays 10, opening the
    tiger's door costs 100, and either way the tiger is reshuffled.
    """
    n_states, n_actions = 2, 3
    transitions = np.zeros((n_states, n_actions, n_states))
    rewards = np.zeros((n_states, n_actions, n_states))

    for s in range(n_states):
        transitions[s, A_LISTEN, s] = 1.0
        transitions[s, A_LEFT, :] = 1.0 / n_states
        transitions[s, A_RIGHT, :] = 1.0 / n_states

    rewards[:, A_LISTEN, :] = -1.0
    rewards[TIGER_RIGHT, A_LEFT, :] = 10.0
    rewards[TIGER_LEFT, A_LEFT, :] = -100.0
    rewards[TIGER_LEFT, A_RIGHT, :] = 10.0
    rewards[TIGER_RIGHT, A_RIGHT, :] = -100.0

    return TabularModel(
        transitions=transitions,
        rewards=rewards,
        discount=TIGER_DISCOUNT,
        rng=rng,
    )


class ChainModel:
    """Corridor of ``length`` cells whose available moves depend on position.

    The leftmost cell only allows moving right; every other cell allows
    ``0`` (right), ``1`` (left) and ``2`` (stay), so the action count varies
    by state. Reaching the last cell pays ``goal_reward`` and is terminal;
    every other step pays ``step_reward``.
    """

    def __init__(
        self,
        length: int,
        discount: float = 0.9,
        step_reward: float = -1.0,
        goal_reward: float = 10.0,
        slip: float = 0.0,
        rng: np.random.Generator | None = None,
    ) -> None:
        if length < 2:
            raise ValueError("length must be at least 2.")
        if not (0.0 <= discount <= 1.0):
            raise ValueError(f"discount must be in [0, 1], got {discount}.")
        if not (0.0 <= slip <= 1.0):
            raise ValueError(f"slip must be in [0, 1], got {slip}.")
        if slip > 0.0 and rng is None:
            raise ValueError("A generator is required when slip > 0.")
        self.length = length
        self.discount = float(discount)
        self.step_reward = float(step_reward)
        self.goal_reward = float(goal_reward)
        self.slip = float(slip)
        self._rng = rng

    def action_count(self, state: int) -> int:
        return 1 if state == 0 else 3

    def is_terminal(self, state: int) -> bool:
        return state == self.length - 1

    def sample_sr(self, state: int, action: int) -> tuple[int, float]:
        if not (0 <= action < self.action_count(state)):
            raise IndexError(f"Action {action} is not available in cell {state}.")

        if self.slip > 0.0 and self._rng.random() < self.slip:
            action = 2
        move = {0: 1, 1: -1, 2: 0}[action]
        next_state = min(max(state + move, 0), self.length - 1)
        reward = self.goal_reward if self.is_terminal(next_state) else self.step_reward
        return next_state, reward


def make_chain_model(
    length: int = 6,
    *,
    discount: float = 0.9,
    slip: float = 0.0,
    rng: np.random.Generator | None = None,
) -> ChainModel:
    """Build a corridor model with a state-dependent action count."""
    return ChainModel(length=length, discount=discount, slip=slip, rng=rng)
