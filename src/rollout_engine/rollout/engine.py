"""Uniform-random rollouts for estimating discounted returns.

Both entry points walk a single stochastic trajectory from the input state,
choosing actions uniformly at random, until the horizon is exhausted or a
terminal state is reached. The result is a single-sample Monte-Carlo estimate
of the discounted return under the uniform policy, as used by MCTS/POMCP-like
planners to value a leaf without expanding it.
"""

from __future__ import annotations

from rollout_engine.core.accumulator import DiscountAccumulator
from rollout_engine.core.action_space import resolve_action_sampler
from rollout_engine.core.params import (
    RolloutConfig,
    validate_depth,
    validate_threshold,
    validate_window_size,
)
from rollout_engine.core.types import GenerativeModel, RandomSource, State
from rollout_engine.core.window import RewardWindow

DEFAULT_MIN_DEPTH = 10
DEFAULT_WINDOW_SIZE = 5
DEFAULT_THRESHOLD = 0.01


def rollout(
    model: GenerativeModel,
    state: State,
    max_depth: int,
    rng: RandomSource,
) -> float:
    """Return the discounted return of one uniform-random rollout.

    Args:
        model: Generative model to sample transitions from.
        state: State to start the rollout from.
        max_depth: Maximum number of steps to simulate.
        rng: Borrowed uniform source used to pick actions.

    Returns:
        The discounted sum of rewards along the sampled trajectory. A terminal
        next state ends the rollout right after its reward is counted.
    """
    max_depth = validate_depth(max_depth, name="max_depth")
    if max_depth == 0:
        return 0.0

    returns = DiscountAccumulator(model.discount)
    sampler = resolve_action_sampler(model, state)
    for _ in range(max_depth):
        action = sampler.sample(state, rng)
        state, reward = model.sample_sr(state, action)
        returns.add(reward)

        if model.is_terminal(state):
            return returns.total

        returns.advance()
    return returns.total


def adaptive_rollout(
    model: GenerativeModel,
    state: State,
    max_depth: int,
    rng: RandomSource,
    min_depth: int | None = None,
    window_size: int | None = None,
    threshold: float | None = None,
    *,
    config: RolloutConfig | None = None,
) -> float:
    """Return the discounted return of a rollout that may stop early.

    On top of the stopping rules of :func:`rollout`, this keeps the last
    ``window_size`` discounted rewards. From ``min_depth`` onwards, once the
    window is full, the rollout stops as soon as the newest discounted reward
    lies within ``threshold`` of the window average.

    Tuning values left as ``None`` come from ``config`` when given, otherwise
    from the defaults (10, 5, 0.01).
    """
    min_depth, window_size, threshold = _resolve_adaptive_settings(
        min_depth=min_depth,
        window_size=window_size,
        threshold=threshold,
        config=config,
    )
    max_depth = validate_depth(max_depth, name="max_depth")
    min_depth = validate_depth(min_depth, name="min_depth")
    window_size = validate_window_size(window_size)
    threshold = validate_threshold(threshold)
    if max_depth == 0:
        return 0.0

    returns = DiscountAccumulator(model.discount)
    window = RewardWindow(window_size)
    sampler = resolve_action_sampler(model, state)
    for depth in range(max_depth):
        action = sampler.sample(state, rng)
        state, reward = model.sample_sr(state, action)
        window.push(returns.add(reward))

        if model.is_terminal(state):
            return returns.total

        if depth >= min_depth and window.has_converged(threshold):
            return returns.total

        returns.advance()
    return returns.total


def _resolve_adaptive_settings(
    *,
    min_depth: int | None,
    window_size: int | None,
    threshold: float | None,
    config: RolloutConfig | None,
) -> tuple[int, int, float]:
    if config is not None:
        min_depth = config.min_depth if min_depth is None else min_depth
        window_size = config.window_size if window_size is None else window_size
        threshold = config.threshold if threshold is None else threshold
    return (
        DEFAULT_MIN_DEPTH if min_depth is None else min_depth,
        DEFAULT_WINDOW_SIZE if window_size is None else window_size,
        DEFAULT_THRESHOLD if threshold is None else threshold,
    )
