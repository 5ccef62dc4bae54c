"""Average repeated rollouts into a value estimate for one state."""

from __future__ import annotations

from dataclasses import dataclass

from rollout_engine.core.params import RolloutConfig
from rollout_engine.core.types import GenerativeModel, RandomSource, State
from rollout_engine.rollout.engine import adaptive_rollout, rollout


@dataclass(frozen=True)
class ValueEstimate:
    """Outputs from a batch of rollouts."""

    mean: float
    n_rollouts: int
    returns: tuple[float, ...]


def estimate_value(
    model: GenerativeModel,
    state: State,
    rng: RandomSource,
    *,
    config: RolloutConfig,
    n_rollouts: int,
    show_progress: bool = False,
    progress_desc: str = "Rollouts",
) -> ValueEstimate:
    """Run ``n_rollouts`` independent rollouts from ``state`` and average them.

    All rollouts draw from the same borrowed ``rng``, so the batch is
    reproducible from the generator's state at call time.
    """
    config.validate()
    if n_rollouts <= 0:
        raise ValueError("n_rollouts must be positive.")

    iterator = range(n_rollouts)
    progress = iterator
    if show_progress:
        # Import tqdm lazily to avoid notebook-side effects when progress is disabled.
        from tqdm.auto import tqdm

        progress = tqdm(iterator, desc=progress_desc, dynamic_ncols=True, leave=False)

    returns: list[float] = []
    for _ in progress:
        if config.adaptive:
            value = adaptive_rollout(model, state, config.max_depth, rng, config=config)
        else:
            value = rollout(model, state, config.max_depth, rng)
        returns.append(value)

    if show_progress:
        progress.close()

    return ValueEstimate(
        mean=sum(returns) / len(returns),
        n_rollouts=n_rollouts,
        returns=tuple(returns),
    )
