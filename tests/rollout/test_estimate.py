"""Batch value estimation tests."""

from __future__ import annotations

import math

import numpy as np
import pytest

from rollout_engine.core.params import RolloutConfig
from rollout_engine.models.examples import make_chain_model, make_tiger_model
from rollout_engine.rollout.estimate import estimate_value


def test_estimate_averages_individual_returns() -> None:
    model = make_tiger_model(np.random.default_rng(0))
    config = RolloutConfig(max_depth=20)

    estimate = estimate_value(
        model, 0, np.random.default_rng(1), config=config, n_rollouts=25
    )

    assert estimate.n_rollouts == 25
    assert len(estimate.returns) == 25
    assert math.isclose(estimate.mean, sum(estimate.returns) / 25)


def test_deterministic_chain_estimate_is_exact() -> None:
    # Only one action exists at the start and the corridor has length 2,
    # so every rollout pays the goal reward on its first step.
    model = make_chain_model(length=2, discount=0.9)
    config = RolloutConfig(max_depth=10)

    estimate = estimate_value(
        model, 0, np.random.default_rng(2), config=config, n_rollouts=5
    )

    assert estimate.returns == (10.0,) * 5
    assert estimate.mean == 10.0


def test_adaptive_config_uses_early_stop() -> None:
    config = RolloutConfig(
        max_depth=200, min_depth=0, window_size=2, threshold=1e9, adaptive=True
    )
    model = make_tiger_model(np.random.default_rng(4))

    estimate = estimate_value(
        model, 0, np.random.default_rng(5), config=config, n_rollouts=10
    )

    # Huge threshold stops every rollout after two steps.
    for value in estimate.returns:
        assert -100.0 - 0.95 * 100.0 <= value <= 10.0 + 0.95 * 10.0


def test_progress_bar_does_not_change_result() -> None:
    config = RolloutConfig(max_depth=15)

    quiet = estimate_value(
        make_tiger_model(np.random.default_rng(8)),
        1,
        np.random.default_rng(9),
        config=config,
        n_rollouts=12,
    )
    noisy = estimate_value(
        make_tiger_model(np.random.default_rng(8)),
        1,
        np.random.default_rng(9),
        config=config,
        n_rollouts=12,
        show_progress=True,
    )

    assert quiet == noisy


def test_non_positive_batch_is_rejected() -> None:
    model = make_tiger_model(np.random.default_rng(0))
    with pytest.raises(ValueError, match="n_rollouts"):
        estimate_value(
            model,
            0,
            np.random.default_rng(0),
            config=RolloutConfig(max_depth=5),
            n_rollouts=0,
        )


@pytest.mark.parametrize("adaptive", [False, True])
def test_whole_number_float_depth_in_config_is_accepted(adaptive: bool) -> None:
    config = RolloutConfig(
        max_depth=3.0, min_depth=1.0, window_size=2.0, adaptive=adaptive
    )
    config.validate()

    estimate = estimate_value(
        make_tiger_model(np.random.default_rng(0)),
        0,
        np.random.default_rng(1),
        config=config,
        n_rollouts=4,
    )

    assert estimate.n_rollouts == 4
    assert len(estimate.returns) == 4
