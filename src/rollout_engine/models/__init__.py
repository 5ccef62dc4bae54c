"""Reference generative models."""

from rollout_engine.models.examples import ChainModel, make_chain_model, make_tiger_model
from rollout_engine.models.tabular import TabularModel

__all__ = [
    "ChainModel",
    "TabularModel",
    "make_chain_model",
    "make_tiger_model",
]
