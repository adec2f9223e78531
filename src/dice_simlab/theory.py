"""Theoretical sum distributions derived from exact combinatorics."""

import numpy as np
import pandas as pd

from .combinatorics import sum_combinations
from .config import SimulationConfig


def _ways_by_sum(config: SimulationConfig) -> list[int]:
    ways = sum_combinations(config.dice_count, config.sides_count)
    return [ways[s] for s in config.sum_index]


def probabilities(config: SimulationConfig) -> pd.Series:
    """Probability of each sum for a single roll of all dice."""
    total = config.total_outcomes
    if total <= 0:
        raise ValueError(f"Total outcomes must be positive, got {total}")

    values = np.array([w / total for w in _ways_by_sum(config)], dtype=float)
    return pd.Series(values, index=config.sum_index, name="probability")


def expected_counts(config: SimulationConfig) -> pd.Series:
    """Compute the expected count of each sum over `trial_count` trials.

    expected[s] = ways(s) / sides ** dice * trials, evaluated as a single
    division of exact integers so that evenly divisible cases come out exact.

    Args:
        config: Simulation parameters

    Returns:
        Float series indexed by sum, covering every attainable sum

    Raises:
        ValueError: If the total outcome count is not positive
    """
    total = config.total_outcomes
    if total <= 0:
        raise ValueError(f"Total outcomes must be positive, got {total}")

    values = np.array(
        [w * config.trial_count / total for w in _ways_by_sum(config)], dtype=float
    )
    return pd.Series(values, index=config.sum_index, name="expected")
