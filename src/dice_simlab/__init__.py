"""Dice SimLab - dice roll simulation checked against exact combinatorics."""

__version__ = "0.1.0"

from .combinatorics import sum_combinations, ways_to_make_sum
from .config import SimulationConfig
from .goodness_of_fit import GoodnessOfFitResult, chi_squared_test
from .simulation import DiceExperiment, SimulationResults
from .simulator import DiceSimulator
from .theory import expected_counts, probabilities

__all__ = [
    "DiceExperiment",
    "DiceSimulator",
    "GoodnessOfFitResult",
    "SimulationConfig",
    "SimulationResults",
    "chi_squared_test",
    "expected_counts",
    "probabilities",
    "sum_combinations",
    "ways_to_make_sum",
]
