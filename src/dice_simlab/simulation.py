"""End-to-end dice simulation run: theory, simulation, and goodness of fit."""

import logging
import time
from typing import Any, Dict, Optional

import pandas as pd

from .config import SimulationConfig
from .goodness_of_fit import GoodnessOfFitResult, chi_squared_test
from .simulator import DiceSimulator
from .theory import expected_counts

logger = logging.getLogger(__name__)


class SimulationResults:
    """Container for simulation results."""

    def __init__(self,
                 config: SimulationConfig,
                 expected: pd.Series,
                 observed: pd.Series,
                 fit: GoodnessOfFitResult,
                 metadata: Optional[Dict[str, Any]] = None):
        """Initialize simulation results.

        Args:
            config: Parameters the run used
            expected: Theoretical expected counts indexed by sum
            observed: Simulated counts indexed by sum
            fit: Chi-Squared comparison of the two
            metadata: Run metadata
        """
        self.config = config
        self.expected = expected
        self.observed = observed
        self.fit = fit
        self.metadata = metadata or {}

    def to_frame(self) -> pd.DataFrame:
        """Expected and observed counts side by side, one row per sum."""
        return pd.DataFrame({"expected": self.expected, "observed": self.observed})


class DiceExperiment:
    """Runs one dice simulation and compares it against theory."""

    def __init__(self,
                 config: SimulationConfig,
                 simulator: Optional[DiceSimulator] = None,
                 show_progress: bool = False):
        """Initialize the experiment.

        Args:
            config: Simulation parameters
            simulator: Dice simulator to use; by default one seeded from config.seed
            show_progress: Show a progress bar while rolling
        """
        self.config = config
        if simulator is None:
            simulator = DiceSimulator(seed=config.seed, show_progress=show_progress)
        self.simulator = simulator

    def run(self) -> SimulationResults:
        """Compute expected counts, simulate observed counts, and evaluate the fit."""
        start_time = time.time()
        config = self.config

        logger.info(f"Calculating theoretical probabilities for {config.notation}")
        expected = expected_counts(config)

        logger.info(f"Running simulation with {config.trial_count} trials")
        observed = self.simulator.simulate(config)

        fit = chi_squared_test(observed, expected)
        logger.info(
            f"Chi-Squared statistic {fit.chi_squared_statistic:.4f} "
            f"with {fit.degrees_of_freedom} degrees of freedom"
        )

        metadata = {
            "dice_count": config.dice_count,
            "sides_count": config.sides_count,
            "trial_count": config.trial_count,
            "seed": config.seed,
            "simulation_time_seconds": time.time() - start_time,
            "timestamp": time.strftime("%Y-%m-%d %H:%M:%S UTC", time.gmtime()),
        }

        return SimulationResults(
            config=config,
            expected=expected,
            observed=observed,
            fit=fit,
            metadata=metadata,
        )
