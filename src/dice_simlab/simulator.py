"""Monte Carlo dice roller."""

import logging
from typing import Any, Optional

import numpy as np
import pandas as pd
from tqdm import tqdm

from .config import SimulationConfig

logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = 100_000


class DiceSimulator:
    """Rolls dice with a single owned random generator and tallies the sums."""

    def __init__(
        self,
        rng: Optional[Any] = None,
        seed: Optional[int] = None,
        show_progress: bool = False,
        batch_size: int = DEFAULT_BATCH_SIZE,
    ) -> None:
        """Initialize the simulator.

        Args:
            rng: Random source exposing numpy's ``integers(low, high, size)``.
                Defaults to ``np.random.default_rng(seed)``.
            seed: Seed for the default generator; None draws from OS entropy
            show_progress: Show a tqdm progress bar over trial batches
            batch_size: Trials rolled per vectorized batch
        """
        if batch_size < 1:
            raise ValueError(f"batch_size must be >= 1, got {batch_size}")

        self._rng = rng if rng is not None else np.random.default_rng(seed)
        self.show_progress = show_progress
        self.batch_size = batch_size

    def simulate(self, config: SimulationConfig) -> pd.Series:
        """Run `trial_count` trials and count how often each sum occurs.

        Each die is drawn uniformly from [0, sides_count) and shifted by one.
        The generator is never re-seeded between batches.

        Args:
            config: Simulation parameters

        Returns:
            Integer series indexed by sum whose total equals `trial_count`
        """
        counts = np.zeros(config.max_sum + 1, dtype=np.int64)

        batch_starts = range(0, config.trial_count, self.batch_size)
        if self.show_progress:
            batch_starts = tqdm(batch_starts, desc="Rolling dice", unit="batch")

        for start in batch_starts:
            n = min(self.batch_size, config.trial_count - start)
            faces = self._rng.integers(
                0, config.sides_count, size=(n, config.dice_count)
            ) + 1
            counts += np.bincount(faces.sum(axis=1), minlength=config.max_sum + 1)

        logger.debug(
            f"Rolled {config.trial_count} trials of {config.notation} "
            f"in batches of {self.batch_size}"
        )

        return pd.Series(
            counts[config.min_sum:], index=config.sum_index, name="observed"
        )
