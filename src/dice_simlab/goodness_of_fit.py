"""Chi-Squared goodness-of-fit between observed and expected sum counts."""

from dataclasses import asdict, dataclass
from typing import Any, Dict

import pandas as pd


@dataclass(frozen=True)
class GoodnessOfFitResult:
    """Chi-Squared statistic and its degrees of freedom."""

    chi_squared_statistic: float
    degrees_of_freedom: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def chi_squared_test(observed: pd.Series, expected: pd.Series) -> GoodnessOfFitResult:
    """Compute the Chi-Squared statistic for observed vs expected counts.

    Formula: χ² = Σ (O - E)² / E, taken over sums with E > 0.

    Args:
        observed: Observed counts indexed by sum
        expected: Expected counts over the same sums

    Returns:
        GoodnessOfFitResult with degrees of freedom max_sum - min_sum

    Raises:
        ValueError: If the two series do not cover the same sums
    """
    if len(expected) == 0:
        raise ValueError("Cannot evaluate an empty distribution")
    if not observed.index.equals(expected.index):
        raise ValueError("Observed and expected distributions must share the same sums")

    # Non-positive expected counts cannot occur for valid configs; skip them
    valid_mask = expected > 0
    exp = expected[valid_mask].astype(float)
    diff = observed[valid_mask].astype(float) - exp
    statistic = float(((diff ** 2) / exp).sum())

    degrees_of_freedom = int(expected.index.max() - expected.index.min())

    return GoodnessOfFitResult(
        chi_squared_statistic=statistic,
        degrees_of_freedom=degrees_of_freedom,
    )
