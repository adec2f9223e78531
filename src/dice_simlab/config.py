"""Configuration handling for Dice SimLab."""

import os
import sys
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

import pandas as pd
import yaml

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

MAX_DICE = 10
MIN_SIDES = 2
MAX_SIDES = 100

SEED_ENV_VAR = "DICE_SIMLAB_SEED"


def _check_int(name: str, value: Any, low: int, high: Optional[int] = None) -> None:
    # bool is an int subclass; "true" dice counts are config mistakes
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value < low or (high is not None and value > high):
        bounds = f"[{low}, {high}]" if high is not None else f">= {low}"
        raise ValueError(f"{name} must be {bounds}, got {value}")


@dataclass(frozen=True)
class SimulationConfig:
    """Parameters for one dice-rolling run.

    Attributes:
        dice_count: Number of dice rolled per trial (1-10)
        sides_count: Number of faces on each die (2-100)
        trial_count: Number of trials to simulate (at least 1)
        seed: Random seed for the simulator. Falls back to the
            DICE_SIMLAB_SEED environment variable, then to OS entropy.
    """

    dice_count: int
    sides_count: int
    trial_count: int
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        _check_int("dice_count", self.dice_count, 1, MAX_DICE)
        _check_int("sides_count", self.sides_count, MIN_SIDES, MAX_SIDES)
        _check_int("trial_count", self.trial_count, 1)

        if self.seed is None:
            env_seed = os.getenv(SEED_ENV_VAR)
            if env_seed:
                try:
                    object.__setattr__(self, "seed", int(env_seed))
                except ValueError:
                    # Invalid environment variable, keep OS entropy
                    pass
        elif isinstance(self.seed, bool) or not isinstance(self.seed, int):
            raise ValueError(f"seed must be an integer, got {self.seed!r}")

    @property
    def min_sum(self) -> int:
        return self.dice_count

    @property
    def max_sum(self) -> int:
        return self.dice_count * self.sides_count

    @property
    def degrees_of_freedom(self) -> int:
        return self.max_sum - self.min_sum

    @property
    def total_outcomes(self) -> int:
        """Number of equally likely ordered outcomes, sides ** dice."""
        return self.sides_count ** self.dice_count

    @property
    def sum_index(self) -> pd.RangeIndex:
        """Index covering every attainable sum, ascending."""
        return pd.RangeIndex(self.min_sum, self.max_sum + 1, name="sum")

    @property
    def notation(self) -> str:
        return f"{self.dice_count}d{self.sides_count}"

    @classmethod
    def from_file(cls, config_path: Union[str, Path]) -> "SimulationConfig":
        """Load configuration from a TOML or YAML file.

        Args:
            config_path: Path to configuration file

        Returns:
            SimulationConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If unsupported file format or invalid configuration
        """
        config_path = Path(config_path)

        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        if config_path.suffix.lower() == ".toml":
            with open(config_path, "rb") as f:
                config_data = tomllib.load(f)
        elif config_path.suffix.lower() in [".yaml", ".yml"]:
            with open(config_path, "r") as f:
                config_data = yaml.safe_load(f) or {}
        else:
            raise ValueError(
                f"Unsupported configuration file format: {config_path.suffix}. "
                "Supported formats: .toml, .yaml, .yml"
            )

        if not isinstance(config_data, dict):
            raise ValueError(f"Configuration file must contain a mapping: {config_path}")

        # Handle nested [simulation] section
        simulation_section = config_data.pop("simulation", {})
        config_data.update(simulation_section)

        return cls.from_dict(config_data)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "SimulationConfig":
        """Create configuration from dictionary.

        Raises:
            ValueError: On unknown or missing keys, or invalid values
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(config_dict) - known)
        if unknown:
            raise ValueError(f"Unknown configuration keys: {unknown}")

        required = {f.name for f in fields(cls) if f.name != "seed"}
        missing = sorted(required - set(config_dict))
        if missing:
            raise ValueError(f"Missing required configuration keys: {missing}")

        return cls(**config_dict)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def with_overrides(self, **overrides: Any) -> "SimulationConfig":
        """Return a new validated config; None values leave fields unchanged."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)
