"""Tests for DiceSimulator."""

import numpy as np
import pytest

from dice_simlab.config import SimulationConfig
from dice_simlab.simulator import DiceSimulator


def test_round_robin_single_die(round_robin_rng):
    """A 1..6 round-robin source gives exactly 1000 of each face."""
    config = SimulationConfig(dice_count=1, sides_count=6, trial_count=6000)
    simulator = DiceSimulator(rng=round_robin_rng)

    observed = simulator.simulate(config)

    assert list(observed.index) == [1, 2, 3, 4, 5, 6]
    assert (observed == 1000).all()


def test_round_robin_across_batches(round_robin_rng):
    """Generator state carries across batches without re-seeding."""
    rng = round_robin_rng
    config = SimulationConfig(dice_count=1, sides_count=6, trial_count=6000)
    simulator = DiceSimulator(rng=rng, batch_size=7)

    observed = simulator.simulate(config)

    assert (observed == 1000).all()
    assert rng.position == 6000
    assert all(call[:2] == (0, 6) for call in rng.calls)


def test_faces_shifted_into_range(round_robin_rng):
    """Draws in [0, sides) become faces in [1, sides]."""
    rng = round_robin_rng
    config = SimulationConfig(dice_count=2, sides_count=3, trial_count=3)
    observed = DiceSimulator(rng=rng).simulate(config)

    # Rolls: (1, 2), (3, 1), (2, 3) -> sums 3, 4, 5
    assert observed.to_dict() == {2: 0, 3: 1, 4: 1, 5: 1, 6: 0}


@pytest.mark.parametrize(
    "dice, sides, trials",
    [(1, 6, 1), (2, 6, 10000), (3, 20, 12345), (10, 100, 2500)],
)
def test_total_equals_trials(dice, sides, trials):
    """Every trial is counted exactly once."""
    config = SimulationConfig(dice_count=dice, sides_count=sides, trial_count=trials)
    observed = DiceSimulator(seed=42, batch_size=1000).simulate(config)

    assert int(observed.sum()) == trials
    assert list(observed.index) == list(range(dice, dice * sides + 1))
    assert observed.dtype == np.int64
    assert observed.name == "observed"
    assert (observed >= 0).all()


def test_repeated_runs_keep_total():
    """Counts may differ between runs; totals never do."""
    config = SimulationConfig(dice_count=3, sides_count=6, trial_count=5000)
    simulator = DiceSimulator(seed=7)

    first = simulator.simulate(config)
    second = simulator.simulate(config)

    assert int(first.sum()) == int(second.sum()) == 5000
    assert not first.equals(second)


def test_deterministic_with_seed():
    """Same seed produces identical counts."""
    config = SimulationConfig(dice_count=2, sides_count=6, trial_count=2000)

    first = DiceSimulator(seed=42).simulate(config)
    second = DiceSimulator(seed=42).simulate(config)

    assert first.equals(second)


def test_progress_bar(capsys):
    """Progress bar does not change the counts."""
    config = SimulationConfig(dice_count=2, sides_count=6, trial_count=300)

    quiet = DiceSimulator(seed=1, batch_size=100).simulate(config)
    shown = DiceSimulator(seed=1, batch_size=100, show_progress=True).simulate(config)

    assert quiet.equals(shown)
    assert "Rolling dice" in capsys.readouterr().err


def test_invalid_batch_size():
    with pytest.raises(ValueError, match="batch_size"):
        DiceSimulator(batch_size=0)
