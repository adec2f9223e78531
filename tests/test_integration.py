"""Tests for package imports and integration."""


def test_package_imports():
    """Test that main package components can be imported."""
    from dice_simlab import (
        DiceExperiment,
        DiceSimulator,
        SimulationConfig,
        chi_squared_test,
        expected_counts,
        ways_to_make_sum,
    )

    # Test basic instantiation
    config = SimulationConfig(dice_count=2, sides_count=6, trial_count=100)
    _ = DiceSimulator(seed=config.seed)
    _ = DiceExperiment(config)

    assert ways_to_make_sum(2, 7, 6) == 6
    assert len(expected_counts(config)) == 11
    assert callable(chi_squared_test)


def test_integration_workflow():
    """Test complete workflow from config to simulation to fit."""
    from dice_simlab import (
        DiceSimulator,
        SimulationConfig,
        chi_squared_test,
        expected_counts,
    )

    # Setup
    config = SimulationConfig(dice_count=4, sides_count=6, trial_count=20000, seed=42)

    # Theory and simulation run independently
    expected = expected_counts(config)
    observed = DiceSimulator(seed=config.seed).simulate(config)

    # Evaluate
    fit = chi_squared_test(observed, expected)

    # Validate
    assert fit.degrees_of_freedom == 20
    assert fit.chi_squared_statistic >= 0
    assert int(observed.sum()) == 20000
    assert abs(expected.sum() - 20000) < 1e-6
