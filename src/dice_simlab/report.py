"""Text report for a dice simulation run."""

from .simulation import SimulationResults

BAR_WIDTH = 30
RULE = "=" * 81


def render_bar(observed: float, max_expected: float, width: int = BAR_WIDTH) -> str:
    """Bar of '#' scaled so the most likely sum's expected count spans `width`."""
    if max_expected <= 0:
        return ""
    return "#" * int((observed / max_expected) * width)


def format_report(results: SimulationResults) -> str:
    """Format the expected/observed table and the Chi-Squared summary."""
    config = results.config
    frame = results.to_frame()
    max_expected = float(frame["expected"].max())

    lines = [
        f"--- Simulation Results for {config.trial_count} trials "
        f"of rolling {config.notation} ---",
        RULE,
        f"| {'Sum':<4} | {'Expected Count':<18} | {'Observed Count':<18} | Distribution Bar",
        f"|------|{'-' * 20}|{'-' * 20}|{'-' * 32}",
    ]
    for total, row in frame.iterrows():
        bar = render_bar(row["observed"], max_expected)
        lines.append(
            f"| {int(total):<4d} | {row['expected']:<18.2f} | {int(row['observed']):<18d} | {bar}"
        )

    lines += [
        RULE,
        "Statistical Analysis:",
        f"  - Chi-Squared (χ²) Statistic: {results.fit.chi_squared_statistic:.4f}",
        f"  - Degrees of Freedom: {results.fit.degrees_of_freedom}",
        "",
        "Interpretation: A smaller Chi-Squared value indicates a better fit between",
        "the observed results and the theoretical probabilities. As the number of",
        "trials increases, this value should approach the degrees of freedom.",
    ]
    return "\n".join(lines)
