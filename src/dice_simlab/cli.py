"""Command Line Interface for Dice SimLab."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, List, Optional

from . import __version__
from .config import MAX_DICE, MAX_SIDES, MIN_SIDES, SimulationConfig
from .report import format_report
from .simulation import DiceExperiment


def setup_logging(verbose: bool = False) -> None:
    """Setup logging configuration.

    Args:
        verbose: Enable verbose logging
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Dice roll simulation with a Chi-Squared goodness-of-fit test",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Prompt for any missing parameters
  dice-simlab

  # Run 2d6 for a million trials
  dice-simlab --dice 2 --sides 6 --trials 1000000 --seed 123

  # Run from a config file, overriding the trial count
  dice-simlab --config config.toml --trials 50000

  # Generate sample config
  dice-simlab --generate-config sample_config.toml
        """
    )

    # Simulation parameters
    parser.add_argument(
        "--dice", "-d",
        type=int,
        help=f"Number of dice to roll (1-{MAX_DICE})"
    )
    parser.add_argument(
        "--sides", "-s",
        type=int,
        help=f"Number of sides on each die ({MIN_SIDES}-{MAX_SIDES})"
    )
    parser.add_argument(
        "--trials", "-t",
        type=int,
        help="Total number of trials"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for reproducibility"
    )

    # Configuration
    parser.add_argument(
        "--config", "-c",
        type=Path,
        help="Configuration file (TOML or YAML)"
    )

    # Utility commands
    parser.add_argument(
        "--generate-config",
        type=Path,
        help="Generate sample configuration file and exit"
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress bar while rolling"
    )
    parser.add_argument(
        "--no-input",
        action="store_true",
        help="Fail instead of prompting for missing parameters"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    return parser


def generate_sample_config(config_path: Path) -> None:
    """Generate a sample configuration file.

    Args:
        config_path: Path to save the configuration file
    """
    config_content = f"""# Dice SimLab Configuration File
# Parameters for the dice roll simulation

dice_count = 2          # Number of dice to roll (1-{MAX_DICE})
sides_count = 6         # Number of sides on each die ({MIN_SIDES}-{MAX_SIDES})
trial_count = 1000000   # Total number of trials

# Random seed for reproducibility (or set DICE_SIMLAB_SEED env var)
# seed = 42
"""

    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w") as f:
        f.write(config_content)

    print(f"Sample configuration generated: {config_path}")
    print("Edit the file to customize your simulation parameters.")


def prompt_int(
    prompt: str,
    low: int,
    high: Optional[int] = None,
    input_func: Callable[[str], str] = input,
) -> int:
    """Prompt until the answer is an integer in [low, high].

    Args:
        prompt: Text shown before each attempt
        low: Smallest accepted value
        high: Largest accepted value, or None for no upper bound
        input_func: Source of answers

    Returns:
        The first valid answer
    """
    while True:
        answer = input_func(prompt).strip()
        try:
            value = int(answer)
        except ValueError:
            continue
        if value >= low and (high is None or value <= high):
            return value


def resolve_config(
    args: argparse.Namespace,
    parser: argparse.ArgumentParser,
    input_func: Callable[[str], str] = input,
) -> SimulationConfig:
    """Build a config from the config file, command line, and prompts, in that order."""
    params = {"dice_count": None, "sides_count": None, "trial_count": None, "seed": None}

    if args.config:
        if not args.config.exists():
            parser.error(f"Config file does not exist: {args.config}")
        logging.getLogger(__name__).info(f"Loading configuration from {args.config}")
        params.update(SimulationConfig.from_file(args.config).to_dict())

    # Override config with command line arguments if provided
    cli_values = {
        "dice_count": args.dice,
        "sides_count": args.sides,
        "trial_count": args.trials,
        "seed": args.seed,
    }
    params.update({k: v for k, v in cli_values.items() if v is not None})

    prompts = [
        ("dice_count", "  - Number of dice to roll (e.g., 2): ", 1, MAX_DICE),
        ("sides_count", "  - Number of sides on each die (e.g., 6): ", MIN_SIDES, MAX_SIDES),
        ("trial_count", "  - Total number of trials (e.g., 1000000): ", 1, None),
    ]
    missing = [p for p in prompts if params[p[0]] is None]
    if missing:
        if args.no_input:
            names = ", ".join(name for name, *_ in missing)
            parser.error(f"Missing simulation parameters: {names}")
        print("Enter simulation parameters:")
        for name, prompt, low, high in missing:
            params[name] = prompt_int(prompt, low, high, input_func)

    return SimulationConfig(**params)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        # Handle config generation
        if args.generate_config:
            generate_sample_config(args.generate_config)
            return 0

        config = resolve_config(args, parser)
        logger.info(f"Simulation configuration: {config}")

        results = DiceExperiment(config, show_progress=args.progress).run()

        print()
        print(format_report(results))

        return 0

    except KeyboardInterrupt:
        logger.info("Simulation interrupted by user")
        return 1
    except Exception as e:
        logger.error(f"Simulation failed: {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
