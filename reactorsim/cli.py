"""Command-line entry point running a reactor simulation."""

from __future__ import annotations

import argparse
import random
import sys

from .config import load_config
from .simulation import Simulation


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="reactorsim", description="Run a nuclear reactor simulation."
    )
    parser.add_argument(
        "config", nargs="?", default="config.txt", help="configuration file"
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument(
        "--delay",
        type=float,
        default=1.0,
        help="real seconds to wait between simulated seconds",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the simulation described by a configuration file."""
    args = _parser().parse_args(argv)
    try:
        config = load_config(args.config)
    except OSError:
        print("Errore nell'apertura del file.", file=sys.stderr)
        return 1
    print("Contenuto della configurazione:")
    print(config.describe())
    print("\nINIZIO SIMULAZIONE")
    simulation = Simulation(
        config,
        rng=random.Random(args.seed),
        report=print,
        interval=max(args.delay, 0.0),
    )
    outcome = simulation.run()
    print(outcome.describe())
    return outcome.exit_code


if __name__ == "__main__":
    sys.exit(main())