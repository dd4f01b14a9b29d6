"""Run the simulation with the canal strategy and report the result."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .manager import DEFAULT_VALUES_FILE, AcequiaManager
from .solution import solve_problems


def run(path: str | Path = DEFAULT_VALUES_FILE) -> AcequiaManager:
    """Set up a manager from ``path``, solve, print the results and return it."""
    manager = AcequiaManager()
    manager.initialize_random_parameters(path)
    solve_problems(manager)
    manager.display_state()
    manager.evaluate_solution()
    manager.display_leaderboard()
    return manager


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point; returns the exit status."""
    parser = argparse.ArgumentParser(description="Run the water management simulation.")
    parser.add_argument(
        "values",
        nargs="?",
        default=DEFAULT_VALUES_FILE,
        help="values file with the simulation limit and regions",
    )
    args = parser.parse_args(argv)
    try:
        run(args.values)
    except (OSError, ValueError) as exc:
        print(f"simulation failed: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())