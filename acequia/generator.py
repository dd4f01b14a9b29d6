"""Generate random starting values for the simulation and run it."""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path

from .manager import DEFAULT_VALUES_FILE
from .simulator import run

REGION_NAMES = ("North", "South", "East")
TIME_RANGE = (50, 120)
WATER_LEVEL_RANGE = (0.0, 100.0)
WATER_NEED_RANGE = (50.0, 100.0)
WATER_CAPACITY_RANGE = (100.0, 200.0)

TIME_HEADING = "Max Simulation Time"
VALUES_HEADING = "Random Values"

RegionValues = tuple[str, int, int, int]


def generate_values(rng: random.Random | None = None) -> tuple[int, list[RegionValues]]:
    """Draw a simulation limit and ``(name, level, need, capacity)`` for each region."""
    rng = rng or random.Random()
    simulation_max = rng.randint(*TIME_RANGE)
    regions = [
        (
            name,
            int(rng.uniform(*WATER_LEVEL_RANGE)),
            int(rng.uniform(*WATER_NEED_RANGE)),
            int(rng.uniform(*WATER_CAPACITY_RANGE)),
        )
        for name in REGION_NAMES
    ]
    return simulation_max, regions


def format_values_file(simulation_max: int, regions: list[RegionValues]) -> str:
    """Render the values file that the manager reads."""
    lines = [TIME_HEADING, str(simulation_max), VALUES_HEADING]
    lines.extend(f"{name},{level},{need},{capacity}" for name, level, need, capacity in regions)
    return "\n".join(lines) + "\n"


def write_values(
    path: str | Path = DEFAULT_VALUES_FILE, rng: random.Random | None = None
) -> tuple[int, list[RegionValues]]:
    """Generate values, write them to ``path`` and return them."""
    simulation_max, regions = generate_values(rng)
    Path(path).write_text(format_values_file(simulation_max, regions))
    return simulation_max, regions


def _describe(simulation_max: int, regions: list[RegionValues]) -> str:
    lines = ["Current State of the Regions: ", "------------------------------"]
    lines.extend(
        f"Region: {name}, Water Level: {level}, Water Need: {need}, Water Capacity: {capacity}"
        for name, level, need, capacity in regions
    )
    lines.extend(
        [
            "------------------------------------------------------------",
            "Please write your solution in the solution module.",
            "Your code must solve each region's water needs within the following simulation time: "
            f"{simulation_max}",
            "When you have saved your code and ready to run the simulation, you may press Y to run.",
        ]
    )
    return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    """Write a values file, show it, wait for the user and run the simulation."""
    parser = argparse.ArgumentParser(description="Generate starting values and run the simulation.")
    parser.add_argument(
        "values",
        nargs="?",
        default=DEFAULT_VALUES_FILE,
        help="values file to write",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the random generator")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    try:
        simulation_max, regions = write_values(args.values, rng)
    except OSError as exc:
        print(f"could not write values: {exc}", file=sys.stderr)
        return 1
    print(_describe(simulation_max, regions), end="")

    print("Press Y to test your solveProblems function.")
    try:
        input()
    except EOFError:
        pass
    # Any answer continues to the simulation.
    try:
        run(args.values)
    except (OSError, ValueError) as exc:
        print(f"execution failed! {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())