"""Regions, water sources and canals, and the manager that runs the simulation."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

DEFAULT_VALUES_FILE = "RandomValues.dat"

DROUGHT_FRACTION = 0.2
SECONDS_PER_HOUR = 3600
# Flow is measured in gallons; dividing keeps changes readable during a run.
FLOW_DIVISOR = 1000
SOLVED_REGION_POINTS = 10.0
SOLVED_BONUS = 50
LEADERBOARD_ENTRY = "StudentSolution"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class WaterSourceType(Enum):
    """Kinds of water source."""

    RIVER = "river"
    UNDERGROUND = "underground"
    DAM = "dam"


@dataclass(eq=False)
class WaterSource:
    """A river, aquifer or dam that supplies one or more regions."""

    name: str
    type: WaterSourceType
    water_level: float

    def update_water_level(self, change: float) -> None:
        """Add ``change`` (possibly negative) to the water level."""
        self.water_level += change


@dataclass(eq=False)
class Region:
    """A region with a water level, a need and a capacity."""

    name: str
    water_level: float
    water_need: float
    water_capacity: float
    is_flooded: bool = False
    is_in_drought: bool = False
    overflow: int = 0
    drought: int = 0
    supplied_water: list[WaterSource] = field(default_factory=list, repr=False)

    def update_water_level(self, change: float) -> None:
        """Apply a change to the water level and refresh the flood and drought flags."""
        self.water_level += change
        level = self.water_level
        if level >= self.water_capacity:
            self.water_level = self.water_capacity
            self.is_flooded = True
            self.is_in_drought = False
            self.overflow += 1
        elif self.water_need < level < self.water_capacity:
            self.is_flooded = False
            self.is_in_drought = False
        elif level >= DROUGHT_FRACTION * self.water_capacity:
            self.is_flooded = False
            self.is_in_drought = False
        elif level <= DROUGHT_FRACTION * self.water_capacity:
            self.is_in_drought = True
            self.is_flooded = False
            self.drought += 1
        if self.water_level < 0:
            self.water_level = 0
            self.is_in_drought = True
            self.is_flooded = False

    def add_water_source(self, source: WaterSource) -> None:
        """Record a water source that supplies this region."""
        self.supplied_water.append(source)


@dataclass(eq=False)
class Canal:
    """A canal that carries water from one region to another while open."""

    name: str
    source_region: Region
    destination_region: Region
    water_source: WaterSource
    flow_rate: float = 0.0
    is_open: bool = False

    def set_flow_rate(self, rate: float) -> None:
        """Set the flow rate in gallons per second."""
        self.flow_rate = rate

    def toggle_open(self, is_open: bool) -> None:
        """Open or close the canal."""
        self.is_open = is_open

    def update_water(self, time: int) -> None:
        """Move water for ``time`` seconds if the canal is open."""
        if not self.is_open:
            return
        change = 0.0
        for _ in range(time):
            change += self.flow_rate
        amount = change / FLOW_DIVISOR
        self.source_region.update_water_level(-amount)
        self.destination_region.update_water_level(amount)


def _stoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    return int(match.group(1))


def parse_values(text: str) -> tuple[int, list[Region]]:
    """Parse a values file into the simulation limit and its regions.

    The first and third lines are headings, the second holds the maximum
    simulation time and every further non-empty line is
    ``name,level,need,capacity``.
    """
    lines = text.splitlines()
    if len(lines) < 2:
        raise ValueError("values file has no maximum simulation time")
    simulation_max = _stoi(lines[1])
    regions = []
    for line in lines[3:]:
        if not line:
            continue
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"incomplete region line: {line!r}")
        name, level, need, capacity = fields[:4]
        regions.append(Region(name, float(_stoi(level)), float(_stoi(need)), float(_stoi(capacity))))
    return simulation_max, regions


def _format_number(value: float) -> str:
    return f"{value:g}"


class AcequiaManager:
    """Holds the simulation state and advances it hour by hour."""

    def __init__(self) -> None:
        self.regions: list[Region] = []
        self.water_sources: list[WaterSource] = []
        self.canals: list[Canal] = []
        self.leaderboard: dict[str, float] = {}
        self.solved_time = 0
        self.hour = 0
        self.simulation_max = 0
        self.is_solved = False

    def initialize_random_parameters(self, path: str | Path = DEFAULT_VALUES_FILE) -> None:
        """Set up regions from ``path``, then sources, canals, flags and time."""
        self.initialize_regions(path)
        self.initialize_water_sources()
        self.initialize_canals()
        self.initialize_constraints()
        self.initialize_time()

    def initialize_time(self) -> None:
        """Reset the clock and the solved state."""
        self.hour = 0
        self.solved_time = 0
        self.is_solved = False

    def initialize_regions(self, path: str | Path = DEFAULT_VALUES_FILE) -> None:
        """Read the simulation limit and the regions from a values file."""
        simulation_max, regions = parse_values(Path(path).read_text())
        self.simulation_max = simulation_max
        self.regions.extend(regions)

    def _require_regions(self) -> None:
        if len(self.regions) < 3:
            raise ValueError("at least three regions are required")

    def initialize_water_sources(self) -> None:
        """Create the water sources and connect them to the regions."""
        self._require_regions()
        self.water_sources.extend(
            [
                WaterSource("Rio Grande", WaterSourceType.RIVER, 100.0),
                WaterSource("ABQ Underground Aquifer", WaterSourceType.UNDERGROUND, 200.0),
                WaterSource("Elephant Butte Dam", WaterSourceType.DAM, 150.0),
                WaterSource("Pecos", WaterSourceType.RIVER, 80.0),
            ]
        )
        regions, sources = self.regions, self.water_sources
        regions[0].add_water_source(sources[0])
        regions[1].add_water_source(sources[0])
        regions[0].add_water_source(sources[1])
        regions[1].add_water_source(sources[2])
        regions[0].add_water_source(sources[3])
        regions[2].add_water_source(sources[3])

    def initialize_canals(self) -> None:
        """Create the canals between the regions."""
        self._require_regions()
        if len(self.water_sources) < 4:
            raise ValueError("water sources must be initialized before canals")
        regions, sources = self.regions, self.water_sources
        self.canals.extend(
            [
                Canal("Canal A", regions[0], regions[1], sources[0]),
                Canal("Canal B", regions[1], regions[2], sources[2]),
                Canal("Canal C", regions[0], regions[2], sources[3]),
                Canal("Canal D", regions[2], regions[0], sources[2]),
            ]
        )

    def initialize_constraints(self) -> None:
        """Set every region's flags from its level and clear its counters."""
        for region in self.regions:
            region.update_water_level(0)
            region.overflow = 0
            region.drought = 0

    def next_hour(self) -> None:
        """Run the open canals for one hour and check whether the task is solved."""
        for canal in self.canals:
            if canal.is_open:
                canal.update_water(SECONDS_PER_HOUR)
        self.is_solved = self.solved()
        if self.is_solved:
            self.solved_time = self.hour
        self.hour += 1

    def solved(self) -> bool:
        """Return whether every region is neither flooded, dry nor short of its need."""
        return all(
            not (region.is_flooded or region.is_in_drought or region.water_level <= region.water_need)
            for region in self.regions
        )

    def penalties(self) -> int:
        """Count every overflow and drought event over all regions."""
        return sum(region.overflow + region.drought for region in self.regions)

    def _state_lines(self) -> Iterator[str]:
        yield "Current State: "
        yield "-----------------"
        for region in self.regions:
            yield (
                f"Region: {region.name}, Water Level: {_format_number(region.water_level)}, "
                f"Water Need: {_format_number(region.water_need)}, "
                f"Flooded: {'Yes' if region.is_flooded else 'No'}, "
                f"Drought: {'Yes' if region.is_in_drought else 'No'}"
            )
        yield "------------------"

    def format_state(self) -> str:
        """Describe the current state of each region."""
        return "".join(f"{line}\n" for line in self._state_lines())

    def display_state(self) -> None:
        """Print the current state of each region, one line at a time."""
        for line in self._state_lines():
            print(line)

    def evaluate_solution(self) -> float:
        """Score the run, record it on the leaderboard and return it."""
        score = sum(
            SOLVED_REGION_POINTS
            for region in self.regions
            if not region.is_flooded and not region.is_in_drought and region.water_level >= region.water_need
        )
        score -= self.penalties()
        if self.is_solved:
            score += SOLVED_BONUS
            print(f"Time solved = {self.solved_time}")
        else:
            print("Not all regions were solved in time.")
        self.leaderboard[LEADERBOARD_ENTRY] = score
        print("--------------------\n")
        return score

    def _leaderboard_lines(self) -> Iterator[str]:
        yield "----------------"
        yield "Leaderboard: "
        for name, score in sorted(self.leaderboard.items()):
            yield f"{name}:{_format_number(score)}"

    def format_leaderboard(self) -> str:
        """Describe the leaderboard, entries in name order."""
        return "".join(f"{line}\n" for line in self._leaderboard_lines())

    def display_leaderboard(self) -> None:
        """Print the leaderboard, one entry per line."""
        for line in self._leaderboard_lines():
            print(line)