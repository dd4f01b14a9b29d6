# acequia

A small simulation of water management across three regions (North,
South and East) connected by canals. Each region has a water level, a
water need and a capacity. Every hour the open canals move water from
one region to another; a canal strategy decides which canals are open
until every region is neither flooded nor in drought and holds more
water than it needs, or until the time limit runs out.

## Installing

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Commands

### acequia-generate

    acequia-generate [VALUES] [--seed N]

Draws a random time limit (50 to 120 hours) and random starting
conditions for North, South and East (level 0-100, need 50-100,
capacity 100-200, all whole numbers), writes them to `VALUES`
(default `RandomValues.dat` in the current directory) and prints the
starting state. It then prints a prompt and waits for a line of input;
whatever is entered, it goes on to run the simulation on the file it
has just written. `--seed` makes the random values repeatable.

### acequia-simulate

    acequia-simulate [VALUES]

Runs the simulation on an existing values file (default
`RandomValues.dat`). It loads the regions, connects the fixed water
sources (Rio Grande, ABQ Underground Aquifer, Elephant Butte Dam,
Pecos) and the four canals (A: North to South, B: South to East,
C: North to East, D: East to North), runs the canal strategy, prints
the final state, scores the result and shows the leaderboard.

Both commands exit with status 1 and a message on standard error if
the values file cannot be read or written or is malformed.

## Values file format

    Max Simulation Time
    87
    Random Values
    North,53,62,140
    South,40,71,180
    East,25,55,120

The first and third lines are headings. The second line is the number
of hours allowed. Each further non-empty line holds a region's name,
water level, water need and water capacity as integers. At least three
regions are needed; the water sources and canals are wired to the
first three.

## How regions behave

`Region.update_water_level(change)` applies a change and refreshes the
region's flags:

- at or above capacity the level is capped, the region is flooded and
  its `overflow` counter goes up;
- above its need, or at least a fifth of its capacity, it is neither
  flooded nor in drought;
- otherwise it is in drought and its `drought` counter goes up;
- a level below zero is set to zero and the region is in drought.

An open canal moves `flow_rate × seconds / 1000` units per update;
`AcequiaManager.next_hour()` runs every open canal for 3600 seconds,
checks `solved()` and advances `hour`.

## Canal strategy

`acequia.solution.solve_problems(manager)` loops hour by hour while the
simulation is unsolved and `hour < simulation_max`. Each hour it opens
a canal at flow rate 1.0 when the destination is below its need and the
canal's water source holds water, or when the source region holds more
than it needs; other canals are closed.

## Scoring

`AcequiaManager.evaluate_solution()` gives 10 points for each region
that is neither flooded nor in drought and holds at least its need,
subtracts one point for every overflow and drought event counted during
the run (`penalties()`), and adds 50 points if the simulation was
solved. It prints whether and when it was solved, records the score on
the leaderboard under `StudentSolution` and returns it.

## Using the library

```python
from acequia.manager import AcequiaManager
from acequia.solution import solve_problems

manager = AcequiaManager()
manager.initialize_random_parameters("RandomValues.dat")
solve_problems(manager)
print(manager.format_state(), end="")
score = manager.evaluate_solution()
print(manager.format_leaderboard(), end="")
```

`acequia.simulator.run(path)` does all of this in one call and returns
the manager. `acequia.manager.parse_values(text)` parses the contents
of a values file into the time limit and a list of `Region` objects,
and `acequia.generator.write_values(path, rng)` writes a new random
values file.

## What it does not do

The commands always run the built-in strategy in `acequia.solution`;
there is no option to supply a strategy of your own. To try another
one, write a function that drives an `AcequiaManager` as shown above.
The leaderboard holds a single entry and is not stored between runs.