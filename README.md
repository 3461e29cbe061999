# arbitration_graphs

This library builds decision making from small, simple behaviors. Arbitrators combine those
behaviors into a hierarchy. It has no dependencies outside the standard library.

## Concepts

A **behavior** (`arbitration_graphs.behavior.Behavior`) is an abstract class. A subclass
implements `get_command(time)` and usually overrides two checks:

- `check_invocation_condition(time)`: whether the behavior can start now.
- `check_commitment_condition(time)`: whether the behavior can go on.

Both return `False` unless overridden. `gain_control(time)` and `lose_control(time)` are called when
the behavior becomes active or inactive.

An **arbitrator** is itself a behavior. It holds options, each a behavior with flags, and picks
one of them by a policy:

- `PriorityArbitrator` (`arbitration_graphs.priority_arbitrator`) tries the applicable options in
  the order they were added.
- `CostArbitrator` (`arbitration_graphs.cost_arbitrator`) asks each option's `CostEstimator` for
  `estimate_cost(command, is_active)` and tries the cheapest first. Options of equal cost keep
  their insertion order.
- `RandomArbitrator` (`arbitration_graphs.random_arbitrator`) orders the applicable options by
  weighted sampling without replacement. `add_option` takes a `weight` (default `1.0`, never
  negative). A `random.Random` instance can be passed as `rng` to make the draws repeatable.

An arbitrator stays with its active option while that option's commitment condition holds. An
option flagged `OptionFlags.INTERRUPTABLE` is reconsidered against the others on every call.

### Verification

Every arbitrator takes a `verifier`, an object with `analyze(time, command)` that returns a result
with an `is_ok()` method. The default `PlaceboVerifier` accepts everything. If an option's command
fails verification, or its behavior raises an exception, the arbitrator moves on to the next
option. If no applicable option passes, `NoApplicableOptionPassedVerificationError` is raised.
Options flagged `OptionFlags.FALLBACK` are used even when they fail verification. The errors live
in `arbitration_graphs.arbitrator`: `ArbitrationError`, `InvalidArgumentsError`,
`VerificationError` and `NoApplicableOptionPassedVerificationError`.

## Installation

```
pip install .
```

## Example

```python
from arbitration_graphs.behavior import Behavior
from arbitration_graphs.arbitrator import OptionFlags
from arbitration_graphs.priority_arbitrator import PriorityArbitrator


class Say(Behavior):
    def __init__(self, word, invocable):
        super().__init__(word)
        self.invocable = invocable

    def get_command(self, time):
        return self.name

    def check_invocation_condition(self, time):
        return self.invocable

    def check_commitment_condition(self, time):
        return self.invocable


arbitrator = PriorityArbitrator()
arbitrator.add_option(Say("hello", False), OptionFlags.NO_FLAGS)
arbitrator.add_option(Say("world", True), OptionFlags.NO_FLAGS)

time = 0.0
if arbitrator.check_invocation_condition(time):
    arbitrator.gain_control(time)
    print(arbitrator.get_command(time))  # world

print(arbitrator.to_str(time))
print(arbitrator.to_yaml(time))
```

`to_str` returns a tree of the arbitrator's state, coloured with ANSI codes. The active option is
marked with `->`, and options that failed verification are struck through. `to_yaml` returns the
same state as plain dictionaries and lists. A YAML library of your choice can write it out.

## Grid-world helpers

The `arbitration_graphs.demo` package holds tools for building behaviors in a tile maze:

- `types`: `Position`, `Direction`, `GhostMode`, `TileType`, `Command` and `Move`.
- `maze`: `Maze`, `BaseCell` and `MazeAdapter`. `Maze.from_string(width, height, text)` builds a
  maze from text, where `#` is a wall, `.` a dot, `o` an energizer, `-` a door and a space an empty
  tile. `position_considering_tunnel` wraps a position around the edges if the wrapped cell is
  passable, and otherwise clamps it into the maze.
- `astar`: `AStar`, with `shortest_path`, `maze_distance` and `path_to_closest_dot`.
  `maze_distance` caches its results and returns `AStar.NO_PATH_FOUND` for unreachable goals.
  Searches from or to a wall raise `ValueError`.
- `cluster`: `DotClusterFinder`, which groups connected dots and energizers into `Cluster`s. The
  center of each cluster is the dot closest to the cluster's average position.

## What it does not do

The package is a library only. It has no command-line program and no game loop that runs a
maze game. It has no graphical or web view of an arbitrator's state, and no environment model
that tracks the player and ghosts. Behaviors for a particular game are left for you to write on
top of `Behavior` and the grid-world helpers.

## Tests

```
pip install .[test]
pytest
```