"""Basic value types of the maze game: directions, positions, moves and commands."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field
from typing import Iterable, List, Union


class Direction(enum.Enum):
    UP = enum.auto()
    DOWN = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()


class GhostMode(enum.Enum):
    CHASING = enum.auto()
    EATEN = enum.auto()
    SCARED = enum.auto()
    SCATTERING = enum.auto()


class TileType(enum.Enum):
    EMPTY = enum.auto()
    DOT = enum.auto()
    ENERGIZER = enum.auto()
    WALL = enum.auto()
    DOOR = enum.auto()


@dataclass(frozen=True)
class Position:
    """A cell coordinate in the maze grid; y grows downwards."""

    x: int
    y: int

    def distance(self, other: Position) -> float:
        """Euclidean distance to other."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def __add__(self, other: Position) -> Position:
        if not isinstance(other, Position):
            return NotImplemented
        return Position(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Position) -> Position:
        if not isinstance(other, Position):
            return NotImplemented
        return Position(self.x - other.x, self.y - other.y)


Path = List[Direction]
Positions = List[Position]

_DELTA_POSITIONS = {
    Direction.UP: Position(0, -1),
    Direction.DOWN: Position(0, 1),
    Direction.LEFT: Position(-1, 0),
    Direction.RIGHT: Position(1, 0),
}


class Command:
    """A path of directions to follow; the first one is executed next."""

    def __init__(self, path: Union[Direction, Iterable[Direction]]) -> None:
        if isinstance(path, Direction):
            self.path: Path = [path]
        else:
            self.path = list(path)

    def next_direction(self) -> Direction:
        """The direction to take now; raises IndexError for an empty path."""
        return self.path[0]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Command):
            return NotImplemented
        return self.path == other.path

    def __repr__(self) -> str:
        return f"Command({self.path!r})"


@dataclass(frozen=True)
class Move:
    """A step in one direction together with the position change it causes."""

    direction: Direction
    delta_position: Position = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "delta_position", _DELTA_POSITIONS[self.direction])

    @staticmethod
    def possible_moves() -> list[Move]:
        """All moves, in the order up, down, left, right."""
        return [Move(direction) for direction in (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)]