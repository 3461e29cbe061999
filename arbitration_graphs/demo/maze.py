"""A rectangular maze of tiles and per-cell bookkeeping for search algorithms."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Generic, Iterable, TypeVar

from .types import Position, TileType

_TILE_CHARACTERS = {
    "#": TileType.WALL,
    " ": TileType.EMPTY,
    ".": TileType.DOT,
    "o": TileType.ENERGIZER,
    "-": TileType.DOOR,
}


def _truncated_remainder(numerator: int, denominator: int) -> int:
    remainder = abs(numerator) % abs(denominator)
    return -remainder if numerator < 0 else remainder


def non_negative_modulus(numerator: int, denominator: int) -> int:
    """Modulus that lies in [0, denominator - 1] whenever denominator is positive."""
    return _truncated_remainder(denominator + _truncated_remainder(numerator, denominator), denominator)


class Maze:
    """An immutable grid of tiles, indexed by Position."""

    def __init__(self, tiles: Iterable[Iterable[TileType]]) -> None:
        rows = tuple(tuple(TileType(tile) for tile in row) for row in tiles)
        if not rows or not rows[0]:
            raise ValueError("A maze needs at least one tile")
        if any(len(row) != len(rows[0]) for row in rows):
            raise ValueError("All rows of a maze must have the same length")
        self._rows = rows

    @classmethod
    def from_string(cls, width: int, height: int, text: str) -> Maze:
        """Build a maze from row-major characters: '#' wall, ' ' empty, '.' dot, 'o' energizer, '-' door."""
        if width <= 0 or height <= 0 or len(text) != width * height:
            raise ValueError(f"Expected {width}x{height} characters, got {len(text)}")
        try:
            tiles = [_TILE_CHARACTERS[char] for char in text]
        except KeyError as error:
            raise ValueError(f"Unknown tile character {error.args[0]!r}") from None
        return cls(tiles[row * width : (row + 1) * width] for row in range(height))

    def at(self, position: Position) -> TileType:
        if not self.is_in_bounds(position):
            raise IndexError(f"{position} is outside the maze")
        return self._rows[position.y][position.x]

    def __getitem__(self, position: Position) -> TileType:
        return self.at(position)

    def width(self) -> int:
        return len(self._rows[0])

    def height(self) -> int:
        return len(self._rows)

    def position_considering_tunnel(self, position: Position) -> Position:
        """Wrap a position around the maze edges if it lands on a passable cell, else clamp it."""
        wrapped = Position(
            non_negative_modulus(position.x, self.width()), non_negative_modulus(position.y, self.height())
        )
        if self.is_passable_cell(wrapped):
            return wrapped
        return Position(
            min(max(position.x, 0), self.width() - 1),
            min(max(position.y, 0), self.height() - 1),
        )

    def is_dot(self, position: Position) -> bool:
        return self.at(position) is TileType.DOT

    def is_wall(self, position: Position) -> bool:
        return self.at(position) is TileType.WALL

    def is_in_bounds(self, position: Position) -> bool:
        return 0 <= position.x < self.width() and 0 <= position.y < self.height()

    def is_passable_cell(self, position: Position) -> bool:
        return self.is_in_bounds(position) and not self.is_wall(position)


@dataclass(eq=False)
class BaseCell:
    position: Position
    type: TileType

    def manhattan_distance(self, other: Position) -> float:
        return abs(self.position.x - other.x) + abs(self.position.y - other.y)

    def is_consumable(self) -> bool:
        return self.type in (TileType.DOT, TileType.ENERGIZER)


CellT = TypeVar("CellT", bound=BaseCell)


class MazeAdapter(Generic[CellT]):
    """Stores a lazily created cell object per maze position."""

    def __init__(self, maze: Maze, cell_type: Callable[[Position, TileType], CellT] = BaseCell) -> None:
        self._maze = maze
        self._cell_type = cell_type
        self._cells: Dict[Position, CellT] = {}

    def cell(self, position: Position) -> CellT:
        cell = self._cells.get(position)
        if cell is None:
            cell = self._cell_type(position, self._maze[position])
            self._cells[position] = cell
        return cell