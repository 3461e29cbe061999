"""A* path search through the maze, honouring the wrap-around tunnel."""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass
from typing import Callable, Dict, List, NamedTuple, Optional, Tuple

from .maze import BaseCell, Maze, MazeAdapter
from .types import Move, Path, Position, TileType

NO_PATH_FOUND = 2**31 - 1


@dataclass(eq=False)
class AStarCell(BaseCell):
    visited: bool = False
    distance_from_start: int = NO_PATH_FOUND
    heuristic: float = NO_PATH_FOUND
    move_from_predecessor: Optional[Move] = None

    def total_cost(self) -> float:
        return self.distance_from_start + self.heuristic


class _Snapshot(NamedTuple):
    position: Position
    type: TileType
    distance_from_start: int


_Heap = List[Tuple[float, int, _Snapshot]]
_Heuristic = Callable[[AStarCell], int]


class AStar:
    """Shortest paths and maze distances between cells of a maze."""

    NO_PATH_FOUND = NO_PATH_FOUND

    def __init__(self, maze: Maze) -> None:
        self._maze = maze
        self._distance_cache: Dict[Tuple[Position, Position], int] = {}

    def maze_distance(self, start: Position, goal: Position) -> int:
        """Number of steps from start to goal, or NO_PATH_FOUND; results are cached."""
        key = (start, goal)
        if key in self._distance_cache:
            return self._distance_cache[key]
        path = self.shortest_path(start, goal)
        length = len(path) if path is not None else NO_PATH_FOUND
        self._distance_cache[key] = length
        return length

    def shortest_path(self, start: Position, goal: Position) -> Optional[Path]:
        """The shortest path from start to goal, or None if goal is unreachable."""
        wrapped_start = self._maze.position_considering_tunnel(start)
        wrapped_goal = self._maze.position_considering_tunnel(goal)

        adapter = MazeAdapter(self._maze, AStarCell)
        start_cell = adapter.cell(wrapped_start)
        goal_cell = adapter.cell(wrapped_goal)
        if start_cell.type is TileType.WALL or goal_cell.type is TileType.WALL:
            raise ValueError("Can't compute path from/to wall cell")

        def heuristic(cell: AStarCell) -> int:
            return int(self._optimistic_distance_to_goal(cell, wrapped_goal))

        return self._search(adapter, start_cell, heuristic, lambda top: top.position == wrapped_goal)

    def path_to_closest_dot(self, start: Position) -> Optional[Path]:
        """The path to the nearest dot other than start, or None if there is none."""
        wrapped_start = self._maze.position_considering_tunnel(start)

        adapter = MazeAdapter(self._maze, AStarCell)
        start_cell = adapter.cell(wrapped_start)
        if start_cell.type is TileType.WALL:
            raise ValueError("Can't compute path from wall cell")

        # dots are consumed after the move, so the start cell itself never counts
        return self._search(
            adapter,
            start_cell,
            lambda cell: 0,
            lambda top: top.type is TileType.DOT and top.position != start,
        )

    def update_maze(self, maze: Maze) -> None:
        self._maze = maze

    def _search(
        self,
        adapter: MazeAdapter,
        start_cell: AStarCell,
        heuristic: _Heuristic,
        is_target: Callable[[_Snapshot], bool],
    ) -> Optional[Path]:
        start_cell.distance_from_start = 0
        start_cell.heuristic = heuristic(start_cell)

        open_set: _Heap = []
        counter = itertools.count()
        self._push(open_set, counter, start_cell)

        while open_set:
            top = open_set[0][2]
            if is_target(top):
                return self._extract_path_to(adapter, top.position)
            self._expand_cell(open_set, counter, adapter, heuristic)
        return None

    @staticmethod
    def _push(open_set: _Heap, counter: itertools.count, cell: AStarCell) -> None:
        snapshot = _Snapshot(cell.position, cell.type, cell.distance_from_start)
        heapq.heappush(open_set, (cell.total_cost(), next(counter), snapshot))

    def _expand_cell(
        self, open_set: _Heap, counter: itertools.count, adapter: MazeAdapter, heuristic: _Heuristic
    ) -> None:
        _, _, current = heapq.heappop(open_set)
        adapter.cell(current.position).visited = True

        for move in Move.possible_moves():
            next_position = self._maze.position_considering_tunnel(current.position + move.delta_position)
            if not self._maze.is_passable_cell(next_position):
                continue
            neighbor = adapter.cell(next_position)
            if neighbor.visited:
                continue
            new_distance = current.distance_from_start + 1
            if new_distance < neighbor.distance_from_start:
                neighbor.distance_from_start = new_distance
                neighbor.heuristic = heuristic(neighbor)
                neighbor.move_from_predecessor = move
                self._push(open_set, counter, neighbor)

    def _extract_path_to(self, adapter: MazeAdapter, goal: Position) -> Path:
        path: Path = []
        current = adapter.cell(goal)
        while current.move_from_predecessor is not None:
            move = current.move_from_predecessor
            path.append(move.direction)
            predecessor = self._maze.position_considering_tunnel(current.position - move.delta_position)
            current = adapter.cell(predecessor)
        path.reverse()
        return path

    def _optimistic_distance_to_goal(self, cell: AStarCell, goal: Position) -> float:
        """Manhattan distance, shortened by a possible way through the tunnel."""
        direct = cell.manhattan_distance(goal)
        return min(direct, self._maze.width() - direct)