"""Clusters of dots that are connected without passing walls or empty cells."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, List

from .maze import BaseCell, Maze, MazeAdapter
from .types import Move, Position, Positions


@dataclass(eq=False)
class ClusterCell(BaseCell):
    visited: bool = False


class Cluster:
    """A connected set of dots and the dot closest to their average position."""

    def __init__(self, cluster_id: int, dots: Iterable[Position]) -> None:
        self.id = cluster_id
        self.dots: Positions = list(dots)
        self.center = self._find_cluster_center()

    def is_in_cluster(self, target: Position) -> bool:
        return target in self.dots

    def _find_cluster_center(self) -> Position:
        if not self.dots:
            raise ValueError("Cannot find center of an empty cluster")
        count = len(self.dots)
        average = Position(sum(dot.x for dot in self.dots) // count, sum(dot.y for dot in self.dots) // count)
        return min(self.dots, key=average.distance)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cluster):
            return NotImplemented
        return self.id == other.id and self.dots == other.dots

    def __repr__(self) -> str:
        return f"Cluster(id={self.id}, dots={self.dots!r}, center={self.center!r})"


class DotClusterFinder:
    """Finds all dot clusters of a maze once, on construction."""

    def __init__(self, maze: Maze) -> None:
        self._maze = maze
        self._clusters = self._find_dot_clusters()

    def clusters(self) -> List[Cluster]:
        return list(self._clusters)

    def _find_dot_clusters(self) -> List[Cluster]:
        adapter = MazeAdapter(self._maze, ClusterCell)
        clusters: List[Cluster] = []
        for row in range(self._maze.height()):
            for column in range(self._maze.width()):
                start_cell = adapter.cell(Position(column, row))
                if not start_cell.is_consumable() or start_cell.visited:
                    continue
                clusters.append(Cluster(len(clusters), self._expand_dot(start_cell, adapter)))
        return clusters

    def _expand_dot(self, start: ClusterCell, adapter: MazeAdapter) -> Positions:
        dots: Positions = []
        queue = deque([start.position])
        while queue:
            position = queue.popleft()
            current = adapter.cell(position)
            if current.visited:
                continue
            current.visited = True
            dots.append(position)

            for move in Move.possible_moves():
                next_position = self._maze.position_considering_tunnel(position + move.delta_position)
                if not self._maze.is_passable_cell(next_position):
                    continue
                neighbor = adapter.cell(next_position)
                if neighbor.is_consumable() and not neighbor.visited:
                    queue.append(next_position)
        return dots