"""Growing-tree carving of perfect mazes."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from labyrinth import config

from .base import BaseMazeGenerator, GeneratedMazeData

if TYPE_CHECKING:
    from labyrinth.types import TileCoord
    from labyrinth.util.rng import RNG

logger = logging.getLogger(__name__)

# Neighbor scan order. Fixed so a seed always carves the same maze.
_NEIGHBOR_STEPS = ((0, -1), (1, 0), (0, 1), (-1, 0))


class GrowingTreeGenerator(BaseMazeGenerator):
    """Carves a spanning tree by growing it from a list of active cells.

    Each step picks an active cell to extend: the most recently added one
    with probability ``newest_bias``, otherwise a uniformly random one. The
    cell is joined to a random unvisited neighbor, or retired when it has
    none. A bias of 1.0 degenerates to a recursive backtracker (long, winding
    corridors) and 0.0 to a Prim-like maze (short dead ends everywhere).
    """

    def __init__(
        self,
        width: TileCoord,
        height: TileCoord,
        wall_size: int,
        passage_size: int,
        rng: RNG,
        *,
        newest_bias: float = config.GROWING_TREE_NEWEST_BIAS,
        margin: int = config.MARGIN_SIZE,
    ) -> None:
        super().__init__(width, height, wall_size, passage_size, margin)
        if not 0.0 <= newest_bias <= 1.0:
            raise ValueError(f"newest_bias must be in [0, 1], got {newest_bias}")
        self.rng = rng
        self.newest_bias = newest_bias

    def _pick_active(self, active: list[tuple[int, int]]) -> int:
        if self.rng.random() < self.newest_bias:
            return len(active) - 1
        return self.rng.randrange(len(active))

    def _unvisited_neighbors(
        self, visited: np.ndarray, cx: int, cy: int
    ) -> list[tuple[int, int]]:
        neighbors = []
        for dx, dy in _NEIGHBOR_STEPS:
            nx, ny = cx + dx, cy + dy
            if 0 <= nx < self.width and 0 <= ny < self.height and not visited[nx, ny]:
                neighbors.append((nx, ny))
        return neighbors

    def generate(self) -> GeneratedMazeData:
        walkable = np.zeros(
            (self.raster_width, self.raster_height), dtype=np.bool_, order="F"
        )
        visited = np.zeros((self.width, self.height), dtype=np.bool_, order="F")

        start = (self.rng.randrange(self.width), self.rng.randrange(self.height))
        visited[start] = True
        self._carve_cell(walkable, *start)
        active = [start]

        while active:
            index = self._pick_active(active)
            cell = active[index]
            neighbors = self._unvisited_neighbors(visited, *cell)
            if not neighbors:
                active.pop(index)
                continue

            nxt = self.rng.choice(neighbors)
            visited[nxt] = True
            self._carve_cell(walkable, *nxt)
            self._carve_passage(walkable, cell, nxt)
            active.append(nxt)

        logger.debug(
            f"Carved {self.width}x{self.height} growing-tree maze "
            f"({self.raster_width}x{self.raster_height} raster)"
        )
        return GeneratedMazeData(
            walkable=walkable,
            width=self.width,
            height=self.height,
            wall_size=self.wall_size,
            passage_size=self.passage_size,
            margin=self.margin,
        )
