"""Base classes for maze generation."""

from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from labyrinth.types import TileCoord


class MazeGenerationError(Exception):
    """Raised when a maze level cannot be generated.

    This covers carving that cannot complete inside the grid (an opening
    scan that runs off the raster, a room that cannot fit between the
    margins) and failures to persist the rendered level.
    """


@dataclass
class GeneratedMazeData:
    """A container for the raw raster produced by a maze generator.

    Attributes:
        walkable: Boolean array of shape (raster_width, raster_height), True
            for traversable cells.
        width: Maze width in maze cells.
        height: Maze height in maze cells.
        wall_size: Raster cells per wall.
        passage_size: Raster cells per passage.
        margin: Empty raster border around the maze.
    """

    walkable: np.ndarray
    width: TileCoord
    height: TileCoord
    wall_size: int
    passage_size: int
    margin: int = 0

    @property
    def raster_width(self) -> TileCoord:
        return self.walkable.shape[0]

    @property
    def raster_height(self) -> TileCoord:
        return self.walkable.shape[1]


def raster_extent(cells: int, wall_size: int, passage_size: int, margin: int) -> int:
    """Raster length of ``cells`` maze cells separated and bordered by walls."""
    return cells * passage_size + (cells + 1) * wall_size + 2 * margin


class BaseMazeGenerator(abc.ABC):
    """Abstract base class for perfect-maze carving algorithms.

    Implementations produce a spanning tree over a ``width`` x ``height`` grid
    of maze cells and rasterize it with walls of ``wall_size`` and passages of
    ``passage_size`` raster cells.
    """

    def __init__(
        self,
        width: TileCoord,
        height: TileCoord,
        wall_size: int,
        passage_size: int,
        margin: int = 0,
    ) -> None:
        if width < 1 or height < 1:
            raise MazeGenerationError(
                f"Maze dimensions must be positive, got {width}x{height}"
            )
        if wall_size < 1 or passage_size < 1:
            raise MazeGenerationError(
                f"Wall and passage sizes must be positive, "
                f"got wall={wall_size} passage={passage_size}"
            )
        self.width = width
        self.height = height
        self.wall_size = wall_size
        self.passage_size = passage_size
        self.margin = margin

    @property
    def raster_width(self) -> TileCoord:
        return raster_extent(self.width, self.wall_size, self.passage_size, self.margin)

    @property
    def raster_height(self) -> TileCoord:
        return raster_extent(
            self.height, self.wall_size, self.passage_size, self.margin
        )

    def _cell_origin(self, cx: int, cy: int) -> tuple[int, int]:
        """Top-left raster cell of maze cell (cx, cy)."""
        stride = self.passage_size + self.wall_size
        offset = self.margin + self.wall_size
        return offset + cx * stride, offset + cy * stride

    def _carve_cell(self, walkable: np.ndarray, cx: int, cy: int) -> None:
        x, y = self._cell_origin(cx, cy)
        walkable[x : x + self.passage_size, y : y + self.passage_size] = True

    def _carve_passage(
        self, walkable: np.ndarray, a: tuple[int, int], b: tuple[int, int]
    ) -> None:
        """Open the wall between two orthogonally adjacent maze cells."""
        cx, cy = min(a, b)
        x, y = self._cell_origin(cx, cy)
        p, w = self.passage_size, self.wall_size
        if a[1] == b[1]:
            walkable[x + p : x + p + w, y : y + p] = True
        else:
            walkable[x : x + p, y + p : y + p + w] = True

    @abc.abstractmethod
    def generate(self) -> GeneratedMazeData:
        """Carve the maze and return its raster."""
        raise NotImplementedError
