"""Maze generation for labyrinth.

- GrowingTreeGenerator: perfect maze carving with a newest/random frontier bias
- carve_entrance / carve_exit: two-cell openings scanned in from the margins
- carve_rooms: rectangular rooms that braid the perfect maze
"""

from .base import (
    BaseMazeGenerator,
    GeneratedMazeData,
    MazeGenerationError,
    raster_extent,
)
from .features import carve_entrance, carve_exit, carve_rooms
from .growing_tree import GrowingTreeGenerator

__all__ = [
    "BaseMazeGenerator",
    "GeneratedMazeData",
    "GrowingTreeGenerator",
    "MazeGenerationError",
    "carve_entrance",
    "carve_exit",
    "carve_rooms",
    "raster_extent",
]
