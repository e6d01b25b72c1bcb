from __future__ import annotations

from labyrinth.environment.maze import Maze
from labyrinth.environment.positions import ValidPositions
from labyrinth.types import MazeId, Position


def make_valid(*rows: str) -> ValidPositions:
    """Build a position index from ASCII art. '.' is floor, anything else wall."""
    return ValidPositions.from_rows(rows)


def make_maze(
    rows: list[str],
    entrance: list[Position],
    exit: list[Position],
    maze_id: int = 0,
) -> Maze:
    """A hand-built maze around an ASCII grid, bypassing generation."""
    valid = ValidPositions.from_rows(rows)
    return Maze(
        id=MazeId(maze_id),
        seed=0,
        width=valid.width,
        height=valid.height,
        wall_size=1,
        passage_size=1,
        valid_positions=valid,
        entrance=entrance,
        exit=exit,
    )


def open_field(width: int, height: int) -> ValidPositions:
    return ValidPositions.from_rows(["." * width] * height)
