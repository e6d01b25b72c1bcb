#!/usr/bin/env python3
"""Render one maze image per difficulty level.

Useful for eyeballing how size, room density and wall color scale with the
level.

Usage:
    uv run python scripts/render_mazes.py [output_dir]
"""

# ruff: noqa: E402  # Allow path setup before importing project modules

from __future__ import annotations

import sys
from pathlib import Path

# Add the project root to Python path so running as a script works.
project_root = Path(__file__).resolve().parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from labyrinth import config
from labyrinth.environment.maze import MazeConfig
from labyrinth.environment.raster import DirectoryImageStore
from labyrinth.types import MazeId


def main() -> None:
    output_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else config.IMAGES_PATH
    store = DirectoryImageStore(output_dir)

    for maze_id in range(config.MAX_MAZE_ID + 1):
        maze = MazeConfig(id=MazeId(maze_id)).build(store)
        print(
            f"maze {maze_id:>2}: seed={maze.seed:<20} "
            f"{maze.width}x{maze.height} cells, {len(maze.rooms)} rooms, "
            f"{len(maze.power_up_positions)} power-ups"
        )


if __name__ == "__main__":
    main()
