#!/usr/bin/env python3
"""Benchmark visibility queries for each view mode on a generated maze.

Times a cold computation (cache miss) and a warm lookup (cache hit) per mode
and prints a comparison table.

Usage:
    uv run python scripts/benchmark_visibility.py
"""

# ruff: noqa: E402  # Allow path setup before importing project modules

from __future__ import annotations

import sys
import timeit
from pathlib import Path

# Add the project root to Python path so running as a script works.
project_root = Path(__file__).resolve().parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from labyrinth.environment.directions import (
    Circle,
    Cone,
    Direction,
    Full,
    Plane,
    View,
)
from labyrinth.environment.fov import compute_visible_positions
from labyrinth.environment.maze import Maze, MazeConfig
from labyrinth.types import MazeId


def _benchmark_cold(maze: Maze, view: View) -> float:
    """Average ms per uncached visibility computation."""
    position = maze.entrance_positions()[0]
    timer = timeit.Timer(
        lambda: compute_visible_positions(
            maze.valid_positions, position, Direction.EAST, view
        )
    )
    number, total = timer.autorange()
    return (total / number) * 1000


def _benchmark_warm(maze: Maze, view: View) -> float:
    """Average ms per cached visibility lookup."""
    position = maze.entrance_positions()[0]
    maze.get_and_cache_visible_positions(position, Direction.EAST, view)
    timer = timeit.Timer(
        lambda: maze.get_cached_visible_positions(position, Direction.EAST, view)
    )
    number, total = timer.autorange()
    return (total / number) * 1000


def main() -> None:
    maze = MazeConfig(id=MazeId(20), width=32, height=20, seed=42).generate()
    views: list[tuple[str, View]] = [
        ("Full", Full()),
        ("Circle r=7", Circle(7)),
        ("Cone r=7", Cone(7)),
        ("Plane r=7", Plane(7)),
        ("Circle r=20", Circle(20)),
    ]

    print(
        f"Visibility benchmark: {maze.raster_width}x{maze.raster_height} raster, "
        f"{len(maze.valid_positions)} valid positions"
    )
    print("=" * 52)
    print(f"{'View':<16} {'cold':>10} {'cached':>12} {'speedup':>10}")
    print("-" * 52)

    for name, view in views:
        cold_ms = _benchmark_cold(maze, view)
        warm_ms = _benchmark_warm(maze, view)
        speedup = cold_ms / warm_ms if warm_ms > 0 else float("inf")
        print(f"{name:<16} {cold_ms:>8.3f}ms {warm_ms:>10.5f}ms {speedup:>9.0f}x")

    print("-" * 52)
    print(str(maze.visibility_cache))


if __name__ == "__main__":
    main()
