"""Rectangles and distances in grid coordinates."""

from __future__ import annotations

import math

from labyrinth.types import Position, TileCoord


class Rect:
    """Rectangle/bounding box in grid coordinates. x2/y2 are exclusive."""

    def __init__(self, x: TileCoord, y: TileCoord, w: TileCoord, h: TileCoord) -> None:
        self.x1: TileCoord = x
        self.y1: TileCoord = y
        self.x2: TileCoord = x + w
        self.y2: TileCoord = y + h

    @property
    def width(self) -> TileCoord:
        return self.x2 - self.x1

    @property
    def height(self) -> TileCoord:
        return self.y2 - self.y1

    def positions(self) -> list[Position]:
        """All cells covered by the rectangle, row by row."""
        return [
            (x, y) for y in range(self.y1, self.y2) for x in range(self.x1, self.x2)
        ]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rect):
            return NotImplemented
        return (self.x1, self.y1, self.x2, self.y2) == (
            other.x1,
            other.y1,
            other.x2,
            other.y2,
        )

    def __hash__(self) -> int:
        return hash((self.x1, self.y1, self.x2, self.y2))

    def __repr__(self) -> str:
        return f"Rect(x1={self.x1}, y1={self.y1}, x2={self.x2}, y2={self.y2})"


def distance(a: Position, b: Position) -> float:
    """Euclidean distance between two grid positions."""
    return math.hypot(a[0] - b[0], a[1] - b[1])
