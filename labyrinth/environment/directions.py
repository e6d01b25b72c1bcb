"""Compass directions and view modes attached to observers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from labyrinth.types import Offset


class Direction(Enum):
    """One of the eight compass directions. y grows southward on the grid."""

    NORTH = (0, -1)
    NORTH_EAST = (1, -1)
    EAST = (1, 0)
    SOUTH_EAST = (1, 1)
    SOUTH = (0, 1)
    SOUTH_WEST = (-1, 1)
    WEST = (-1, 0)
    NORTH_WEST = (-1, -1)

    @property
    def offset(self) -> Offset:
        return self.value

    @property
    def is_diagonal(self) -> bool:
        dx, dy = self.value
        return dx != 0 and dy != 0

    @property
    def opposite(self) -> Direction:
        dx, dy = self.value
        return Direction((-dx, -dy))

    def rotate_clockwise(self) -> Direction:
        """Turn 45 degrees clockwise."""
        return _CLOCKWISE[(_CLOCKWISE.index(self) + 1) % len(_CLOCKWISE)]

    def rotate_counterclockwise(self) -> Direction:
        """Turn 45 degrees counterclockwise."""
        return _CLOCKWISE[(_CLOCKWISE.index(self) - 1) % len(_CLOCKWISE)]

    @classmethod
    def from_offset(cls, dx: int, dy: int) -> Direction:
        """Direction of a grid step; components are clamped to -1..1."""
        step = ((dx > 0) - (dx < 0), (dy > 0) - (dy < 0))
        if step == (0, 0):
            raise ValueError("A zero offset has no direction")
        return cls(step)


_CLOCKWISE: tuple[Direction, ...] = tuple(Direction)


# =============================================================================
# VIEW MODES
# =============================================================================


@dataclass(frozen=True, slots=True)
class View:
    """Base class for view modes. Instances are hashable cache-key parts."""

    radius: int = 0


@dataclass(frozen=True, slots=True)
class Full(View):
    """Omniscient view: every traversable cell, direction ignored."""


@dataclass(frozen=True, slots=True)
class Circle(View):
    """360 degree perception within a square of side 2 * radius + 1."""


@dataclass(frozen=True, slots=True)
class Cone(View):
    """Roughly 90 degree wedge centered on the facing direction."""


@dataclass(frozen=True, slots=True)
class Plane(View):
    """Half-plane strictly ahead of the facing direction."""
