"""Entrance, exit and room carving on top of a generated maze raster.

These stages turn the perfect maze into a playable level: a two-cell-tall
opening on each side that is guaranteed to reach the carved corridors, and
rectangular rooms that open shortcuts through the tree.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from labyrinth import config
from labyrinth.util.coordinates import Rect

from .base import MazeGenerationError

if TYPE_CHECKING:
    from labyrinth.environment.positions import ValidPositions
    from labyrinth.types import MazeId, Position, TileCoord
    from labyrinth.util.rng import RNG

logger = logging.getLogger(__name__)


def _opening_row(valid: ValidPositions, wall_size: int, rng: RNG) -> TileCoord:
    """Pick an even row for a two-cell opening, clear of the top and bottom walls."""
    low = config.MARGIN_SIZE + wall_size
    high = valid.height - config.MARGIN_SIZE - wall_size - 1
    if high <= low:
        raise MazeGenerationError(
            f"Raster height {valid.height} leaves no room for an opening"
        )
    return rng.randrange(low, high) // 2 * 2


def _scan_and_open(
    valid: ValidPositions, columns: range, y: TileCoord, side: str
) -> None:
    """Open rows ``y`` and ``y + 1`` column by column until both are already open."""
    for x in columns:
        if valid.is_valid((x, y)) and valid.is_valid((x, y + 1)):
            return
        valid.insert((x, y))
        valid.insert((x, y + 1))
    raise MazeGenerationError(
        f"The {side} scan on rows {y}-{y + 1} never reached the maze corridors"
    )


def carve_entrance(
    valid: ValidPositions, maze_id: MazeId, wall_size: int, rng: RNG
) -> list[Position]:
    """Carve the entrance on the left margin and return its two cells.

    The first level starts its scan inside the outer wall; later levels open
    all the way to column 0.
    """
    y = _opening_row(valid, wall_size, rng)
    start_x = config.MARGIN_SIZE + wall_size if maze_id == 0 else 0
    _scan_and_open(valid, range(start_x, valid.width), y, "entrance")
    return [(start_x, y), (start_x, y + 1)]


def carve_exit(valid: ValidPositions, wall_size: int, rng: RNG) -> list[Position]:
    """Carve the exit on the right margin and return its two cells."""
    y = _opening_row(valid, wall_size, rng)
    max_x = valid.width - config.MARGIN_SIZE - 1
    _scan_and_open(valid, range(max_x, -1, -1), y, "exit")
    return [(max_x, y), (max_x, y + 1)]


def carve_rooms(
    valid: ValidPositions,
    width: TileCoord,
    height: TileCoord,
    wall_size: int,
    rng: RNG,
) -> list[Rect]:
    """Open random rectangular rooms, scaled to the maze size.

    Rooms may overlap each other and existing corridors. Every room is fully
    opened, which braids the maze with loops and shortcuts.
    """
    max_rooms = max((width + height) // 2, config.MIN_ROOMS + 1)
    max_room_size = max((width + height) // 6, config.MIN_ROOM_SIZE + 1)
    inset = config.MARGIN_SIZE + wall_size

    rooms: list[Rect] = []
    for _ in range(rng.randint(config.MIN_ROOMS, max_rooms)):
        room_w = rng.randint(config.MIN_ROOM_SIZE, max_room_size)
        room_h = rng.randint(config.MIN_ROOM_SIZE, max_room_size)
        max_x = valid.width - room_w - inset
        max_y = valid.height - room_h - inset
        if max_x <= inset or max_y <= inset:
            raise MazeGenerationError(
                f"A {room_w}x{room_h} room does not fit in the "
                f"{valid.width}x{valid.height} raster"
            )
        room_x = rng.randrange(inset, max_x)
        room_y = rng.randrange(inset, max_y)
        rooms.append(Rect(room_x, room_y, room_w, room_h))

    for room in rooms:
        valid.insert_many(room.positions())

    logger.debug(f"Carved {len(rooms)} rooms")
    return rooms
