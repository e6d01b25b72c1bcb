"""Placement rules for minotaurs, power-ups and heroes."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from labyrinth import config
from labyrinth.environment.directions import Direction
from labyrinth.util import rng
from labyrinth.util.coordinates import distance

if TYPE_CHECKING:
    from labyrinth.environment.positions import ValidPositions
    from labyrinth.types import Position
    from labyrinth.util.rng import RNG

logger = logging.getLogger(__name__)

_spawn_rng = rng.get("maze.spawn")
_hero_rng = rng.get("maze.hero")


class SpawnError(Exception):
    """Raised when no cell satisfies a spawn constraint."""


def is_far_from(
    position: Position,
    anchors: Sequence[Position],
    min_distance: float = config.SPAWN_EXCLUSION_DISTANCE,
) -> bool:
    """True if ``position`` is more than ``min_distance`` from every anchor."""
    return all(distance(anchor, position) > min_distance for anchor in anchors)


class SpawnPolicy:
    """Chooses spawn cells on a finished maze.

    Minotaurs keep clear of the entrance, power-ups keep clear of both the
    entrance and the exit, and heroes start on one of the entrance cells.
    """

    def __init__(
        self,
        valid: ValidPositions,
        entrance: Sequence[Position],
        exit: Sequence[Position],
    ) -> None:
        self.valid = valid
        self.entrance = entrance
        self.exit = exit

    def is_valid_minotaur_position(self, position: Position) -> bool:
        return self.valid.is_valid(position) and is_far_from(position, self.entrance)

    def is_valid_power_up_position(self, position: Position) -> bool:
        return (
            self.valid.is_valid(position)
            and is_far_from(position, self.entrance)
            and is_far_from(position, self.exit)
        )

    def minotaur_position(self, stream: RNG = _spawn_rng) -> Position:
        """Uniformly sample a cell away from the entrance.

        Rejection sampling first; if that keeps missing (tiny or crowded
        mazes), sample exactly from the qualifying cells instead.
        """
        for _ in range(config.MINOTAUR_SPAWN_ATTEMPTS):
            position = self.valid.random_valid(stream)
            if self.is_valid_minotaur_position(position):
                return position

        candidates = self.valid.filtered_random(
            self.is_valid_minotaur_position, 1, stream
        )
        if not candidates:
            raise SpawnError("No cell is far enough from the entrance for a minotaur")
        return candidates[0]

    def minotaur_direction(self, stream: RNG = _spawn_rng) -> Direction:
        return stream.choice(list(Direction))

    def power_up_positions(self, amount: int, stream: RNG) -> list[Position]:
        """Sample up to ``amount`` distinct cells away from the entrance and exit."""
        return self.valid.filtered_random(
            self.is_valid_power_up_position, amount, stream
        )

    def hero_starting_position(self, stream: RNG = _hero_rng) -> Position:
        """One of the entrance cells, re-rolled on every call."""
        return stream.choice(self.entrance)
