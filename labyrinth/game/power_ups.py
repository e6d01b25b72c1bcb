from __future__ import annotations

from enum import Enum, auto

from labyrinth.util import rng

_rng = rng.get("maze.power_ups.kind")


class PowerUp(Enum):
    """Pickups scattered through a maze."""

    SPEED = auto()
    VISION = auto()
    MEMORY = auto()

    def __str__(self) -> str:
        return self.name.capitalize()


def random_power_up() -> PowerUp:
    return _rng.choice(list(PowerUp))
