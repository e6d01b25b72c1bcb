"""The monster that hunts heroes through a maze."""

from __future__ import annotations

from dataclasses import dataclass, field

from labyrinth import config
from labyrinth.environment.directions import Cone, Direction, View
from labyrinth.types import MazeId, Position


def minotaur_speed(maze_id: MazeId) -> int:
    return min(maze_id // 3, config.MAX_MINOTAUR_SPEED)


def minotaur_vision(maze_id: MazeId) -> int:
    return min(config.BASE_MINOTAUR_VISION + maze_id // 3, config.MAX_MINOTAUR_VISION)


def minotaur_aggression(maze_id: MazeId) -> float:
    return min(
        config.BASE_MINOTAUR_AGGRESSION + 0.1 * (maze_id // 2),
        config.MAX_MINOTAUR_AGGRESSION,
    )


@dataclass
class Minotaur:
    """Spawn-time state of a minotaur.

    Attributes:
        name: Display name.
        maze_id: Difficulty level of the maze it was spawned in.
        position: Current grid position.
        speed: Movement speed, saturating with the level.
        vision: Perception radius in cells, saturating with the level.
        aggression: Chance in [0, 1] of chasing a perceived hero.
        direction: Facing direction.
    """

    name: str
    maze_id: MazeId
    position: Position
    speed: int
    vision: int
    aggression: float
    direction: Direction = Direction.NORTH
    view: View = field(init=False)

    def __post_init__(self) -> None:
        self.view = Cone(self.vision)

    @classmethod
    def for_level(
        cls,
        name: str,
        maze_id: MazeId,
        position: Position,
        direction: Direction = Direction.NORTH,
    ) -> Minotaur:
        """Create a minotaur whose stats follow the difficulty level."""
        return cls(
            name=name,
            maze_id=maze_id,
            position=position,
            speed=minotaur_speed(maze_id),
            vision=minotaur_vision(maze_id),
            aggression=minotaur_aggression(maze_id),
            direction=direction,
        )
