from __future__ import annotations

import pytest

from labyrinth.environment.directions import Cone, Direction
from labyrinth.game.minotaur import (
    Minotaur,
    minotaur_aggression,
    minotaur_speed,
    minotaur_vision,
)
from labyrinth.types import MazeId


@pytest.mark.parametrize(
    "maze_id, speed, vision, aggression",
    [
        (0, 0, 4, 0.5),
        (3, 1, 5, 0.6),
        (7, 2, 6, 0.8),
        (9, 3, 7, 0.9),
        (12, 4, 7, 1.0),
        (40, 6, 7, 1.0),
    ],
)
def test_stats_scale_and_saturate(
    maze_id: int, speed: int, vision: int, aggression: float
) -> None:
    assert minotaur_speed(MazeId(maze_id)) == speed
    assert minotaur_vision(MazeId(maze_id)) == vision
    assert minotaur_aggression(MazeId(maze_id)) == pytest.approx(aggression)


def test_for_level() -> None:
    minotaur = Minotaur.for_level("Μίνως", MazeId(6), (4, 5))

    assert minotaur.position == (4, 5)
    assert minotaur.speed == 2
    assert minotaur.vision == 6
    assert minotaur.direction is Direction.NORTH
    assert minotaur.view == Cone(6)


def test_view_follows_vision() -> None:
    minotaur = Minotaur("Τάφος", MazeId(0), (0, 0), 0, 3, 0.5, Direction.EAST)
    assert minotaur.view == Cone(3)
