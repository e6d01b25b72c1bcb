from __future__ import annotations

from collections import deque
from random import Random

import pytest

from labyrinth.environment.generators import (
    GrowingTreeGenerator,
    MazeGenerationError,
    carve_entrance,
    carve_exit,
    carve_rooms,
    raster_extent,
)
from labyrinth.environment.positions import ValidPositions
from labyrinth.types import MazeId, Position


def _reachable(valid: ValidPositions, start: Position) -> set[Position]:
    seen = {start}
    queue = deque([start])
    while queue:
        x, y = queue.popleft()
        for nxt in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)):
            if nxt not in seen and valid.is_valid(nxt):
                seen.add(nxt)
                queue.append(nxt)
    return seen


def _carved(width: int, height: int, seed: int = 5) -> ValidPositions:
    data = GrowingTreeGenerator(width, height, 2, 2, Random(seed)).generate()
    return ValidPositions.from_mask(data.walkable)


# ── 1. Perfect maze carving ──────────────────────────────────────────────────


class TestGrowingTree:
    def test_raster_extent(self) -> None:
        assert raster_extent(20, 2, 2, 0) == 82
        assert raster_extent(6, 2, 2, 0) == 26
        assert raster_extent(3, 1, 1, 2) == 11

    def test_raster_matches_extent(self) -> None:
        data = GrowingTreeGenerator(20, 6, 2, 2, Random(1)).generate()
        assert data.walkable.shape == (82, 26)
        assert (data.raster_width, data.raster_height) == (82, 26)
        assert (data.width, data.height) == (20, 6)

    @pytest.mark.parametrize("bias", [0.0, 0.75, 1.0])
    def test_carves_a_spanning_tree(self, bias: float) -> None:
        """Every cell is open and exactly cells - 1 walls are knocked down."""
        width, height = 9, 7
        data = GrowingTreeGenerator(
            width, height, 1, 1, Random(11), newest_bias=bias
        ).generate()
        walkable = data.walkable

        openings = 0
        for cx in range(width):
            for cy in range(height):
                x, y = 1 + 2 * cx, 1 + 2 * cy
                assert walkable[x, y]
                if cx + 1 < width and walkable[x + 1, y]:
                    openings += 1
                if cy + 1 < height and walkable[x, y + 1]:
                    openings += 1

        assert openings == width * height - 1
        valid = ValidPositions.from_mask(walkable)
        assert _reachable(valid, (1, 1)) == set(valid.positions)

    def test_outer_wall_is_closed(self) -> None:
        walkable = GrowingTreeGenerator(10, 5, 2, 2, Random(3)).generate().walkable
        assert not walkable[:2, :].any()
        assert not walkable[-2:, :].any()
        assert not walkable[:, :2].any()
        assert not walkable[:, -2:].any()

    def test_same_seed_same_maze(self) -> None:
        a = GrowingTreeGenerator(12, 6, 2, 2, Random(8)).generate()
        b = GrowingTreeGenerator(12, 6, 2, 2, Random(8)).generate()
        assert (a.walkable == b.walkable).all()

    def test_single_cell_maze(self) -> None:
        walkable = GrowingTreeGenerator(1, 1, 1, 2, Random(0)).generate().walkable
        assert walkable.shape == (4, 4)
        assert walkable.sum() == 4

    @pytest.mark.parametrize(
        "width, height, wall, passage",
        [(0, 5, 2, 2), (5, -1, 2, 2), (5, 5, 0, 2), (5, 5, 2, 0)],
    )
    def test_rejects_degenerate_sizes(
        self, width: int, height: int, wall: int, passage: int
    ) -> None:
        with pytest.raises(MazeGenerationError):
            GrowingTreeGenerator(width, height, wall, passage, Random(0))

    def test_rejects_bias_outside_unit_interval(self) -> None:
        with pytest.raises(ValueError, match="newest_bias"):
            GrowingTreeGenerator(5, 5, 1, 1, Random(0), newest_bias=1.5)


# ── 2. Entrance and exit ─────────────────────────────────────────────────────


class TestOpenings:
    def test_first_level_entrance_starts_inside_the_wall(self) -> None:
        valid = _carved(20, 6)
        entrance = carve_entrance(valid, MazeId(0), 2, Random(4))

        (x, y), (x2, y2) = entrance
        assert x == x2 == 2
        assert y2 == y + 1
        assert y % 2 == 0
        assert all(valid.is_valid(cell) for cell in entrance)

    def test_later_levels_open_to_the_border(self) -> None:
        valid = _carved(20, 6)
        entrance = carve_entrance(valid, MazeId(3), 2, Random(4))

        assert [x for x, _ in entrance] == [0, 0]
        assert all(valid.is_valid(cell) for cell in entrance)

    def test_exit_opens_on_the_right_border(self) -> None:
        valid = _carved(20, 6)
        exit = carve_exit(valid, 2, Random(9))

        assert [x for x, _ in exit] == [valid.width - 1, valid.width - 1]
        assert exit[1][1] == exit[0][1] + 1
        assert all(valid.is_valid(cell) for cell in exit)

    @pytest.mark.parametrize("seed", range(8))
    def test_openings_reach_each_other(self, seed: int) -> None:
        valid = _carved(16, 5, seed)
        entrance = carve_entrance(valid, MazeId(1), 2, Random(seed))
        exit = carve_exit(valid, 2, Random(seed + 100))

        reachable = _reachable(valid, entrance[0])
        assert set(exit) <= reachable
        assert entrance[1] in reachable

    def test_opening_rows_stay_clear_of_outer_walls(self) -> None:
        for seed in range(30):
            valid = _carved(8, 4, seed)
            _, (_, y) = carve_exit(valid, 2, Random(seed))
            assert 2 <= y - 1
            assert y <= valid.height - 3

    def test_scan_that_never_connects_raises(self) -> None:
        valid = ValidPositions(10, 10)
        with pytest.raises(MazeGenerationError, match="entrance"):
            carve_entrance(valid, MazeId(1), 2, Random(0))

    def test_raster_too_short_for_an_opening_raises(self) -> None:
        valid = ValidPositions(10, 5)
        with pytest.raises(MazeGenerationError, match="no room for an opening"):
            carve_exit(valid, 2, Random(0))


# ── 3. Rooms ─────────────────────────────────────────────────────────────────


class TestRooms:
    def test_room_count_and_size_scale_with_maze(self) -> None:
        width, height = 20, 6
        valid = _carved(width, height)
        rooms = carve_rooms(valid, width, height, 2, Random(2))

        assert 4 <= len(rooms) <= max((width + height) // 2, 5)
        for room in rooms:
            assert 4 <= room.width <= max((width + height) // 6, 5)
            assert 4 <= room.height <= max((width + height) // 6, 5)

    def test_rooms_are_open_and_inside_the_walls(self) -> None:
        valid = _carved(20, 6)
        rooms = carve_rooms(valid, 20, 6, 2, Random(2))

        for room in rooms:
            assert room.x1 >= 2
            assert room.y1 >= 2
            assert room.x2 <= valid.width - 2
            assert room.y2 <= valid.height - 2
            assert all(valid.is_valid(cell) for cell in room.positions())

    def test_rooms_keep_the_maze_connected(self) -> None:
        valid = _carved(20, 6)
        carve_rooms(valid, 20, 6, 2, Random(6))
        start = valid.positions[0]
        assert _reachable(valid, start) == set(valid.positions)

    def test_room_that_cannot_fit_raises(self) -> None:
        valid = ValidPositions(8, 8)
        with pytest.raises(MazeGenerationError, match="does not fit"):
            carve_rooms(valid, 1, 1, 2, Random(0))
