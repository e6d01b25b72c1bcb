"""The maze level: generated topology plus per-level mutable state.

A level is described by a MazeConfig and built by one fallible call::

    maze = MazeConfig(id=MazeId(3), seed=1234).build(DirectoryImageStore())

Building carves the perfect maze, the entrance, the exit and extra rooms,
places power-ups and persists the rendered raster. After that the topology
never changes; only the visibility cache and the success counters do.

A Maze is single-owner. The visibility accessor writes to the cache, so a
host that shares one instance between threads must serialize every call.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, TypeAlias

from labyrinth import config
from labyrinth.environment.directions import Direction, View
from labyrinth.environment.fov import compute_visible_positions
from labyrinth.environment.generators import (
    GrowingTreeGenerator,
    MazeGenerationError,
    carve_entrance,
    carve_exit,
    carve_rooms,
)
from labyrinth.environment.positions import ValidPositions
from labyrinth.environment.raster import (
    DirectoryImageStore,
    ImageStore,
    render_maze_image,
)
from labyrinth.game.minotaur import Minotaur
from labyrinth.game.spawning import SpawnPolicy
from labyrinth.game.success import SuccessTracker
from labyrinth.types import MazeId, Position
from labyrinth.util.caching import MemoCache
from labyrinth.util.rng import RNGProvider, RNGStream, fresh_seed

if TYPE_CHECKING:
    from PIL import Image

    from labyrinth.util.coordinates import Rect

logger = logging.getLogger(__name__)

VisibilityKey: TypeAlias = tuple[Position, Direction, View]


def default_width(maze_id: MazeId, stream: RNGStream) -> int:
    """Random maze width in cells, growing with the level."""
    low = config.WIDTH_BASE_MIN + 2 * (maze_id // 4)
    high = min(config.WIDTH_BASE_MAX + 2 * (maze_id // 2), config.WIDTH_CAP)
    return stream.randint(min(low, high), high)


def default_height(maze_id: MazeId, stream: RNGStream) -> int:
    """Random maze height in cells, growing with the level."""
    low = config.HEIGHT_BASE_MIN + 2 * (maze_id // 4)
    high = min(config.HEIGHT_BASE_MAX + 2 * (maze_id // 2), config.HEIGHT_CAP)
    return stream.randint(min(low, high), high)


@dataclass(frozen=True)
class MazeConfig:
    """Everything needed to reproduce a maze level.

    Attributes:
        id: Difficulty level.
        width: Width in maze cells. Random, scaled by ``id``, when None.
        height: Height in maze cells. Random, scaled by ``id``, when None.
        seed: Generation seed. Drawn from system entropy when None.
        wall_size: Raster cells per wall.
        passage_size: Raster cells per passage.
    """

    id: MazeId
    width: int | None = None
    height: int | None = None
    seed: int | None = None
    wall_size: int = config.DEFAULT_WALL_SIZE
    passage_size: int = config.DEFAULT_PASSAGE_SIZE

    def generate(self) -> Maze:
        """Carve the level without persisting its raster artifact."""
        seed = self.seed if self.seed is not None else fresh_seed()
        provider = RNGProvider(seed)
        dims = provider.get("maze.dimensions")
        width = self.width if self.width is not None else default_width(self.id, dims)
        height = (
            self.height if self.height is not None else default_height(self.id, dims)
        )

        data = GrowingTreeGenerator(
            width,
            height,
            self.wall_size,
            self.passage_size,
            provider.get("maze.carve"),
        ).generate()
        valid = ValidPositions.from_mask(data.walkable)

        entrance = carve_entrance(
            valid, self.id, self.wall_size, provider.get("maze.entrance")
        )
        exit = carve_exit(valid, self.wall_size, provider.get("maze.exit"))
        rooms = carve_rooms(
            valid, width, height, self.wall_size, provider.get("maze.rooms")
        )

        maze = Maze(
            id=self.id,
            seed=seed,
            width=width,
            height=height,
            wall_size=self.wall_size,
            passage_size=self.passage_size,
            valid_positions=valid,
            entrance=entrance,
            exit=exit,
            rooms=rooms,
        )
        maze.power_up_positions = maze.spawn_policy.power_up_positions(
            self.id // 2 + 1, provider.get("maze.power_ups")
        )

        logger.info(
            f"New maze {self.id} (seed {seed}): {width}x{height} cells, "
            f"{valid.width}x{valid.height} raster, {len(valid)} valid positions"
        )
        return maze

    def build(self, store: ImageStore | None = None) -> Maze:
        """Generate the level and persist its raster artifact.

        Raises:
            MazeGenerationError: If carving fails or the image cannot be stored.
        """
        maze = self.generate()
        _persist(maze, store if store is not None else DirectoryImageStore())
        return maze

    async def build_async(self, store: ImageStore | None = None) -> Maze:
        """Like build(), but persists the raster on a worker thread.

        Only the image write leaves the event loop. Carving runs inline and
        blocks the loop for its duration; hosts that cannot afford that
        should run build() itself in an executor.
        """
        maze = self.generate()
        await asyncio.to_thread(
            _persist, maze, store if store is not None else DirectoryImageStore()
        )
        return maze


def _persist(maze: Maze, store: ImageStore) -> None:
    try:
        store.save(maze.id, maze.image)
    except OSError as exc:
        raise MazeGenerationError(
            f"Failed to persist the image for maze {maze.id}: {exc}"
        ) from exc


@dataclass(eq=False)
class Maze:
    """A generated maze level.

    Use MazeConfig.build() rather than constructing this directly.
    """

    id: MazeId
    seed: int
    width: int
    height: int
    wall_size: int
    passage_size: int
    valid_positions: ValidPositions
    entrance: list[Position]
    exit: list[Position]
    rooms: list[Rect] = field(default_factory=list)
    power_up_positions: list[Position] = field(default_factory=list)
    success: SuccessTracker = field(default_factory=SuccessTracker)

    def __post_init__(self) -> None:
        self.spawn_policy = SpawnPolicy(self.valid_positions, self.entrance, self.exit)
        self._visibility_cache: MemoCache[VisibilityKey, frozenset[Position]] = (
            MemoCache(f"maze_{self.id}.visibility")
        )
        self._image: Image.Image | None = None

    # ------------------------------------------------------------------
    # Topology queries
    # ------------------------------------------------------------------
    @property
    def raster_width(self) -> int:
        return self.valid_positions.width

    @property
    def raster_height(self) -> int:
        return self.valid_positions.height

    def is_valid_position(self, position: Position) -> bool:
        return self.valid_positions.is_valid(position)

    def is_entrance_position(self, position: Position) -> bool:
        return position in self.entrance

    def is_exit_position(self, position: Position) -> bool:
        return position in self.exit

    def entrance_positions(self) -> list[Position]:
        return list(self.entrance)

    def exit_positions(self) -> list[Position]:
        return list(self.exit)

    def is_valid_minotaur_position(self, position: Position) -> bool:
        return self.spawn_policy.is_valid_minotaur_position(position)

    # ------------------------------------------------------------------
    # Raster artifact
    # ------------------------------------------------------------------
    @property
    def image(self) -> Image.Image:
        """RGBA rendering of the level: transparent floor, colored walls."""
        if self._image is None:
            self._image = render_maze_image(self.valid_positions.mask, self.id)
        return self._image

    def save_image(self, path: Path | str) -> None:
        self.image.save(Path(path))

    # ------------------------------------------------------------------
    # Spawning
    # ------------------------------------------------------------------
    def spawn_minotaur(self, name: str) -> Minotaur:
        """Place a minotaur away from the entrance and warm its perception."""
        position = self.spawn_policy.minotaur_position()
        direction = self.spawn_policy.minotaur_direction()
        minotaur = Minotaur.for_level(name, self.id, position, direction)
        self.get_and_cache_visible_positions(
            position, minotaur.direction, minotaur.view
        )
        logger.debug(f"Spawned minotaur {name} at {position} in maze {self.id}")
        return minotaur

    def hero_starting_position(self) -> Position:
        return self.spawn_policy.hero_starting_position()

    # ------------------------------------------------------------------
    # Visibility
    # ------------------------------------------------------------------
    def get_and_cache_visible_positions(
        self, position: Position, direction: Direction, view: View
    ) -> frozenset[Position]:
        """Cells visible to an observer, computed once per key and then cached."""
        return self._visibility_cache.get_or_compute(
            (position, direction, view), self._compute_visible_positions
        )

    def get_cached_visible_positions(
        self, position: Position, direction: Direction, view: View
    ) -> frozenset[Position]:
        """Cells visible to an observer whose perception was already warmed.

        Raises:
            AssertionError: If get_and_cache_visible_positions() was never
                called with this exact key.
        """
        return self._visibility_cache.require((position, direction, view))

    def _compute_visible_positions(self, key: VisibilityKey) -> frozenset[Position]:
        position, direction, view = key
        logger.debug(f"Computing visibility for {key} in maze {self.id}")
        return compute_visible_positions(
            self.valid_positions, position, direction, view
        )

    @property
    def visibility_cache(self) -> MemoCache[VisibilityKey, frozenset[Position]]:
        return self._visibility_cache

    # ------------------------------------------------------------------
    # Success rate
    # ------------------------------------------------------------------
    def increase_attempted(self) -> None:
        self.success.increase_attempted()

    def decrease_attempted(self) -> None:
        self.success.decrease_attempted()

    def increase_passed(self) -> None:
        self.success.increase_passed()

    def decrease_passed(self) -> None:
        self.success.decrease_passed()

    def success_rate(self) -> float:
        return self.success.success_rate()
