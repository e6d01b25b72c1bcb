"""Rendering and persistence of the maze raster artifact.

The artifact is an RGBA image the size of the maze grid: traversable cells
are fully transparent and walls carry a color that shifts from whiteblue to
red as the difficulty level rises. External renderers composite it under the
actors.
"""

from __future__ import annotations

import abc
import logging
from pathlib import Path

import numpy as np
from PIL import Image

from labyrinth import config
from labyrinth.types import ColorRGBA, MazeId

logger = logging.getLogger(__name__)


def wall_color(maze_id: MazeId) -> ColorRGBA:
    """Interpolated wall color for a difficulty level."""
    a = min(maze_id, config.MAX_MAZE_ID) / config.MAX_MAZE_ID
    easy, hard = config.EASY_WALL_COLOR, config.HARD_WALL_COLOR
    r, g, b = (int(a * h + (1.0 - a) * e) for e, h in zip(easy, hard, strict=True))
    return (r, g, b, config.WALL_ALPHA)


def render_maze_image(walkable: np.ndarray, maze_id: MazeId) -> Image.Image:
    """Render a (width, height) walkable mask to an RGBA image."""
    width, height = walkable.shape
    pixels = np.empty((height, width, 4), dtype=np.uint8)
    pixels[:] = wall_color(maze_id)
    pixels[walkable.T] = config.BACKGROUND_COLOR
    return Image.fromarray(pixels)


class ImageStore(abc.ABC):
    """Storage collaborator that persists rendered maze images by maze id."""

    @abc.abstractmethod
    def save(self, maze_id: MazeId, image: Image.Image) -> None:
        """Persist ``image`` for ``maze_id``. Raises OSError on failure."""
        raise NotImplementedError


class DirectoryImageStore(ImageStore):
    """Writes ``maze_<id>.png`` files into a directory."""

    def __init__(self, directory: Path | str = config.IMAGES_PATH) -> None:
        self.directory = Path(directory)

    def path_for(self, maze_id: MazeId) -> Path:
        return self.directory / f"maze_{maze_id}.png"

    def save(self, maze_id: MazeId, image: Image.Image) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self.path_for(maze_id)
        image.save(path)
        logger.info(f"Saved maze image: {path}")


class MemoryImageStore(ImageStore):
    """Keeps rendered images in memory. Useful for tests and headless hosts."""

    def __init__(self) -> None:
        self.images: dict[MazeId, Image.Image] = {}

    def save(self, maze_id: MazeId, image: Image.Image) -> None:
        self.images[maze_id] = image.copy()
