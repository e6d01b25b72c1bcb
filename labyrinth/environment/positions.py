"""Index of traversable grid cells."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

import numpy as np

from labyrinth.types import Position, TileCoord
from labyrinth.util.rng import RNG


class ValidPositions:
    """The set of traversable cells of a grid; every other cell is wall.

    Backed by a boolean mask of shape (width, height), so membership tests
    are O(1) and iteration order is deterministic (column-major, matching
    ``np.argwhere``).
    """

    def __init__(self, width: TileCoord, height: TileCoord) -> None:
        self.width = width
        self.height = height
        self.mask = np.zeros((width, height), dtype=np.bool_, order="F")
        self._positions_cache: list[Position] | None = None

    @classmethod
    def from_mask(cls, mask: np.ndarray) -> ValidPositions:
        """Build an index from a (width, height) boolean mask."""
        width, height = mask.shape
        index = cls(width, height)
        index.mask[:] = mask.astype(np.bool_)
        return index

    @classmethod
    def from_rows(cls, rows: Iterable[str], floor: str = ".") -> ValidPositions:
        """Build an index from ASCII rows, where ``floor`` marks traversable cells."""
        lines = list(rows)
        height = len(lines)
        width = max((len(line) for line in lines), default=0)
        index = cls(width, height)
        for y, line in enumerate(lines):
            for x, ch in enumerate(line):
                if ch == floor:
                    index.mask[x, y] = True
        return index

    def is_valid(self, position: Position) -> bool:
        """True if ``position`` is inside the grid and traversable."""
        x, y = position
        return 0 <= x < self.width and 0 <= y < self.height and bool(self.mask[x, y])

    def insert(self, position: Position) -> None:
        """Mark a cell traversable. Only used while a maze is being generated."""
        x, y = position
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"Position {position} is outside the {self.width}x{self.height} grid"
            )
        if not self.mask[x, y]:
            self.mask[x, y] = True
            self._positions_cache = None

    def insert_many(self, positions: Iterable[Position]) -> None:
        for position in positions:
            self.insert(position)

    @property
    def positions(self) -> list[Position]:
        """Traversable cells in deterministic column-major order."""
        if self._positions_cache is None:
            self._positions_cache = [
                (int(x), int(y)) for x, y in np.argwhere(self.mask)
            ]
        return self._positions_cache

    def random_valid(self, rng: RNG) -> Position:
        """Uniformly sample one traversable cell."""
        positions = self.positions
        if not positions:
            raise ValueError("Cannot sample from an empty position set")
        return positions[rng.randrange(len(positions))]

    def filtered_random(
        self, predicate: Callable[[Position], bool], count: int, rng: RNG
    ) -> list[Position]:
        """Uniformly sample up to ``count`` distinct cells satisfying ``predicate``.

        Returns fewer than ``count`` cells when too few qualify.
        """
        candidates = [position for position in self.positions if predicate(position)]
        return rng.sample(candidates, min(count, len(candidates)))

    def __contains__(self, position: object) -> bool:
        if not isinstance(position, tuple) or len(position) != 2:
            return False
        return self.is_valid(position)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[Position]:
        return iter(self.positions)

    def __len__(self) -> int:
        return int(np.count_nonzero(self.mask))

    def __repr__(self) -> str:
        return f"<ValidPositions {self.width}x{self.height} valid={len(self)}>"
