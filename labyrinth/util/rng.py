"""Seeded random streams, one per generation stage.

A maze level is reproducible only if each stage draws from randomness that no
other stage can disturb. An RNGProvider turns one seed into any number of
named streams; the stream for a name depends only on the seed and the name,
never on which other streams were used or in what order.

Two kinds of provider exist:

- one per maze, seeded with the maze seed (carving, openings, rooms and
  power-up placement)
- one per session, behind ``init``/``get``, for re-rolls that must not alter
  a level's layout (minotaur spawns, hero starts, names)

Stream names are dotted, for example ``maze.carve`` or ``names.player``.
"""

from __future__ import annotations

import random
import zlib
from collections.abc import Sequence
from random import Random
from typing import TYPE_CHECKING, TypeAlias, TypeVar

if TYPE_CHECKING:
    from labyrinth.types import RandomSeed

T = TypeVar("T")


class RNGStream:
    """Handle on one named stream of a provider.

    Resolves the underlying Random on every call, so module-level handles
    follow the provider when it is reseeded.
    """

    def __init__(self, provider: RNGProvider, domain: str) -> None:
        self._provider = provider
        self._domain = domain

    def _rng(self) -> Random:
        return self._provider._get_raw(self._domain)

    def random(self) -> float:
        return self._rng().random()

    def randint(self, a: int, b: int) -> int:
        """Integer in [a, b], both inclusive."""
        return self._rng().randint(a, b)

    def randrange(self, start: int, stop: int | None = None, step: int = 1) -> int:
        return self._rng().randrange(start, stop, step)

    def choice(self, seq: Sequence[T]) -> T:
        return self._rng().choice(seq)

    def sample(self, population: Sequence[T], k: int) -> list[T]:
        """``k`` distinct elements of ``population``."""
        return self._rng().sample(population, k)


# Anything generation code can draw from: a plain Random or a named stream.
RNG: TypeAlias = Random | RNGStream


class RNGProvider:
    """Derives independent named streams from one seed.

    The derived seed is ``crc32("<seed>:<name>")``, which is stable across
    processes. A provider without a seed hands out unseeded streams.
    """

    def __init__(self, master_seed: RandomSeed = None) -> None:
        self._master_seed = master_seed
        self._streams: dict[str, Random] = {}
        self._proxies: dict[str, RNGStream] = {}

    def get(self, domain: str) -> RNGStream:
        """The stream named ``domain``; repeated calls return the same handle."""
        if domain not in self._proxies:
            self._proxies[domain] = RNGStream(self, domain)
        return self._proxies[domain]

    def _get_raw(self, domain: str) -> Random:
        if domain not in self._streams:
            if self._master_seed is None:
                self._streams[domain] = Random()
            else:
                # hash() is salted per process; crc32 is not.
                derived = zlib.crc32(f"{self._master_seed}:{domain}".encode())
                self._streams[domain] = Random(derived)
        return self._streams[domain]

    def reset(self, master_seed: RandomSeed = None) -> None:
        """Reseed every stream. Handles from get() stay valid."""
        self._master_seed = master_seed
        self._streams.clear()


def fresh_seed() -> int:
    """A 64-bit maze seed from system entropy, for levels built without one."""
    return random.SystemRandom().getrandbits(64)


# =============================================================================
# Session-wide streams
# =============================================================================

_provider: RNGProvider | None = None


def init(master_seed: RandomSeed = None) -> None:
    """Seed the session streams. Reseeds in place if they already exist."""
    global _provider
    if _provider is not None:
        _provider.reset(master_seed)
    else:
        _provider = RNGProvider(master_seed)


def get(domain: str) -> RNGStream:
    """A session stream. Unseeded until init() is called."""
    global _provider
    if _provider is None:
        _provider = RNGProvider(None)
    return _provider.get(domain)
