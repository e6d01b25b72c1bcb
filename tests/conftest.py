from __future__ import annotations

from collections.abc import Iterator

import pytest

from labyrinth.util import rng


@pytest.fixture(autouse=True)
def seed_session_rng() -> Iterator[None]:
    """Reseed the session-wide RNG streams before and after each test."""
    rng.init(12345)
    yield
    rng.init(12345)
