from __future__ import annotations

import math

import pytest

from labyrinth.game.success import SuccessTracker


def test_starts_at_zero() -> None:
    tracker = SuccessTracker()
    assert (tracker.passed, tracker.attempted) == (0, 0)


def test_success_rate() -> None:
    tracker = SuccessTracker()
    for _ in range(4):
        tracker.increase_attempted()
    tracker.increase_passed()

    assert tracker.success_rate() == pytest.approx(0.25)


def test_decrements_undo_increments() -> None:
    tracker = SuccessTracker(passed=2, attempted=5)
    tracker.decrease_passed()
    tracker.decrease_attempted()

    assert (tracker.passed, tracker.attempted) == (1, 4)


def test_no_attempts_is_nan() -> None:
    assert math.isnan(SuccessTracker().success_rate())


def test_rate_is_a_plain_float() -> None:
    assert type(SuccessTracker(passed=1, attempted=2).success_rate()) is float
