"""Pass/attempt bookkeeping for a maze level."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass
class SuccessTracker:
    """Counts how many attempts at a level were made and how many passed.

    Both counters can be decremented to correct for attempts that never
    concluded (for example a player disconnecting mid-level). Keeping
    ``attempted >= passed`` is the caller's job.
    """

    passed: int = 0
    attempted: int = 0

    def increase_attempted(self) -> None:
        self.attempted += 1

    def decrease_attempted(self) -> None:
        self.attempted -= 1

    def increase_passed(self) -> None:
        self.passed += 1

    def decrease_passed(self) -> None:
        self.passed -= 1

    def success_rate(self) -> float:
        """passed / attempted. NaN when nothing was attempted yet."""
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(np.float64(self.passed) / np.float64(self.attempted))
