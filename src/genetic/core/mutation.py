"""
Adaptive Mutation Rate Scheduling.

The mutation rate starts at its maximum, decays by a percentage each
generation down to a floor, and jumps back to the maximum after a run of
generations without champion improvement.
"""

import math


class MutationScheduler:
    """
    Owns the current mutation rate (0-100 percentage domain).

    Operators receive ``fraction`` (``current_rate / 100``).
    """

    def __init__(
        self,
        max_rate: float = 100,
        min_rate: float = 10,
        adjustment_percent: float = 10,
        reset_threshold: int = 40
    ):
        if min_rate > max_rate:
            raise ValueError(
                f"Minimum mutation rate ({min_rate}) cannot exceed maximum ({max_rate})"
            )
        if reset_threshold < 1:
            raise ValueError("Reset threshold must be at least one generation")

        self.max_rate = max_rate
        self.min_rate = min_rate
        self.adjustment_percent = adjustment_percent
        self.reset_threshold = reset_threshold

        self.current_rate = max_rate
        self.stale_count = 0
        self.resets = 0

    @property
    def fraction(self) -> float:
        return self.current_rate / 100.0

    def decay(self) -> float:
        """Remove ``adjustment_percent`` of the current rate, rounded up, bounded by ``min_rate``."""
        reduction = math.ceil(self.current_rate * self.adjustment_percent / 100.0)
        self.current_rate = max(self.min_rate, self.current_rate - reduction)
        return self.current_rate

    def record(self, improved: bool) -> bool:
        """
        Track stagnation for one generation.

        Returns:
            True if the rate was reset to ``max_rate``
        """
        if improved:
            self.stale_count = 0
            return False

        self.stale_count += 1
        if self.stale_count >= self.reset_threshold:
            self.reset()
            return True
        return False

    def step(self, improved: bool) -> bool:
        """Apply one generation of decay followed by the stagnation check."""
        self.decay()
        return self.record(improved)

    def reset(self) -> None:
        self.current_rate = self.max_rate
        self.stale_count = 0
        self.resets += 1

    def __repr__(self) -> str:
        return (
            f"MutationScheduler(rate={self.current_rate}, min={self.min_rate}, "
            f"max={self.max_rate}, stale={self.stale_count}/{self.reset_threshold})"
        )
