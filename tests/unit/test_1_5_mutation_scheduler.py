"""
Unit tests for the adaptive mutation rate schedule.
"""

import pytest

from src.genetic.core.mutation import MutationScheduler


class TestDecay:

    def test_starts_at_max_rate(self):
        scheduler = MutationScheduler(max_rate=80, min_rate=5)
        assert scheduler.current_rate == 80
        assert scheduler.fraction == pytest.approx(0.8)

    def test_percentage_decay_rounds_up(self):
        """100 -> 90 -> 81 -> 72 (ceil(8.1) = 9 removed)."""
        scheduler = MutationScheduler(max_rate=100, min_rate=10, adjustment_percent=10)

        assert scheduler.decay() == 90
        assert scheduler.decay() == 81
        assert scheduler.decay() == 72

    def test_decay_bounded_by_min_rate(self):
        scheduler = MutationScheduler(max_rate=100, min_rate=10, adjustment_percent=50)
        rates = [scheduler.decay() for _ in range(10)]

        assert rates[:3] == [50, 25, 12]
        assert rates[-1] == 10
        assert min(rates) == 10

    def test_rate_non_increasing_without_resets(self):
        scheduler = MutationScheduler(max_rate=100, min_rate=7, adjustment_percent=13,
                                      reset_threshold=1000)
        rates = [scheduler.current_rate]
        for _ in range(100):
            scheduler.step(improved=False)
            rates.append(scheduler.current_rate)

        assert all(later <= earlier for earlier, later in zip(rates, rates[1:]))
        assert all(rate >= 7 for rate in rates)
        assert scheduler.resets == 0

    def test_invalid_bounds(self):
        with pytest.raises(ValueError):
            MutationScheduler(max_rate=10, min_rate=20)
        with pytest.raises(ValueError):
            MutationScheduler(reset_threshold=0)


class TestStagnation:

    def test_reset_after_threshold(self):
        """After exactly reset_threshold stale generations the rate is back at max."""
        scheduler = MutationScheduler(max_rate=100, min_rate=10, adjustment_percent=10,
                                      reset_threshold=3)

        assert scheduler.step(improved=False) is False
        assert scheduler.step(improved=False) is False
        assert scheduler.current_rate < 100

        assert scheduler.step(improved=False) is True
        assert scheduler.current_rate == 100
        assert scheduler.stale_count == 0
        assert scheduler.resets == 1

    def test_improvement_zeroes_stale_count(self):
        scheduler = MutationScheduler(reset_threshold=3)

        scheduler.step(improved=False)
        scheduler.step(improved=False)
        assert scheduler.stale_count == 2

        scheduler.step(improved=True)
        assert scheduler.stale_count == 0

        scheduler.step(improved=False)
        scheduler.step(improved=False)
        assert scheduler.resets == 0

    def test_threshold_of_one_resets_every_stale_generation(self):
        scheduler = MutationScheduler(max_rate=60, min_rate=10, reset_threshold=1)

        for _ in range(3):
            assert scheduler.step(improved=False) is True
            assert scheduler.current_rate == 60
