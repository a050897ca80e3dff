"""
Unit tests for rank-weighted parent selection.
"""

import random

import numpy as np
import pytest

from src.genetic.core.population import Individual
from src.genetic.core.selection import (
    RankWeightedSelector,
    rank_probability,
    total_rank_weight
)


class FixedDraw:
    """Random source returning a fixed value from random()."""

    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


def ranked_population(size):
    return [Individual([rank], lambda individual: 0.0) for rank in range(size)]


class TestRankWeights:

    def test_total_weight(self):
        assert total_rank_weight(4) == 10
        assert total_rank_weight(1) == 1

    def test_probabilities_sum_to_one(self):
        size = 7
        assert sum(rank_probability(i, size) for i in range(size)) == pytest.approx(1.0)
        assert rank_probability(0, size) > rank_probability(size - 1, size) > 0


class TestRankWeightedSelector:
    """Test suite for the selector."""

    @pytest.mark.parametrize("draw,expected_rank", [
        (0.0, 0),
        (0.39, 0),
        (0.4, 1),
        (0.69, 1),
        (0.7, 2),
        (0.89, 2),
        (0.9, 3),
        (0.999, 3),
    ])
    def test_cumulative_boundaries(self, draw, expected_rank):
        """With N=4 the cumulative fractions are 0.4, 0.7, 0.9, 1.0."""
        population = ranked_population(4)
        selector = RankWeightedSelector(FixedDraw(draw))

        assert selector.select(population) is population[expected_rank]

    def test_fall_through_returns_champion(self):
        """A draw at the probability boundary returns rank 0 instead of raising."""
        population = ranked_population(5)
        selector = RankWeightedSelector(FixedDraw(1.0))

        assert selector.select(population) is population[0]

    def test_empty_population(self):
        with pytest.raises(ValueError):
            RankWeightedSelector().select([])

    def test_single_individual(self):
        population = ranked_population(1)
        assert RankWeightedSelector().select(population) is population[0]

    def test_select_pair(self):
        population = ranked_population(3)
        first, second = RankWeightedSelector().select_pair(population)
        assert first in population and second in population

    def test_selection_distribution(self):
        """Empirical frequencies converge to (N - i) / (N(N+1)/2)."""
        size = 6
        trials = 60000
        population = ranked_population(size)
        selector = RankWeightedSelector(random.Random(2024))

        picks = [selector.select(population).genome[0] for _ in range(trials)]
        frequencies = np.bincount(picks, minlength=size) / trials
        expected = np.array([rank_probability(i, size) for i in range(size)])

        np.testing.assert_allclose(frequencies, expected, atol=0.01)
