"""
Parent Selection for the Genetic Engine.

Rank-weighted sampling: in a population of N individuals sorted by
descending fitness, the individual at rank i has weight N - i, so the
champion is the most likely parent while the weakest keeps weight 1.
"""

import random
from typing import Sequence

from src.genetic.core.population import Individual


def total_rank_weight(size: int) -> float:
    """Sum of rank weights, N(N+1)/2."""
    return size * (size + 1) / 2.0


def rank_probability(rank: int, size: int) -> float:
    """Selection probability of the individual at ``rank`` (0 is the champion)."""
    return (size - rank) / total_rank_weight(size)


class RankWeightedSelector:
    """Pick individuals from a sorted population with triangular rank weights."""

    def __init__(self, rng=None):
        self.rng = rng or random

    def select(self, population: Sequence[Individual]) -> Individual:
        """
        Select one individual.

        The population must already be sorted with the champion first; this is
        not checked.
        """
        size = len(population)
        if size == 0:
            raise ValueError("Cannot select from an empty population")

        total = total_rank_weight(size)
        draw = self.rng.random()
        cumulative = 0
        for rank in range(size):
            cumulative += size - rank
            if draw < cumulative / total:
                return population[rank]

        # Only reachable through floating point rounding at the boundary
        return population[0]

    def select_pair(self, population: Sequence[Individual]):
        return self.select(population), self.select(population)
