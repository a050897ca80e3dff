"""
Operators for permutation genomes.

Each gene is a distinct element (a city, a task) and a candidate solution is
an ordering of them. These operators are the building blocks used by the demo
entry point and the test suite; callers are free to supply their own.
"""

import math
import random
from dataclasses import dataclass
from typing import Any, Callable, Sequence

from src.genetic.core.genome import Gene, clone_genome
from src.genetic.core.population import Individual


@dataclass(eq=False)
class City(Gene):
    """A named point in the plane."""
    name: str
    x: float
    y: float

    def duplicate(self) -> "City":
        return City(self.name, self.x, self.y)

    def equals(self, other: Any) -> bool:
        return isinstance(other, City) and other.name == self.name

    def distance_to(self, other: "City") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)


def adjacent_difference_fitness(individual: Individual) -> float:
    """Negative sum of absolute differences between neighbouring genes."""
    genome = individual.genome
    return -float(sum(abs(genome[i + 1] - genome[i]) for i in range(len(genome) - 1)))


def tour_length(cities: Sequence[City]) -> float:
    """Length of the closed tour visiting the cities in order."""
    if len(cities) < 2:
        return 0.0
    return sum(
        cities[i].distance_to(cities[(i + 1) % len(cities)])
        for i in range(len(cities))
    )


def tour_fitness(individual: Individual) -> float:
    """Shorter tours score higher."""
    return -tour_length(individual.genome)


def make_swap_mutation(rng=None) -> Callable[[Individual, float], Individual]:
    """
    Build a mutation operator that swaps gene pairs.

    The operator performs ``round(rate * len(genome))`` random swaps (at least
    one when ``rate`` is positive) on a copy of the genome and returns a new
    individual carrying the same fitness function.
    """
    rng = rng or random

    def swap_mutation(individual: Individual, rate: float) -> Individual:
        genome = clone_genome(individual.genome)
        if len(genome) > 1 and rate > 0:
            swaps = max(1, round(rate * len(genome)))
            for _ in range(swaps):
                i, j = rng.sample(range(len(genome)), 2)
                genome[i], genome[j] = genome[j], genome[i]
        return Individual(genome, individual.evaluate)

    return swap_mutation


swap_mutation = make_swap_mutation()
