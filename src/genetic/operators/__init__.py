"""
Sample genetic operators.

Fitness functions and mutation operators for permutation genomes, used by the
demo entry point and the test suite.
"""

from src.genetic.operators.permutation import (
    City,
    adjacent_difference_fitness,
    tour_length,
    tour_fitness,
    make_swap_mutation,
    swap_mutation
)

__all__ = [
    "City",
    "adjacent_difference_fitness",
    "tour_length",
    "tour_fitness",
    "make_swap_mutation",
    "swap_mutation",
]
