"""
Unit tests for the sample permutation operators.
"""

import random

import pytest

from src.genetic.core.population import Individual
from src.genetic.operators import (
    City,
    adjacent_difference_fitness,
    make_swap_mutation,
    tour_fitness,
    tour_length
)


class TestFitnessFunctions:

    def test_adjacent_difference(self):
        assert adjacent_difference_fitness(Individual([1, 2, 3, 4], None)) == -3.0
        assert adjacent_difference_fitness(Individual([4, 1, 3], None)) == -5.0
        assert adjacent_difference_fitness(Individual([], None)) == 0.0

    def test_tour_length_square(self):
        square = [City("a", 0, 0), City("b", 0, 1), City("c", 1, 1), City("d", 1, 0)]
        assert tour_length(square) == pytest.approx(4.0)
        assert tour_fitness(Individual(square, tour_fitness)) == pytest.approx(-4.0)

    def test_tour_length_degenerate(self):
        assert tour_length([]) == 0.0
        assert tour_length([City("a", 3, 4)]) == 0.0


class TestSwapMutation:

    def test_returns_new_individual(self):
        mutate = make_swap_mutation(random.Random(5))
        original = Individual([1, 2, 3, 4, 5, 6, 7, 8], adjacent_difference_fitness)

        mutated = mutate(original, 0.5)

        assert mutated is not original
        assert original.genome == [1, 2, 3, 4, 5, 6, 7, 8]
        assert sorted(mutated.genome) == original.genome
        assert mutated.evaluate is original.evaluate
        assert not mutated.evaluated

    def test_zero_rate_copies_genome(self):
        mutate = make_swap_mutation(random.Random(5))
        original = Individual([3, 1, 2], adjacent_difference_fitness)

        mutated = mutate(original, 0.0)

        assert mutated.genome == original.genome
        assert mutated.genome is not original.genome

    def test_full_rate_changes_order(self):
        mutate = make_swap_mutation(random.Random(11))
        original = Individual(list(range(20)), adjacent_difference_fitness)

        changed = [mutate(original, 1.0).genome != original.genome for _ in range(10)]

        assert any(changed)

    def test_single_gene_genome(self):
        mutate = make_swap_mutation()
        assert mutate(Individual([7], adjacent_difference_fitness), 1.0).genome == [7]

    def test_city_genes_are_duplicated(self):
        mutate = make_swap_mutation(random.Random(1))
        cities = [City(name, i, i) for i, name in enumerate("abcd")]

        mutated = mutate(Individual(cities, tour_fitness), 0.5)

        assert all(gene is not city for gene in mutated.genome for city in cities)
