"""
PyTest configuration and fixtures for the genetic engine.

This module provides shared test fixtures: a seeded random state, a
call-counting fitness function, permutation operators, a seed individual and
engine configurations suitable for fast deterministic tests.
"""

import os
import sys
import random
import threading
from typing import Callable, Generator, List

import numpy as np
import pytest
import logfire

# Add project root to Python path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from src.core.config import settings
from src.genetic.core.config import GeneticConfig, create_test_config
from src.genetic.core.population import Individual
from src.genetic.operators import adjacent_difference_fitness, make_swap_mutation


# Override settings for testing
settings.environment = "testing"
settings.logfire_environment = "testing"

logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture(autouse=True)
def seeded_random() -> Generator[None, None, None]:
    """Seed the global random state so every test is reproducible."""
    state = random.getstate()
    random.seed(1234)
    np.random.seed(1234)
    yield
    random.setstate(state)


class CountingFitness:
    """Fitness function wrapper that counts how often it is invoked."""

    def __init__(self, function: Callable[[Individual], float] = adjacent_difference_fitness):
        self.function = function
        self.calls = 0
        self._lock = threading.Lock()

    def __call__(self, individual: Individual) -> float:
        with self._lock:
            self.calls += 1
        return self.function(individual)


@pytest.fixture
def counting_fitness() -> CountingFitness:
    """Call-counting adjacent-difference fitness function."""
    return CountingFitness()


@pytest.fixture
def swap_mutation():
    """Swap mutation operator driven by the seeded global random state."""
    return make_swap_mutation()


@pytest.fixture
def ordered_genome() -> List[int]:
    return [1, 2, 3, 4, 5, 6, 7, 8]


@pytest.fixture
def shuffled_adam() -> Individual:
    """Seed individual whose genome is far from the optimum ordering."""
    return Individual([5, 1, 8, 3, 7, 2, 6, 4], adjacent_difference_fitness)


@pytest.fixture
def test_config() -> GeneticConfig:
    """Small, sequential engine configuration."""
    return create_test_config()


@pytest.fixture
def constant_fitness() -> Callable[[Individual], float]:
    """Fitness function that never improves, for stagnation tests."""
    return lambda individual: 0.0


# Test markers
pytest.mark.slow = pytest.mark.slow
pytest.mark.unit = pytest.mark.unit
