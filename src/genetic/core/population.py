"""
Population Management for the Genetic Engine.

This module defines individuals (a genome plus a lazily computed, memoized
fitness value) and the fixed-size population the engine evolves, including
parallel evaluation and the descending fitness sort.
"""

from typing import List, Optional, Dict, Any, Callable, Iterator, Union
from concurrent.futures import Executor
from dataclasses import dataclass
from functools import cmp_to_key
import math
import threading
import uuid

import numpy as np


@dataclass(frozen=True)
class Unset:
    """Fitness has not been computed yet."""


@dataclass(frozen=True)
class Computed:
    """Fitness value computed by the fitness function."""
    value: float


FitnessState = Union[Unset, Computed]
UNSET = Unset()


class FitnessCache:
    """
    Write-once storage for a single individual's fitness.

    The first call to ``get_or_compute`` invokes the supplied function and
    stores the result; later calls return the stored value. The lock makes
    concurrent callers on the same instance wait for the first computation.
    """

    def __init__(self) -> None:
        self._state: FitnessState = UNSET
        self._lock = threading.Lock()

    @property
    def state(self) -> FitnessState:
        return self._state

    @property
    def is_computed(self) -> bool:
        return isinstance(self._state, Computed)

    def get_or_compute(self, compute: Callable[[], float]) -> float:
        state = self._state
        if isinstance(state, Computed):
            return state.value

        with self._lock:
            state = self._state
            if isinstance(state, Computed):
                return state.value
            value = float(compute())
            self._state = Computed(value)
            return value


class Individual:
    """
    Represents an individual in the population.

    An individual wraps a genome and the fitness function used to score it.
    Individuals are treated as immutable: mutation operators return new
    instances, so a cached fitness always matches the genome.
    """

    def __init__(self, genome: Optional[List[Any]], evaluate: Callable[["Individual"], float]):
        self.genome: List[Any] = genome if genome is not None else []
        self.evaluate = evaluate
        self.id = uuid.uuid4().hex[:16]
        self._fitness_cache = FitnessCache()

    def fitness(self) -> float:
        """Return the fitness, computing it on first access."""
        return self._fitness_cache.get_or_compute(lambda: self.evaluate(self))

    @property
    def fitness_state(self) -> FitnessState:
        return self._fitness_cache.state

    @property
    def evaluated(self) -> bool:
        return self._fitness_cache.is_computed

    def __len__(self) -> int:
        return len(self.genome)

    def __repr__(self) -> str:
        state = self.fitness_state
        fitness = state.value if isinstance(state, Computed) else None
        return f"Individual(id={self.id[:8]}, genes={len(self.genome)}, fitness={fitness})"


def compare_fitness_descending(first: Individual, second: Individual) -> int:
    """
    Order by descending fitness; differences below 0.001 compare equal.

    Infinite fitness values order like any other; NaN compares equal to
    everything.
    """
    scaled = (second.fitness() - first.fitness()) * 1000
    if math.isnan(scaled):
        return 0
    return int(max(-1.0, min(1.0, scaled)))


class Population:
    """
    Fixed-size population of individuals.

    After ``evaluate_and_sort`` the individuals are ordered by descending
    fitness and index 0 holds the champion. Replacing the individuals clears
    the ``sorted`` flag.
    """

    def __init__(self, individuals: List[Individual]):
        if not individuals:
            raise ValueError("Population must contain at least one individual")
        self._individuals: List[Individual] = list(individuals)
        self.size = len(self._individuals)
        self.sorted = False
        self.statistics: Dict[str, Any] = {}

    @property
    def individuals(self) -> List[Individual]:
        return self._individuals

    def __len__(self) -> int:
        return self.size

    def __getitem__(self, index: int) -> Individual:
        return self._individuals[index]

    def __iter__(self) -> Iterator[Individual]:
        return iter(self._individuals)

    @property
    def champion(self) -> Individual:
        """Individual currently at rank 0."""
        return self._individuals[0]

    def replace(self, individuals: List[Individual]) -> None:
        """Replace the individuals with a new generation of the same size."""
        if len(individuals) != self.size:
            raise ValueError(
                f"Replacement generation has {len(individuals)} individuals, "
                f"expected {self.size}"
            )
        self._individuals = list(individuals)
        self.sorted = False

    def evaluate(self, executor: Optional[Executor] = None) -> int:
        """
        Compute fitness for every individual that has not been evaluated.

        Args:
            executor: Optional executor used to evaluate individuals concurrently

        Returns:
            Number of individuals that were evaluated by this call
        """
        pending = [ind for ind in self._individuals if not ind.evaluated]
        if not pending:
            return 0

        if executor is not None and len(pending) > 1:
            # list() drains the iterator so worker exceptions propagate here
            list(executor.map(Individual.fitness, pending))
        else:
            for individual in pending:
                individual.fitness()

        return len(pending)

    def sort(self) -> None:
        """Sort by descending fitness (stable, 0.001 tie tolerance)."""
        self._individuals.sort(key=cmp_to_key(compare_fitness_descending))
        self.sorted = True

    def evaluate_and_sort(self, executor: Optional[Executor] = None) -> int:
        evaluated = self.evaluate(executor)
        self.sort()
        return evaluated

    def calculate_statistics(self) -> Dict[str, Any]:
        """Calculate fitness statistics of the evaluated individuals."""
        fitnesses = np.array([ind.fitness() for ind in self._individuals if ind.evaluated])

        if fitnesses.size == 0:
            return {}

        self.statistics = {
            "population_size": self.size,
            "evaluated_count": int(fitnesses.size),
            "best_fitness": float(fitnesses.max()),
            "worst_fitness": float(fitnesses.min()),
            "avg_fitness": float(fitnesses.mean()),
            "fitness_std": float(fitnesses.std()),
            "unique_individuals": len({ind.id for ind in self._individuals}),
        }
        return self.statistics
