"""
Genetic Algorithm Engine.

This module implements the engine that owns the population and drives the
evolution: evaluation and sorting, strict elitism, rank-weighted parent
selection, crossover, adaptive mutation and the generation loop that reports
champion improvements to a caller-supplied callback.
"""

import random
import multiprocessing
from typing import List, Optional, Callable, Any
from concurrent.futures import ThreadPoolExecutor
import logging

import logfire
import numpy as np

from src.genetic.core.config import GeneticConfig
from src.genetic.core.mating import mate
from src.genetic.core.mutation import MutationScheduler
from src.genetic.core.population import Population, Individual
from src.genetic.core.selection import RankWeightedSelector


MutationOperator = Callable[[Individual, float], Individual]
ChampionCallback = Callable[[Individual], Any]


class GeneticAlgorithmEngine:
    """
    Main engine for running genetic algorithm optimization.

    The initial population is the seed individual ("adam") in slot 0 and
    mutated copies of it in every other slot. Each generation keeps the
    champion unchanged and fills the rest with offspring of rank-weighted
    parents.
    """

    def __init__(
        self,
        mutate: MutationOperator,
        adam: Individual,
        config: Optional[GeneticConfig] = None,
        logger: Optional[logging.Logger] = None,
        **overrides: Any
    ):
        """
        Initialize the genetic algorithm engine.

        Args:
            mutate: Operator returning a new individual mutated at a 0-1 rate
            adam: Seed individual
            config: Engine configuration (defaults to ``GeneticConfig()``)
            logger: Optional logger instance
            **overrides: Evolution parameters overriding ``config.evolution``,
                e.g. ``population_size=20`` or ``reset_threshold=10``
        """
        self.config = (config or GeneticConfig()).with_overrides(**overrides)
        self.logger = logger or self._setup_logger()

        if self.config.random_seed is not None:
            random.seed(self.config.random_seed)
            np.random.seed(self.config.random_seed)

        evolution = self.config.evolution
        self.rotations: Optional[List[float]] = evolution.rotations
        self.scheduler = MutationScheduler(
            max_rate=evolution.max_mutation_rate,
            min_rate=evolution.min_mutation_rate,
            adjustment_percent=evolution.mutation_rate_adjustment,
            reset_threshold=evolution.reset_threshold
        )
        self.selector = RankWeightedSelector()
        self._mutate = mutate

        self.current_generation = 0
        self.total_evaluations = 0
        self._stop_requested = False

        self.executor: Optional[ThreadPoolExecutor] = None
        if self.config.parallelization.enable_parallel:
            num_workers = self.config.parallelization.num_workers or multiprocessing.cpu_count()
            self.executor = ThreadPoolExecutor(max_workers=num_workers)

        individuals = [adam]
        for _ in range(1, evolution.population_size):
            individuals.append(self._mutate(adam, self.scheduler.fraction))
        self.population = Population(individuals)

    def _setup_logger(self) -> logging.Logger:
        """Setup default logger."""
        logger = logging.getLogger("genetic.engine")
        logger.setLevel(getattr(logging, self.config.logging.log_level))

        if not logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            handler.setFormatter(formatter)
            logger.addHandler(handler)

        return logger

    @property
    def mutation_rate(self) -> float:
        """Current mutation rate as a percentage."""
        return self.scheduler.current_rate

    @property
    def sorted(self) -> bool:
        """Whether the population is ordered with the champion first."""
        return self.population.sorted

    def get_current_champ(self) -> Individual:
        """Return the individual in slot 0 of the population."""
        return self.population.champion

    def mate(self, first: Individual, second: Individual):
        """Cross two parents into two offspring (see ``mating.mate``)."""
        return mate(first, second)

    def evaluate_and_sort(self) -> Individual:
        """Evaluate every unevaluated individual and sort by descending fitness."""
        with logfire.span("Evaluate Population", size=len(self.population)):
            evaluated = self.population.evaluate_and_sort(self.executor)
            self.total_evaluations += evaluated
        return self.population.champion

    def generation(self) -> Individual:
        """
        Advance the population by one generation.

        Returns:
            The champion of the new, already sorted generation
        """
        with logfire.span("Generation", generation=self.current_generation + 1):
            if not self.population.sorted:
                self.evaluate_and_sort()

            current = self.population.individuals
            champion = current[0]
            size = len(current)
            rate = self.scheduler.fraction

            new_individuals: List[Optional[Individual]] = [None] * size
            new_individuals[0] = champion

            for i in range(1, size - 1, 2):
                first, second = self.selector.select_pair(current)
                first_child, second_child = self.mate(first, second)

                # Offspring of exactly one champion parent are kept unmutated
                if (first is champion) == (second is champion):
                    first_child = self._mutate(first_child, rate)
                    second_child = self._mutate(second_child, rate)

                new_individuals[i] = first_child
                new_individuals[i + 1] = second_child

            if new_individuals[-1] is None:
                child, _ = self.mate(*self.selector.select_pair(current))
                new_individuals[-1] = self._mutate(child, rate)

            self.population.replace(new_individuals)
            self.current_generation += 1
            return self.evaluate_and_sort()

    def request_stop(self) -> None:
        """Ask a running ``run`` call to finish before the next generation."""
        self._stop_requested = True

    def run(self, generations: int = 0, callback: Optional[ChampionCallback] = None) -> Individual:
        """
        Evolve the population.

        Args:
            generations: Number of generations to run, 0 for no limit (stop
                with ``request_stop``)
            callback: Called with the champion before the first generation,
                after every generation that improves the champion, and once
                at the end

        Returns:
            The final champion
        """
        if generations < 0:
            raise ValueError(f"Generation count must not be negative, got {generations}")

        callback = callback or (lambda champion: None)
        self._stop_requested = False

        with logfire.span("GA Run",
                          population_size=len(self.population),
                          generations=generations):
            self.logger.info(
                f"Starting evolution with population size {len(self.population)}"
            )

            previous = self.evaluate_and_sort()
            callback(previous)

            completed = 0
            while (generations == 0 or completed < generations) and not self._stop_requested:
                champion = self.generation()
                completed += 1

                improved = champion.fitness() > previous.fitness()
                was_reset = self.scheduler.step(improved)

                if improved:
                    self.logger.debug(
                        f"Generation {self.current_generation}: champion improved "
                        f"{previous.fitness():.4f} -> {champion.fitness():.4f}"
                    )
                    logfire.info("Champion improved",
                                 generation=self.current_generation,
                                 fitness=champion.fitness())
                    callback(champion)
                elif was_reset:
                    self.logger.warning(
                        f"Stagnation detected at generation {self.current_generation}, "
                        f"mutation rate reset to {self.scheduler.current_rate}"
                    )

                if completed % self.config.logging.log_interval == 0:
                    self._log_progress()

                previous = champion

            final = self.get_current_champ()
            self.logger.info(
                f"Evolution finished after {completed} generations, "
                f"best fitness {final.fitness():.4f}"
            )
            callback(final)
            return final

    def _log_progress(self) -> None:
        """Log evolution progress."""
        if not self.config.logging.enable_logging:
            return

        stats = self.population.calculate_statistics()
        self.logger.info(
            f"Generation {self.current_generation}: "
            f"Best: {stats.get('best_fitness', 0):.4f}, "
            f"Avg: {stats.get('avg_fitness', 0):.4f}, "
            f"Mutation rate: {self.scheduler.current_rate:.1f}"
        )
        logfire.info("Evolution Progress",
                     evolution_generation=self.current_generation,
                     mutation_rate=self.scheduler.current_rate,
                     stale_count=self.scheduler.stale_count,
                     total_evaluations=self.total_evaluations,
                     **stats)

    def close(self) -> None:
        """Shut down the fitness evaluation worker pool."""
        if self.executor:
            self.executor.shutdown(wait=True)
            self.executor = None

    def __enter__(self) -> "GeneticAlgorithmEngine":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
