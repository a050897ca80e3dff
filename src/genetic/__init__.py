"""
Adaptive Genetic Algorithm Framework.

This package evolves a fixed-size population of genomes toward higher fitness
using strict elitism, rank-weighted parent selection, order-preserving
crossover and a mutation rate that decays each generation and resets when
the search stagnates.
"""

from src.genetic.core.config import (
    GeneticConfig,
    EvolutionParameters,
    LoggingConfig,
    ParallelizationConfig,
    create_default_config,
    create_test_config,
    create_production_config
)
from src.genetic.core.exceptions import GeneticAlgorithmError, IncompatibleGenomeError
from src.genetic.core.genome import Gene
from src.genetic.core.population import Population, Individual, FitnessCache
from src.genetic.core.mating import mate
from src.genetic.core.selection import RankWeightedSelector
from src.genetic.core.mutation import MutationScheduler
from src.genetic.core.engine import GeneticAlgorithmEngine

__version__ = "1.0.0"

__all__ = [
    # Configuration
    "GeneticConfig",
    "EvolutionParameters",
    "LoggingConfig",
    "ParallelizationConfig",
    "create_default_config",
    "create_test_config",
    "create_production_config",
    # Errors
    "GeneticAlgorithmError",
    "IncompatibleGenomeError",
    # Population
    "Gene",
    "Population",
    "Individual",
    "FitnessCache",
    # Operators
    "mate",
    "RankWeightedSelector",
    "MutationScheduler",
    # Engine
    "GeneticAlgorithmEngine",
]
