"""
Genetic Core Module - Genetic Algorithm Components.

This module contains the core components of the genetic engine, including
configuration, genome capabilities, individuals and populations, crossover,
selection, mutation-rate scheduling, and the main evolution engine.
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

from src.genetic.core.exceptions import (
    GeneticAlgorithmError,
    IncompatibleGenomeError
)

from src.genetic.core.genome import (
    Gene,
    clone_gene,
    clone_genome,
    genes_equal
)

from src.genetic.core.population import (
    Population,
    Individual,
    FitnessCache,
    Unset,
    Computed
)

from src.genetic.core.mating import mate
from src.genetic.core.selection import RankWeightedSelector
from src.genetic.core.mutation import MutationScheduler

from src.genetic.core.engine import (
    GeneticAlgorithmEngine
)

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

    # Genome representation
    "Gene",
    "clone_gene",
    "clone_genome",
    "genes_equal",

    # Population management
    "Population",
    "Individual",
    "FitnessCache",
    "Unset",
    "Computed",

    # Operators
    "mate",
    "RankWeightedSelector",
    "MutationScheduler",

    # Engine
    "GeneticAlgorithmEngine"
]
