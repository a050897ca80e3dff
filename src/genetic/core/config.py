"""
Genetic Engine Configuration Module.

This module defines configuration classes for the genetic algorithm engine,
including mutation-rate scheduling, parallel fitness evaluation, and logging.
"""

from typing import Optional, Dict, Any, List, Literal
from pydantic import BaseModel, Field, ConfigDict, model_validator
import os


class EvolutionParameters(BaseModel):
    """Parameters controlling the genetic algorithm evolution process."""

    model_config = ConfigDict(validate_assignment=True, extra='forbid')

    population_size: int = Field(
        default=10,
        ge=1,
        description="Number of individuals in the population"
    )

    # Mutation rate schedule, all values are percentages (0-100)
    max_mutation_rate: float = Field(
        default=100,
        ge=0.0,
        le=100.0,
        description="Initial mutation rate and the rate restored on stagnation"
    )
    mutation_rate_adjustment: float = Field(
        default=10,
        ge=0.0,
        le=100.0,
        description="Percentage of the current rate removed each generation"
    )
    min_mutation_rate: float = Field(
        default=10,
        ge=0.0,
        le=100.0,
        description="Lower bound of the decayed mutation rate"
    )
    reset_threshold: int = Field(
        default=40,
        ge=1,
        description="Generations without improvement before the rate is reset"
    )

    rotations: Optional[List[float]] = Field(
        default=None,
        description="Domain-specific rotation parameters for operator extensions"
    )

    @model_validator(mode="after")
    def validate_rate_bounds(self) -> "EvolutionParameters":
        """Ensure the minimum mutation rate does not exceed the maximum."""
        if self.min_mutation_rate > self.max_mutation_rate:
            raise ValueError('Minimum mutation rate must not exceed maximum mutation rate')
        return self


class LoggingConfig(BaseModel):
    """Configuration for logging and monitoring."""

    enable_logging: bool = Field(
        default=True,
        description="Enable detailed evolution logging"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level"
    )
    log_interval: int = Field(
        default=10,
        ge=1,
        description="Generations between progress logs"
    )


class ParallelizationConfig(BaseModel):
    """Configuration for parallel fitness evaluation."""

    enable_parallel: bool = Field(
        default=True,
        description="Evaluate fitness of a generation on a worker pool"
    )
    num_workers: Optional[int] = Field(
        default=None,
        ge=1,
        description="Number of worker threads (None for CPU count)"
    )


class GeneticConfig(BaseModel):
    """Main configuration class for the genetic engine."""

    model_config = ConfigDict(
        validate_assignment=True,
        extra='forbid'
    )

    evolution: EvolutionParameters = Field(
        default_factory=EvolutionParameters,
        description="Evolution parameters"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig,
        description="Logging and monitoring configuration"
    )
    parallelization: ParallelizationConfig = Field(
        default_factory=ParallelizationConfig,
        description="Parallel processing configuration"
    )

    random_seed: Optional[int] = Field(
        default=None,
        description="Random seed for reproducibility"
    )

    @classmethod
    def from_env(cls) -> "GeneticConfig":
        """Create configuration from environment variables."""
        config_dict: Dict[str, Any] = {}

        if pop_size := os.getenv("GA_POPULATION_SIZE"):
            config_dict.setdefault("evolution", {})["population_size"] = int(pop_size)
        if max_rate := os.getenv("GA_MAX_MUTATION_RATE"):
            config_dict.setdefault("evolution", {})["max_mutation_rate"] = float(max_rate)
        if adjustment := os.getenv("GA_MUTATION_RATE_ADJUSTMENT"):
            config_dict.setdefault("evolution", {})["mutation_rate_adjustment"] = float(adjustment)
        if min_rate := os.getenv("GA_MIN_MUTATION_RATE"):
            config_dict.setdefault("evolution", {})["min_mutation_rate"] = float(min_rate)
        if reset_threshold := os.getenv("GA_RESET_THRESHOLD"):
            config_dict.setdefault("evolution", {})["reset_threshold"] = int(reset_threshold)

        if num_workers := os.getenv("GA_NUM_WORKERS"):
            config_dict.setdefault("parallelization", {})["num_workers"] = int(num_workers)
        if enable_parallel := os.getenv("GA_ENABLE_PARALLEL"):
            config_dict.setdefault("parallelization", {})["enable_parallel"] = (
                enable_parallel.lower() in ("1", "true", "yes")
            )

        if log_level := os.getenv("GA_LOG_LEVEL"):
            config_dict.setdefault("logging", {})["log_level"] = log_level.upper()

        if random_seed := os.getenv("GA_RANDOM_SEED"):
            config_dict["random_seed"] = int(random_seed)

        return cls(**config_dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return self.model_dump()

    def save(self, filepath: str) -> None:
        """Save configuration to JSON file."""
        import json
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2, default=str)

    @classmethod
    def load(cls, filepath: str) -> "GeneticConfig":
        """Load configuration from JSON file."""
        import json
        with open(filepath, 'r') as f:
            data = json.load(f)
        return cls(**data)

    def with_overrides(self, **overrides: Any) -> "GeneticConfig":
        """Return a copy whose evolution parameters are updated and re-validated."""
        if not overrides:
            return self.model_copy(deep=True)
        evolution = EvolutionParameters(**{**self.evolution.model_dump(), **overrides})
        return self.model_copy(update={"evolution": evolution}, deep=True)

    def validate_consistency(self) -> None:
        """Validate configuration consistency across components."""
        evolution = self.evolution
        if evolution.min_mutation_rate > evolution.max_mutation_rate:
            raise ValueError(
                f"Minimum mutation rate ({evolution.min_mutation_rate}) cannot exceed "
                f"maximum mutation rate ({evolution.max_mutation_rate})"
            )

        num_workers = self.parallelization.num_workers
        if self.parallelization.enable_parallel and num_workers is not None \
                and num_workers > evolution.population_size:
            raise ValueError(
                f"Worker count ({num_workers}) must not exceed "
                f"population size ({evolution.population_size})"
            )


# Convenience functions
def create_default_config() -> GeneticConfig:
    """Create a default configuration suitable for most use cases."""
    return GeneticConfig()


def create_test_config() -> GeneticConfig:
    """Create a configuration suitable for testing (smaller, deterministic)."""
    return GeneticConfig(
        evolution=EvolutionParameters(
            population_size=20,
            reset_threshold=5
        ),
        logging=LoggingConfig(
            log_interval=1
        ),
        parallelization=ParallelizationConfig(
            enable_parallel=False  # Disable for deterministic tests
        )
    )


def create_production_config() -> GeneticConfig:
    """Create a configuration suitable for long-running searches."""
    return GeneticConfig(
        evolution=EvolutionParameters(
            population_size=200,
            max_mutation_rate=100,
            mutation_rate_adjustment=5,
            min_mutation_rate=5,
            reset_threshold=100
        ),
        parallelization=ParallelizationConfig(
            enable_parallel=True
        ),
        logging=LoggingConfig(
            log_interval=25
        )
    )
