"""
Adaptive Genetic Algorithm - Demo Entry Point

This module configures logging and Logfire observability, then evolves a
shortest-tour ordering of randomly placed cities and prints every champion
the engine reports.
"""

import logging
import random
import sys
from typing import List

from dotenv import load_dotenv
import logfire

from src.core.config import settings
from src.genetic import GeneticAlgorithmEngine, GeneticConfig, Individual
from src.genetic.operators import City, tour_fitness, tour_length, swap_mutation

# Load environment variables
load_dotenv()

logger = logging.getLogger("genetic.demo")


def configure_observability() -> None:
    """Configure stdlib logging and Logfire from settings."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    logfire.configure(**settings.get_logfire_settings())


def random_cities(count: int, rng: random.Random) -> List[City]:
    """Place ``count`` cities uniformly in a 100x100 square."""
    return [
        City(f"city-{i:02d}", rng.uniform(0, 100), rng.uniform(0, 100))
        for i in range(count)
    ]


def run_demo(generations: int, city_count: int, config: GeneticConfig) -> Individual:
    """Evolve a tour and return the final champion."""
    rng = random.Random(config.random_seed)
    adam = Individual(random_cities(city_count, rng), tour_fitness)

    def report(champion: Individual) -> None:
        route = " -> ".join(city.name for city in champion.genome)
        logger.info(f"Tour length {tour_length(champion.genome):.2f}: {route}")

    with GeneticAlgorithmEngine(swap_mutation, adam, config) as engine:
        with logfire.span("Demo run", cities=city_count, generations=generations):
            return engine.run(generations, report)


def main() -> int:
    configure_observability()
    config = GeneticConfig.from_env()
    champion = run_demo(settings.demo_generations, settings.demo_city_count, config)
    print(f"Best tour length: {tour_length(champion.genome):.2f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
