"""
Crossover for the Genetic Engine.

Offspring keep a prefix of one parent and are completed with the other
parent's genes in their original order, skipping genes the child already
holds. This keeps permutation-style genomes (every gene distinct, e.g. cities
of a tour) free of duplicates.
"""

import random
from typing import List, Any, Tuple

from src.genetic.core.exceptions import IncompatibleGenomeError
from src.genetic.core.genome import clone_gene, clone_genome, contains_gene
from src.genetic.core.population import Individual


def split_index(length: int, rng=None) -> int:
    """
    Choose the crossover split point for genomes of the given length.

    Genomes longer than 7 genes are split at the midpoint. Shorter genomes use
    a random split in ``[length // 4, length // 4 * 3)`` so the children are not
    copies of a single parent.
    """
    if length > 7:
        return length // 2

    rng = rng or random
    low = length // 4
    high = length // 4 * 3
    if high <= low:
        return low
    return rng.randrange(low, high)


def _ordered_fill(prefix: List[Any], donor: List[Any]) -> List[Any]:
    child = clone_genome(prefix)
    for gene in donor:
        if not contains_gene(child, gene):
            child.append(clone_gene(gene))
    return child


def mate(first: Individual, second: Individual, rng=None) -> Tuple[Individual, Individual]:
    """
    Produce two offspring from two parents.

    Args:
        first: Parent whose prefix starts the first child; its fitness function
            is inherited by both children
        second: Parent whose prefix starts the second child
        rng: Optional random generator (defaults to the ``random`` module)

    Returns:
        Tuple of two new, unevaluated individuals

    Raises:
        IncompatibleGenomeError: If the parents' genomes differ in length
    """
    if len(first.genome) != len(second.genome):
        raise IncompatibleGenomeError(len(first.genome), len(second.genome))

    split = split_index(len(first.genome), rng)

    first_genome = _ordered_fill(first.genome[:split], second.genome)
    second_genome = _ordered_fill(second.genome[:split], first.genome)

    return (
        Individual(first_genome, first.evaluate),
        Individual(second_genome, first.evaluate)
    )
