"""
Genome Representation for the Genetic Engine.

A genome is an ordered list of genes. The engine never inspects gene contents;
it only needs to duplicate genes when building offspring and to compare them
when removing duplicates during crossover.
"""

from abc import ABC, abstractmethod
from copy import deepcopy
from typing import Any, List, Sequence


class Gene(ABC):
    """
    Capability required from custom genome elements.

    Subclasses provide an independent copy through ``duplicate`` and value
    equality through ``equals``. Plain Python values (ints, strings, tuples)
    do not need to subclass this; they are deep-copied and compared with ``==``.
    """

    @abstractmethod
    def duplicate(self) -> "Gene":
        """Return an independent copy of this gene."""

    @abstractmethod
    def equals(self, other: Any) -> bool:
        """Return True when ``other`` represents the same gene."""

    def __eq__(self, other: Any) -> bool:
        return self.equals(other)

    def __ne__(self, other: Any) -> bool:
        return not self.equals(other)

    __hash__ = None


def clone_gene(gene: Any) -> Any:
    """Duplicate a single gene."""
    if isinstance(gene, Gene):
        return gene.duplicate()
    return deepcopy(gene)


def genes_equal(first: Any, second: Any) -> bool:
    """Compare two genes using the gene's own equality."""
    if isinstance(first, Gene):
        return first.equals(second)
    return first == second


def contains_gene(genome: Sequence[Any], gene: Any) -> bool:
    """Return True if an equal gene is already present in the genome."""
    return any(genes_equal(existing, gene) for existing in genome)


def clone_genome(genome: Sequence[Any]) -> List[Any]:
    """Duplicate every gene of a genome into a new list."""
    return [clone_gene(gene) for gene in genome]
