"""
Exceptions raised by the genetic engine.
"""

from typing import Optional, Dict, Any


class GeneticAlgorithmError(Exception):
    """Base exception for genetic engine errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.details = details or {}


class IncompatibleGenomeError(GeneticAlgorithmError, ValueError):
    """Raised when two individuals with different genome lengths are mated."""

    def __init__(self, first_length: int, second_length: int):
        super().__init__(
            "Two individuals must have the same length genome to be able to mate "
            f"(got {first_length} and {second_length})",
            details={"first_length": first_length, "second_length": second_length}
        )
        self.first_length = first_length
        self.second_length = second_length
