"""
Adaptive Genetic Algorithm - Source Package

This package contains the genetic engine and the application settings shared
by the demo entry point and the test suite.
"""

__version__ = "1.0.0"

from src.core.config import settings

__all__ = [
    "settings",
    "__version__",
]
