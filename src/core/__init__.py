"""
Core functionality shared across the project.

This package contains application settings loaded from the environment.
"""

from src.core.config import settings

__all__ = [
    "settings",
]
