"""
Core domain models package for the vertex graph primitives.

This package provides the vertex model and the validation helpers shared by
the models.
"""

from .base import is_finite_weight, is_weight, validate_weight
from .vertex import Vertex

__all__ = [
    # Base utilities
    "is_weight",
    "is_finite_weight",
    "validate_weight",
    # Vertex model
    "Vertex",
]
