"""
Validation package for vertexkit.

This package provides the validation result container and the connectivity
integrity checks for collections of vertices.
"""

from .base import ValidationResult
from .integrity import ConnectivityIntegrityValidator

__all__ = [
    "ValidationResult",
    "ConnectivityIntegrityValidator",
]
