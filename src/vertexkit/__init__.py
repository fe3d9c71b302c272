"""
vertexkit - Directed, Weighted Graph Primitives

This package provides the building blocks a graph container is made of:

- A lockable vertex that keeps its outgoing weighted connections and the
  matching incoming back-references in step
- Event notification for connectivity and lock state changes
- A circular singly linked list sequence container
- Integrity validation of connectivity across a collection of vertices
"""

__version__ = "0.1.0"
__author__ = "vertexkit Team"
__license__ = "See LICENSE file"

# Version compatibility check
import sys

if sys.version_info < (3, 12):
    raise RuntimeError("vertexkit requires Python 3.12 or higher")

# Import commonly used components for easier access
from .core.exceptions import LockedVertexError
from .core.lists import CircularSinglyLinkedList
from .core.models import Vertex

__all__ = [
    "CircularSinglyLinkedList",
    "LockedVertexError",
    "Vertex",
]
