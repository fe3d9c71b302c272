"""Core vertex functionality."""

from .config import DEFAULT_CONFIG, VertexConfig
from .events import VertexEvent, VertexEventListener
from .exceptions import (
    GraphOperationError,
    InvalidIndexError,
    LockedVertexError,
    ValidationError,
)
from .lists import CircularSinglyLinkedList, ListNode
from .models import Vertex

__all__ = [
    "CircularSinglyLinkedList",
    "DEFAULT_CONFIG",
    "GraphOperationError",
    "InvalidIndexError",
    "ListNode",
    "LockedVertexError",
    "ValidationError",
    "Vertex",
    "VertexConfig",
    "VertexEvent",
    "VertexEventListener",
]
