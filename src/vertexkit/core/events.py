"""
Vertex event types.

Vertices notify registered listeners of connectivity and lock state changes.
Events are only emitted for actual changes: duplicate additions, removals that
found nothing, and repeated lock or unlock calls stay silent.
"""

from enum import Enum, auto
from typing import Any, Dict, Protocol


class VertexEvent(Enum):
    """Events that can occur on a vertex."""

    CONNECTION_ADDED = auto()
    CONNECTION_REMOVED = auto()
    LOCKED = auto()
    UNLOCKED = auto()


class VertexEventListener(Protocol):
    """Protocol for objects that listen to vertex state changes."""

    def on_state_change(self, event: VertexEvent, details: Dict[str, Any]) -> None:
        """
        Called when a vertex changes state.

        Args:
            event (VertexEvent): Type of event that occurred
            details (Dict[str, Any]): Additional information about the event
        """
        ...
