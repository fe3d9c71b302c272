"""
Vertex model for the directed, weighted graph primitives.

A vertex tracks its own outgoing weighted connections and the incoming
back-references recorded by the vertices that point at it. Every connection is
therefore stored twice: once as ``target -> weight`` in the source's outgoing
map and once as the source in the target's incoming set. ``add_connection`` and
``remove_connection`` are the only operations that touch either side, and they
keep the two sides in step:

    B in A.outgoing_vertices  <=>  A in B.incoming_vertices

A lock flag freezes connectivity. New vertices start locked; both endpoints
must be unlocked before a connection can be added or removed.
"""

import logging
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Hashable, List, Mapping, Optional, Tuple

from ..config import DEFAULT_CONFIG, VertexConfig
from ..events import VertexEvent, VertexEventListener
from ..exceptions import LockedVertexError
from .base import validate_weight

logger = logging.getLogger(__name__)

Weight = float


class Vertex:
    """
    A vertex of a directed, weighted graph.

    Vertices hash and compare by identity. They hold non-owning references to
    each other; the lifetime of a vertex is managed by whatever collection holds
    it. Removing a vertex from such a collection does not clean the
    back-references held by its neighbours.

    Attributes:
        value (Any): Optional payload attached to the vertex, the key by default
    """

    def __init__(
        self,
        key: Hashable,
        value: Any = None,
        config: Optional[VertexConfig] = None,
    ):
        """
        Create a vertex with no connections.

        Args:
            key: Identifier of the vertex, unique within its graph
            value: Optional payload; the key is used when omitted
            config: Optional configuration, ``DEFAULT_CONFIG`` when omitted
        """
        self._key = key
        self.value = key if value is None else value
        self._config = config or DEFAULT_CONFIG
        self._is_locked = self._config.locked_on_create
        # Dicts keep insertion order; the incoming side stores no weights.
        self._outgoing: Dict["Vertex", Weight] = {}
        self._incoming: Dict["Vertex", None] = {}
        self._listeners: List[VertexEventListener] = []

    @property
    def key(self) -> Hashable:
        """Identifier of this vertex."""
        return self._key

    @property
    def config(self) -> VertexConfig:
        return self._config

    @property
    def is_locked(self) -> bool:
        """Whether connectivity is currently frozen."""
        return self._is_locked

    def lock(self) -> None:
        """Freeze connectivity. Locking a locked vertex does nothing."""
        if not self._is_locked:
            self._is_locked = True
            logger.debug(f"Locked vertex {self}")
            self._notify_state_change(VertexEvent.LOCKED, {"vertex": self})

    def unlock(self) -> None:
        """Allow connections to be added and removed. Idempotent."""
        if self._is_locked:
            self._is_locked = False
            logger.debug(f"Unlocked vertex {self}")
            self._notify_state_change(VertexEvent.UNLOCKED, {"vertex": self})

    def add_listener(self, listener: VertexEventListener) -> None:
        """Subscribe a listener to this vertex's events. Registering twice has no effect."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: VertexEventListener) -> None:
        """Unsubscribe a listener from this vertex's events."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify_state_change(self, event: VertexEvent, details: Dict[str, Any]) -> None:
        """Notify listeners of a change; a failing listener is logged and skipped."""
        for listener in self._listeners.copy():
            try:
                listener.on_state_change(event, details)
            except Exception as e:
                logger.error(f"Error notifying listener {listener!r} of {event.name} on {self}: {e}")

    def _check_unlocked(self, other: "Vertex", action: str) -> None:
        for endpoint in (self, other):
            if endpoint._is_locked:
                raise LockedVertexError(
                    f"Cannot {action} connection {self} -> {other}: vertex {endpoint} is locked",
                    vertex=endpoint,
                )

    def add_connection(self, target: "Vertex", weight: Optional[Weight] = None) -> bool:
        """
        Add a directed connection from this vertex to ``target``.

        Adding a connection that already exists is a no-op: the stored weight
        is kept and ``False`` is returned.

        Args:
            target: Vertex the connection points to, may be this vertex
            weight: Connection weight, ``config.default_weight`` when omitted

        Returns:
            bool: True if the connection was added, False if it already existed

        Raises:
            LockedVertexError: If this vertex or ``target`` is locked
            TypeError: If the weight of a new connection is not a number
        """
        self._check_unlocked(target, "add")
        if target in self._outgoing:
            return False

        if weight is None:
            weight = self._config.default_weight
        if self._config.validate_weights:
            validate_weight(weight)

        self._outgoing[target] = weight
        target._incoming[self] = None

        logger.debug(f"Connected {self} -> {target} (weight={weight})")
        details = {"source": self, "target": target, "weight": weight}
        self._notify_state_change(VertexEvent.CONNECTION_ADDED, details)
        if target is not self:
            target._notify_state_change(VertexEvent.CONNECTION_ADDED, details)
        return True

    def remove_connection(self, other: "Vertex", weight: Optional[Weight] = None) -> bool:
        """
        Remove the directed connection from this vertex to ``other``.

        At most one connection exists per ordered pair, so ``weight`` does not
        select anything; it is accepted to mirror ``add_connection``.

        Both sides are removed independently. If only one side was present
        (the vertices were already inconsistent) that side is still removed
        and ``False`` is returned.

        Args:
            other: Vertex the connection points to
            weight: Ignored

        Returns:
            bool: True only if both the outgoing entry and the back-reference
            were found and removed

        Raises:
            LockedVertexError: If this vertex or ``other`` is locked
        """
        self._check_unlocked(other, "remove")

        outgoing_removed = other in self._outgoing
        removed_weight = self._outgoing.pop(other, None)
        incoming_removed = self in other._incoming
        other._incoming.pop(self, None)

        if outgoing_removed != incoming_removed:
            logger.warning(
                f"Partial removal of {self} -> {other}: "
                f"outgoing entry {'removed' if outgoing_removed else 'missing'}, "
                f"back-reference {'removed' if incoming_removed else 'missing'}"
            )

        if outgoing_removed or incoming_removed:
            logger.debug(f"Disconnected {self} -> {other}")
            details = {"source": self, "target": other, "weight": removed_weight}
            self._notify_state_change(VertexEvent.CONNECTION_REMOVED, details)
            if other is not self:
                other._notify_state_change(VertexEvent.CONNECTION_REMOVED, details)

        return outgoing_removed and incoming_removed

    def contains_connection_to(self, other: "Vertex") -> bool:
        """Check if this vertex has an outgoing connection to ``other``."""
        return other in self._outgoing

    def contains_connection_from(self, other: "Vertex") -> bool:
        """Check if ``other`` has recorded a connection to this vertex."""
        return other in self._incoming

    def weight_to(self, other: "Vertex") -> Optional[Weight]:
        """Weight of the outgoing connection to ``other``, or None if there is none."""
        return self._outgoing.get(other)

    @property
    def outgoing_vertices(self) -> FrozenSet["Vertex"]:
        """Snapshot of the vertices this vertex connects to."""
        return frozenset(self._outgoing)

    @property
    def outgoing_connections(self) -> Mapping["Vertex", Weight]:
        """Read-only snapshot of outgoing connections and their weights."""
        return MappingProxyType(dict(self._outgoing))

    @property
    def incoming_vertices(self) -> Tuple["Vertex", ...]:
        """Snapshot of the vertices connecting to this vertex, in connection order."""
        return tuple(self._incoming)

    @property
    def is_isolated(self) -> bool:
        """True when this vertex has no outgoing connections.

        Incoming connections are not considered.
        """
        return not self._outgoing

    @property
    def in_degree(self) -> int:
        return len(self._incoming)

    @property
    def out_degree(self) -> int:
        return len(self._outgoing)

    def __str__(self) -> str:
        return str(self._key)

    def __repr__(self) -> str:
        state = "locked" if self._is_locked else "unlocked"
        return (
            f"Vertex(key={self._key!r}, {state}, "
            f"in_degree={self.in_degree}, out_degree={self.out_degree})"
        )
