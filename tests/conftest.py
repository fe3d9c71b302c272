"""Shared test fixtures."""

from typing import List

import pytest

from vertexkit.core.models import Vertex


@pytest.fixture
def vertex_a() -> Vertex:
    """Fixture providing an unlocked vertex 'A'."""
    vertex = Vertex("A")
    vertex.unlock()
    return vertex


@pytest.fixture
def vertex_b() -> Vertex:
    """Fixture providing an unlocked vertex 'B'."""
    vertex = Vertex("B")
    vertex.unlock()
    return vertex


@pytest.fixture
def triangle() -> List[Vertex]:
    """Fixture providing three unlocked vertices connected A -> B -> C -> A."""
    a, b, c = Vertex("A"), Vertex("B"), Vertex("C")
    for vertex in (a, b, c):
        vertex.unlock()
    a.add_connection(b, 2)
    b.add_connection(c, 3)
    c.add_connection(a, 4)
    return [a, b, c]


class RecordingListener:
    """Listener that records every event it receives."""

    def __init__(self):
        self.events = []

    def on_state_change(self, event, details):
        self.events.append((event, details))


@pytest.fixture
def listener() -> RecordingListener:
    """Fixture providing a recording event listener."""
    return RecordingListener()
