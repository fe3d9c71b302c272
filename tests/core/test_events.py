"""
Tests for vertex event notification.
"""

import pytest

from vertexkit.core.events import VertexEvent
from vertexkit.core.exceptions import LockedVertexError
from vertexkit.core.models import Vertex


def test_connection_added_notifies_both_endpoints(vertex_a, vertex_b, listener):
    """Test that both endpoints report a new connection."""
    vertex_a.add_listener(listener)
    vertex_b.add_listener(listener)

    vertex_a.add_connection(vertex_b, 3)

    assert len(listener.events) == 2
    for event, details in listener.events:
        assert event == VertexEvent.CONNECTION_ADDED
        assert details == {"source": vertex_a, "target": vertex_b, "weight": 3}


def test_self_loop_notifies_once(vertex_a, listener):
    """Test that a self-loop is reported once."""
    vertex_a.add_listener(listener)

    vertex_a.add_connection(vertex_a)
    vertex_a.remove_connection(vertex_a)

    assert [event for event, _ in listener.events] == [
        VertexEvent.CONNECTION_ADDED,
        VertexEvent.CONNECTION_REMOVED,
    ]


def test_no_event_without_change(vertex_a, vertex_b, listener):
    """Test that no-ops stay silent."""
    vertex_a.add_connection(vertex_b)
    vertex_a.add_listener(listener)

    vertex_a.add_connection(vertex_b)
    vertex_b.remove_connection(vertex_a)
    vertex_a.unlock()

    assert listener.events == []


def test_no_event_on_rejected_mutation(vertex_a, listener):
    """Test that a lock violation emits nothing."""
    locked = Vertex("L")
    vertex_a.add_listener(listener)

    with pytest.raises(LockedVertexError):
        vertex_a.add_connection(locked)

    assert listener.events == []


def test_removal_reports_weight(vertex_a, vertex_b, listener):
    """Test that a removal event carries the removed weight."""
    vertex_a.add_connection(vertex_b, 7)
    vertex_b.add_listener(listener)

    vertex_a.remove_connection(vertex_b)

    assert listener.events == [
        (
            VertexEvent.CONNECTION_REMOVED,
            {"source": vertex_a, "target": vertex_b, "weight": 7},
        )
    ]


def test_lock_events(listener):
    """Test lock and unlock notifications."""
    vertex = Vertex("A")
    vertex.add_listener(listener)

    vertex.unlock()
    vertex.lock()
    vertex.lock()

    assert listener.events == [
        (VertexEvent.UNLOCKED, {"vertex": vertex}),
        (VertexEvent.LOCKED, {"vertex": vertex}),
    ]


def test_remove_listener(vertex_a, vertex_b, listener):
    """Test that a removed listener is no longer notified."""
    vertex_a.add_listener(listener)
    vertex_a.remove_listener(listener)
    vertex_a.remove_listener(listener)

    vertex_a.add_connection(vertex_b)

    assert listener.events == []


def test_failing_listener_does_not_block(vertex_a, vertex_b, listener, caplog):
    """Test that one failing listener neither stops others nor undoes the change."""

    class FailingListener:
        def on_state_change(self, event, details):
            raise RuntimeError("boom")

    vertex_a.add_listener(FailingListener())
    vertex_a.add_listener(listener)

    with caplog.at_level("ERROR", logger="vertexkit.core.models.vertex"):
        assert vertex_a.add_connection(vertex_b) is True

    assert vertex_a.contains_connection_to(vertex_b)
    assert len(listener.events) == 1
    assert "boom" in caplog.text



def test_duplicate_listener_registration(vertex_a, vertex_b, listener):
    """Test that a listener registered twice is notified once."""
    vertex_a.add_listener(listener)
    vertex_a.add_listener(listener)

    vertex_a.add_connection(vertex_b)

    assert len(listener.events) == 1


def test_partial_removal_of_outgoing_entry_emits_event(vertex_a, vertex_b, listener):
    """Test the event for removing an outgoing entry whose back-reference is gone."""
    vertex_a.add_connection(vertex_b, 6)
    vertex_b._incoming.pop(vertex_a)
    vertex_a.add_listener(listener)

    assert vertex_a.remove_connection(vertex_b) is False

    assert [event for event, _ in listener.events] == [VertexEvent.CONNECTION_REMOVED]
    _, details = listener.events[0]
    assert details["weight"] == 6
    assert details["source"] is vertex_a
    assert details["target"] is vertex_b


def test_partial_removal_of_back_reference_emits_event(vertex_a, vertex_b, listener):
    """Test the event for removing a back-reference whose outgoing entry is gone."""
    vertex_a.add_connection(vertex_b, 6)
    vertex_a._outgoing.pop(vertex_b)
    vertex_b.add_listener(listener)

    assert vertex_a.remove_connection(vertex_b) is False

    assert [event for event, _ in listener.events] == [VertexEvent.CONNECTION_REMOVED]
    _, details = listener.events[0]
    assert details["weight"] is None
    assert not vertex_b.contains_connection_from(vertex_a)
