"""Sequence containers built from singly linked nodes."""

from .circular_singly_linked_list import CircularSinglyLinkedList
from .node import ListNode

__all__ = [
    "CircularSinglyLinkedList",
    "ListNode",
]
