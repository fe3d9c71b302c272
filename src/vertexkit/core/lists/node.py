"""
Node model for the singly linked sequence containers.
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class ListNode:
    """
    A single link of a singly linked list.

    Nodes compare by identity so that a ring can be walked by checking for
    the head node itself.

    Attributes:
        data (Any): Payload stored in the node
        next (Optional[ListNode]): Following node, None while detached
    """

    data: Any
    next: Optional["ListNode"] = None
