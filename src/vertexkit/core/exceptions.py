"""
Custom exceptions for the vertex graph primitives.

This module defines the hierarchy of custom exceptions used throughout the package.
Each exception type corresponds to a specific category of errors that may occur
while mutating vertices or walking the sequence containers.

Expected idempotent outcomes (adding a connection that already exists, removing
one that is absent) are reported through boolean return values, never through
these exceptions.
"""

from typing import Any, Optional


class ValidationError(Exception):
    """
    Raised when data validation fails.

    This exception is raised when configuration data or a connectivity integrity
    check fails to meet the required criteria.

    Examples:
        * Configuration mapping rejected by its schema
        * Outgoing connection without a matching back-reference
        * Non-finite connection weights
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class GraphOperationError(Exception):
    """
    Raised when graph operations fail.

    This exception is raised when a structural operation on a vertex cannot be
    carried out in the current state.

    Examples:
        * Connection added to a frozen vertex
        * Connection removed from a frozen vertex
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class LockedVertexError(GraphOperationError):
    """
    Raised when a connection is mutated while an endpoint is locked.

    The call is rejected as a whole and nothing is mutated; the caller must
    unlock both endpoints and retry.

    Attributes:
        vertex: The locked endpoint that rejected the mutation, when known
    """

    def __init__(self, message: str, vertex: Optional[Any] = None):
        super().__init__(message)
        self.vertex = vertex


class InvalidIndexError(IndexError):
    """
    Raised when a sequence position is invalid.

    Examples:
        * Negative position passed to a lookup
        * Lookup, pop or shift on an empty list
    """
