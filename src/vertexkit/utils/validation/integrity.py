"""
Connectivity Integrity Validation Components for vertexkit

This module checks that the two halves of every connection agree. A connection
from A to B is recorded as an outgoing entry on A and as a back-reference on B;
the validator reports any entry whose counterpart is missing, which is what a
partial removal or a vertex discarded without disconnecting leaves behind.

The module implements validation for:
- Outgoing entries and their back-references
- Back-references and their outgoing entries
- Connection weights
- Neighbours outside the checked collection (stale references)
"""

import logging
from typing import Iterable, List

from ...core.exceptions import ValidationError
from ...core.models import Vertex, is_finite_weight
from .base import ValidationResult

logger = logging.getLogger(__name__)


class ConnectivityIntegrityValidator:
    """
    Validator for the bidirectional connection invariant of vertices.

    This class provides static methods for validating a single vertex against
    its neighbours, and a whole collection of vertices at once.
    """

    @staticmethod
    def _validate_outgoing(vertex: Vertex) -> List[str]:
        """
        Validate the outgoing side of a vertex.

        Ensures that each outgoing entry has a back-reference at its target and
        a finite weight.

        Args:
            vertex: Vertex to validate

        Returns:
            List[str]: List of validation error messages
        """
        errors = []
        for target, weight in vertex.outgoing_connections.items():
            if not target.contains_connection_from(vertex):
                errors.append(f"Connection {vertex} -> {target} has no back-reference at {target}")
            if not is_finite_weight(weight):
                errors.append(f"Connection {vertex} -> {target} has invalid weight {weight!r}")
        return errors

    @staticmethod
    def _validate_incoming(vertex: Vertex) -> List[str]:
        """
        Validate the incoming side of a vertex.

        Ensures that each back-reference is matched by an outgoing entry at its
        source.

        Args:
            vertex: Vertex to validate

        Returns:
            List[str]: List of validation error messages
        """
        errors = []
        for source in vertex.incoming_vertices:
            if not source.contains_connection_to(vertex):
                errors.append(
                    f"Back-reference {source} -> {vertex} has no outgoing entry at {source}"
                )
        return errors

    @staticmethod
    def validate_vertex_integrity(vertex: Vertex, raise_on_error: bool = False) -> ValidationResult:
        """
        Validate the connections of a single vertex.

        Args:
            vertex: Vertex instance to validate
            raise_on_error: Raise instead of returning an invalid result

        Returns:
            ValidationResult containing validation details and any errors

        Raises:
            ValidationError: If validation fails and ``raise_on_error`` is set
        """
        errors = ConnectivityIntegrityValidator._validate_outgoing(vertex)
        errors.extend(ConnectivityIntegrityValidator._validate_incoming(vertex))

        result = ValidationResult(
            is_valid=not errors,
            errors=errors,
            context={"vertex": str(vertex)},
        )
        if errors and raise_on_error:
            raise ValidationError("; ".join(errors))
        return result

    @staticmethod
    def validate_connectivity(
        vertices: Iterable[Vertex], raise_on_error: bool = False
    ) -> ValidationResult:
        """
        Validate every vertex of a collection.

        Each broken connection is reported once, from the side that holds the
        entry. Neighbours that are not part of the collection are reported as
        warnings: they usually mean a vertex was discarded while still
        connected.

        Args:
            vertices: The vertices making up a graph
            raise_on_error: Raise instead of returning an invalid result

        Returns:
            ValidationResult with errors, warnings and the number of vertices
            and connections checked

        Raises:
            ValidationError: If validation fails and ``raise_on_error`` is set
        """
        members = list(dict.fromkeys(vertices))
        known = set(members)
        errors: List[str] = []
        warnings: List[str] = []
        connection_count = 0

        for vertex in members:
            errors.extend(ConnectivityIntegrityValidator._validate_outgoing(vertex))
            errors.extend(ConnectivityIntegrityValidator._validate_incoming(vertex))
            connection_count += vertex.out_degree

            for target in vertex.outgoing_connections:
                if target not in known:
                    warnings.append(f"Connection {vertex} -> {target} leaves the collection")
            for source in vertex.incoming_vertices:
                if source not in known:
                    warnings.append(f"Back-reference {source} -> {vertex} comes from outside")

        if errors:
            logger.warning(f"Connectivity check found {len(errors)} inconsistent connection(s)")
        result = ValidationResult(
            is_valid=not errors,
            errors=errors,
            warnings=warnings,
            context={"vertex_count": len(members), "connection_count": connection_count},
        )
        if errors and raise_on_error:
            raise ValidationError("; ".join(errors))
        return result
