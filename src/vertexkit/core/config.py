"""
Configuration for vertex construction and connection handling.

A ``VertexConfig`` bundles the defaults a vertex applies when it is created and
when connections are added to it. Configurations are immutable, so the shared
``DEFAULT_CONFIG`` cannot be changed through any vertex. They can be built
directly or from a plain mapping (for example one loaded from a settings file),
in which case the mapping is checked against ``CONFIG_SCHEMA`` first.
"""

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping

from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate

from .exceptions import ValidationError

logger = logging.getLogger(__name__)

CONFIG_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "default_weight": {"type": "number"},
        "locked_on_create": {"type": "boolean"},
        "validate_weights": {"type": "boolean"},
    },
    "additionalProperties": False,
}


@dataclass(frozen=True)
class VertexConfig:
    """
    Configuration for vertex behaviour.

    Attributes:
        default_weight: Weight used when ``add_connection`` is called without one
        locked_on_create: Whether new vertices start in the locked state
        validate_weights: Whether connection weights must be numbers
    """

    default_weight: float = 1
    locked_on_create: bool = True
    validate_weights: bool = True

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "VertexConfig":
        """
        Build a configuration from a mapping.

        Args:
            data: Mapping with any of the configuration keys

        Returns:
            VertexConfig: The validated configuration

        Raises:
            ValidationError: If the mapping does not match ``CONFIG_SCHEMA``
        """
        try:
            validate(instance=dict(data), schema=CONFIG_SCHEMA)
        except JsonSchemaError as e:
            logger.error(f"Rejected vertex configuration: {e.message}")
            raise ValidationError(f"Invalid vertex configuration: {e.message}") from e
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        """Return the configuration as a plain mapping."""
        return asdict(self)


DEFAULT_CONFIG = VertexConfig()
