"""
Shared validation helpers for the vertex models.
"""

import math
from decimal import Decimal
from numbers import Real
from typing import Any


def is_weight(value: Any) -> bool:
    """Check that a value is usable as a connection weight.

    Real numbers (int, float, Fraction) and Decimal are accepted; bools and
    complex numbers are not.
    """
    return isinstance(value, (Real, Decimal)) and not isinstance(value, bool)


def validate_weight(value: Any) -> None:
    """Validate that a connection weight is a number."""
    if not is_weight(value):
        raise TypeError(f"weight must be a real number, got {type(value).__name__}")


def is_finite_weight(value: Any) -> bool:
    """Check that a weight is a number with a finite value."""
    return is_weight(value) and math.isfinite(value)
