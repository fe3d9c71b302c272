"""
Tests for the shared model validation helpers.
"""

from decimal import Decimal
from fractions import Fraction

import pytest

from vertexkit.core.models import is_finite_weight, is_weight, validate_weight


@pytest.mark.parametrize("value", [0, 1, -3, 2.5, Fraction(1, 3), Decimal("1.5")])
def test_real_numbers_are_weights(value):
    """Test accepted weight types."""
    assert is_weight(value)
    validate_weight(value)


@pytest.mark.parametrize("value", [True, "1", None, 1j, complex(2, 0)])
def test_non_real_values_are_rejected(value):
    """Test rejected weight types."""
    assert not is_weight(value)
    with pytest.raises(TypeError, match="weight must be a real number"):
        validate_weight(value)


def test_finite_weights():
    """Test finiteness checks."""
    assert is_finite_weight(4)
    assert not is_finite_weight(float("inf"))
    assert not is_finite_weight(float("nan"))
    assert is_finite_weight(Decimal("4.25"))
    assert not is_finite_weight(Decimal("Infinity"))
    assert not is_finite_weight("4")
