"""Unit tests for limitkit.finite.rate."""

from __future__ import annotations

import math

import pytest

from limitkit.exceptions import InvalidStep, LimitKitError
from limitkit.finite.rate import rate_of_change


def _never_called(x):
    """Function that must not be evaluated."""
    raise AssertionError("function should not be evaluated")


@pytest.mark.parametrize(
    "function, x, h",
    [
        (lambda x: x**2, 1.5, 0.25),
        (math.exp, 1.0, 0.1),
        (math.sin, math.pi, 1e-3),
        (lambda x: 3.0 * x - 2.0, -4.0, -0.5),
    ],
)
def test_rate_of_change_matches_forward_quotient(function, x, h):
    """Tests that the rate is exactly the forward difference quotient."""
    expected = (function(x + h) - function(x)) / h
    assert rate_of_change(function, x, h) == expected


def test_rate_of_change_exact_for_square():
    """Tests a quotient that is exactly representable."""
    assert rate_of_change(lambda x: x**2, 1.5, 0.25) == 3.25


@pytest.mark.parametrize("h", [0, 0.0, -0.0])
def test_zero_step_raises_without_evaluating(h):
    """Tests that a zero step raises InvalidStep before calling the function."""
    with pytest.raises(InvalidStep) as ei:
        rate_of_change(_never_called, 1.0, h)
    assert ei.value.step == 0
    assert "h cannot be zero" in str(ei.value)


def test_invalid_step_is_value_error():
    """Tests that InvalidStep can be caught as ValueError and LimitKitError."""
    with pytest.raises(ValueError):
        rate_of_change(math.sin, 0.0, 0.0)
    with pytest.raises(LimitKitError):
        rate_of_change(math.sin, 0.0, 0.0)
