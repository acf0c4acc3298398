"""Forward difference quotient with a single step size."""

from __future__ import annotations

from collections.abc import Callable

from limitkit.exceptions import InvalidStep

__all__ = [
    "rate_of_change",
]


def rate_of_change(
    function: Callable[[float], float],
    x: float,
    h: float,
) -> float:
    """Returns the forward difference quotient ``(f(x + h) - f(x)) / h``.

    Args:
        function: Real function to differentiate.
        x: The point at which the quotient is taken.
        h: The step size. Negative steps give a backward quotient.

    Returns:
        The difference quotient as a float.

    Raises:
        InvalidStep: If ``h`` is zero. ``function`` is not evaluated.
    """
    if h == 0:
        raise InvalidStep(h)
    return (function(x + h) - function(x)) / h
