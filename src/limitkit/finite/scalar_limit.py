"""Derivatives of real functions as the limit of forward difference quotients.

The step starts at ``0.1`` and is halved until two successive quotients
agree to within ``1e-6``. If the step drops to ``1e-11`` first, the point is
reported as not differentiable.

Examples:
--------
>>> import math
>>> from limitkit.finite.scalar_limit import derivative, derivative_at
>>> round(derivative_at(math.exp, 1.0), 4)
2.7183
>>> sin_prime = derivative(math.sin)
>>> round(sin_prime(math.pi), 4)
-1.0
"""

from __future__ import annotations

from collections.abc import Callable
from functools import partial

from limitkit.exceptions import NotDifferentiable
from limitkit.finite.convergence import ConvergenceResult, converge_shrinking_step
from limitkit.finite.limit_config import SCALAR_CONFIG, LimitConfig
from limitkit.finite.rate import rate_of_change
from limitkit.logger import limitkit_logger

__all__ = [
    "derivative_at_result",
    "derivative_at",
    "derivative",
]


def derivative_at_result(
    function: Callable[[float], float],
    x: float,
    config: LimitConfig | None = None,
) -> ConvergenceResult:
    """Runs the shrinking-step loop for ``function`` at ``x`` without raising.

    Args:
        function: Real function to differentiate.
        x: The point at which the derivative is estimated.
        config: Loop settings. Defaults to ``SCALAR_CONFIG``.

    Returns:
        The ``ConvergenceResult``. On convergence ``value`` is the most
        recently computed quotient.
    """
    if config is None:
        config = SCALAR_CONFIG
    min_step = config.min_step
    return converge_shrinking_step(
        partial(rate_of_change, function, x),
        initial_step=config.initial_step,
        shrink=config.shrink,
        keep_going=lambda h: h > min_step,
        tolerance=config.tolerance,
    )


def derivative_at(
    function: Callable[[float], float],
    x: float,
    config: LimitConfig | None = None,
) -> float:
    """Returns the derivative of ``function`` at ``x``.

    Args:
        function: Real function to differentiate.
        x: The point at which the derivative is estimated.
        config: Loop settings. Defaults to ``SCALAR_CONFIG``.

    Returns:
        The converged difference quotient.

    Raises:
        NotDifferentiable: If no two successive quotients agreed before the
            step reached its lower threshold.
    """
    result = derivative_at_result(function, x, config)
    if not result.converged:
        raise NotDifferentiable(x, result)
    return result.value


def derivative(
    function: Callable[[float], float],
    config: LimitConfig | None = None,
) -> Callable[[float], float]:
    """Returns the derivative of ``function`` as a new real function.

    The returned function never raises ``NotDifferentiable``: points where the
    loop does not converge evaluate to ``0.0`` and a warning is logged.

    Args:
        function: Real function to differentiate.
        config: Loop settings. Defaults to ``SCALAR_CONFIG``.

    Returns:
        A callable ``f'(x)``.
    """

    def function_prime(x: float) -> float:
        try:
            return derivative_at(function, x, config)
        except NotDifferentiable as err:
            limitkit_logger.warning("%s; using 0.", err)
            return 0.0

    return function_prime
