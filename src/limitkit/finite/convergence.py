"""Shrinking-step convergence loop shared by the derivative engines."""

from __future__ import annotations

from collections.abc import Callable
from typing import NamedTuple

from limitkit.logger import limitkit_logger

__all__ = [
    "ConvergenceResult",
    "converge_shrinking_step",
]


class ConvergenceResult(NamedTuple):
    """The outcome of one run of the shrinking-step loop."""

    value: float
    """Converged value, or ``0.0`` when the loop was exhausted."""
    converged: bool
    """Whether two successive estimates agreed within the tolerance."""
    step: float
    """Step size at which the loop stopped."""
    iterations: int
    """Number of times the estimator was evaluated."""
    last_estimate: float
    """Most recent estimate, ``0.0`` if the loop body never ran."""


def converge_shrinking_step(
    evaluate: Callable[[float], float],
    *,
    initial_step: float,
    shrink: Callable[[float], float],
    keep_going: Callable[[float], bool],
    tolerance: float,
    return_previous: bool = False,
) -> ConvergenceResult:
    """Returns the limit of ``evaluate(step)`` as the step shrinks.

    Starting from a running estimate of ``0.0`` the loop evaluates the
    estimator, compares it with the previous estimate and stops as soon as
    the two differ by less than ``tolerance``. Only the two most recent
    estimates are compared, so this is a cheap secant-style heuristic and
    not a rigorous limit.

    Args:
        evaluate: Estimator taking a step size and returning an estimate.
        initial_step: First step passed to ``evaluate``.
        shrink: Maps a step to the next, smaller step.
        keep_going: Loop predicate on the current step. The loop stops
            (unconverged) as soon as it returns False.
        tolerance: Absolute agreement required between successive estimates.
        return_previous: If True, a converged run reports the previous
            estimate instead of the one that was just computed.

    Returns:
        A ``ConvergenceResult``. When the loop is exhausted ``converged`` is
        False and ``value`` is ``0.0``.
    """
    limit = 0.0
    step = initial_step
    iterations = 0
    while keep_going(step):
        estimate = evaluate(step)
        iterations += 1
        if abs(limit - estimate) < tolerance:
            value = limit if return_previous else estimate
            limitkit_logger.debug(
                "Converged to %r after %d iterations (step=%g).",
                value, iterations, step,
            )
            return ConvergenceResult(value, True, step, iterations, estimate)
        limit = estimate
        step = shrink(step)

    limitkit_logger.debug(
        "No convergence after %d iterations (step=%g, last estimate=%r).",
        iterations, step, limit,
    )
    return ConvergenceResult(0.0, False, step, iterations, limit)
