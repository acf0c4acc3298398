"""Directional derivatives of scalar fields over a 3-D domain.

A ``LinearMap`` is the derivative of a scalar field at one base point: it
maps a direction vector to the directional derivative along it. A
``FormField`` assigns such a map to every base point.

Each evaluation runs the shrinking-step loop on
``(f(x + k*h) - f(x)) / k`` with ``k`` starting at ``0.1`` and halving while
``k * |h| > 1e-11``. Unlike the one-dimensional engine, a converged run
reports the estimate *before* the one that met the tolerance, and a run that
never converges evaluates to ``0.0`` without raising.

Examples:
--------
>>> from limitkit.calculus.directional import derivative_3d
>>> from limitkit.calculus.vector import Vector
>>> sphere = lambda v: v.x**2 + v.y**2 + v.z**2
>>> d_sphere = derivative_3d(sphere)
>>> round(d_sphere(Vector(1, 0, 0))(Vector(1, 0, 0)), 4)
2.0
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from numpy.typing import ArrayLike

from limitkit.calculus.vector import (
    Vector,
    as_vector,
    scale_vector,
    sum_vectors,
    vector_length,
)
from limitkit.finite.convergence import ConvergenceResult, converge_shrinking_step
from limitkit.finite.limit_config import VECTOR_CONFIG, LimitConfig

__all__ = [
    "LinearMap",
    "FormField",
    "linear_projection_at",
    "derivative_3d",
]

_BASIS = (Vector(1.0, 0.0, 0.0), Vector(0.0, 1.0, 0.0), Vector(0.0, 0.0, 1.0))


@dataclass(frozen=True)
class LinearMap:
    """Directional-derivative functional of ``function`` at ``base_point``.

    ``base_point`` may be given as any 3-element array-like; it is stored as a
    ``Vector``. Maps compare equal when point, function and config match.
    """

    base_point: Vector
    function: Callable[[Vector], float]
    config: LimitConfig = VECTOR_CONFIG

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_point", as_vector(self.base_point))

    def evaluate_result(self, direction: Vector | ArrayLike) -> ConvergenceResult:
        """Runs the shrinking-step loop along ``direction`` without collapsing failures.

        A zero direction never enters the loop and comes back unconverged
        with ``iterations == 0``.
        """
        h = as_vector(direction)
        x = self.base_point
        f = self.function
        h_length = vector_length(h)
        min_step = self.config.min_step

        def projection(k: float) -> float:
            return (f(sum_vectors(x, scale_vector(k, h))) - f(x)) / k

        return converge_shrinking_step(
            projection,
            initial_step=self.config.initial_step,
            shrink=self.config.shrink,
            keep_going=lambda k: k * h_length > min_step,
            tolerance=self.config.tolerance,
            return_previous=True,
        )

    def evaluate(self, direction: Vector | ArrayLike) -> float:
        """Returns the directional derivative along ``direction``, ``0.0`` on failure."""
        return self.evaluate_result(direction).value

    __call__ = evaluate

    def gradient(self) -> Vector:
        """Returns the map evaluated on the unit basis vectors."""
        return Vector(*(self.evaluate(e) for e in _BASIS))


@dataclass(frozen=True)
class FormField:
    """The derivative of ``function`` as a field of linear maps."""

    function: Callable[[Vector], float]
    config: LimitConfig = VECTOR_CONFIG

    def at(self, base_point: Vector | ArrayLike) -> LinearMap:
        """Returns the ``LinearMap`` at ``base_point``."""
        return LinearMap(base_point, self.function, self.config)

    __call__ = at


def linear_projection_at(
    function: Callable[[Vector], float],
    x: Vector | ArrayLike,
    config: LimitConfig | None = None,
) -> LinearMap:
    """Returns the derivative of ``function`` at ``x`` as a ``LinearMap``.

    Args:
        function: Scalar field taking a ``Vector``.
        x: The base point.
        config: Loop settings. Defaults to ``VECTOR_CONFIG``.
    """
    if config is None:
        config = VECTOR_CONFIG
    return LinearMap(x, function, config)


def derivative_3d(
    function: Callable[[Vector], float],
    config: LimitConfig | None = None,
) -> FormField:
    """Returns the derivative of ``function`` as a ``FormField``."""
    if config is None:
        config = VECTOR_CONFIG
    return FormField(function, config)
