"""Exceptions raised by the limitkit derivative engines."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from limitkit.finite.convergence import ConvergenceResult


class LimitKitError(Exception):
    """Base error for limitkit errors."""


class InvalidStep(LimitKitError, ValueError):
    """Indicates a difference quotient was requested with a zero step."""

    def __init__(self, step: float) -> None:
        """Constructs the exception for the rejected step.

        Args:
            step: The step size that was passed in.
        """
        super().__init__("h cannot be zero")
        self.step = step


class NotDifferentiable(LimitKitError, ArithmeticError):
    """Indicates the shrinking-step loop never converged.

    The evaluation point and the exhausted loop result are attached for
    diagnostics.
    """

    def __init__(
        self,
        x: float,
        result: ConvergenceResult | None = None,
    ) -> None:
        """Constructs the exception raised for a non-differentiable point.

        Args:
            x: The point at which the derivative was requested.
            result: The non-converged result of the shrinking-step loop.
        """
        super().__init__(f"function not differentiable at {x:f}")
        self.x = x
        self.result = result
