"""Configuration for the shrinking-step derivative engines.

This config controls where the forward-difference step starts, how fast it
shrinks, when the loop gives up and how close two successive estimates
must be to count as converged.
"""

from __future__ import annotations

import math

__all__ = [
    "LimitConfig",
    "SCALAR_CONFIG",
    "VECTOR_CONFIG",
]


class LimitConfig:
    """Configuration for the shrinking-step derivative engines.

    Settings are read-only once constructed and configs compare by value.
    The module level defaults ``SCALAR_CONFIG`` and ``VECTOR_CONFIG`` are
    shared by every call that does not pass its own config.
    """

    def __init__(
        self,
        initial_step: float = 0.1,
        min_step: float = 1e-11,
        shrink_factor: float = 2.0,
        tolerance: float = 1e-6,
    ):
        """Initialize configuration.

        Args:
            initial_step:
                First step size tried by the loop. Must be positive and
                finite.

            min_step:
                Lower threshold on the step. The loop keeps going while the
                step (for 3-D directions, the step times the direction
                length) is strictly larger than this value. Must be
                non-negative.

            shrink_factor:
                The step is divided by this factor after every estimate
                that did not converge. Must be larger than ``1`` so the
                loop is guaranteed to terminate. Must be finite.

            tolerance:
                Two successive estimates closer than this (in absolute
                value) are considered converged. Must be positive and
                finite.

        Raises:
            ValueError: If any argument is outside its allowed range.
        """
        if not (math.isfinite(initial_step) and initial_step > 0):
            raise ValueError(
                f"initial_step must be positive and finite; got {initial_step!r}."
            )
        if not min_step >= 0:
            raise ValueError(f"min_step must be non-negative; got {min_step!r}.")
        if not (math.isfinite(shrink_factor) and shrink_factor > 1):
            raise ValueError(
                f"shrink_factor must be finite and larger than 1; got {shrink_factor!r}."
            )
        if not (math.isfinite(tolerance) and tolerance > 0):
            raise ValueError(f"tolerance must be positive and finite; got {tolerance!r}.")

        self._initial_step = float(initial_step)
        self._min_step = float(min_step)
        self._shrink_factor = float(shrink_factor)
        self._tolerance = float(tolerance)

    @property
    def initial_step(self) -> float:
        """First step size tried by the loop."""
        return self._initial_step

    @property
    def min_step(self) -> float:
        """Lower threshold on the step."""
        return self._min_step

    @property
    def shrink_factor(self) -> float:
        """Divisor applied to the step after each unconverged estimate."""
        return self._shrink_factor

    @property
    def tolerance(self) -> float:
        """Agreement required between successive estimates."""
        return self._tolerance

    def _key(self) -> tuple[float, float, float, float]:
        return (self._initial_step, self._min_step, self._shrink_factor, self._tolerance)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LimitConfig):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def shrink(self, step: float) -> float:
        """Returns the next, smaller step."""
        return step / self.shrink_factor

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(initial_step={self.initial_step!r}, "
            f"min_step={self.min_step!r}, shrink_factor={self.shrink_factor!r}, "
            f"tolerance={self.tolerance!r})"
        )


SCALAR_CONFIG = LimitConfig(tolerance=1e-6)
"""Defaults of the one-dimensional engine."""
VECTOR_CONFIG = LimitConfig(tolerance=1e-7)
"""Defaults of the directional-derivative engine."""
