"""One-dimensional difference quotients and the shrinking-step loop."""

from .convergence import ConvergenceResult, converge_shrinking_step
from .limit_config import SCALAR_CONFIG, VECTOR_CONFIG, LimitConfig
from .rate import rate_of_change
from .scalar_limit import derivative, derivative_at, derivative_at_result

__all__ = [
    "ConvergenceResult",
    "LimitConfig",
    "SCALAR_CONFIG",
    "VECTOR_CONFIG",
    "converge_shrinking_step",
    "derivative",
    "derivative_at",
    "derivative_at_result",
    "rate_of_change",
]
