"""Provides all limitkit methods."""

from importlib.metadata import PackageNotFoundError, version

from limitkit.calculus.directional import (
    FormField,
    LinearMap,
    derivative_3d,
    linear_projection_at,
)
from limitkit.calculus.vector import (
    Vector,
    scale_vector,
    sum_vectors,
    vector_length,
)
from limitkit.exceptions import InvalidStep, LimitKitError, NotDifferentiable
from limitkit.finite.convergence import ConvergenceResult
from limitkit.finite.limit_config import LimitConfig
from limitkit.finite.rate import rate_of_change
from limitkit.finite.scalar_limit import (
    derivative,
    derivative_at,
    derivative_at_result,
)

try:
    __version__ = version("limitkit")
except PackageNotFoundError:
    pass

__all__ = [
    "ConvergenceResult",
    "FormField",
    "InvalidStep",
    "LimitConfig",
    "LimitKitError",
    "LinearMap",
    "NotDifferentiable",
    "Vector",
    "derivative",
    "derivative_3d",
    "derivative_at",
    "derivative_at_result",
    "linear_projection_at",
    "rate_of_change",
    "scale_vector",
    "sum_vectors",
    "vector_length",
]
