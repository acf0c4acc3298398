"""Vector arithmetic and directional derivatives in three dimensions."""

from .directional import FormField, LinearMap, derivative_3d, linear_projection_at
from .vector import Vector, as_vector, scale_vector, sum_vectors, vector_length

__all__ = [
    "FormField",
    "LinearMap",
    "Vector",
    "as_vector",
    "derivative_3d",
    "linear_projection_at",
    "scale_vector",
    "sum_vectors",
    "vector_length",
]
