"""Weighted reductions over N-dimensional arrays."""

from .wsum import wsum, wsum_into, weighted_sum, reduced_shape

__all__ = [
    "wsum",
    "wsum_into",
    "weighted_sum",
    "reduced_shape",
]
