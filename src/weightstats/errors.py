"""Error types raised by weightstats.

The classes derive from the built-in ``ValueError``/``TypeError`` so callers
that only care about "bad input" can keep catching those, while callers that
want to re-validate can distinguish the kind of failure.
"""


class WeightStatsError(Exception):
    """Base class for all weightstats errors."""


class ArgumentError(WeightStatsError, ValueError):
    """An argument is outside the domain of the operation."""


class InvalidWeightError(ArgumentError):
    """
    A weight value cannot be used.

    Raised for Inf/NaN weights, negative weights, fractional frequency
    weights and weight vectors whose usable mass is not strictly positive.
    """


class DimensionMismatch(WeightStatsError, ValueError):
    """Array and weight extents disagree, or an axis is out of range."""


class InexactError(WeightStatsError, TypeError):
    """A value cannot be stored exactly in the container's numeric type."""


__all__ = [
    "WeightStatsError",
    "ArgumentError",
    "InvalidWeightError",
    "DimensionMismatch",
    "InexactError",
]
