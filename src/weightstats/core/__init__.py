"""Core abstractions for weightstats."""

from .weights import (
    WeightKind,
    AbstractWeights,
    WeightVector,
    UniformWeights,
    weights,
    frequency_weights,
    analytic_weights,
    probability_weights,
    uniform_weights,
    fweights,
    aweights,
    pweights,
    uweights,
    as_weights,
    weight_values,
)
from .result import SummaryStats

__all__ = [
    "WeightKind",
    "AbstractWeights",
    "WeightVector",
    "UniformWeights",
    "weights",
    "frequency_weights",
    "analytic_weights",
    "probability_weights",
    "uniform_weights",
    "fweights",
    "aweights",
    "pweights",
    "uweights",
    "as_weights",
    "weight_values",
    "SummaryStats",
]
