"""
weightstats: Weighted Statistics with Kind-Aware Weights

A Python library of statistical estimators that accept per-observation
weights whose *kind* changes how the estimator behaves, not only what it
multiplies by.

Key Features:
- Frequency, analytic, probability, uniform and custom weight containers
- Axis-generic weighted sums with overwrite/accumulate output buffers
- Weighted mean and variance with kind-specific bias corrections
- Weighted quantiles, medians and modes (frequency weights reproduce the
  replicated-sample estimator exactly)
- Exponential weights over integer or timestamp indices
- Location, dispersion and information measures (genmean, MAD, entropy, ...)

Basic Example:
    >>> import weightstats as ws
    >>>
    >>> w = ws.fweights([3, 1, 1, 1, 3])
    >>> ws.quantile([7, 1, 2, 4, 10], w, [0.25, 0.5, 0.75])
    >>> ws.mean([7, 1, 2, 4, 10], w)
    >>> ws.var([7, 1, 2, 4, 10], w, corrected=True)
    >>>
    >>> # Axis-wise reductions keep the reduced axis
    >>> import numpy as np
    >>> x = np.random.rand(6, 8)
    >>> ws.wsum(x, ws.aweights(np.random.rand(8)), axis=1).shape
    (6, 1)

Exponential Weights Example:
    >>> ws.eweights(4, 0.2, scale=True).values.round(3)
    array([0.512, 0.64 , 0.8  , 1.   ])

References:
    Hyndman, R.J. & Fan, Y. (1996). Sample Quantiles in Statistical Packages.
    Rényi, A. (1961). On Measures of Entropy and Information.
    Rousseeuw, P.J. & Croux, C. (1993). Alternatives to the Median Absolute
    Deviation.
"""

import logging

__version__ = "0.1.0"

# Errors
from .errors import (
    WeightStatsError,
    ArgumentError,
    InvalidWeightError,
    DimensionMismatch,
    InexactError,
)

# Weight containers
from .core.weights import (
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
)
from .core.result import SummaryStats

# Reductions and moments
from .reduction import wsum, wsum_into, weighted_sum
from .moments import mean, var, std, varcorrection

# Order statistics
from .order import quantile, median, percentile, nquantile, mode, modes

# Time weighting
from .temporal import ExponentialWeights, eweights

# Measures
from .measures import (
    MAD_NORMAL_CONSTANT,
    geomean,
    harmmean,
    genmean,
    zscore,
    zscore_into,
    mad,
    iqr,
    span,
    sem,
    variation,
    summarystats,
    entropy,
    renyientropy,
    crossentropy,
    kldivergence,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())


__all__ = [
    # Version info
    "__version__",
    # Errors
    "WeightStatsError",
    "ArgumentError",
    "InvalidWeightError",
    "DimensionMismatch",
    "InexactError",
    # Weight containers
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
    "SummaryStats",
    # Reductions and moments
    "wsum",
    "wsum_into",
    "weighted_sum",
    "mean",
    "var",
    "std",
    "varcorrection",
    # Order statistics
    "quantile",
    "median",
    "percentile",
    "nquantile",
    "mode",
    "modes",
    # Time weighting
    "ExponentialWeights",
    "eweights",
    # Measures
    "MAD_NORMAL_CONSTANT",
    "geomean",
    "harmmean",
    "genmean",
    "zscore",
    "zscore_into",
    "mad",
    "iqr",
    "span",
    "sem",
    "variation",
    "summarystats",
    "entropy",
    "renyientropy",
    "crossentropy",
    "kldivergence",
]
