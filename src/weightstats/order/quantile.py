"""
Weighted quantiles and medians.

The estimator depends on the weight kind:

- FREQUENCY: identical to the standard linear-interpolation quantile
  (Hyndman-Fan type 7, NumPy's default) of the sample obtained by repeating
  every observation as many times as its weight.
- ANALYTIC, PROBABILITY, CUSTOM: a continuous generalization of the same
  estimator. With W the total weight and w1 the weight of the smallest
  observation, the target position is h = p*(W - w1) + w1 on the cumulative
  weight scale, and the result interpolates linearly between the two sorted
  observations whose cumulative weights bracket h. Equal weights reproduce
  the unweighted estimator; positive integer weights reproduce the
  frequency estimator.
- UNIFORM: the unweighted estimator on the raw data.

Observations with zero weight are dropped before sorting.

References:
    Hyndman, R.J. & Fan, Y. (1996). Sample Quantiles in Statistical Packages.
    The American Statistician, 50(4), 361-365.
"""

import logging
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from ..core.weights import AbstractWeights, UniformWeights, WeightKind, weight_values
from ..errors import ArgumentError, InvalidWeightError

logger = logging.getLogger(__name__)


def _as_data(v: ArrayLike, what: str) -> NDArray[Any]:
    data = np.asarray(v)
    if data.ndim != 1:
        raise TypeError(f"{what} requires one-dimensional data, got {data.ndim} dimensions")
    if data.size == 0:
        raise ArgumentError(f"{what} of an empty array is undefined")
    return data


def _check_probabilities(probs: NDArray[np.float64]) -> None:
    if probs.size == 0:
        raise ArgumentError("empty quantile array")
    if not np.all((probs >= 0) & (probs <= 1)):
        raise ArgumentError("input probability out of [0,1] range")


def _check_weights(data: NDArray[Any], w: AbstractWeights) -> NDArray[Any]:
    """Validate weights for an order statistic and return their values."""
    if len(w) != data.size:
        raise ArgumentError(
            f"data and weight vectors must be the same size, got {data.size} and {len(w)}"
        )
    values = weight_values(w)
    if np.any(np.isnan(values)):
        raise InvalidWeightError("weight vector cannot contain NaN entries")
    if np.any(values < 0):
        raise InvalidWeightError("weight vector cannot contain negative entries")
    if w.kind is WeightKind.FREQUENCY and np.any(values != np.floor(values)):
        raise InvalidWeightError(
            "frequency weights must be numerically equal to integers; "
            "use probability or analytic weights instead"
        )
    if not values.sum() > 0:
        raise InvalidWeightError("weight vector must have a positive sum")
    return values


def _weighted_quantile(
    data: NDArray[Any],
    wts: NDArray[Any],
    probs: NDArray[np.float64],
    frequency: bool,
) -> NDArray[np.float64]:
    keep = wts != 0
    elided = data.size - int(np.count_nonzero(keep))
    if elided:
        logger.debug("quantile: dropping %d zero-weight observations", elided)

    vals = np.asarray(data[keep], dtype=float)
    wts = np.asarray(wts[keep], dtype=float)

    if np.any(np.isnan(vals)):
        return np.full(probs.size, np.nan)

    # Ties are ordered by weight so the result does not depend on input order
    order = np.lexsort((wts, vals))
    vals = vals[order].tolist()
    wts = wts[order].tolist()

    n = len(vals)
    total = sum(wts)
    first = wts[0]
    out = np.full(probs.size, vals[-1])

    cum = cum_prev = 0.0
    v_k = v_prev = 0.0
    k = 0
    for i in np.argsort(probs, kind="stable"):
        p = float(probs[i])
        if frequency:
            h = p * (total - 1) + 1
        else:
            h = p * (total - first) + first

        while cum <= h:
            if k == n:
                # Remaining probabilities already hold the largest value
                return out
            cum_prev, v_prev = cum, v_k
            v_k = vals[k]
            cum += wts[k]
            k += 1

        if frequency:
            out[i] = v_prev + min(h - cum_prev, 1.0) * (v_k - v_prev)
        else:
            out[i] = v_prev + (h - cum_prev) / (cum - cum_prev) * (v_k - v_prev)

    return out


def quantile(
    v: ArrayLike,
    w: AbstractWeights | None,
    p: float | ArrayLike,
) -> float | NDArray[np.float64]:
    """
    Weighted quantile(s) of ``v`` at probability ``p``.

    Args:
        v: One-dimensional data
        w: Weights, or None for the unweighted estimator
        p: Probability or array of probabilities in [0, 1]

    Returns:
        Float for scalar ``p``, otherwise an array shaped like ``p``

    Raises:
        ArgumentError: Empty data or ``p``, ``p`` outside [0, 1], length
            mismatch between data and weights
        InvalidWeightError: NaN, negative or (for frequency weights)
            fractional weights, or weights that sum to zero
        TypeError: If ``v`` is not one-dimensional

    Example:
        >>> quantile([1, 2], fweights([1, 1]), 0.25)
        1.25
        >>> quantile([1, 2], fweights([2, 2]), 0.25)
        1.0
    """
    data = _as_data(v, "quantile")
    probs = np.asarray(p, dtype=float)
    flat = probs.reshape(-1)
    _check_probabilities(flat)

    if w is None:
        result = np.quantile(data, flat)
    elif isinstance(w, UniformWeights):
        if len(w) != data.size:
            raise ArgumentError(
                f"data and weight vectors must be the same size, got {data.size} and {len(w)}"
            )
        result = np.quantile(data, flat)
    else:
        values = _check_weights(data, w)
        result = _weighted_quantile(
            data, values, flat, frequency=w.kind is WeightKind.FREQUENCY
        )

    if probs.ndim == 0:
        return float(result[0])
    return np.asarray(result, dtype=float).reshape(probs.shape)


def median(v: ArrayLike, w: AbstractWeights | None = None) -> float:
    """
    Weighted median, ``quantile(v, w, 0.5)``.

    All argument checks run before any sorting: empty data, length mismatch,
    NaN or negative weights and weights without positive mass are rejected.
    NaN data carrying a non-zero weight makes the result NaN.

    Args:
        v: One-dimensional data
        w: Weights, or None for the plain median

    Returns:
        Median as a float
    """
    data = _as_data(v, "median")
    if w is None:
        return float(np.median(data))
    if isinstance(w, UniformWeights):
        if len(w) != data.size:
            raise ArgumentError(
                f"data and weight vectors must be the same size, got {data.size} and {len(w)}"
            )
    else:
        _check_weights(data, w)
    return quantile(data, w, 0.5)


def percentile(
    v: ArrayLike,
    p: float | ArrayLike,
    w: AbstractWeights | None = None,
) -> float | NDArray[np.float64]:
    """Quantile at percentage(s) ``p`` in [0, 100]."""
    return quantile(v, w, np.asarray(p, dtype=float) / 100)


def nquantile(
    v: ArrayLike,
    n: int,
    w: AbstractWeights | None = None,
) -> NDArray[np.float64]:
    """Quantiles at ``0, 1/n, 2/n, ..., 1``."""
    if n < 1:
        raise ArgumentError(f"n must be at least 1, got {n}")
    return quantile(v, w, np.linspace(0.0, 1.0, n + 1))
