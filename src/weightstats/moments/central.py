"""
Weighted mean, variance and standard deviation.

The variance is the weighted sum of squared deviations scaled by a
correction factor that depends on the weight kind:

    kind          corrected=False   corrected=True
    uniform       1/n               1/(n-1)
    analytic      1/s               1/(s - sum(w^2)/s)
    frequency     1/s               1/(s-1)
    probability   1/s               1/(s-1)
    custom        1/s               not defined

where n is the number of observations and s the total weight.
"""

from typing import Any, Callable

import numpy as np
from numpy.typing import ArrayLike

from ..core.weights import AbstractWeights, WeightKind, as_weights
from ..errors import ArgumentError
from ..reduction import wsum


def _reciprocal(denominator: Any, what: str) -> float:
    if not denominator > 0:
        raise ArgumentError(f"{what} must be positive, got {denominator}")
    return 1.0 / float(denominator)


def _uniform_correction(w: AbstractWeights, corrected: bool) -> float:
    n = len(w)
    if corrected:
        return _reciprocal(n - 1, "number of observations minus one")
    return _reciprocal(n, "number of observations")


def _analytic_correction(w: AbstractWeights, corrected: bool) -> float:
    s = w.total
    factor = _reciprocal(s, "total weight")
    if not corrected:
        return factor
    sum_sq = np.sum(np.square(np.asarray(w.values, dtype=float)))
    return _reciprocal(s - sum_sq / s, "effective degrees of freedom")


def _frequency_correction(w: AbstractWeights, corrected: bool) -> float:
    s = w.total
    if corrected:
        return _reciprocal(s - 1, "total weight minus one")
    return _reciprocal(s, "total weight")


def _custom_correction(w: AbstractWeights, corrected: bool) -> float:
    if corrected:
        raise ArgumentError(
            "corrected=True is only supported for frequency, analytic, "
            "probability and uniform weights"
        )
    return _reciprocal(w.total, "total weight")


_CORRECTIONS: dict[WeightKind, Callable[[AbstractWeights, bool], float]] = {
    WeightKind.UNIFORM: _uniform_correction,
    WeightKind.ANALYTIC: _analytic_correction,
    WeightKind.FREQUENCY: _frequency_correction,
    WeightKind.PROBABILITY: _frequency_correction,
    WeightKind.CUSTOM: _custom_correction,
}


def varcorrection(w: AbstractWeights | ArrayLike, corrected: bool = False) -> float:
    """
    Factor applied to the weighted sum of squared deviations.

    Args:
        w: Weights
        corrected: Apply the kind-specific bias correction

    Returns:
        Multiplicative correction factor

    Raises:
        ArgumentError: If the correction is undefined for the weight kind or
            its denominator is not positive
    """
    w = as_weights(w)
    return _CORRECTIONS[w.kind](w, corrected)


def mean(
    x: ArrayLike,
    w: AbstractWeights | ArrayLike,
    axis: int | None = None,
) -> Any:
    """
    Weighted mean ``wsum(x, w, axis) / total(w)``.

    Args:
        x: Data array
        w: Weights (any AbstractWeights, including custom types)
        axis: Axis to reduce, or None for the whole array

    Returns:
        Scalar, or an array with ``axis`` collapsed to size 1

    Raises:
        DimensionMismatch: If the weights do not match ``x``
    """
    w = as_weights(w)
    return wsum(x, w, axis) / w.total


def var(
    x: ArrayLike,
    w: AbstractWeights | ArrayLike,
    axis: int | None = None,
    corrected: bool = False,
    mean: ArrayLike | None = None,
) -> Any:
    """
    Weighted variance.

    Args:
        x: Data array
        w: Weights
        axis: Axis to reduce, or None for the whole array
        corrected: Apply the kind-specific bias correction (see module docs)
        mean: Precomputed weighted mean; computed when None

    Returns:
        Scalar, or an array with ``axis`` collapsed to size 1

    Raises:
        ArgumentError: If the correction is undefined
        DimensionMismatch: If the weights do not match ``x``
    """
    x = np.asarray(x)
    w = as_weights(w)
    correction = varcorrection(w, corrected)

    if mean is None:
        mean = wsum(x, w, axis) / w.total
    squared = np.abs(x - mean) ** 2
    return wsum(squared, w, axis) * correction


def std(
    x: ArrayLike,
    w: AbstractWeights | ArrayLike,
    axis: int | None = None,
    corrected: bool = False,
    mean: ArrayLike | None = None,
) -> Any:
    """Weighted standard deviation, the square root of :func:`var`."""
    return np.sqrt(var(x, w, axis=axis, corrected=corrected, mean=mean))
