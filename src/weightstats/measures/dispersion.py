"""
Dispersion measures and standardization.

References:
    Rousseeuw, P.J. & Croux, C. (1993). Alternatives to the Median Absolute
    Deviation. JASA, 88(424), 1273-1283.
"""

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy import stats

from ..core.result import SummaryStats
from ..core.weights import AbstractWeights
from ..errors import ArgumentError, DimensionMismatch
from ..order import quantile

# Scale factor making the MAD a consistent estimator of the standard
# deviation under normality: 1 / Phi^-1(3/4)
MAD_NORMAL_CONSTANT = float(1.0 / stats.norm.ppf(0.75))


def _check_broadcast(shape: tuple[int, ...], *others: Any) -> None:
    try:
        result = np.broadcast_shapes(shape, *(np.shape(o) for o in others))
    except ValueError as exc:
        raise DimensionMismatch(str(exc)) from exc
    if result != shape:
        raise DimensionMismatch(
            f"center/scale of shapes {[np.shape(o) for o in others]} "
            f"do not broadcast to data of shape {shape}"
        )


def zscore(
    x: ArrayLike,
    mu: ArrayLike | None = None,
    sigma: ArrayLike | None = None,
    axis: int | None = None,
) -> NDArray[np.float64]:
    """
    Standardize ``x`` as ``(x - mu) / sigma``.

    Args:
        x: Data array
        mu: Center; defaults to the mean over ``axis``
        sigma: Scale; defaults to the corrected standard deviation over ``axis``
        axis: Axis for the default center/scale (None = whole array)

    Returns:
        Array of z-scores with the shape of ``x``

    Raises:
        DimensionMismatch: If ``mu``/``sigma`` do not broadcast to ``x``
    """
    data = np.asarray(x, dtype=float)
    if mu is None:
        mu = np.mean(data, axis=axis, keepdims=axis is not None)
    if sigma is None:
        sigma = np.std(data, axis=axis, ddof=1, keepdims=axis is not None)
    return zscore_into(np.empty_like(data), data, mu, sigma)


def zscore_into(
    out: NDArray[np.float64],
    x: ArrayLike,
    mu: ArrayLike,
    sigma: ArrayLike,
) -> NDArray[np.float64]:
    """
    Write ``(x - mu) / sigma`` into ``out`` and return it.

    ``out`` may be ``x`` itself to standardize in place.
    """
    if not isinstance(out, np.ndarray):
        raise TypeError(f"out must be a numpy array, got {type(out).__name__}")
    data = np.asarray(x)
    if out.shape != data.shape:
        raise DimensionMismatch(
            f"output of shape {out.shape} does not match data of shape {data.shape}"
        )
    _check_broadcast(data.shape, mu, sigma)
    np.subtract(data, mu, out=out)
    np.divide(out, sigma, out=out)
    return out


def mad(
    x: ArrayLike,
    center: float | None = None,
    normalize: bool = True,
    overwrite_input: bool = False,
) -> float:
    """
    Median absolute deviation ``median(|x - center|)``.

    Args:
        x: Data
        center: Center to measure deviations from; defaults to the median
        normalize: Multiply by ``MAD_NORMAL_CONSTANT`` (about 1.4826) so the
            result estimates the standard deviation of normal data
        overwrite_input: Use ``x`` (a float ndarray) as scratch space
            instead of copying it; its contents are destroyed

    Returns:
        MAD

    Raises:
        ArgumentError: If ``x`` is empty

    Example:
        >>> mad([1, 2, 3, 4, 5], normalize=False)
        1.0
    """
    if overwrite_input:
        if not isinstance(x, np.ndarray) or x.dtype.kind != "f":
            raise TypeError("overwrite_input requires a floating point numpy array")
        data = x.reshape(-1)
    else:
        data = np.array(x, dtype=float).reshape(-1)
    if data.size == 0:
        raise ArgumentError("mad is not defined for empty arrays")

    if center is None:
        center = np.median(data)
    np.subtract(data, center, out=data)
    np.abs(data, out=data)
    result = float(np.median(data, overwrite_input=True))
    return result * MAD_NORMAL_CONSTANT if normalize else result


def iqr(x: ArrayLike, w: AbstractWeights | None = None) -> float:
    """Interquartile range ``q75 - q25``."""
    q25, q75 = quantile(x, w, [0.25, 0.75])
    return float(q75 - q25)


def span(x: ArrayLike) -> tuple[Any, Any]:
    """Smallest and largest value as ``(min, max)``."""
    data = np.asarray(x)
    if data.size == 0:
        raise ArgumentError("span is not defined for empty arrays")
    return data.min().item(), data.max().item()


def sem(x: ArrayLike) -> float:
    """Standard error of the mean, ``std(x, ddof=1) / sqrt(n)``."""
    return float(stats.sem(np.asarray(x, dtype=float), axis=None, ddof=1))


def variation(x: ArrayLike) -> float:
    """Coefficient of variation, ``std(x, ddof=1) / mean(x)``."""
    return float(stats.variation(np.asarray(x, dtype=float), axis=None, ddof=1))


def summarystats(x: ArrayLike) -> SummaryStats:
    """
    Mean, quartiles and extremes of the non-NaN values of ``x``.

    Raises:
        ArgumentError: If ``x`` has no non-NaN values
    """
    data = np.asarray(x, dtype=float).reshape(-1)
    valid = data[~np.isnan(data)]
    if valid.size == 0:
        raise ArgumentError("summarystats requires at least one non-missing value")

    q = np.quantile(valid, [0.0, 0.25, 0.5, 0.75, 1.0])
    return SummaryStats(
        mean=float(np.mean(valid)),
        min=float(q[0]),
        q25=float(q[1]),
        median=float(q[2]),
        q75=float(q[3]),
        max=float(q[4]),
        nobs=int(data.size),
        nmiss=int(data.size - valid.size),
    )
