"""
Weighted sums along one axis of an N-dimensional array.

wsum(x, w, axis) multiplies every slice of ``x`` orthogonal to ``axis`` by
the matching weight and adds the slices up. The reduced axis is kept with
size 1, so results broadcast back against ``x``:

    >>> x = np.arange(6.0).reshape(2, 3)
    >>> wsum(x, [1.0, 2.0], axis=0)
    array([[ 6.,  9., 12.]])

This is the kernel beneath the weighted sum, mean and variance.
"""

import logging
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from ..core.weights import AbstractWeights, UniformWeights, weight_values
from ..errors import DimensionMismatch

logger = logging.getLogger(__name__)


def _normalize_axis(axis: int, ndim: int) -> int:
    if not -ndim <= axis < ndim:
        raise DimensionMismatch(
            f"axis {axis} is out of range for an array of dimension {ndim}"
        )
    return axis % ndim


def _extent(w: AbstractWeights | ArrayLike) -> int:
    if isinstance(w, AbstractWeights):
        return len(w)
    return weight_values(w).shape[0]


def _weight_dtype(w: AbstractWeights | ArrayLike) -> np.dtype:
    if isinstance(w, AbstractWeights):
        return w.dtype
    return weight_values(w).dtype


def reduced_shape(shape: tuple[int, ...], axis: int) -> tuple[int, ...]:
    """Shape of ``wsum(x, w, axis)`` for an input of the given shape."""
    axis = _normalize_axis(axis, len(shape))
    return shape[:axis] + (1,) + shape[axis + 1:]


def wsum(
    x: ArrayLike,
    w: AbstractWeights | ArrayLike,
    axis: int | None = None,
) -> Any:
    """
    Weighted sum of ``x``.

    Args:
        x: Data array
        w: Weights. Without ``axis`` their length must equal ``x.size``
            (``x`` is flattened in C order); with ``axis`` it must equal
            ``x.shape[axis]``.
        axis: Axis to reduce, or None to reduce everything

    Returns:
        Scalar when ``axis`` is None, otherwise an array with ``axis``
        collapsed to size 1

    Raises:
        DimensionMismatch: If the extents disagree or ``axis`` is out of range
    """
    x = np.asarray(x)

    if axis is not None:
        axis = _normalize_axis(axis, x.ndim)
        dtype = np.result_type(x.dtype, _weight_dtype(w))
        out = np.empty(reduced_shape(x.shape, axis), dtype=dtype)
        return wsum_into(out, x, w, axis, init=True)

    n = _extent(w)
    if n != x.size:
        raise DimensionMismatch(
            f"weights of length {n} do not match data with {x.size} elements"
        )
    if isinstance(w, UniformWeights):
        return x.sum()
    return np.dot(x.reshape(-1), weight_values(w))


def wsum_into(
    out: NDArray[Any],
    x: ArrayLike,
    w: AbstractWeights | ArrayLike,
    axis: int,
    init: bool = True,
) -> NDArray[Any]:
    """
    Weighted sum along ``axis`` written into ``out``.

    Args:
        out: Destination array with the reduced shape of ``x`` (``axis``
            with size 1)
        x: Data array
        w: Weights with ``len(w) == x.shape[axis]``
        axis: Axis to reduce
        init: Overwrite ``out`` when True, add onto its contents when False

    Returns:
        ``out`` itself, so repeated calls can be chained to accumulate

    Raises:
        DimensionMismatch: If any extent disagrees
    """
    if not isinstance(out, np.ndarray):
        raise TypeError(f"out must be a numpy array, got {type(out).__name__}")

    x = np.asarray(x)
    axis = _normalize_axis(axis, x.ndim)

    n = _extent(w)
    if n != x.shape[axis]:
        raise DimensionMismatch(
            f"weights of length {n} do not match axis {axis} of length {x.shape[axis]}"
        )

    keep_shape = reduced_shape(x.shape, axis)
    if out.shape != keep_shape:
        raise DimensionMismatch(
            f"output of shape {out.shape} does not match reduced shape {keep_shape}"
        )

    if isinstance(w, UniformWeights):
        reduced = x.sum(axis=axis)
    else:
        reduced = np.tensordot(x, weight_values(w), axes=([axis], [0]))
    reduced = np.reshape(reduced, out.shape)

    logger.debug(
        "wsum over axis %d of %s: %s", axis, x.shape, "overwrite" if init else "accumulate"
    )
    if init:
        out[...] = reduced
    else:
        out += reduced
    return out


def weighted_sum(
    x: ArrayLike,
    w: AbstractWeights | ArrayLike,
    axis: int | None = None,
) -> Any:
    """Weighted sum of ``x`` (same contract as :func:`wsum`)."""
    return wsum(x, w, axis)
