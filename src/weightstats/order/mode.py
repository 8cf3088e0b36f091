"""Weighted and unweighted mode(s)."""

from typing import Any, Iterable

import numpy as np
from numpy.typing import ArrayLike

from ..core.weights import AbstractWeights, UniformWeights, weight_values
from ..errors import ArgumentError, InvalidWeightError

# Shared key so every NaN lands in one bucket
_NAN = float("nan")


def _range_bounds(value_range: tuple[Any, Any] | range) -> tuple[Any, Any]:
    if isinstance(value_range, range):
        if value_range.step != 1 or len(value_range) == 0:
            raise ArgumentError("value_range must be a non-empty unit range")
        return value_range.start, value_range.stop - 1
    lo, hi = value_range
    if lo > hi:
        raise ArgumentError(f"value_range must satisfy lo <= hi, got ({lo}, {hi})")
    return lo, hi


def _tally(
    a: ArrayLike,
    w: AbstractWeights | None,
    value_range: tuple[Any, Any] | range | None,
) -> tuple[dict[Any, Any], Any, Any]:
    """
    Accumulate the weight of every distinct value.

    Returns the per-value totals (in order of first occurrence), the value
    whose running total first reached the maximum, and that maximum. All
    NaN values count as one value.
    """
    items = np.asarray(a).reshape(-1).tolist()
    if not items:
        raise ArgumentError("mode is not defined for empty collections")

    wts: Iterable[Any]
    if w is None or isinstance(w, UniformWeights):
        if w is not None and len(w) != len(items):
            raise ArgumentError(
                f"data and weight vectors must be the same size, got {len(items)} and {len(w)}"
            )
        wts = [1] * len(items)
    else:
        if len(w) != len(items):
            raise ArgumentError(
                f"data and weight vectors must be the same size, got {len(items)} and {len(w)}"
            )
        values = weight_values(w)
        if np.any(np.isnan(values)):
            raise InvalidWeightError("weight vector cannot contain NaN entries")
        wts = values.tolist()

    bounds = _range_bounds(value_range) if value_range is not None else None

    totals: dict[Any, Any] = {}
    best = best_total = None
    for x, wt in zip(items, wts):
        if x != x:
            x = _NAN
        if bounds is not None and not bounds[0] <= x <= bounds[1]:
            continue
        running = totals.get(x, 0) + wt
        totals[x] = running
        if best_total is None or running > best_total:
            best, best_total = x, running

    if not totals:
        raise ArgumentError(f"no values fall inside value_range {value_range}")
    return totals, best, best_total


def mode(
    a: ArrayLike,
    w: AbstractWeights | None = None,
    value_range: tuple[Any, Any] | range | None = None,
) -> Any:
    """
    Most frequent (or heaviest) value of ``a``.

    Ties go to the value whose running total reaches the maximum first when
    scanning ``a`` in order.

    Args:
        a: Data (flattened if multi-dimensional)
        w: Optional weights; any AbstractWeights implementation works
        value_range: Only count values in the inclusive range (lo, hi)

    Returns:
        The modal value

    Raises:
        ArgumentError: Empty input, length mismatch, or no value in range
        InvalidWeightError: If any weight is NaN

    Example:
        >>> mode([1, 2, 3, 3, 2, 2, 1])
        2
        >>> mode([1, 2, 3], weights([1, 4, 10]))
        3
    """
    _, best, _ = _tally(a, w, value_range)
    return best


def modes(
    a: ArrayLike,
    w: AbstractWeights | None = None,
    value_range: tuple[Any, Any] | range | None = None,
) -> list[Any]:
    """
    All values tied at the maximal count (or total weight).

    Values are listed in order of first occurrence, or in ascending order
    when ``value_range`` is given.
    """
    totals, _, best_total = _tally(a, w, value_range)
    tied = [x for x, total in totals.items() if total == best_total]
    if value_range is not None:
        tied.sort()
    return tied
