"""
Exponential weighting over time indices.

Positions are 1-based and increase with time, so the most recent
observation has the largest position ``n``. With smoothing factor
``decay`` (lambda):

    scaled:    w_i = (1 - decay)^(n - t_i)          (most recent weight is 1)
    unscaled:  w_i = decay * (1 - decay)^(1 - t_i)

Positions can also be given as values looked up in a reference domain (for
example a ``pandas.DatetimeIndex``), which allows weighting a sparse
selection of a longer timeline.
"""

from dataclasses import dataclass
import logging
from typing import Any, overload

import numpy as np
from numpy.typing import ArrayLike, NDArray
import pandas as pd

from ..core.weights import WeightVector, weights
from ..errors import ArgumentError

logger = logging.getLogger(__name__)


def _positions(t: ArrayLike) -> NDArray[np.int64]:
    positions = np.asarray(t).reshape(-1)
    if positions.size == 0:
        return np.empty(0, dtype=np.int64)
    if positions.dtype.kind == "f":
        if not np.all(np.isfinite(positions)) or np.any(positions != np.floor(positions)):
            raise ArgumentError("Time indices must be non-zero positive integers")
    elif positions.dtype.kind not in "biu":
        raise ArgumentError(
            f"Time indices must be integers, got dtype {positions.dtype}"
        )
    positions = positions.astype(np.int64)
    if np.any(positions <= 0):
        raise ArgumentError("Time indices must be non-zero positive integers")
    return positions


def _locate(t: ArrayLike, domain: ArrayLike) -> NDArray[np.int64]:
    """1-based positions of ``t`` inside ``domain``."""
    index = pd.Index(domain)
    locations = index.get_indexer(pd.Index(t))
    if np.any(locations < 0):
        raise ArgumentError("All time indices must be contained in the domain")
    return locations.astype(np.int64) + 1


@dataclass
class ExponentialWeights:
    """
    Exponential weighting scheme.

    Args:
        decay: Smoothing factor in [0, 1]. Larger values forget faster.
        scale: Scale weights so that the most recent observation has weight 1

    Example:
        >>> scheme = ExponentialWeights(decay=0.2, scale=True)
        >>> scheme.get_weights(4).values.round(4)
        array([0.512, 0.64 , 0.8  , 1.   ])
    """
    decay: float
    scale: bool = False

    def __post_init__(self) -> None:
        if not 0 <= self.decay <= 1:
            raise ArgumentError(
                f"Smoothing factor must be between 0 and 1, got {self.decay}"
            )

    def __call__(self, t: ArrayLike, n: int | None = None) -> WeightVector:
        """
        Weights for the 1-based positions ``t``.

        Args:
            t: Positive integer positions
            n: Most recent position of the reference timeline. Defaults to
                ``max(t)``.

        Returns:
            Neutral WeightVector aligned with ``t``
        """
        positions = _positions(t)
        if positions.size == 0:
            return weights(np.empty(0, dtype=np.float64))

        horizon = int(positions.max()) if n is None else int(n)
        base = 1.0 - self.decay
        if self.scale:
            values = np.power(base, (horizon - positions).astype(np.float64))
        else:
            values = self.decay * np.power(base, (1 - positions).astype(np.float64))

        logger.debug(
            "generated %d exponential weights (decay=%s, scale=%s)",
            values.size, self.decay, self.scale,
        )
        return weights(values)

    def get_weights(self, n: int) -> WeightVector:
        """Weights for positions ``1..n``."""
        return self(np.arange(1, n + 1), n)

    def effective_sample_size(self, n: int) -> float:
        """
        Kish effective sample size, ``sum(w)^2 / sum(w^2)``.

        Equal weights give n; concentrated weights give less.
        """
        values = self.get_weights(n).values
        if values.size == 0:
            return 0.0
        return float(values.sum() ** 2 / np.sum(values ** 2))


@overload
def eweights(t: ArrayLike | int, decay: float, *, scale: bool = ...) -> WeightVector: ...


@overload
def eweights(
    t: ArrayLike, domain: ArrayLike, decay: float, *, scale: bool = ...
) -> WeightVector: ...


def eweights(t: Any, *args: Any, scale: bool = False) -> WeightVector:
    """
    Exponential weights.

    Call forms:
        eweights(n, decay): positions ``1..n``
        eweights(t, decay): positions ``t``, horizon ``max(t)``
        eweights(t, domain, decay): positions of ``t`` inside ``domain``,
            horizon ``len(domain)``

    Args:
        t: Integer count, positive integer positions, or values of ``domain``
        domain: Reference timeline (anything ``pandas.Index`` accepts)
        decay: Smoothing factor in [0, 1]
        scale: Scale weights so the most recent position has weight 1

    Returns:
        Neutral WeightVector (empty for empty input)

    Raises:
        ArgumentError: If ``decay`` is outside [0, 1] or a position is not a
            positive integer

    Example:
        >>> eweights([1, 3, 5, 7], range(1, 11), 0.2, scale=True)
    """
    if len(args) == 1:
        (decay,) = args
        domain = None
    elif len(args) == 2:
        domain, decay = args
    else:
        raise TypeError("eweights() takes (t, decay) or (t, domain, decay)")

    scheme = ExponentialWeights(decay=decay, scale=scale)

    if domain is not None:
        return scheme(_locate(t, domain), len(domain))
    if isinstance(t, (int, np.integer)) and not isinstance(t, (bool, np.bool_)):
        return scheme.get_weights(int(t))
    return scheme(t)
