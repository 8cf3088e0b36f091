"""
Entropy, cross-entropy and Kullback-Leibler divergence of discrete
distributions.

The inputs are probability vectors. They do not have to sum to one for the
Rényi entropy, which treats un-normalized ("generalized") distributions by
subtracting ``log(sum(p))``.

References:
    Rényi, A. (1961). On Measures of Entropy and Information. Proceedings of
    the Fourth Berkeley Symposium, 1, 547-561.
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy.special import rel_entr, xlogy

from ..errors import ArgumentError, DimensionMismatch


def _log_base(base: float | None) -> float:
    if base is None:
        return 1.0
    if not base > 0 or base == 1:
        raise ArgumentError(f"logarithm base must be positive and not 1, got {base}")
    return float(np.log(base))


def _pair(p: ArrayLike, q: ArrayLike) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    p = np.asarray(p, dtype=float)
    q = np.asarray(q, dtype=float)
    if p.shape != q.shape:
        raise DimensionMismatch(
            f"distributions must have the same shape, got {p.shape} and {q.shape}"
        )
    return p, q


def entropy(p: ArrayLike, base: float | None = None) -> float:
    """
    Shannon entropy ``-sum(p * log(p))`` with ``0 * log(0) = 0``.

    Args:
        p: Probability vector
        base: Logarithm base (natural log when None)

    Returns:
        Entropy

    Example:
        >>> entropy([0.5, 0.5], 2)
        1.0
    """
    p = np.asarray(p, dtype=float)
    return float(-np.sum(xlogy(p, p)) / _log_base(base))


def renyientropy(p: ArrayLike, order: float) -> float:
    """
    Rényi entropy of the given order.

    - order 0: ``log(count(p > 0))``
    - order 1: Shannon entropy
    - order inf: ``-log(max(p))``
    - otherwise: ``log(sum(p^order)) / (1 - order)``

    For un-normalized ``p`` every case is shifted by ``-log(sum(p))``.

    Args:
        p: Probability vector (non-negative entries)
        order: Non-negative order

    Returns:
        Rényi entropy

    Raises:
        ArgumentError: If ``order`` is negative
    """
    if order < 0:
        raise ArgumentError(f"Order of Rényi entropy not legal, {order} < 0")

    p = np.asarray(p, dtype=float)
    scale = p.sum()
    positive = p[p > 0]

    if order == 0:
        return float(np.log(positive.size / scale))
    if np.isclose(order, 1.0, rtol=np.sqrt(np.finfo(float).eps), atol=0.0):
        return float(-np.sum(positive * np.log(positive)) / scale)
    if np.isinf(order):
        return float(-np.log(p.max()))
    return float(np.log(np.sum(positive ** order) / scale) / (1 - order))


def crossentropy(p: ArrayLike, q: ArrayLike, base: float | None = None) -> float:
    """
    Cross-entropy ``-sum(p * log(q))``.

    Raises:
        DimensionMismatch: If ``p`` and ``q`` differ in shape
    """
    p, q = _pair(p, q)
    return float(-np.sum(xlogy(p, q)) / _log_base(base))


def kldivergence(p: ArrayLike, q: ArrayLike, base: float | None = None) -> float:
    """
    Kullback-Leibler divergence ``sum(p * log(p / q))``.

    Terms with ``p == 0`` contribute zero; ``q == 0`` where ``p > 0`` gives inf.

    Raises:
        DimensionMismatch: If ``p`` and ``q`` differ in shape
    """
    p, q = _pair(p, q)
    return float(np.sum(rel_entr(p, q)) / _log_base(base))
