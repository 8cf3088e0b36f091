"""Geometric, harmonic and generalized (power) means."""

import numpy as np
from numpy.typing import ArrayLike
from scipy.special import logsumexp


def geomean(a: ArrayLike) -> float:
    """
    Geometric mean, computed in the log domain.

    Returns 0.0 when any value is zero.
    """
    x = np.asarray(a, dtype=float)
    with np.errstate(divide="ignore"):
        return float(np.exp(np.mean(np.log(x))))


def harmmean(a: ArrayLike) -> float:
    """Harmonic mean, ``n / sum(1/x)``."""
    x = np.asarray(a, dtype=float)
    with np.errstate(divide="ignore"):
        return float(x.size / np.sum(1.0 / x))


def genmean(a: ArrayLike, p: float) -> float:
    """
    Generalized (power) mean ``(mean(x^p))^(1/p)``.

    p = 1 is the arithmetic mean, p = -1 the harmonic mean and p -> 0 the
    geometric mean. For non-negative data the mean is evaluated in the log
    domain:

        log M_p = log(mean(exp(p * log x))) / p

    using ``log1p(mean(expm1(.)))`` when every ``|p * log x| <= 1`` (so the
    result converges to the geometric mean as p -> 0) and a log-sum-exp
    otherwise (so it converges to the max/min for large ``|p|``). Negative
    data falls back to the direct formula.

    Args:
        a: Data
        p: Power

    Returns:
        Generalized mean
    """
    x = np.asarray(a, dtype=float)
    if p == 0:
        return geomean(x)
    if np.any(x < 0):
        return float(np.mean(x ** p) ** (1.0 / p))

    with np.errstate(divide="ignore"):
        scaled = p * np.log(x)
    if np.all(np.abs(scaled) <= 1):
        log_mean = np.log1p(np.mean(np.expm1(scaled)))
    else:
        log_mean = logsumexp(scaled) - np.log(x.size)
    return float(np.exp(log_mean / p))
