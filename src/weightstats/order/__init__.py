"""Order statistics: quantiles, medians and modes."""

from .quantile import quantile, median, percentile, nquantile
from .mode import mode, modes

__all__ = [
    "quantile",
    "median",
    "percentile",
    "nquantile",
    "mode",
    "modes",
]
