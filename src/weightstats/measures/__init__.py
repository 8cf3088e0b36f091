"""Location, dispersion and information measures."""

from .location import geomean, harmmean, genmean
from .dispersion import (
    MAD_NORMAL_CONSTANT,
    zscore,
    zscore_into,
    mad,
    iqr,
    span,
    sem,
    variation,
    summarystats,
)
from .information import entropy, renyientropy, crossentropy, kldivergence

__all__ = [
    # Location
    "geomean",
    "harmmean",
    "genmean",
    # Dispersion
    "MAD_NORMAL_CONSTANT",
    "zscore",
    "zscore_into",
    "mad",
    "iqr",
    "span",
    "sem",
    "variation",
    "summarystats",
    # Information
    "entropy",
    "renyientropy",
    "crossentropy",
    "kldivergence",
]
