"""
Time-based weighting schemes.

Positions follow the time axis: position 1 is the oldest observation and the
largest position the most recent one.
"""

from .exponential import ExponentialWeights, eweights

__all__ = [
    "ExponentialWeights",
    "eweights",
]
