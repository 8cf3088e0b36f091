"""Weighted central tendency and spread."""

from .central import mean, var, std, varcorrection

__all__ = [
    "mean",
    "var",
    "std",
    "varcorrection",
]
