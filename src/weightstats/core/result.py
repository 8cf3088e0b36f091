"""Result container types."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SummaryStats:
    """
    Five-number summary plus mean and counts.

    Attributes:
        mean: Arithmetic mean of the non-missing values
        min: Smallest value
        q25: First quartile
        median: Median
        q75: Third quartile
        max: Largest value
        nobs: Number of observations (including missing ones)
        nmiss: Number of missing (NaN) observations

    Example:
        >>> s = summarystats([1, 2, 3, 4, 5])
        >>> s.median, s.q75
        (3.0, 4.0)
    """
    mean: float
    min: float
    q25: float
    median: float
    q75: float
    max: float
    nobs: int
    nmiss: int = 0

    def __str__(self) -> str:
        return (
            "Summary Stats:\n"
            f"Length:  {self.nobs}\n"
            f"Missing: {self.nmiss}\n"
            f"Mean:    {self.mean:.6f}\n"
            f"Minimum: {self.min:.6f}\n"
            f"1st Q:   {self.q25:.6f}\n"
            f"Median:  {self.median:.6f}\n"
            f"3rd Q:   {self.q75:.6f}\n"
            f"Maximum: {self.max:.6f}"
        )
