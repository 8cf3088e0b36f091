"""
Weight containers.

A weight container is a fixed-length sequence of finite reals tagged with a
*kind*. The kind does not change the numbers, it changes how estimators treat
them:

- FREQUENCY: integer replication counts
- ANALYTIC: inverse-variance (precision) weights
- PROBABILITY: inverse sampling-probability weights
- UNIFORM: every observation has weight 1, nothing is stored
- CUSTOM: neutral weights, also the kind of user-defined weight types

Example:
    >>> w = frequency_weights([1, 2, 3])
    >>> w.total
    6
    >>> w[0] = 4
    >>> w.total
    9
"""

from abc import ABC, abstractmethod
from enum import Enum
from itertools import repeat
from typing import Any, Iterator
import operator

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from ..errors import ArgumentError, InexactError, InvalidWeightError


_NUMERIC_KINDS = "biuf"


class WeightKind(Enum):
    """Semantic interpretation of a weight vector."""

    FREQUENCY = "frequency"
    ANALYTIC = "analytic"
    PROBABILITY = "probability"
    UNIFORM = "uniform"
    CUSTOM = "custom"


class AbstractWeights(ABC):
    """
    Minimal capability shared by every weight type.

    Subclasses only have to provide ``values`` and ``total``. Everything the
    estimators need (length, indexing, iteration, conversion to an array) is
    derived from those two.

    Example:
        >>> class MyWeights(AbstractWeights):
        ...     def __init__(self, values):
        ...         self._values = np.asarray(values, dtype=float)
        ...     @property
        ...     def values(self):
        ...         return self._values
        ...     @property
        ...     def total(self):
        ...         return self._values.sum()
        >>> mean([1, 2, 3], MyWeights([1, 4, 10]))
        2.6
    """

    @property
    @abstractmethod
    def values(self) -> NDArray[Any]:
        """Weight values as a 1-D array."""

    @property
    @abstractmethod
    def total(self) -> Any:
        """Total mass (sum of the values)."""

    @property
    def kind(self) -> WeightKind:
        return WeightKind.CUSTOM

    @property
    def dtype(self) -> np.dtype:
        return np.asarray(self.values).dtype

    @property
    def shape(self) -> tuple[int]:
        return (len(self),)

    @property
    def is_empty(self) -> bool:
        return len(self) == 0

    def sum(self) -> Any:
        return self.total

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, key: Any) -> Any:
        return self.values[key]

    def __iter__(self) -> Iterator[Any]:
        return iter(self.values)

    def __array__(self, dtype: DTypeLike = None, copy: bool | None = None) -> NDArray[Any]:
        array = np.asarray(self.values)
        if dtype is not None:
            array = array.astype(dtype, copy=False)
        return array.copy() if copy else array

    def __eq__(self, other: object) -> bool:
        if isinstance(other, AbstractWeights):
            if type(self) is not type(other) or self.kind is not other.kind:
                return False
            return bool(np.array_equal(self.values, other.values))
        if isinstance(other, (np.ndarray, list, tuple)):
            return bool(np.array_equal(self.values, np.asarray(other)))
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def isequal(self, other: object) -> bool:
        """
        Stricter equality: like ``==`` but ``+0.0`` and ``-0.0`` differ.

        Args:
            other: Another weight container

        Returns:
            True if both containers have the same type, kind and
            bit-for-bit equal values (up to the numeric type)
        """
        if not isinstance(other, AbstractWeights) or self != other:
            return False
        return bool(np.array_equal(np.signbit(self.values), np.signbit(other.values)))

    def all_unique(self) -> bool:
        values = np.asarray(self.values)
        return np.unique(values).size == values.size

    def all_equal(self) -> bool:
        values = np.asarray(self.values)
        return values.size <= 1 or bool(np.all(values == values[0]))

    def may_share_memory(self, other: Any) -> bool:
        """Whether this container might alias the buffer of ``other``."""
        if isinstance(other, AbstractWeights):
            if isinstance(other, UniformWeights):
                return False
            other = other.values
        return bool(np.may_share_memory(self.values, other))


class WeightVector(AbstractWeights):
    """
    Weight vector backed by a 1-D NumPy buffer.

    The total mass is cached and kept in sync by ``__setitem__`` with an
    incremental update, so single writes stay O(1).

    Construction only rejects Inf and NaN. Negative values and fractional
    frequency weights are accepted here and rejected by the estimators that
    cannot use them (quantile, median, variance correction).

    Args:
        values: Weight values. An ndarray is used as-is (the container
            aliases it) unless ``copy`` is True. Multi-dimensional input is
            flattened.
        kind: Weight kind (any member except UNIFORM)
        copy: Always copy ``values`` into a private buffer

    Raises:
        InvalidWeightError: If any value is Inf or NaN
        TypeError: If the values are not real numbers
    """

    def __init__(
        self,
        values: ArrayLike,
        kind: WeightKind = WeightKind.CUSTOM,
        copy: bool = False,
    ) -> None:
        kind = WeightKind(kind)
        if kind is WeightKind.UNIFORM:
            raise ArgumentError("Use uniform_weights(n) to build uniform weights")

        array = np.array(values, copy=True) if copy else np.asarray(values)
        if array.ndim != 1:
            array = array.reshape(-1)
        if array.dtype.kind not in _NUMERIC_KINDS:
            raise TypeError(f"Weights must be real numbers, got dtype {array.dtype}")
        if not np.all(np.isfinite(array)):
            raise InvalidWeightError("Weights must be finite (no Inf or NaN values)")

        self._values = array
        self._kind = kind
        self._total = array.sum()

    @property
    def values(self) -> NDArray[Any]:
        return self._values

    @property
    def total(self) -> Any:
        return self._total

    @property
    def kind(self) -> WeightKind:
        return self._kind

    @property
    def dtype(self) -> np.dtype:
        return self._values.dtype

    def __len__(self) -> int:
        return self._values.shape[0]

    def __setitem__(self, key: Any, value: ArrayLike) -> None:
        new = np.asarray(value)
        if new.dtype.kind not in _NUMERIC_KINDS:
            raise TypeError(f"Weights must be real numbers, got dtype {new.dtype}")
        if not np.all(np.isfinite(new)):
            raise InvalidWeightError("Weights must be finite (no Inf or NaN values)")

        converted = new.astype(self._values.dtype)
        if not np.array_equal(converted, new):
            raise InexactError(
                f"Cannot store {value!r} exactly in a weight vector of dtype {self._values.dtype}"
            )

        try:
            positions = operator.index(key)
        except TypeError:
            # Repeated positions in an index array keep only their last write
            positions = np.unique(np.arange(len(self))[key])
        old = self._values[positions].sum()
        self._values[key] = converted
        self._total += self._values[positions].sum() - old

    def __repr__(self) -> str:
        return f"WeightVector({self._kind.value}, {self._values!r})"


class UniformWeights(AbstractWeights):
    """
    Unit weights that are never materialized.

    Only the length and the element dtype are stored. Estimators special-case
    this class and fall back to their unweighted counterparts.

    Args:
        n: Number of observations
        dtype: Numeric type of the implicit unit value (and of ``total``)
    """

    def __init__(self, n: int, dtype: DTypeLike = int) -> None:
        n = operator.index(n)
        if n < 0:
            raise ArgumentError(f"n must be non-negative, got {n}")
        self._n = n
        self._dtype = np.dtype(dtype)

    @property
    def values(self) -> NDArray[Any]:
        return np.ones(self._n, dtype=self._dtype)

    @property
    def total(self) -> Any:
        return self._dtype.type(self._n)

    @property
    def kind(self) -> WeightKind:
        return WeightKind.UNIFORM

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    def __len__(self) -> int:
        return self._n

    def __getitem__(self, key: Any) -> Any:
        if isinstance(key, slice):
            return UniformWeights(len(range(*key.indices(self._n))), self._dtype)
        try:
            index = operator.index(key)
        except TypeError:
            selected = np.arange(self._n)[np.asarray(key)]
            return UniformWeights(selected.size, self._dtype)
        if not -self._n <= index < self._n:
            raise IndexError(f"index {index} is out of bounds for UniformWeights of length {self._n}")
        return self._dtype.type(1)

    def __setitem__(self, key: Any, value: Any) -> None:
        raise TypeError("UniformWeights are immutable")

    def __iter__(self) -> Iterator[Any]:
        return repeat(self._dtype.type(1), self._n)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, UniformWeights):
            return self._n == other._n
        return super().__eq__(other)

    __hash__ = None  # type: ignore[assignment]

    def isequal(self, other: object) -> bool:
        return isinstance(other, UniformWeights) and self._n == other._n

    def all_unique(self) -> bool:
        return self._n <= 1

    def all_equal(self) -> bool:
        return True

    def may_share_memory(self, other: Any) -> bool:
        return False

    def __repr__(self) -> str:
        return f"UniformWeights({self._n}, dtype={self._dtype.name})"


def weights(values: ArrayLike, copy: bool = False) -> WeightVector:
    """Neutral weights (kind CUSTOM)."""
    return WeightVector(values, WeightKind.CUSTOM, copy=copy)


def frequency_weights(values: ArrayLike, copy: bool = False) -> WeightVector:
    """Frequency weights: each value counts how often an observation occurs."""
    return WeightVector(values, WeightKind.FREQUENCY, copy=copy)


def analytic_weights(values: ArrayLike, copy: bool = False) -> WeightVector:
    """Analytic weights: inverse variance (precision) of each observation."""
    return WeightVector(values, WeightKind.ANALYTIC, copy=copy)


def probability_weights(values: ArrayLike, copy: bool = False) -> WeightVector:
    """Probability weights: inverse probability that an observation was sampled."""
    return WeightVector(values, WeightKind.PROBABILITY, copy=copy)


def uniform_weights(n: int, dtype: DTypeLike = int) -> UniformWeights:
    """Unit weights for ``n`` observations."""
    return UniformWeights(n, dtype)


# Short aliases
fweights = frequency_weights
aweights = analytic_weights
pweights = probability_weights
uweights = uniform_weights


def as_weights(w: AbstractWeights | ArrayLike) -> AbstractWeights:
    """Wrap raw values in neutral weights; pass weight containers through."""
    if isinstance(w, AbstractWeights):
        return w
    return weights(w)


def weight_values(w: AbstractWeights | ArrayLike) -> NDArray[Any]:
    """Return the values of a weight container (or raw sequence) as a 1-D array."""
    values = np.asarray(w.values if isinstance(w, AbstractWeights) else w)
    if values.ndim != 1:
        raise ArgumentError(f"Weights must be one-dimensional, got {values.ndim} dimensions")
    return values
