"""Tests for mode and modes."""

import numpy as np
import pytest

import weightstats as ws


class TestUnweightedMode:
    """Test counting modes."""

    def test_mode(self):
        """The most frequent value wins."""
        assert ws.mode([1, 2, 3, 3, 2, 2, 1]) == 2
        assert ws.modes([1, 2, 3, 3, 2, 2, 1]) == [2]

    def test_ties(self):
        """modes lists every tied value."""
        assert sorted(ws.modes([1, 3, 2, 3, 3, 2, 2, 1])) == [2, 3]

    def test_tie_goes_to_first_maximum(self):
        """The value whose count reaches the maximum first is the mode."""
        assert ws.mode([1, 3, 2, 3, 3, 2, 2, 1]) == 3
        assert ws.modes([3, 1, 1, 3]) == [3, 1]

    def test_value_range(self):
        """Only values in the inclusive range are counted."""
        assert ws.mode([1, 2, 3, 3, 2, 2, 1], value_range=range(1, 4)) == 2
        assert ws.modes([1, 2, 3, 3, 2, 2, 1], value_range=range(1, 4)) == [2]
        assert ws.modes([1, 3, 2, 3, 3, 2, 2, 1], value_range=(1, 3)) == [2, 3]
        assert ws.mode([1, 2, 3, 3, 2, 2, 1], value_range=(3, 3)) == 3

    def test_matrix_is_flattened(self):
        """Multi-dimensional data is counted element-wise."""
        assert ws.mode(np.array([[1, 2], [2, 3]])) == 2

    def test_nan_values_grouped(self):
        """Every NaN counts toward a single value."""
        assert np.isnan(ws.mode([np.nan, 1.0, np.nan, 2.0]))
        result = ws.modes([1.0, np.nan, 1.0, np.nan])
        assert len(result) == 2
        assert result[0] == 1.0
        assert np.isnan(result[1])

    def test_weighted_nan_values_grouped(self):
        """NaN data accumulates its weights in one bucket."""
        assert np.isnan(ws.mode([np.nan, 5.0, np.nan], ws.weights([2.0, 3.0, 2.0])))

    def test_strings(self):
        """Any hashable values work."""
        assert ws.mode(["a", "b", "b"]) == "b"

    def test_empty(self):
        """Empty data has no mode."""
        with pytest.raises(ws.ArgumentError):
            ws.mode([])
        with pytest.raises(ws.ArgumentError):
            ws.modes([])

    def test_nothing_in_range(self):
        """A range excluding every value is an error."""
        with pytest.raises(ws.ArgumentError):
            ws.mode([1, 2, 3], value_range=(5, 9))

    @pytest.mark.parametrize("bad", [range(3, 1), range(1, 5, 2), (4, 1)])
    def test_invalid_range(self, bad):
        """Ranges must be non-empty and unit-stepped."""
        with pytest.raises(ws.ArgumentError):
            ws.mode([1, 2, 3], value_range=bad)


class TestWeightedMode:
    """Test modes with weights."""

    def test_heaviest_value(self):
        """The value with the largest total weight wins."""
        assert ws.mode([1, 2, 3], ws.weights([1, 4, 10])) == 3
        assert ws.mode([1, 2, 2, 3], ws.fweights([5, 1, 1, 1])) == 1

    def test_weights_accumulate(self):
        """Repeated values add their weights."""
        assert ws.mode([1, 2, 2, 3], ws.aweights([1.0, 1.5, 1.5, 2.5])) == 2
        assert ws.modes([1, 2, 2, 3], ws.aweights([1.0, 1.5, 1.0, 2.5])) == [2, 3]

    def test_uniform_weights_count(self):
        """Uniform weights behave like plain counting."""
        assert ws.mode([1, 2, 3, 3, 2, 2, 1], ws.uweights(7)) == 2

    def test_weighted_range(self):
        """Value ranges apply to weighted modes too."""
        assert ws.mode([1, 2, 3], ws.weights([1, 4, 10]), value_range=(1, 2)) == 2

    def test_length_mismatch(self):
        """Data and weights must line up."""
        with pytest.raises(ws.ArgumentError):
            ws.mode([1, 2, 3], ws.weights([1, 2]))
        with pytest.raises(ws.ArgumentError):
            ws.mode([1, 2, 3], ws.uweights(2))
