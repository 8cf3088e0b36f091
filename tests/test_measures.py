"""Tests for location, dispersion and information measures."""

import numpy as np
import pytest

import weightstats as ws


class TestLocation:
    """Test geometric, harmonic and generalized means."""

    def test_geomean(self):
        """Geometric means of small vectors."""
        assert ws.geomean([1, 2, 3]) == pytest.approx(6.0 ** (1 / 3))
        assert ws.geomean(range(1, 4)) == pytest.approx(6.0 ** (1 / 3))
        assert ws.geomean([2, 8]) == pytest.approx(4.0)
        assert ws.geomean([4, 1, 1 / 32]) == pytest.approx(0.5)

    def test_geomean_with_zero(self):
        """A zero makes the geometric mean exactly zero."""
        assert ws.geomean([1, 0, 2]) == 0.0

    def test_harmmean(self):
        """Harmonic means of small vectors."""
        assert ws.harmmean([1, 2, 3]) == pytest.approx(3 / (1 + 1 / 2 + 1 / 3))
        assert ws.harmmean([1, 2, 4]) == pytest.approx(12 / 7)

    @pytest.mark.parametrize(
        "data,p,expected",
        [
            ([1, 1, 2, 3], 1, 7 / 4),
            ([1, 4, 2], -1, 12 / 7),
            ([1, 1, 2, 3], 0, 6.0 ** (1 / 4)),
            ([1.2, -0.5, 0], 2, np.sqrt(169 / 300)),
            ([16 / 9, 0.25, 1.0], 1.5, (755 / 648) ** (2 / 3)),
        ],
    )
    def test_genmean(self, data, p, expected):
        """Power means for several exponents."""
        assert ws.genmean(data, p) == pytest.approx(expected)

    def test_genmean_near_zero_power(self):
        """Tiny powers converge to the geometric mean."""
        assert ws.genmean([1, 1, 2, 3], -1e-8) == pytest.approx(6.0 ** (1 / 4), abs=1e-8)

    def test_genmean_large_power(self):
        """Large powers converge to the maximum without overflow."""
        assert ws.genmean([0.98, 1.02], 1e4) == pytest.approx(1.02, abs=1e-4)


class TestZscore:
    """Test standardization."""

    @pytest.fixture
    def a(self):
        return np.array([[3, 4, 5, 6], [7, 8, 1, 2], [6, 9, 3, 0]])

    @pytest.fixture
    def z1(self):
        return np.array([[4.0, 6.0, 8.0, 10.0], [5.0, 6.0, -1.0, 0.0], [1.5, 3.0, 0.0, -1.5]])

    @pytest.fixture
    def z2(self):
        return np.array([[8.0, 2.0, 3.0, 1.0], [24.0, 10.0, -1.0, -1.0], [20.0, 12.0, 1.0, -2.0]])

    def test_scalar_center(self):
        """Scalar center and scale."""
        assert ws.zscore(np.arange(-3, 4), 1.5, 0.5).tolist() == list(np.arange(-9.0, 4.0, 2.0))

    def test_row_and_column_parameters(self, a, z1, z2):
        """Center and scale broadcast per row or per column."""
        mu_rows = np.array([[1], [2], [3]])
        sigma_rows = np.array([[0.5], [1.0], [2.0]])
        assert np.allclose(ws.zscore(a, mu_rows, sigma_rows), z1)
        assert np.allclose(ws.zscore(a, [[1, 3, 2, 4]], [[0.25, 0.5, 1.0, 2.0]]), z2)

    def test_in_place(self, a, z1, z2):
        """zscore_into may overwrite its input."""
        x = np.arange(-3.0, 4.0)
        assert ws.zscore_into(x, x, 1.5, 0.5) is x
        assert x.tolist() == list(np.arange(-9.0, 4.0, 2.0))

        b = a.astype(float)
        ws.zscore_into(b, b, [[1], [2], [3]], [[0.5], [1.0], [2.0]])
        assert np.allclose(b, z1)

        b = a.astype(float)
        ws.zscore_into(b, b, [[1, 3, 2, 4]], [[0.25, 0.5, 1.0, 2.0]])
        assert np.allclose(b, z2)

    def test_into_separate_output(self, a, z1, z2):
        """zscore_into writes into a separate buffer."""
        out = np.zeros(7)
        ws.zscore_into(out, np.arange(-3, 4), 1.5, 0.5)
        assert out.tolist() == list(np.arange(-9.0, 4.0, 2.0))

        out = np.zeros(a.shape)
        ws.zscore_into(out, a, [[1], [2], [3]], [[0.5], [1.0], [2.0]])
        assert np.allclose(out, z1)

        out = np.zeros(a.shape)
        ws.zscore_into(out, a, [[1, 3, 2, 4]], [[0.25, 0.5, 1.0, 2.0]])
        assert np.allclose(out, z2)

    def test_default_parameters(self, a):
        """Defaults are the mean and corrected standard deviation."""
        assert np.allclose(ws.zscore(a), ws.zscore(a, a.mean(), a.std(ddof=1)))
        for axis in (0, 1):
            mu = a.mean(axis=axis, keepdims=True)
            sigma = a.std(axis=axis, ddof=1, keepdims=True)
            assert np.allclose(ws.zscore(a, axis=axis), ws.zscore(a, mu, sigma))

    def test_shape_mismatch(self, a):
        """Parameters must broadcast to the data shape."""
        with pytest.raises(ws.DimensionMismatch):
            ws.zscore(a, [1, 2, 3], 1.0)
        with pytest.raises(ws.DimensionMismatch):
            ws.zscore_into(np.zeros((2, 2)), a, 0.0, 1.0)


class TestDispersion:
    """Test MAD, IQR, span, SEM and variation."""

    def test_mad(self):
        """MAD with and without normalization."""
        x = np.arange(1, 6)
        assert ws.mad(x, center=3, normalize=True) == pytest.approx(1.4826022185056018)
        assert ws.mad(x, normalize=True) == pytest.approx(1.4826022185056018)
        assert ws.mad(x, normalize=False) == pytest.approx(1.0)
        assert ws.mad(x, center=3, normalize=False) == pytest.approx(1.0)

    def test_mad_defaults_to_normalized(self):
        """normalize defaults to True."""
        assert ws.mad([1, 2]) == pytest.approx(0.7413011092528009)

    def test_mad_overwrite_input(self):
        """The in-place form gives the same answer."""
        assert ws.mad(np.arange(1.0, 6.0), center=3, overwrite_input=True) == pytest.approx(
            1.4826022185056018
        )
        assert ws.mad(np.arange(1.0, 6.0), normalize=False, overwrite_input=True) == pytest.approx(1.0)
        with pytest.raises(TypeError):
            ws.mad([1.0, 2.0], overwrite_input=True)

    def test_mad_keeps_input_by_default(self):
        """Without overwrite_input the data is untouched."""
        x = np.arange(1.0, 6.0)
        ws.mad(x)
        assert x.tolist() == [1.0, 2.0, 3.0, 4.0, 5.0]

    def test_mad_empty(self):
        """The MAD of nothing is undefined."""
        with pytest.raises(ws.ArgumentError):
            ws.mad(np.array([], dtype=int))

    def test_mad_constant(self):
        """The normal consistency constant is 1 / Phi^-1(3/4)."""
        assert ws.MAD_NORMAL_CONSTANT == pytest.approx(1.4826022185056018)

    def test_iqr(self):
        """Interquartile range of 1..5."""
        assert ws.iqr(np.arange(1, 6)) == pytest.approx(2.0)

    def test_weighted_iqr(self):
        """Weights flow through to the quantiles."""
        w = ws.aweights([1, 1 / 3, 1 / 3, 1 / 3, 1])
        assert ws.iqr([7, 1, 2, 4, 10], w) == pytest.approx(4.0, abs=1e-5)

    def test_span(self):
        """span returns the extremes."""
        assert ws.span([3, 4, 5, 6, 2]) == (2, 6)
        with pytest.raises(ws.ArgumentError):
            ws.span([])

    def test_variation(self):
        """Coefficient of variation of 1..5."""
        assert ws.variation(np.arange(1, 6)) == pytest.approx(0.527046276694730)

    def test_sem(self):
        """Standard error of the mean of 1..5."""
        assert ws.sem(np.arange(1, 6)) == pytest.approx(0.707106781186548)


class TestQuantileHelpers:
    """Test the unweighted quantile helpers."""

    def test_nquantile(self):
        """Equally spaced quantiles."""
        assert np.allclose(ws.nquantile(np.arange(1, 6), 2), [1, 3, 5])
        assert np.allclose(ws.nquantile(np.arange(1, 6), 4), [1, 2, 3, 4, 5])

    def test_percentile(self):
        """Percentiles of 1..5."""
        assert ws.percentile(np.arange(1, 6), 25) == pytest.approx(2.0)
        assert np.allclose(ws.percentile(np.arange(1, 6), [25, 50, 75]), [2.0, 3.0, 4.0])


class TestEntropy:
    """Test Shannon, Rényi and cross entropies and the KL divergence."""

    @pytest.fixture
    def dist(self):
        rng = np.random.default_rng(3)
        d = rng.random(50)
        return d / d.sum()

    def test_shannon(self):
        """Natural and base-2 entropies."""
        assert ws.entropy([0.5, 0.5]) == pytest.approx(0.6931471805599453)
        assert ws.entropy([0.2, 0.3, 0.5]) == pytest.approx(1.0296530140645737)
        assert ws.entropy([0.5, 0.5], 2) == pytest.approx(1.0)
        assert ws.entropy([0.2, 0.3, 0.5], 2) == pytest.approx(1.4854752972273344)

    def test_zero_probabilities(self):
        """Zero entries contribute nothing."""
        assert ws.entropy([0.5, 0.5, 0.0]) == pytest.approx(ws.entropy([0.5, 0.5]))

    def test_invalid_base(self):
        """Base one has no logarithm."""
        with pytest.raises(ws.ArgumentError):
            ws.entropy([0.5, 0.5], 1)

    def test_renyi_order_one_is_shannon(self, dist):
        """Order one is the Shannon entropy."""
        assert ws.entropy(dist) == pytest.approx(ws.renyientropy(dist, 1))
        assert ws.renyientropy(dist, 1) == pytest.approx(ws.renyientropy(dist, 1.0))

    def test_renyi_order_zero(self, dist):
        """Order zero is the log of the support size."""
        assert ws.renyientropy(dist, 0) == pytest.approx(np.log(np.count_nonzero(dist > 0)))

    def test_renyi_ignores_zeros(self, dist):
        """Appending zero probabilities changes no order."""
        zdist = np.concatenate([dist, np.zeros(17)])
        rng = np.random.default_rng(4)
        low = rng.random()
        high = rng.random() * 49 + 1
        for order in (0, low, high):
            assert ws.renyientropy(dist, order) == pytest.approx(ws.renyientropy(zdist, order))

    def test_renyi_order_infinity(self, dist):
        """Order infinity is minus the log of the largest probability."""
        assert ws.renyientropy(dist, np.inf) == pytest.approx(-np.log(dist.max()))

    def test_renyi_uniform(self):
        """Every order gives log n for a uniform distribution."""
        udist = np.ones(50) / 50
        for order in (0, 0.5, 1, 2.7, np.inf):
            assert ws.renyientropy(udist, order) == pytest.approx(np.log(50))

    def test_renyi_generalized(self):
        """Un-normalized distributions are shifted by -log(sum(p))."""
        udist = np.ones(50) / 50
        scale = 0.37
        for order in (0, 1, np.inf, 3.3):
            assert ws.renyientropy(udist * scale, order) == pytest.approx(
                ws.renyientropy(udist, order) - np.log(scale)
            )

    def test_renyi_negative_order(self):
        """Negative orders are rejected."""
        with pytest.raises(ws.ArgumentError):
            ws.renyientropy([0.5, 0.5], -1)

    def test_crossentropy(self):
        """Cross-entropy in natural and base-2 units."""
        p, q = [0.2, 0.3, 0.5], [0.3, 0.4, 0.3]
        assert ws.crossentropy(p, q) == pytest.approx(1.1176681825904018)
        assert ws.crossentropy(p, q, 2) == pytest.approx(1.6124543443825532)

    def test_kldivergence(self):
        """KL divergence in natural and base-2 units."""
        p, q = [0.2, 0.3, 0.5], [0.3, 0.4, 0.3]
        assert ws.kldivergence(p, q) == pytest.approx(0.08801516852582819)
        assert ws.kldivergence(p, q, 2) == pytest.approx(0.12697904715521868)

    def test_shape_mismatch(self):
        """Distributions must have the same length."""
        with pytest.raises(ws.DimensionMismatch):
            ws.crossentropy([0.5, 0.5], [1.0])
        with pytest.raises(ws.DimensionMismatch):
            ws.kldivergence([0.5, 0.5], [1.0])


class TestSummaryStats:
    """Test the summary container."""

    def test_values(self):
        """Quartiles and extremes of 1..5."""
        s = ws.summarystats(np.arange(1, 6))
        assert isinstance(s, ws.SummaryStats)
        assert s.min == 1.0
        assert s.max == 5.0
        assert s.mean == pytest.approx(3.0)
        assert s.median == pytest.approx(3.0)
        assert s.q25 == pytest.approx(2.0)
        assert s.q75 == pytest.approx(4.0)
        assert s.nobs == 5
        assert s.nmiss == 0

    def test_missing_values(self):
        """NaN values are counted and skipped."""
        s = ws.summarystats([1.0, np.nan, 3.0])
        assert s.nobs == 3
        assert s.nmiss == 1
        assert s.mean == pytest.approx(2.0)

    def test_str(self):
        """The text form lists every field."""
        text = str(ws.summarystats([1, 2, 3]))
        assert "Median:  2.000000" in text
        assert "Length:  3" in text

    def test_all_missing(self):
        """At least one value is required."""
        with pytest.raises(ws.ArgumentError):
            ws.summarystats([np.nan])
