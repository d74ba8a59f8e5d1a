"""
Tests for cor_test() (Pearson correlation).

Reference values from scipy.stats.pearsonr.
"""

import numpy as np
import pytest
from scipy import stats as sp_stats

from statengine.core.compute.tolerances import T_TAIL
from statengine.hypothesis import cor_test
from statengine.hypothesis._common import interpret_correlation


class TestPearson:

    def test_matches_scipy(self, rng):
        x = rng.normal(size=25)
        y = 0.6 * x + rng.normal(size=25)
        result = cor_test(x, y)
        ref = sp_stats.pearsonr(x, y)
        assert result.coefficient == pytest.approx(ref[0], rel=1e-12)
        assert result.p_value == pytest.approx(ref[1], rel=T_TAIL.rtol, abs=T_TAIL.atol)
        assert result.n == 25
        assert result.df == 23

    @pytest.mark.parametrize("n", [3, 4, 5, 8, 13])
    def test_small_samples_match_scipy(self, rng, n):
        x = rng.normal(size=n)
        y = rng.normal(size=n)
        result = cor_test(x, y)
        ref = sp_stats.pearsonr(x, y)
        assert result.coefficient == pytest.approx(ref[0], rel=1e-10, abs=1e-12)
        assert result.p_value == pytest.approx(ref[1], rel=1e-7, abs=T_TAIL.atol)

    def test_t_transform(self, rng):
        x = rng.normal(size=12)
        y = x + rng.normal(size=12)
        result = cor_test(x, y)
        r = result.coefficient
        assert result.t_statistic == pytest.approx(r * np.sqrt(10 / (1 - r * r)))

    def test_perfect_linear_relation(self):
        x = np.arange(1.0, 11.0)
        result = cor_test(x, 2 * x + 3)
        assert result.coefficient == pytest.approx(1.0, abs=1e-12)
        assert result.p_value == pytest.approx(0.0, abs=1e-12)
        assert result.significant is True
        assert result.interpretation == "strong positive"

    def test_perfect_negative_relation(self):
        x = np.arange(1.0, 8.0)
        result = cor_test(x, -0.5 * x + 1)
        assert result.coefficient == pytest.approx(-1.0, abs=1e-12)
        assert result.interpretation == "strong negative"

    def test_coefficient_bounded(self, rng):
        for _ in range(50):
            n = int(rng.integers(3, 30))
            result = cor_test(rng.normal(size=n), rng.exponential(size=n))
            assert -1.0 <= result.coefficient <= 1.0
            assert 0.0 <= result.p_value <= 1.0

    def test_nan_pairs_dropped(self):
        result = cor_test([1, 2, np.nan, 4, 5], [2, 4, 6, np.nan, 9])
        assert result.n == 3


class TestInterpretation:

    @pytest.mark.parametrize("r, label", [
        (0.0, "weak positive"),
        (0.29, "weak positive"),
        (0.3, "moderate positive"),
        (0.69, "moderate positive"),
        (0.7, "strong positive"),
        (-0.1, "weak negative"),
        (-0.5, "moderate negative"),
        (-0.95, "strong negative"),
    ])
    def test_labels(self, r, label):
        assert interpret_correlation(r) == label


class TestDegenerateCorrelation:

    def test_too_few_points(self):
        result = cor_test([1], [2])
        assert result.coefficient == 0.0
        assert result.p_value == 1.0
        assert result.n == 1
        assert result.significant is False
        assert result.interpretation == "Insufficient data"

    def test_two_points(self):
        result = cor_test([1, 2], [3, 5])
        assert result.interpretation == "Insufficient data"
        assert result.n == 2

    def test_length_mismatch(self):
        result = cor_test([1, 2, 3, 4], [1, 2, 3])
        assert result.interpretation == "Insufficient data"
        assert result.n == 4
        assert result.has_warning("same length")

    def test_constant_variable(self):
        result = cor_test([1, 2, 3, 4], [5, 5, 5, 5])
        assert result.coefficient == 0.0
        assert result.p_value == 1.0
        assert result.significant is False
        assert result.interpretation == "Insufficient variance"

    @pytest.mark.parametrize("value", [0.1, 0.2, 0.3])
    def test_float_constant_y(self, value):
        result = cor_test([1, 2, 3], [value] * 3)
        assert result.coefficient == 0.0
        assert result.p_value == 1.0
        assert result.significant is False
        assert result.interpretation == "Insufficient variance"
        assert result.has_warning("standard deviation is zero")

    def test_float_constant_x(self):
        result = cor_test([0.1] * 5, [1.0, 3.0, 2.0, 5.0, 4.0])
        assert result.interpretation == "Insufficient variance"
        assert result.p_value == 1.0

    def test_record_fields(self):
        record = cor_test([1, 2, 3, 4], [2, 1, 4, 3]).to_dict()
        assert {"coefficient", "p_value", "n", "significant", "interpretation"} <= set(record)
