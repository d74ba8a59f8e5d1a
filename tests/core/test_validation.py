"""
Tests for input validators.

Malformed input raises; small or missing data does not.
"""

import numpy as np
import pytest

from statengine.core.exceptions import DimensionError, ValidationError
from statengine.core.validation import (
    as_paired_samples,
    as_sample,
    check_alpha,
    check_array,
)


class TestCheckArray:

    def test_int_converted_to_float64(self):
        assert check_array([1, 2, 3], "x").dtype == np.float64

    def test_empty_list_accepted(self):
        arr = check_array([], "x")
        assert arr.shape == (0,)

    def test_strings_rejected(self):
        with pytest.raises(ValidationError, match="x"):
            check_array(["a", "b"], "x")

    def test_plain_string_rejected(self):
        with pytest.raises(ValidationError):
            check_array("123", "x")

    def test_mixed_types_rejected(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([1, None, "x"], "x")


class TestAsSample:

    def test_nan_removed(self):
        np.testing.assert_array_equal(as_sample([1.0, np.nan, 3.0]), [1.0, 3.0])

    def test_inf_rejected(self):
        with pytest.raises(ValidationError, match="infinite"):
            as_sample([1.0, np.inf])

    def test_2d_rejected(self):
        with pytest.raises(DimensionError, match="1D"):
            as_sample([[1.0, 2.0], [3.0, 4.0]])

    def test_scalar_rejected(self):
        with pytest.raises(DimensionError):
            as_sample(3.0)


class TestAsPairedSamples:

    def test_nan_pairs_dropped_together(self):
        x, y, same = as_paired_samples([1, np.nan, 3, 4], [5, 6, np.nan, 8])
        assert same
        np.testing.assert_array_equal(x, [1.0, 4.0])
        np.testing.assert_array_equal(y, [5.0, 8.0])

    def test_length_mismatch_flagged_not_raised(self):
        x, y, same = as_paired_samples([1, 2, 3], [1, 2])
        assert not same
        assert len(x) == 3 and len(y) == 2


class TestCheckAlpha:

    @pytest.mark.parametrize("alpha", [0.01, 0.05, 0.1])
    def test_valid(self, alpha):
        assert check_alpha(alpha) == alpha

    @pytest.mark.parametrize("alpha", [0.0, 1.0, -0.05, 1.5])
    def test_invalid(self, alpha):
        with pytest.raises(ValidationError, match="alpha"):
            check_alpha(alpha)
