import pytest

import numpy as np

from affine_digitizer.exceptions import EmptyInputError

from affine_digitizer.bounds import (
    finite_bounds,
    summarize,
    SampleSummary,
)


class TestFiniteBounds(object):
    @pytest.mark.parametrize(
        "samples,expectation",
        [
            ([1.0], (1.0, 1.0)),
            ([-2.0, -1.0, 0.0, 1.0, 2.0], (-2.0, 2.0)),
            ([5, 5, 5], (5.0, 5.0)),
            ([np.nan, 1.0, np.inf, -1.0], (-1.0, 1.0)),
            ([-np.inf, 3.0, np.nan, -7.5, np.inf], (-7.5, 3.0)),
            (np.array([[1.0, 9.0], [-3.0, np.nan]]), (-3.0, 9.0)),
            ([-5.0, np.inf, -3.0], (-5.0, -3.0)),
            ([np.inf, 1e308, -np.inf], (1e308, 1e308)),
        ],
    )
    def test_bounds(self, samples, expectation):
        dmin, dmax = finite_bounds(samples)
        assert (dmin, dmax) == expectation
        assert isinstance(dmin, float)
        assert isinstance(dmax, float)

    @pytest.mark.parametrize(
        "samples", [[], [np.nan], [np.inf, -np.inf], [np.nan, np.inf, np.nan]]
    )
    def test_no_finite_values(self, samples):
        with pytest.raises(EmptyInputError):
            finite_bounds(samples)

    def test_empty_input_is_a_value_error(self):
        with pytest.raises(ValueError):
            finite_bounds([])

    def test_input_not_modified(self):
        a = np.array([np.nan, 2.0, -np.inf])
        finite_bounds(a)
        assert np.isnan(a[0])
        assert a[1] == 2.0
        assert a[2] == -np.inf


class TestSummarize(object):
    def test_mixed(self):
        s = summarize([np.nan, 1.0, np.inf, -1.0, np.inf, 4.0, -np.inf])
        assert s == SampleSummary(
            minimum=-1.0,
            maximum=4.0,
            total=4.0,
            count=3,
            nans=1,
            posinfs=2,
            neginfs=1,
        )
        assert s.has_finite_values
        assert s.size == 7

    def test_no_finite_values(self):
        s = summarize([np.nan, -np.inf])
        assert np.isnan(s.minimum)
        assert np.isnan(s.maximum)
        assert np.isnan(s.total)
        assert s.count == 0
        assert s.nans == 1
        assert s.neginfs == 1
        assert s.posinfs == 0
        assert not s.has_finite_values

    def test_empty(self):
        s = summarize([])
        assert s.count == 0
        assert s.size == 0

    def test_str(self):
        s = summarize([1.0, 2.0, np.nan])
        assert str(s) == (
            "SampleSummary(min=1, max=2, sum=3, count=2, NaN=1, -Inf=0, +Inf=0)"
        )
