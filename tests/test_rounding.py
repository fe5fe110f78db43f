import pytest

import random

from fractions import Fraction

import numpy as np

from affine_digitizer.rounding import round_half_up


@pytest.mark.parametrize(
    "value,expectation",
    [
        # Integers are unchanged
        (0.0, 0),
        (3.0, 3),
        (-3.0, -3),
        # Nearest integer
        (2.4, 2),
        (2.6, 3),
        (-2.4, -2),
        (-2.6, -3),
        # Ties always round towards +infinity
        (0.5, 1),
        (-0.5, 0),
        (1.5, 2),
        (-1.5, -1),
        (127.5, 128),
        (-127.5, -127),
        # Just below a tie (u + 0.5 would round up to 1.0 in floating point)
        (0.49999999999999994, 0),
        (-0.5000000000000001, -1),
        # Near the limit of integer precision of doubles
        (2.0 ** 52 - 0.5, 2 ** 52),
        (-(2.0 ** 52) + 0.5, -(2 ** 52) + 1),
        (2.0 ** 53, 2 ** 53),
        (-(2.0 ** 53), -(2 ** 53)),
        (2.0 ** 63, 2 ** 63),
        (-(2.0 ** 63), -(2 ** 63)),
    ],
)
def test_round_half_up(value, expectation):
    out = round_half_up(value)
    assert out == expectation
    assert isinstance(out, int)


def test_ties_always_round_up():
    for n in range(-1000, 1000):
        assert round_half_up(n + 0.5) == n + 1


def test_round_half_up_bounds():
    # round(u) must lie in (u - 1/2, u + 1/2], checked with exact arithmetic
    rand = random.Random(0)
    values = [rand.uniform(-1000.0, 1000.0) for _ in range(1000)]
    values += [rand.uniform(-(2.0 ** 53), 2.0 ** 53) for _ in range(1000)]
    values += [n + 0.5 for n in range(-10, 10)]
    values += [np.nextafter(n + 0.5, np.inf) for n in range(-10, 10)]
    values += [np.nextafter(n + 0.5, -np.inf) for n in range(-10, 10)]

    for value in values:
        exact = Fraction(float(value))
        rounded = round_half_up(value)
        assert exact - Fraction(1, 2) < rounded <= exact + Fraction(1, 2)


class TestArrays(object):
    def test_matches_scalar(self):
        rand = random.Random(1)
        values = [rand.uniform(-100.0, 100.0) for _ in range(1000)]
        values += [n / 2.0 for n in range(-50, 50)]
        values += [0.49999999999999994, -0.5000000000000001]

        out = round_half_up(np.array(values))

        assert out.dtype == np.float64
        assert out.tolist() == [round_half_up(value) for value in values]

    def test_non_finite_passed_through(self):
        out = round_half_up(np.array([np.nan, np.inf, -np.inf, 1.5]))
        assert np.isnan(out[0])
        assert out[1] == np.inf
        assert out[2] == -np.inf
        assert out[3] == 2.0

    def test_input_not_modified(self):
        a = np.array([0.5, 1.25, -0.5])
        round_half_up(a)
        assert a.tolist() == [0.5, 1.25, -0.5]

    def test_shape_preserved(self):
        a = np.array([[0.5, 1.5], [2.5, 3.5]])
        assert round_half_up(a).tolist() == [[1.0, 2.0], [3.0, 4.0]]
