import pytest

import numpy as np

from affine_digitizer.exceptions import InvalidRangeError

from affine_digitizer.code_intervals import (
    code_interval,
    code_interval_for_bits,
    minimal_dtype,
    is_representable,
    integer_dtype,
)


@pytest.mark.parametrize(
    "dtype,expectation",
    [
        (np.uint8, (0, 255)),
        (np.int8, (-128, 127)),
        ("uint16", (0, 65535)),
        ("int16", (-32768, 32767)),
        (np.int64, (-(2 ** 63), (2 ** 63) - 1)),
        (np.uint64, (0, (2 ** 64) - 1)),
    ],
)
def test_code_interval(dtype, expectation):
    kmin, kmax = code_interval(dtype)
    assert (kmin, kmax) == expectation
    assert isinstance(kmin, int)
    assert isinstance(kmax, int)


@pytest.mark.parametrize(
    "bits,signed,expectation",
    [
        (1, False, (0, 1)),
        (1, True, (-1, 0)),
        (8, False, (0, 255)),
        (8, True, (-128, 127)),
        (12, False, (0, 4095)),
        (16, True, (-32768, 32767)),
        (100, False, (0, (1 << 100) - 1)),
    ],
)
def test_code_interval_for_bits(bits, signed, expectation):
    assert code_interval_for_bits(bits, signed) == expectation


@pytest.mark.parametrize("bits", [0, -1])
def test_code_interval_for_bits_invalid(bits):
    with pytest.raises(InvalidRangeError):
        code_interval_for_bits(bits)


@pytest.mark.parametrize(
    "kmin,kmax,expectation",
    [
        (0, 0, np.uint8),
        (0, 255, np.uint8),
        (0, 256, np.uint16),
        (10, 70000, np.uint32),
        (0, (2 ** 64) - 1, np.uint64),
        (-1, 1, np.int8),
        (-128, 127, np.int8),
        (-129, 0, np.int16),
        (-1, 255, np.int16),
        (-(2 ** 63), 0, np.int64),
    ],
)
def test_minimal_dtype(kmin, kmax, expectation):
    assert minimal_dtype(kmin, kmax) == np.dtype(expectation)


@pytest.mark.parametrize(
    "kmin,kmax",
    [
        # Reversed
        (10, 0),
        # Too large
        (0, 2 ** 64),
        (-1, (2 ** 63)),
        (-(2 ** 63) - 1, 0),
    ],
)
def test_minimal_dtype_invalid(kmin, kmax):
    with pytest.raises(InvalidRangeError):
        minimal_dtype(kmin, kmax)


@pytest.mark.parametrize(
    "value,dtype,expectation",
    [
        (0, np.uint8, True),
        (255, np.uint8, True),
        (256, np.uint8, False),
        (-1, np.uint8, False),
        (-128, np.int8, True),
        (-129, np.int8, False),
    ],
)
def test_is_representable(value, dtype, expectation):
    assert is_representable(value, dtype) is expectation


@pytest.mark.parametrize("dtype", [float, np.float32, bool, "complex128"])
def test_integer_dtype_rejects_non_integers(dtype):
    with pytest.raises(TypeError):
        integer_dtype(dtype)
