"""
The :py:mod:`affine_digitizer.code_intervals` module contains helpers for
relating code intervals (closed integer intervals ``[kmin, kmax]``) to the
fixed-width integer types used to store them.

.. autofunction:: code_interval

.. autofunction:: code_interval_for_bits

.. autofunction:: minimal_dtype

.. autofunction:: is_representable

"""

import numpy as np

from affine_digitizer.exceptions import InvalidRangeError

__all__ = [
    "code_interval",
    "code_interval_for_bits",
    "minimal_dtype",
    "is_representable",
]


UNSIGNED_DTYPES = [np.uint8, np.uint16, np.uint32, np.uint64]
"""Unsigned integer types, narrowest first."""

SIGNED_DTYPES = [np.int8, np.int16, np.int32, np.int64]
"""Signed integer types, narrowest first."""


def integer_dtype(dtype):
    """
    Normalise ``dtype`` into a :py:class:`numpy.dtype`, checking it is an
    integer type.
    """
    dtype = np.dtype(dtype)
    if dtype.kind not in "iu":
        raise TypeError("{} is not an integer type.".format(dtype))
    return dtype


def code_interval(dtype):
    """
    Return the ``(kmin, kmax)`` interval spanning every value of the integer
    type ``dtype``.
    """
    info = np.iinfo(integer_dtype(dtype))
    return (int(info.min), int(info.max))


def code_interval_for_bits(bits, signed=False):
    """
    Return the ``(kmin, kmax)`` interval of a ``bits``-wide unsigned or
    (two's complement) signed integer.
    """
    if bits < 1:
        raise InvalidRangeError("Bit width must be at least 1 (got {}).".format(bits))
    if signed:
        return (-(1 << (bits - 1)), (1 << (bits - 1)) - 1)
    else:
        return (0, (1 << bits) - 1)


def is_representable(value, dtype):
    """
    Return True if the integer ``value`` can be stored in an integer of type
    ``dtype`` without overflow.
    """
    info = np.iinfo(integer_dtype(dtype))
    return info.min <= value <= info.max


def minimal_dtype(kmin, kmax):
    """
    Return the narrowest numpy integer type able to hold every code in
    ``[kmin, kmax]``. Unsigned types are used when ``kmin`` is non-negative.
    """
    if kmin > kmax:
        raise InvalidRangeError("kmin ({}) > kmax ({}).".format(kmin, kmax))

    candidates = UNSIGNED_DTYPES if kmin >= 0 else SIGNED_DTYPES
    for dtype in candidates:
        if is_representable(kmin, dtype) and is_representable(kmax, dtype):
            return np.dtype(dtype)

    raise InvalidRangeError(
        "No integer type can hold the code interval [{}, {}].".format(kmin, kmax)
    )
