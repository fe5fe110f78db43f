"""
Exception types used in this library.

All exceptions are subclasses of :py:exc:`ValueError` (via
:py:exc:`DigitizationError`) and are raised before any output is produced.
"""

__all__ = [
    "DigitizationError",
    "InvalidRangeError",
    "InvalidPolicyError",
    "EmptyInputError",
    "DegenerateRangeError",
]


class DigitizationError(ValueError):
    """
    Base class of all exceptions thrown by :py:mod:`affine_digitizer`.
    """

class InvalidRangeError(DigitizationError):
    """
    Thrown when a code interval has ``kmin > kmax``, when a data range is
    reversed or non-finite, or when a code (including a sentinel code) cannot
    be represented by the requested output integer type.
    """

class InvalidPolicyError(DigitizationError):
    """
    Thrown when an unrecognised :py:class:`~affine_digitizer.parameters.Policy`
    token is given.
    """

class EmptyInputError(DigitizationError):
    """
    Thrown when a sample buffer contains no finite values from which a data
    range could be found.
    """

class DegenerateRangeError(DigitizationError):
    """
    Thrown when a non-degenerate data range and code interval produce a scale
    factor which cannot be represented as a double: either it underflows to
    zero (the code interval is too wide for the dynamic range of the data) or
    it overflows.
    """
