"""
The :py:mod:`affine_digitizer` package converts arbitrary-range floating
point samples into integer codes within a bounded interval, suitable for
storage in fixed-width integer formats, via an affine transform chosen to
minimise the worst-case reconstruction error.

..
    You are currently reading the documentation in its source form (e.g.
    directly from the Python source docstrings or via ``help()``).


Main components
---------------

Digitization is a single pass through three stages:

* Finding the range of finite values in the input
  (:py:mod:`affine_digitizer.bounds`)
* Deriving the affine parameters for that range and the target code interval
  (:py:mod:`affine_digitizer.parameters`)
* Mapping each sample to a code, substituting sentinel codes for NaN and
  out-of-range values (:py:mod:`affine_digitizer.digitizer`)

The :py:func:`~affine_digitizer.pipeline.quantize` function runs all three
stages in one call::

    >>> from affine_digitizer.pipeline import quantize
    >>> params, codes = quantize([-2.0, -1.0, 0.0, 1.0, 2.0], 0, 255)
    >>> codes.tolist()
    [0, 63, 127, 191, 255]

The rounding rule, which rounds ties towards positive infinity, is defined in
:py:mod:`affine_digitizer.rounding`. Helpers for obtaining code intervals from
integer types and bit widths live in :py:mod:`affine_digitizer.code_intervals`.


Numerical behaviour
-------------------

All functions are pure: inputs are never modified and no state is shared
between calls, so independent buffers may be digitized concurrently.

The transforms produced map the bounds of the data range exactly onto the
bounds of the code interval and are monotonic. The default
:py:data:`~affine_digitizer.parameters.Policy.preserve_zero` policy
additionally guarantees that zero is reconstructed exactly, so that
repeatedly digitizing and reconstructing a signal does not cause its values
to drift.

Errors are reported using the exceptions in
:py:mod:`affine_digitizer.exceptions`, all of which are
:py:exc:`ValueError` subclasses.

"""

from affine_digitizer.version import __version__
