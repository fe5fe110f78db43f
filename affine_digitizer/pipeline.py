"""
The :py:mod:`affine_digitizer.pipeline` module combines the bounds scanning,
parameter derivation and digitization steps into a single call.

.. autofunction:: quantize

"""

import logging

import numpy as np

from affine_digitizer.exceptions import EmptyInputError

from affine_digitizer.bounds import finite_bounds

from affine_digitizer.parameters import (
    Policy,
    compute_affine_parameters,
    no_data_parameters,
)

from affine_digitizer.digitizer import digitize

__all__ = [
    "quantize",
]


def quantize(
    samples,
    kmin,
    kmax,
    policy=Policy.preserve_zero,
    dmin=None,
    dmax=None,
    allow_empty=False,
    **digitize_options
):
    """
    Digitize a buffer of samples into the code interval ``[kmin, kmax]``.

    Parameters
    ==========
    samples : sequence of floats or :py:class:`numpy.ndarray`
    kmin, kmax : int
        The code interval.
    policy : :py:class:`~affine_digitizer.parameters.Policy` or str
    dmin, dmax : float or None
        If given, overrides the corresponding bound of the data range which
        would otherwise be found from the finite values in ``samples``. This
        allows several buffers to share a common transform. Samples outside
        the resulting range receive sentinel codes.
    allow_empty : bool
        If True, a buffer with no finite values (and no overridden data range)
        is accepted: every sample is given its sentinel code and the returned
        parameters have a NaN data range. If False, such a buffer causes an
        :py:exc:`~affine_digitizer.exceptions.EmptyInputError`.
    **digitize_options
        Passed on to :py:func:`~affine_digitizer.digitizer.digitize` (sentinel
        codes, representative code and output dtype).

    Returns
    =======
    (params, codes)
        The :py:class:`~affine_digitizer.parameters.AffineParameters` used and
        the array of codes.
    """
    samples = np.asarray(samples, dtype=float)

    if dmin is None or dmax is None:
        try:
            scanned_dmin, scanned_dmax = finite_bounds(samples)
        except EmptyInputError:
            if allow_empty and dmin is None and dmax is None:
                logging.debug(
                    "No finite values among %d sample(s); using sentinels only.",
                    samples.size,
                )
                params = no_data_parameters(kmin, kmax, policy)
                return (params, digitize(samples, params, **digitize_options))
            raise

        if dmin is None:
            dmin = scanned_dmin
        if dmax is None:
            dmax = scanned_dmax

    params = compute_affine_parameters(dmin, dmax, kmin, kmax, policy)
    return (params, digitize(samples, params, **digitize_options))
