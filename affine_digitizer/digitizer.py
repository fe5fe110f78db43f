"""
The :py:mod:`affine_digitizer.digitizer` module applies a set of
:py:class:`~affine_digitizer.parameters.AffineParameters` to a buffer of
samples, producing integer codes, and performs the reverse mapping.

.. autofunction:: digitize

.. autofunction:: reconstruct


Sentinel codes
--------------

Samples which cannot be represented by a code in ``[kmin, kmax]`` are replaced
by sentinel codes:

* NaN samples become ``nan_code``
* Samples above ``dmax`` (including :math:`+\\infty`) become ``posinf_code``
* Samples below ``dmin`` (including :math:`-\\infty`) become ``neginf_code``

Any of these may be set to :py:data:`AUTO`, in which case out-of-range values
are clipped (``posinf_code = kmax`` and ``neginf_code = kmin``) and NaN is
assigned the code just below ``kmin`` or, failing that, just above ``kmax`` when
the output integer type has room for it. When it does not, NaN shares the code
``kmin`` and a warning is logged.

.. autodata:: AUTO
    :annotation:

"""

import logging

import numpy as np

from sentinels import Sentinel

from affine_digitizer.exceptions import InvalidRangeError

from affine_digitizer.rounding import round_half_up

from affine_digitizer.code_intervals import (
    integer_dtype,
    is_representable,
    minimal_dtype,
)

__all__ = [
    "AUTO",
    "digitize",
    "reconstruct",
    "default_nan_code",
]


AUTO = Sentinel("AUTO")
"""
Sentinel value which may be passed in place of a sentinel code or
representative index to request the default value.
"""


def default_nan_code(kmin, kmax, dtype):
    """
    Choose a code for NaN samples which lies outside ``[kmin, kmax]`` if the
    integer type ``dtype`` leaves room for one, or ``kmin`` otherwise.
    """
    info = np.iinfo(integer_dtype(dtype))
    if kmin > info.min:
        return kmin - 1
    elif kmax < info.max:
        return kmax + 1
    else:
        logging.warning(
            (
                "Code interval [%d, %d] fills all of %s: NaN samples will be "
                "digitized as %d and cannot be distinguished."
            ),
            kmin,
            kmax,
            np.dtype(dtype).name,
            kmin,
        )
        return kmin


def _check_code(code, name, dtype):
    if not is_representable(code, dtype):
        raise InvalidRangeError(
            "{} ({}) cannot be represented as {}.".format(
                name, code, np.dtype(dtype).name
            )
        )
    return code


def digitize(
    samples,
    params,
    nan_code=AUTO,
    posinf_code=AUTO,
    neginf_code=AUTO,
    representative=AUTO,
    dtype=None,
):
    """
    Convert a buffer of samples into integer codes.

    Finite samples within ``[params.dmin, params.dmax]`` are mapped to
    ``round_half_up((d - beta) / alpha)``, which is always within ``[kmin,
    kmax]``. The bounds of the data range map exactly onto the bounds of the
    code interval.

    When ``params.alpha`` is zero (a single code or constant data), all
    in-range samples are mapped to a single representative code.

    Parameters
    ==========
    samples : sequence of floats or :py:class:`numpy.ndarray`
        The samples to digitize. Not modified.
    params : :py:class:`~affine_digitizer.parameters.AffineParameters`
    nan_code, posinf_code, neginf_code : int or :py:data:`AUTO`
        Sentinel codes (see the module documentation).
    representative : int or :py:data:`AUTO`
        The code used for in-range samples when ``params.alpha`` is zero.
        Must lie in ``[kmin, kmax]``. Defaults to ``kmin``.
    dtype : numpy integer dtype or None
        The type of the returned array. If None, the narrowest integer type
        holding ``[kmin, kmax]`` is used.

    Returns
    =======
    codes : :py:class:`numpy.ndarray`
        A flat array of codes, one per sample, in the same order as the
        samples.
    """
    kmin = params.kmin
    kmax = params.kmax

    if dtype is None:
        dtype = minimal_dtype(kmin, kmax)
    else:
        dtype = integer_dtype(dtype)
    _check_code(kmin, "kmin", dtype)
    _check_code(kmax, "kmax", dtype)

    if nan_code is AUTO:
        nan_code = default_nan_code(kmin, kmax, dtype)
    if posinf_code is AUTO:
        posinf_code = kmax
    if neginf_code is AUTO:
        neginf_code = kmin
    if representative is AUTO:
        representative = kmin

    _check_code(nan_code, "nan_code", dtype)
    _check_code(posinf_code, "posinf_code", dtype)
    _check_code(neginf_code, "neginf_code", dtype)
    if not (kmin <= representative <= kmax):
        raise InvalidRangeError(
            "Representative code {} is outside [{}, {}].".format(
                representative, kmin, kmax
            )
        )

    samples = np.asarray(samples, dtype=float).ravel()

    nans = np.isnan(samples)
    above = (samples > params.dmax) | np.isposinf(samples)
    below = (samples < params.dmin) | np.isneginf(samples)
    in_range = ~(nans | above | below)

    codes = np.empty(samples.shape, dtype=dtype)
    codes[nans] = nan_code
    codes[above] = posinf_code
    codes[below] = neginf_code

    if params.alpha > 0.0:
        values = samples[in_range]

        with np.errstate(over="ignore"):
            shifted = values - params.beta
        scaled = shifted / params.alpha

        # The difference may overflow when the data range spans most of the
        # representable doubles, in which case scale before shifting.
        overflowed = np.isinf(shifted)
        if np.any(overflowed):
            scaled[overflowed] = (values[overflowed] / params.alpha) - (
                params.beta / params.alpha
            )

        scaled = round_half_up(scaled)

        # Rounding error in the division can push the codes of values at (or
        # very near) the ends of the data range one step outside the code
        # interval. These are pinned to the interval before conversion to
        # integers so that out-of-range floats are never cast.
        at_bottom = (scaled <= kmin) | (values == params.dmin)
        at_top = (scaled >= kmax) | (values == params.dmax)
        scaled[at_bottom | at_top] = 0.0

        in_range_codes = scaled.astype(dtype)
        in_range_codes[at_bottom] = kmin
        in_range_codes[at_top] = kmax
        codes[in_range] = in_range_codes
    else:
        codes[in_range] = representative

    return codes


def reconstruct(codes, params, nan_code=None, posinf_code=None, neginf_code=None):
    """
    Convert integer codes back into (approximate) data values using
    :math:`d = \\alpha k + \\beta`.

    Parameters
    ==========
    codes : sequence of ints or :py:class:`numpy.ndarray`
    params : :py:class:`~affine_digitizer.parameters.AffineParameters`
    nan_code, posinf_code, neginf_code : int or None
        If given, codes equal to these values are reconstructed as NaN,
        :math:`+\\infty` and :math:`-\\infty` respectively rather than via the
        affine transform. Leave these as None when the sentinel codes
        coincide with codes in ``[kmin, kmax]`` (e.g. when clipping).

    Returns
    =======
    values : :py:class:`numpy.ndarray`
        A float64 array. Codes in ``[kmin, kmax]`` always reconstruct to
        finite values. Codes outside the interval whose reconstruction
        exceeds the largest double become :math:`\\pm\\infty`.
    """
    codes = np.asarray(codes).ravel()
    scaled = codes.astype(float)

    with np.errstate(over="ignore"):
        values = (params.alpha * scaled) + params.beta

        # As in digitize(), offset before scaling where the product overflows.
        # Codes outside [kmin, kmax] may still reconstruct as infinities.
        overflowed = np.isinf(values)
        if np.any(overflowed):
            values[overflowed] = params.alpha * (
                scaled[overflowed] + (params.beta / params.alpha)
            )

    for code, value in [
        (nan_code, np.nan),
        (posinf_code, np.inf),
        (neginf_code, -np.inf),
    ]:
        if code is not None:
            values[codes == code] = value

    return values
