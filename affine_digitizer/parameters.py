r"""
The :py:mod:`affine_digitizer.parameters` module derives the affine
parameters which map a range of floating point data values onto a closed
interval of integer codes.

Codes and data values are related by:

.. math::

    d \approx \alpha k + \beta

    k = \text{round}\left(\frac{d - \beta}{\alpha}\right)

where :math:`\text{round}` is
:py:func:`~affine_digitizer.rounding.round_half_up`.

.. autofunction:: compute_affine_parameters

.. autofunction:: worst_case_error

.. autoclass:: AffineParameters

.. autoclass:: Policy
    :members:


Derivation
----------

For a data range :math:`[d_{min}, d_{max}]` and code interval
:math:`[k_{min}, k_{max}]`, we want the smallest :math:`\alpha > 0` such that
every data value in range maps to a code in the interval. Since
:math:`\text{round}(u) - 1/2 < u \le \text{round}(u) + 1/2`, writing
:math:`\Delta_d = d_{max} - d_{min}` and :math:`\Delta_k = k_{max} -
k_{min}`, the spanned number of codes satisfies:

.. math::

    \frac{\Delta_d}{\alpha} - 1 < \Delta_k < \frac{\Delta_d}{\alpha} + 1

Maximising the precision means using every code, which gives the bounds
:math:`\Delta_d / (\Delta_k + 1) < \alpha < \Delta_d / (\Delta_k - 1)`.
Choosing :math:`\alpha = \Delta_d / \Delta_k` places :math:`\beta/\alpha` in
a half-open interval of width one, centred on:

.. math::

    \gamma = \frac{d_{min} k_{max} - d_{max} k_{min}}{\Delta_d}

With :math:`\beta = \alpha \gamma` both :math:`d_{min}` and :math:`d_{max}`
are reconstructed exactly (:py:data:`Policy.preserve_bounds`). With
:math:`\beta = \alpha\,\text{round}(\gamma)`
(:py:data:`Policy.preserve_zero`) zero is always mapped to an integer code and
reconstructed exactly so that values do not drift when the transform is
reapplied to reconstructed data. In both cases the worst-case reconstruction
error is :math:`\alpha / 2`.
"""

import sys
import math
import logging
import operator

from collections import namedtuple

from enum import Enum

from affine_digitizer.exceptions import (
    InvalidRangeError,
    InvalidPolicyError,
    DegenerateRangeError,
)

from affine_digitizer.rounding import round_half_up

__all__ = [
    "Policy",
    "parse_policy",
    "AffineParameters",
    "compute_affine_parameters",
    "no_data_parameters",
    "worst_case_error",
]


class Policy(Enum):
    """
    Policies for choosing the offset, :math:`\\beta`, of the affine
    transform.
    """

    preserve_zero = "PRESERVE_ZERO"
    """
    Choose :math:`\\beta` to be an integer multiple of :math:`\\alpha` such
    that zero is exactly representable.
    """

    preserve_bounds = "PRESERVE_BOUNDS"
    """
    Choose :math:`\\beta` such that the bounds of the data range are exactly
    representable.
    """


def parse_policy(policy):
    """
    Convert a :py:class:`Policy` or its name (e.g. ``"PRESERVE_ZERO"``, case
    insensitive) into a :py:class:`Policy`.
    """
    if isinstance(policy, Policy):
        return policy
    if isinstance(policy, str):
        try:
            return Policy(policy.upper())
        except ValueError:
            pass
    raise InvalidPolicyError("Unknown policy {!r}.".format(policy))


AffineParameters = namedtuple(
    "AffineParameters",
    "alpha,beta,dmin,dmax,kmin,kmax,policy",
)
"""
The affine transform relating data values and codes (:math:`d \\approx
\\alpha k + \\beta`) along with the data range and code interval it was
derived for.

Parameters
==========
alpha, beta : float
    The scale and offset of the transform. ``alpha`` is zero when either the
    data range or the code interval is a single value.
dmin, dmax : float
    The data range. Values outside of this range are replaced by sentinel
    codes during digitization.
kmin, kmax : int
    The code interval.
policy : :py:class:`Policy`
"""


def _as_code(value, name):
    if isinstance(value, bool):
        raise InvalidRangeError("{} must be an integer (got {!r}).".format(name, value))
    try:
        return operator.index(value)
    except TypeError:
        raise InvalidRangeError("{} must be an integer (got {!r}).".format(name, value))


def _check_code_interval(kmin, kmax):
    kmin = _as_code(kmin, "kmin")
    kmax = _as_code(kmax, "kmax")
    if kmin > kmax:
        raise InvalidRangeError("kmin ({}) > kmax ({}).".format(kmin, kmax))
    return (kmin, kmax)


def _check_data_range(dmin, dmax):
    dmin = float(dmin)
    dmax = float(dmax)
    if not (math.isfinite(dmin) and math.isfinite(dmax)):
        raise InvalidRangeError(
            "Data range [{!r}, {!r}] is not finite.".format(dmin, dmax)
        )
    if dmin > dmax:
        raise InvalidRangeError("dmin ({!r}) > dmax ({!r}).".format(dmin, dmax))
    return (dmin, dmax)


def _scale_and_center(dmin, dmax, kmin, kmax):
    """
    Compute :math:`\\alpha` and :math:`\\gamma` for a non-degenerate data
    range and code interval.
    """
    alpha = (dmax - dmin) / (kmax - kmin)
    gamma = (dmin * kmax - dmax * kmin) / (dmax - dmin)
    return (alpha, gamma)


def _normalized_scale_and_center(dmin, dmax, kmin, kmax):
    """
    As :py:func:`_scale_and_center` but with the data range divided by a
    power of two to keep intermediate values finite. Dividing by a power of
    two is exact (barring underflow).
    """
    # NB: The factor is kept one binade below the largest magnitude so that it
    # remains finite when that magnitude is close to the largest double.
    exponent = math.frexp(max(abs(dmin), abs(dmax)))[1]
    factor = math.ldexp(1.0, exponent - 1)
    alpha, gamma = _scale_and_center(dmin / factor, dmax / factor, kmin, kmax)
    return (alpha * factor, gamma)


def compute_affine_parameters(dmin, dmax, kmin, kmax, policy=Policy.preserve_zero):
    """
    Compute the affine transform which maps the data range ``[dmin, dmax]``
    onto the code interval ``[kmin, kmax]`` with the smallest worst-case
    reconstruction error.

    Parameters
    ==========
    dmin, dmax : float
        The (finite) range of data values to be digitized, e.g. as found by
        :py:func:`~affine_digitizer.bounds.finite_bounds`.
    kmin, kmax : int
        The code interval.
    policy : :py:class:`Policy` or str
        How to choose the offset of the transform.

    Returns
    =======
    params : :py:class:`AffineParameters`

    Raises
    ======
    :py:exc:`~affine_digitizer.exceptions.InvalidRangeError`
        If ``kmin > kmax`` or the data range is reversed or non-finite.
    :py:exc:`~affine_digitizer.exceptions.InvalidPolicyError`
        If the policy is not recognised.
    :py:exc:`~affine_digitizer.exceptions.DegenerateRangeError`
        If the scale cannot be represented as a non-zero, finite double.
    """
    kmin, kmax = _check_code_interval(kmin, kmax)
    dmin, dmax = _check_data_range(dmin, dmax)
    policy = parse_policy(policy)

    if kmin == kmax:
        # Only one code available: the midpoint of the data range minimises
        # the worst-case error.
        alpha = 0.0
        beta = (dmin / 2.0) + (dmax / 2.0)
        logging.debug(
            "Single code %d: all data in [%r, %r] represented by %r.",
            kmin,
            dmin,
            dmax,
            beta,
        )
    elif dmin == dmax:
        alpha = 0.0
        beta = dmin
        logging.debug(
            "Constant data %r: represented exactly by any code in [%d, %d].",
            dmin,
            kmin,
            kmax,
        )
    else:
        alpha, gamma = _scale_and_center(dmin, dmax, kmin, kmax)
        if not (math.isfinite(alpha) and math.isfinite(gamma)):
            logging.debug(
                "Overflow computing parameters for [%r, %r]; normalizing.",
                dmin,
                dmax,
            )
            alpha, gamma = _normalized_scale_and_center(dmin, dmax, kmin, kmax)

        # A subnormal alpha has lost precision, so alpha * (kmax - kmin) no
        # longer spans the data range and the alpha / 2 error bound fails.
        if alpha < sys.float_info.min:
            raise DegenerateRangeError(
                (
                    "Data range [{!r}, {!r}] is too narrow to be spread over "
                    "{} codes."
                ).format(dmin, dmax, kmax - kmin + 1)
            )
        if not math.isfinite(alpha):
            raise DegenerateRangeError(
                "Data range [{!r}, {!r}] is too wide to be digitized.".format(
                    dmin, dmax
                )
            )

        if policy == Policy.preserve_zero:
            beta = alpha * round_half_up(gamma)
        else:
            beta = alpha * gamma

        # Rounding the offset can push the reconstruction of kmin or kmax up
        # to alpha / 2 beyond the data range, which may exceed the largest
        # double.
        offset = beta / alpha
        if not (
            math.isfinite(alpha * (kmin + offset))
            and math.isfinite(alpha * (kmax + offset))
        ):
            raise DegenerateRangeError(
                (
                    "Data range [{!r}, {!r}] is too wide: codes {} and {} "
                    "cannot both be reconstructed with the {} policy."
                ).format(dmin, dmax, kmin, kmax, policy.name)
            )

        logging.debug(
            "Data range [%r, %r] -> codes [%d, %d] (%s): alpha=%r, beta=%r.",
            dmin,
            dmax,
            kmin,
            kmax,
            policy.name,
            alpha,
            beta,
        )

    return AffineParameters(
        alpha=alpha,
        beta=beta,
        dmin=dmin,
        dmax=dmax,
        kmin=kmin,
        kmax=kmax,
        policy=policy,
    )


def no_data_parameters(kmin, kmax, policy=Policy.preserve_zero):
    """
    Return placeholder :py:class:`AffineParameters` for a buffer containing no
    finite values. The data range is NaN so that every sample digitizes to a
    sentinel code.
    """
    kmin, kmax = _check_code_interval(kmin, kmax)
    return AffineParameters(
        alpha=0.0,
        beta=0.0,
        dmin=float("nan"),
        dmax=float("nan"),
        kmin=kmin,
        kmax=kmax,
        policy=parse_policy(policy),
    )


def worst_case_error(params):
    """
    Return the largest absolute difference between a data value in
    ``[params.dmin, params.dmax]`` and its reconstruction.
    """
    if params.kmin == params.kmax:
        return (params.dmax / 2.0) - (params.dmin / 2.0)
    elif params.dmin == params.dmax:
        return 0.0
    else:
        return params.alpha / 2.0
