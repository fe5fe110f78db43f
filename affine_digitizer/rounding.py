r"""
The rounding rule used to turn scaled samples into integer codes.

.. autofunction:: round_half_up

The rule is :math:`\text{round}(u) = \lfloor u + 1/2 \rfloor`, that is, round
to nearest with ties broken towards :math:`+\infty`. For every finite
:math:`u` the result satisfies:

.. math::

    u - 1/2 < \text{round}(u) \le u + 1/2

Evaluating ``floor(u + 0.5)`` literally does not always honour this bound
since ``u + 0.5`` is itself rounded (e.g. for ``u = 0.49999999999999994`` the
sum rounds up to exactly ``1.0``). Instead the fractional part ``u -
floor(u)``, which is always exactly representable, is compared against one
half.
"""

import math

import numpy as np

__all__ = [
    "round_half_up",
]


def round_half_up(u):
    """
    Round ``u`` to the nearest integer, rounding ties towards positive
    infinity (so ``round_half_up(2.5) == 3`` and ``round_half_up(-2.5) ==
    -2``).

    Parameters
    ==========
    u : float or :py:class:`numpy.ndarray`

    Returns
    =======
    rounded : int or :py:class:`numpy.ndarray`
        For scalar arguments, a Python :py:class:`int`. For arrays, a float64
        array of integral values of the same shape; non-finite values are
        passed through unchanged.
    """
    if isinstance(u, np.ndarray):
        u = u.astype(float, copy=False)
        whole = np.floor(u)
        # NB: inf - inf produces NaN (with a warning) for infinite entries,
        # which then compares False and so passes the infinity through.
        with np.errstate(invalid="ignore"):
            return np.where(u - whole >= 0.5, whole + 1.0, whole)
    else:
        whole = math.floor(u)
        if u - whole >= 0.5:
            return whole + 1
        else:
            return whole
