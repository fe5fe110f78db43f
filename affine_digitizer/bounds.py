"""
The :py:mod:`affine_digitizer.bounds` module scans sample buffers for the
range of values which must be representable after digitization.

.. autofunction:: finite_bounds

A more detailed account of a buffer's contents, including counts of the
non-finite values which will be replaced by sentinel codes, is produced by
:py:func:`summarize`:

.. autofunction:: summarize

.. autoclass:: SampleSummary
    :members:

"""

from collections import namedtuple

import numpy as np

from affine_digitizer.exceptions import EmptyInputError

__all__ = [
    "finite_bounds",
    "summarize",
    "SampleSummary",
]


def _as_samples(samples):
    """
    Return a flat float64 view (or, where necessary, copy) of the supplied
    samples. The input is never modified.
    """
    return np.asarray(samples, dtype=float).ravel()


def finite_bounds(samples):
    """
    Find the minimum and maximum finite values in a buffer, ignoring NaN and
    infinite values.

    Parameters
    ==========
    samples : sequence of floats or :py:class:`numpy.ndarray`

    Returns
    =======
    (dmin, dmax) : (float, float)

    Raises
    ======
    :py:exc:`~affine_digitizer.exceptions.EmptyInputError`
        If the buffer contains no finite values.

    Notes
    =====
    The non-finite values are excluded with a boolean mask passed to masked
    reductions (the ``where`` argument of :py:func:`numpy.min` and
    :py:func:`numpy.max`) so the samples themselves are never copied. The
    mask is the only allocation (one byte per sample), except where
    ``samples`` must first be converted to a float64 array.
    """
    samples = _as_samples(samples)
    finite = np.isfinite(samples)
    if not finite.any():
        raise EmptyInputError(
            "No finite values among {} sample(s).".format(samples.size)
        )
    return (
        float(np.min(samples, where=finite, initial=np.inf)),
        float(np.max(samples, where=finite, initial=-np.inf)),
    )


class SampleSummary(
    namedtuple(
        "SampleSummary",
        "minimum,maximum,total,count,nans,posinfs,neginfs",
    )
):
    """
    Summary of the contents of a sample buffer, as produced by
    :py:func:`summarize`.

    Parameters
    ==========
    minimum, maximum, total : float
        The minimum, maximum and sum of the finite values. NaN when there are
        no finite values.
    count : int
        The number of finite values.
    nans, posinfs, neginfs : int
        The number of NaN, positive infinite and negative infinite values.
    """

    @property
    def has_finite_values(self):
        """
        True if at least one value was finite, in which case ``minimum`` and
        ``maximum`` are finite rather than NaN.
        """
        return self.count > 0

    @property
    def size(self):
        """The total number of samples summarised."""
        return self.count + self.nans + self.posinfs + self.neginfs

    def __str__(self):
        return (
            "SampleSummary(min={:g}, max={:g}, sum={:g}, count={}, "
            "NaN={}, -Inf={}, +Inf={})"
        ).format(
            self.minimum,
            self.maximum,
            self.total,
            self.count,
            self.nans,
            self.neginfs,
            self.posinfs,
        )


def summarize(samples):
    """
    Produce a :py:class:`SampleSummary` describing a buffer of samples.
    """
    samples = _as_samples(samples)

    finite = np.isfinite(samples)
    count = int(np.count_nonzero(finite))

    if count:
        minimum = float(np.min(samples, where=finite, initial=np.inf))
        maximum = float(np.max(samples, where=finite, initial=-np.inf))
        total = float(np.sum(samples, where=finite))
    else:
        minimum = maximum = total = float("nan")

    return SampleSummary(
        minimum=minimum,
        maximum=maximum,
        total=total,
        count=count,
        nans=int(np.count_nonzero(np.isnan(samples))),
        posinfs=int(np.count_nonzero(np.isposinf(samples))),
        neginfs=int(np.count_nonzero(np.isneginf(samples))),
    )
