from numba import jit

import numpy as np


@jit(nopython=True, nogil=True, cache=True)
def plain_term(c0: np.ndarray, c1: np.ndarray, m: int):
    """Coefficient ``m`` of a single polynomial. ``c1`` is ignored."""
    return c0[m]


@jit(nopython=True, nogil=True, cache=True)
def summed_term(c0: np.ndarray, c1: np.ndarray, m: int):
    """Coefficient ``m`` of the pointwise sum ``c0 + c1``, never materialized."""
    return c0[m] + c1[m]


def make_cauchy_product(x_term, y_term):
    """Build a Cauchy-product evaluator for the given per-term accessors.

    The evaluator computes ``P[n] (+)= sum_m x(m) * y(n - m)`` for
    ``n = 0 .. x_deg + y_deg``, where ``x`` is the shorter operand. The output
    range is split into three regions so that the summation index ``m`` is
    clamped to the valid range once per output term, never inside the inner
    loop:

    ============  ==============================  ========================
    Region        Output index ``n``              Summation index ``m``
    ============  ==============================  ========================
    ramp-up       ``0 .. x_deg``                  ``0 .. n``
    plateau       ``x_deg + 1 .. y_deg``          ``0 .. x_deg``
    ramp-down     ``y_deg + 1 .. x_deg + y_deg``  ``n - y_deg .. x_deg``
    ============  ==============================  ========================

    The plateau is empty when both operands have the same length.

    Parameters
    ----------
    x_term, y_term
        Jitted accessors with signature ``(c0, c1, m) -> coefficient`` for the
        short and the long operand, e.g. :func:`plain_term` or
        :func:`summed_term`.

    Returns
    -------
    callable
        A jitted ``evaluator(p, x0, x1, x_len, y0, y1, y_len, accumulate)``.
        With ``accumulate=False`` the first ``x_len + y_len - 1`` slots of ``p``
        are overwritten and never read; otherwise every term is added to the
        existing content. Requires ``1 <= x_len <= y_len``.

    Notes
    -----
    Partial sums are carried in 64-bit integers and truncated when stored, so
    results wrap around modulo the width of ``p``'s dtype.
    """

    @jit(nopython=True, nogil=True)
    def convolve_term(x0, x1, y0, y1, n, m_lo, m_hi):
        acc = x_term(x0, x1, m_lo) * y_term(y0, y1, n - m_lo)
        for m in range(m_lo + 1, m_hi + 1):
            acc += x_term(x0, x1, m) * y_term(y0, y1, n - m)
        return acc

    @jit(nopython=True, nogil=True)
    def evaluator(p, x0, x1, x_len, y0, y1, y_len, accumulate):
        x_deg = x_len - 1
        y_deg = y_len - 1

        # ramp-up
        for n in range(0, x_deg + 1):
            acc = convolve_term(x0, x1, y0, y1, n, 0, n)
            if accumulate:
                p[n] += acc
            else:
                p[n] = acc

        # plateau
        for n in range(x_deg + 1, y_deg + 1):
            acc = convolve_term(x0, x1, y0, y1, n, 0, x_deg)
            if accumulate:
                p[n] += acc
            else:
                p[n] = acc

        # ramp-down
        for n in range(y_deg + 1, x_deg + y_deg + 1):
            acc = convolve_term(x0, x1, y0, y1, n, n - y_deg, x_deg)
            if accumulate:
                p[n] += acc
            else:
                p[n] = acc

    return evaluator


_plain_by_plain = make_cauchy_product(plain_term, plain_term)
_summed_by_plain = make_cauchy_product(summed_term, plain_term)
_plain_by_summed = make_cauchy_product(plain_term, summed_term)


@jit(nopython=True, nogil=True)
def naive_product(p, a, a_len, b, b_len):
    """Compute ``P = A * B``. Assumes ``1 <= a_len <= b_len``."""
    _plain_by_plain(p, a, a, a_len, b, b, b_len, False)


@jit(nopython=True, nogil=True)
def naive_add_product(p, a, a_len, b, b_len):
    """Compute ``P += A * B``. Assumes ``1 <= a_len <= b_len``."""
    _plain_by_plain(p, a, a, a_len, b, b, b_len, True)


@jit(nopython=True, nogil=True)
def naive_add_sum_product(p, a0, a1, a_len, b, b_len):
    """Compute ``P += (A0 + A1) * B``. Assumes ``1 <= a_len <= b_len``."""
    _summed_by_plain(p, a0, a1, a_len, b, b, b_len, True)


@jit(nopython=True, nogil=True)
def naive_add_product_by_sum(p, a, a_len, b0, b1, b_len):
    """Compute ``P += A * (B0 + B1)``. Assumes ``1 <= a_len <= b_len``.

    This is :func:`naive_add_sum_product` with the summed pair as the longer
    operand.
    """
    _plain_by_summed(p, a, a, a_len, b0, b1, b_len, True)


@jit(nopython=True, nogil=True, cache=True)
def scaled_add_to(p, a, length, scalar):
    """Compute ``P[i] += scalar * A[i]`` for ``i < length``."""
    for i in range(length):
        p[i] += scalar * a[i]
