"""Polynomial multiplication primitives.

The functions in this module are the entry points a divide-and-conquer
(Karatsuba-style) multiplier calls at its base case and in its merge step:

- :func:`product` computes ``P = A * B``
- :func:`add_product` computes ``P += A * B``
- :func:`add_sum_product` computes ``P += (A0 + A1) * B``
- :func:`scaled_add` computes ``P += c * A``

Coefficients are one-dimensional signed-integer numpy arrays, index ``i``
holding the coefficient of ``x**i``. Results are written into the
caller-owned destination ``p``; nothing is returned and nothing is allocated.
Arithmetic wraps around modulo the width of the dtype.

Each wrapper validates its arguments (see :mod:`polymulpy.validation`) and
puts the shorter operand first before calling the Numba kernels in
:mod:`polymulpy.functions.cpu_numba`. Both steps are governed by
:class:`polymulpy.config.Config`.
"""

from __future__ import annotations

from time import perf_counter

import numpy as np

from polymulpy import log
from polymulpy import validation
from polymulpy.config import Config, get_config
from polymulpy.errors import InvalidArgumentError
from polymulpy.functions.cpu_numba import (
    naive_add_product,
    naive_add_product_by_sum,
    naive_add_sum_product,
    naive_product,
    scaled_add_to,
)

_log = log.kernel_logger(__name__)

SIGNED_DTYPES = (np.int8, np.int16, np.int32, np.int64)


def _resolve_length(length: int | None, values: np.ndarray) -> int:
    return values.size if length is None else int(length)


def _prepare_pair(
    p: np.ndarray,
    a: np.ndarray,
    a_len: int | None,
    b: np.ndarray,
    b_len: int | None,
    config: Config,
):
    if config.check_contracts:
        for name, values in (("p", p), ("a", a), ("b", b)):
            validation.check_coefficients(name, values)

    a_len = _resolve_length(a_len, a)
    b_len = _resolve_length(b_len, b)

    if config.check_contracts:
        validation.check_same_dtype(p=p, a=a, b=b)
        validation.check_length("a_len", a_len, a)
        validation.check_length("b_len", b_len, b)
        if not config.normalize_order:
            validation.check_order(a_len, b_len)
        validation.check_destination(p, a_len + b_len - 1, a, b)

    if config.normalize_order and a_len > b_len:
        _log.debug(f"Swapping operands of lengths {a_len} and {b_len}")
        return b, b_len, a, a_len
    return a, a_len, b, b_len


def product(
    p: np.ndarray,
    a: np.ndarray,
    b: np.ndarray,
    *,
    a_len: int | None = None,
    b_len: int | None = None,
    config: Config | None = None,
) -> None:
    """Compute ``P = A * B``.

    Parameters
    ----------
    p : np.ndarray
        Destination with room for at least ``a_len + b_len - 1`` coefficients.
        Those slots are overwritten without being read; the rest is untouched.
    a, b : np.ndarray
        Coefficient arrays of the two factors.
    a_len, b_len : int, optional
        Number of leading coefficients of ``a`` and ``b`` to use. Default to the
        array sizes.
    config : Config, optional
        Overrides the process-wide configuration for this call.

    Raises
    ------
    InvalidArgumentError
        If contract checks are enabled and the arguments violate them.
    """
    config = config or get_config()
    a, a_len, b, b_len = _prepare_pair(p, a, a_len, b, b_len, config)
    naive_product(p, a, a_len, b, b_len)


def add_product(
    p: np.ndarray,
    a: np.ndarray,
    b: np.ndarray,
    *,
    a_len: int | None = None,
    b_len: int | None = None,
    config: Config | None = None,
) -> None:
    """Compute ``P += A * B``.

    Same arguments as :func:`product`, but the first ``a_len + b_len - 1``
    slots of ``p`` are accumulated into, so ``p`` must already hold meaningful
    values (typically zeros or a partial product).
    """
    config = config or get_config()
    a, a_len, b, b_len = _prepare_pair(p, a, a_len, b, b_len, config)
    naive_add_product(p, a, a_len, b, b_len)


def add_sum_product(
    p: np.ndarray,
    a0: np.ndarray,
    a1: np.ndarray,
    b: np.ndarray,
    *,
    a_len: int | None = None,
    b_len: int | None = None,
    config: Config | None = None,
) -> None:
    """Compute ``P += (A0 + A1) * B`` without forming ``A0 + A1``.

    This is the Karatsuba merge step: the caller adds the product of a summed
    pair of halves into an existing partial result.

    Parameters
    ----------
    p : np.ndarray
        Destination with at least ``a_len + b_len - 1`` meaningful slots.
    a0, a1 : np.ndarray
        The two summands. Both supply ``a_len`` coefficients.
    b : np.ndarray
        The other factor.
    a_len, b_len : int, optional
        Coefficient counts. ``a_len`` defaults to the common size of ``a0``
        and ``a1``; ``b_len`` to ``b.size``.
    config : Config, optional
        Overrides the process-wide configuration for this call.

    Raises
    ------
    InvalidArgumentError
        If contract checks are enabled and the arguments violate them.
    """
    config = config or get_config()

    if config.check_contracts:
        for name, values in (("p", p), ("a0", a0), ("a1", a1), ("b", b)):
            validation.check_coefficients(name, values)
        if a_len is None and a0.size != a1.size:
            raise InvalidArgumentError(
                f"a0 and a1 must have equal lengths, got {a0.size} and {a1.size}"
            )

    a_len = _resolve_length(a_len, a0)
    b_len = _resolve_length(b_len, b)

    if config.check_contracts:
        validation.check_same_dtype(p=p, a0=a0, a1=a1, b=b)
        validation.check_length("a_len", a_len, a0)
        validation.check_length("a_len", a_len, a1)
        validation.check_length("b_len", b_len, b)
        if not config.normalize_order:
            validation.check_order(a_len, b_len)
        validation.check_destination(p, a_len + b_len - 1, a0, a1, b)

    if config.normalize_order and a_len > b_len:
        _log.debug(f"Summed operand is the longer one ({a_len} > {b_len})")
        naive_add_product_by_sum(p, b, b_len, a0, a1, a_len)
    else:
        naive_add_sum_product(p, a0, a1, a_len, b, b_len)


def scaled_add(
    p: np.ndarray,
    a: np.ndarray,
    scalar: int,
    *,
    length: int | None = None,
    config: Config | None = None,
) -> None:
    """Compute ``P[i] += scalar * A[i]`` for ``i < length``.

    Parameters
    ----------
    p : np.ndarray
        Destination with at least ``length`` slots.
    a : np.ndarray
        Coefficients to scale.
    scalar : int
        Multiplier; must fit the dtype of ``p``. Zero leaves ``p`` unchanged.
    length : int, optional
        Number of coefficients to process. Defaults to ``a.size``.
    config : Config, optional
        Overrides the process-wide configuration for this call.
    """
    config = config or get_config()

    if config.check_contracts:
        validation.check_coefficients("p", p)
        validation.check_coefficients("a", a)

    length = _resolve_length(length, a)

    if config.check_contracts:
        validation.check_same_dtype(p=p, a=a)
        validation.check_length("length", length, a)
        validation.check_destination(p, length, a)
        validation.check_scalar(scalar, p.dtype)

    scaled_add_to(p, a, length, p.dtype.type(scalar))


def multiply(
    a,
    b,
    *,
    dtype=None,
    config: Config | None = None,
) -> np.ndarray:
    """Return ``A * B`` in a newly allocated array.

    Convenience wrapper around :func:`product` for callers that do not manage
    their own buffers.

    Parameters
    ----------
    a, b : array_like
        Coefficient sequences, lowest power first.
    dtype : numpy dtype, optional
        Signed integer dtype of the result. Defaults to the common dtype of
        ``a`` and ``b``.
    config : Config, optional
        Overrides the process-wide configuration for this call.

    Returns
    -------
    np.ndarray
        Array of ``len(a) + len(b) - 1`` coefficients.
    """
    a = np.asarray(a)
    b = np.asarray(b)
    if dtype is None:
        dtype = np.result_type(a, b)
    a = a.astype(dtype, copy=False)
    b = b.astype(dtype, copy=False)

    validation.check_coefficients("a", a)
    validation.check_coefficients("b", b)
    validation.check_length("len(a)", a.size, a)
    validation.check_length("len(b)", b.size, b)

    p = np.zeros(a.size + b.size - 1, dtype=dtype)
    product(p, a, b, config=config)
    return p


def warmup(dtypes=None) -> dict[str, float]:
    """Compile every kernel ahead of the first real call.

    Numba compiles lazily, once per argument type signature. Calling this at
    start-up moves the compile cost out of the first multiplication.

    Parameters
    ----------
    dtypes : iterable of numpy dtypes, optional
        Coefficient dtypes to compile for. Defaults to all signed integer
        widths.

    Returns
    -------
    dict[str, float]
        Seconds spent per dtype name.
    """
    timings = {}
    for dtype in SIGNED_DTYPES if dtypes is None else dtypes:
        dtype = np.dtype(dtype)
        if not np.issubdtype(dtype, np.signedinteger):
            raise InvalidArgumentError(f"Cannot compile kernels for dtype {dtype}")

        a = np.ones(1, dtype=dtype)
        b = np.ones(2, dtype=dtype)
        p = np.zeros(2, dtype=dtype)

        t0 = perf_counter()
        naive_product(p, a, 1, b, 2)
        naive_add_product(p, a, 1, b, 2)
        naive_add_sum_product(p, a, a, 1, b, 2)
        naive_add_product_by_sum(p, a, 1, b, b, 2)
        scaled_add_to(p, b, 2, dtype.type(1))
        timings[dtype.name] = perf_counter() - t0

        _log.numerics(f"Compiled kernels for {dtype.name} in {timings[dtype.name]:.3f}s")
    return timings
