"""Argument contract checks for the kernel wrappers.

The Numba kernels index without bounds checks, so a bad length or an undersized
destination silently reads or writes outside the arrays. The helpers in this
module turn each of those conditions into an
:class:`~polymulpy.errors.InvalidArgumentError` before dispatch. They are only
called when :attr:`polymulpy.config.Config.check_contracts` is set.
"""

from __future__ import annotations

import numpy as np

from polymulpy.errors import InvalidArgumentError


def check_coefficients(name: str, values) -> None:
    """Require a one-dimensional signed-integer ndarray."""
    if not isinstance(values, np.ndarray):
        raise InvalidArgumentError(
            f"{name} must be a numpy.ndarray, got {type(values).__name__}"
        )
    if values.ndim != 1:
        raise InvalidArgumentError(
            f"{name} must be one-dimensional, got shape {values.shape}"
        )
    if not np.issubdtype(values.dtype, np.signedinteger):
        raise InvalidArgumentError(
            f"{name} must have a signed integer dtype, got {values.dtype}"
        )


def check_same_dtype(**arrays: np.ndarray) -> None:
    dtypes = {name: arr.dtype for name, arr in arrays.items()}
    if len(set(dtypes.values())) > 1:
        listing = ", ".join(f"{name}={dtype}" for name, dtype in dtypes.items())
        raise InvalidArgumentError(f"All operands must share one dtype: {listing}")


def check_length(name: str, length: int, values: np.ndarray) -> None:
    """Require ``1 <= length <= values.size``."""
    if length < 1:
        raise InvalidArgumentError(f"{name} must be at least 1, got {length}")
    if length > values.size:
        raise InvalidArgumentError(
            f"{name}={length} exceeds the {values.size} available coefficients"
        )


def check_destination(p: np.ndarray, required: int, *operands: np.ndarray) -> None:
    """Require a writeable destination of at least ``required`` slots.

    The destination must not overlap any of the ``operands``.
    """
    if not p.flags.writeable:
        raise InvalidArgumentError("Destination buffer is read-only")
    if p.size < required:
        raise InvalidArgumentError(
            f"Destination holds {p.size} coefficients but {required} are written"
        )
    for operand in operands:
        if np.may_share_memory(p, operand):
            raise InvalidArgumentError("Destination buffer overlaps an input operand")


def check_order(a_len: int, b_len: int) -> None:
    if a_len > b_len:
        raise InvalidArgumentError(
            f"The first operand must not be longer than the second ({a_len} > {b_len})"
        )


def check_scalar(scalar, dtype: np.dtype) -> None:
    """Require an integer scalar that fits ``dtype``."""
    if isinstance(scalar, (bool, np.bool_)) or not isinstance(
        scalar, (int, np.integer)
    ):
        raise InvalidArgumentError(
            f"Scalar must be an integer, got {type(scalar).__name__}"
        )
    info = np.iinfo(dtype)
    if not info.min <= int(scalar) <= info.max:
        raise InvalidArgumentError(f"Scalar {scalar} does not fit into {dtype}")
