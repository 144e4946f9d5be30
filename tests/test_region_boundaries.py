"""Edge cases of the ramp-up / plateau / ramp-down split."""

import numpy as np
import numpy.testing as npt
import pytest

from polymulpy import add_product, add_sum_product, product
from polymulpy.functions.cpu_numba import naive_add_sum_product, naive_product


@pytest.mark.parametrize("length", [1, 2, 3, 10])
def test_equal_lengths_have_no_plateau(rng, reference_product, length):
    a = rng.integers(-50, 50, size=length)
    b = rng.integers(-50, 50, size=length)
    p = np.zeros(2 * length - 1, dtype=np.int64)

    product(p, a, b)

    npt.assert_array_equal(p, reference_product(a, b))


@pytest.mark.parametrize("b_len", [1, 2, 7])
def test_single_coefficient_short_operand(reference_product, b_len):
    a = np.array([3], dtype=np.int64)
    b = np.arange(1, b_len + 1, dtype=np.int64)
    p = np.zeros(b_len, dtype=np.int64)

    product(p, a, b)

    npt.assert_array_equal(p, 3 * b)


def test_single_coefficient_long_operand_is_normalized():
    a = np.arange(1, 6, dtype=np.int64)
    b = np.array([-2], dtype=np.int64)
    p = np.zeros(5, dtype=np.int64)

    product(p, a, b)

    npt.assert_array_equal(p, -2 * a)


@pytest.mark.parametrize("a_len,b_len", [(1, 1), (1, 4), (4, 4), (3, 9)])
def test_slots_past_output_untouched(rng, a_len, b_len):
    a = rng.integers(-50, 50, size=a_len)
    b = rng.integers(-50, 50, size=b_len)
    out_len = a_len + b_len - 1
    p = np.full(out_len + 3, -1, dtype=np.int64)

    product(p, a, b)
    add_product(p, a, b)
    add_sum_product(p, a, a, b)

    npt.assert_array_equal(p[out_len:], [-1, -1, -1])


def test_each_term_counted_once():
    # With all-ones operands, term n counts the number of valid (m, n - m) pairs.
    a = np.ones(3, dtype=np.int64)
    b = np.ones(5, dtype=np.int64)
    p = np.zeros(7, dtype=np.int64)

    product(p, a, b)

    npt.assert_array_equal(p, [1, 2, 3, 3, 3, 2, 1])


def test_kernels_called_directly_with_ordered_operands(reference_product):
    a0 = np.array([1, -1, 2], dtype=np.int32)
    a1 = np.array([0, 3, 1], dtype=np.int32)
    b = np.array([4, 0, -2, 5], dtype=np.int32)

    p = np.zeros(6, dtype=np.int32)
    naive_product(p, a0, 3, b, 4)
    npt.assert_array_equal(p, reference_product(a0, b))

    q = np.zeros(6, dtype=np.int32)
    naive_add_sum_product(q, a0, a1, 3, b, 4)
    npt.assert_array_equal(q, reference_product(a0 + a1, b))
