import numpy as np
import numpy.testing as npt
import pytest

from polymulpy import add_product, add_sum_product, product


@pytest.mark.parametrize("a_len,b_len", [(1, 1), (2, 6), (5, 5), (6, 2)])
def test_add_product_from_zero_equals_product(rng, a_len, b_len):
    a = rng.integers(-50, 50, size=a_len)
    b = rng.integers(-50, 50, size=b_len)
    expected = np.zeros(a_len + b_len - 1, dtype=np.int64)
    product(expected, a, b)

    p = np.zeros_like(expected)
    add_product(p, a, b)

    npt.assert_array_equal(p, expected)


def test_add_product_twice_doubles(rng):
    a = rng.integers(-50, 50, size=4)
    b = rng.integers(-50, 50, size=9)
    expected = np.zeros(12, dtype=np.int64)
    product(expected, a, b)

    p = np.zeros(12, dtype=np.int64)
    add_product(p, a, b)
    add_product(p, a, b)

    npt.assert_array_equal(p, 2 * expected)


def test_add_product_keeps_prior_content(reference_product):
    a = np.array([1, 1], dtype=np.int32)
    b = np.array([1, 2, 3], dtype=np.int32)
    p = np.array([10, 20, 30, 40], dtype=np.int32)

    add_product(p, a, b)

    npt.assert_array_equal(p, np.array([10, 20, 30, 40]) + reference_product(a, b))


def test_add_sum_product_worked_example():
    a0 = np.array([1, 0], dtype=np.int64)
    a1 = np.array([0, 1], dtype=np.int64)
    b = np.array([2, 2], dtype=np.int64)
    p = np.zeros(3, dtype=np.int64)

    add_sum_product(p, a0, a1, b)

    npt.assert_array_equal(p, [2, 4, 2])


@pytest.mark.parametrize("a_len,b_len", [(1, 1), (1, 4), (3, 3), (3, 10), (8, 3)])
def test_add_sum_product_matches_product_of_sum(rng, reference_product, a_len, b_len):
    a0 = rng.integers(-50, 50, size=a_len)
    a1 = rng.integers(-50, 50, size=a_len)
    b = rng.integers(-50, 50, size=b_len)
    p = np.zeros(a_len + b_len - 1, dtype=np.int64)

    add_sum_product(p, a0, a1, b)

    npt.assert_array_equal(p, reference_product(a0 + a1, b))


def test_add_sum_product_accumulates_every_region(rng, reference_product):
    # a_len < b_len so ramp-up, plateau and ramp-down are all non-empty.
    a0 = rng.integers(-50, 50, size=3)
    a1 = rng.integers(-50, 50, size=3)
    b = rng.integers(-50, 50, size=6)
    prior = rng.integers(-50, 50, size=8)
    p = prior.copy()

    add_sum_product(p, a0, a1, b)

    npt.assert_array_equal(p, prior + reference_product(a0 + a1, b))


def test_add_sum_product_wraps_around():
    a0 = np.array([100], dtype=np.int8)
    a1 = np.array([100], dtype=np.int8)
    b = np.array([1, 2], dtype=np.int8)
    p = np.zeros(2, dtype=np.int8)

    add_sum_product(p, a0, a1, b)

    npt.assert_array_equal(p, np.array([200, 400]).astype(np.int8))
