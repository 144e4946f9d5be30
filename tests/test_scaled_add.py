import numpy as np
import numpy.testing as npt

from polymulpy import scaled_add


def test_from_zero_scales(rng):
    a = rng.integers(-1000, 1000, size=16)
    p = np.zeros(16, dtype=np.int64)

    scaled_add(p, a, -7)

    npt.assert_array_equal(p, -7 * a)


def test_zero_scalar_is_noop(rng):
    a = rng.integers(-1000, 1000, size=8)
    prior = rng.integers(-1000, 1000, size=8)
    p = prior.copy()

    scaled_add(p, a, 0)

    npt.assert_array_equal(p, prior)


def test_accumulates_into_prior_content():
    p = np.array([1, 1, 1, 1], dtype=np.int16)
    a = np.array([1, 2, 3], dtype=np.int16)

    scaled_add(p, a, 2)

    npt.assert_array_equal(p, [3, 5, 7, 1])


def test_explicit_length_limits_range():
    p = np.zeros(4, dtype=np.int32)
    a = np.array([1, 2, 3, 4], dtype=np.int32)

    scaled_add(p, a, 3, length=2)

    npt.assert_array_equal(p, [3, 6, 0, 0])


def test_numpy_scalar_accepted():
    p = np.zeros(2, dtype=np.int32)
    scaled_add(p, np.array([5, 6], dtype=np.int32), np.int32(2))
    npt.assert_array_equal(p, [10, 12])


def test_wraps_around_fixed_width():
    p = np.zeros(2, dtype=np.int8)
    a = np.array([64, -65], dtype=np.int8)

    scaled_add(p, a, 2)

    npt.assert_array_equal(p, np.array([128, -130]).astype(np.int8))
