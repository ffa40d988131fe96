"""Unit tests for the 2D vector helpers."""

import math
import unittest

import numpy as np
from numpy.testing import assert_allclose, assert_array_equal

from utils.vector import (
    as_vector,
    dot_perp,
    is_zero,
    length,
    max_scalar,
    normalize,
    resolve_scalar_type,
    zero_vector,
)


class DotPerpTest(unittest.TestCase):
    def test_axes(self) -> None:
        self.assertEqual(dot_perp(as_vector((1, 0)), as_vector((0, 1))), 1)
        self.assertEqual(dot_perp(as_vector((0, 1)), as_vector((1, 0))), -1)

    def test_parallel_is_exactly_zero(self) -> None:
        self.assertTrue(is_zero(dot_perp(as_vector((2, 4)), as_vector((-1, -2)))))
        self.assertTrue(is_zero(dot_perp(as_vector((1, 0)), as_vector((1, 0)))))

    def test_keeps_scalar_type(self) -> None:
        a = as_vector((1, 2), np.float32)
        b = as_vector((3, 4), np.float32)
        self.assertEqual(dot_perp(a, b).dtype, np.float32)


class NormalizeTest(unittest.TestCase):
    def test_unit_length(self) -> None:
        assert_array_equal(normalize(as_vector((3, 4))), [0.6, 0.8])

    def test_zero_vector_is_total(self) -> None:
        with np.errstate(all="raise"):
            n = normalize(zero_vector())
        assert_array_equal(n, [0.0, 0.0])

    def test_tiny_vector(self) -> None:
        n = normalize(as_vector((1e-300, 0)))
        assert_array_equal(n, [1.0, 0.0])

    def test_huge_vector_does_not_overflow(self) -> None:
        with np.errstate(all="raise"):
            n = normalize(as_vector((1.7e308, 1.7e308)))
        assert_allclose(n, [math.sqrt(0.5), math.sqrt(0.5)], rtol=1e-15)


class LengthTest(unittest.TestCase):
    def test_exact(self) -> None:
        self.assertEqual(length(as_vector((3, 4))), 5)

    def test_zero(self) -> None:
        self.assertEqual(length(zero_vector()), 0)

    def test_tiny_vector_does_not_underflow(self) -> None:
        self.assertEqual(length(as_vector((0, 1e-200))), 1e-200)

    def test_huge_vector(self) -> None:
        self.assertEqual(length(as_vector((1.7e308, 0))), 1.7e308)


class ScalarTypeTest(unittest.TestCase):
    def test_default(self) -> None:
        self.assertEqual(resolve_scalar_type(), np.dtype(np.float64))
        self.assertEqual(as_vector((1, 2)).dtype, np.float64)

    def test_unsupported(self) -> None:
        with self.assertRaises(ValueError):
            resolve_scalar_type(np.int32)

    def test_max_scalar(self) -> None:
        self.assertEqual(max_scalar(np.float32), np.finfo(np.float32).max)
        self.assertEqual(max_scalar(np.float64), np.finfo(np.float64).max)

    def test_bad_shape(self) -> None:
        with self.assertRaises(ValueError):
            as_vector((1, 2, 3))


if __name__ == "__main__":
    unittest.main()
