"""
Algebraic laws and end-to-end scenarios across arrays and matrices.
"""

import math
import unittest

import numpy as np
from numpy.testing import assert_allclose

from keynum import Array, Matrix


class TestArrayLaws(unittest.TestCase):
    def setUp(self) -> None:
        self.rng = np.random.default_rng(2024)

    def test_add_then_subtract(self) -> None:
        for n in (0, 1, 9, 64):
            a = Array.randn(n, rng=self.rng)
            b = Array.randn(n, rng=self.rng)
            assert_allclose((a + b - b).to_numpy(), a.to_numpy(), atol=1e-12)

    def test_cumsum_last_is_sum(self) -> None:
        a = Array.rand(50, rng=self.rng)
        self.assertAlmostEqual(a.cumsum()[49], a.sum())

    def test_linspace_endpoints_exact(self) -> None:
        for start, stop, num in [(0.0, 1.0, 2), (-3.3, 7.1, 11), (1.0, 1e-3, 97)]:
            ls = Array.linspace(start, stop, num)
            self.assertEqual(len(ls), num)
            self.assertEqual(ls[0], start)
            self.assertEqual(ls[num - 1], stop)

    def test_linspace_exclusive(self) -> None:
        ls = Array.linspace(0.0, 1.0, 4, inclusive=False)
        assert_allclose(ls.to_numpy(), [0.0, 0.25, 0.5, 0.75])

    def test_concat_lengths_and_offsets(self) -> None:
        parts = [Array([1.0, 2.0]), Array.empty(), Array([3.0]), Array([4.0, 5.0, 6.0])]
        out = Array.concat(parts)
        self.assertEqual(len(out), sum(len(p) for p in parts))
        offset = 0
        for p in parts:
            for i in range(len(p)):
                self.assertEqual(out[offset + i], p[i])
            offset += len(p)

    def test_sort_round_trip(self) -> None:
        original = Array.randn(30, rng=self.rng)
        sorted_values = original.select(original.argsort())
        back = Array.zeros(len(original))
        back.set(original.argsort(), sorted_values)
        self.assertEqual(back.tolist(), original.tolist())


class TestScenarios(unittest.TestCase):
    def test_nonzero_after_single_set(self) -> None:
        a = Array.zeros(5)
        a[2] = 7.0
        self.assertEqual(a.nonzero(), [2])
        self.assertEqual(a.find(), [2])

    def test_scaled_identity_times_ones(self) -> None:
        m = Matrix.identity(3)
        m *= 2.0
        self.assertEqual((m @ Array([1.0, 1.0, 1.0])).tolist(), [2.0, 2.0, 2.0])

    def test_identity_mat_vec_returns_input(self) -> None:
        rng = np.random.default_rng(1)
        for n in (1, 4, 10):
            v = Array.randn(n, rng=rng)
            self.assertEqual(Matrix.identity(n).mat_vec(v).tolist(), v.tolist())

    def test_complex_from_parts(self) -> None:
        z = Array.from_parts([1.0, 2.0], [2.0, 3.0])
        self.assertEqual(z.real().tolist(), [1.0, 2.0])
        self.assertEqual(z.imag().tolist(), [2.0, 3.0])
        self.assertAlmostEqual(z.norm()[0], math.sqrt(1.0 + 4.0))


if __name__ == "__main__":
    unittest.main()
