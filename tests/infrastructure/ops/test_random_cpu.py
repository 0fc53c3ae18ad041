import unittest

import numpy as np

from keynum.domain.kind import ElementKind
from keynum.infrastructure.ops import random_cpu


class TestRandomCpu(unittest.TestCase):
    def test_uniform_range_and_dtype(self) -> None:
        for name in ["float32", "float64"]:
            out = random_cpu.uniform(1000, ElementKind(name), np.random.default_rng(1))
            self.assertEqual(out.dtype, np.dtype(name))
            self.assertEqual(len(out), 1000)
            self.assertTrue(np.all(out >= 0.0))
            self.assertTrue(np.all(out < 1.0))

    def test_uniform_complex_samples_both_parts(self) -> None:
        out = random_cpu.uniform(500, ElementKind("complex64"), np.random.default_rng(2))
        self.assertEqual(out.dtype, np.complex64)
        for part in (out.real, out.imag):
            self.assertTrue(np.all(part >= 0.0))
            self.assertTrue(np.all(part < 1.0))
        self.assertFalse(np.array_equal(out.real, out.imag))

    def test_normal_moments(self) -> None:
        out = random_cpu.normal(20000, ElementKind("float64"), np.random.default_rng(3))
        self.assertAlmostEqual(float(out.mean()), 0.0, delta=0.05)
        self.assertAlmostEqual(float(out.std()), 1.0, delta=0.05)

    def test_normal_complex_dtype(self) -> None:
        out = random_cpu.normal(10, ElementKind("complex128"), np.random.default_rng(4))
        self.assertEqual(out.dtype, np.complex128)

    def test_seeded_generators_reproduce(self) -> None:
        k = ElementKind("float64")
        a = random_cpu.uniform(16, k, np.random.default_rng(42))
        b = random_cpu.uniform(16, k, np.random.default_rng(42))
        np.testing.assert_array_equal(a, b)

    def test_default_generator(self) -> None:
        self.assertEqual(len(random_cpu.normal(3, ElementKind("float32"))), 3)


if __name__ == "__main__":
    unittest.main()
