import unittest

import numpy as np

from keynum import Array, ElementKind
from keynum.domain._errors import ElementKindMismatchError, ShapeMismatchError


class TestArrayElementwise(unittest.TestCase):
    def setUp(self) -> None:
        self.a = Array([1.0, 2.0, 4.0])
        self.b = Array([4.0, 5.0, 8.0])

    def test_array_array(self) -> None:
        self.assertEqual((self.a + self.b).tolist(), [5.0, 7.0, 12.0])
        self.assertEqual((self.a - self.b).tolist(), [-3.0, -3.0, -4.0])
        self.assertEqual((self.a * self.b).tolist(), [4.0, 10.0, 32.0])
        self.assertEqual((self.b / self.a).tolist(), [4.0, 2.5, 2.0])

    def test_array_scalar(self) -> None:
        self.assertEqual((self.a + 1).tolist(), [2.0, 3.0, 5.0])
        self.assertEqual((self.a - 1.0).tolist(), [0.0, 1.0, 3.0])
        self.assertEqual((self.a * 2).tolist(), [2.0, 4.0, 8.0])
        self.assertEqual((self.a / 2).tolist(), [0.5, 1.0, 2.0])

    def test_scalar_array(self) -> None:
        self.assertEqual((1 + self.a).tolist(), [2.0, 3.0, 5.0])
        self.assertEqual((10.0 - self.a).tolist(), [9.0, 8.0, 6.0])
        self.assertEqual((3 * self.a).tolist(), [3.0, 6.0, 12.0])
        self.assertEqual((8.0 / self.a).tolist(), [8.0, 4.0, 2.0])

    def test_numpy_scalar_on_the_left_returns_array(self) -> None:
        out = np.float64(2.0) * self.a
        self.assertIsInstance(out, Array)
        self.assertEqual(out.tolist(), [2.0, 4.0, 8.0])
        out = np.float64(1.0) - self.a
        self.assertIsInstance(out, Array)
        self.assertEqual(out.tolist(), [0.0, -1.0, -3.0])

    def test_negation(self) -> None:
        self.assertEqual((-self.a).tolist(), [-1.0, -2.0, -4.0])

    def test_results_are_new_arrays(self) -> None:
        out = self.a + 0
        self.assertIsNot(out, self.a)
        out[0] = 100.0
        self.assertEqual(self.a[0], 1.0)

    def test_float32_is_preserved(self) -> None:
        a = Array([1.0, 2.0], kind="float32")
        out = a * 0.1
        self.assertEqual(out.kind, ElementKind("float32"))
        self.assertEqual(out.dtype, np.float32)

    def test_add_sub_round_trip(self) -> None:
        rng = np.random.default_rng(5)
        a = Array.randn(64, rng=rng)
        b = Array.randn(64, rng=rng)
        np.testing.assert_allclose((a + b - b).to_numpy(), a.to_numpy(), rtol=1e-12, atol=1e-12)

    def test_division_by_zero_follows_ieee(self) -> None:
        with np.errstate(all="raise"):
            out = Array([1.0, -1.0, 0.0]) / 0.0
        self.assertEqual(out[0], np.inf)
        self.assertEqual(out[1], -np.inf)
        self.assertTrue(np.isnan(out[2]))


class TestArrayInPlace(unittest.TestCase):
    def test_in_place_with_array(self) -> None:
        a = Array([1.0, 2.0])
        ref = a
        a += Array([10.0, 20.0])
        self.assertIs(a, ref)
        self.assertEqual(a.tolist(), [11.0, 22.0])
        a -= Array([1.0, 2.0])
        a *= Array([2.0, 0.5])
        a /= Array([4.0, 2.0])
        self.assertEqual(a.tolist(), [5.0, 5.0])

    def test_in_place_with_scalar(self) -> None:
        a = Array([2.0, 4.0])
        view = a.data()
        a += 1
        a *= 2
        a -= 0.5
        a /= 0.5
        self.assertEqual(a.tolist(), [11.0, 19.0])
        # the buffer is updated in place
        self.assertEqual(view.tolist(), [11.0, 19.0])


class TestArrayOperandErrors(unittest.TestCase):
    def test_length_mismatch(self) -> None:
        with self.assertRaises(ShapeMismatchError):
            Array([1.0, 2.0]) + Array([1.0])
        a = Array([1.0, 2.0])
        with self.assertRaises(ShapeMismatchError):
            a += Array([1.0, 2.0, 3.0])
        self.assertEqual(a.tolist(), [1.0, 2.0])

    def test_kind_mismatch(self) -> None:
        with self.assertRaises(ElementKindMismatchError):
            Array([1.0]) * Array([1.0], kind="float32")

    def test_complex_scalar_on_real_array(self) -> None:
        with self.assertRaises(ElementKindMismatchError):
            Array([1.0]) + 1j
        with self.assertRaises(ElementKindMismatchError):
            1j - Array([1.0])

    def test_unsupported_operand(self) -> None:
        with self.assertRaises(TypeError):
            Array([1.0]) + "x"


class TestComplexArithmetic(unittest.TestCase):
    def test_complex_scalars_accepted(self) -> None:
        z = Array([1 + 1j, 2 + 0j], kind="complex128")
        self.assertEqual((z * 1j).tolist(), [-1 + 1j, 2j])
        self.assertEqual((1j + z).tolist(), [1 + 2j, 2 + 1j])
        self.assertEqual((z - 1).tolist(), [1j, 1 + 0j])
        self.assertEqual((2 / Array([2j], kind="complex128")).tolist(), [-1j])

    def test_complex_in_place(self) -> None:
        z = Array([1 + 1j], kind="complex64")
        z *= 2
        self.assertEqual(z.tolist(), [2 + 2j])
        self.assertEqual(z.dtype, np.complex64)


if __name__ == "__main__":
    unittest.main()
