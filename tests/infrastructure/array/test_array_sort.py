import unittest
import warnings

import numpy as np

from keynum import Array
from keynum.domain._errors import ElementKindNotSupportedError


class TestArgsort(unittest.TestCase):
    def test_ascending_permutation(self) -> None:
        a = Array([3.0, 1.0, 2.0])
        self.assertEqual(a.argsort(), [1, 2, 0])
        self.assertEqual(a.tolist(), [3.0, 1.0, 2.0])

    def test_stable_ties(self) -> None:
        a = Array([2.0, 1.0, 2.0, 1.0])
        self.assertEqual(a.argsort(), [1, 3, 0, 2])

    def test_reverse_flips_whole_permutation(self) -> None:
        a = Array([2.0, 1.0, 2.0, 1.0])
        self.assertEqual(a.argsort(reverse=True), [2, 0, 3, 1])

    def test_select_with_permutation_is_sorted(self) -> None:
        rng = np.random.default_rng(3)
        a = Array.randn(25, rng=rng)
        s = a.select(a.argsort())
        for i in range(len(s) - 1):
            self.assertLessEqual(s[i], s[i + 1])

    def test_empty(self) -> None:
        self.assertEqual(Array.empty().argsort(), [])


class TestSort(unittest.TestCase):
    def test_sorts_in_place_and_returns_permutation(self) -> None:
        a = Array([3.0, 1.0, 2.0])
        perm = a.sort()
        self.assertEqual(perm, [1, 2, 0])
        self.assertEqual(a.tolist(), [1.0, 2.0, 3.0])

    def test_descending(self) -> None:
        a = Array([3.0, 1.0, 2.0])
        perm = a.sort(reverse=True)
        self.assertEqual(perm, [0, 2, 1])
        self.assertEqual(a.tolist(), [3.0, 2.0, 1.0])

    def test_permutation_restores_original(self) -> None:
        original = [4.0, -1.0, 4.0, 0.5, 9.0, -7.0]
        a = Array(original)
        perm = a.sort()
        self.assertEqual(sorted(perm), list(range(len(original))))
        for i, p in enumerate(perm):
            self.assertEqual(a[i], original[p])

        restored = Array.zeros(len(original))
        restored.set(perm, a)
        self.assertEqual(restored.tolist(), original)

    def test_complex_not_orderable(self) -> None:
        z = Array([2j, 1j], kind="complex128")
        with self.assertRaises(ElementKindNotSupportedError):
            z.sort()
        with self.assertRaises(ElementKindNotSupportedError):
            z.argsort()
        self.assertEqual(z.tolist(), [2j, 1j])

    def test_nan_warns(self) -> None:
        a = Array([1.0, np.nan, 0.0])
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            perm = a.argsort()
        self.assertTrue(any(issubclass(w.category, RuntimeWarning) for w in caught))
        self.assertEqual(sorted(perm), [0, 1, 2])


if __name__ == "__main__":
    unittest.main()
