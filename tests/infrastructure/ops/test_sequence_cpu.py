import unittest
import warnings

import numpy as np

from keynum.domain._errors import EmptyInputError, IndexOutOfRangeError, ShapeMismatchError
from keynum.domain.kind import ElementKind
from keynum.infrastructure.numeric import ops_for
from keynum.infrastructure.ops import sequence_cpu as seq

F64 = np.float64
REAL = ops_for(ElementKind("float64"))


class TestReductions(unittest.TestCase):
    def test_sum_and_prod(self) -> None:
        a = np.array([1.0, 2.0, 3.0, 4.0])
        self.assertEqual(seq.sum(a, REAL.zero()), 10.0)
        self.assertEqual(seq.prod(a, REAL.one()), 24.0)

    def test_empty_identities(self) -> None:
        e = np.empty(0)
        self.assertEqual(seq.sum(e, REAL.zero()), 0.0)
        self.assertEqual(seq.prod(e, REAL.one()), 1.0)
        self.assertEqual(seq.norm_inf(e, REAL.zero()), 0.0)
        self.assertEqual(seq.norm2(e), 0.0)

    def test_cumsum(self) -> None:
        a = np.array([1.0, 2.0, 3.0], dtype=np.float32)
        out = seq.cumsum(a)
        self.assertEqual(out.dtype, np.float32)
        np.testing.assert_array_equal(out, [1.0, 3.0, 6.0])

    def test_mean_and_population_std(self) -> None:
        a = np.array([2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0])
        self.assertEqual(seq.mean(a), 5.0)
        self.assertEqual(seq.std(a), 2.0)

    def test_complex_std_is_real(self) -> None:
        a = np.array([1 + 1j, -1 - 1j])
        out = seq.std(a)
        self.assertIsInstance(out, np.float64)
        self.assertAlmostEqual(out, np.sqrt(2.0))

    def test_norms(self) -> None:
        a = np.array([3.0, -4.0])
        self.assertEqual(seq.norm2(a), 5.0)
        self.assertEqual(seq.norm_inf(a, REAL.zero()), 4.0)
        self.assertEqual(seq.norm2(np.array([3 + 4j])), 5.0)

    def test_dot_is_not_conjugated(self) -> None:
        self.assertEqual(seq.dot(np.array([1.0, 2.0]), np.array([3.0, 4.0])), 11.0)
        self.assertEqual(seq.dot(np.array([1j]), np.array([1j])), -1 + 0j)
        with self.assertRaises(ShapeMismatchError):
            seq.dot(np.ones(2), np.ones(3))

    def test_extrema_ties_go_to_first(self) -> None:
        a = np.array([1.0, 5.0, 5.0, -2.0, -2.0])
        self.assertEqual(seq.argmax(a), 1)
        self.assertEqual(seq.argmin(a), 3)
        self.assertEqual(seq.max(a, REAL.min_value()), 5.0)
        self.assertEqual(seq.min(a, REAL.max_value()), -2.0)

    def test_empty_input_failures(self) -> None:
        e = np.empty(0)
        for fn in [seq.mean, seq.std, seq.argmax, seq.argmin, seq.diff]:
            with self.assertRaises(EmptyInputError):
                fn(e)
        with self.assertRaises(EmptyInputError):
            seq.max(e, REAL.min_value())
        with self.assertRaises(EmptyInputError):
            seq.min(e, REAL.max_value())

    def test_diff(self) -> None:
        np.testing.assert_array_equal(seq.diff(np.array([1.0, 4.0, 9.0, 16.0])), [3.0, 5.0, 7.0])
        self.assertEqual(len(seq.diff(np.array([1.0]))), 0)


class TestPredicatesAndMasks(unittest.TestCase):
    def test_any_all_nonzero_is_true(self) -> None:
        self.assertTrue(seq.any(np.array([0.0, 0.0, -3.0])))
        self.assertFalse(seq.any(np.zeros(3)))
        self.assertTrue(seq.all(np.array([1.0, np.nan])))
        self.assertFalse(seq.all(np.array([1.0, 0.0])))
        self.assertTrue(seq.all(np.empty(0)))

    def test_find(self) -> None:
        self.assertEqual(seq.find(np.array([0.0, 2.0, 0.0, -1.0])), [1, 3])
        self.assertEqual(seq.nonzero(np.zeros(4)), [])

    def test_scalar_masks(self) -> None:
        a = np.array([1.0, 2.0, 3.0])
        np.testing.assert_array_equal(seq.eq(a, 2.0, F64), [0, 1, 0])
        np.testing.assert_array_equal(seq.ne(a, 2.0, F64), [1, 0, 1])
        np.testing.assert_array_equal(seq.gt(a, 2.0, F64, REAL), [0, 0, 1])
        np.testing.assert_array_equal(seq.lt(a, 2.0, F64, REAL), [1, 0, 0])
        np.testing.assert_array_equal(seq.ge(a, 2.0, F64, REAL), [0, 1, 1])
        np.testing.assert_array_equal(seq.le(a, 2.0, F64, REAL), [1, 1, 0])
        self.assertEqual(seq.eq(a, 2.0, np.float32).dtype, np.float32)

    def test_pairwise_masks(self) -> None:
        a = np.array([1.0, 2.0, 3.0])
        b = np.array([3.0, 2.0, 1.0])
        np.testing.assert_array_equal(seq.equal(a, b, F64), [0, 1, 0])
        np.testing.assert_array_equal(seq.not_equal(a, b, F64), [1, 0, 1])
        np.testing.assert_array_equal(seq.less_than(a, b, F64, REAL), [1, 0, 0])
        np.testing.assert_array_equal(seq.greater_than(a, b, F64, REAL), [0, 0, 1])
        np.testing.assert_array_equal(seq.less_equal(a, b, F64, REAL), [1, 1, 0])
        np.testing.assert_array_equal(seq.greater_equal(a, b, F64, REAL), [0, 1, 1])
        with self.assertRaises(ShapeMismatchError):
            seq.equal(a, np.ones(2), F64)

    def test_logical_masks(self) -> None:
        a = np.array([0.0, 2.0, 0.0, np.nan])
        b = np.array([1.0, 1.0, 0.0, 0.0])
        np.testing.assert_array_equal(seq.logical_and(a, b, F64), [0, 1, 0, 0])
        np.testing.assert_array_equal(seq.logical_or(a, b, F64), [1, 1, 0, 1])
        np.testing.assert_array_equal(seq.logical_not(a, F64), [1, 0, 1, 0])

    def test_ordering_masks_with_nan(self) -> None:
        a = np.array([np.nan, 2.0])
        np.testing.assert_array_equal(seq.ge(a, 2.0, F64, REAL), [0, 1])
        np.testing.assert_array_equal(seq.le(a, 2.0, F64, REAL), [0, 1])
        np.testing.assert_array_equal(seq.greater_equal(a, a, F64, REAL), [0, 1])

    def test_masks_feed_arithmetic(self) -> None:
        a = np.array([1.0, 5.0, 3.0])
        self.assertEqual(seq.sum(a * seq.gt(a, 2.0, F64, REAL), REAL.zero()), 8.0)


class TestGeneration(unittest.TestCase):
    def test_range(self) -> None:
        np.testing.assert_array_equal(seq.range(4, F64), [0, 1, 2, 3])
        self.assertEqual(len(seq.range(0, F64)), 0)

    def test_arange(self) -> None:
        np.testing.assert_array_equal(seq.arange(0.0, 1.0, 0.25, F64), [0, 0.25, 0.5, 0.75])
        np.testing.assert_array_equal(seq.arange(3.0, 0.0, -1.0, F64), [3, 2, 1])
        self.assertEqual(len(seq.arange(0.0, 1.0, -1.0, F64)), 0)
        with self.assertRaises(ValueError):
            seq.arange(0.0, 1.0, 0.0, F64)

    def test_arange_values_are_start_plus_i_step(self) -> None:
        out = seq.arange(0.0, 1.0, 0.1, F64)
        self.assertEqual(len(out), 10)
        self.assertEqual(out[3], 0.0 + 3 * 0.1)

    def test_linspace_inclusive_endpoints_exact(self) -> None:
        for start, stop, num in [(0.0, 1.0, 7), (-3.3, 10.1, 13), (1.0, -1.0, 2)]:
            out = seq.linspace(start, stop, num, True, F64)
            self.assertEqual(len(out), num)
            self.assertEqual(out[0], start)
            self.assertEqual(out[-1], stop)

    def test_linspace_exclusive(self) -> None:
        np.testing.assert_allclose(seq.linspace(0.0, 1.0, 4, False, F64), [0, 0.25, 0.5, 0.75])

    def test_linspace_small_counts(self) -> None:
        np.testing.assert_array_equal(seq.linspace(2.0, 5.0, 1, True, F64), [2.0])
        self.assertEqual(len(seq.linspace(2.0, 5.0, 0, True, F64)), 0)
        with self.assertRaises(ValueError):
            seq.linspace(0.0, 1.0, -1, True, F64)

    def test_concat(self) -> None:
        out = seq.concat([np.array([1.0]), np.array([2.0, 3.0]), np.empty(0)], F64)
        np.testing.assert_array_equal(out, [1.0, 2.0, 3.0])
        self.assertEqual(len(seq.concat([], F64)), 0)


class TestSelectionAndScatter(unittest.TestCase):
    def test_select(self) -> None:
        a = np.array([10.0, 20.0, 30.0])
        np.testing.assert_array_equal(seq.select(a, [2, 0, 2]), [30.0, 10.0, 30.0])
        self.assertEqual(len(seq.select(a, [])), 0)

    def test_select_rejects_out_of_range(self) -> None:
        a = np.array([10.0, 20.0])
        with self.assertRaises(IndexOutOfRangeError):
            seq.select(a, [0, 2])
        with self.assertRaises(IndexOutOfRangeError):
            seq.select(a, [-1])

    def test_set_slice_and_set_all(self) -> None:
        a = np.zeros(4)
        seq.set_slice(a, [3, 1], [7.0, 8.0])
        np.testing.assert_array_equal(a, [0, 8, 0, 7])
        seq.set_all(a, [0, 2], 5.0)
        np.testing.assert_array_equal(a, [5, 8, 5, 7])
        with self.assertRaises(ShapeMismatchError):
            seq.set_slice(a, [0, 1], [1.0])
        with self.assertRaises(IndexOutOfRangeError):
            seq.set_all(a, [4], 1.0)


class TestArgsort(unittest.TestCase):
    def test_stable_ascending(self) -> None:
        a = np.array([3.0, 1.0, 2.0, 1.0])
        self.assertEqual(seq.argsort(a), [1, 3, 2, 0])

    def test_reverse_flips_whole_permutation(self) -> None:
        a = np.array([3.0, 1.0, 2.0, 1.0])
        # ties (indices 1 and 3) appear in reverse original order
        self.assertEqual(seq.argsort(a, reverse=True), [0, 2, 3, 1])

    def test_permutation_is_bijection(self) -> None:
        a = np.random.default_rng(0).standard_normal(50)
        self.assertEqual(sorted(seq.argsort(a)), list(range(50)))

    def test_nan_warns(self) -> None:
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            seq.argsort(np.array([1.0, np.nan, 0.0]))
        self.assertTrue(any(issubclass(w.category, RuntimeWarning) for w in caught))


class TestModuleExports(unittest.TestCase):
    def test_star_import_keeps_builtins(self) -> None:
        ns: dict = {}
        exec("from keynum.infrastructure.ops.sequence_cpu import *", ns)
        for name in ["sum", "max", "min", "any", "all", "range"]:
            self.assertNotIn(name, seq.__all__)
            self.assertNotIn(name, ns)
        self.assertIn("argsort", ns)

    def test_exports_are_module_functions(self) -> None:
        for name in seq.__all__:
            self.assertTrue(callable(getattr(seq, name)), name)


if __name__ == "__main__":
    unittest.main()
