import os
import unittest
from unittest import mock

import numpy as np

from keynum.domain.kind import ElementKind, ElementKindLike, KindFamily, as_kind, default_kind
from keynum.domain.kind._element_kind import DEFAULT_KIND_ENV


class TestElementKind(unittest.TestCase):
    def test_parses_supported_names(self) -> None:
        for name, family in [
            ("float32", KindFamily.REAL),
            ("float64", KindFamily.REAL),
            ("complex64", KindFamily.COMPLEX),
            ("complex128", KindFamily.COMPLEX),
        ]:
            k = ElementKind(name)
            self.assertEqual(k.name, name)
            self.assertIs(k.family, family)
            self.assertEqual(k.dtype, np.dtype(name))

    def test_accepts_numpy_dtypes_and_kinds(self) -> None:
        self.assertEqual(ElementKind(np.float32), ElementKind("float32"))
        self.assertEqual(ElementKind(np.dtype("complex128")), ElementKind("complex128"))
        self.assertEqual(ElementKind(ElementKind("float64")).name, "float64")

    def test_rejects_unsupported_kinds(self) -> None:
        for bad in ["int32", "bool", "float16", "not-a-dtype"]:
            with self.assertRaises(ValueError):
                ElementKind(bad)

    def test_real_and_complex_counterparts(self) -> None:
        self.assertEqual(ElementKind("complex128").real_kind(), ElementKind("float64"))
        self.assertEqual(ElementKind("complex64").real_kind(), ElementKind("float32"))
        self.assertEqual(ElementKind("float32").real_kind(), ElementKind("float32"))
        self.assertEqual(ElementKind("float64").complex_kind(), ElementKind("complex128"))
        self.assertEqual(ElementKind("complex64").complex_kind(), ElementKind("complex64"))

    def test_predicates(self) -> None:
        self.assertTrue(ElementKind("float64").is_real())
        self.assertFalse(ElementKind("float64").is_complex())
        self.assertTrue(ElementKind("complex64").is_complex())

    def test_equality_and_hash_by_name(self) -> None:
        a = ElementKind("float64")
        b = ElementKind(np.float64)
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))
        self.assertNotEqual(a, ElementKind("float32"))
        self.assertEqual(len({a, b, ElementKind("float32")}), 2)

    def test_str_and_repr(self) -> None:
        k = ElementKind("complex64")
        self.assertEqual(str(k), "complex64")
        self.assertEqual(repr(k), "ElementKind('complex64')")

    def test_satisfies_structural_protocol(self) -> None:
        self.assertIsInstance(ElementKind("float32"), ElementKindLike)


class TestDefaultKind(unittest.TestCase):
    def test_defaults_to_float64(self) -> None:
        with mock.patch.dict(os.environ, {}, clear=False):
            os.environ.pop(DEFAULT_KIND_ENV, None)
            self.assertEqual(default_kind(), ElementKind("float64"))

    def test_environment_override(self) -> None:
        with mock.patch.dict(os.environ, {DEFAULT_KIND_ENV: "float32"}):
            self.assertEqual(default_kind(), ElementKind("float32"))
            self.assertEqual(as_kind(None), ElementKind("float32"))

    def test_invalid_environment_value_raises(self) -> None:
        with mock.patch.dict(os.environ, {DEFAULT_KIND_ENV: "int8"}):
            with self.assertRaises(ValueError):
                default_kind()

    def test_as_kind_passthrough(self) -> None:
        k = ElementKind("complex128")
        self.assertIs(as_kind(k), k)
        self.assertEqual(as_kind("float32"), ElementKind("float32"))


if __name__ == "__main__":
    unittest.main()
