"""
Concrete one-dimensional container (NumPy backend).

This module provides `Array`, a 1-D numeric container that owns a flat NumPy
buffer of a supported element kind (float32/float64/complex64/complex128).
It composes the dense core with the arithmetic, comparison, reduction, unary
and complex mixins, and adds the array-specific surface: factories,
indexing, search and selection, sorting and complex construction helpers.

Design notes
------------
- The buffer is never resized after construction. `data_mut()` hands out a
  writable view of fixed length.
- `sort` mutates in place and returns the permutation; `argsort` leaves the
  array untouched.
- Indices must lie in ``[0, len)``; negative indices are rejected rather
  than interpreted from the end.
"""

from __future__ import annotations

from typing import Any, Iterator, List, Optional, Sequence, Union

import numpy as np

from ...domain._array import IArray
from ...domain._errors import (
    ElementKindMismatchError,
    ElementKindNotSupportedError,
    IndexOutOfRangeError,
    ShapeMismatchError,
)
from ...domain._numeric import ComplexParts, Ordered
from ...domain.kind import ElementKind, as_kind, default_kind
from ..dense._dense_core import DenseCoreMixin
from ..dense.mixins import (
    DenseMixinArithmetic,
    DenseMixinComparison,
    DenseMixinComplex,
    DenseMixinReduction,
    DenseMixinUnary,
)
from ..numeric import ops_for
from ..ops import random_cpu, sequence_cpu as seq

Number = Union[int, float, complex]
KindArg = Union[None, str, np.dtype, ElementKind]


def _infer_kind(data: Any, kind: KindArg) -> ElementKind:
    """
    Resolve the element kind for a constructor call.

    An explicit `kind` wins. Otherwise an ndarray (or another container)
    carrying a supported dtype keeps it, and anything else falls back to the
    default kind.
    """
    if kind is not None:
        return as_kind(kind)
    if isinstance(data, DenseCoreMixin):
        return data.kind
    if isinstance(data, np.ndarray):
        try:
            return ElementKind(data.dtype)
        except ValueError:
            pass
    return default_kind()


class Array(
    DenseMixinArithmetic,
    DenseMixinComparison,
    DenseMixinReduction,
    DenseMixinUnary,
    DenseMixinComplex,
    DenseCoreMixin,
    IArray,
):
    """
    One-dimensional numeric container.

    Parameters
    ----------
    data : array_like, optional
        Initial values. A NumPy array of the matching dtype is adopted
        without copying (ownership passes to the new `Array`); other inputs
        are converted. ``None`` creates an empty array.
    kind : str | numpy.dtype | ElementKind, optional
        Element kind. Defaults to the kind of `data` when it is an ndarray
        of a supported dtype, otherwise to `default_kind()`.

    Raises
    ------
    ShapeMismatchError
        If `data` is not one-dimensional.
    """

    def __init__(self, data: Any = None, *, kind: KindArg = None) -> None:
        k = _infer_kind(data, kind)
        if data is None:
            buf = np.empty(0, dtype=k.dtype)
        elif isinstance(data, DenseCoreMixin):
            buf = data.to_numpy().astype(k.dtype, copy=False)
        else:
            buf = np.ascontiguousarray(np.asarray(data, dtype=k.dtype))
        if buf.ndim != 1:
            raise ShapeMismatchError("Array", ("n",), buf.shape)
        if not buf.flags.writeable:
            buf = buf.copy()
        self._data = buf
        self._kind = k

    def __repr__(self) -> str:
        return f"Array(len={len(self)}, kind={self._kind})"

    def __str__(self) -> str:
        return self.to_string()

    @property
    def shape(self) -> tuple[int, ...]:
        return (len(self._data),)

    def _like(self, buf: np.ndarray, kind: Optional[ElementKind] = None) -> "Array":
        return Array(buf, kind=self._kind if kind is None else kind)

    # ----------------------------
    # Factories
    # ----------------------------
    @staticmethod
    def empty(*, kind: KindArg = None) -> "Array":
        """Array of length zero."""
        return Array(kind=kind)

    @staticmethod
    def full(n: int, value: Number, *, kind: KindArg = None) -> "Array":
        k = as_kind(kind)
        return Array(np.full(int(n), value, dtype=k.dtype), kind=k)

    @staticmethod
    def zeros(n: int, *, kind: KindArg = None) -> "Array":
        k = as_kind(kind)
        return Array(np.zeros(int(n), dtype=k.dtype), kind=k)

    @staticmethod
    def ones(n: int, *, kind: KindArg = None) -> "Array":
        k = as_kind(kind)
        return Array(np.ones(int(n), dtype=k.dtype), kind=k)

    @staticmethod
    def from_buffer(buffer: Any, *, kind: KindArg = None) -> "Array":
        """
        Take ownership of an existing linear buffer.

        A NumPy array of the matching dtype is adopted as-is; later writes
        through the caller's reference are visible in the array. A read-only
        buffer (such as one returned by `data()`) is copied instead.
        """
        return Array(buffer, kind=kind)

    @staticmethod
    def range(stop: int, *, kind: KindArg = None) -> "Array":
        """``[0, 1, ..., stop - 1]``."""
        k = as_kind(kind)
        return Array(seq.range(stop, k.dtype), kind=k)

    @staticmethod
    def arange(
        start: Number, stop: Number, step: Number = 1, *, kind: KindArg = None
    ) -> "Array":
        """
        Half-open range ``[start, stop)`` stepping by `step`.

        A step pointing away from `stop` yields an empty array.

        Raises
        ------
        ValueError
            If `step` is zero.
        """
        k = as_kind(kind)
        return Array(seq.arange(start, stop, step, k.dtype), kind=k)

    @staticmethod
    def linspace(
        start: Number,
        stop: Number,
        num: int,
        inclusive: bool = True,
        *,
        kind: KindArg = None,
    ) -> "Array":
        """
        `num` evenly spaced values from `start`.

        With ``inclusive=True`` the last value is exactly `stop`; otherwise
        `stop` is excluded. ``num=1`` gives ``[start]``.
        """
        k = as_kind(kind)
        return Array(seq.linspace(start, stop, num, inclusive, k.dtype), kind=k)

    @staticmethod
    def concat(arrays: Sequence["Array"], *, kind: KindArg = None) -> "Array":
        """
        Join arrays end to end.

        The result kind is `kind`, or the kind of the first input; every
        input must share it.
        """
        if kind is None and len(arrays) > 0:
            k = arrays[0].kind
        else:
            k = as_kind(kind)
        for a in arrays:
            if a.kind != k:
                raise ElementKindMismatchError("concat", str(k), str(a.kind))
        return Array(seq.concat([a._data for a in arrays], k.dtype), kind=k)

    @staticmethod
    def rand(
        n: int, *, kind: KindArg = None, rng: Optional[np.random.Generator] = None
    ) -> "Array":
        """Uniform samples on ``[0, 1)`` (both parts, for complex kinds)."""
        k = as_kind(kind)
        return Array(random_cpu.uniform(int(n), k, rng), kind=k)

    @staticmethod
    def randn(
        n: int, *, kind: KindArg = None, rng: Optional[np.random.Generator] = None
    ) -> "Array":
        """Standard-normal samples."""
        k = as_kind(kind)
        return Array(random_cpu.normal(int(n), k, rng), kind=k)

    # ----------------------------
    # Complex construction
    # ----------------------------
    @staticmethod
    def from_parts(re: Any, im: Any, *, kind: KindArg = None) -> "Array":
        """
        Build a complex array from real and imaginary parts.

        Parameters
        ----------
        re, im : Array or array_like
            Equal-length real parts.
        kind : optional
            Complex kind of the result. Defaults to the complex kind
            matching `re`'s precision.

        Raises
        ------
        ShapeMismatchError
            If the parts differ in length.
        """
        re_a = _real_operand(re, kind, "from_parts")
        im_a = _real_operand(im, re_a.kind, "from_parts")
        re_a._binary_op_kind_check(im_a, "from_parts")
        if len(re_a) != len(im_a):
            raise ShapeMismatchError("from_parts", re_a.shape, im_a.shape)
        k = _complex_of(kind, re_a.kind)
        return Array(ops_for(k).from_parts(re_a._data, im_a._data), kind=k)

    @staticmethod
    def from_real(re: Any, *, kind: KindArg = None) -> "Array":
        """Complex array with the given real parts and zero imaginary parts."""
        re_a = _real_operand(re, kind, "from_real")
        return Array.from_parts(re_a, Array.zeros(len(re_a), kind=re_a.kind), kind=kind)

    @staticmethod
    def from_imag(im: Any, *, kind: KindArg = None) -> "Array":
        """Complex array with zero real parts and the given imaginary parts."""
        im_a = _real_operand(im, kind, "from_imag")
        return Array.from_parts(Array.zeros(len(im_a), kind=im_a.kind), im_a, kind=kind)

    @staticmethod
    def from_polar(norm: Any, arg: Any, *, kind: KindArg = None) -> "Array":
        """
        Build a complex array from magnitudes and angles,
        ``z_i = norm_i * (cos(arg_i) + i sin(arg_i))``.
        """
        n_a = _real_operand(norm, kind, "from_polar")
        a_a = _real_operand(arg, n_a.kind, "from_polar")
        n_a._binary_op_kind_check(a_a, "from_polar")
        if len(n_a) != len(a_a):
            raise ShapeMismatchError("from_polar", n_a.shape, a_a.shape)
        k = _complex_of(kind, n_a.kind)
        return Array(ops_for(k).from_polar(n_a._data, a_a._data), kind=k)

    @staticmethod
    def from_interleaved(buffer: Any, *, kind: KindArg = None) -> "Array":
        """
        Build a complex array from ``[re0, im0, re1, im1, ...]``.

        Raises
        ------
        ShapeMismatchError
            If the buffer length is odd.
        """
        flat = _real_operand(buffer, kind, "from_interleaved")
        if len(flat) % 2:
            raise ShapeMismatchError("from_interleaved", ("2n",), flat.shape)
        re = Array(flat._data[0::2].copy(), kind=flat.kind)
        im = Array(flat._data[1::2].copy(), kind=flat.kind)
        return Array.from_parts(re, im, kind=kind)

    def interleave(self) -> "Array":
        """
        Return ``[re0, im0, re1, im1, ...]`` as a new real array.

        Raises
        ------
        ElementKindNotSupportedError
            On real arrays.
        """
        parts = self._require(ComplexParts, "interleave")
        out = np.empty(2 * len(self), dtype=self._kind.real_kind().dtype)
        out[0::2] = parts.real(self._data)
        out[1::2] = parts.imag(self._data)
        return Array(out, kind=self._kind.real_kind())

    # ----------------------------
    # Indexing
    # ----------------------------
    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def _check_index(self, i: Any) -> int:
        if not isinstance(i, (int, np.integer)) or isinstance(i, bool):
            raise TypeError(f"Array indices must be integers, got {type(i)!r}")
        i = int(i)
        if i < 0 or i >= len(self._data):
            raise IndexOutOfRangeError(i, len(self._data))
        return i

    def __getitem__(self, i: int) -> Any:
        return self._data[self._check_index(i)]

    def __setitem__(self, i: int, value: Number) -> None:
        v = self._scalar_operand(value, "setitem", self._scalar_types())
        self._data[self._check_index(i)] = v

    # ----------------------------
    # Search / selection
    # ----------------------------
    def any(self) -> bool:
        """True if any element is nonzero."""
        return seq.any(self._data)

    def all(self) -> bool:
        """True if every element is nonzero (vacuously true when empty)."""
        return seq.all(self._data)

    def find(self) -> List[int]:
        """Ascending indices of the nonzero elements."""
        return seq.find(self._data)

    def nonzero(self) -> List[int]:
        return seq.nonzero(self._data)

    def select(self, indices: Sequence[int]) -> "Array":
        """
        Gather ``self[indices[i]]`` into a new array.

        Raises
        ------
        IndexOutOfRangeError
            If any index is outside ``[0, len)``.
        """
        return self._like(seq.select(self._data, indices))

    def set(self, indices: Sequence[int], values: Any) -> None:
        """
        Scatter ``self[indices[i]] = values[i]`` in place.

        Raises
        ------
        ShapeMismatchError
            If `indices` and `values` differ in length.
        IndexOutOfRangeError
            If any index is outside ``[0, len)``.
        """
        if isinstance(values, DenseCoreMixin):
            self._binary_op_kind_check(values, "set")
            values = values._data
        else:
            values = np.asarray(values, dtype=self.dtype)
        seq.set_slice(self._data, indices, values)

    def set_all(self, indices: Sequence[int], value: Number) -> None:
        """Write the single value `value` at every position in `indices`."""
        v = self._scalar_operand(value, "set_all", self._scalar_types())
        seq.set_all(self._data, indices, v)

    # ----------------------------
    # Sorting
    # ----------------------------
    def argsort(self, reverse: bool = False) -> List[int]:
        """
        Stable ascending permutation; the array is not modified.

        With ``reverse=True`` the ascending permutation is reversed as a
        whole, so equal elements appear in reverse original order.

        Raises
        ------
        ElementKindNotSupportedError
            On complex arrays (no ordering).
        """
        self._require(Ordered, "argsort")
        return seq.argsort(self._data, reverse=reverse)

    def sort(self, reverse: bool = False) -> List[int]:
        """
        Sort the array in place and return the permutation applied.

        After the call, ``self[i] == old[perm[i]]``; writing the sorted values
        back with ``old.set(perm, self)`` reconstructs the original order.
        """
        self._require(Ordered, "sort")
        perm = seq.argsort(self._data, reverse=reverse)
        self._data[...] = self._data[perm]
        return perm

    # ----------------------------
    # Rendering
    # ----------------------------
    def to_string(self) -> str:
        """Elements on one line, separated by a single space."""
        return " ".join(str(v) for v in self._data)

    def to_string_col(self) -> str:
        """One element per line."""
        return "\n".join(str(v) for v in self._data)


def _real_operand(values: Any, kind: KindArg, op: str) -> Array:
    """
    Coerce a part (real components, magnitudes, angles) to a real `Array`.

    Plain sequences take the real kind matching `kind` (or the default
    kind). A complex `Array` is rejected.
    """
    if isinstance(values, Array):
        if not values.kind.is_real():
            raise ElementKindNotSupportedError(op=op, kind=str(values.kind))
        return values
    return Array(values, kind=as_kind(kind).real_kind())


def _complex_of(kind: KindArg, real_kind: ElementKind) -> ElementKind:
    if kind is None:
        return real_kind.complex_kind()
    return as_kind(kind).complex_kind()
