"""
Concrete dense two-dimensional container (NumPy backend).

`Matrix` stores ``rows * cols`` elements in a single flat NumPy buffer plus
a `StorageOrder` flag fixed at construction. Every coordinate is turned into
a buffer offset by `dense_cpu.ix`, so the same algorithms serve row-major and
column-major matrices without a second container type.

Design notes
------------
- Elementwise operators require equal shape *and* equal storage order;
  combining orders raises `StorageOrderError`. Use `to_order` to normalize
  explicitly.
- `mat_mat` reads each operand through its own order and writes the result
  in the left operand's order.
- `select_rows` always materializes a row-major matrix.
"""

from __future__ import annotations

from typing import Any, Callable, Iterator, Optional, Sequence, Union

import numpy as np

from ...domain._array import IMatrix
from ...domain._errors import (
    IndexOutOfRangeError,
    ShapeMismatchError,
    StorageOrderError,
)
from ...domain.kind import ElementKind, as_kind
from ...domain.storage import StorageOrder
from ..array import Array
from ..dense._dense_core import DenseCoreMixin
from ..dense.mixins import DenseMixinArithmetic, DenseMixinComplex, DenseMixinUnary
from ..ops import dense_cpu, random_cpu

Number = Union[int, float, complex]
KindArg = Union[None, str, np.dtype, ElementKind]


def _as_index(i: Any, axis: str) -> int:
    if not isinstance(i, (int, np.integer)) or isinstance(i, bool):
        raise TypeError(f"Matrix {axis} indices must be integers, got {type(i)!r}")
    return int(i)


def _split_key(key: Any) -> tuple:
    if not isinstance(key, tuple) or len(key) != 2:
        raise TypeError(f"Matrix subscripts take a (row, col) pair, got {key!r}")
    return key


class Matrix(
    DenseMixinArithmetic,
    DenseMixinUnary,
    DenseMixinComplex,
    DenseCoreMixin,
    IMatrix,
):
    """
    Dense matrix with an explicit storage order.

    Parameters
    ----------
    rows, cols : int
        Logical shape.
    buffer : array_like, optional
        Flat buffer of length ``rows * cols`` laid out in `order`, or a
        nested ``rows x cols`` sequence (flattened in `order`). ``None``
        gives a zero matrix. A flat ndarray of the matching dtype is adopted
        without copying.
    order : StorageOrder, optional
        Storage order, ``StorageOrder.ROW_MAJOR`` by default.
    kind : str | numpy.dtype | ElementKind, optional
        Element kind; defaults to the buffer's dtype when supported,
        otherwise `default_kind()`.

    Raises
    ------
    ShapeMismatchError
        If the buffer does not hold exactly ``rows * cols`` elements.
    """

    def __init__(
        self,
        rows: int,
        cols: int,
        buffer: Any = None,
        *,
        order: StorageOrder = StorageOrder.ROW_MAJOR,
        kind: KindArg = None,
    ) -> None:
        rows, cols = int(rows), int(cols)
        if rows < 0 or cols < 0:
            raise ValueError(f"Matrix shape must be non-negative, got ({rows}, {cols})")
        if not isinstance(order, StorageOrder):
            raise TypeError(f"order must be a StorageOrder, got {type(order)!r}")

        if buffer is None:
            k = as_kind(kind)
            buf = dense_cpu.zeros(rows, cols, k.dtype)
        else:
            if kind is None and isinstance(buffer, np.ndarray):
                try:
                    k = ElementKind(buffer.dtype)
                except ValueError:
                    k = as_kind(None)
            else:
                k = as_kind(kind)
            buf = np.asarray(buffer, dtype=k.dtype)
            if buf.ndim == 2:
                if buf.shape != (rows, cols):
                    raise ShapeMismatchError("Matrix", (rows, cols), buf.shape)
                buf = buf.ravel(order="C" if order.row_major else "F").copy()
            buf = np.ascontiguousarray(buf)
            if buf.ndim != 1 or buf.size != rows * cols:
                raise ShapeMismatchError("Matrix", (rows * cols,), buf.shape)
            if not buf.flags.writeable:
                buf = buf.copy()

        self._rows = rows
        self._cols = cols
        self._order = order
        self._data = buf
        self._kind = k

    def __repr__(self) -> str:
        return (
            f"Matrix(rows={self._rows}, cols={self._cols}, "
            f"order={self._order.value}, kind={self._kind})"
        )

    def __str__(self) -> str:
        return self.to_string()

    # ----------------------------
    # Shape and layout
    # ----------------------------
    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._cols)

    @property
    def order(self) -> StorageOrder:
        """Storage order; fixed for the lifetime of the matrix."""
        return self._order

    @property
    def _row_major(self) -> bool:
        return self._order.row_major

    def _like(self, buf: np.ndarray, kind: Optional[ElementKind] = None) -> "Matrix":
        return Matrix(
            self._rows,
            self._cols,
            buf,
            order=self._order,
            kind=self._kind if kind is None else kind,
        )

    def _binary_op_shape_check(self, other: DenseCoreMixin, op: str) -> None:
        """
        Shapes must match and, for two matrices, so must storage order.

        Raises
        ------
        ShapeMismatchError
            If the shapes differ.
        StorageOrderError
            If the storage orders differ.
        """
        super()._binary_op_shape_check(other, op)
        if isinstance(other, Matrix) and other._order is not self._order:
            raise StorageOrderError(op, self._order.value, other._order.value)

    # ----------------------------
    # Factories
    # ----------------------------
    @staticmethod
    def zeros(
        rows: int,
        cols: int,
        *,
        order: StorageOrder = StorageOrder.ROW_MAJOR,
        kind: KindArg = None,
    ) -> "Matrix":
        return Matrix(rows, cols, order=order, kind=kind)

    @staticmethod
    def ones(
        rows: int,
        cols: int,
        *,
        order: StorageOrder = StorageOrder.ROW_MAJOR,
        kind: KindArg = None,
    ) -> "Matrix":
        k = as_kind(kind)
        return Matrix(rows, cols, dense_cpu.ones(rows, cols, k.dtype), order=order, kind=k)

    @staticmethod
    def full(
        rows: int,
        cols: int,
        value: Number,
        *,
        order: StorageOrder = StorageOrder.ROW_MAJOR,
        kind: KindArg = None,
    ) -> "Matrix":
        k = as_kind(kind)
        buf = np.full(int(rows) * int(cols), value, dtype=k.dtype)
        return Matrix(rows, cols, buf, order=order, kind=k)

    @staticmethod
    def identity(
        n: int,
        *,
        order: StorageOrder = StorageOrder.ROW_MAJOR,
        kind: KindArg = None,
    ) -> "Matrix":
        """``n x n`` identity matrix."""
        k = as_kind(kind)
        return Matrix(n, n, dense_cpu.identity(int(n), k.dtype), order=order, kind=k)

    @staticmethod
    def from_buffer(
        rows: int,
        cols: int,
        buffer: Any,
        *,
        order: StorageOrder = StorageOrder.ROW_MAJOR,
        kind: KindArg = None,
    ) -> "Matrix":
        """
        Take ownership of a flat buffer laid out in `order`.
        A read-only buffer is copied rather than adopted.

        Raises
        ------
        ShapeMismatchError
            If ``len(buffer) != rows * cols``.
        """
        return Matrix(rows, cols, buffer, order=order, kind=kind)

    @staticmethod
    def from_fn(
        rows: int,
        cols: int,
        fn: Callable[[int, int], Number],
        *,
        order: StorageOrder = StorageOrder.ROW_MAJOR,
        kind: KindArg = None,
    ) -> "Matrix":
        """Matrix whose ``(r, c)`` element is ``fn(r, c)``."""
        k = as_kind(kind)
        buf = dense_cpu.from_fn(int(rows), int(cols), fn, k.dtype, order.row_major)
        return Matrix(rows, cols, buf, order=order, kind=k)

    @staticmethod
    def rand(
        rows: int,
        cols: int,
        *,
        order: StorageOrder = StorageOrder.ROW_MAJOR,
        kind: KindArg = None,
        rng: Optional[np.random.Generator] = None,
    ) -> "Matrix":
        """Uniform samples on ``[0, 1)``."""
        k = as_kind(kind)
        buf = random_cpu.uniform(int(rows) * int(cols), k, rng)
        return Matrix(rows, cols, buf, order=order, kind=k)

    @staticmethod
    def randn(
        rows: int,
        cols: int,
        *,
        order: StorageOrder = StorageOrder.ROW_MAJOR,
        kind: KindArg = None,
        rng: Optional[np.random.Generator] = None,
    ) -> "Matrix":
        """Standard-normal samples."""
        k = as_kind(kind)
        buf = random_cpu.normal(int(rows) * int(cols), k, rng)
        return Matrix(rows, cols, buf, order=order, kind=k)

    # ----------------------------
    # Element access
    # ----------------------------
    def _check_row(self, r: int) -> int:
        r = _as_index(r, "row")
        if r < 0 or r >= self._rows:
            raise IndexOutOfRangeError(r, self._rows, axis="row")
        return r

    def _check_col(self, c: int) -> int:
        c = _as_index(c, "col")
        if c < 0 or c >= self._cols:
            raise IndexOutOfRangeError(c, self._cols, axis="col")
        return c

    def get(self, row: int, col: int) -> Any:
        r, c = self._check_row(row), self._check_col(col)
        return dense_cpu.get(self._rows, self._cols, self._data, r, c, self._row_major)

    def set(self, row: int, col: int, value: Number) -> None:
        r, c = self._check_row(row), self._check_col(col)
        v = self._scalar_operand(value, "set", self._scalar_types())
        dense_cpu.set(self._rows, self._cols, self._data, r, c, v, self._row_major)

    def __getitem__(self, key: tuple) -> Any:
        row, col = _split_key(key)
        return self.get(row, col)

    def __setitem__(self, key: tuple, value: Number) -> None:
        row, col = _split_key(key)
        self.set(row, col, value)

    # ----------------------------
    # Rows and columns
    # ----------------------------
    def row(self, row: int) -> Iterator[Any]:
        """Lazily iterate the elements of `row`, left to right."""
        r = self._check_row(row)
        return dense_cpu.iter_row(self._rows, self._cols, self._data, r, self._row_major)

    def col(self, col: int) -> Iterator[Any]:
        """Lazily iterate the elements of `col`, top to bottom."""
        c = self._check_col(col)
        return dense_cpu.iter_col(self._rows, self._cols, self._data, c, self._row_major)

    def row_slice(self, row: int) -> np.ndarray:
        """
        Read-only contiguous view of `row`.

        Raises
        ------
        StorageOrderError
            If the matrix is column-major.
        """
        r = self._check_row(row)
        view = dense_cpu.row_slice(self._rows, self._cols, self._data, r, self._row_major)
        view.flags.writeable = False
        return view

    def col_slice(self, col: int) -> np.ndarray:
        """
        Read-only contiguous view of `col`.

        Raises
        ------
        StorageOrderError
            If the matrix is row-major.
        """
        c = self._check_col(col)
        view = dense_cpu.col_slice(self._rows, self._cols, self._data, c, self._row_major)
        view.flags.writeable = False
        return view

    def select_rows(self, rows: Sequence[int]) -> "Matrix":
        """
        New row-major matrix holding the requested rows in the given order.

        Rows may repeat. The result is row-major whatever this matrix's
        order is.
        """
        picked = [self._check_row(r) for r in rows]
        buf = dense_cpu.select_rows(
            self._rows, self._cols, self._data, picked, self._row_major
        )
        return Matrix(
            len(picked), self._cols, buf, order=StorageOrder.ROW_MAJOR, kind=self._kind
        )

    def to_order(self, order: StorageOrder) -> "Matrix":
        """Copy of this matrix laid out in `order`."""
        buf = dense_cpu.reorder(
            self._rows, self._cols, self._data, self._row_major, order.row_major
        )
        return Matrix(self._rows, self._cols, buf, order=order, kind=self._kind)

    # ----------------------------
    # Products
    # ----------------------------
    def mat_vec(self, v: Array) -> Array:
        """
        Matrix-vector product; ``y[i]`` is the dot product of row i with `v`.

        Raises
        ------
        ShapeMismatchError
            If ``len(v) != cols``.
        ElementKindMismatchError
            If the element kinds differ.
        """
        if not isinstance(v, Array):
            raise TypeError(f"mat_vec expects an Array, got {type(v)!r}")
        self._binary_op_kind_check(v, "mat_vec")
        y = dense_cpu.mat_vec(self._rows, self._cols, self._data, v._data, self._row_major)
        return Array(y, kind=self._kind)

    def mat_mat(self, other: "Matrix") -> "Matrix":
        """
        Matrix-matrix product ``self @ other``, in this matrix's order.

        Raises
        ------
        ShapeMismatchError
            If ``self.cols != other.rows``.
        ElementKindMismatchError
            If the element kinds differ.
        """
        if not isinstance(other, Matrix):
            raise TypeError(f"mat_mat expects a Matrix, got {type(other)!r}")
        self._binary_op_kind_check(other, "mat_mat")
        c = dense_cpu.mat_mat(
            self._rows,
            self._cols,
            self._data,
            self._row_major,
            other._rows,
            other._cols,
            other._data,
            other._row_major,
            self._row_major,
        )
        return Matrix(self._rows, other._cols, c, order=self._order, kind=self._kind)

    def __matmul__(self, other: Union["Matrix", Array]) -> Union["Matrix", Array]:
        if isinstance(other, Array):
            return self.mat_vec(other)
        return self.mat_mat(other)

    # ----------------------------
    # Rendering
    # ----------------------------
    def to_string(self) -> str:
        """One row per line, elements separated by a single space."""
        return dense_cpu.to_string(self._rows, self._cols, self._data, self._row_major)
