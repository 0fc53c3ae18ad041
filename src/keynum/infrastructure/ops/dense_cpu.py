"""
CPU dense-storage kernels for keynum (NumPy).

This module implements the flat-buffer addressing scheme shared by arrays
and matrices, and every 2-D operation built on it: element access, row and
column traversal, row selection, reordering, matrix-vector and
matrix-matrix products, and text rendering.

Addressing
----------
A ``n_rows x n_cols`` matrix lives in one contiguous 1-D buffer:

- row-major:    ``offset = row * n_cols + col``
- column-major: ``offset = col * n_rows + row``

`ix` is the only place that formula appears. It is pure and accepts NumPy
integer arrays as well as Python ints, so whole rows or columns can be
addressed in one call.

Design goals
------------
- Correctness over performance: `mat_mat` walks every output cell and takes
  a row-by-column dot product, with no blocking.
- Callers validate shapes and bounds; kernels assume valid input except
  where a check is cheap and guards against silent misuse (storage-order
  slices, product shapes).
"""

from __future__ import annotations

from typing import Any, Callable, Iterator, Sequence

import numpy as np

from ...domain._errors import ShapeMismatchError, StorageOrderError


def ix(n_rows: int, n_cols: int, row: Any, col: Any, row_major: bool) -> Any:
    """
    Map a ``(row, col)`` coordinate to a linear buffer offset.

    Parameters
    ----------
    n_rows, n_cols : int
        Logical matrix shape.
    row, col : int or numpy.ndarray
        Coordinate(s). Arrays are combined elementwise.
    row_major : bool
        Storage order flag.

    Returns
    -------
    int or numpy.ndarray
        The offset(s) into the flat buffer.
    """
    if row_major:
        return row * n_cols + col
    return col * n_rows + row


def get(
    n_rows: int, n_cols: int, buf: np.ndarray, row: int, col: int, row_major: bool
) -> Any:
    return buf[ix(n_rows, n_cols, row, col, row_major)]


def set(
    n_rows: int,
    n_cols: int,
    buf: np.ndarray,
    row: int,
    col: int,
    value: Any,
    row_major: bool,
) -> None:
    buf[ix(n_rows, n_cols, row, col, row_major)] = value


def zeros(n_rows: int, n_cols: int, dtype: np.dtype) -> np.ndarray:
    return np.zeros(n_rows * n_cols, dtype=dtype)


def ones(n_rows: int, n_cols: int, dtype: np.dtype) -> np.ndarray:
    return np.ones(n_rows * n_cols, dtype=dtype)


def identity(n: int, dtype: np.dtype) -> np.ndarray:
    """
    Return the flat buffer of an ``n x n`` identity matrix.

    The diagonal has the same offsets in both storage orders.
    """
    buf = zeros(n, n, dtype)
    d = np.arange(n)
    buf[ix(n, n, d, d, True)] = 1
    return buf


def from_fn(
    n_rows: int,
    n_cols: int,
    fn: Callable[[int, int], Any],
    dtype: np.dtype,
    row_major: bool,
) -> np.ndarray:
    """
    Build a buffer whose ``(row, col)`` element is ``fn(row, col)``.
    """
    buf = zeros(n_rows, n_cols, dtype)
    for r in range(n_rows):
        for c in range(n_cols):
            buf[ix(n_rows, n_cols, r, c, row_major)] = fn(r, c)
    return buf


def row_offsets(n_rows: int, n_cols: int, row: int, row_major: bool) -> np.ndarray:
    """Offsets of every element of `row`, in column order."""
    return ix(n_rows, n_cols, row, np.arange(n_cols), row_major)


def col_offsets(n_rows: int, n_cols: int, col: int, row_major: bool) -> np.ndarray:
    """Offsets of every element of `col`, in row order."""
    return ix(n_rows, n_cols, np.arange(n_rows), col, row_major)


def iter_row(
    n_rows: int, n_cols: int, buf: np.ndarray, row: int, row_major: bool
) -> Iterator[Any]:
    """Lazily yield the elements of `row`."""
    for c in range(n_cols):
        yield buf[ix(n_rows, n_cols, row, c, row_major)]


def iter_col(
    n_rows: int, n_cols: int, buf: np.ndarray, col: int, row_major: bool
) -> Iterator[Any]:
    """Lazily yield the elements of `col`."""
    for r in range(n_rows):
        yield buf[ix(n_rows, n_cols, r, col, row_major)]


def row_slice(
    n_rows: int, n_cols: int, buf: np.ndarray, row: int, row_major: bool
) -> np.ndarray:
    """
    Return the contiguous view of `row`.

    Raises
    ------
    StorageOrderError
        If the buffer is column-major (a row is not contiguous there).
    """
    if not row_major:
        raise StorageOrderError("row_slice", "row_major", "col_major")
    start = ix(n_rows, n_cols, row, 0, True)
    return buf[start : start + n_cols]


def col_slice(
    n_rows: int, n_cols: int, buf: np.ndarray, col: int, row_major: bool
) -> np.ndarray:
    """
    Return the contiguous view of `col`.

    Raises
    ------
    StorageOrderError
        If the buffer is row-major (a column is not contiguous there).
    """
    if row_major:
        raise StorageOrderError("col_slice", "col_major", "row_major")
    start = ix(n_rows, n_cols, 0, col, False)
    return buf[start : start + n_rows]


def select_rows(
    n_rows: int, n_cols: int, buf: np.ndarray, rows: Sequence[int], row_major: bool
) -> np.ndarray:
    """
    Gather `rows` into a new row-major buffer of shape ``len(rows) x n_cols``.

    The source may be in either order; the result is always row-major.
    """
    out = np.empty(len(rows) * n_cols, dtype=buf.dtype)
    for i, r in enumerate(rows):
        out[i * n_cols : (i + 1) * n_cols] = buf[
            row_offsets(n_rows, n_cols, r, row_major)
        ]
    return out


def reorder(
    n_rows: int,
    n_cols: int,
    buf: np.ndarray,
    src_row_major: bool,
    dst_row_major: bool,
) -> np.ndarray:
    """
    Return a copy of `buf` laid out in the destination storage order.
    """
    if src_row_major == dst_row_major:
        return buf.copy()
    out = np.empty_like(buf)
    for r in range(n_rows):
        out[row_offsets(n_rows, n_cols, r, dst_row_major)] = buf[
            row_offsets(n_rows, n_cols, r, src_row_major)
        ]
    return out


def mat_vec(
    n_rows: int, n_cols: int, buf: np.ndarray, v: np.ndarray, row_major: bool
) -> np.ndarray:
    """
    Matrix-vector product.

    Parameters
    ----------
    buf : numpy.ndarray
        Flat matrix buffer of length ``n_rows * n_cols``.
    v : numpy.ndarray
        Vector of length ``n_cols``.

    Returns
    -------
    numpy.ndarray
        Vector of length ``n_rows`` whose i-th entry is the dot product of
        row i with `v`.

    Raises
    ------
    ShapeMismatchError
        If ``len(v) != n_cols``.
    """
    if len(v) != n_cols:
        raise ShapeMismatchError("mat_vec", (n_rows, n_cols), (len(v),))

    y = np.empty(n_rows, dtype=np.result_type(buf.dtype, v.dtype))
    with np.errstate(all="ignore"):
        for r in range(n_rows):
            y[r] = np.dot(buf[row_offsets(n_rows, n_cols, r, row_major)], v)
    return y


def mat_mat(
    a_rows: int,
    a_cols: int,
    a: np.ndarray,
    a_row_major: bool,
    b_rows: int,
    b_cols: int,
    b: np.ndarray,
    b_row_major: bool,
    out_row_major: bool,
) -> np.ndarray:
    """
    Matrix-matrix product ``C = A @ B``.

    Each operand is read through its own storage order and the result is
    written in `out_row_major` order, so mixed-order operands are handled
    explicitly rather than reinterpreted.

    Returns
    -------
    numpy.ndarray
        Flat ``a_rows x b_cols`` buffer.

    Raises
    ------
    ShapeMismatchError
        If ``a_cols != b_rows``.
    """
    if a_cols != b_rows:
        raise ShapeMismatchError("mat_mat", (a_rows, a_cols), (b_rows, b_cols))

    c = np.zeros(a_rows * b_cols, dtype=np.result_type(a.dtype, b.dtype))
    with np.errstate(all="ignore"):
        for i in range(a_rows):
            a_row = a[row_offsets(a_rows, a_cols, i, a_row_major)]
            for j in range(b_cols):
                b_col = b[col_offsets(b_rows, b_cols, j, b_row_major)]
                c[ix(a_rows, b_cols, i, j, out_row_major)] = np.dot(a_row, b_col)
    return c


def to_string(n_rows: int, n_cols: int, buf: np.ndarray, row_major: bool) -> str:
    """
    Render a buffer as text: one row per line, elements separated by a
    single space, no trailing separator.
    """
    lines = []
    for r in range(n_rows):
        lines.append(" ".join(str(v) for v in iter_row(n_rows, n_cols, buf, r, row_major)))
    return "\n".join(lines)
