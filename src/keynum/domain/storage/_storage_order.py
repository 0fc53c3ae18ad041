"""
Storage-order flag for dense 2-D buffers.

A matrix stores its ``rows * cols`` elements in one contiguous buffer. The
storage order decides whether consecutive buffer positions walk along a row
(row-major, C-style) or down a column (column-major, Fortran-style). It is
fixed when a matrix is built and never flips implicitly.
"""

from enum import Enum


class StorageOrder(Enum):
    """
    Enumeration of dense storage orders.

    Attributes
    ----------
    ROW_MAJOR : StorageOrder
        ``offset = row * n_cols + col``.
    COL_MAJOR : StorageOrder
        ``offset = col * n_rows + row``.
    """

    ROW_MAJOR = "row_major"
    COL_MAJOR = "col_major"

    @property
    def row_major(self) -> bool:
        """True for `ROW_MAJOR`; the flag passed to the addressing function."""
        return self is StorageOrder.ROW_MAJOR

    @classmethod
    def from_flag(cls, row_major: bool) -> "StorageOrder":
        return cls.ROW_MAJOR if row_major else cls.COL_MAJOR
