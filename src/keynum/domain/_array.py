"""
Array and matrix interface definitions.

This module defines the domain-level interfaces for keynum containers using
structural typing. `IDense` captures what every dense container shares (an
element kind, a shape, a flat buffer and elementwise arithmetic); `IArray`
and `IMatrix` add the rank-specific surface.

Notes
-----
The protocols mirror the public API of the NumPy-backed `Array` and
`Matrix` so that callers can type against the contract instead of the
concrete classes.
"""

from __future__ import annotations

from typing import Any, Iterator, Protocol, Sequence, Union, runtime_checkable

from .kind._kind_protocol import ElementKindLike
from .storage._storage_order import StorageOrder

Number = Union[int, float, complex]


@runtime_checkable
class IDense(Protocol):
    """
    Dense container interface shared by arrays and matrices.
    """

    @property
    def kind(self) -> ElementKindLike:
        """Element kind of the stored values."""
        ...

    @property
    def shape(self) -> tuple[int, ...]:
        """``(n,)`` for arrays, ``(rows, cols)`` for matrices."""
        ...

    def numel(self) -> int: ...

    def data(self) -> Any:
        """
        Return a read-only view of the flat buffer.

        Notes
        -----
        The view cannot be written through; use `data_mut` for in-place
        buffer edits. Neither accessor can change the buffer length.
        """
        ...

    def data_mut(self) -> Any:
        """Return a writable view of the flat buffer (fixed length)."""
        ...

    def to_numpy(self) -> Any:
        """Return a copy of the values as a backend-native array."""
        ...

    def to_string(self) -> str: ...

    def __add__(self, other: Union["IDense", Number]) -> "IDense": ...
    def __sub__(self, other: Union["IDense", Number]) -> "IDense": ...
    def __mul__(self, other: Union["IDense", Number]) -> "IDense": ...
    def __truediv__(self, other: Union["IDense", Number]) -> "IDense": ...
    def __neg__(self) -> "IDense": ...


@runtime_checkable
class IArray(IDense, Protocol):
    """
    One-dimensional numeric container.
    """

    def __len__(self) -> int: ...
    def __getitem__(self, index: int) -> Any: ...
    def __setitem__(self, index: int, value: Number) -> None: ...
    def __iter__(self) -> Iterator[Any]: ...

    def sum(self) -> Any: ...
    def prod(self) -> Any: ...
    def mean(self) -> Any: ...
    def std(self) -> Any: ...
    def dot(self, other: "IArray") -> Any: ...
    def norm2(self) -> Any: ...
    def norm_inf(self) -> Any: ...

    def find(self) -> list[int]: ...
    def select(self, indices: Sequence[int]) -> "IArray": ...
    def set(self, indices: Sequence[int], values: Sequence[Number]) -> None: ...

    def sort(self, reverse: bool = False) -> list[int]:
        """Sort in place and return the permutation that was applied."""
        ...

    def argsort(self, reverse: bool = False) -> list[int]:
        """Return the sorting permutation without modifying the array."""
        ...


@runtime_checkable
class IMatrix(IDense, Protocol):
    """
    Two-dimensional numeric container with an explicit storage order.
    """

    @property
    def rows(self) -> int: ...

    @property
    def cols(self) -> int: ...

    @property
    def order(self) -> StorageOrder: ...

    def get(self, row: int, col: int) -> Any: ...
    def set(self, row: int, col: int, value: Number) -> None: ...
    def row(self, row: int) -> Iterator[Any]: ...
    def col(self, col: int) -> Iterator[Any]: ...
    def select_rows(self, rows: Sequence[int]) -> "IMatrix": ...
    def mat_vec(self, v: IArray) -> IArray: ...
    def mat_mat(self, other: "IMatrix") -> "IMatrix": ...
