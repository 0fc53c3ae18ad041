"""
Shared core for NumPy-backed dense containers.

`DenseCoreMixin` holds the state every keynum container has (a flat 1-D
NumPy buffer and an element kind) and the helpers the operation mixins rely
on: buffer accessors, capability lookup, operand validation and the generic
elementwise kernel driver.

Design notes
------------
- Concrete containers (`Array`, `Matrix`) supply ``shape`` and ``_like``,
  which rebuilds a container of the same shape (and storage order) around a
  new buffer. Mixins never import the concrete classes.
- ``__array_ufunc__ = None`` makes NumPy defer to our reflected operators,
  so ``np.float64(2.0) * arr`` returns a keynum container rather than an
  ndarray.
- The buffer length never changes after construction; accessors hand out
  views of fixed length.
"""

from __future__ import annotations

import numbers
from typing import Any, Callable, Optional, Type

import numpy as np

from ...domain._errors import (
    ElementKindMismatchError,
    ElementKindNotSupportedError,
    ShapeMismatchError,
)
from ...domain.kind import ElementKind, KindFamily
from ..numeric import ops_for


class DenseCoreMixin:
    """
    Buffer, kind and operand plumbing shared by arrays and matrices.

    Notes
    -----
    Host classes must set ``_data`` (1-D ``np.ndarray``) and ``_kind``
    (`ElementKind`) in ``__init__`` and implement ``shape`` and ``_like``.
    """

    __array_ufunc__ = None

    _data: np.ndarray
    _kind: ElementKind

    # ----------------------------
    # Host hooks
    # ----------------------------
    @property
    def shape(self) -> tuple[int, ...]:
        raise NotImplementedError

    def _like(self, buf: np.ndarray, kind: Optional[ElementKind] = None) -> Any:
        """Return a container with this one's shape wrapping `buf`."""
        raise NotImplementedError

    # ----------------------------
    # Kind
    # ----------------------------
    @property
    def kind(self) -> ElementKind:
        """Element kind of the stored values."""
        return self._kind

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def _state(self) -> KindFamily:
        """Dispatch state: the element-kind family."""
        return self._kind.family

    @property
    def ops(self) -> Any:
        """Capability provider for this container's element kind."""
        return ops_for(self._kind)

    def _require(self, capability: Type, op: str) -> Any:
        """
        Return the capability provider if it implements `capability`.

        Raises
        ------
        ElementKindNotSupportedError
            If this element kind lacks the capability.
        """
        ops = self.ops
        if not isinstance(ops, capability):
            self._raise_kind_not_supported(op)
        return ops

    def _scalar_types(self) -> tuple:
        """Scalar ABCs accepted as operands for this element family."""
        if self._kind.is_complex():
            return (numbers.Complex,)
        return (numbers.Real,)

    def _raise_kind_not_supported(self, op: str) -> None:
        raise ElementKindNotSupportedError(op=op, kind=str(self._kind))

    def _wrap(self, buf: np.ndarray) -> Any:
        """Wrap `buf` in a same-shaped container whose kind follows its dtype."""
        return self._like(buf, kind=ElementKind(buf.dtype))

    # ----------------------------
    # Buffer access
    # ----------------------------
    def numel(self) -> int:
        return int(self._data.size)

    def data(self) -> np.ndarray:
        """
        Return a read-only view of the flat buffer.

        Returns
        -------
        numpy.ndarray
            A non-writeable view sharing memory with this container.
        """
        view = self._data.view()
        view.flags.writeable = False
        return view

    def data_mut(self) -> np.ndarray:
        """
        Return a writable view of the flat buffer.

        Notes
        -----
        Writes through the view change this container. The view has a fixed
        length, so the container's length/shape invariant still holds.
        """
        return self._data.view()

    def to_numpy(self) -> np.ndarray:
        """Return a copy of the flat buffer."""
        return self._data.copy()

    def tolist(self) -> list:
        return self._data.tolist()

    # ----------------------------
    # Operand validation
    # ----------------------------
    def _binary_op_shape_check(self, other: "DenseCoreMixin", op: str) -> None:
        """
        Validate that `other` can be combined elementwise with this container.

        Broadcasting is not supported; shapes must match exactly.

        Raises
        ------
        ShapeMismatchError
            If shapes differ.
        """
        if self.shape != other.shape:
            raise ShapeMismatchError(op, self.shape, other.shape)

    def _binary_op_kind_check(self, other: "DenseCoreMixin", op: str) -> None:
        if self._kind != other._kind:
            raise ElementKindMismatchError(op, str(self._kind), str(other._kind))

    def _operand(self, other: Any, op: str, scalar_types: tuple) -> Any:
        """
        Resolve the right-hand side of an elementwise operation.

        Parameters
        ----------
        other : DenseCoreMixin or scalar
            Container of the same shape and kind, or a scalar.
        op : str
            Operation name used in error messages.
        scalar_types : tuple
            Scalar ABCs accepted for this element family (e.g.
            ``(numbers.Real,)`` for real containers).

        Returns
        -------
        numpy.ndarray or numpy scalar
            The operand ready for a NumPy ufunc.

        Raises
        ------
        ShapeMismatchError
            Container operand with a different shape (or layout).
        ElementKindMismatchError
            Container of another kind, or a scalar outside `scalar_types`
            (e.g., a complex scalar on a real container).
        TypeError
            Unsupported operand type.
        """
        if isinstance(other, DenseCoreMixin):
            self._binary_op_shape_check(other, op)
            self._binary_op_kind_check(other, op)
            return other._data
        if isinstance(other, scalar_types):
            return self._data.dtype.type(other)
        if isinstance(other, numbers.Number):
            raise ElementKindMismatchError(op, str(self._kind), type(other).__name__)
        raise TypeError(f"Unsupported operand type for {op}: {type(other)!r}")

    def _container_operand(self, other: Any, op: str) -> np.ndarray:
        """Buffer of a container operand, validated for shape and kind."""
        if not isinstance(other, DenseCoreMixin):
            raise TypeError(f"{op} expects a container operand, got {type(other)!r}")
        self._binary_op_shape_check(other, op)
        self._binary_op_kind_check(other, op)
        return other._data

    def _scalar_operand(self, v: Any, op: str, scalar_types: tuple) -> Any:
        """A scalar operand cast to this container's dtype."""
        if isinstance(v, DenseCoreMixin):
            raise TypeError(f"{op} expects a scalar operand, got {type(v)!r}")
        return self._operand(v, op, scalar_types)

    def _mask_like(self, mask: np.ndarray) -> Any:
        """Wrap a 0/1 mask buffer in a container of the matching real kind."""
        return self._like(mask, kind=self._kind.real_kind())

    def _elementwise(
        self,
        ufunc: Callable[[Any, Any], Any],
        other: Any,
        op: str,
        scalar_types: tuple,
        *,
        reflected: bool = False,
    ) -> Any:
        """
        Apply a binary ufunc and wrap the result in a new container.

        With ``reflected=True`` the operands are swapped, computing
        ``ufunc(other, self)`` for ``scalar - container`` style expressions.
        """
        rhs = self._operand(other, op, scalar_types)
        with np.errstate(all="ignore"):
            if reflected:
                out = ufunc(rhs, self._data)
            else:
                out = ufunc(self._data, rhs)
        return self._like(np.asarray(out, dtype=self._data.dtype))

    def _copy_from(self, other: "DenseCoreMixin") -> None:
        """Overwrite this buffer with `other`'s values (same shape and kind)."""
        self._data[...] = other._data
