"""
Comparison mixin producing 0/1 masks.

This module declares :class:`DenseMixinComparison`, which gives arrays scalar
comparisons (``eq``, ``ne``, ``gt``, ``lt``, ``ge``, ``le``), pairwise
comparisons against another array of the same length, logical combinators
over masks, and the ``< <= > >=`` operators.

Masks are containers of the real kind matching the source precision, holding
``1`` where the predicate holds and ``0`` elsewhere, so they can be fed
straight back into arithmetic.

Equality tests and the logical combinators work for every element kind and
are implemented here. Ordering comparisons are registered per element-kind
family; complex containers have no ordering control path and raise
`ElementKindNotSupportedError`.
"""

from abc import ABC
from typing import Any, Union

from ....ops import sequence_cpu as seq
from ..._dense_core import DenseCoreMixin

Number = Union[int, float, complex]


class DenseMixinComparison(ABC):
    """
    Mixin defining mask-producing comparisons.

    Notes
    -----
    - Pairwise forms require equal length and equal element kind.
    - NaN compares false under every predicate except ``ne``/``not_equal``.
    - Logical combinators treat any nonzero value (NaN included) as true.
    """

    # ----------------------------
    # Equality (every kind)
    # ----------------------------
    def eq(self, v: Number) -> Any:
        """Mask of ``x_i == v``."""
        rhs = self._scalar_operand(v, "eq", self._scalar_types())
        return self._mask_like(seq.eq(self._data, rhs, self._mask_dtype()))

    def ne(self, v: Number) -> Any:
        """Mask of ``x_i != v``."""
        rhs = self._scalar_operand(v, "ne", self._scalar_types())
        return self._mask_like(seq.ne(self._data, rhs, self._mask_dtype()))

    def equal(self, other: Any) -> Any:
        """Pairwise mask of ``a_i == b_i``."""
        rhs = self._container_operand(other, "equal")
        return self._mask_like(seq.equal(self._data, rhs, self._mask_dtype()))

    def not_equal(self, other: Any) -> Any:
        """Pairwise mask of ``a_i != b_i``."""
        rhs = self._container_operand(other, "not_equal")
        return self._mask_like(seq.not_equal(self._data, rhs, self._mask_dtype()))

    # ----------------------------
    # Ordering (real kinds)
    # ----------------------------
    def gt(self, v: Number) -> Any:
        """
        Mask of ``x_i > v``.

        Raises
        ------
        ElementKindNotSupportedError
            On complex containers.
        """
        ...

    def lt(self, v: Number) -> Any:
        """Mask of ``x_i < v``."""
        ...

    def ge(self, v: Number) -> Any:
        """Mask of ``x_i >= v``."""
        ...

    def le(self, v: Number) -> Any:
        """Mask of ``x_i <= v``."""
        ...

    def greater_than(self, other: Any) -> Any:
        """Pairwise mask of ``a_i > b_i``."""
        ...

    def less_than(self, other: Any) -> Any:
        """Pairwise mask of ``a_i < b_i``."""
        ...

    def greater_equal(self, other: Any) -> Any:
        """Pairwise mask of ``a_i >= b_i``."""
        ...

    def less_equal(self, other: Any) -> Any:
        """Pairwise mask of ``a_i <= b_i``."""
        ...

    # ----------------------------
    # Operators
    # ----------------------------
    def __gt__(self, other: Union[Any, Number]) -> Any:
        """``a > b``: pairwise for a container operand, scalar otherwise."""
        if isinstance(other, DenseCoreMixin):
            return self.greater_than(other)
        return self.gt(other)

    def __lt__(self, other: Union[Any, Number]) -> Any:
        if isinstance(other, DenseCoreMixin):
            return self.less_than(other)
        return self.lt(other)

    def __ge__(self, other: Union[Any, Number]) -> Any:
        if isinstance(other, DenseCoreMixin):
            return self.greater_equal(other)
        return self.ge(other)

    def __le__(self, other: Union[Any, Number]) -> Any:
        if isinstance(other, DenseCoreMixin):
            return self.less_equal(other)
        return self.le(other)

    # ----------------------------
    # Logical combinators
    # ----------------------------
    def logical_and(self, other: Any) -> Any:
        """Pairwise mask of ``a_i != 0 and b_i != 0``."""
        rhs = self._container_operand(other, "logical_and")
        return self._mask_like(seq.logical_and(self._data, rhs, self._mask_dtype()))

    def logical_or(self, other: Any) -> Any:
        """Pairwise mask of ``a_i != 0 or b_i != 0``."""
        rhs = self._container_operand(other, "logical_or")
        return self._mask_like(seq.logical_or(self._data, rhs, self._mask_dtype()))

    def logical_not(self) -> Any:
        """Mask of ``x_i == 0``."""
        return self._mask_like(seq.logical_not(self._data, self._mask_dtype()))

    def _mask_dtype(self):
        return self._kind.real_kind().dtype
