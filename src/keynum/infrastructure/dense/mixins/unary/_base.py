"""
Unary elementwise maps for dense containers.

This module implements :class:`DenseMixinUnary`. Every map asks the
element-kind capability provider for exactly the capability it needs
(`SupportsLn` for ``ln``, `SupportsRound` for ``round``, ...), so kinds
without a capability fail with `ElementKindNotSupportedError` rather than
computing something surprising. Complex kinds, for example, provide no
rounding.

Domain errors are not raised: ``ln`` of a negative real, ``sqrt(-1)`` and
``asin(2)`` produce NaN, following IEEE semantics.
"""

from abc import ABC
from numbers import Number
from typing import Any

from .....domain._numeric import (
    SupportsAbs,
    SupportsAcos,
    SupportsAsin,
    SupportsCos,
    SupportsExp,
    SupportsIsNaN,
    SupportsLn,
    SupportsPow,
    SupportsRound,
    SupportsSin,
    SupportsSqrt,
)


class DenseMixinUnary(ABC):
    """
    Mixin defining elementwise maps.

    Each method returns a new container of the same shape; ``round_`` is the
    only in-place form.
    """

    def __neg__(self) -> Any:
        return self._like(-self._data)

    def __abs__(self) -> Any:
        return self.abs()

    def ln(self) -> Any:
        """Natural logarithm."""
        return self._like(self._require(SupportsLn, "ln").ln(self._data))

    def exp(self) -> Any:
        return self._like(self._require(SupportsExp, "exp").exp(self._data))

    def sqrt(self) -> Any:
        return self._like(self._require(SupportsSqrt, "sqrt").sqrt(self._data))

    def sin(self) -> Any:
        return self._like(self._require(SupportsSin, "sin").sin(self._data))

    def cos(self) -> Any:
        return self._like(self._require(SupportsCos, "cos").cos(self._data))

    def asin(self) -> Any:
        return self._like(self._require(SupportsAsin, "asin").asin(self._data))

    def acos(self) -> Any:
        return self._like(self._require(SupportsAcos, "acos").acos(self._data))

    def abs(self) -> Any:
        """
        Absolute value.

        Returns
        -------
        container
            For complex input this is the magnitude, held in the matching
            real kind.
        """
        return self._wrap(self._require(SupportsAbs, "abs").abs(self._data))

    def pow(self, e: Number) -> Any:
        """
        Raise every element to the scalar power `e`.

        Raises
        ------
        ElementKindMismatchError
            If `e` is complex and the container is real.
        """
        exponent = self._scalar_operand(e, "pow", self._scalar_types())
        return self._like(self._require(SupportsPow, "pow").pow(self._data, exponent))

    def __pow__(self, e: Number) -> Any:
        return self.pow(e)

    def round(self) -> Any:
        """
        Round to the nearest integer value, halves away from zero.

        Raises
        ------
        ElementKindNotSupportedError
            On complex containers.
        """
        return self._like(self._require(SupportsRound, "round").round(self._data))

    def round_(self) -> Any:
        """In-place `round`; returns ``self``."""
        self._data[...] = self._require(SupportsRound, "round_").round(self._data)
        return self

    def is_nan(self) -> Any:
        """Mask with ``1`` where the element is NaN (either part, if complex)."""
        nan = self._require(SupportsIsNaN, "is_nan").is_nan(self._data)
        return self._mask_like(nan.astype(self._kind.real_kind().dtype))
