"""
Arithmetic mixin defining elementwise operators for dense containers.

This module declares :class:`DenseMixinArithmetic`, the mixin that fixes the
public API of ``+ - * /`` (plain, reflected and in-place) for arrays and
matrices.

The forward operators carry no kernel here. Family-specific implementations
are registered through `dense_control_path_manager`: the real path accepts
real scalars, the complex path accepts any complex scalar. Reflected and
in-place forms are written once in terms of the forward operators.
"""

from abc import ABC
from numbers import Number
from typing import Any, Union


class DenseMixinArithmetic(ABC):
    """
    Mixin defining elementwise arithmetic for dense containers.

    Notes
    -----
    - Container operands must have the same shape (and, for matrices, the
      same storage order) and the same element kind. There is no
      broadcasting.
    - A scalar operand applies to every element.
    - Results are new containers; in-place forms write into the receiver's
      buffer and return the receiver.
    """

    # ----------------------------
    # Addition
    # ----------------------------
    def __add__(self, other: Union[Any, Number]) -> Any:
        """
        Elementwise addition ``self + other``.

        Raises
        ------
        ShapeMismatchError
            Container operand of a different shape.
        ElementKindMismatchError
            Operand of a different element kind (e.g., complex scalar on a
            real container).
        """
        ...

    def __radd__(self, other: Number) -> Any:
        return self.__add__(other)

    def __iadd__(self, other: Union[Any, Number]) -> Any:
        self._copy_from(self.__add__(other))
        return self

    # ----------------------------
    # Subtraction
    # ----------------------------
    def __sub__(self, other: Union[Any, Number]) -> Any:
        """Elementwise subtraction ``self - other``."""
        ...

    def __rsub__(self, other: Number) -> Any:
        """Elementwise ``other - self`` for a scalar left operand."""
        ...

    def __isub__(self, other: Union[Any, Number]) -> Any:
        self._copy_from(self.__sub__(other))
        return self

    # ----------------------------
    # Multiplication
    # ----------------------------
    def __mul__(self, other: Union[Any, Number]) -> Any:
        """Elementwise (Hadamard) product ``self * other``."""
        ...

    def __rmul__(self, other: Number) -> Any:
        return self.__mul__(other)

    def __imul__(self, other: Union[Any, Number]) -> Any:
        self._copy_from(self.__mul__(other))
        return self

    # ----------------------------
    # True division
    # ----------------------------
    def __truediv__(self, other: Union[Any, Number]) -> Any:
        """
        Elementwise quotient ``self / other``.

        Notes
        -----
        Division by zero follows IEEE semantics (infinity or NaN); no error
        is raised.
        """
        ...

    def __rtruediv__(self, other: Number) -> Any:
        """Elementwise ``other / self`` for a scalar left operand."""
        ...

    def __itruediv__(self, other: Union[Any, Number]) -> Any:
        self._copy_from(self.__truediv__(other))
        return self
