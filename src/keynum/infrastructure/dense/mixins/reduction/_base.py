"""
Reduction mixin for one-dimensional containers.

This module declares :class:`DenseMixinReduction`: sums and products,
running totals, mean and population standard deviation, Euclidean and
infinity norms, the plain (non-conjugating) dot product, the discrete
difference, and extrema with their positions.

Reductions that make sense for every element kind are implemented here in
terms of `keynum.infrastructure.ops.sequence_cpu`. Extrema need an ordering
and are registered per element-kind family in `_dense_extrema`; complex
containers raise `ElementKindNotSupportedError` for them.
"""

from abc import ABC
from typing import Any

from .....domain._numeric import HasOne, HasZero
from ....numeric import ops_for
from ....ops import sequence_cpu as seq


class DenseMixinReduction(ABC):
    """
    Mixin defining reductions over a 1-D buffer.

    Notes
    -----
    - ``sum`` of an empty container is zero and ``prod`` is one.
    - ``mean``, ``std``, ``diff`` and the extrema raise `EmptyInputError`
      on empty input.
    - Scalars are returned as NumPy scalars of the container's dtype
      (``std`` and the norms return the matching real dtype).
    """

    def sum(self) -> Any:
        return seq.sum(self._data, self._require(HasZero, "sum").zero())

    def prod(self) -> Any:
        return seq.prod(self._data, self._require(HasOne, "prod").one())

    def cumsum(self) -> Any:
        """Running total as a new container of the same length."""
        return self._like(seq.cumsum(self._data))

    def mean(self) -> Any:
        """
        Arithmetic mean ``sum / len``.

        Raises
        ------
        EmptyInputError
            If the container is empty.
        """
        return seq.mean(self._data)

    def std(self) -> Any:
        """
        Population standard deviation (divides by ``len``, not ``len - 1``).

        For complex containers the deviation is measured by magnitude and
        the result is real.
        """
        return seq.std(self._data)

    def norm2(self) -> Any:
        """Euclidean norm ``sqrt(sum(|x_i|^2))``."""
        return seq.norm2(self._data)

    def norm_inf(self) -> Any:
        """Infinity norm ``max(|x_i|)``; zero for an empty container."""
        magnitude_ops = ops_for(self._kind.real_kind())
        return seq.norm_inf(self._data, magnitude_ops.zero())

    def dot(self, other: Any) -> Any:
        """
        Plain dot product ``sum(a_i * b_i)``; complex values are not
        conjugated.

        Raises
        ------
        ShapeMismatchError
            If the lengths differ.
        ElementKindMismatchError
            If the element kinds differ.
        """
        return seq.dot(self._data, self._container_operand(other, "dot"))

    def diff(self) -> Any:
        """Discrete difference ``x[i + 1] - x[i]``, one element shorter."""
        return self._like(seq.diff(self._data))

    # ----------------------------
    # Extrema (ordered kinds)
    # ----------------------------
    def max(self) -> Any:
        """Largest value."""
        ...

    def min(self) -> Any:
        """Smallest value."""
        ...

    def argmax(self) -> int:
        """Index of the largest value; ties resolve to the first occurrence."""
        ...

    def argmin(self) -> int:
        """Index of the smallest value; ties resolve to the first occurrence."""
        ...
