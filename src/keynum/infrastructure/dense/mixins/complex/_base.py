"""
Complex decomposition mixin.

:class:`DenseMixinComplex` exposes the `ComplexParts` capability on a
container: real and imaginary parts, conjugate, norm and argument (as
containers of the component kind), the polar pair, and integer powers.

Every method requires a complex element kind and raises
`ElementKindNotSupportedError` otherwise. Results are fresh buffers: writing
into ``z.real()`` never changes ``z``.
"""

from abc import ABC
from typing import Any, Tuple

from .....domain._numeric import ComplexParts


class DenseMixinComplex(ABC):
    """Mixin exposing complex decomposition."""

    def _parts(self, op: str) -> ComplexParts:
        return self._require(ComplexParts, op)

    def real(self) -> Any:
        """Real parts, as a container of the component kind."""
        return self._wrap(self._parts("real").real(self._data))

    def imag(self) -> Any:
        """Imaginary parts, as a container of the component kind."""
        return self._wrap(self._parts("imag").imag(self._data))

    def conj(self) -> Any:
        """Complex conjugate; same kind as the receiver."""
        return self._like(self._parts("conj").conj(self._data))

    def norm(self) -> Any:
        """Magnitudes ``|z_i|``."""
        return self._wrap(self._parts("norm").norm(self._data))

    def arg(self) -> Any:
        """Arguments (phase angles) in ``(-pi, pi]``."""
        return self._wrap(self._parts("arg").arg(self._data))

    def to_polar(self) -> Tuple[Any, Any]:
        """
        Split into polar form.

        Returns
        -------
        tuple
            ``(norm, arg)``, both containers of the component kind.
        """
        return self.norm(), self.arg()

    def powi(self, n: int) -> Any:
        """
        Raise every element to the integer power `n`.

        Raises
        ------
        TypeError
            If `n` is not an integer.
        """
        return self._like(self._parts("powi").powi(self._data, n))
