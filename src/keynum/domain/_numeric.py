"""
Numeric capability contracts.

This module splits the operations an element type may support into small,
independently satisfiable protocols. Containers and sequence algorithms ask
for exactly the capability an operation needs (e.g., `Ordered` for argsort,
`ComplexParts` for ``real()``), so a real element kind never has to provide
complex-only behavior and vice versa.

Capabilities are provided by *element-kind operation providers* rather than
by scalar objects: each method acts on a whole 1-D buffer at once, which is
how NumPy-backed code naturally expresses elementwise work.

Design notes
------------
- Every protocol is `runtime_checkable` so that a provider's capabilities
  can be queried with ``isinstance(provider, Ordered)``.
- Copy semantics is not modelled: buffers hold NumPy scalars, which are
  values.
- Nothing here imports NumPy at runtime; buffers are typed as ``Any``.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

Buffer = Any
"""A 1-D backend buffer (``numpy.ndarray`` in the CPU backend)."""


# ---------------------------------------------------------------------
# Identities
# ---------------------------------------------------------------------
@runtime_checkable
class HasZero(Protocol):
    """Additive identity."""

    def zero(self) -> Any: ...


@runtime_checkable
class HasOne(Protocol):
    """Multiplicative identity."""

    def one(self) -> Any: ...


# ---------------------------------------------------------------------
# Ordering
# ---------------------------------------------------------------------
@runtime_checkable
class Bounded(Protocol):
    """
    Lower and upper bounds of the ordering.

    Extrema fold from these seeds, so for IEEE floats they are the
    infinities rather than the largest finite magnitudes.
    """

    def min_value(self) -> Any: ...

    def max_value(self) -> Any: ...


@runtime_checkable
class Ordered(Protocol):
    """
    Ordering sufficient for comparisons, extrema and sorting.

    ``less(a, b)`` and ``greater(a, b)`` accept two buffers of equal length
    (or a buffer and a scalar) and return a boolean buffer.
    """

    def less(self, a: Buffer, b: Any) -> Buffer: ...

    def greater(self, a: Buffer, b: Any) -> Buffer: ...


# ---------------------------------------------------------------------
# Transcendental and rounding maps (one capability each)
# ---------------------------------------------------------------------
@runtime_checkable
class SupportsLn(Protocol):
    def ln(self, a: Buffer) -> Buffer: ...


@runtime_checkable
class SupportsExp(Protocol):
    def exp(self, a: Buffer) -> Buffer: ...


@runtime_checkable
class SupportsSin(Protocol):
    def sin(self, a: Buffer) -> Buffer: ...


@runtime_checkable
class SupportsCos(Protocol):
    def cos(self, a: Buffer) -> Buffer: ...


@runtime_checkable
class SupportsAsin(Protocol):
    def asin(self, a: Buffer) -> Buffer: ...


@runtime_checkable
class SupportsAcos(Protocol):
    def acos(self, a: Buffer) -> Buffer: ...


@runtime_checkable
class SupportsSqrt(Protocol):
    def sqrt(self, a: Buffer) -> Buffer: ...


@runtime_checkable
class SupportsAbs(Protocol):
    """
    Absolute value. For complex elements this is the magnitude, so the
    result is a buffer of the matching real kind.
    """

    def abs(self, a: Buffer) -> Buffer: ...


@runtime_checkable
class SupportsRound(Protocol):
    def round(self, a: Buffer) -> Buffer: ...


@runtime_checkable
class SupportsPow(Protocol):
    def pow(self, a: Buffer, e: Any) -> Buffer: ...


@runtime_checkable
class SupportsIsNaN(Protocol):
    def is_nan(self, a: Buffer) -> Buffer: ...


# ---------------------------------------------------------------------
# Complex decomposition
# ---------------------------------------------------------------------
@runtime_checkable
class ComplexParts(Protocol):
    """
    Complex-only capability: construction from parts or polar form, and
    decomposition into real part, imaginary part, conjugate, norm and
    argument, plus integer power.
    """

    def from_parts(self, re: Buffer, im: Buffer) -> Buffer: ...

    def from_polar(self, norm: Buffer, arg: Buffer) -> Buffer: ...

    def real(self, a: Buffer) -> Buffer: ...

    def imag(self, a: Buffer) -> Buffer: ...

    def conj(self, a: Buffer) -> Buffer: ...

    def norm(self, a: Buffer) -> Buffer: ...

    def arg(self, a: Buffer) -> Buffer: ...

    def powi(self, a: Buffer, n: int) -> Buffer: ...
