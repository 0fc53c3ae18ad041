"""
Capability provider for complex element kinds (NumPy CPU).

`ComplexOps` provides identities, transcendental maps, powers, the NaN test
and the `ComplexParts` decomposition. It deliberately lacks `Bounded`,
`Ordered` and `SupportsRound`: complex numbers have no natural order, so
operations that need one fail with `ElementKindNotSupportedError`.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from ...domain.kind import ElementKind


class ComplexOps:
    """
    Buffer-level numeric operations for a complex element kind.

    Parameters
    ----------
    kind : ElementKind
        A complex kind ("complex64" or "complex128").

    Notes
    -----
    Decompositions (`real`, `imag`, `norm`, `arg`) return buffers of the
    component kind (e.g., float64 for complex128). Every result is a fresh
    allocation, never a view into the input.
    """

    def __init__(self, kind: ElementKind) -> None:
        if not kind.is_complex():
            raise ValueError(f"ComplexOps requires a complex kind, got {kind}")
        self.kind = kind
        self._dtype = kind.dtype
        self._real_dtype = kind.real_kind().dtype

    def __repr__(self) -> str:
        return f"ComplexOps({self.kind.name!r})"

    def zero(self) -> Any:
        return self._dtype.type(0)

    def one(self) -> Any:
        return self._dtype.type(1)

    def _map(self, fn, a: np.ndarray) -> np.ndarray:
        with np.errstate(all="ignore"):
            return fn(a).astype(self._dtype, copy=False)

    def ln(self, a: np.ndarray) -> np.ndarray:
        return self._map(np.log, a)

    def exp(self, a: np.ndarray) -> np.ndarray:
        return self._map(np.exp, a)

    def sin(self, a: np.ndarray) -> np.ndarray:
        return self._map(np.sin, a)

    def cos(self, a: np.ndarray) -> np.ndarray:
        return self._map(np.cos, a)

    def asin(self, a: np.ndarray) -> np.ndarray:
        return self._map(np.arcsin, a)

    def acos(self, a: np.ndarray) -> np.ndarray:
        return self._map(np.arccos, a)

    def sqrt(self, a: np.ndarray) -> np.ndarray:
        return self._map(np.sqrt, a)

    def abs(self, a: np.ndarray) -> np.ndarray:
        return self.norm(a)

    def pow(self, a: np.ndarray, e: Any) -> np.ndarray:
        with np.errstate(all="ignore"):
            return np.power(a, e).astype(self._dtype, copy=False)

    def is_nan(self, a: np.ndarray) -> np.ndarray:
        return np.isnan(a)

    # ComplexParts
    def from_parts(self, re: np.ndarray, im: np.ndarray) -> np.ndarray:
        out = np.empty(len(re), dtype=self._dtype)
        out.real = re
        out.imag = im
        return out

    def from_polar(self, norm: np.ndarray, arg: np.ndarray) -> np.ndarray:
        with np.errstate(all="ignore"):
            return self.from_parts(norm * np.cos(arg), norm * np.sin(arg))

    def real(self, a: np.ndarray) -> np.ndarray:
        return np.array(a.real, dtype=self._real_dtype, copy=True)

    def imag(self, a: np.ndarray) -> np.ndarray:
        return np.array(a.imag, dtype=self._real_dtype, copy=True)

    def conj(self, a: np.ndarray) -> np.ndarray:
        return np.conj(a).astype(self._dtype, copy=False)

    def norm(self, a: np.ndarray) -> np.ndarray:
        with np.errstate(all="ignore"):
            return np.abs(a).astype(self._real_dtype, copy=False)

    def arg(self, a: np.ndarray) -> np.ndarray:
        return np.angle(a).astype(self._real_dtype, copy=False)

    def powi(self, a: np.ndarray, n: int) -> np.ndarray:
        if not isinstance(n, (int, np.integer)) or isinstance(n, bool):
            raise TypeError(f"powi requires an integer exponent, got {type(n)!r}")
        return self.pow(a, int(n))
