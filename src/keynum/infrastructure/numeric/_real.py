"""
Capability provider for real floating-point element kinds (NumPy CPU).

`RealOps` satisfies every protocol in :mod:`keynum.domain._numeric` except
`ComplexParts`. All maps run under ``np.errstate(all="ignore")``: NaN and
infinity propagate exactly as IEEE arithmetic defines, without warnings.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from ...domain.kind import ElementKind


class RealOps:
    """
    Buffer-level numeric operations for a real element kind.

    Parameters
    ----------
    kind : ElementKind
        A real kind ("float32" or "float64").
    """

    def __init__(self, kind: ElementKind) -> None:
        if not kind.is_real():
            raise ValueError(f"RealOps requires a real kind, got {kind}")
        self.kind = kind
        self._dtype = kind.dtype

    def __repr__(self) -> str:
        return f"RealOps({self.kind.name!r})"

    # identities
    def zero(self) -> Any:
        return self._dtype.type(0)

    def one(self) -> Any:
        return self._dtype.type(1)

    # ordering; the infinities bound every IEEE value, so they seed extrema
    def min_value(self) -> Any:
        return self._dtype.type(-np.inf)

    def max_value(self) -> Any:
        return self._dtype.type(np.inf)

    def less(self, a: np.ndarray, b: Any) -> np.ndarray:
        return np.less(a, b)

    def greater(self, a: np.ndarray, b: Any) -> np.ndarray:
        return np.greater(a, b)

    # maps
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
        return self._map(np.abs, a)

    def round(self, a: np.ndarray) -> np.ndarray:
        # half away from zero (np.round is half to even); x - trunc(x) is exact
        with np.errstate(all="ignore"):
            t = np.trunc(a)
            out = np.where(np.abs(a - t) >= 0.5, t + np.copysign(1.0, a), t)
        return out.astype(self._dtype, copy=False)

    def pow(self, a: np.ndarray, e: Any) -> np.ndarray:
        with np.errstate(all="ignore"):
            return np.power(a, self._dtype.type(e)).astype(self._dtype, copy=False)

    def is_nan(self, a: np.ndarray) -> np.ndarray:
        return np.isnan(a)
