"""
Pseudo-random buffer generation (NumPy CPU).

The library delegates random values to a NumPy ``Generator``; it does not
own seeding or generator state. Callers that need reproducibility pass their
own generator, otherwise a fresh ``numpy.random.default_rng()`` is used.

For complex kinds both components are sampled independently.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from ...domain.kind import ElementKind


def _generator(rng: Optional[np.random.Generator]) -> np.random.Generator:
    return np.random.default_rng() if rng is None else rng


def uniform(
    n: int, kind: ElementKind, rng: Optional[np.random.Generator] = None
) -> np.ndarray:
    """
    Return `n` samples from the uniform distribution on ``[0, 1)``.
    """
    g = _generator(rng)
    comp = kind.real_kind().dtype
    if kind.is_complex():
        out = np.empty(n, dtype=kind.dtype)
        out.real = g.random(n, dtype=comp)
        out.imag = g.random(n, dtype=comp)
        return out
    return g.random(n, dtype=kind.dtype)


def normal(
    n: int, kind: ElementKind, rng: Optional[np.random.Generator] = None
) -> np.ndarray:
    """
    Return `n` samples from the standard normal distribution (mean 0,
    standard deviation 1).
    """
    g = _generator(rng)
    comp = kind.real_kind().dtype
    if kind.is_complex():
        out = np.empty(n, dtype=kind.dtype)
        out.real = g.standard_normal(n).astype(comp)
        out.imag = g.standard_normal(n).astype(comp)
        return out
    return g.standard_normal(n).astype(kind.dtype)
