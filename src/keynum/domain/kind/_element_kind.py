"""
Element-kind abstraction.

This module defines lightweight descriptors for the element types a keynum
container may hold. It provides:

- `KindFamily`: the category of an element type (real or complex)
- `ElementKind`: a validated, hashable descriptor built from strings such
  as "float64" or "complex128", or from a NumPy dtype
- `default_kind`: the kind used when a factory receives no explicit kind

The family is what operation dispatch keys on; the concrete kind fixes the
buffer dtype.
"""

from __future__ import annotations

import os
from enum import Enum
from typing import Union

import numpy as np


DEFAULT_KIND_ENV = "KEYNUM_DEFAULT_KIND"


class KindFamily(Enum):
    """
    Enumeration of supported element families.

    Attributes
    ----------
    REAL : KindFamily
        Real floating-point scalars.
    COMPLEX : KindFamily
        Complex scalars (a pair of floating-point components).
    """

    REAL = "real"
    COMPLEX = "complex"


_KINDS = {
    "float32": KindFamily.REAL,
    "float64": KindFamily.REAL,
    "complex64": KindFamily.COMPLEX,
    "complex128": KindFamily.COMPLEX,
}

_REAL_OF = {
    "float32": "float32",
    "float64": "float64",
    "complex64": "float32",
    "complex128": "float64",
}

_COMPLEX_OF = {
    "float32": "complex64",
    "float64": "complex128",
    "complex64": "complex64",
    "complex128": "complex128",
}


class ElementKind:
    """
    Concrete element-kind descriptor.

    Parameters
    ----------
    kind : str | numpy.dtype | ElementKind
        One of "float32", "float64", "complex64", "complex128", an
        equivalent NumPy dtype, or another `ElementKind`.

    Raises
    ------
    ValueError
        If the kind is not one of the supported element types.

    Notes
    -----
    Instances compare and hash by name, so they can be used as dictionary
    keys and as dispatch state.
    """

    __slots__ = ("name", "family")

    def __init__(self, kind: Union[str, np.dtype, "ElementKind"]) -> None:
        if isinstance(kind, ElementKind):
            name = kind.name
        else:
            try:
                name = np.dtype(kind).name
            except TypeError:
                raise ValueError(f"Unsupported element kind: {kind!r}") from None
        if name not in _KINDS:
            raise ValueError(
                f"Unsupported element kind: {kind!r}. "
                f"Expected one of {sorted(_KINDS)}."
            )
        self.name = name
        self.family = _KINDS[name]

    @property
    def dtype(self) -> np.dtype:
        """NumPy dtype backing buffers of this kind."""
        return np.dtype(self.name)

    def is_real(self) -> bool:
        return self.family is KindFamily.REAL

    def is_complex(self) -> bool:
        return self.family is KindFamily.COMPLEX

    def real_kind(self) -> "ElementKind":
        """
        Return the real kind of matching precision.

        For a complex kind this is the kind of its components
        (complex128 -> float64); a real kind returns itself.
        """
        return ElementKind(_REAL_OF[self.name])

    def complex_kind(self) -> "ElementKind":
        """Return the complex kind of matching precision."""
        return ElementKind(_COMPLEX_OF[self.name])

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ElementKind):
            return self.name == other.name
        return NotImplemented

    def __hash__(self) -> int:
        return hash(("ElementKind", self.name))

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"ElementKind({self.name!r})"


def default_kind() -> ElementKind:
    """
    Return the element kind used when none is given explicitly.

    Reads the ``KEYNUM_DEFAULT_KIND`` environment variable on every call and
    falls back to ``float64``.

    Raises
    ------
    ValueError
        If the environment variable names an unsupported kind.
    """
    return ElementKind(os.environ.get(DEFAULT_KIND_ENV, "float64") or "float64")


def as_kind(kind: Union[None, str, np.dtype, ElementKind]) -> ElementKind:
    """
    Normalize a user-facing kind argument into an `ElementKind`.

    ``None`` resolves to :func:`default_kind`.
    """
    if kind is None:
        return default_kind()
    if isinstance(kind, ElementKind):
        return kind
    return ElementKind(kind)
