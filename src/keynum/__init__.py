"""
keynum: generic numeric arrays and dense matrices on NumPy.

Public API
----------
- `Array`: 1-D container with elementwise arithmetic, reductions, masks,
  sorting and complex decomposition.
- `Matrix`: dense 2-D container with an explicit `StorageOrder`,
  matrix-vector and matrix-matrix products.
- `ElementKind` / `KindFamily`: element type descriptors.
- `ops_for`: capability provider for an element kind.
- Contract-violation exceptions from `keynum.domain._errors`.
"""

from .domain._errors import (
    ContractViolationError,
    ShapeMismatchError,
    IndexOutOfRangeError,
    EmptyInputError,
    StorageOrderError,
    ElementKindNotSupportedError,
    ElementKindMismatchError,
)
from .domain.kind import ElementKind, KindFamily, as_kind, default_kind
from .domain.storage import StorageOrder
from .infrastructure.numeric import ops_for
from .infrastructure.array import Array
from .infrastructure.matrix import Matrix

__all__ = [
    Array.__name__,
    Matrix.__name__,
    StorageOrder.__name__,
    ElementKind.__name__,
    KindFamily.__name__,
    as_kind.__name__,
    default_kind.__name__,
    ops_for.__name__,
    ContractViolationError.__name__,
    ShapeMismatchError.__name__,
    IndexOutOfRangeError.__name__,
    EmptyInputError.__name__,
    StorageOrderError.__name__,
    ElementKindNotSupportedError.__name__,
    ElementKindMismatchError.__name__,
]
