"""
Arithmetic mixin and element-kind implementations for dense containers.

This package aggregates the arithmetic mixin and its control paths:

- addition        (``__add__`` / ``__radd__`` / ``__iadd__``)
- subtraction     (``__sub__`` / ``__rsub__`` / ``__isub__``)
- multiplication  (``__mul__`` / ``__rmul__`` / ``__imul__``)
- true division   (``__truediv__`` / ``__rtruediv__`` / ``__itruediv__``)

Implementation modules are imported for their side effects: registering the
real and complex control paths with `dense_control_path_manager`.

Public API
----------
- ``DenseMixinArithmetic``
"""

from ._dense_addition import *
from ._dense_subtraction import *
from ._dense_multiplication import *
from ._dense_division import *
from ._base import DenseMixinArithmetic

__all__ = [
    DenseMixinArithmetic.__name__,
]
