"""
Reduction mixin and element-kind implementations for 1-D containers.

Importing this package registers the real-kind extrema control paths.

Public API
----------
- ``DenseMixinReduction``
"""

from ._dense_extrema import *
from ._base import DenseMixinReduction

__all__ = [
    DenseMixinReduction.__name__,
]
