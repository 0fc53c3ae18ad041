"""
Complex decomposition mixin for dense containers.

Public API
----------
- ``DenseMixinComplex``
"""

from ._base import DenseMixinComplex

__all__ = [
    DenseMixinComplex.__name__,
]
