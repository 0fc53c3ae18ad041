"""
Unary elementwise maps for dense containers.

Public API
----------
- ``DenseMixinUnary``
"""

from ._base import DenseMixinUnary

__all__ = [
    DenseMixinUnary.__name__,
]
