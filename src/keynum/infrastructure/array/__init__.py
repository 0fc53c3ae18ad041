"""
One-dimensional numeric container.
"""

from ._array import Array

__all__ = [Array.__name__]
