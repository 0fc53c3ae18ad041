"""
Comparison mixin and element-kind implementations for dense containers.

Importing this package registers the real-kind ordering control paths
(``gt``/``lt``/``ge``/``le`` and their pairwise forms) as a side effect.

Public API
----------
- ``DenseMixinComparison``
"""

from ._dense_ordering import *
from ._base import DenseMixinComparison

__all__ = [
    DenseMixinComparison.__name__,
]
