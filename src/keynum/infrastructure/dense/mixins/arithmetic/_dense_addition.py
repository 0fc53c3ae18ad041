"""
Element-kind control paths for dense addition.

Registers the real and complex implementations of
`DenseMixinArithmetic.__add__`. The two paths differ only in which scalars
they accept: a real container rejects complex scalars instead of silently
dropping the imaginary part.
"""

import numbers

import numpy as np

from ..._dense_builder import dense_control_path_manager
from .....domain.kind import KindFamily

from ._base import DenseMixinArithmetic as DMA


@dense_control_path_manager(DMA, DMA.__add__, KindFamily.REAL)
def dense_add_real(self, other):
    return self._elementwise(np.add, other, "add", (numbers.Real,))


@dense_control_path_manager(DMA, DMA.__add__, KindFamily.COMPLEX)
def dense_add_complex(self, other):
    return self._elementwise(np.add, other, "add", (numbers.Complex,))
