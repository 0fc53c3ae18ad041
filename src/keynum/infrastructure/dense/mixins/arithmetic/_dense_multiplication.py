"""
Element-kind control paths for the dense elementwise product.
"""

import numbers

import numpy as np

from ..._dense_builder import dense_control_path_manager
from .....domain.kind import KindFamily

from ._base import DenseMixinArithmetic as DMA


@dense_control_path_manager(DMA, DMA.__mul__, KindFamily.REAL)
def dense_mul_real(self, other):
    return self._elementwise(np.multiply, other, "mul", (numbers.Real,))


@dense_control_path_manager(DMA, DMA.__mul__, KindFamily.COMPLEX)
def dense_mul_complex(self, other):
    return self._elementwise(np.multiply, other, "mul", (numbers.Complex,))
