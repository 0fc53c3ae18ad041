"""
Element-kind control paths for dense true division.

Division by zero is not an error: the kernels run with floating-point
warnings silenced and produce infinity or NaN as IEEE arithmetic dictates.
"""

import numbers

import numpy as np

from ..._dense_builder import dense_control_path_manager
from .....domain.kind import KindFamily

from ._base import DenseMixinArithmetic as DMA


@dense_control_path_manager(DMA, DMA.__truediv__, KindFamily.REAL)
def dense_div_real(self, other):
    return self._elementwise(np.true_divide, other, "div", (numbers.Real,))


@dense_control_path_manager(DMA, DMA.__truediv__, KindFamily.COMPLEX)
def dense_div_complex(self, other):
    return self._elementwise(np.true_divide, other, "div", (numbers.Complex,))


@dense_control_path_manager(DMA, DMA.__rtruediv__, KindFamily.REAL)
def dense_rdiv_real(self, other):
    return self._elementwise(
        np.true_divide, other, "div", (numbers.Real,), reflected=True
    )


@dense_control_path_manager(DMA, DMA.__rtruediv__, KindFamily.COMPLEX)
def dense_rdiv_complex(self, other):
    return self._elementwise(
        np.true_divide, other, "div", (numbers.Complex,), reflected=True
    )
