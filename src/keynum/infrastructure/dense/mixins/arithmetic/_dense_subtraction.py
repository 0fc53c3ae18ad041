"""
Element-kind control paths for dense subtraction.

Both the forward operator (``container - x``) and the reflected one
(``scalar - container``) are registered per family. The reflected form swaps
operands inside the kernel call rather than negating the forward result.
"""

import numbers

import numpy as np

from ..._dense_builder import dense_control_path_manager
from .....domain.kind import KindFamily

from ._base import DenseMixinArithmetic as DMA


@dense_control_path_manager(DMA, DMA.__sub__, KindFamily.REAL)
def dense_sub_real(self, other):
    return self._elementwise(np.subtract, other, "sub", (numbers.Real,))


@dense_control_path_manager(DMA, DMA.__sub__, KindFamily.COMPLEX)
def dense_sub_complex(self, other):
    return self._elementwise(np.subtract, other, "sub", (numbers.Complex,))


@dense_control_path_manager(DMA, DMA.__rsub__, KindFamily.REAL)
def dense_rsub_real(self, other):
    return self._elementwise(
        np.subtract, other, "sub", (numbers.Real,), reflected=True
    )


@dense_control_path_manager(DMA, DMA.__rsub__, KindFamily.COMPLEX)
def dense_rsub_complex(self, other):
    return self._elementwise(
        np.subtract, other, "sub", (numbers.Complex,), reflected=True
    )
