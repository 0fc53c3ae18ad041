"""
Real-kind control paths for ordering comparisons.

Only `KindFamily.REAL` is registered. Calling any of these methods on a
complex container falls through to the dense trap and raises
`ElementKindNotSupportedError`. Each path asks the kind's `Ordered` provider
for the comparison itself.
"""

import numbers

from ..._dense_builder import dense_control_path_manager
from ....ops import sequence_cpu as seq
from .....domain._numeric import Ordered
from .....domain.kind import KindFamily

from ._base import DenseMixinComparison as DMC

_REAL = (numbers.Real,)


def _scalar_mask(self, kernel, v, op):
    rhs = self._scalar_operand(v, op, _REAL)
    ordered = self._require(Ordered, op)
    return self._mask_like(kernel(self._data, rhs, self._mask_dtype(), ordered))


def _pairwise_mask(self, kernel, other, op):
    rhs = self._container_operand(other, op)
    ordered = self._require(Ordered, op)
    return self._mask_like(kernel(self._data, rhs, self._mask_dtype(), ordered))


@dense_control_path_manager(DMC, DMC.gt, KindFamily.REAL)
def dense_gt_real(self, v):
    return _scalar_mask(self, seq.gt, v, "gt")


@dense_control_path_manager(DMC, DMC.lt, KindFamily.REAL)
def dense_lt_real(self, v):
    return _scalar_mask(self, seq.lt, v, "lt")


@dense_control_path_manager(DMC, DMC.ge, KindFamily.REAL)
def dense_ge_real(self, v):
    return _scalar_mask(self, seq.ge, v, "ge")


@dense_control_path_manager(DMC, DMC.le, KindFamily.REAL)
def dense_le_real(self, v):
    return _scalar_mask(self, seq.le, v, "le")


@dense_control_path_manager(DMC, DMC.greater_than, KindFamily.REAL)
def dense_greater_than_real(self, other):
    return _pairwise_mask(self, seq.greater_than, other, "greater_than")


@dense_control_path_manager(DMC, DMC.less_than, KindFamily.REAL)
def dense_less_than_real(self, other):
    return _pairwise_mask(self, seq.less_than, other, "less_than")


@dense_control_path_manager(DMC, DMC.greater_equal, KindFamily.REAL)
def dense_greater_equal_real(self, other):
    return _pairwise_mask(self, seq.greater_equal, other, "greater_equal")


@dense_control_path_manager(DMC, DMC.less_equal, KindFamily.REAL)
def dense_less_equal_real(self, other):
    return _pairwise_mask(self, seq.less_equal, other, "less_equal")
