"""
Real-kind control paths for extrema.

Extrema fold from the bounds of a `Bounded` provider; only the real family
registers them.
"""

from ..._dense_builder import dense_control_path_manager
from ....ops import sequence_cpu as seq
from .....domain._numeric import Bounded
from .....domain.kind import KindFamily

from ._base import DenseMixinReduction as DMR


@dense_control_path_manager(DMR, DMR.max, KindFamily.REAL)
def dense_max_real(self):
    return seq.max(self._data, self._require(Bounded, "max").min_value())


@dense_control_path_manager(DMR, DMR.min, KindFamily.REAL)
def dense_min_real(self):
    return seq.min(self._data, self._require(Bounded, "min").max_value())


@dense_control_path_manager(DMR, DMR.argmax, KindFamily.REAL)
def dense_argmax_real(self):
    return seq.argmax(self._data)


@dense_control_path_manager(DMR, DMR.argmin, KindFamily.REAL)
def dense_argmin_real(self):
    return seq.argmin(self._data)
