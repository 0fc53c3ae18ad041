"""
Dense-container core, control-path manager and operation mixins.
"""

from ._dense_core import DenseCoreMixin
from ._dense_builder import dense_control_path_manager

__all__ = [
    DenseCoreMixin.__name__,
    dense_control_path_manager.__name__,
]
