"""
Operation mixins for dense containers.

Each subpackage contributes one family of operations. Importing a subpackage
registers its element-kind control paths.
"""

from .arithmetic import DenseMixinArithmetic
from .comparison import DenseMixinComparison
from .reduction import DenseMixinReduction
from .unary import DenseMixinUnary
from .complex import DenseMixinComplex

__all__ = [
    DenseMixinArithmetic.__name__,
    DenseMixinComparison.__name__,
    DenseMixinReduction.__name__,
    DenseMixinUnary.__name__,
    DenseMixinComplex.__name__,
]
