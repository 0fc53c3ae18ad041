"""
Element-kind capability providers.

`ops_for(kind)` returns the provider object implementing the numeric
capability protocols for a given element kind.
"""

from typing import Union

from ...domain.kind import ElementKind
from ._real import RealOps
from ._complex import ComplexOps

_PROVIDERS: dict = {}


def ops_for(kind: ElementKind) -> Union[RealOps, ComplexOps]:
    """
    Return the (cached) capability provider for `kind`.
    """
    ops = _PROVIDERS.get(kind)
    if ops is None:
        ops = RealOps(kind) if kind.is_real() else ComplexOps(kind)
        _PROVIDERS[kind] = ops
    return ops


__all__ = [RealOps.__name__, ComplexOps.__name__, ops_for.__name__]
