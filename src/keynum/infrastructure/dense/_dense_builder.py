"""
Dense-container control-path manager for element-kind dispatch.

This module specializes the generic `create_path_builder` utility with the
state attribute ``"_state"``. Dense containers expose their element-kind
family (`KindFamily.REAL` or `KindFamily.COMPLEX`) as ``_state``, so method
dispatch is performed on the kind of the receiving array or matrix.

Typical usage
-------------
Family-specific implementations register themselves with this manager:

    @dense_control_path_manager(DenseMixin, DenseMixin.op, KindFamily.REAL)
    def op_real(self, ...): ...

    @dense_control_path_manager(DenseMixin, DenseMixin.op, KindFamily.COMPLEX)
    def op_complex(self, ...): ...

An operation with no registration for a family raises
`ElementKindNotSupportedError` when called on a container of that family.
"""

from typing import Any, Callable

from ...domain._errors import ElementKindNotSupportedError
from ...domain.utils._control_path import create_path_builder


def kind_not_supported(
    method: Callable[..., Any], self: Any, state: Any
) -> ElementKindNotSupportedError:
    """Trap factory: build the error raised when no control path matches."""
    return ElementKindNotSupportedError(
        op=method.__name__.strip("_"), kind=str(getattr(self, "kind", state))
    )


_builder = create_path_builder("_state")


def dense_control_path_manager(cls, method, state):
    """
    Register a family-specific control path for a dense-container method.

    Missing control paths raise `ElementKindNotSupportedError`.
    """
    return _builder(cls, method, state, kind_not_supported)
