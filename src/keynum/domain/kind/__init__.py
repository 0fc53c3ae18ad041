from ._element_kind import ElementKind, KindFamily, as_kind, default_kind
from ._kind_protocol import ElementKindLike

__all__ = [
    ElementKind.__name__,
    ElementKindLike.__name__,
    KindFamily.__name__,
    as_kind.__name__,
    default_kind.__name__,
]
