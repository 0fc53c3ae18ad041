"""
Element-kind contracts for keynum.

`ElementKindLike` is a duck-typed protocol for element-kind descriptors so
that code typing against a kind does not depend on the concrete
`ElementKind` class.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ElementKindLike(Protocol):
    """
    Duck-typed element-kind contract.

    Any object that provides these members can describe the element type of
    a container.
    """

    name: str
    family: object

    def is_real(self) -> bool: ...
    def is_complex(self) -> bool: ...
    def __str__(self) -> str: ...
