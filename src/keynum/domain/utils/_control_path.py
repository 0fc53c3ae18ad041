"""
State-based method dispatch (a.k.a. "control-path" templating) via decorators.

This module provides a small mechanism for routing a single method call to
one of several registered implementations based on a runtime state value
read from the receiving object.

Core idea
---------
- You define a *base* method on a class (its signature becomes the canonical one).
- You then register multiple "control paths" for that method, each keyed by:
    (ClassName, MethodName, StateVal)
- At runtime, the wrapper reads the state attribute from ``self`` and
  dispatches to the registered implementation that matches it.

In keynum the state is the element-kind family of a container, so the real
and complex variants of an operation live in separate functions instead of
one body full of ``if kind.is_complex()`` branches.

Important notes
---------------
- This design mutates the class: the first time you decorate a control path,
  the original method name is replaced with a wrapper that performs dispatch.
- Registered implementations are stored in a closure-local mapping owned by
  `create_path_builder()`. Different builders do not share mappings.
- Sub-methods are called like bound methods: ``sub_method(self, *args, **kwargs)``.
"""

from typing import (
    Callable,
    Dict,
    Hashable,
    Optional,
    Type,
    Any,
)
from typing_extensions import ParamSpec, TypeVar
from collections import namedtuple
from functools import wraps

P = ParamSpec("P")
R = TypeVar("R")

TrapFactory = Callable[[Callable[..., Any], Any, Any], BaseException]
"""Builds the exception raised when no control path matches: ``(method, self, state)``."""


def create_path_builder(
    state_attr: str,
) -> Callable[
    [Type, Callable[P, R], Hashable, Optional[TrapFactory]],
    Callable[[Callable[P, R]], Callable[P, R]],
]:
    """
    Create and return a "path builder" function used to register stateful
    control paths for methods.

    Parameters
    ----------
    state_attr : str
        Name of the attribute read from ``self`` to select a control path.

    Returns
    -------
    Callable
        A function with signature:

            (cls, method, state, trap_exception=None) -> decorator

        where `decorator(sub_method)` registers `sub_method` for that control path
        and replaces `cls.method` with a dispatcher wrapper.

    Examples
    --------
    >>> decorator = create_path_builder("_state")
    >>> class MyClass:
    ...     _state = "A"
    ...     def foo(self, x: int) -> int: ...
    >>> @decorator(MyClass, MyClass.foo, "A")
    ... def foo_A(self, x: int) -> int:
    ...     return x + 1
    >>> MyClass().foo(1)
    2
    """

    MethodKey = namedtuple(
        "MethodKey",
        [
            "ClassName",
            "MethodName",
            "StateVal",
        ],
    )

    methods_map: Dict[MethodKey, Callable] = {}
    """Mapping from (class, method, state) keys to registered implementations."""

    installed: Dict[tuple, Callable] = {}
    """Dispatcher wrappers already installed, keyed by (class, method name)."""

    def templator(
        cls: Type,
        method: Callable[P, R],
        state: Hashable,
        trap_exception: Optional[TrapFactory] = None,
    ) -> Callable[[Callable[P, R]], Callable[P, R]]:
        """
        Build a decorator that registers a control path implementation.

        Parameters
        ----------
        cls : Type
            The class whose method should be wrapped for state-based dispatch.
            The wrapper is installed on this class under `method.__name__`.
        method : Callable[P, R]
            The base method being templated. Its signature and metadata (name,
            docstring, annotations) are used for the installed wrapper via
            `functools.wraps(method)`.
        state : Hashable
            The state value that selects the decorated implementation.
        trap_exception : Optional[TrapFactory]
            Factory called as ``trap_exception(method, self, state)`` when no
            control path matches; the returned exception is raised. If
            `None`, a `NotImplementedError` is raised.

        Raises
        ------
        TypeError
            If `state` is not hashable.
        """
        try:
            hash(state)
        except TypeError:
            raise TypeError(
                f"The argument for 'state' must be hashable. Got {state!r}"
            ) from None

        name = method.__name__
        smk = MethodKey(cls.__name__, name, state)

        def decorator(sub_method: Callable[P, R]) -> Callable[P, R]:
            methods_map[smk] = sub_method

            if (cls.__name__, name) in installed:
                return sub_method

            @wraps(method)
            def wrapper(self: Any, *args: Any, **kwargs: Any) -> Any:
                """
                Dispatch to a registered implementation based on the state
                attribute of ``self``.
                """
                if not hasattr(self, state_attr):
                    raise NotImplementedError(
                        "{} is missing attribute {!r}".format(type(self), state_attr)
                    )
                cur = getattr(self, state_attr)
                sm = methods_map.get(MethodKey(cls.__name__, name, cur))
                if sm is not None:
                    return sm(self, *args, **kwargs)
                if trap_exception is None:
                    raise NotImplementedError(
                        "Missing control path (state={!r}) for {!r}".format(
                            cur, method
                        )
                    )
                raise trap_exception(method, self, cur)

            installed[(cls.__name__, name)] = wrapper
            setattr(cls, name, wrapper)
            return sub_method

        return decorator

    return templator
