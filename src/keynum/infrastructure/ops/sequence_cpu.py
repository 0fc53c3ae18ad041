"""
CPU sequence algorithms for keynum (NumPy).

Free functions over borrowed 1-D buffers: reductions, search and predicate
helpers, 0/1 masks, sequence generation, gather/scatter, sorting and the
discrete difference. None of them own or resize their input; scatter
helpers write in place, everything else allocates a new buffer.

Conventions
-----------
- "Nonzero is true": `any`, `all`, `find` and the logical masks treat any
  value different from zero (NaN included) as true. Masks are 0/1 buffers of
  a numeric dtype, not booleans, so they can flow straight into arithmetic.
- Reductions that need at least one element raise `EmptyInputError`.
- Binary helpers require equal lengths and raise `ShapeMismatchError`.
- Floating-point warnings are silenced; NaN and infinity propagate.
- Operations that need an element capability take it as an argument: the
  identities seeding `sum`, `prod` and `norm_inf`, the bounds seeding
  `max`/`min`, and an `Ordered` provider for the ordering masks.
- Several kernels are named after builtins (`sum`, `max`, `min`, `any`,
  `all`, `range`). Inside this module those names refer to the kernels, so
  module code must not call them expecting the builtins. Callers go through
  the module (`seq.max`), and `__all__` leaves these names out so a star
  import cannot shadow the builtins.
"""

from __future__ import annotations

import warnings
from typing import Any, Sequence

import numpy as np

from ...domain._errors import (
    EmptyInputError,
    IndexOutOfRangeError,
    ShapeMismatchError,
)
from ...domain._numeric import Ordered


def _check_same_length(op: str, a: np.ndarray, b: np.ndarray) -> None:
    if len(a) != len(b):
        raise ShapeMismatchError(op, (len(a),), (len(b),))


def _check_nonempty(op: str, a: np.ndarray) -> None:
    if len(a) == 0:
        raise EmptyInputError(op)


def _as_indices(indices: Sequence[int], bound: int) -> np.ndarray:
    """
    Convert an index list to an ``intp`` array, rejecting anything outside
    ``[0, bound)`` (negative indices included).
    """
    ix = np.asarray(indices, dtype=np.intp).reshape(-1)
    if ix.size:
        bad = ix[(ix < 0) | (ix >= bound)]
        if bad.size:
            raise IndexOutOfRangeError(int(bad[0]), bound)
    return ix


def _mask(cond: np.ndarray, dtype: Any) -> np.ndarray:
    return cond.astype(dtype)


def _abs2(a: np.ndarray) -> np.ndarray:
    if np.iscomplexobj(a):
        return a.real * a.real + a.imag * a.imag
    return a * a


# ---------------------------------------------------------------------
# Reductions
# ---------------------------------------------------------------------
def sum(a: np.ndarray, zero: Any) -> Any:
    """Fold with `+` seeded by the additive identity `zero`."""
    with np.errstate(all="ignore"):
        return a.dtype.type(np.sum(a, initial=zero))


def prod(a: np.ndarray, one: Any) -> Any:
    """Fold with `*` seeded by the multiplicative identity `one`."""
    with np.errstate(all="ignore"):
        return a.dtype.type(np.prod(a, initial=one))


def cumsum(a: np.ndarray) -> np.ndarray:
    """Running total, same length as `a`."""
    with np.errstate(all="ignore"):
        return np.cumsum(a).astype(a.dtype, copy=False)


def mean(a: np.ndarray) -> Any:
    _check_nonempty("mean", a)
    with np.errstate(all="ignore"):
        return a.dtype.type(np.sum(a) / len(a))


def std(a: np.ndarray) -> Any:
    """
    Population standard deviation ``sqrt(mean((x - mean(x))^2))``.

    For complex input the square is taken on the magnitude,
    ``|x - mean(x)|^2``, and the result is real.
    """
    _check_nonempty("std", a)
    m = mean(a)
    with np.errstate(all="ignore"):
        sq = _abs2(a - m)
        return sq.dtype.type(np.sqrt(np.sum(sq) / len(a)))


def norm2(a: np.ndarray) -> Any:
    """Euclidean norm; complex elements contribute their squared magnitude."""
    with np.errstate(all="ignore"):
        sq = _abs2(a)
        return sq.dtype.type(np.sqrt(np.sum(sq)))


def norm_inf(a: np.ndarray, zero: Any) -> Any:
    """
    Infinity norm ``max(|x_i|)``, folded from the real identity `zero`, so an
    empty buffer yields zero.
    """
    with np.errstate(all="ignore"):
        mag = np.abs(a)
    return mag.dtype.type(np.max(mag, initial=zero))


def dot(a: np.ndarray, b: np.ndarray) -> Any:
    """``sum(a_i * b_i)`` with no conjugation."""
    _check_same_length("dot", a, b)
    with np.errstate(all="ignore"):
        return np.result_type(a, b).type(np.dot(a, b))


def max(a: np.ndarray, lower: Any) -> Any:
    """Largest value, folded from the lower bound `lower`."""
    _check_nonempty("max", a)
    return a.dtype.type(np.max(a, initial=lower))


def min(a: np.ndarray, upper: Any) -> Any:
    """Smallest value, folded from the upper bound `upper`."""
    _check_nonempty("min", a)
    return a.dtype.type(np.min(a, initial=upper))


def argmax(a: np.ndarray) -> int:
    """Index of the largest value; ties go to the first occurrence."""
    _check_nonempty("argmax", a)
    return int(np.argmax(a))


def argmin(a: np.ndarray) -> int:
    """Index of the smallest value; ties go to the first occurrence."""
    _check_nonempty("argmin", a)
    return int(np.argmin(a))


def diff(a: np.ndarray) -> np.ndarray:
    """
    Discrete difference ``out[i] = a[i + 1] - a[i]`` of length ``len(a) - 1``.
    """
    _check_nonempty("diff", a)
    with np.errstate(all="ignore"):
        return (a[1:] - a[:-1]).astype(a.dtype, copy=False)


# ---------------------------------------------------------------------
# Search / predicates
# ---------------------------------------------------------------------
def any(a: np.ndarray) -> bool:
    return bool(np.any(a != 0))


def all(a: np.ndarray) -> bool:
    return bool(np.all(a != 0))


def find(a: np.ndarray) -> list[int]:
    """Indices of the nonzero elements, ascending."""
    return [int(i) for i in np.flatnonzero(a != 0)]


nonzero = find


# ---------------------------------------------------------------------
# Masks
# ---------------------------------------------------------------------
def eq(a: np.ndarray, v: Any, dtype: Any) -> np.ndarray:
    return _mask(a == v, dtype)


def ne(a: np.ndarray, v: Any, dtype: Any) -> np.ndarray:
    return _mask(a != v, dtype)


def gt(a: np.ndarray, v: Any, dtype: Any, ordered: Ordered) -> np.ndarray:
    return _mask(ordered.greater(a, v), dtype)


def lt(a: np.ndarray, v: Any, dtype: Any, ordered: Ordered) -> np.ndarray:
    return _mask(ordered.less(a, v), dtype)


def ge(a: np.ndarray, v: Any, dtype: Any, ordered: Ordered) -> np.ndarray:
    return _mask(ordered.greater(a, v) | (a == v), dtype)


def le(a: np.ndarray, v: Any, dtype: Any, ordered: Ordered) -> np.ndarray:
    return _mask(ordered.less(a, v) | (a == v), dtype)


def equal(a: np.ndarray, b: np.ndarray, dtype: Any) -> np.ndarray:
    _check_same_length("equal", a, b)
    return _mask(a == b, dtype)


def not_equal(a: np.ndarray, b: np.ndarray, dtype: Any) -> np.ndarray:
    _check_same_length("not_equal", a, b)
    return _mask(a != b, dtype)


def less_than(a: np.ndarray, b: np.ndarray, dtype: Any, ordered: Ordered) -> np.ndarray:
    _check_same_length("less_than", a, b)
    return _mask(ordered.less(a, b), dtype)


def greater_than(
    a: np.ndarray, b: np.ndarray, dtype: Any, ordered: Ordered
) -> np.ndarray:
    _check_same_length("greater_than", a, b)
    return _mask(ordered.greater(a, b), dtype)


def less_equal(a: np.ndarray, b: np.ndarray, dtype: Any, ordered: Ordered) -> np.ndarray:
    _check_same_length("less_equal", a, b)
    return _mask(ordered.less(a, b) | (a == b), dtype)


def greater_equal(
    a: np.ndarray, b: np.ndarray, dtype: Any, ordered: Ordered
) -> np.ndarray:
    _check_same_length("greater_equal", a, b)
    return _mask(ordered.greater(a, b) | (a == b), dtype)


def logical_and(a: np.ndarray, b: np.ndarray, dtype: Any) -> np.ndarray:
    _check_same_length("logical_and", a, b)
    return _mask((a != 0) & (b != 0), dtype)


def logical_or(a: np.ndarray, b: np.ndarray, dtype: Any) -> np.ndarray:
    _check_same_length("logical_or", a, b)
    return _mask((a != 0) | (b != 0), dtype)


def logical_not(a: np.ndarray, dtype: Any) -> np.ndarray:
    return _mask(a == 0, dtype)


# ---------------------------------------------------------------------
# Generation
# ---------------------------------------------------------------------
def range(stop: int, dtype: Any) -> np.ndarray:
    """``0, 1, ..., stop - 1``."""
    return np.arange(int(stop), dtype=dtype)


def arange(start: Any, stop: Any, step: Any, dtype: Any) -> np.ndarray:
    """
    Half-open ``[start, stop)`` stepping by `step`.

    The i-th value is ``start + i * step``; generation stops before reaching
    `stop`. A step whose sign disagrees with ``stop - start`` yields an
    empty buffer.

    Raises
    ------
    ValueError
        If `step` is zero.
    """
    if step == 0:
        raise ValueError("arange step must be nonzero")
    values = []
    i = 0
    v = start
    while (v < stop) if step > 0 else (v > stop):
        values.append(v)
        i += 1
        v = start + i * step
    return np.asarray(values, dtype=dtype)


def linspace(start: Any, stop: Any, num: int, inclusive: bool, dtype: Any) -> np.ndarray:
    """
    `num` evenly spaced values from `start` towards `stop`.

    When `inclusive` is true the last value is set to exactly `stop`. A
    single point is `start`; ``num == 0`` gives an empty buffer.
    """
    num = int(num)
    if num < 0:
        raise ValueError(f"linspace num must be non-negative, got {num}")
    if num == 0:
        return np.empty(0, dtype=dtype)
    if num == 1:
        return np.asarray([start], dtype=dtype)

    div = num - 1 if inclusive else num
    delta = stop - start
    y = np.arange(num, dtype=dtype)
    step = delta / div
    if step == 0:
        y = y / div * delta
    else:
        y = y * step
    y = (y + start).astype(dtype, copy=False)
    if inclusive:
        y[-1] = stop
    return y


def concat(buffers: Sequence[np.ndarray], dtype: Any) -> np.ndarray:
    if len(buffers) == 0:
        return np.empty(0, dtype=dtype)
    return np.concatenate([np.asarray(b, dtype=dtype) for b in buffers])


# ---------------------------------------------------------------------
# Selection / scatter
# ---------------------------------------------------------------------
def select(a: np.ndarray, indices: Sequence[int]) -> np.ndarray:
    """Gather ``a[indices[i]]`` into a new buffer."""
    return a[_as_indices(indices, len(a))]


def set_slice(a: np.ndarray, indices: Sequence[int], values: Sequence[Any]) -> None:
    """Scatter ``a[indices[i]] = values[i]`` in place."""
    values = np.asarray(values)
    if len(indices) != len(values):
        raise ShapeMismatchError("set", (len(indices),), (len(values),))
    a[_as_indices(indices, len(a))] = values


def set_all(a: np.ndarray, indices: Sequence[int], v: Any) -> None:
    """Scatter the single value `v` to every position in `indices`."""
    a[_as_indices(indices, len(a))] = v


# ---------------------------------------------------------------------
# Sorting
# ---------------------------------------------------------------------
def argsort(a: np.ndarray, reverse: bool = False) -> list[int]:
    """
    Stable ascending permutation of `a`.

    With ``reverse=True`` the ascending permutation is reversed as a whole,
    so equal values appear in reverse original order.

    Notes
    -----
    Ordering relative to NaN is unspecified; a `RuntimeWarning` is emitted
    when NaN values are present.
    """
    if np.isnan(a).any():
        warnings.warn(
            "argsort input contains NaN; order relative to NaN is unspecified.",
            RuntimeWarning,
            stacklevel=2,
        )
    ix = np.argsort(a, kind="stable")
    if reverse:
        ix = ix[::-1]
    return [int(i) for i in ix]


# builtin-named kernels stay out of star imports
__all__ = [
    "prod", "cumsum", "mean", "std", "norm2", "norm_inf", "dot",
    "argmax", "argmin", "diff", "find",
    "eq", "ne", "gt", "lt", "ge", "le",
    "equal", "not_equal", "less_than", "greater_than", "less_equal", "greater_equal",
    "logical_and", "logical_or", "logical_not",
    "arange", "linspace", "concat", "select", "set_slice", "set_all", "argsort",
]
