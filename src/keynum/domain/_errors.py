"""
Contract-violation exceptions for keynum.

This module defines the exceptions raised when a caller breaks a documented
precondition of an array or matrix operation (mismatched lengths, indices
out of range, reductions over empty input, storage-order misuse, or an
operation requested on an element kind that lacks the needed capability).

Every error derives from :class:`ContractViolationError` *and* from the
closest built-in exception, so callers may catch either family. These are
programmer errors: operations fail fast instead of returning a sentinel.
"""


class ContractViolationError(Exception):
    """
    Base class for all precondition failures raised by keynum.
    """


class ShapeMismatchError(ContractViolationError, ValueError):
    """
    Raised when two operands (or a buffer and a declared shape) disagree.

    Attributes
    ----------
    op : str
        The name of the operation that was attempted (e.g., "add", "dot").
    left : tuple[int, ...]
        Shape of the left operand (or the declared shape).
    right : tuple[int, ...]
        Shape of the right operand (or the received buffer shape).
    """

    def __init__(self, op: str, left: tuple, right: tuple) -> None:
        super().__init__(f"{op}: shape mismatch {left} vs {right}.")
        self.op = op
        self.left = left
        self.right = right


class IndexOutOfRangeError(ContractViolationError, IndexError):
    """
    Raised when an index is outside ``[0, bound)``.
    """

    def __init__(self, index: int, bound: int, axis: str = "index") -> None:
        super().__init__(f"{axis} {index} out of range for size {bound}.")
        self.index = index
        self.bound = bound
        self.axis = axis


class EmptyInputError(ContractViolationError, ValueError):
    """
    Raised when a reduction that needs at least one element gets none.
    """

    def __init__(self, op: str) -> None:
        super().__init__(f"{op} requires at least one element.")
        self.op = op


class StorageOrderError(ContractViolationError, RuntimeError):
    """
    Raised when an operation is incompatible with a matrix storage order.

    Examples are requesting a contiguous row slice from a column-major
    matrix, or combining two matrices of different storage order
    elementwise.
    """

    def __init__(self, op: str, expected: str, got: str) -> None:
        super().__init__(f"{op} requires {expected} storage, got {got}.")
        self.op = op
        self.expected = expected
        self.got = got


class ElementKindNotSupportedError(ContractViolationError, RuntimeError):
    """
    Raised when an operation is requested on an element kind that does not
    provide the capability the operation needs (e.g., ordering on complex).

    Attributes
    ----------
    op : str
        The operation name (e.g., "argsort", "real").
    kind : str
        String representation of the element kind.
    """

    def __init__(self, op: str, kind: str) -> None:
        super().__init__(f"{op} is not supported for element kind '{kind}'.")
        self.op = op
        self.kind = kind


class ElementKindMismatchError(ContractViolationError, TypeError):
    """
    Raised when operands of different element kinds are combined.
    """

    def __init__(self, op: str, kind_a: str, kind_b: str) -> None:
        super().__init__(f"{op}: element kind mismatch '{kind_a}' vs '{kind_b}'.")
        self.op = op
        self.kind_a = kind_a
        self.kind_b = kind_b
