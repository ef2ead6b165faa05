"""
Error types raised by sanity operations.

Every error derives from ``SanityError`` and from the built-in exception that
best describes it, so callers can catch either.
"""

from typing import Optional


class SanityError(Exception):
    """Base exception for all sanity errors."""

    def __init__(self, message: str, operation: Optional[str] = None) -> None:
        self.message = message
        self.operation = operation
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.operation:
            return f"[{self.operation}] {self.message}"
        return self.message


class EmptyCollectionError(SanityError, ValueError):
    """Raised when an operation needs at least one element."""

    def __init__(self, operation: Optional[str] = None) -> None:
        super().__init__("Collection is empty.", operation)


class IndexOutOfRangeError(SanityError, IndexError):
    """Raised when an index falls outside a sequence."""

    def __init__(self, index: int, length: int, operation: Optional[str] = None) -> None:
        self.index = index
        self.length = length
        super().__init__(f"Index {index} out of range for length {length}.", operation)


class LengthMismatchError(SanityError, ValueError):
    """
    Raised when paired sequences differ in length.

    Attributes:
        left_length: Length of the first sequence
        right_length: Length of the second sequence
    """

    def __init__(
        self, left_length: int, right_length: int, operation: Optional[str] = None
    ) -> None:
        self.left_length = left_length
        self.right_length = right_length
        super().__init__(
            f"Sequences have different lengths ({left_length} != {right_length}).",
            operation,
        )


class InvalidArgumentError(SanityError, ValueError):
    """Raised for arguments outside an operation's domain."""

    pass


class DivisionByZeroError(SanityError, ZeroDivisionError):
    """Raised when dividing or taking a modulo by zero."""

    def __init__(self, operation: Optional[str] = None) -> None:
        super().__init__("Division by zero.", operation)


class FileIOError(SanityError, OSError):
    """
    Raised when reading or writing a file fails.

    The original ``OSError`` is available as ``__cause__``.
    """

    def __init__(self, message: str, path: str, operation: Optional[str] = None) -> None:
        self.path = path
        super().__init__(message, operation)

    def _format_message(self) -> str:
        return f"{super()._format_message()} (path: {self.path})"
