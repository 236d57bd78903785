"""Error kinds raised by cursor operations.

Boundary hits during stepping and walking are not errors; those are reported
through return values. Everything here is a usage error returned to the
immediate caller.
"""

from __future__ import annotations


class RlexError(RuntimeError):
    """Base class for every rlex usage error."""


class EmptyInputError(RlexError, ValueError):
    """Raised when a cursor is built over a zero-length string."""

    def __init__(self, message: str = "rlex does not accept empty strings") -> None:
        super().__init__(message)


class InvalidInputError(RlexError, ValueError):
    """Raised when the source cannot be encoded as UTF-8 (lone surrogates)."""

    def __init__(self, index: int) -> None:
        super().__init__(
            f"Character at index {index} is a lone surrogate and has no UTF-8 form"
        )
        self.index = index


class OutOfBoundsError(RlexError, IndexError):
    """Raised when a position falls outside ``[0, length)``."""

    def __init__(self, position: int, length: int) -> None:
        super().__init__(
            f"Position {position} is out of bounds for length {length}"
        )
        self.position = position
        self.length = length


class NoMarkSetError(RlexError):
    """Raised when a mark-dependent operation runs before any mark is set."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"'{operation}' requires a mark but none is set")
        self.operation = operation


class TokensConsumedError(RlexError):
    """Raised by token operations after ``token_consume`` handed the tokens off."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"'{operation}' called after the tokens were consumed")
        self.operation = operation


__all__ = [
    "RlexError",
    "EmptyInputError",
    "InvalidInputError",
    "OutOfBoundsError",
    "NoMarkSetError",
    "TokensConsumedError",
]
