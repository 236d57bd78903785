"""Character-level cursor for hand-written lexers."""

from .cursor import Cursor, CursorView
from .errors import (
    EmptyInputError,
    InvalidInputError,
    NoMarkSetError,
    OutOfBoundsError,
    RlexError,
    TokensConsumedError,
)
from .text import CharSequence, QuoteState, QuoteStyle

__all__ = [
    "Cursor",
    "CursorView",
    "CharSequence",
    "QuoteState",
    "QuoteStyle",
    "RlexError",
    "EmptyInputError",
    "InvalidInputError",
    "OutOfBoundsError",
    "NoMarkSetError",
    "TokensConsumedError",
]

__version__ = "0.1.0"
