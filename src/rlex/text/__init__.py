"""Character storage and text scanning helpers."""

from .quote import DEFAULT_QUOTE_STYLE, QuoteState, QuoteStyle, scan_quote_state
from .sequence import CharSequence

__all__ = [
    "CharSequence",
    "QuoteState",
    "QuoteStyle",
    "DEFAULT_QUOTE_STYLE",
    "scan_quote_state",
]
