"""Quoted-region detection over a character sequence."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence


class QuoteState(str, Enum):
    """Where a scan currently sits relative to quoted text."""

    OUTSIDE = "outside"
    IN_SINGLE = "in_single"
    IN_DOUBLE = "in_double"

    @property
    def quoted(self) -> bool:
        return self is not QuoteState.OUTSIDE


@dataclass(frozen=True, slots=True)
class QuoteStyle:
    """Delimiter and escape characters recognised by the scanner."""

    single: str = "'"
    double: str = '"'
    escape: str = "\\"

    def __post_init__(self) -> None:
        for name in ("single", "double", "escape"):
            value = getattr(self, name)
            if len(value) != 1:
                raise ValueError(f"{name} must be a single character, got {value!r}")
        if len({self.single, self.double, self.escape}) != 3:
            raise ValueError("quote and escape characters must be distinct")


DEFAULT_QUOTE_STYLE = QuoteStyle()


def scan_quote_state(
    chars: Sequence[str],
    end: int,
    style: QuoteStyle = DEFAULT_QUOTE_STYLE,
) -> QuoteState:
    """Return the quote state reached after scanning ``chars[0:end]``.

    A delimiter directly preceded by the escape character is literal. The
    escape test looks only at the raw previous character, so ``\\\\"`` still
    counts the quote as escaped. The scan always starts from index 0; callers
    running it per character pay O(n) each time.
    """

    state = QuoteState.OUTSIDE
    previous = ""
    for index in range(min(end, len(chars))):
        char = chars[index]
        if previous != style.escape:
            if char == style.single and state is not QuoteState.IN_DOUBLE:
                state = (
                    QuoteState.OUTSIDE
                    if state is QuoteState.IN_SINGLE
                    else QuoteState.IN_SINGLE
                )
            elif char == style.double and state is not QuoteState.IN_SINGLE:
                state = (
                    QuoteState.OUTSIDE
                    if state is QuoteState.IN_DOUBLE
                    else QuoteState.IN_DOUBLE
                )
        previous = char
    return state


__all__ = ["QuoteState", "QuoteStyle", "DEFAULT_QUOTE_STYLE", "scan_quote_state"]
