"""Character cursor combining position, mark, stash, quotes and tokens."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Generic, Iterator, List, Optional, Tuple, TypeVar

from rlex.errors import NoMarkSetError, RlexError
from rlex.runtime import telemetry
from rlex.text import (
    DEFAULT_QUOTE_STYLE,
    CharSequence,
    QuoteState,
    QuoteStyle,
    scan_quote_state,
)

from .stash import Stash
from .tokens import TokenCollection
from .validation import ensure_position

S = TypeVar("S")
T = TypeVar("T")


@dataclass(slots=True)
class CursorView:
    """Point-in-time copy of a cursor, returned by ``snapshot`` and ``trace``."""

    position: int
    mark: Optional[int]
    char: str
    length: int
    stash: str
    token_count: Optional[int]


class Cursor(Generic[S, T]):
    """Stateful read head over a non-empty string.

    The position is always a valid index into the decoded characters; steps
    and walks clamp at either edge and report the boundary through their
    return values instead of raising. ``S`` and ``T`` are the caller's state
    and token types and are never inspected.
    """

    def __init__(
        self,
        source: str,
        state: Optional[S] = None,
        *,
        quotes: Optional[QuoteStyle] = None,
        logger_name: Optional[str] = None,
    ) -> None:
        self._logger_name = logger_name
        self._position = 0
        with telemetry.span("new", logger_name=logger_name):
            with self._reporting("new"):
                self._chars = CharSequence(source)
        self._mark: Optional[int] = None
        self._stash = Stash()
        self._state = state
        self._tokens: TokenCollection[T] = TokenCollection()
        self._quotes = quotes or DEFAULT_QUOTE_STYLE

    @property
    def source(self) -> str:
        return self._chars.source

    @property
    def chars(self) -> CharSequence:
        return self._chars

    @property
    def length(self) -> int:
        return len(self._chars)

    @property
    def position(self) -> int:
        return self._position

    @property
    def mark(self) -> Optional[int]:
        return self._mark

    def current_char(self) -> str:
        return self._chars[self._position]

    def _last(self) -> int:
        return len(self._chars) - 1

    def _report(
        self, error: RlexError, operation: str, target: Optional[int] = None
    ) -> RlexError:
        telemetry.record_event(
            f"cursor.{type(error).__name__}",
            telemetry.CursorEvent(
                operation=operation,
                position=self._position,
                target=target,
                detail=str(error),
            ),
            level="warning",
            logger_name=self._logger_name,
        )
        return error

    @contextmanager
    def _reporting(
        self, operation: str, target: Optional[int] = None
    ) -> Iterator[None]:
        try:
            yield
        except RlexError as exc:
            raise self._report(exc, operation, target) from None

    def _require_mark(self, operation: str) -> int:
        if self._mark is None:
            raise self._report(NoMarkSetError(operation), operation)
        return self._mark

    def at_start(self) -> bool:
        return self._position == 0

    def at_end(self) -> bool:
        return self._position == self._last()

    def at_mark(self) -> bool:
        return self._mark is not None and self._position == self._mark

    def step_forward(self) -> bool:
        """Advance one character; ``False`` if already on the last one."""

        if self._position >= self._last():
            return False
        self._position += 1
        return True

    def step_back(self) -> bool:
        if self._position <= 0:
            return False
        self._position -= 1
        return True

    def step_forward_by(self, steps: int) -> int:
        """Advance up to ``steps`` characters and return how many were taken."""

        if steps < 0:
            raise ValueError("steps cannot be negative")
        moved = min(steps, self._last() - self._position)
        self._position += moved
        return moved

    def step_back_by(self, steps: int) -> int:
        if steps < 0:
            raise ValueError("steps cannot be negative")
        moved = min(steps, self._position)
        self._position -= moved
        return moved

    def jump_to_start(self) -> None:
        self._position = 0

    def jump_to_end(self) -> None:
        self._position = self._last()

    def jump_to_pos(self, position: int) -> None:
        with self._reporting("jump_to_pos", target=position):
            self._position = ensure_position(self._chars, position)

    def jump_to_mark(self) -> None:
        self._position = self._require_mark("jump_to_mark")

    def walk_forward_until(self, char: str) -> bool:
        """Step forward until landing on ``char``.

        The current character is not examined; at least one step is attempted.
        Returns ``False`` with the cursor left on the last character when
        ``char`` never shows up.
        """

        while self.step_forward():
            if self.current_char() == char:
                return True
        return False

    def walk_back_until(self, char: str) -> bool:
        while self.step_back():
            if self.current_char() == char:
                return True
        return False

    def walk_to_end(self, predicate: Callable[["Cursor[S, T]"], bool]) -> bool:
        """Step forward for as long as ``predicate(self)`` allows.

        The predicate is consulted on the current character before every step
        and may touch the stash, state or tokens. Returns ``True`` when the
        predicate stopped the walk and ``False`` when the end was reached.
        """

        while True:
            if not predicate(self):
                return True
            if not self.step_forward():
                return False

    def walk_to_start(self, predicate: Callable[["Cursor[S, T]"], bool]) -> bool:
        while True:
            if not predicate(self):
                return True
            if not self.step_back():
                return False

    def mark_current_position(self) -> None:
        self._mark = self._position

    def mark_reset(self) -> None:
        """Move the mark back to the first character (it stays set)."""

        self._mark = 0

    def peek_forward(self, steps: int = 1) -> Optional[str]:
        """Return the character ``steps`` ahead, or ``None`` past the end."""

        if steps < 0:
            raise ValueError("steps cannot be negative")
        target = self._position + steps
        if target >= len(self._chars):
            return None
        return self._chars[target]

    def peek_back(self, steps: int = 1) -> Optional[str]:
        if steps < 0:
            raise ValueError("steps cannot be negative")
        target = self._position - steps
        if target < 0:
            return None
        return self._chars[target]

    def peek(self) -> Optional[str]:
        return self.peek_forward(1)

    def next_is(self, char: str) -> bool:
        return self.peek_forward(1) == char

    def next_is_by(self, char: str, steps: int) -> bool:
        return self.peek_forward(steps) == char

    def prev_is(self, char: str) -> bool:
        return self.peek_back(1) == char

    def prev_is_by(self, char: str, steps: int) -> bool:
        return self.peek_back(steps) == char

    def stash_current_char(self) -> None:
        self._stash.push(self.current_char())

    def stash_push(self, char: str) -> None:
        self._stash.push(char)

    def stash_pop(self) -> Optional[str]:
        return self._stash.pop()

    def stash_peek(self) -> str:
        return self._stash.peek()

    def stash_flush(self) -> str:
        return self._stash.flush()

    def stash_use_mark(self) -> None:
        """Stash every character from the mark to the cursor, both inclusive.

        Characters are copied in source order whichever side of the mark the
        cursor is on.
        """

        mark = self._require_mark("stash_use_mark")
        lo, hi = sorted((mark, self._position))
        self._stash.extend(self._chars[index] for index in range(lo, hi + 1))

    def str_from_mark(self) -> str:
        mark = self._require_mark("str_from_mark")
        return self._chars.slice(mark, self._position)

    def str_from_start(self) -> str:
        return self._chars.slice(0, self._position)

    def str_to_end(self) -> str:
        return self._chars.slice(self._position, self._last())

    def str_from_range(self, start: int, end: int) -> str:
        with self._reporting("str_from_range", target=start):
            ensure_position(self._chars, start)
        with self._reporting("str_from_range", target=end):
            ensure_position(self._chars, end)
        return self._chars.slice(start, end)

    def quote_state(self) -> QuoteState:
        """Scan from the first character up to the cursor.

        Linear in the cursor position on every call; avoid it in per-character
        loops over large inputs.
        """

        return scan_quote_state(self._chars, self._position, self._quotes)

    def is_in_quote(self) -> bool:
        return self.quote_state().quoted

    def state(self) -> Optional[S]:
        return self._state

    def state_set(self, state: S) -> None:
        self._state = state

    def token_push(self, token: T) -> None:
        with self._reporting("token_push"):
            self._tokens.push(token)

    def token_pop(self) -> Optional[T]:
        with self._reporting("token_pop"):
            return self._tokens.pop()

    def token_prev(self) -> Optional[T]:
        with self._reporting("token_prev"):
            return self._tokens.last()

    def tokens(self) -> Tuple[T, ...]:
        with self._reporting("tokens"):
            return self._tokens.snapshot()

    def token_consume(self) -> List[T]:
        """Hand the accumulated tokens to the caller.

        The cursor keeps working for navigation afterwards, but any further
        token operation raises ``TokensConsumedError``.
        """

        with self._reporting("token_consume"):
            return self._tokens.consume()

    def snapshot(self) -> CursorView:
        return CursorView(
            position=self._position,
            mark=self._mark,
            char=self.current_char(),
            length=len(self._chars),
            stash=self._stash.peek(),
            token_count=None if self._tokens.consumed else len(self._tokens),
        )

    def trace(self) -> CursorView:
        view = self.snapshot()
        telemetry.record_event(
            "cursor.trace",
            telemetry.CursorEvent(
                operation="trace",
                position=view.position,
                target=view.mark,
                detail=(
                    f"char={view.char!r} stash={view.stash!r} "
                    f"tokens={view.token_count}"
                ),
            ),
            level="debug",
            logger_name=self._logger_name,
        )
        return view

    def __repr__(self) -> str:
        return (
            f"Cursor(position={self._position}, length={len(self._chars)}, "
            f"mark={self._mark})"
        )


__all__ = ["Cursor", "CursorView"]
