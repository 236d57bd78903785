"""Token accumulation for lexers driving a cursor."""

from __future__ import annotations

from typing import Generic, List, Optional, Tuple, TypeVar

from rlex.errors import TokensConsumedError

T = TypeVar("T")


class TokenCollection(Generic[T]):
    """Append-only token list that can be handed off exactly once.

    After ``consume`` the collection no longer owns any tokens and every
    further operation raises ``TokensConsumedError``.
    """

    def __init__(self) -> None:
        self._tokens: Optional[List[T]] = []

    @property
    def consumed(self) -> bool:
        return self._tokens is None

    def _require(self, operation: str) -> List[T]:
        if self._tokens is None:
            raise TokensConsumedError(operation)
        return self._tokens

    def __len__(self) -> int:
        return len(self._require("len"))

    def push(self, token: T) -> None:
        self._require("token_push").append(token)

    def pop(self) -> Optional[T]:
        tokens = self._require("token_pop")
        if not tokens:
            return None
        return tokens.pop()

    def last(self) -> Optional[T]:
        tokens = self._require("token_prev")
        if not tokens:
            return None
        return tokens[-1]

    def snapshot(self) -> Tuple[T, ...]:
        return tuple(self._require("tokens"))

    def consume(self) -> List[T]:
        tokens = self._require("token_consume")
        self._tokens = None
        return tokens
