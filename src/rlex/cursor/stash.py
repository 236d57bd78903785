"""Auxiliary character buffer carried alongside the cursor."""

from __future__ import annotations

from typing import Iterable, List, Optional


class Stash:
    """Ordered character accumulator, independent of cursor position."""

    def __init__(self) -> None:
        self._chars: List[str] = []

    def __len__(self) -> int:
        return len(self._chars)

    def push(self, char: str) -> None:
        self._chars.append(char)

    def extend(self, chars: Iterable[str]) -> None:
        self._chars.extend(chars)

    def pop(self) -> Optional[str]:
        if not self._chars:
            return None
        return self._chars.pop()

    def peek(self) -> str:
        return "".join(self._chars)

    def flush(self) -> str:
        """Return the buffered characters and leave the stash empty."""

        contents, self._chars = self._chars, []
        return "".join(contents)
