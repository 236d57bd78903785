"""Decoded character storage backing every cursor."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Tuple

from rlex.errors import EmptyInputError, InvalidInputError


@dataclass(frozen=True, slots=True)
class CharSequence:
    """Immutable per-character view of a source string.

    Each character is paired with the UTF-8 byte offset where it starts in the
    encoded source, so ranges expressed in character indices can be cut out of
    the encoded bytes without ever landing inside a multi-byte sequence.
    """

    source: str
    _chars: Tuple[str, ...] = field(init=False, repr=False)
    _offsets: Tuple[int, ...] = field(init=False, repr=False)
    _encoded: bytes = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.source:
            raise EmptyInputError()
        try:
            encoded = self.source.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise InvalidInputError(exc.start) from exc
        chars = tuple(self.source)
        offsets = [0]
        for char in chars:
            offsets.append(offsets[-1] + len(char.encode("utf-8")))
        object.__setattr__(self, "_chars", chars)
        object.__setattr__(self, "_offsets", tuple(offsets))
        object.__setattr__(self, "_encoded", encoded)

    def __len__(self) -> int:
        return len(self._chars)

    def __getitem__(self, index: int) -> str:
        return self._chars[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self._chars)

    @property
    def byte_length(self) -> int:
        return self._offsets[-1]

    def byte_offset(self, index: int) -> int:
        """Return the byte offset of character ``index``.

        ``index == len(self)`` is accepted and yields the total byte length.
        """

        if index < 0 or index > len(self._chars):
            raise IndexError(f"character index {index} out of range")
        return self._offsets[index]

    def byte_range(self, start: int, end: int) -> Tuple[int, int]:
        """Return the half-open byte range covering characters ``start..end``."""

        if start > end:
            start, end = end, start
        return self.byte_offset(start), self.byte_offset(end + 1)

    def slice(self, start: int, end: int) -> str:
        """Return the original text for the inclusive range ``start..end``."""

        lo, hi = self.byte_range(start, end)
        return self._encoded[lo:hi].decode("utf-8")


__all__ = ["CharSequence"]
