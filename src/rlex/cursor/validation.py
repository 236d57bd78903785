"""Validation helpers shared across cursor services."""

from __future__ import annotations

from rlex.errors import OutOfBoundsError
from rlex.text import CharSequence


def ensure_position(chars: CharSequence, position: int) -> int:
    if position < 0 or position >= len(chars):
        raise OutOfBoundsError(position, len(chars))
    return position
