"""Cursor navigation, stash and token threading."""

from .cursor import Cursor, CursorView
from .stash import Stash
from .tokens import TokenCollection
from .validation import ensure_position

__all__ = [
    "Cursor",
    "CursorView",
    "Stash",
    "TokenCollection",
    "ensure_position",
]
