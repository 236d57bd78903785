"""Property-based checks for cursor navigation invariants."""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from rlex import CharSequence, Cursor, OutOfBoundsError

source_text = st.text(min_size=1, max_size=60)


@st.composite
def source_and_position(draw: st.DrawFn) -> tuple[str, int]:
    source = draw(source_text)
    position = draw(st.integers(min_value=0, max_value=len(source) - 1))
    return source, position


def make_cursor(source: str, position: int = 0) -> Cursor[None, str]:
    cursor: Cursor[None, str] = Cursor(source)
    cursor.jump_to_pos(position)
    return cursor


@given(source=source_text)
def test_construction_starts_at_zero(source: str) -> None:
    cursor = make_cursor(source)

    assert cursor.position == 0
    assert cursor.length == len(source)
    assert cursor.current_char() == source[0]


@given(data=source_and_position())
def test_step_forward_then_back_restores_position(data: tuple[str, int]) -> None:
    source, position = data
    cursor = make_cursor(source, position)

    if position < len(source) - 1:
        assert cursor.step_forward()
        assert cursor.step_back()
        assert cursor.position == position
    else:
        assert not cursor.step_forward()
        assert cursor.position == position


@given(data=source_and_position(), steps=st.integers(min_value=0, max_value=70))
def test_peek_matches_stepping(data: tuple[str, int], steps: int) -> None:
    source, position = data
    peeker = make_cursor(source, position)
    walker = make_cursor(source, position)

    peeked = peeker.peek_forward(steps)
    assert peeker.position == position

    taken = 0
    for _ in range(steps):
        if walker.step_forward():
            taken += 1
    if taken == steps:
        assert peeked == walker.current_char()
    else:
        assert peeked is None


@given(
    data=source_and_position(),
    moves=st.lists(st.integers(min_value=-10, max_value=10), max_size=20),
)
def test_mark_round_trip(data: tuple[str, int], moves: list[int]) -> None:
    source, position = data
    cursor = make_cursor(source, position)
    cursor.mark_current_position()

    for move in moves:
        if move >= 0:
            cursor.step_forward_by(move)
        else:
            cursor.step_back_by(-move)
        assert 0 <= cursor.position < len(source)

    cursor.jump_to_mark()
    assert cursor.position == position


@given(chars=st.lists(st.characters(), max_size=30))
def test_stash_flush_preserves_order(chars: list[str]) -> None:
    cursor = make_cursor("x")
    for char in chars:
        cursor.stash_push(char)

    assert cursor.stash_flush() == "".join(chars)
    assert cursor.stash_flush() == ""


@given(data=source_and_position(), other=st.integers(min_value=0, max_value=59))
def test_stash_use_mark_is_order_independent(
    data: tuple[str, int], other: int
) -> None:
    source, position = data
    other = other % len(source)
    lo, hi = sorted((position, other))

    forward = make_cursor(source, position)
    forward.mark_current_position()
    forward.jump_to_pos(other)
    forward.stash_use_mark()

    backward = make_cursor(source, other)
    backward.mark_current_position()
    backward.jump_to_pos(position)
    backward.stash_use_mark()

    assert forward.stash_flush() == source[lo : hi + 1]
    assert backward.stash_flush() == source[lo : hi + 1]


@given(data=source_and_position(), target=st.integers(min_value=60))
def test_jump_past_end_fails_without_moving(
    data: tuple[str, int], target: int
) -> None:
    source, position = data
    cursor = make_cursor(source, position)

    with pytest.raises(OutOfBoundsError):
        cursor.jump_to_pos(target)
    assert cursor.position == position


@settings(max_examples=200)
@given(source=source_text, bounds=st.tuples(st.integers(0, 59), st.integers(0, 59)))
def test_byte_slicing_matches_code_point_slicing(
    source: str, bounds: tuple[int, int]
) -> None:
    chars = CharSequence(source)
    start, end = (bound % len(source) for bound in bounds)
    lo, hi = sorted((start, end))

    assert chars.slice(start, end) == source[lo : hi + 1]
