import pytest

from rlex import Cursor


def make_cursor(source: str = "abcde", position: int = 2) -> Cursor[None, str]:
    cursor: Cursor[None, str] = Cursor(source)
    cursor.jump_to_pos(position)
    return cursor


def test_peek_forward_and_back_do_not_move() -> None:
    cursor = make_cursor()

    assert cursor.peek() == "d"
    assert cursor.peek_forward(2) == "e"
    assert cursor.peek_back() == "b"
    assert cursor.peek_back(2) == "a"
    assert cursor.position == 2


def test_zero_step_peek_returns_current_character() -> None:
    cursor = make_cursor()

    assert cursor.peek_forward(0) == "c"
    assert cursor.peek_back(0) == "c"


def test_peek_out_of_range_is_absent() -> None:
    cursor = make_cursor()

    assert cursor.peek_forward(3) is None
    assert cursor.peek_back(3) is None
    assert cursor.position == 2


def test_peek_rejects_negative_steps() -> None:
    cursor = make_cursor()

    with pytest.raises(ValueError):
        cursor.peek_forward(-1)
    with pytest.raises(ValueError):
        cursor.peek_back(-1)


def test_equality_checks() -> None:
    cursor = make_cursor()

    assert cursor.next_is("d")
    assert not cursor.next_is("x")
    assert cursor.next_is_by("e", 2)
    assert cursor.prev_is("b")
    assert cursor.prev_is_by("a", 2)
    assert not cursor.prev_is_by("a", 5)
    assert not cursor.next_is_by("e", 9)


def test_peek_handles_multibyte_characters() -> None:
    cursor = make_cursor("→λ😀", 1)

    assert cursor.peek() == "😀"
    assert cursor.peek_back() == "→"
    assert cursor.current_char() == "λ"
