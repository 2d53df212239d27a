import pytest

from helixcore.movement import (
    Category,
    Direction,
    categorize,
    is_punctuation,
    is_word,
    move_horizontally,
    move_next_word_end,
    move_next_word_start,
    move_prev_word_start,
    move_vertically,
    skip_over_next,
    skip_over_prev,
)
from helixcore.position import Position, coords_at_pos, pos_at_coords
from helixcore.selection import Range

WORD_TEST_CASE = "_hello_world_あいうえおー1234567890１２３４５６７８９０"
PUNCTUATION_TEST_CASE = (
    "!\"#$%&'()*+,-./:;<=>?@[\\]^`{|}~！”＃＄％＆’（）＊＋、。：；＜＝＞？＠「」＾｀｛｜｝～"
)
WHITESPACE_TEST_CASE = "  \u3000   "


def test_vertical_move():
    text = "abcd\nefg\nwrs"
    pos = pos_at_coords(text, Position(0, 4))
    moved = move_vertically(text, Range(pos, pos), Direction.FORWARD, 1, False)
    assert coords_at_pos(text, moved.head) == Position(1, 2)


def test_vertical_move_backward_keeps_horiz():
    text = "abcd\nefg\nwrs"
    moved = move_vertically(text, Range(7, 7), Direction.BACKWARD, 1, False)
    assert moved.head == 2
    assert moved.anchor == 2
    assert moved.horiz == 2


def test_vertical_move_extend_keeps_anchor():
    text = "abcd\nefg\nwrs"
    moved = move_vertically(text, Range(1, 1), Direction.FORWARD, 1, True)
    assert (moved.anchor, moved.head) == (1, 6)


def test_categorize_eol():
    assert categorize("\n") is Category.EOL


@pytest.mark.parametrize("ch", list(WHITESPACE_TEST_CASE))
def test_categorize_whitespace(ch):
    assert categorize(ch) is Category.WHITESPACE


@pytest.mark.parametrize("ch", list(WORD_TEST_CASE))
def test_categorize_word(ch):
    assert categorize(ch) is Category.WORD


@pytest.mark.parametrize("ch", list(PUNCTUATION_TEST_CASE))
def test_categorize_punctuation(ch):
    assert categorize(ch) is Category.PUNCTUATION


def test_is_word_and_punctuation():
    assert is_word("_")
    assert not is_word("-")
    assert is_punctuation("-")
    assert not is_punctuation("a")


def test_move_horizontally_forward_clamped_to_line():
    moved = move_horizontally("abc\ndef", Range(1, 1), Direction.FORWARD, 5, False)
    assert (moved.anchor, moved.head) == (3, 3)


def test_move_horizontally_backward_clamped_to_line():
    moved = move_horizontally("abc\ndef", Range(5, 5), Direction.BACKWARD, 5, False)
    assert (moved.anchor, moved.head) == (4, 4)


def test_move_horizontally_extend():
    moved = move_horizontally("abc\ndef", Range(1, 1), Direction.FORWARD, 1, True)
    assert (moved.anchor, moved.head) == (1, 2)


def test_move_next_word_start():
    assert move_next_word_start("hello world", 0, 1) == Range(0, 5)
    assert move_next_word_start("hello world", 4, 1) == Range(5, 5)


def test_move_next_word_start_at_end():
    assert move_next_word_start("ab", 1, 1) is None


def test_move_prev_word_start():
    assert move_prev_word_start("hello world", 10, 1) == Range(10, 6)
    assert move_prev_word_start("hello world", 0, 1) is None


def test_move_next_word_end():
    assert move_next_word_end("hello world", 0, 1) == Range(0, 4)
    assert move_next_word_end("abc", 1, 1) is None


def test_skip_over_next():
    assert skip_over_next("aaab", 0, lambda c: c == "a") == (3, False)
    assert skip_over_next("aaabc", 0, lambda c: c == "a") == (3, True)
    assert skip_over_next("aaa", 0, lambda c: c == "a") == (3, False)


def test_skip_over_prev():
    assert skip_over_prev("abbb", 3, lambda c: c == "b") == (0, False)
    assert skip_over_prev("bbb", 2, lambda c: c == "b") == (0, True)
    assert skip_over_prev("abcd", 3, lambda c: c == "x") == (3, False)


def test_skip_over_prev_out_of_range():
    with pytest.raises(IndexError):
        skip_over_prev("abc", 3, str.isspace)