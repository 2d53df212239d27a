import pytest

from helixcore.search import find_nth_next, find_nth_prev

TEXT = "hello world, hello"


def test_find_next_lands_on_char():
    found = find_nth_next(TEXT, "o", 0, 1, True)
    assert TEXT[found] == "o"
    assert "o" not in TEXT[1:found]


def test_find_next_exclusive_stops_before():
    inclusive = find_nth_next(TEXT, "o", 0, 1, True)
    exclusive = find_nth_next(TEXT, "o", 0, 1, False)
    assert exclusive == inclusive - 1


def test_find_next_nth_equals_repeated():
    first = find_nth_next(TEXT, "l", 0, 1, True)
    second = find_nth_next(TEXT, "l", first, 1, True)
    assert find_nth_next(TEXT, "l", 0, 2, True) == second
    assert second > first


def test_find_next_skips_char_at_pos():
    pos = TEXT.index("w")
    found = find_nth_next(TEXT, "w", pos, 1, True)
    assert found is None


def test_find_next_out_of_range_and_missing():
    assert find_nth_next(TEXT, "h", len(TEXT), 1, True) is None
    assert find_nth_next(TEXT, "z", 0, 1, True) is None


def test_find_prev_lands_on_char():
    found = find_nth_prev(TEXT, "o", len(TEXT), 1, True)
    assert TEXT[found] == "o"
    assert "o" not in TEXT[found + 1:]


def test_find_prev_exclusive_stops_after():
    inclusive = find_nth_prev(TEXT, "h", len(TEXT), 1, True)
    exclusive = find_nth_prev(TEXT, "h", len(TEXT), 1, False)
    assert exclusive == inclusive + 1


def test_find_prev_nth_equals_repeated():
    first = find_nth_prev(TEXT, "l", len(TEXT), 1, True)
    second = find_nth_prev(TEXT, "l", first, 1, True)
    assert find_nth_prev(TEXT, "l", len(TEXT), 2, True) == second


def test_find_prev_missing():
    assert find_nth_prev(TEXT, "z", len(TEXT), 1, True) is None
    assert find_nth_prev(TEXT, "h", 0, 1, True) is None


def test_find_prev_out_of_range():
    with pytest.raises(IndexError):
        find_nth_prev(TEXT, "h", len(TEXT) + 1, 1, True)