from helixcore.comment import find_line_comment, toggle_line_comments
from helixcore.selection import Selection
from helixcore.state import State


def test_find_line_comment():
    # four lines, two space indented, except for line 1 which is blank.
    state = State("  1\n\n  2\n  3")
    state.selection = Selection.single(0, len(state.doc) - 1)

    res = find_line_comment("//", state.doc, range(0, 3))
    assert res == (False, [1], 2)

    # comment
    transaction = toggle_line_comments(state.doc, state.selection)
    state.doc = transaction.apply(state.doc)
    state.selection = state.selection.map(transaction.changes)
    assert state.doc == "  // 1\n\n  // 2\n  // 3"

    # uncomment
    transaction = toggle_line_comments(state.doc, state.selection)
    state.doc = transaction.apply(state.doc)
    state.selection = state.selection.map(transaction.changes)
    assert state.doc == "  1\n\n  2\n  3"


def test_find_line_comment_all_commented():
    text = "  // 1\n\n  // 2\n  // 3"
    commented, skipped, min_col = find_line_comment("//", text, range(0, 4))
    assert commented is True
    assert skipped == [1]
    assert min_col == 2


def test_find_line_comment_all_blank():
    assert find_line_comment("//", "\n\n", range(0, 2)) == (True, [0, 1], None)


def test_toggle_only_blank_lines_is_noop():
    doc = "\n\n"
    transaction = toggle_line_comments(doc, Selection.point(0))
    assert transaction.apply(doc) == doc


def test_toggle_single_cursor_only_touches_its_line():
    doc = "a\nb"
    transaction = toggle_line_comments(doc, Selection.point(2))
    assert transaction.apply(doc) == "a\n// b"


def test_toggle_round_trip():
    doc = "x = 1\n    y = 2\n"
    sel = Selection.single(0, len(doc) - 1)
    first = toggle_line_comments(doc, sel)
    commented = first.apply(doc)
    second = toggle_line_comments(commented, sel.map(first.changes))
    assert second.apply(commented) == doc