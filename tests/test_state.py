from helixcore.selection import Selection
from helixcore.state import State


def test_new_state_has_cursor_at_start():
    state = State("hello")
    assert state.doc == "hello"
    assert state.selection == Selection.point(0)
    assert state.selection.cursor() == 0


def test_states_do_not_share_selection():
    a = State("x")
    b = State("y")
    a.selection = Selection.single(0, 1)
    assert b.selection == Selection.point(0)