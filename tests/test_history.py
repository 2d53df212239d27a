from helixcore.history import History
from helixcore.selection import Selection
from helixcore.state import State
from helixcore.transaction import Transaction


def _undo(history: History, state: State) -> None:
    transaction = history.undo()
    if transaction is not None:
        state.doc = transaction.apply(state.doc)


def _redo(history: History, state: State) -> None:
    transaction = history.redo()
    if transaction is not None:
        state.doc = transaction.apply(state.doc)


def test_undo_redo():
    history = History()
    state = State("hello")

    transaction1 = Transaction.change(state.doc, [(5, 5, " world!")])
    history.commit_revision(transaction1, state)
    state.doc = transaction1.apply(state.doc)
    assert state.doc == "hello world!"

    transaction2 = Transaction.change(state.doc, [(6, 11, "世界")])
    history.commit_revision(transaction2, state)
    state.doc = transaction2.apply(state.doc)
    assert state.doc == "hello 世界!"

    _undo(history, state)
    assert state.doc == "hello world!"
    _redo(history, state)
    assert state.doc == "hello 世界!"
    _undo(history, state)
    _undo(history, state)
    assert state.doc == "hello"

    # undo at root is a no-op
    _undo(history, state)
    assert state.doc == "hello"


def test_root_state():
    history = History()
    assert history.at_root()
    assert history.current_revision() == 0
    assert history.undo() is None
    assert history.redo() is None


def test_revision_cursor_moves():
    history = History()
    state = State("ab")
    transaction = Transaction.change(state.doc, [(2, 2, "c")])
    history.commit_revision(transaction, state)
    assert history.current_revision() == 1
    assert not history.at_root()
    history.undo()
    assert history.current_revision() == 0
    assert history.redo() is transaction
    assert history.current_revision() == 1


def test_revert_keeps_original_selection():
    history = History()
    state = State("abc", Selection.point(2))
    transaction = Transaction.change(state.doc, [(0, 1, None)])
    history.commit_revision(transaction, state)
    revert = history.undo()
    assert revert.selection == Selection.point(2)
    assert revert.apply("bc") == "abc"


def test_redo_picks_latest_branch():
    history = History()
    state = State("x")
    first = Transaction.change(state.doc, [(1, 1, "1")])
    history.commit_revision(first, state)
    history.undo()
    second = Transaction.change(state.doc, [(1, 1, "2")])
    history.commit_revision(second, state)
    history.undo()
    assert history.redo() is second
    assert history.current_revision() == 2