# helixcore

This library holds the editing core of a modal text editor. Documents are
ordinary `str` values, and every position is a character (code point) index.
Functions never change a document in place. Each one returns a new string or a
new object.

## Modules

- `helixcore.changeset` holds `ChangeSet`, which is built from `Retain`,
  `Delete` and `Insert` operations.
  - `compose` joins two change sets into one.
  - `invert` builds the change set that undoes this one. It needs the original
    document.
  - `apply` returns the changed string. It raises `ValueError` when the
    document length does not match.
  - `map_pos` moves a position through the changes, using `Assoc.BEFORE` or
    `Assoc.AFTER`.
  - `changes_iter` yields `(start, end, replacement)` tuples.
- `helixcore.transaction` holds `Transaction`, a frozen pair of a change set and
  an optional selection. You can build one with:
  - `Transaction.change(doc, changes)` from ordered `(start, end, text)` tuples.
    It raises `ValueError` when the changes are out of order or overlap.
  - `change_by_selection`, which makes one change per selection range.
  - `insert`, which inserts text at every selection head.
- `helixcore.selection` holds `Range` and `Selection`.
  - A range includes its anchor and excludes its head.
  - A selection is never empty. It keeps its ranges sorted and merges ranges
    that overlap.
  - `keep_matches`, `select_on_matches` and `split_on_matches` take a compiled
    pattern, from `re` or `regex`.
- `helixcore.state` holds `State`, which is a document and its selection.
- `helixcore.history` holds `History`, an undo tree.
  - `commit_revision(transaction, state)` records a revision. Call it before
    you apply the transaction.
  - `undo()` and `redo()` return the transaction to apply, or `None`.
- `helixcore.graphemes` finds grapheme-cluster boundaries and gives the display
  width of a cluster.
- `helixcore.position` holds `Position`, plus `coords_at_pos` and
  `pos_at_coords`. These convert between an index and a (row, column) pair,
  where the column counts grapheme clusters.
- `helixcore.movement` holds the moves and the character helpers:
  - `move_horizontally` and `move_vertically`, which take a `Direction`.
  - `move_next_word_start`, `move_prev_word_start` and `move_next_word_end`.
  - `categorize`, which returns a `Category` for a character.
- `helixcore.words`: `nth_prev_word_boundary`.
- `helixcore.search`: `find_nth_next` and `find_nth_prev` find a character's
  n-th occurrence.
- `helixcore.comment`: `toggle_line_comments` adds `// ` comments to the
  selected lines, or removes them. `find_line_comment` inspects a block of
  lines.
- `helixcore.auto_pairs`: `hook(doc, selection, ch)` works as follows:
  - An opening `(`, `{` or `[` also gets its closing partner when the next
    character is in `CLOSE_BEFORE` or is the end of the document.
  - A closing bracket steps over a matching one that is already there.
  - Quotes and backticks return `None`, which leaves them to plain insertion.
- `helixcore.register` stores named registers for the whole process through
  `get(name)` and `set(name, values)`. Both copy the list they are given or
  return.
- `helixcore.diagnostic` holds the `Diagnostic`, `DiagnosticRange` and
  `Severity` records.
- `helixcore.text` holds small helpers:
  - `find_first_non_whitespace_char`.
  - `find_root`, which returns the nearest directory that holds a `.git`
    directory.
  - `runtime_dir`, which returns `HELIX_RUNTIME` or the directory of the running
    program.
  - `config_dir` and `cache_dir`.

## Example

```python
from helixcore.state import State
from helixcore.transaction import Transaction
from helixcore.history import History

state = State("hello")
history = History()

tx = Transaction.change(state.doc, [(5, 5, " world!")])
history.commit_revision(tx, state)
state.doc = tx.apply(state.doc)
assert state.doc == "hello world!"

undo = history.undo()
state.doc = undo.apply(state.doc)
assert state.doc == "hello"
```

## What it does not do

This is a library only. It has no editor command, no screen and no file
storage. Nothing in it parses syntax trees. That means it offers no
syntax-aware indentation, no bracket matching, no selection expansion over
syntax nodes and no highlighting. The only comment token it knows is `//`.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```