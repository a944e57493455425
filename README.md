# linepad

linepad is a small, menu-driven text editor for the terminal. It keeps a
document as a list of lines. You can add, insert, edit and delete lines and
move a cursor between them. Edits can be undone and redone. The editor can
search for text, save the lines to a file and load them back. The buffer can
be shown with simple keyword and comment highlighting for C++, Python and
JavaScript.

## Installation

```
pip install .
```

## Running the editor

```
linepad
linepad --language python
```

`--language` picks the highlighting used by "Display buffer". It accepts
`cpp` (the default), `python` or `javascript`. Any other name shows lines
without colour.

A numbered menu appears:

```
--- Text Editor ---
1. Add line
2. Insert line
3. Delete line (at cursor)
4. Edit line (at cursor)
5. Move cursor
6. Show cursor position
7. Display buffer
8. Undo
9. Redo
10. Save to file
11. Load from file
12. Search
0. Exit
```

Type the number of an option and answer its prompts. Some notes:

- Line numbers for "Insert line" start at 1. An index outside the buffer is
  ignored.
- "Delete line" and "Edit line" act on the line the cursor is on.
- "Move cursor" takes `W` (up), `S` (down), `A` (left) or `D` (right), in
  either case.
- Lines shown by "Search" and the cursor position are numbered from 0.
- Files are read and written as UTF-8, one line per buffer line. Loading a
  file replaces the buffer. If the file cannot be read, the buffer is left
  as it was and an error is printed.
- The editor stops on `0` or at the end of input.

## Using it as a library

```python
from linepad.text_buffer import TextBuffer
from linepad.file_io import save_to_file, load_from_file
from linepad.highlight import apply_syntax_highlighting

buf = TextBuffer()
buf.add_line("int main() {")
buf.add_line("    return 0; // done")
buf.add_line("}")

buf.edit_line(2, "} // end")
buf.undo()          # restores "}"
buf.redo()          # applies "} // end" again

hits = buf.search("return")   # prints the match and returns [1]
buf.display("cpp")

save_to_file("out.cpp", buf)
load_from_file("out.cpp", buf)

print(apply_syntax_highlighting("def f(): return 1  # one", "python"))
```

`TextBuffer` exposes `lines` (a tuple), `cursor_line` and `cursor_column`, and
supports `len()` and iteration. Output from `display`, `search` and
`show_cursor_position` goes to standard output, or to the text stream passed
as `TextBuffer(out=...)`.

Errors are raised as exceptions from `linepad.text_buffer`:

- `HistoryError` (an `IndexError`) from `undo` or `redo` when there is nothing
  to undo or redo.
- `CursorError` (a `ValueError`) from `move_cursor` when the line or column is
  out of range. Any part that was valid is still applied.

`load_from_file` and `save_to_file` raise `OSError` when the file cannot be
opened. `load_from_file` also raises `UnicodeDecodeError` when the file is not
UTF-8.

Every add, insert, delete and edit is recorded in the buffer's history, and a
new edit clears what could be redone. `clear()` empties the lines and resets
the cursor but keeps the history. Loading a file records each loaded line as
an insert.

`linepad.undo_redo.UndoRedoManager` keeps a separate history. It records
inserts, deletes and cursor moves with `record_insert`, `record_delete` and
`record_cursor_move`. It replays them on a `TextBuffer` with `undo(buffer)`
and `redo(buffer)` through the buffer's public methods.

`linepad.action` holds the `ActionType` enum and the frozen `Action` record
that both histories store.

Highlighting uses ANSI colour codes. Keywords are shown in red and comments
(`//` for C++ and JavaScript, `#` for Python) in green.

## What it does not do

linepad edits whole lines only. There is no full-screen view and no editing of
characters at the cursor. The cursor column can be moved but no command uses
it. Cursor moves are not recorded in a `TextBuffer`'s undo history.