"""An editable list of lines with a cursor and undo/redo history."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import TextIO

from .action import Action, ActionType
from .highlight import apply_syntax_highlighting


class HistoryError(IndexError):
    """Raised when there is nothing to undo or redo."""


class CursorError(ValueError):
    """Raised when a cursor position lies outside the buffer."""


class TextBuffer:
    """Lines of text, a cursor, and the history of edits made to them.

    Reports (the display, search hits, the cursor position) are written to
    ``out``, or to standard output when ``out`` is not given.
    """

    def __init__(self, out: TextIO | None = None) -> None:
        self._lines: list[str] = []
        self._cursor_line = 0
        self._cursor_column = 0
        self._undo: list[Action] = []
        self._redo: list[Action] = []
        self._out = out

    @property
    def lines(self) -> tuple[str, ...]:
        return tuple(self._lines)

    @property
    def cursor_line(self) -> int:
        return self._cursor_line

    @property
    def cursor_column(self) -> int:
        return self._cursor_column

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._lines))

    def add_line(self, line: str) -> None:
        """Append a line at the end."""
        self._lines.append(line)
        self._record(Action(ActionType.INSERT, len(self._lines) - 1, "", line))

    def insert_line(self, index: int, line: str) -> None:
        """Insert a line before ``index``; out-of-range indexes are ignored."""
        if 0 <= index <= len(self._lines):
            self._lines.insert(index, line)
            self._record(Action(ActionType.INSERT, index, "", line))

    def delete_line(self, index: int) -> None:
        """Remove the line at ``index``; out-of-range indexes are ignored."""
        if 0 <= index < len(self._lines):
            old_text = self._lines.pop(index)
            self._record(Action(ActionType.DELETE, index, old_text, ""))

    def edit_line(self, index: int, new_text: str) -> None:
        """Replace the line at ``index``; out-of-range indexes are ignored."""
        if 0 <= index < len(self._lines):
            old_text = self._lines[index]
            self._lines[index] = new_text
            self._record(Action(ActionType.EDIT, index, old_text, new_text))

    def move_cursor(self, line: int, column: int) -> None:
        """Place the cursor; valid parts are applied even if the other is not."""
        problems = []
        if 0 <= line < len(self._lines):
            self._cursor_line = line
        else:
            problems.append("Invalid line number.")
        if 0 <= column <= self._current_line_length():
            self._cursor_column = column
        else:
            problems.append("Invalid column number.")
        if problems:
            raise CursorError(" ".join(problems))

    def move_cursor_up(self) -> None:
        if self._cursor_line > 0:
            self._cursor_line -= 1

    def move_cursor_down(self) -> None:
        if self._cursor_line < len(self._lines) - 1:
            self._cursor_line += 1

    def move_cursor_left(self) -> None:
        if self._cursor_column > 0:
            self._cursor_column -= 1

    def move_cursor_right(self) -> None:
        if self._cursor_column < self._current_line_length():
            self._cursor_column += 1

    def show_cursor_position(self) -> None:
        self._write(f"Cursor at line: {self._cursor_line}, column: {self._cursor_column}")

    def display(self, language: str) -> None:
        """Write every line, highlighted for ``language``."""
        for line in self._lines:
            self._write(apply_syntax_highlighting(line, language))

    def undo(self) -> None:
        """Reverse the most recent action."""
        if not self._undo:
            raise HistoryError("Nothing to undo.")
        action = self._undo.pop()
        self._redo.append(action)
        match action.type:
            case ActionType.INSERT:
                del self._lines[action.line_index]
            case ActionType.DELETE:
                self._lines.insert(action.line_index, action.old_text)
            case ActionType.EDIT:
                self._lines[action.line_index] = action.old_text
            case ActionType.CURSOR_MOVE:
                self.move_cursor(action.prev_row, action.prev_col)

    def redo(self) -> None:
        """Reapply the most recently undone action."""
        if not self._redo:
            raise HistoryError("Nothing to redo.")
        action = self._redo.pop()
        self._undo.append(action)
        match action.type:
            case ActionType.INSERT:
                self._lines.insert(action.line_index, action.new_text)
            case ActionType.DELETE:
                del self._lines[action.line_index]
            case ActionType.EDIT:
                self._lines[action.line_index] = action.new_text
            case ActionType.CURSOR_MOVE:
                self.move_cursor(action.prev_row, action.prev_col)

    def clear(self) -> None:
        """Drop all lines and reset the cursor; the history is kept."""
        self._lines.clear()
        self._cursor_line = 0
        self._cursor_column = 0

    def search(self, keyword: str) -> list[int]:
        """Write every line containing ``keyword`` and return their indexes."""
        hits = [index for index, line in enumerate(self._lines) if keyword in line]
        for index in hits:
            self._write(f"Line {index}: {self._lines[index]}")
        if not hits:
            self._write(f'No match found for "{keyword}".')
        return hits

    def _current_line_length(self) -> int:
        if 0 <= self._cursor_line < len(self._lines):
            return len(self._lines[self._cursor_line])
        return 0

    def _record(self, action: Action) -> None:
        self._undo.append(action)
        self._redo.clear()

    def _write(self, text: str) -> None:
        print(text, file=sys.stdout if self._out is None else self._out)