"""A history of edits that is replayed through a buffer's public methods."""

from __future__ import annotations

from .action import Action, ActionType
from .text_buffer import HistoryError, TextBuffer


class UndoRedoManager:
    """Undo and redo stacks kept apart from the buffer they act on."""

    def __init__(self) -> None:
        self._undo: list[Action] = []
        self._redo: list[Action] = []

    def record_insert(self, row: int, line: str) -> None:
        self._record(Action(ActionType.INSERT, row, "", line))

    def record_delete(self, row: int, line: str) -> None:
        self._record(Action(ActionType.DELETE, row, line, ""))

    def record_cursor_move(self, prev_row: int, prev_col: int) -> None:
        self._record(Action(ActionType.CURSOR_MOVE, 0, "", "", prev_row, prev_col))

    def undo(self, buffer: TextBuffer) -> None:
        """Reverse the most recent recorded action on ``buffer``."""
        if not self._undo:
            raise HistoryError("Nothing to undo.")
        action = self._undo.pop()
        self._redo.append(action)
        match action.type:
            case ActionType.INSERT:
                buffer.delete_line(action.line_index)
            case ActionType.DELETE:
                buffer.insert_line(action.line_index, action.old_text)
            case ActionType.EDIT:
                buffer.edit_line(action.line_index, action.old_text)
            case ActionType.CURSOR_MOVE:
                buffer.move_cursor(action.prev_row, action.prev_col)

    def redo(self, buffer: TextBuffer) -> None:
        """Reapply the most recently undone action on ``buffer``."""
        if not self._redo:
            raise HistoryError("Nothing to redo.")
        action = self._redo.pop()
        self._undo.append(action)
        match action.type:
            case ActionType.INSERT:
                buffer.insert_line(action.line_index, action.new_text)
            case ActionType.DELETE:
                buffer.delete_line(action.line_index)
            case ActionType.EDIT:
                buffer.edit_line(action.line_index, action.new_text)
            case ActionType.CURSOR_MOVE:
                buffer.move_cursor(action.prev_row, action.prev_col)

    def _record(self, action: Action) -> None:
        self._undo.append(action)
        self._redo.clear()