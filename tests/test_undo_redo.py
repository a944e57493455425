import io

import pytest

from linepad.text_buffer import HistoryError, TextBuffer
from linepad.undo_redo import UndoRedoManager


def make_buffer(*lines):
    buffer = TextBuffer(out=io.StringIO())
    for line in lines:
        buffer.add_line(line)
    return buffer


def test_undo_recorded_insert_removes_line():
    buffer = make_buffer("a", "b")
    manager = UndoRedoManager()
    manager.record_insert(1, "b")
    manager.undo(buffer)
    assert buffer.lines == ("a",)


def test_redo_recorded_insert_restores_line():
    buffer = make_buffer("a", "b")
    manager = UndoRedoManager()
    manager.record_insert(1, "b")
    manager.undo(buffer)
    manager.redo(buffer)
    assert buffer.lines == ("a", "b")


def test_undo_recorded_delete_reinserts_line():
    buffer = make_buffer("a", "c")
    manager = UndoRedoManager()
    manager.record_delete(1, "b")
    manager.undo(buffer)
    assert buffer.lines == ("a", "b", "c")
    manager.redo(buffer)
    assert buffer.lines == ("a", "c")


def test_undo_cursor_move_returns_cursor():
    buffer = make_buffer("abc", "defg")
    manager = UndoRedoManager()
    manager.record_cursor_move(1, 3)
    manager.undo(buffer)
    assert (buffer.cursor_line, buffer.cursor_column) == (1, 3)


def test_empty_history_raises():
    buffer = make_buffer("a")
    manager = UndoRedoManager()
    with pytest.raises(HistoryError, match="Nothing to undo."):
        manager.undo(buffer)
    with pytest.raises(HistoryError, match="Nothing to redo."):
        manager.redo(buffer)
    assert buffer.lines == ("a",)


def test_new_record_clears_redo():
    buffer = make_buffer("a", "b")
    manager = UndoRedoManager()
    manager.record_insert(1, "b")
    manager.undo(buffer)
    manager.record_insert(0, "a")
    with pytest.raises(HistoryError):
        manager.redo(buffer)


def test_actions_are_undone_last_first():
    buffer = make_buffer("a", "b", "c")
    manager = UndoRedoManager()
    manager.record_insert(1, "b")
    manager.record_insert(2, "c")
    manager.undo(buffer)
    assert buffer.lines == ("a", "b")
    manager.undo(buffer)
    assert buffer.lines == ("a",)