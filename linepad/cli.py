"""Interactive menu-driven line editor."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

from .file_io import load_from_file, save_to_file
from .text_buffer import HistoryError, TextBuffer

MENU = """
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
0. Exit"""

_MOVES: dict[str, Callable[[TextBuffer], None]] = {
    "w": TextBuffer.move_cursor_up,
    "s": TextBuffer.move_cursor_down,
    "a": TextBuffer.move_cursor_left,
    "d": TextBuffer.move_cursor_right,
}


def _add_line(buffer: TextBuffer, language: str) -> None:
    buffer.add_line(input("Enter line to add: "))


def _insert_line(buffer: TextBuffer, language: str) -> None:
    raw = input("Enter index to insert at: ")
    try:
        index = int(raw)
    except ValueError:
        print("Invalid index.")
        return
    buffer.insert_line(index - 1, input("Enter line: "))


def _delete_line(buffer: TextBuffer, language: str) -> None:
    buffer.delete_line(buffer.cursor_line)
    print("Deleted line at cursor.")


def _edit_line(buffer: TextBuffer, language: str) -> None:
    buffer.edit_line(buffer.cursor_line, input("Enter new text for current line: "))


def _move_cursor(buffer: TextBuffer, language: str) -> None:
    answer = input("Move (W/A/S/D): ").strip().lower()
    move = _MOVES.get(answer[:1])
    if move is None:
        print("Invalid direction.")
    else:
        move(buffer)


def _show_cursor(buffer: TextBuffer, language: str) -> None:
    buffer.show_cursor_position()


def _display(buffer: TextBuffer, language: str) -> None:
    buffer.display(language)


def _undo(buffer: TextBuffer, language: str) -> None:
    try:
        buffer.undo()
    except HistoryError as error:
        print(error)


def _redo(buffer: TextBuffer, language: str) -> None:
    try:
        buffer.redo()
    except HistoryError as error:
        print(error)


def _save(buffer: TextBuffer, language: str) -> None:
    filename = input("Enter filename to save: ")
    try:
        save_to_file(filename, buffer)
    except OSError:
        print("Failed to open file for writing.", file=sys.stderr)
    else:
        print(f"File saved successfully to {filename}.")


def _load(buffer: TextBuffer, language: str) -> None:
    filename = input("Enter filename to load: ")
    try:
        load_from_file(filename, buffer)
    except (OSError, UnicodeDecodeError):
        print(f"Failed to open file: {filename}", file=sys.stderr)
    else:
        print(f"File loaded successfully from {filename}.")


def _search(buffer: TextBuffer, language: str) -> None:
    buffer.search(input("Enter keyword to search: "))


_COMMANDS: dict[int, Callable[[TextBuffer, str], None]] = {
    1: _add_line,
    2: _insert_line,
    3: _delete_line,
    4: _edit_line,
    5: _move_cursor,
    6: _show_cursor,
    7: _display,
    8: _undo,
    9: _redo,
    10: _save,
    11: _load,
    12: _search,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run the editor menu until the user exits or input ends."""
    parser = argparse.ArgumentParser(prog="linepad", description="Menu-driven line editor.")
    parser.add_argument(
        "--language",
        default="cpp",
        help="language used to highlight the display (cpp, python, javascript)",
    )
    args = parser.parse_args(argv)

    buffer = TextBuffer()
    try:
        while True:
            print(MENU)
            raw = input("Choose an option: ")
            try:
                choice = int(raw)
            except ValueError:
                print("Invalid option.")
                continue
            if choice == 0:
                return 0
            command = _COMMANDS.get(choice)
            if command is None:
                print("Invalid option.")
            else:
                command(buffer, args.language)
    except EOFError:
        return 0