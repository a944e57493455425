"""Loading buffers from and saving them to text files."""

from __future__ import annotations

import os

from .text_buffer import TextBuffer


def load_from_file(filename: str | os.PathLike[str], buffer: TextBuffer) -> None:
    """Replace the buffer's contents with the lines of ``filename``.

    The buffer is left untouched if the file cannot be read.
    """
    with open(filename, encoding="utf-8") as handle:
        content = handle.read()
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    buffer.clear()
    for line in lines:
        buffer.add_line(line)


def save_to_file(filename: str | os.PathLike[str], buffer: TextBuffer) -> None:
    """Write each line of the buffer to ``filename``, newline-terminated."""
    with open(filename, "w", encoding="utf-8") as handle:
        handle.writelines(f"{line}\n" for line in buffer.lines)