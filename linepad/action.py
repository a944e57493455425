"""Records of edits kept on the undo and redo stacks."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class ActionType(Enum):
    """Kind of change an action describes."""

    INSERT = auto()
    DELETE = auto()
    EDIT = auto()
    CURSOR_MOVE = auto()


@dataclass(frozen=True)
class Action:
    """A single reversible change to a buffer.

    ``line_index`` applies to inserts, deletes and edits; ``old_text`` holds
    the text before an edit or delete, ``new_text`` the text after an edit or
    insert; ``prev_row`` and ``prev_col`` hold the cursor position for a
    cursor move.
    """

    type: ActionType
    line_index: int
    old_text: str = ""
    new_text: str = ""
    prev_row: int = 0
    prev_col: int = 0