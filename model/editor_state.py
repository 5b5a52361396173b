# model/editor_state.py

"""
Immutable state of the formula editor behind the calculator keypad.

Every editing action returns a new EditorState; nothing is mutated in place.
The cursor is an insertion point between characters and is kept within
[0, len(text)].
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Optional


def _clamp(cursor: int, text: str) -> int:
    return max(0, min(cursor, len(text)))


@dataclass(frozen=True, slots=True)
class EditorState:
    text: str = ""
    cursor: int = 0
    table_visible: bool = False

    def __post_init__(self):
        if not 0 <= self.cursor <= len(self.text):
            raise ValueError(
                f"Cursor {self.cursor} outside text of length {len(self.text)}"
            )

    def insert(self, fragment: str) -> EditorState:
        """Insert text at the cursor and move the cursor past it."""
        text = self.text[: self.cursor] + fragment + self.text[self.cursor :]
        return replace(self, text=text, cursor=self.cursor + len(fragment))

    def backspace(self) -> EditorState:
        """Delete the character left of the cursor, if any."""
        if self.cursor == 0:
            return self
        text = self.text[: self.cursor - 1] + self.text[self.cursor :]
        return replace(self, text=text, cursor=self.cursor - 1)

    def clear(self) -> EditorState:
        return replace(self, text="", cursor=0)

    def move_left(self) -> EditorState:
        return replace(self, cursor=max(0, self.cursor - 1))

    def move_right(self) -> EditorState:
        return replace(self, cursor=min(len(self.text), self.cursor + 1))

    def set_text(self, text: str, cursor: Optional[int] = None) -> EditorState:
        """Replace the whole text, as when the user types into the field.

        Without an explicit cursor it lands at the end of the text.
        """
        position = len(text) if cursor is None else _clamp(cursor, text)
        return replace(self, text=text, cursor=position)

    def toggle_table(self) -> EditorState:
        return replace(self, table_visible=not self.table_visible)
