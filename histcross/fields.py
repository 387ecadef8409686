"""Single-letter input cells for the crossword grid."""

from __future__ import annotations

import re
import tkinter as tk

_LETTER = re.compile("[А-Яа-я]")
FIELD_FONT = ("TkDefaultFont", 16)


def is_valid_letter(text: str) -> bool:
    """Tell whether text may stand in a letter cell: empty or one Cyrillic letter."""
    return text == "" or _LETTER.fullmatch(text) is not None


class LetterEntry(tk.Entry):
    """A centred entry that accepts at most one Cyrillic letter."""

    def __init__(self, master: tk.Misc) -> None:
        super().__init__(master, width=2, justify=tk.CENTER, font=FIELD_FONT)
        validator = self.register(is_valid_letter)
        self.configure(validate="key", validatecommand=(validator, "%P"))


def create_input_field(master: tk.Misc) -> LetterEntry:
    """Create the default input field for an open crossword cell."""
    return LetterEntry(master)