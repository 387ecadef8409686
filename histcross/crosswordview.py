"""The screen that shows a crossword grid, its clues and the check button."""

from __future__ import annotations

import tkinter as tk
from tkinter import messagebox
from typing import Callable, Iterable, Optional

from histcross.checker import RESULT_TITLE, CheckResult, check_answers
from histcross.crossword import Crossword
from histcross.fields import create_input_field
from histcross.question import Question

QUESTIONS_HEADING = "Вопросы:"
CHECK_TEXT = "Проверить ответы"
BACK_TEXT = "Назад к выбору уровня"
CORRECT_COLOUR = "lightgreen"
WRONG_COLOUR = "pink"
BLOCKED_COLOUR = "black"

FieldFactory = Callable[[tk.Misc], tk.Widget]


def format_questions(questions: Iterable[Question]) -> str:
    """Render the clue list with 1-based positions and directions."""
    lines = [QUESTIONS_HEADING]
    for number, question in enumerate(questions, start=1):
        lines.append(
            f"{number}. ({question.row + 1},{question.col + 1}, "
            f"{question.direction()}) {question.text}"
        )
    return "\n".join(lines)


class CrosswordView(tk.Frame):
    """A crossword grid of input fields beside the list of clues."""

    def __init__(
        self,
        master: tk.Misc,
        crossword: Optional[Crossword] = None,
        field_factory: FieldFactory = create_input_field,
        on_back: Optional[Callable[[], None]] = None,
    ) -> None:
        super().__init__(master)
        self._crossword: Optional[Crossword] = None
        self._field_factory = field_factory
        self._on_back = on_back
        self._cells: list[list[Optional[tk.Widget]]] = []

        self._title = tk.Label(self, font=("TkDefaultFont", 20, "bold"))
        self._title.pack(side=tk.TOP, fill=tk.X)

        content = tk.Frame(self)
        content.pack(fill=tk.BOTH, expand=True)
        content.columnconfigure(0, weight=3)
        content.columnconfigure(1, weight=1)
        content.rowconfigure(0, weight=1)

        self._grid = tk.Frame(content)
        self._grid.grid(row=0, column=0, sticky="nsew")

        side = tk.Frame(content)
        side.grid(row=0, column=1, sticky="nsew")
        self._questions = tk.Label(
            side, justify=tk.LEFT, anchor="nw", wraplength=250
        )
        self._questions.pack(fill=tk.BOTH, expand=True)
        tk.Button(side, text=CHECK_TEXT, command=self.check_answers).pack(
            fill=tk.X
        )
        tk.Button(side, text=BACK_TEXT, command=self._back).pack(fill=tk.X)

        if crossword is not None:
            self.set_crossword(crossword)

    def _back(self) -> None:
        if self._on_back is not None:
            self._on_back()

    def set_crossword(self, crossword: Optional[Crossword]) -> None:
        """Show a crossword, replacing whatever grid was shown before."""
        self._crossword = crossword
        self._build_grid()
        if crossword is None:
            self._title.configure(text="")
            self._questions.configure(text="")
        else:
            self._title.configure(text=crossword.title)
            self._questions.configure(text=format_questions(crossword.questions))

    def _build_grid(self) -> None:
        for child in self._grid.winfo_children():
            child.destroy()
        self._cells = []
        crossword = self._crossword
        if crossword is None:
            return
        for row in range(crossword.rows()):
            line: list[Optional[tk.Widget]] = []
            for col in range(crossword.cols()):
                if crossword.is_open(row, col):
                    widget = self._field_factory(self._grid)
                    line.append(widget)
                else:
                    widget = tk.Label(self._grid, bg=BLOCKED_COLOUR, width=2)
                    line.append(None)
                widget.grid(row=row, column=col, padx=1, pady=1, sticky="nsew")
            self._cells.append(line)

    def entries(self) -> list[list[Optional[str]]]:
        """Return the entered text per cell, None for blocked cells."""
        return [
            [None if widget is None else widget.get() for widget in line]
            for line in self._cells
        ]

    def check_answers(self) -> Optional[CheckResult]:
        """Score the grid, colour each open cell and report the result."""
        if self._crossword is None:
            return None
        result = check_answers(self.entries(), self._crossword)
        for (row, col), correct in result.marks.items():
            widget = self._cells[row][col]
            if widget is not None:
                widget.configure(bg=CORRECT_COLOUR if correct else WRONG_COLOUR)
        messagebox.showinfo(RESULT_TITLE, result.message(), parent=self)
        return result