"""An immutable crossword: title, letter grid and clues."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from histcross.question import Question

BLANK = " "


@dataclass(frozen=True)
class Crossword:
    """A crossword grid of single characters; blank cells hold a space."""

    title: str
    grid: tuple[tuple[str, ...], ...] = ()
    questions: tuple[Question, ...] = field(default_factory=tuple)

    def __init__(
        self,
        title: str,
        grid: Iterable[Iterable[str]] = (),
        questions: Iterable[Question] = (),
    ) -> None:
        object.__setattr__(self, "title", title)
        object.__setattr__(self, "grid", tuple(tuple(row) for row in grid))
        object.__setattr__(self, "questions", tuple(questions))

    def cell_at(self, row: int, col: int) -> str:
        """Return the character at the given cell."""
        if row < 0 or col < 0:
            raise IndexError(f"cell ({row}, {col}) is outside the grid")
        return self.grid[row][col]

    def rows(self) -> int:
        """Return the number of rows in the grid."""
        return len(self.grid)

    def cols(self) -> int:
        """Return the number of columns, taken from the first row."""
        return len(self.grid[0]) if self.grid else 0

    def is_open(self, row: int, col: int) -> bool:
        """Tell whether the cell takes a letter rather than being blocked."""
        return self.cell_at(row, col) != BLANK