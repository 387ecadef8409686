"""A single crossword clue and where its answer sits in the grid."""

from __future__ import annotations

from dataclasses import dataclass

HORIZONTAL = "по горизонтали"
VERTICAL = "по вертикали"


@dataclass(frozen=True)
class Question:
    """A clue, its upper-case answer and the cell where the answer starts."""

    text: str
    answer: str
    row: int
    col: int
    horizontal: bool

    def direction(self) -> str:
        """Return the human-readable direction of the answer."""
        return HORIZONTAL if self.horizontal else VERTICAL