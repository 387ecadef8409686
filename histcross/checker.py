"""Scoring a player's letters against a crossword."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from histcross.crossword import Crossword

RESULT_TITLE = "Результат"


@dataclass(frozen=True)
class CheckResult:
    """Counts of correct cells and, per open cell, whether it was right."""

    correct: int
    total: int
    marks: dict[tuple[int, int], bool] = field(default_factory=dict)

    def percentage(self) -> int:
        """Return the share of correct cells as a whole percentage."""
        return self.correct * 100 // self.total if self.total > 0 else 0

    def message(self) -> str:
        """Return the result line shown to the player."""
        return (
            f"Правильно: {self.correct} из {self.total} ({self.percentage()}%)"
        )


def check_answers(
    entries: Iterable[Iterable[Optional[str]]], crossword: Crossword
) -> CheckResult:
    """Compare entered letters with the crossword; None marks a blocked cell."""
    marks: dict[tuple[int, int], bool] = {}
    for row, line in enumerate(entries):
        for col, text in enumerate(line):
            if text is None:
                continue
            marks[(row, col)] = text.upper() == crossword.cell_at(row, col)
    return CheckResult(
        correct=sum(marks.values()), total=len(marks), marks=marks
    )