"""Loading crosswords from their JSON description."""

from __future__ import annotations

import json
import os
from typing import Any

from histcross.crossword import BLANK, Crossword
from histcross.question import Question


class CrosswordLoadError(Exception):
    """Raised when a crossword cannot be read or does not fit its grid."""


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _as_int(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return 0


def _as_bool(value: Any) -> bool:
    return value if isinstance(value, bool) else False


def _as_dict(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def _as_list(value: Any) -> list:
    return value if isinstance(value, list) else []


def _place(grid: list[list[str]], question: Question) -> None:
    rows = len(grid)
    cols = len(grid[0]) if grid else 0
    if question.row < 0 or question.col < 0:
        raise CrosswordLoadError(
            f"answer {question.answer!r} starts outside the grid"
        )
    for offset, letter in enumerate(question.answer):
        if question.horizontal:
            row, col = question.row, question.col + offset
            if col >= cols:
                break
        else:
            row, col = question.row + offset, question.col
            if row >= rows:
                break
        if row >= rows or col >= cols:
            raise CrosswordLoadError(
                f"answer {question.answer!r} starts outside the grid"
            )
        grid[row][col] = letter


def parse_crossword(data: str | bytes) -> Crossword:
    """Build a crossword from JSON text; answers are written into the grid."""
    try:
        document = json.loads(data)
    except (ValueError, TypeError) as exc:
        raise CrosswordLoadError(f"invalid crossword data: {exc}") from exc

    obj = _as_dict(document)
    title = _as_str(obj.get("title"))
    rows = _as_int(obj.get("rows"))
    cols = _as_int(obj.get("cols"))
    if rows < 0 or cols < 0:
        raise CrosswordLoadError(f"invalid grid size {rows}x{cols}")

    grid = [[BLANK] * cols for _ in range(rows)]
    questions = []
    for item in _as_list(obj.get("questions")):
        entry = _as_dict(item)
        question = Question(
            text=_as_str(entry.get("question")),
            answer=_as_str(entry.get("answer")).upper(),
            row=_as_int(entry.get("row")),
            col=_as_int(entry.get("col")),
            horizontal=_as_bool(entry.get("horizontal")),
        )
        questions.append(question)
        _place(grid, question)

    return Crossword(title, grid, questions)


def load_crossword(path: str | os.PathLike) -> Crossword:
    """Read and parse a crossword JSON file."""
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError as exc:
        raise CrosswordLoadError(f"cannot open {path}: {exc}") from exc
    return parse_crossword(data)