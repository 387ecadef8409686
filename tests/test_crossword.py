import pytest

from histcross.crossword import Crossword
from histcross.question import Question

GRID = ["ДОН", "А  ", "Р  "]


def make():
    q = Question("Река", "ДОН", 0, 0, True)
    return Crossword("История", GRID, [q])


def test_dimensions_match_grid():
    cw = make()
    assert cw.rows() == len(GRID)
    assert cw.cols() == len(GRID[0])


def test_empty_grid_has_no_columns():
    cw = Crossword("Пусто")
    assert cw.rows() == 0
    assert cw.cols() == 0


def test_cell_at_returns_grid_characters():
    cw = make()
    for r, line in enumerate(GRID):
        for c, ch in enumerate(line):
            assert cw.cell_at(r, c) == ch


def test_is_open_follows_blank_cells():
    cw = make()
    for r, line in enumerate(GRID):
        for c, ch in enumerate(line):
            assert cw.is_open(r, c) == (ch != " ")


def test_out_of_range_raises():
    cw = make()
    with pytest.raises(IndexError):
        cw.cell_at(len(GRID), 0)
    with pytest.raises(IndexError):
        cw.cell_at(-1, 0)


def test_title_and_questions_kept():
    cw = make()
    assert cw.title == "История"
    assert [q.answer for q in cw.questions] == ["ДОН"]


def test_grid_is_independent_of_input():
    source = [list("АБ")]
    cw = Crossword("t", source)
    source[0][0] = "Я"
    assert cw.cell_at(0, 0) == "А"