from histcross.crosswordview import QUESTIONS_HEADING, format_questions
from histcross.question import HORIZONTAL, VERTICAL, Question


def _question(text, row, col, horizontal):
    return Question(text=text, answer="РУСЬ", row=row, col=col, horizontal=horizontal)


def test_empty_list_has_only_heading():
    assert format_questions([]) == QUESTIONS_HEADING


def test_heading_comes_first():
    text = format_questions([_question("Кто?", 0, 0, True)])
    assert text.splitlines()[0] == QUESTIONS_HEADING


def test_positions_are_one_based():
    text = format_questions([_question("Кто?", 0, 2, True)])
    assert text.splitlines()[1] == f"1. (1,3, {HORIZONTAL}) Кто?"


def test_vertical_direction_is_named():
    text = format_questions([_question("Где?", 4, 0, False)])
    line = text.splitlines()[1]
    assert VERTICAL in line
    assert HORIZONTAL not in line
    assert line.endswith("Где?")


def test_one_line_per_question_in_order():
    questions = [
        _question("Первый", 0, 0, True),
        _question("Второй", 1, 1, False),
        _question("Третий", 2, 0, True),
    ]
    lines = format_questions(questions).splitlines()
    assert len(lines) == len(questions) + 1
    for number, (line, question) in enumerate(zip(lines[1:], questions), start=1):
        assert line.startswith(f"{number}. ")
        assert line.endswith(question.text)
        assert question.direction() in line