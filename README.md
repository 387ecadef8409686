# histcross

histcross is a history crossword game with a Tk interface. You pick a
difficulty level. The game then shows a grid of letter cells beside a numbered
list of questions. When you check your answers, each cell turns light green if
it is right and pink if it is wrong. A message box shows your score, for
example `Правильно: 7 из 10 (70%)`.

## Installation

```
pip install .
```

The interface uses Tk (`tkinter`). Most Python builds include it. On some
Linux distributions you must install it separately, for example as
`python3-tk`.

## Running

```
histcross [DATA_DIR]
```

`DATA_DIR` is the directory that holds `level1.json`, `level2.json` and
`level3.json`. If you leave it out, the game uses `resources/data`, relative to
the current working directory.

The game opens on the main screen, which has two buttons:

- **Начать** opens the level selection screen, with levels 1 to 3.
- **Выход** closes the window.

Picking level *N* loads `levelN.json` from the data directory. If that file
cannot be loaded, the game shows a warning. On the crossword screen:

- **Проверить ответы** checks your answers.
- **Назад к выбору уровня** returns to level selection.

## Level files

Each level file holds one JSON object:

```json
{
  "title": "Древняя Русь",
  "rows": 5,
  "cols": 5,
  "questions": [
    {"question": "Первый русский царь", "answer": "иван",
     "row": 0, "col": 0, "horizontal": true}
  ]
}
```

The game reads it as follows:

- Each answer is upper-cased and written into the grid starting at
  (`row`, `col`), counted from 0.
- A horizontal answer runs across its row. A vertical answer runs down its
  column.
- Letters that run past the edge of the grid are dropped.
- An answer that starts outside the grid makes the file fail to load. So does
  a negative size or text that is not valid JSON.
- A missing or wrongly typed field counts as empty, 0 or false.
- Cells that no answer covers are blocked and shown in black.
- The game lists each question with its 1-based position and its direction
  (`по горизонтали` or `по вертикали`).
- A cell accepts only one Cyrillic letter (`А–Я`, `а–я`).

## Using the library

```python
from histcross.loader import load_crossword, parse_crossword, CrosswordLoadError
from histcross.checker import check_answers

crossword = load_crossword("level1.json")
print(crossword.title, crossword.rows(), crossword.cols())
for question in crossword.questions:
    print(question.direction(), question.text)

# One string per cell; None marks a blocked cell.
entries = [
    [crossword.cell_at(r, c) if crossword.is_open(r, c) else None
     for c in range(crossword.cols())]
    for r in range(crossword.rows())
]
result = check_answers(entries, crossword)
print(result.correct, result.total, result.percentage())
print(result.message())
```

The modules are:

- `histcross.loader`
  - `parse_crossword` builds a `Crossword` from JSON text or bytes.
  - `load_crossword` reads the JSON from a file and builds a `Crossword`.
  - Both raise `CrosswordLoadError` on failure.
- `histcross.crossword`: `Crossword`, an immutable grid with its title and
  questions.
- `histcross.question`: `Question`, one clue with its answer, start cell and
  direction.
- `histcross.checker`
  - `check_answers` compares the entries with the grid, ignoring case.
  - It returns a `CheckResult` with `correct`, `total` and a per-cell `marks`
    mapping.
- `histcross.fields`: `LetterEntry` and `create_input_field` for the
  single-letter cells, and `is_valid_letter`.
- `histcross.crosswordview`: `CrosswordView`, the crossword screen, and
  `format_questions`.
- `histcross.app`: `MainWindow`, `LevelSelect`, `level_path` and `main`.

## What it does not do

The package does not ship any level files. You must supply your own
`level1.json` to `level3.json` in the data directory. It also has no custom
visual theme and uses the default Tk look.

## Tests

```
pip install .[test]
pytest
```