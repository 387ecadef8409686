import json
from pathlib import Path

import pytest

from histcross.app import level_path
from histcross.loader import CrosswordLoadError, load_crossword


def test_level_path_follows_level_file_naming():
    assert level_path(1, "data") == Path("data") / "level1.json"


@pytest.mark.parametrize("level", [1, 2, 3])
def test_level_path_is_inside_data_dir(tmp_path, level):
    path = level_path(level, tmp_path)
    assert path.parent == tmp_path
    assert path.name == f"level{level}.json"


def test_level_path_accepts_str_and_path_alike(tmp_path):
    assert level_path(2, str(tmp_path)) == level_path(2, tmp_path)


def test_distinct_levels_have_distinct_files(tmp_path):
    paths = {level_path(level, tmp_path) for level in (1, 2, 3)}
    assert len(paths) == 3


def test_level_file_round_trips_through_loader(tmp_path):
    document = {
        "title": "Древняя Русь",
        "rows": 1,
        "cols": 4,
        "questions": [
            {"question": "Государство", "answer": "русь", "row": 0, "col": 0,
             "horizontal": True}
        ],
    }
    path = level_path(3, tmp_path)
    path.write_text(json.dumps(document, ensure_ascii=False), encoding="utf-8")
    crossword = load_crossword(path)
    assert crossword.title == document["title"]
    assert "".join(crossword.grid[0]) == "РУСЬ"


def test_missing_level_file_raises(tmp_path):
    with pytest.raises(CrosswordLoadError):
        load_crossword(level_path(1, tmp_path))