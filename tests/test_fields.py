import pytest

from histcross.fields import is_valid_letter


@pytest.mark.parametrize("text", ["А", "я", "Ж", "щ", "Я", "а"])
def test_single_cyrillic_letter_is_accepted(text):
    assert is_valid_letter(text) is True


def test_empty_text_is_accepted_so_a_cell_can_be_cleared():
    assert is_valid_letter("") is True


@pytest.mark.parametrize("text", ["A", "z", "1", " ", "-", "?"])
def test_non_cyrillic_characters_are_rejected(text):
    assert is_valid_letter(text) is False


@pytest.mark.parametrize("text", ["АБ", "яя", "Ая", "А "])
def test_more_than_one_character_is_rejected(text):
    assert is_valid_letter(text) is False


@pytest.mark.parametrize("text", ["Ё", "ё"])
def test_letters_outside_the_range_are_rejected(text):
    assert is_valid_letter(text) is False