import pytest

from rustlings.exercises.strings import current_favorite_color, is_a_color_word


def test_favorite_color():
    assert current_favorite_color() == "Blue"


@pytest.mark.parametrize("word", ["green", "blue", "red"])
def test_known_color_words(word):
    assert is_a_color_word(word) is True


@pytest.mark.parametrize("word", ["purple", "Green", "", "green "])
def test_unknown_color_words(word):
    assert is_a_color_word(word) is False