# tests/test_models.py

import pytest

from longspan.errors import InvalidSettingValue
from longspan.models import HighlightRange, Settings, parse_max_words


def test_highlight_range_rejects_empty_or_negative():
    with pytest.raises(ValueError):
        HighlightRange(start=3, end=3)
    with pytest.raises(ValueError):
        HighlightRange(start=-1, end=2)


def test_highlight_range_overlap():
    assert HighlightRange(0, 5).overlaps(HighlightRange(4, 8))
    assert not HighlightRange(0, 4).overlaps(HighlightRange(4, 8))


@pytest.mark.parametrize("value", ["abc", "", "0", "-4", 0, -1, None, True, "2.5"])
def test_parse_max_words_rejects_invalid(value):
    with pytest.raises(InvalidSettingValue):
        parse_max_words(value)


def test_parse_max_words_accepts_numbers():
    assert parse_max_words(7) == 7
    assert parse_max_words(" 12 ") == 12


def test_invalid_max_words_input_keeps_prior_value():
    settings = Settings(max_words=8)
    assert settings.with_max_words("abc") is settings
    assert settings.with_max_words("0") is settings
    assert settings.with_max_words("5").max_words == 5


def test_with_color():
    settings = Settings()
    assert settings.with_color("  ") is settings
    assert settings.with_color("#ff0000").highlight_color == "#ff0000"
    assert settings.with_color("#ff0000").max_words == settings.max_words
