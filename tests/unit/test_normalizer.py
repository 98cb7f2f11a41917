# ============================================================================
# FILE: tests/unit/test_normalizer.py
# ============================================================================
"""
Unit tests for the text normalizer
"""

import pytest
from medication_schedule.parser.normalizer import normalize


def test_empty_input():
    """Test empty and whitespace-only input"""
    assert normalize("") == ""
    assert normalize("   \n\t ") == ""


def test_lowercases_and_trims():
    """Test lowercasing and trimming"""
    assert normalize("  Називин  ") == "називин"


def test_line_breaks_unified():
    """Test CRLF and CR become LF"""
    assert normalize("Називин\r\nНурофен\rОтривин") == "називин\nнурофен\nотривин"


def test_exotic_whitespace():
    """Test tabs and no-break spaces become plain spaces"""
    assert normalize("називин\t2 капли") == "називин 2 капли"


def test_filler_words_removed():
    """Test filler words are dropped as whole words"""
    assert normalize("Ну значит Називин 2 капли") == "називин 2 капли"
    assert normalize("в общем типа отривин") == "отривин"


def test_filler_inside_word_kept():
    """Test fillers are not cut out of longer words"""
    assert normalize("также эмоксипин") == "также эмоксипин"


def test_duplicate_function_words_collapsed():
    """Test stuttered function words"""
    assert normalize("по по 2 капли") == "по 2 капли"
    assert normalize("каждые каждые 6 часов") == "каждые 6 часов"
    assert normalize("3 раза раза в в день") == "3 раза в день"


def test_digit_letter_boundaries():
    """Test digits and letters are separated in both directions"""
    assert normalize("500мг") == "500 мг"
    assert normalize("0.5г") == "0.5 г"
    assert normalize("2кап") == "2 кап"
    assert normalize("таб2") == "таб 2"


def test_blank_lines_preserved():
    """Test a blank line survives and longer runs collapse to one"""
    assert normalize("Називин\n\nНурофен") == "називин\n\nнурофен"
    assert normalize("Називин\n\n\n\nНурофен") == "називин\n\nнурофен"


def test_spaces_around_line_breaks():
    """Test spaces next to line breaks are removed"""
    assert normalize("називин  \n  нурофен") == "називин\nнурофен"


def test_combined_cleanup():
    """Test a dictated line with every kind of noise"""
    assert normalize("Ну  Називин 2кап по по 3 р/д") == "називин 2 кап по 3 р/д"


@pytest.mark.parametrize("raw", [
    "Ну  Називин 2кап по по 3 р/д",
    "ну ну ну називин",
    "по по по 2 капли",
    "Жалобы: насморк\r\n\r\n\r\nНазивин 0,5мг\t3 раза",
    "  э  так  по  ",
    "Аква Марис (спрей) 2впрыска",
])
def test_idempotent(raw):
    """Test normalize(normalize(x)) == normalize(x)"""
    once = normalize(raw)
    assert normalize(once) == once
