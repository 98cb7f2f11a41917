# ============================================================================
# FILE: tests/unit/test_name_extractor.py
# ============================================================================
"""
Unit tests for medication name extraction
"""

from medication_schedule.parser.extractors import extract_name, first_result
from medication_schedule.parser.extractors.name import (
    name_from_quotes,
    name_from_compound,
    name_after_dose_keyword,
    name_fallback,
)


def test_simple_name():
    """Test the leading word before a number"""
    assert extract_name("називин 2 капли 3 раза в день") == "називин"


def test_name_before_po():
    """Test the name stops at 'по'"""
    assert extract_name("парацетамол по 1 таблетке каждые 6 часов") == "парацетамол"


def test_quoted_name_wins():
    """Test a quoted name beats everything else"""
    assert extract_name("спрей «мометазон» 2 впрыска") == "мометазон"
    assert extract_name('капли "отривин беби" 1 капля') == "отривин беби"


def test_compound_name():
    """Test multi-word names up to three words"""
    assert extract_name("аква марис спрей 2 впрыска") == "аква марис спрей"
    assert name_from_compound("один два три четыре") is None
    assert name_from_compound("альфа бета гамма дельта 2 капли") == "альфа бета гамма"


def test_compound_stops_at_dose_form():
    """Test a dose-form word ends the name"""
    assert extract_name("називин капли 2 раза в день") == "називин"
    assert extract_name("нурофен таблетки по 1") == "нурофен"


def test_compound_stops_at_unit_abbreviation():
    """Test exact unit tokens end the name, prefixes do not"""
    assert extract_name("амоксиклав мг 500") == "амоксиклав"
    assert extract_name("гексорал 2 впрыска") == "гексорал"


def test_compound_stops_at_comma():
    """Test a comma closes the name"""
    assert extract_name("називин, отривин 2 капли") == "називин"


def test_punctuation_stripped():
    """Test punctuation around the name is removed"""
    assert extract_name("називин: 2 капли") == "називин"
    assert extract_name("називин (капли) 2 капли") == "називин"


def test_interval_opener_skipped():
    """Test 'каждые N часов <name>' yields the name"""
    assert extract_name("каждые 2 часа пурпурин по 1 таблетке") == "пурпурин"


def test_lone_generic_form_rejected():
    """Test a single form noun is not a compound name"""
    assert name_from_compound("спрей 2 впрыска") is None


def test_name_after_dose_keyword():
    """Test the word following a dose-form word"""
    assert name_after_dose_keyword("по 2 капли отривин") == "отривин"
    assert extract_name("по 2 капли отривин 3 раза") == "отривин"
    assert name_after_dose_keyword("по 2 капли 3 раза") is None


def test_fallback_first_non_stop_word():
    """Test the fallback skips stop-words and numbers"""
    assert name_fallback("утром 2 мирамистин") == "мирамистин"
    assert name_fallback("3 раза в день") is None


def test_no_name():
    """Test text without any name candidate"""
    assert extract_name("3 раза в день 7 дней") is None
    assert extract_name("") is None


def test_quotes_absent():
    """Test the quote strategy on unquoted text"""
    assert name_from_quotes("називин 2 капли") is None


def test_first_result_short_circuits():
    """Test strategies after the first hit are not evaluated"""
    calls = []

    def miss(text):
        calls.append("miss")
        return None

    def hit(text):
        calls.append("hit")
        return "called"

    def never(text):
        calls.append("never")
        return "late"

    assert first_result([miss, hit, never], "x") == "called"
    assert calls == ["miss", "hit"]


def test_first_result_skips_empty_strings():
    """Test an empty string counts as no result"""
    assert first_result([lambda t: "", lambda t: "value"], "x") == "value"
    assert first_result([lambda t: None], "x") is None
