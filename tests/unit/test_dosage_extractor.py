# ============================================================================
# FILE: tests/unit/test_dosage_extractor.py
# ============================================================================
"""
Unit tests for dosage extraction and unit canonicalization
"""

import pytest
from medication_schedule.constants import normalize_unit
from medication_schedule.parser.extractors import extract_dosage


# ============================================================================
# Dose-form families
# ============================================================================

@pytest.mark.parametrize("text, expected", [
    ("називин 2 капли 3 раза в день", "2 капли"),
    ("називин по 2 кап 3 раза", "2 капли"),
    ("називин по 2 кап. 3 раза", "2 капли"),
    ("називин по 2 капли", "2 капли"),
    ("по 5 капель", "5 капли"),
])
def test_drops(text, expected):
    """Test drop declensions and abbreviations share one canonical form"""
    assert extract_dosage(text) == expected


@pytest.mark.parametrize("text, expected", [
    ("парацетамол по 1 таблетке", "1 таблетки"),
    ("нурофен 2 таблетки", "2 таблетки"),
    ("нурофен 1 табл", "1 таблетки"),
    ("нурофен 1 таб. утром", "1 таблетки"),
])
def test_tablets(text, expected):
    """Test tablet forms"""
    assert extract_dosage(text) == expected


def test_capsules_not_read_as_drops():
    """Test 'капсулы' is not matched by the drops family"""
    assert extract_dosage("флуконазол 1 капсула") == "1 капсулы"


def test_spray_units():
    """Test spray actuation words"""
    assert extract_dosage("отривин 1 впрыск") == "1 впрыска"
    assert extract_dosage("аква марис 2 впрыска") == "2 впрыска"
    assert extract_dosage("мометазон 2 пшика") == "2 пшик"
    assert extract_dosage("назонекс 2 нажатия") == "2 нажатия"


@pytest.mark.parametrize("text, expected", [
    ("эуфиллин по 0,5 таблетки 2 раза в день", "0.5 таблетки"),
    ("флуконазол 1,5 капсулы", "1.5 капсулы"),
    ("по 0.5 таб утром", "0.5 таблетки"),
])
def test_fractional_dose_forms(text, expected):
    """Test decimal counts of dose forms, comma or point"""
    assert extract_dosage(text) == expected


def test_generic_doses():
    """Test 'доза' forms"""
    assert extract_dosage("ингалятор по 2 дозы") == "2 дозы"


def test_family_order():
    """Test drops are preferred over tablets in the same text"""
    assert extract_dosage("1 таблетка и 2 капли") == "2 капли"


# ============================================================================
# Measured amounts
# ============================================================================

@pytest.mark.parametrize("text, expected", [
    ("амоксиклав 500 мг", "500 мг"),
    ("сироп 0,5 мл", "0.5 мл"),
    ("ибупрофен 2.5 мл", "2.5 мл"),
    ("витамин д 1000 ме", "1000 ме"),
    ("амоксициллин 50 мг/кг", "50 мг/кг"),
    ("мирамистин 0.01 %", "0.01 %"),
    ("аугментин 1 г", "1 г"),
])
def test_measured_amounts(text, expected):
    """Test compact and decimal forms with known units"""
    assert extract_dosage(text) == expected


def test_unit_prefix_not_matched():
    """Test 'г' inside a word is not a unit"""
    assert extract_dosage("гексорал 2 раза в день") is None


# ============================================================================
# Number words
# ============================================================================

def test_number_word_with_po():
    """Test 'по' + number word + unit"""
    assert extract_dosage("називин по две капли") == "2 капли"


def test_number_word_without_po():
    """Test number word + unit"""
    assert extract_dosage("нурофен одна таблетка утром") == "1 таблетки"


def test_no_dosage():
    """Test text without a dosage"""
    assert extract_dosage("називин 3 раза в день") is None
    assert extract_dosage("") is None


# ============================================================================
# Unit canonicalization
# ============================================================================

def test_normalize_unit():
    """Test unit synonyms and stems"""
    assert normalize_unit("табл.") == "таблетки"
    assert normalize_unit("кап") == "капли"
    assert normalize_unit("КАПЕЛЬ") == "капли"
    assert normalize_unit("таблетками") == "таблетки"
    assert normalize_unit("капсулами") == "капсулы"
    assert normalize_unit("mg") == "мг"
    assert normalize_unit("мг/кг") == "мг/кг"
    assert normalize_unit("xyz") == "xyz"
