# ============================================================================
# FILE: tests/unit/test_comment_extractor.py
# ============================================================================
"""
Unit tests for comment extraction
"""

from medication_schedule.parser.extractors import extract_comment
from medication_schedule.parser.extractors.comment import collect_notes


def test_instruction_note():
    """Test a single instruction phrase"""
    assert extract_comment("називин 2 капли 3 раза в день, в каждый носовой ход") == "В каждый носовой ход"


def test_multiple_notes_joined():
    """Test several notes joined with '; '"""
    comment = extract_comment("нурофен 1 таблетка после еды, запивая водой")
    assert comment == "Принимать после еды; Запивать водой"


def test_flags_come_first():
    """Test regimen flags precede instruction notes"""
    comment = extract_comment("нурофен 1 таблетка после еды при необходимости")
    assert comment == "По необходимости; Принимать после еды"


def test_every_other_day_flag():
    """Test 'через день' flag"""
    assert extract_comment("витамин д 1 капсула через день") == "Приём через день"


def test_notes_not_duplicated():
    """Test synonymous flags produce one note"""
    notes = collect_notes("по необходимости, при необходимости")
    assert notes == ["По необходимости"]


def test_short_text_has_no_comment():
    """Test segments under the minimum length are ignored"""
    assert extract_comment("на ночь") is None
    assert extract_comment("на ночь", min_length=0) == "Принимать на ночь"


def test_no_match():
    """Test text without instructions"""
    assert extract_comment("називин 2 капли 3 раза в день") is None
