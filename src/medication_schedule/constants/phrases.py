# ============================================================================
# src/medication_schedule/constants/phrases.py
# ============================================================================
"""
Phrase Tables
- Filler words and duplicated function words removed by the normalizer
- Service markers and continuation cues used by the segmenter
- Frequency phrasings (part of day, fixed intervals)
- Clinical instruction notes
- Stop-words and leftover fragments for name extraction

All tables are read-only; ordered tables are tuples and are scanned in order.
"""


# ----------------------------------------------------------------------------
# Normalizer
# ----------------------------------------------------------------------------

FILLER_WORDS = (
    "в общем",
    "как бы",
    "значит",
    "короче",
    "типа",
    "эээ",
    "ээ",
    "эм",
    "ну",
    "так",
    "э",
)

DUPLICATE_TOKENS = (
    "по", "каждые", "каждый", "каждую", "каждое", "раза", "раз", "в", "на",
)

# ----------------------------------------------------------------------------
# Segmenter
# ----------------------------------------------------------------------------

# Clinical-note sections that never describe a medication; the whole line goes
SERVICE_LINE_MARKERS = (
    "жалобы:",
    "анамнез:",
    "осмотр:",
    "заключение:",
    "диагноз:",
)

# Headers that introduce the prescription itself; only the header goes
SECTION_HEADERS = (
    "рекомендации:",
    "рекомендация:",
    "назначения:",
    "назначено:",
    "лечение:",
)

# A line carrying one of these nouns extends the current medication
DURATION_NOUNS = (
    " день", " дня", " дней",
    " неделю", " недели", " недель",
    " месяц", " месяца", " месяцев",
)

# First words that mark a line as a continuation even when the next token is a number
CONTINUATION_LEADS = frozenset({
    "курс", "курс:", "на", "в", "всего", "затем", "потом", "ещё", "еще", "далее",
})

# ----------------------------------------------------------------------------
# Frequency
# ----------------------------------------------------------------------------

PART_OF_DAY_PATTERNS = (
    ("утром, днем и вечером", 3),
    ("утром, днём и вечером", 3),
    ("утром днем и вечером", 3),
    ("утром днём и вечером", 3),
    ("утро, день, вечер", 3),
    ("утром и вечером", 2),
    ("утро и вечер", 2),
    ("утром и на ночь", 2),
    ("только утром", 1),
    ("только вечером", 1),
)

INTERVAL_HOUR_PATTERNS = (
    ("каждые 3 час", 3),
    ("каждые три час", 3),
    ("каждые 4 час", 4),
    ("каждые четыре час", 4),
    ("каждые 6 час", 6),
    ("каждые шесть час", 6),
    ("каждые 8 час", 8),
    ("каждые восемь час", 8),
    ("каждые 12 час", 12),
    ("каждые двенадцать час", 12),
)

# ----------------------------------------------------------------------------
# Comment
# ----------------------------------------------------------------------------

# Regimen flags, checked before the instruction table
COMMENT_FLAGS = (
    (("через день",), "Приём через день"),
    (("по необходимости", "при необходимости", "по требованию"), "По необходимости"),
    (("потом",), "Схема меняется со временем"),
)

COMMENT_PATTERNS = (
    ("после еды", "Принимать после еды"),
    ("до еды", "Принимать до еды"),
    ("во время еды", "Принимать во время еды"),
    ("натощак", "Принимать натощак"),
    ("перед сном", "Принимать перед сном"),
    ("на ночь", "Принимать на ночь"),
    ("под язык", "Рассасывать под язык"),
    ("запивая водой", "Запивать водой"),
    ("в каждый носовой ход", "В каждый носовой ход"),
    ("в оба носовых хода", "В оба носовых хода"),
    ("в оба уха", "В оба уха"),
    ("в каждое ухо", "В каждое ухо"),
    ("в оба глаза", "В оба глаза"),
)

# ----------------------------------------------------------------------------
# Name
# ----------------------------------------------------------------------------

# A compound name stops at any of these
NAME_STOP_TOKENS = frozenset({
    "по", "в", "во", "на", "при", "через", "курс",
    "раз", "раза",
    "день", "дня", "дней",
    "неделю", "недели", "недель",
    "каждые", "каждый", "каждую", "каждое",
    "утром", "днем", "днём", "вечером", "ночью",
    "до", "после", "перед",
})

# First-non-stop-word fallback skips a wider set
NAME_FALLBACK_STOP_WORDS = NAME_STOP_TOKENS | frozenset({
    "по-",
    "таблетки", "таблетка", "табл", "таб",
    "капли", "капля", "кап", "кап.",
    "капсулы", "капсула", "капсул",
    "спрей", "раствор", "мазь", "гель", "сироп",
    "доза", "дозы", "доз.", "доз",
    "час", "часа", "часов",
    "мг", "мкг", "мл", "г",
})

# Leftover fragments that are never a real medication name
NAME_BLACKLIST = frozenset({
    "доз", "доза", "дозы", "кап", "кап.", "капли",
})

# Opening words of an "every N hours <name>" dictation
INTERVAL_OPENERS = frozenset({"каждые", "каждый"})

HOUR_WORD_PREFIXES = ("час", "ч")

PUNCTUATION = ".,;:!?()[]{}«»\"'—–-"

__all__ = [
    "FILLER_WORDS",
    "DUPLICATE_TOKENS",
    "SERVICE_LINE_MARKERS",
    "SECTION_HEADERS",
    "DURATION_NOUNS",
    "CONTINUATION_LEADS",
    "PART_OF_DAY_PATTERNS",
    "INTERVAL_HOUR_PATTERNS",
    "COMMENT_FLAGS",
    "COMMENT_PATTERNS",
    "NAME_STOP_TOKENS",
    "NAME_FALLBACK_STOP_WORDS",
    "NAME_BLACKLIST",
    "INTERVAL_OPENERS",
    "HOUR_WORD_PREFIXES",
    "PUNCTUATION",
]

