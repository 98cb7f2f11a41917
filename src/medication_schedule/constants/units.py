# ============================================================================
# src/medication_schedule/constants/units.py
# ============================================================================
"""
Dosage Unit Tables
- Synonyms collapsing abbreviations and declensions to one canonical unit
- Dose-form word stems used to bound medication names
"""

from types import MappingProxyType

# Exact word -> canonical unit
UNIT_SYNONYMS = MappingProxyType({
    # Tablets
    "табл": "таблетки",
    "таб": "таблетки",
    "таблетка": "таблетки",
    "таблетки": "таблетки",
    "таблетку": "таблетки",
    "таблетке": "таблетки",
    "таблеток": "таблетки",
    "таблетками": "таблетки",

    # Drops
    "кап": "капли",
    "капля": "капли",
    "капли": "капли",
    "каплю": "капли",
    "капле": "капли",
    "капель": "капли",
    "каплями": "капли",

    # Capsules
    "капсул": "капсулы",
    "капсула": "капсулы",
    "капсулы": "капсулы",
    "капсулу": "капсулы",
    "капсуле": "капсулы",

    # Spray actuations
    "впрыск": "впрыска",
    "впрыска": "впрыска",
    "впрыску": "впрыска",
    "впрысках": "впрыска",
    "впрысков": "впрыска",
    "пшик": "пшик",
    "пшика": "пшик",
    "пшику": "пшик",
    "пшиков": "пшик",
    "нажатие": "нажатия",
    "нажатия": "нажатия",
    "нажатий": "нажатия",

    # Generic doses
    "доз": "дозы",
    "доза": "дозы",
    "дозы": "дозы",
    "дозу": "дозы",
    "дозе": "дозы",

    # Measured units
    "мл": "мл",
    "ml": "мл",
    "мг": "мг",
    "mg": "мг",
    "мкг": "мкг",
    "mcg": "мкг",
    "г": "г",
    "гр": "г",
    "ед": "ед",
    "ме": "ме",
    "%": "%",
})

# Ordered stem fallback for declensions missing from UNIT_SYNONYMS.
# Longer stems come first ("капсул" must win over "кап").
UNIT_STEMS = (
    ("таблет", "таблетки"),
    ("табл", "таблетки"),
    ("капсул", "капсулы"),
    ("капл", "капли"),
    ("капел", "капли"),
    ("впрыск", "впрыска"),
    ("пшик", "пшик"),
    ("нажати", "нажатия"),
    ("доз", "дозы"),
)

# Word stems that mark a dose-form noun; a name never runs past one
DOSE_FORM_PREFIXES = (
    "табл", "таблет",
    "капл", "капел", "кап.",
    "капсул",
    "впрыск", "пшик", "нажати",
    "доза", "дозы",
)

# Unit abbreviations matched as whole tokens only ("г" is not a prefix of "гексорал")
UNIT_ABBREVIATIONS = frozenset({
    "мг", "мкг", "г", "гр", "мл", "л", "ед", "ме", "%", "mg", "ml", "mcg",
})

# A lone dosage-form noun is never a medication name
GENERIC_FORMS = frozenset({
    "спрей", "раствор", "мазь", "гель", "сироп", "капли", "таблетки",
    "суспензия", "крем", "порошок", "свечи",
})


def normalize_unit(raw: str) -> str:
    """
    Collapse a unit word to its canonical form.

    Examples:
        "табл." -> "таблетки"
        "кап"   -> "капли"
        "мг/кг" -> "мг/кг"
    """
    key = raw.replace(".", "").strip().lower()

    if "/" in key:
        return "/".join(normalize_unit(part) for part in key.split("/"))

    if key in UNIT_SYNONYMS:
        return UNIT_SYNONYMS[key]

    for stem, canonical in UNIT_STEMS:
        if key.startswith(stem):
            return canonical

    return key
