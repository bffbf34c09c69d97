"""Unicode script and category membership tests for single characters."""

import unicodedata
from typing import Dict, Tuple

import regex

# Checked in order by script_of(); Script_Extensions so that shared marks such
# as the prolonged sound mark (ー) count as Katakana/Hiragana.
_SCRIPT_NAMES: Tuple[str, ...] = (
    "Han",
    "Hiragana",
    "Katakana",
    "Hangul",
    "Thai",
    "Lao",
    "Khmer",
    "Myanmar",
    "Latin",
    "Cyrillic",
    "Greek",
    "Arabic",
    "Hebrew",
    "Devanagari",
    "Bengali",
    "Gurmukhi",
    "Gujarati",
    "Tamil",
    "Telugu",
    "Kannada",
    "Malayalam",
    "Sinhala",
)

_SCRIPT_PATTERNS: Dict[str, "regex.Pattern[str]"] = {
    name: regex.compile(rf"\p{{Script_Extensions={name}}}") for name in _SCRIPT_NAMES
}

CJK_SCRIPTS = frozenset({"Han", "Hiragana", "Katakana", "Hangul"})
SOUTHEAST_ASIAN_SCRIPTS = frozenset({"Thai", "Lao", "Khmer", "Myanmar"})
INDIC_SCRIPTS = frozenset(
    {
        "Devanagari",
        "Bengali",
        "Gurmukhi",
        "Gujarati",
        "Tamil",
        "Telugu",
        "Kannada",
        "Malayalam",
        "Sinhala",
    }
)


def in_script(char: str, *scripts: str) -> bool:
    """True if ``char`` belongs to any of the named scripts."""
    for name in scripts:
        pattern = _SCRIPT_PATTERNS.get(name)
        if pattern is None:
            pattern = regex.compile(rf"\p{{Script_Extensions={name}}}")
        if pattern.match(char):
            return True
    return False


def script_of(char: str) -> str:
    """Name of the first known script ``char`` belongs to, else "Other"."""
    for name in _SCRIPT_NAMES:
        if _SCRIPT_PATTERNS[name].match(char):
            return name
    return "Other"


def is_punctuation(char: str) -> bool:
    return unicodedata.category(char).startswith("P")


def is_decimal_digit(char: str) -> bool:
    return unicodedata.category(char) == "Nd"


def is_letter(char: str) -> bool:
    return unicodedata.category(char).startswith("L")
