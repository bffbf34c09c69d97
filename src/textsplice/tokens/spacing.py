"""
Spacing rule for joining adjacent display units (surfaces or romanizations).

Only the last character of the previous unit and the first character of the
current one are inspected. Rules are evaluated in order, first match wins:

1. Empty unit: no space
2. Current starts with closing/terminal punctuation: no space
3. Previous ends with opening punctuation: no space
4. Any other punctuation at the joining edge: no space
5. CJK next to CJK, or Thai-family next to Thai-family: space (re-inserts
   word boundaries lost by scriptless writing)
6. Indic next to Indic: no space
7. Digits with digits or number-attached symbols: no space
8. Apostrophes and hyphens: no space
9. Arabic-Arabic, Hebrew-Hebrew, Cyrillic soft/hard sign: no space
10. Otherwise: space
"""

from typing import Callable

from .scripts import (
    CJK_SCRIPTS,
    INDIC_SCRIPTS,
    SOUTHEAST_ASIAN_SCRIPTS,
    in_script,
    is_decimal_digit,
    is_punctuation,
)

SpacingRule = Callable[[str, str], bool]

CLOSING_PUNCTUATION = frozenset(
    ")]}»\"'”’」』】〉》〕〗）］｝"
    ".,;:!?…。．，、；：！？"
)

OPENING_PUNCTUATION = frozenset("([{«\"'“‘「『【〈《〔〖（［｛¿¡")

NUMBER_ATTACHED = frozenset(".,%°:-/×⁄+±=<>~$€£¥₹₽¢#№")

APOSTROPHES_AND_HYPHENS = frozenset("'\u2019\u02bc-\u2010\u2011\u00ad")

CYRILLIC_SIGNS = frozenset("ьъЬЪ")


def needs_space(prev: str, current: str) -> bool:
    """Whether a single space belongs between ``prev`` and ``current``."""
    if not prev or not current:
        return False

    last = prev[-1]
    first = current[0]

    # Punctuation
    if first in CLOSING_PUNCTUATION:
        return False
    if last in OPENING_PUNCTUATION:
        return False
    if is_punctuation(last) or is_punctuation(first):
        return False

    # Scripts written without spaces: force a visible word boundary
    if in_script(last, *CJK_SCRIPTS) and in_script(first, *CJK_SCRIPTS):
        return True
    if in_script(last, *SOUTHEAST_ASIAN_SCRIPTS) and in_script(first, *SOUTHEAST_ASIAN_SCRIPTS):
        return True

    if in_script(last, *INDIC_SCRIPTS) and in_script(first, *INDIC_SCRIPTS):
        return False

    # Numbers and their symbols
    if is_decimal_digit(last) and (first in NUMBER_ATTACHED or is_decimal_digit(first)):
        return False
    if last in NUMBER_ATTACHED and is_decimal_digit(first):
        return False

    if last in APOSTROPHES_AND_HYPHENS or first in APOSTROPHES_AND_HYPHENS:
        return False

    if in_script(last, "Arabic") and in_script(first, "Arabic"):
        return False
    if in_script(last, "Hebrew") and in_script(first, "Hebrew"):
        return False
    if (last in CYRILLIC_SIGNS and in_script(first, "Cyrillic")) or (
        first in CYRILLIC_SIGNS and in_script(last, "Cyrillic")
    ):
        return False

    return True
