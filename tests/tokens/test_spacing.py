"""Tests for the script-aware spacing rule."""

import pytest

from textsplice.tokens.scripts import in_script, script_of
from textsplice.tokens.spacing import needs_space

pytestmark = pytest.mark.unit


class TestDefaults:
    """Basic Latin behavior and empty input."""

    def test_latin_words_are_spaced(self):
        assert needs_space("a", "b") is True
        assert needs_space("hello", "world") is True

    def test_empty_inputs(self):
        assert needs_space("", "x") is False
        assert needs_space("x", "") is False
        assert needs_space("", "") is False

    def test_whitespace_is_not_a_special_case(self):
        assert needs_space("a", " b") is True
        assert needs_space("Hello, ", "world") is True


class TestPunctuation:
    """Opening, closing and other punctuation at the joining edge."""

    @pytest.mark.parametrize("closing", [")", "]", "}", ".", ",", "!", "?", "»", "」", "）", "。", "、", "：", "…"])
    def test_no_space_before_closing_or_terminal(self, closing):
        assert needs_space("x", closing) is False

    @pytest.mark.parametrize("opening", ["(", "[", "{", "«", "「", "（", "“", "¿"])
    def test_no_space_after_opening(self, opening):
        assert needs_space(opening, "x") is False

    def test_spec_examples(self):
        assert needs_space("(", "x") is False
        assert needs_space("x", ")") is False

    def test_mixed_punctuation_boundary(self):
        assert needs_space("word", "—") is False
        assert needs_space("—", "word") is False
        assert needs_space("end.", "Next") is False

    def test_adjacent_punctuation(self):
        assert needs_space("!", "?") is False
        assert needs_space(")", "(") is False


class TestScriptForcedSpaces:
    """CJK and Thai runs get explicit word boundaries."""

    def test_han(self):
        assert needs_space("日", "本") is True

    def test_kana_and_han(self):
        assert needs_space("学生", "です") is True
        assert needs_space("コーヒー", "を") is True

    def test_hangul(self):
        assert needs_space("한국", "어") is True

    def test_thai(self):
        assert needs_space("ภาษา", "ไทย") is True

    def test_cjk_next_to_latin_defaults_to_space(self):
        assert needs_space("日本", "Tokyo") is True


class TestScriptJoins:
    """Scripts whose runs are joined without spaces."""

    def test_devanagari(self):
        assert needs_space("हिन्दी", "है") is False

    def test_mixed_indic_scripts(self):
        assert needs_space("বাংলা", "தமிழ்") is False

    def test_arabic(self):
        assert needs_space("مرحبا", "بك") is False

    def test_hebrew(self):
        assert needs_space("שלום", "עולם") is False

    def test_cyrillic_soft_sign(self):
        assert needs_space("учител", "ь") is False
        assert needs_space("ь", "я") is False

    def test_plain_cyrillic_words_are_spaced(self):
        assert needs_space("привет", "мир") is True


class TestNumbers:
    """Digits and number-attached symbols."""

    def test_digit_digit(self):
        assert needs_space("1", "2") is False

    def test_digit_then_symbol(self):
        assert needs_space("25", "°") is False
        assert needs_space("5", "$") is False

    def test_symbol_then_digit(self):
        assert needs_space("$", "5") is False
        assert needs_space("€", "10") is False
        assert needs_space("±", "3") is False

    def test_words_around_numbers_are_spaced(self):
        assert needs_space("page", "3") is True
        assert needs_space("3", "pages") is True


class TestApostrophesAndHyphens:
    """Contractions and hyphenation that are not Unicode punctuation."""

    def test_modifier_letter_apostrophe(self):
        assert needs_space("Hawaiʼ", "i") is False
        assert needs_space("o", "ʼahu") is False

    def test_soft_hyphen(self):
        assert needs_space("hyphen\u00ad", "ation") is False

    def test_ascii_apostrophe_and_hyphen(self):
        assert needs_space("don", "'t") is False
        assert needs_space("well-", "known") is False


class TestScripts:
    """Script classification helpers."""

    @pytest.mark.parametrize(
        "char,script",
        [
            ("a", "Latin"),
            ("日", "Han"),
            ("か", "Hiragana"),
            ("カ", "Katakana"),
            ("한", "Hangul"),
            ("ก", "Thai"),
            ("ж", "Cyrillic"),
            ("ب", "Arabic"),
            ("ש", "Hebrew"),
            ("ह", "Devanagari"),
            ("ක", "Sinhala"),
            ("1", "Other"),
        ],
    )
    def test_script_of(self, char, script):
        assert script_of(char) == script

    def test_prolonged_sound_mark_counts_as_kana(self):
        assert in_script("ー", "Katakana", "Hiragana")

    def test_in_script_accepts_unlisted_scripts(self):
        assert in_script("α", "Greek")
        assert in_script("ᚠ", "Runic")
        assert not in_script("a", "Runic")
