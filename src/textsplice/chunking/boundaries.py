"""
Boundary detection and splitting strategies for chunking.

Every strategy maps a string to an ordered list of non-empty pieces whose
concatenation is the input string: separators (spaces, sentence-final
whitespace, markers) stay inside the pieces instead of being dropped.
"""

from typing import Callable, Dict, Iterable, List

from uniseg.graphemecluster import grapheme_clusters
from uniseg.sentencebreak import sentences
from uniseg.wordbreak import words

# Default marker for split_on_marker: EGYPTIAN HIEROGLYPH E034, which never
# occurs in ordinary text.
DEFAULT_MARKER = "\U000130f0"

SplitFunc = Callable[[str], List[str]]


def rune_count(text: str) -> int:
    """Length in Unicode code points."""
    return len(text)


def _collect(units: Iterable[str]) -> List[str]:
    return [unit for unit in units if unit]


def split_by_spaces(text: str) -> List[str]:
    """Split on literal spaces, keeping every space as its own piece.

    "a  b" -> ["a", " ", " ", "b"]
    """
    tokens: List[str] = []
    current: List[str] = []

    for char in text:
        if char == " ":
            if current:
                tokens.append("".join(current))
                current = []
            tokens.append(char)
        else:
            current.append(char)

    if current:
        tokens.append("".join(current))

    return tokens


def split_by_sentences(text: str) -> List[str]:
    """Split by UAX #29 sentence boundaries (trailing spaces stay attached)."""
    if not text:
        return []
    return _collect(sentences(text))


def split_by_words(text: str) -> List[str]:
    """Split by UAX #29 word boundaries.

    Scripts written without spaces (Thai, Chinese, ...) degrade to grapheme
    sized pieces, which is why this strategy is opt-in.
    """
    if not text:
        return []
    return _collect(words(text))


def split_by_graphemes(text: str) -> List[str]:
    """Split into extended grapheme clusters, the smallest safe unit."""
    if not text:
        return []
    return _collect(grapheme_clusters(text))


def split_on_marker(text: str, marker: str = DEFAULT_MARKER) -> List[str]:
    """Split after each occurrence of ``marker``, keeping it on the left piece.

    "a|b|c" with marker "|" -> ["a|", "b|", "c"]
    """
    if not text:
        return []
    if not marker:
        return [text]

    pieces: List[str] = []
    start = 0
    while True:
        idx = text.find(marker, start)
        if idx == -1:
            break
        end = idx + len(marker)
        pieces.append(text[start:end])
        start = end

    if start < len(text):
        pieces.append(text[start:])

    return pieces


# Strategies addressable by name from configuration. "marker" is absent here
# because it needs the configured marker bound in (see engine.build_split_methods).
SPLIT_STRATEGIES: Dict[str, SplitFunc] = {
    "space": split_by_spaces,
    "sentence": split_by_sentences,
    "word": split_by_words,
    "grapheme": split_by_graphemes,
}
