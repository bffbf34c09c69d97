import hashlib
from typing import Iterable, Iterator, List, Optional

from pydantic import BaseModel, Field

from .spacing import needs_space


class Token(BaseModel):
    """A surface segment of the source text, lexical or filler."""

    surface: str
    is_lexical: bool = False  # False for whitespace/punctuation filler
    start: int = 0  # code point offset in the aligned text
    end: int = 0
    romanization: Optional[str] = None

    def roman(self) -> str:
        """Romanization of a lexical token, or "" when it adds nothing."""
        if not self.is_lexical or not self.romanization or self.romanization == self.surface:
            return ""
        return self.romanization


class TokenSequence(BaseModel):
    """Ordered tokens with display serializations."""

    tokens: List[Token] = Field(default_factory=list)

    @classmethod
    def of(cls, tokens: Iterable[Token]) -> "TokenSequence":
        return cls(tokens=list(tokens))

    def __len__(self) -> int:
        return len(self.tokens)

    def __iter__(self) -> Iterator[Token]:  # type: ignore[override]
        return iter(self.tokens)

    def __getitem__(self, index: int) -> Token:
        return self.tokens[index]

    def extend(self, tokens: Iterable[Token]) -> None:
        self.tokens.extend(tokens)

    def surface(self) -> str:
        """Plain concatenation; equals the source text after alignment."""
        return "".join(t.surface for t in self.tokens)

    def lexical(self) -> "TokenSequence":
        """Copy holding only lexical tokens (no spaces, punctuation, ...)."""
        return TokenSequence(tokens=[t for t in self.tokens if t.is_lexical])

    def tokenized_parts(self) -> List[str]:
        return [t.surface for t in self.tokens]

    def roman_parts(self) -> List[str]:
        return [t.roman() or t.surface for t in self.tokens]

    def tokenized(self) -> str:
        """Surfaces joined with script-aware spacing."""
        return join_with_spacing(self.tokenized_parts())

    def roman(self) -> str:
        """Romanized forms (surface fallback) joined with script-aware spacing."""
        return join_with_spacing(self.roman_parts())


def join_with_spacing(parts: Iterable[str]) -> str:
    """Join parts, inserting a space where ``needs_space`` asks for one.

    Parts that already carry whitespace at the joining edge (filler such as
    ", ") are joined as they are.
    """
    pieces: List[str] = []
    prev = ""
    for i, part in enumerate(parts):
        if i > 0 and not _whitespace_edge(prev, part) and needs_space(prev, part):
            pieces.append(" ")
        pieces.append(part)
        prev = part
    return "".join(pieces)


def _whitespace_edge(prev: str, current: str) -> bool:
    return bool(prev and prev[-1].isspace()) or bool(current and current[0].isspace())


def content_hash(text: str) -> str:
    """Stable digest of a chunk, for caching backend results."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()
