from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Union

from uniseg.wordbreak import words

from ..tokens.models import Token
from ..tokens.scripts import is_letter

BackendOutput = Union[Sequence[str], Sequence[Token]]


class Backend(ABC):
    """Abstract base class for text-analysis backends.

    A backend receives one length-bounded chunk at a time and returns either
    the lexical surfaces it recognized (filler dropped) or a complete token
    list for the chunk.
    """

    @abstractmethod
    def process(self, chunk: str, mode: Optional[str] = None) -> BackendOutput:
        """Analyze a single chunk."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Backend identifier."""

    @property
    def max_query_len(self) -> int:
        """Maximum chunk length in code points; <= 0 means unbounded."""
        return 0


class UnisegWordBackend(Backend):
    """Local word segmenter (UAX #29) with lossy, letters-only output."""

    def __init__(self, max_query_len: int = 0):
        self._max_query_len = max_query_len

    @property
    def name(self) -> str:
        return "uniseg"

    @property
    def max_query_len(self) -> int:
        return self._max_query_len

    def process(self, chunk: str, mode: Optional[str] = None) -> List[str]:
        return [word for word in words(chunk) if any(is_letter(c) for c in word)]
