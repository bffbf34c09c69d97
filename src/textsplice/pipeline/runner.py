from typing import List, Optional, TYPE_CHECKING

from ..chunking.engine import Chunkifier, default_config
from ..core.logging import log
from ..tokens.align import DEFAULT_MISS_WARN_RATIO, integrate_tokens
from ..tokens.models import Token, TokenSequence
from .backends import Backend

if TYPE_CHECKING:
    from ..core.config import Settings


class TokenizeRunner:
    """Chunk text, send each chunk to a backend, and stitch the tokens back."""

    def __init__(
        self,
        backend: Backend,
        mode: Optional[str] = None,
        chunkifier: Optional[Chunkifier] = None,
        miss_warn_ratio: float = DEFAULT_MISS_WARN_RATIO,
    ):
        self.backend = backend
        self.mode = mode
        self.chunkifier = chunkifier or Chunkifier(default_config(backend.max_query_len))
        self.miss_warn_ratio = miss_warn_ratio

    @classmethod
    def from_settings(
        cls, backend: Backend, settings: "Settings", mode: Optional[str] = None
    ) -> "TokenizeRunner":
        """Chunkifier from settings, sized by the backend's limit when it has one."""
        max_length = backend.max_query_len if backend.max_query_len > 0 else settings.MAX_LENGTH
        return cls(
            backend,
            mode=mode,
            chunkifier=Chunkifier.from_settings(settings, max_length=max_length),
            miss_warn_ratio=settings.ALIGN_MISS_WARN_RATIO,
        )

    def run(self, text: str) -> TokenSequence:
        """
        Tokenize ``text`` through the backend.

        Token positions are code point offsets into ``text``.

        Raises:
            ChunkError: if the text cannot be chunked within the backend limit.
        """
        chunks = self.chunkifier.chunkify(text)
        log.info(
            "tokenize.start",
            backend=self.backend.name,
            chunks=len(chunks),
            length=len(text),
        )

        sequence = TokenSequence()
        offset = 0
        for idx, chunk in enumerate(chunks):
            output = list(self.backend.process(chunk, self.mode))
            sequence.extend(self._to_tokens(chunk, output, offset))
            log.debug("tokenize.chunk", index=idx, length=len(chunk), items=len(output))
            offset += len(chunk)

        log.info("tokenize.end", backend=self.backend.name, tokens=len(sequence))
        return sequence

    def _to_tokens(self, chunk: str, output: list, offset: int) -> List[Token]:
        if output and all(isinstance(item, Token) for item in output):
            return [
                t.model_copy(update={"start": t.start + offset, "end": t.end + offset})
                for t in output
            ]
        surfaces = [str(item) for item in output]
        return integrate_tokens(chunk, surfaces, offset=offset, miss_warn_ratio=self.miss_warn_ratio)


def tokenize(text: str, backend: Backend, mode: Optional[str] = None) -> TokenSequence:
    """One-shot convenience wrapper around TokenizeRunner."""
    return TokenizeRunner(backend, mode=mode).run(text)
