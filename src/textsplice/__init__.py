"""
textsplice: fit Unicode text to length-limited analyzers and put it back together.

- chunking: split text into length-bounded chunks at the largest meaningful boundary
- tokens: re-align lossy analyzer output and join tokens with script-aware spacing
- pipeline: run chunks through a backend and return one token sequence
"""

from .chunking import ChunkError, Chunkifier, ChunkifierConfig, ChunkifierConfigError, chunkify
from .tokens import Token, TokenSequence, integrate_tokens, needs_space

__version__ = "0.3.0"

__all__ = [
    "ChunkError",
    "Chunkifier",
    "ChunkifierConfig",
    "ChunkifierConfigError",
    "Token",
    "TokenSequence",
    "__version__",
    "chunkify",
    "integrate_tokens",
    "needs_space",
]
