"""
Length-bounded chunking for text sent to input-limited backends.

- Splitting strategies at sentence, space, marker, word and grapheme granularity
- Greedy recombination under a hard length cap
- Standard, recursive and hybrid passes with a deterministic fallback order
"""

from .boundaries import (
    DEFAULT_MARKER,
    SPLIT_STRATEGIES,
    rune_count,
    split_by_graphemes,
    split_by_sentences,
    split_by_spaces,
    split_by_words,
    split_on_marker,
)
from .engine import (
    DEFAULT_METHODS,
    ChunkError,
    Chunkifier,
    ChunkifierConfig,
    ChunkifierConfigError,
    SplitMethod,
    build_split_methods,
    chunkify,
    combine_tokens,
    default_config,
)

__all__ = [
    "DEFAULT_MARKER",
    "DEFAULT_METHODS",
    "SPLIT_STRATEGIES",
    "ChunkError",
    "Chunkifier",
    "ChunkifierConfig",
    "ChunkifierConfigError",
    "SplitMethod",
    "build_split_methods",
    "chunkify",
    "combine_tokens",
    "default_config",
    "rune_count",
    "split_by_graphemes",
    "split_by_sentences",
    "split_by_spaces",
    "split_by_words",
    "split_on_marker",
]
