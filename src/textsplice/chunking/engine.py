"""
Chunking engine: fits arbitrary text into length-bounded chunks.

Strategy cascade, three escalating passes:
1. Standard: first split method whose pieces all fit, then greedy recombination
2. Recursive: oversized pieces of the first method are re-split with the others
3. Hybrid: iteratively re-split every oversized fragment with any method

Lengths are measured in code points.
"""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING, List, NamedTuple, Optional, Sequence, Tuple

from ..core.logging import log
from .boundaries import (
    DEFAULT_MARKER,
    SPLIT_STRATEGIES,
    SplitFunc,
    rune_count,
    split_on_marker,
)

if TYPE_CHECKING:
    from ..core.config import Settings

DEFAULT_METHODS: Tuple[str, ...] = ("space", "sentence", "marker")
DEFAULT_HYBRID_ITERATIONS = 100


class ChunkError(ValueError):
    """Raised when text contains a unit that no strategy can bring within budget."""

    def __init__(self, text: str, max_length: int, reason: str = ""):
        self.text = text
        self.max_length = max_length
        message = f"could not decompose string into parts of at most {max_length} characters: {text!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class ChunkifierConfigError(ValueError):
    """Raised for an unusable split cascade."""

    pass


class SplitMethod(NamedTuple):
    """A splitting strategy plus the joiner used to glue its pieces back."""

    name: str
    split_fn: SplitFunc
    joiner: str = ""


class ChunkifierConfig(NamedTuple):
    """Immutable chunkifier settings; safe to share between callers."""

    methods: Tuple[SplitMethod, ...]
    max_length: int = 0
    marker: str = DEFAULT_MARKER
    max_hybrid_iterations: int = DEFAULT_HYBRID_ITERATIONS


def build_split_methods(
    names: Sequence[str], marker: str = DEFAULT_MARKER
) -> Tuple[SplitMethod, ...]:
    """Resolve strategy names into split methods, preserving order."""
    methods = []
    for name in names:
        key = name.strip().lower()
        if key == "marker":
            methods.append(SplitMethod("marker", partial(split_on_marker, marker=marker)))
        elif key in SPLIT_STRATEGIES:
            methods.append(SplitMethod(key, SPLIT_STRATEGIES[key]))
        else:
            known = ", ".join(sorted([*SPLIT_STRATEGIES, "marker"]))
            raise ChunkifierConfigError(f"unknown split method {name!r} (known: {known})")
    return tuple(methods)


def default_config(
    max_length: int = 0,
    marker: str = DEFAULT_MARKER,
    methods: Optional[Sequence[str]] = None,
) -> ChunkifierConfig:
    """Config with the default cascade (space, sentence, marker)."""
    return ChunkifierConfig(
        methods=build_split_methods(DEFAULT_METHODS if methods is None else methods, marker),
        max_length=max_length,
        marker=marker,
    )


def combine_tokens(tokens: Sequence[str], joiner: str, max_length: int) -> Optional[List[str]]:
    """
    Greedily merge adjacent tokens into the largest pieces within max_length.

    Always extends the current chunk when the candidate fits (no lookahead).

    Returns:
        List of combined chunks, or None if any chunk exceeds max_length
        (i.e. a single input token is already too long).
    """
    result: List[str] = []
    current = ""

    for token in tokens:
        if not current:
            current = token
            continue
        candidate = current + joiner + token
        if max_length <= 0 or rune_count(candidate) <= max_length:
            current = candidate
        else:
            result.append(current)
            current = token

    if current:
        result.append(current)

    if max_length > 0 and any(rune_count(chunk) > max_length for chunk in result):
        return None
    return result


class Chunkifier:
    """Splits text into chunks no longer than ``config.max_length``."""

    def __init__(self, config: ChunkifierConfig):
        if not config.methods:
            raise ChunkifierConfigError("no split methods configured")
        self.config = config

    @classmethod
    def from_settings(cls, settings: "Settings", max_length: Optional[int] = None) -> "Chunkifier":
        """Build a chunkifier from Settings; ``max_length`` overrides MAX_LENGTH."""
        config = ChunkifierConfig(
            methods=build_split_methods(settings.SPLIT_METHODS, settings.SPLIT_MARKER),
            max_length=settings.MAX_LENGTH if max_length is None else max_length,
            marker=settings.SPLIT_MARKER,
            max_hybrid_iterations=settings.HYBRID_MAX_ITERATIONS,
        )
        return cls(config)

    @property
    def methods(self) -> Tuple[SplitMethod, ...]:
        return self.config.methods

    @property
    def max_length(self) -> int:
        return self.config.max_length

    def _fits(self, token: str) -> bool:
        return self.max_length <= 0 or rune_count(token) <= self.max_length

    def chunkify(self, text: str) -> List[str]:
        """
        Split text into chunks that each fit the configured max length.

        Raises:
            ChunkError: if the text holds a unit that cannot be split small enough.
        """
        log.debug("chunkify.start", max_length=self.max_length, length=rune_count(text))

        if self.max_length <= 0 or rune_count(text) <= self.max_length:
            return [text]

        chunks = self.standard_split(text)
        if chunks is not None:
            return chunks

        log.debug("chunkify.standard_failed", methods=[m.name for m in self.methods])
        try:
            return self.recursive_split(text)
        except ChunkError as e:
            log.debug("chunkify.recursive_failed", error=str(e))

        try:
            return self.hybrid_split(text)
        except ChunkError:
            log.warning("chunkify.failed", max_length=self.max_length, length=rune_count(text))
            raise ChunkError(text, self.max_length) from None

    def standard_split(self, text: str) -> Optional[List[str]]:
        """Pass 1: first method whose pieces all fit and recombine. None if none does."""
        for method in self.methods:
            tokens = method.split_fn(text)
            oversized = [t for t in tokens if not self._fits(t)]
            if oversized:
                log.debug(
                    "chunkify.method_skipped",
                    method=method.name,
                    tokens=len(tokens),
                    oversized=len(oversized),
                )
                continue

            combined = combine_tokens(tokens, method.joiner, self.max_length)
            if combined is not None:
                log.debug("chunkify.method_succeeded", method=method.name, chunks=len(combined))
                return combined
        return None

    def recursive_split(self, text: str) -> List[str]:
        """Pass 2: split with the cascade, re-splitting oversized pieces."""
        return self._split_recursively(text, 0)

    def _split_recursively(self, text: str, method_index: int) -> List[str]:
        # method_index only ever grows down the call stack, which bounds recursion
        if method_index >= len(self.methods):
            raise ChunkError(text, self.max_length, "all split methods exhausted")

        method = self.methods[method_index]
        tokens = method.split_fn(text)
        if len(tokens) <= 1:
            log.debug("chunkify.recursive_no_split", method=method.name)
            return self._split_recursively(text, method_index + 1)

        processed: List[str] = []
        for token in tokens:
            if self._fits(token):
                processed.append(token)
                continue

            sub_tokens = self._resplit_with_alternates(token, method_index)
            if sub_tokens is None:
                sub_tokens = self._split_recursively(token, method_index + 1)
            processed.extend(sub_tokens)

        combined = combine_tokens(processed, method.joiner, self.max_length)
        if combined is None:
            raise ChunkError(text, self.max_length, f"recombination with {method.name} failed")
        return combined

    def _resplit_with_alternates(self, token: str, skip_index: int) -> Optional[List[str]]:
        """First other method that splits ``token`` into pieces that all fit."""
        for index, method in enumerate(self.methods):
            if index == skip_index:
                continue
            pieces = method.split_fn(token)
            if len(pieces) > 1 and all(self._fits(p) for p in pieces):
                log.debug("chunkify.alternate_split", method=method.name, pieces=len(pieces))
                return pieces
        return None

    def hybrid_split(self, text: str) -> List[str]:
        """Pass 3: repeatedly re-split every oversized fragment until stable."""
        fragments = [text]

        for _ in range(self.config.max_hybrid_iterations):
            progress = False
            has_oversized = False
            next_fragments: List[str] = []

            for fragment in fragments:
                if self._fits(fragment):
                    next_fragments.append(fragment)
                    continue

                has_oversized = True
                replacement = self._shrink(fragment)
                if replacement is None:
                    next_fragments.append(fragment)
                else:
                    next_fragments.extend(replacement)
                    progress = True

            fragments = next_fragments
            if not progress or not has_oversized:
                break

        oversized = [f for f in fragments if not self._fits(f)]
        if oversized:
            raise ChunkError(oversized[0], self.max_length, "hybrid splitting left oversized fragments")

        combined = combine_tokens(fragments, "", self.max_length)
        if combined is None:
            raise ChunkError(text, self.max_length, "recombination after hybrid splitting failed")
        return combined

    def _shrink(self, fragment: str) -> Optional[List[str]]:
        size = rune_count(fragment)
        for method in self.methods:
            pieces = method.split_fn(fragment)
            if len(pieces) > 1 and any(rune_count(p) < size for p in pieces):
                return pieces
        return None


def chunkify(
    text: str,
    max_length: int,
    marker: str = DEFAULT_MARKER,
    methods: Optional[Sequence[str]] = None,
) -> List[str]:
    """Split ``text`` into chunks of at most ``max_length`` code points.

    ``max_length <= 0`` means unbounded and returns ``[text]``.
    """
    return Chunkifier(default_config(max_length, marker, methods)).chunkify(text)
