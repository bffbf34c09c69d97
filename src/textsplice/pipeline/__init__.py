"""Chunk -> backend -> align pipeline."""

from .backends import Backend, UnisegWordBackend
from .runner import TokenizeRunner, tokenize

__all__ = ["Backend", "TokenizeRunner", "UnisegWordBackend", "tokenize"]
