"""Token model, lossy-output re-alignment and script-aware joining."""

from .align import AlignmentResult, align_tokens, integrate_tokens
from .models import Token, TokenSequence, content_hash, join_with_spacing
from .scripts import in_script, script_of
from .spacing import SpacingRule, needs_space

__all__ = [
    "AlignmentResult",
    "SpacingRule",
    "Token",
    "TokenSequence",
    "align_tokens",
    "content_hash",
    "in_script",
    "integrate_tokens",
    "join_with_spacing",
    "needs_space",
    "script_of",
]
