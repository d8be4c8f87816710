"""Inline opt-out comments."""

from typing import Final

DEFAULT_SUPPRESSION_MARKER: Final[str] = "spellcheck:disable:this"


def is_suppressed(comment: str, marker: str = DEFAULT_SUPPRESSION_MARKER) -> bool:
    """True when the comment disables checking for the token it is attached to (and below)."""
    return marker in comment.strip()
