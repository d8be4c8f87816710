"""Word segmentation, suppression markers and the spelling oracle."""

from typolint.spelling.normalize import normalize, replace_escapes, split_words, strip_urls
from typolint.spelling.oracle import DEFAULT_KNOWN_WORDS, PySpellCheckerOracle, SpellingOracle
from typolint.spelling.suppression import DEFAULT_SUPPRESSION_MARKER, is_suppressed

__all__ = [
    "DEFAULT_KNOWN_WORDS",
    "DEFAULT_SUPPRESSION_MARKER",
    "PySpellCheckerOracle",
    "SpellingOracle",
    "is_suppressed",
    "normalize",
    "replace_escapes",
    "split_words",
    "strip_urls",
]
