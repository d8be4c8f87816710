"""Turn raw comment / token text into a space-joined word sequence.

Identifiers arrive as ``camelCase``, ``PascalCase`` or ``snake_case`` and string literals
carry escapes and links; the spelling engine only understands prose. The pipeline is:

1. drop link-like substrings (``https://...``, ``www....``, e-mail addresses, bare hosts);
2. turn literal ``\\n`` / ``\\t`` escape pairs into spaces;
3. fold characters into word buffers (uppercase starts a word, ``_ . ,`` and digits end one);
4. join the buffers with single spaces.

Boundary characters open an *empty* buffer that the next lowercase letter fills, so
``foo_bar`` becomes ``"foo bar"``. A boundary followed by an uppercase letter, a digit or
another boundary leaves the buffer blank: ``recieve_Data`` becomes ``"recieve  Data"``.
Offsets returned by the spelling engine refer to this exact string, not to the source.
"""

from __future__ import annotations

import re
from typing import Final

_URL_STOP = r"""\s<>"'`"""
_URL_RE: Final[re.Pattern[str]] = re.compile(
    rf"""
    (?:
        [a-zA-Z][a-zA-Z0-9+.-]*://          # scheme://...
      | mailto:
      | www\.
    )
    [^{_URL_STOP}]*[^{_URL_STOP}.,;:!?)\]]
    | [\w.+-]+@[\w-]+(?:\.[\w-]+)+          # e-mail address
    | \b(?:[a-zA-Z0-9-]+\.)+(?:com|org|net|io|dev|edu|gov)\b
      (?:/[^{_URL_STOP}]*[^{_URL_STOP}.,;:!?)\]])?
    """,
    re.VERBOSE,
)

_ESCAPES: Final[tuple[str, ...]] = ("\\n", "\\t")
_BOUNDARY_CHARS: Final[frozenset[str]] = frozenset("_.,")


def strip_urls(text: str) -> str:
    return _URL_RE.sub("", text)


def replace_escapes(text: str) -> str:
    """Replace literal backslash escapes (not control characters) with a space."""
    for escape in _ESCAPES:
        text = text.replace(escape, " ")
    return text


def split_words(text: str) -> list[str]:
    words: list[str] = []
    for char in text:
        if char.isupper():
            words.append(char)
        elif char in _BOUNDARY_CHARS or char.isnumeric():
            words.append("")
        elif words:
            words[-1] += char
        else:
            words.append(char)
    return words


def normalize(raw: str) -> str:
    return " ".join(split_words(replace_escapes(strip_urls(raw))))
