"""
Word tokenizer for Turkish text.
"""
import re
from typing import Iterator, NamedTuple

# ASCII word characters plus Turkish letters (ç ğ ı ö ş ü, circumflexed
# â î û) and the combining dot left behind by decomposed İ.
# \w is not used: in Python it also matches letters of every other script.
TURKISH_WORD_PATTERN = re.compile(r"[A-Za-z0-9_çğıöşüÇĞİÖŞÜâîûÂÎÛ\u0307]+")


class Token(NamedTuple):
    """A word and its half-open [start, end) offsets in the source text."""

    word: str
    start: int
    end: int


def tokenize(text: str) -> Iterator[Token]:
    """
    Lazily scan text into word tokens.

    Offsets are Python string indices (code points), so
    ``text[token.start:token.end] == token.word`` always holds.

    Args:
        text: Text to tokenize

    Yields:
        Token tuples in text order
    """
    for match in TURKISH_WORD_PATTERN.finditer(text):
        yield Token(match.group(), match.start(), match.end())


def is_numeric_token(word: str) -> bool:
    """True for tokens made only of digits and underscores."""
    return not word.strip("0123456789_")
