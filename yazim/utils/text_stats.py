"""
Text statistics reported alongside spell-check results.
"""
from typing import List

from yazim.schemas.spellcheck import SpellingIssue, TextStats


def count_words(text: str) -> int:
    """
    Count words in text using simple whitespace splitting.

    Args:
        text: Input text

    Returns:
        Word count
    """
    if not text:
        return 0
    return len(text.split())


def build_text_stats(text: str, issues: List[SpellingIssue]) -> TextStats:
    """
    Summarize a checked text.

    Args:
        text: Checked text
        issues: Issues found in the text

    Returns:
        TextStats with word, character and error counts
    """
    return TextStats(
        word_count=count_words(text),
        char_count=len(text),
        error_count=len(issues),
    )
