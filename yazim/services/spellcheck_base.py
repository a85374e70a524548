"""
Abstract base class and errors for spell-check services.
"""
from abc import ABC, abstractmethod
from typing import Any, Iterable, List, Optional

from yazim.schemas.spellcheck import SpellingIssue


class SpellCheckError(Exception):
    """Base exception for spell-check errors."""

    pass


class MalformedWordlistEntry(SpellCheckError):
    """
    Raised when a word list record cannot be turned into a WordlistEntry.

    Attributes:
        record: The offending record (line, mapping or object)
    """

    def __init__(self, message: str, record: Any = None):
        super().__init__(message)
        self.message = message
        self.record = record


class InternalSearchFailure(SpellCheckError):
    """
    Raised when suggestion search fails (e.g. corrupted tree state).

    Distinguishes "search failed" from "no suggestions"; a check that hits
    this error is aborted instead of returning partial issues.

    Attributes:
        word: The word being searched when the failure happened
    """

    def __init__(self, message: str, word: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.word = word


class DictionaryNotLoadedError(SpellCheckError):
    """Raised when a service is used before its dictionary is loaded."""

    pass


class WordlistSourceError(SpellCheckError):
    """Raised when no word list payload can be obtained."""

    pass


class SpellCheckService(ABC):
    """
    Abstract base class for spell-check service implementations.

    Concrete implementations own their dictionary index and expose
    validation, suggestion and full-text checking.
    """

    @abstractmethod
    def check_text(self, text: str) -> List[SpellingIssue]:
        """
        Check text for spelling issues and return suggestions.

        Args:
            text: Text to check for spelling errors

        Returns:
            List of SpellingIssue objects, one per misspelled token, in text order

        Raises:
            DictionaryNotLoadedError: If load() has not been called
            InternalSearchFailure: If suggestion search fails
        """
        pass

    @abstractmethod
    def is_valid(self, word: str) -> bool:
        """Check whether a word is in the dictionary or personal overlay."""
        pass

    @abstractmethod
    def suggest(self, word: str, limit: Optional[int] = None) -> List[str]:
        """Return ranked corrections for a word."""
        pass

    @abstractmethod
    def merge_overlay(self, words: Iterable[str]) -> int:
        """
        Add personal dictionary words.

        Returns:
            Number of words that were not already in the overlay
        """
        pass

    @abstractmethod
    def is_loaded(self) -> bool:
        """Check if the dictionary is loaded and ready."""
        pass

    @abstractmethod
    def get_language(self) -> str:
        """Get the language code this service handles (e.g., 'tr' for Turkish)."""
        pass

    @abstractmethod
    def load(self, entries: Iterable[Any]) -> Any:
        """
        Load (or reload) the dictionary from word list entries.

        Returns:
            Implementation-specific load summary
        """
        pass
