"""
Turkish spell-check service backed by a BK-tree dictionary index.
"""
import time
from typing import Any, Dict, Iterable, List, Optional

from yazim.config import settings
from yazim.schemas.spellcheck import SpellingIssue
from yazim.services.dictionary_index import DictionaryIndex, LoadReport
from yazim.services.spellcheck_base import DictionaryNotLoadedError, SpellCheckService
from yazim.services.suggestion import SuggestionEngine
from yazim.utils.logger import get_logger
from yazim.utils.tokenizer import is_numeric_token, tokenize
from yazim.utils.turkish import match_case, turkish_lower


logger = get_logger("services.spellcheck_turkish")


class TurkishSpellCheckService(SpellCheckService):
    """
    Turkish spell-check service.

    Owns one DictionaryIndex and the SuggestionEngine that searches it.
    The dictionary is supplied by the caller through load(); this class
    does no file or network I/O.
    """

    LANGUAGE_CODE = "tr"

    def __init__(
        self,
        max_edit_distance: Optional[int] = None,
        suggestion_count: Optional[int] = None,
        min_word_length: Optional[int] = None,
        overlay_weight: Optional[int] = None,
        shuffle_insertion: Optional[bool] = None,
        shuffle_seed: Optional[int] = None,
    ):
        """
        Initialize Turkish spell-check service.

        Args:
            max_edit_distance: BK-tree search radius (default from config)
            suggestion_count: Maximum suggestions per misspelled word (default from config)
            min_word_length: Skip tokens shorter than this (default from config)
            overlay_weight: Ranking weight of personal words (default from config)
            shuffle_insertion: Shuffle BK-tree insertion order (default from config)
            shuffle_seed: Seed for the insertion shuffle (default from config)
        """
        self._loaded = False

        # Configuration - use provided or fall back to config
        self._max_edit_distance = (
            max_edit_distance if max_edit_distance is not None else settings.SPELLCHECK_MAX_EDIT_DISTANCE
        )
        self._suggestion_count = (
            suggestion_count if suggestion_count is not None else settings.SPELLCHECK_SUGGESTION_COUNT
        )
        self._min_word_length = (
            min_word_length if min_word_length is not None else settings.SPELLCHECK_MIN_WORD_LENGTH
        )

        self._index = DictionaryIndex(
            overlay_weight=overlay_weight if overlay_weight is not None else settings.SPELLCHECK_OVERLAY_WEIGHT,
            shuffle_insertion=(
                shuffle_insertion if shuffle_insertion is not None else settings.SPELLCHECK_SHUFFLE_INSERTION
            ),
            shuffle_seed=shuffle_seed if shuffle_seed is not None else settings.SPELLCHECK_SHUFFLE_SEED,
        )
        self._engine = SuggestionEngine(
            self._index,
            max_edit_distance=self._max_edit_distance,
            default_limit=self._suggestion_count,
        )

        logger.info(
            "Turkish spell-check service initialized",
            max_edit_distance=self._max_edit_distance,
            suggestion_count=self._suggestion_count,
            min_word_length=self._min_word_length,
        )

    @property
    def index(self) -> DictionaryIndex:
        return self._index

    def load(self, entries: Iterable[Any]) -> LoadReport:
        """
        Build (or rebuild) the dictionary from word list entries.

        Args:
            entries: WordlistEntry objects, {word, frequency} mappings or strings

        Returns:
            LoadReport; an empty dictionary is a valid, degraded state
        """
        report = self._index.load(entries)
        self._loaded = True
        return report

    def merge_overlay(self, words: Iterable[str]) -> int:
        """Add personal dictionary words; returns how many were new."""
        return self._index.merge_overlay(words)

    def is_valid(self, word: str) -> bool:
        """Check a single word against the dictionary and personal overlay."""
        return self._index.is_valid(word)

    def suggest(self, word: str, limit: Optional[int] = None) -> List[str]:
        """
        Suggest corrections for a single word.

        Args:
            word: Word to correct
            limit: Max suggestions (default: configured suggestion count)

        Returns:
            Ranked dictionary words, excluding ``word`` itself
        """
        return self._engine.suggest(word, limit)

    def check_text(self, text: str) -> List[SpellingIssue]:
        """
        Check text for spelling issues.

        Args:
            text: Text to check

        Returns:
            One SpellingIssue per misspelled token, in text order

        Raises:
            DictionaryNotLoadedError: If load() has not been called
            InternalSearchFailure: If suggestion search fails; no partial result is returned
        """
        if not self._loaded:
            raise DictionaryNotLoadedError("Spell-check called but dictionary not loaded")

        start_time = time.time()
        issues: List[SpellingIssue] = []
        # Suggestions per canonical word, reused for repeated misspellings
        suggestion_cache: Dict[str, List[str]] = {}

        for token in tokenize(text):
            if len(token.word) < self._min_word_length or is_numeric_token(token.word):
                continue
            if self._index.is_valid(token.word):
                continue

            canonical = turkish_lower(token.word)
            if canonical not in suggestion_cache:
                suggestion_cache[canonical] = self._engine.suggest(canonical, self._suggestion_count)

            issues.append(SpellingIssue(
                word=token.word,
                start=token.start,
                end=token.end,
                suggestions=[match_case(token.word, s) for s in suggestion_cache[canonical]],
            ))

        logger.debug(
            "Text checked",
            chars=len(text),
            issues=len(issues),
            duration_ms=f"{(time.time() - start_time) * 1000:.2f}",
        )
        return issues

    def word_count(self) -> int:
        """Number of distinct words (dictionary plus personal overlay)."""
        return len(self._index)

    def is_loaded(self) -> bool:
        """Check if dictionary is loaded."""
        return self._loaded

    def get_language(self) -> str:
        """Get language code."""
        return self.LANGUAGE_CODE
