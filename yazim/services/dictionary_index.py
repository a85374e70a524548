"""
Dictionary index: membership set, BK-tree and ranking weights.

The BK-tree is keyed on diacritic-folded forms (ç->c, ı->i, ...), so a word
typed without Turkish letters is at distance 0 from its dictionary form.
Each folded key maps back to every canonical word that folds to it.

Not synchronized: load() and merge_overlay() must not run concurrently with
reads on the same instance.
"""
import random
import time
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Set, Tuple

from pydantic import ValidationError

from yazim.schemas.spellcheck import WordlistEntry
from yazim.services.bktree import BKTree
from yazim.services.spellcheck_base import MalformedWordlistEntry
from yazim.utils.logger import get_logger
from yazim.utils.turkish import fold_diacritics, turkish_lower

logger = get_logger("services.dictionary_index")

DEFAULT_OVERLAY_WEIGHT = 10


@dataclass
class LoadReport:
    """Outcome of a dictionary load."""

    loaded: int
    skipped: int
    overlay: int


def coerce_entry(record: Any) -> WordlistEntry:
    """
    Turn a word list record into a WordlistEntry.

    Accepts WordlistEntry instances, ``{"word": ..., "frequency": ...}``
    mappings, ``(word, frequency)`` tuples and plain strings.

    Raises:
        MalformedWordlistEntry: If the record cannot be converted
    """
    if isinstance(record, WordlistEntry):
        return record
    try:
        if isinstance(record, str):
            return WordlistEntry(word=record)
        if isinstance(record, Mapping):
            return WordlistEntry.model_validate(record)
        if isinstance(record, tuple) and 1 <= len(record) <= 2:
            frequency = record[1] if len(record) == 2 else None
            return WordlistEntry(word=record[0], frequency=frequency)
    except ValidationError as e:
        raise MalformedWordlistEntry(f"Invalid word list entry: {e}", record=record) from e
    raise MalformedWordlistEntry(
        f"Unsupported word list record type: {type(record).__name__}",
        record=record,
    )


class DictionaryIndex:
    """
    Canonical word set plus personal overlay, indexed for fuzzy search.

    Words are stored in canonical form (Turkish lower case). Membership is
    case-insensitive and diacritic-exact.
    """

    def __init__(
        self,
        overlay_weight: int = DEFAULT_OVERLAY_WEIGHT,
        shuffle_insertion: bool = False,
        shuffle_seed: Optional[int] = None,
    ):
        """
        Args:
            overlay_weight: Ranking weight given to personal dictionary words
            shuffle_insertion: Shuffle BK-tree insertion order on load
            shuffle_seed: Seed for the shuffle, for reproducible trees
        """
        self._overlay_weight = overlay_weight
        self._shuffle_insertion = shuffle_insertion
        self._shuffle_seed = shuffle_seed

        self._words: Set[str] = set()
        self._overlay: Set[str] = set()
        self._weights: Dict[str, int] = {}
        # Folded form -> canonical words that fold to it
        self._variants: Dict[str, Set[str]] = {}
        self._tree = BKTree()

    def load(self, entries: Iterable[Any]) -> LoadReport:
        """
        Rebuild the dictionary from word list entries.

        Replaces all base words. Malformed entries are skipped one by one.
        Personal overlay words survive and are merged into the new tree.

        Args:
            entries: WordlistEntry objects, {word, frequency} mappings or strings

        Returns:
            LoadReport with loaded/skipped/overlay counts
        """
        start_time = time.time()

        weights: Dict[str, int] = {}
        skipped = 0
        for record in entries:
            try:
                entry = coerce_entry(record)
            except MalformedWordlistEntry as e:
                skipped += 1
                logger.debug("Skipping malformed word list entry", error=e.message)
                continue
            canonical = turkish_lower(entry.word)
            weights[canonical] = max(weights.get(canonical, 0), entry.frequency)

        order = list(weights)
        if self._shuffle_insertion:
            random.Random(self._shuffle_seed).shuffle(order)

        tree = BKTree()
        variants: Dict[str, Set[str]] = {}
        for word in order:
            _add_variant(tree, variants, word)

        self._words = set(weights)
        self._weights = weights
        self._variants = variants
        self._tree = tree

        overlay = self._overlay
        self._overlay = set()
        self.merge_overlay(overlay)

        report = LoadReport(loaded=len(self._words), skipped=skipped, overlay=len(self._overlay))

        if not self._words:
            logger.warning(
                "Dictionary is empty, every non-personal word will be reported",
                skipped=skipped,
            )

        logger.info(
            "Dictionary index built",
            loaded=report.loaded,
            skipped=report.skipped,
            overlay=report.overlay,
            tree_depth=tree.depth(),
            build_time_seconds=round(time.time() - start_time, 2),
        )
        return report

    def merge_overlay(self, words: Iterable[str]) -> int:
        """
        Add personal dictionary words. Additive and idempotent.

        Args:
            words: Words in any case

        Returns:
            Number of words newly added to the overlay
        """
        added = 0
        for word in words:
            if not isinstance(word, str) or not word.strip():
                logger.debug("Ignoring empty personal dictionary word")
                continue
            canonical = turkish_lower(word.strip())
            if canonical in self._overlay:
                continue
            self._overlay.add(canonical)
            _add_variant(self._tree, self._variants, canonical)
            self._weights[canonical] = max(self._weights.get(canonical, 1), self._overlay_weight)
            added += 1

        if added:
            logger.debug("Personal dictionary merged", added=added, overlay=len(self._overlay))
        return added

    def is_valid(self, word: str) -> bool:
        """Case-insensitive membership in the dictionary or overlay."""
        canonical = turkish_lower(word)
        return canonical in self._words or canonical in self._overlay

    def __contains__(self, word: str) -> bool:
        return self.is_valid(word)

    def search_within_distance(self, word: str, max_distance: int) -> List[Tuple[str, int]]:
        """
        All dictionary words within ``max_distance`` edits of ``word``,
        compared on diacritic-folded forms.

        Returns:
            (canonical candidate, Levenshtein distance of the folded forms) pairs
        """
        results: List[Tuple[str, int]] = []
        for folded, distance in self._tree.search(fold_diacritics(word), max_distance):
            for candidate in sorted(self._variants.get(folded, ())):
                results.append((candidate, distance))
        return results

    def weight(self, word: str) -> int:
        """Ranking weight of a word (1 when unknown)."""
        return self._weights.get(turkish_lower(word), 1)

    def overlay_words(self) -> List[str]:
        return sorted(self._overlay)

    @property
    def base_word_count(self) -> int:
        return len(self._words)

    @property
    def is_empty(self) -> bool:
        return not self._words and not self._overlay

    def __len__(self) -> int:
        return len(self._words) + len(self._overlay - self._words)


def _add_variant(tree: BKTree, variants: Dict[str, Set[str]], canonical: str) -> None:
    folded = fold_diacritics(canonical)
    group = variants.setdefault(folded, set())
    if not group:
        tree.add(folded)
    group.add(canonical)
