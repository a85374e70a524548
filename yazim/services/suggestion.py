"""
Ranked correction candidates for out-of-vocabulary words.

Candidates come from two sources, cheapest first:

1. Quick wins: single-letter substitutions with Turkish look-alike letters
   (c/ç, g/ğ, i/ı, o/ö, s/ş, u/ü, a/â) and keyboard neighbours, each
   checked directly for membership.
2. Fuzzy search: BK-tree lookup within ``max_edit_distance`` edits of the
   diacritic-folded word, only when quick wins did not fill the limit.
   Folding makes ASCII spellings such as "dusunce" reach "düşünce".

All candidates are ranked with the same key: keyboard-aware distance,
then length difference, then weight (descending), then Turkish
alphabetical order.
"""
from typing import Dict, List, Optional, Tuple

from yazim.services.dictionary_index import DictionaryIndex
from yazim.services.distance import keyboard_distance, keyboard_neighbors
from yazim.services.spellcheck_base import InternalSearchFailure
from yazim.utils.logger import get_logger
from yazim.utils.turkish import LOOKALIKES, turkish_lower, turkish_sort_key

logger = get_logger("services.suggestion")

DEFAULT_LIMIT = 5
DEFAULT_MAX_EDIT_DISTANCE = 2


class SuggestionEngine:
    """Suggestion search over a DictionaryIndex it does not own."""

    def __init__(
        self,
        index: DictionaryIndex,
        max_edit_distance: int = DEFAULT_MAX_EDIT_DISTANCE,
        default_limit: int = DEFAULT_LIMIT,
    ):
        self._index = index
        self._max_edit_distance = max_edit_distance
        self._default_limit = default_limit

    def suggest(self, word: str, limit: Optional[int] = None) -> List[str]:
        """
        Suggest dictionary words for ``word``, best first.

        Args:
            word: Word to correct (any case)
            limit: Max suggestions (default from constructor)

        Returns:
            At most ``limit`` canonical dictionary words, never ``word`` itself

        Raises:
            InternalSearchFailure: If candidate search fails
        """
        return [candidate for candidate, _ in self.suggest_scored(word, limit)]

    def suggest_scored(self, word: str, limit: Optional[int] = None) -> List[Tuple[str, float]]:
        """Like suggest(), with the keyboard-aware distance of each candidate."""
        limit = self._default_limit if limit is None else limit
        canonical = turkish_lower(word)
        if limit <= 0 or not canonical:
            return []

        try:
            candidates = self.quick_wins(canonical, limit)
            if len(candidates) < limit:
                for candidate, _ in self._index.search_within_distance(canonical, self._max_edit_distance):
                    if candidate != canonical and candidate not in candidates:
                        candidates.append(candidate)
            scored = self._rank(canonical, candidates)
        except InternalSearchFailure:
            raise
        except Exception as e:
            logger.error("Suggestion search failed", word=canonical, error=str(e), exc_info=True)
            raise InternalSearchFailure(f"Suggestion search failed for {canonical!r}: {e}", word=canonical) from e

        return scored[:limit]

    def quick_wins(self, canonical: str, limit: int) -> List[str]:
        """
        Valid single-substitution variants, in discovery order.

        Look-alike letters are tried over the whole word before keyboard
        neighbours. Stops once ``limit`` variants are found.
        """
        found: List[str] = []

        def substitutions():
            for i, ch in enumerate(canonical):
                for alt in LOOKALIKES.get(ch, ""):
                    yield canonical[:i] + alt + canonical[i + 1:]
            for i, ch in enumerate(canonical):
                for alt in keyboard_neighbors(ch):
                    yield canonical[:i] + alt + canonical[i + 1:]

        for variant in substitutions():
            variant = turkish_lower(variant)
            if variant == canonical or variant in found or not self._index.is_valid(variant):
                continue
            found.append(variant)
            if len(found) >= limit:
                break
        return found

    def _rank(self, canonical: str, candidates: List[str]) -> List[Tuple[str, float]]:
        scores: Dict[str, float] = {
            candidate: round(keyboard_distance(canonical, candidate), 6)
            for candidate in candidates
        }
        ordered = sorted(
            candidates,
            key=lambda c: (
                scores[c],
                abs(len(c) - len(canonical)),
                -self._index.weight(c),
                turkish_sort_key(c),
            ),
        )
        return [(candidate, scores[candidate]) for candidate in ordered]
