"""
Unit tests for the suggestion engine.
"""
from unittest.mock import patch

import pytest

from yazim.services.dictionary_index import DictionaryIndex
from yazim.services.spellcheck_base import InternalSearchFailure
from yazim.services.suggestion import SuggestionEngine
from yazim.utils.turkish import fold_diacritics, turkish_lower


def make_engine(entries, overlay=None) -> SuggestionEngine:
    index = DictionaryIndex(overlay_weight=10)
    index.load(entries)
    if overlay:
        index.merge_overlay(overlay)
    return SuggestionEngine(index, max_edit_distance=2, default_limit=5)


@pytest.fixture
def engine(sample_words) -> SuggestionEngine:
    return make_engine(sample_words)


class TestRanking:
    """Tests for candidate ordering."""

    def test_lookalike_then_distance_then_length(self):
        engine = make_engine(["çay", "cam", "ca"])
        assert engine.suggest("cay") == ["çay", "cam", "ca"]

    def test_adjacent_key_ranks_first(self):
        engine = make_engine(["kales", "kalem"])
        assert engine.suggest("kalen") == ["kalem", "kales"]

    def test_ties_broken_alphabetically(self):
        engine = make_engine(["kaler", "kalem"])
        assert engine.suggest("kale") == ["kalem", "kaler"]

    def test_ties_broken_by_frequency(self):
        engine = make_engine([
            {"word": "kalem", "frequency": 1},
            {"word": "kaler", "frequency": 50},
        ])
        assert engine.suggest("kale") == ["kaler", "kalem"]

    def test_overlay_words_preferred_on_ties(self):
        engine = make_engine(["kalem"], overlay=["kaler"])
        assert engine.suggest("kale") == ["kaler", "kalem"]

    def test_scores_are_reported(self):
        engine = make_engine(["çay", "cam"])
        scored = engine.suggest_scored("cay")
        assert scored[0] == ("çay", pytest.approx(0.25))
        assert scored[1] == ("cam", pytest.approx(1.0))

    def test_deterministic(self, engine):
        assert engine.suggest("kitab") == engine.suggest("kitab")


class TestContract:
    """Tests for the suggest() guarantees."""

    @pytest.mark.parametrize("query", ["dnya", "kitab", "merhba", "cocuk", "Kitap", "KALEM", "ev", "gz"])
    def test_suggestions_are_valid_and_exclude_query(self, engine, query):
        suggestions = engine.suggest(query)
        assert len(suggestions) <= 5
        assert turkish_lower(query) not in suggestions
        for suggestion in suggestions:
            assert engine._index.is_valid(suggestion)

    @pytest.mark.parametrize("limit", [1, 2, 3])
    def test_limit(self, engine, limit):
        assert len(engine.suggest("ev", limit)) <= limit

    def test_zero_limit(self, engine):
        assert engine.suggest("dnya", 0) == []

    def test_empty_query(self, engine):
        assert engine.suggest("") == []

    def test_empty_dictionary(self):
        engine = make_engine([])
        assert engine.suggest("merhaba") == []

    def test_dnya_suggests_dunya(self, engine):
        assert "dünya" in engine.suggest("dnya")

    def test_single_diacritic_corruption_round_trip(self, engine, sample_words):
        """Stripping one Turkish letter from a word still suggests the word."""
        for word in sample_words:
            positions = [i for i, ch in enumerate(word) if fold_diacritics(ch) != ch]
            if not positions:
                continue
            i = positions[0]
            corrupted = word[:i] + fold_diacritics(word[i]) + word[i + 1:]
            assert word in engine.suggest(corrupted), corrupted


class TestSearchTiers:
    """Tests for quick wins and fuzzy search interplay."""

    def test_quick_wins_short_circuit_fuzzy_search(self):
        engine = make_engine(["çay", "cam"])
        with patch.object(engine._index, "search_within_distance") as search:
            assert engine.suggest("cay", 1) == ["çay"]
        search.assert_not_called()

    def test_fuzzy_search_fills_remaining_slots(self):
        engine = make_engine(["çay", "cam"])
        with patch.object(
            engine._index, "search_within_distance",
            wraps=engine._index.search_within_distance,
        ) as search:
            engine.suggest("cay", 5)
        search.assert_called_once_with("cay", 2)

    def test_quick_wins_lookalikes_before_keyboard(self):
        engine = make_engine(["çay", "vay"])
        assert engine.quick_wins("cay", 5) == ["çay", "vay"]


class TestFailures:
    """Search failures surface as InternalSearchFailure."""

    def test_unexpected_error_is_wrapped(self, engine):
        with patch.object(engine._index, "search_within_distance", side_effect=RuntimeError("boom")):
            with pytest.raises(InternalSearchFailure) as exc_info:
                engine.suggest("zzzz")
        assert exc_info.value.word == "zzzz"

    def test_internal_failure_passes_through(self, engine):
        failure = InternalSearchFailure("corrupted", word="zzzz")
        with patch.object(engine._index, "search_within_distance", side_effect=failure):
            with pytest.raises(InternalSearchFailure) as exc_info:
                engine.suggest("zzzz")
        assert exc_info.value is failure


class TestFoldedSearch:
    """Words typed without Turkish letters reach their dictionary form."""

    @pytest.mark.parametrize("query,expected", [
        ("dusunce", "düşünce"),
        ("gorusmek", "görüşmek"),
        ("ucuncu", "üçüncü"),
        ("DUSUNCE", "düşünce"),
    ])
    def test_ascii_spelling_suggests_turkish_word(self, query, expected):
        engine = make_engine(["düşünce", "görüşmek", "üçüncü", "kalem"])
        assert engine.suggest(query)[0] == expected

    def test_words_sharing_a_folded_form_are_all_candidates(self):
        engine = make_engine(["kar", "kâr", "kalem"])
        assert engine.suggest("kär") == ["kar", "kâr"]

    def test_suggestions_are_canonical_for_decomposed_input(self, engine):
        suggestions = engine.suggest("I\u0307stanbl")
        assert suggestions[0] == "istanbul"
        assert all("\u0307" not in s for s in suggestions)
