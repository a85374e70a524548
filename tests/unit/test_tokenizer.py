"""
Unit tests for the Turkish word tokenizer.
"""
from yazim.utils.tokenizer import TURKISH_WORD_PATTERN, Token, is_numeric_token, tokenize


class TestTokenize:
    """Tests for tokenize()."""

    def test_offsets(self):
        assert list(tokenize("merhaba dnya")) == [
            Token("merhaba", 0, 7),
            Token("dnya", 8, 12),
        ]

    def test_punctuation_and_apostrophe_split_tokens(self):
        tokens = list(tokenize("Çok güzel, İstanbul'da!"))
        assert tokens == [
            Token("Çok", 0, 3),
            Token("güzel", 4, 9),
            Token("İstanbul", 11, 19),
            Token("da", 20, 22),
        ]

    def test_offsets_slice_back_to_word(self):
        text = "Ağaçların gölgesinde, ışıklı bir öğleden sonra."
        for token in tokenize(text):
            assert text[token.start:token.end] == token.word

    def test_turkish_uppercase_letters(self):
        words = [t.word for t in tokenize("ÇĞIİÖŞÜ çğıiöşü")]
        assert words == ["ÇĞIİÖŞÜ", "çğıiöşü"]

    def test_circumflex_letters_stay_in_word(self):
        assert [t.word for t in tokenize("kâr hâlâ")] == ["kâr", "hâlâ"]

    def test_digits_and_underscore_are_word_characters(self):
        assert [t.word for t in tokenize("abc_12 x")] == ["abc_12", "x"]

    def test_other_scripts_are_not_words(self):
        assert [t.word for t in tokenize("привет dünya")] == ["dünya"]

    def test_empty_text(self):
        assert list(tokenize("")) == []

    def test_is_lazy_and_restartable(self):
        text = "bir iki üç"
        first = tokenize(text)
        assert next(first) == Token("bir", 0, 3)
        assert list(tokenize(text)) == list(tokenize(text))

    def test_pattern_matches_maximal_run(self):
        assert TURKISH_WORD_PATTERN.findall("yazım-denetimi") == ["yazım", "denetimi"]


class TestIsNumericToken:
    """Tests for is_numeric_token()."""

    def test_numeric(self):
        assert is_numeric_token("2024") is True
        assert is_numeric_token("_1") is True

    def test_not_numeric(self):
        assert is_numeric_token("a1") is False
        assert is_numeric_token("kitap") is False
