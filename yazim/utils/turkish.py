"""
Turkish-aware case folding, diacritic folding and collation utilities.

Standard ``str.lower()`` maps ``I`` to ``i`` and ``İ`` to ``i`` followed by a
combining dot, which is wrong for Turkish. Lowering here maps ``İ`` to ``i``
and ``I`` to ``ı`` before lowering the rest.
"""
import unicodedata
from typing import NamedTuple, Tuple

COMBINING_DOT_ABOVE = "\u0307"

TURKISH_ALPHABET = "abcçdefgğhıijklmnoöprsştuüvyz"

# Turkish letter -> ASCII look-alike
DIACRITIC_PAIRS = {
    "ç": "c",
    "ğ": "g",
    "ı": "i",
    "ö": "o",
    "ş": "s",
    "ü": "u",
}

# Letter -> look-alike letters it is commonly typed as, both directions.
# Includes the circumflexed vowels of borrowed words (kâr, hâlâ).
LOOKALIKES = {
    "c": "ç", "ç": "c",
    "g": "ğ", "ğ": "g",
    "i": "ıî", "ı": "i", "î": "i",
    "o": "ö", "ö": "o",
    "s": "ş", "ş": "s",
    "u": "üû", "ü": "u", "û": "u",
    "a": "â", "â": "a",
}

_UPPER_I_MAP = str.maketrans({"İ": "i", "I": "ı"})
_LOWER_I_MAP = str.maketrans({"i": "İ", "ı": "I"})
_FOLD_MAP = str.maketrans(DIACRITIC_PAIRS)
_ALPHABET_RANK = {ch: i for i, ch in enumerate(TURKISH_ALPHABET)}


class NormalizedForm(NamedTuple):
    """Canonical (membership) and folded (ranking) forms of a word."""

    canonical: str
    folded: str


def turkish_lower(text: str) -> str:
    """
    Lower-case text with Turkish dotted/dotless I rules.

    Example:
        >>> turkish_lower("İSTANBUL IRMAK")
        'istanbul ırmak'
    """
    # Decomposed capital İ ("I" + U+0307) is a dotted i, not a dotless one
    text = text.replace("I" + COMBINING_DOT_ABOVE, "i")
    lowered = text.translate(_UPPER_I_MAP).lower()
    # Decomposed input ("i" + U+0307) collapses to a plain "i"
    return lowered.replace("i" + COMBINING_DOT_ABOVE, "i")


def turkish_upper(text: str) -> str:
    """Upper-case text with Turkish dotted/dotless I rules."""
    return text.translate(_LOWER_I_MAP).upper()


def match_case(template: str, word: str) -> str:
    """
    Give ``word`` the capitalization pattern of ``template``.

    Only all-caps and leading-capital patterns are carried over.

    Example:
        >>> match_case("Istanbl", "istanbul")
        'İstanbul'
    """
    if not template or not word:
        return word
    if len(template) > 1 and template.isupper():
        return turkish_upper(word)
    if template[0].isupper():
        return turkish_upper(word[0]) + word[1:]
    return word


def fold_diacritics(text: str) -> str:
    """
    Fold a word to a diacritic-free form, for ranking only.

    Turkish letters map to their ASCII look-alikes; any other combining
    marks (â, î, û, é in borrowed words) are stripped.

    Example:
        >>> fold_diacritics("Kâğıt")
        'kagit'
    """
    folded = turkish_lower(text).translate(_FOLD_MAP)
    decomposed = unicodedata.normalize("NFKD", folded)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def normalize(word: str) -> NormalizedForm:
    """Return the canonical and folded forms of ``word``."""
    canonical = turkish_lower(word)
    return NormalizedForm(canonical=canonical, folded=fold_diacritics(canonical))


def is_lookalike(a: str, b: str) -> bool:
    """True when two lower-case letters differ only by a Turkish diacritic."""
    return a != b and fold_diacritics(a) == fold_diacritics(b)


def turkish_sort_key(word: str) -> Tuple[Tuple[int, int], ...]:
    """
    Sort key following Turkish alphabetical order.

    Letters outside the Turkish alphabet sort after it by code point.
    """
    return tuple(
        (0, _ALPHABET_RANK[ch]) if ch in _ALPHABET_RANK else (1, ord(ch))
        for ch in turkish_lower(word)
    )
