"""Transliterator library: romanized Marathi to Devanagari.

Public API:
    - Transliterator: Dictionary-first, greedy longest-match transliterator
    - contains_devanagari: Detect Devanagari code points
    - load_word_file: Read extra dictionary words from JSON
    - transliterate_to_marathi / contains_marathi: Default-instance helpers
    - COMMON_WORDS / ROMANIZATION_TABLE: Curated read-only tables
"""

from voter_lookup.lib.transliterator.engine import Transliterator, contains_devanagari, load_word_file
from voter_lookup.lib.transliterator.tables import COMMON_WORDS, ROMANIZATION_TABLE

_default = Transliterator()


def transliterate_to_marathi(text: str) -> str:
    """Transliterate with the curated default tables."""
    return _default.transliterate(text)


def contains_marathi(text: str) -> bool:
    """Return True if ``text`` already contains Devanagari."""
    return contains_devanagari(text)


__all__ = [
    "COMMON_WORDS",
    "ROMANIZATION_TABLE",
    "Transliterator",
    "contains_devanagari",
    "contains_marathi",
    "load_word_file",
    "transliterate_to_marathi",
]
