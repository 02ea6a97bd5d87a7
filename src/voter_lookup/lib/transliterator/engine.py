"""Dictionary-first, greedy longest-match Latin -> Devanagari transliteration."""

import json
import re
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

from loguru import logger

from voter_lookup.lib.transliterator.tables import COMMON_WORDS, MAX_UNIT_LENGTH, ROMANIZATION_TABLE

_DEVANAGARI_RE = re.compile(r"[\u0900-\u097F]")


def contains_devanagari(text: str) -> bool:
    """Return True if any code point of ``text`` is in the Devanagari block."""
    return bool(_DEVANAGARI_RE.search(text))


class Transliterator:
    """Maps romanized Marathi to Devanagari.

    Each whitespace-separated token is looked up in the word dictionary first;
    unknown tokens are mapped left to right by the longest matching unit of the
    romanization table (3, then 2, then 1 characters).  Characters with no
    mapping are copied through unchanged, so the output is never empty for
    non-empty input.

    Args:
        words: Whole-word dictionary (lower-case Latin keys).
        units: Romanization units.
    """

    def __init__(
        self,
        words: Mapping[str, str] = COMMON_WORDS,
        units: Mapping[str, str] = ROMANIZATION_TABLE,
    ) -> None:
        self._words = MappingProxyType({k.lower(): v for k, v in words.items()})
        self._units = MappingProxyType(dict(units))
        self._max_unit = max((len(u) for u in self._units), default=MAX_UNIT_LENGTH)

    @property
    def words(self) -> Mapping[str, str]:
        return self._words

    @property
    def units(self) -> Mapping[str, str]:
        return self._units

    def with_words(self, extra: Mapping[str, str]) -> "Transliterator":
        """Return a new transliterator whose dictionary also contains ``extra``.

        Entries in ``extra`` win over existing ones.  ``self`` is not modified.
        """
        merged = dict(self._words)
        merged.update({k.strip().lower(): v for k, v in extra.items()})
        return Transliterator(words=merged, units=self._units)

    def transliterate(self, text: str) -> str:
        """Transliterate ``text``; Devanagari input is returned unchanged."""
        if not text or contains_devanagari(text):
            return text
        tokens = text.lower().strip().split()
        return " ".join(self._map_token(token) for token in tokens)

    def variations(self, text: str) -> list[str]:
        """Return the distinct spellings worth searching for ``text``.

        The input text, its transliteration and its lower-cased form, in
        that order.  Devanagari input has a single variation.
        """
        if contains_devanagari(text):
            return [text]
        candidates = [text, self.transliterate(text), text.lower()]
        return list(dict.fromkeys(candidates))

    def _map_token(self, token: str) -> str:
        word = self._words.get(token)
        if word is not None:
            return word
        return self._map_units(token)

    def _map_units(self, token: str) -> str:
        out: list[str] = []
        i = 0
        while i < len(token):
            for size in range(min(self._max_unit, len(token) - i), 0, -1):
                mapped = self._units.get(token[i : i + size])
                if mapped is not None:
                    out.append(mapped)
                    i += size
                    break
            else:
                out.append(token[i])
                i += 1
        return "".join(out)


def load_word_file(path: str | Path) -> dict[str, str]:
    """Load extra dictionary words from a JSON object file.

    Args:
        path: File containing ``{"latin": "देवनागरी", ...}``.

    Returns:
        Mapping of lower-cased Latin words to Devanagari.

    Raises:
        ValueError: If the file is not a JSON object of strings.
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in data.items()
    ):
        msg = f"Transliteration word file must be a JSON object of strings: {path}"
        raise ValueError(msg)
    logger.debug(f"Loaded {len(data)} transliteration words from {path}")
    return {k.strip().lower(): v for k, v in data.items()}
