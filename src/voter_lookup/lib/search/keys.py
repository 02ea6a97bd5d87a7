"""Name index key generation."""

from voter_lookup.lib.transliterator import Transliterator

KEY_DELIMITER = "_"

_default_transliterator = Transliterator()


def canonicalize(value: str, transliterator: Transliterator | None = None) -> str:
    """Collapse whitespace and transliterate one name field to Devanagari."""
    translit = transliterator or _default_transliterator
    collapsed = " ".join(value.split())
    if not collapsed:
        return ""
    return translit.transliterate(collapsed)


def generate_keys(
    first: str,
    middle: str,
    last: str,
    transliterator: Transliterator | None = None,
) -> list[str]:
    """Build index keys from name fields, most specific first.

    ``last_first_middle`` needs all three fields, ``first_last`` needs first
    and last, ``last`` needs the surname.  Combinations with an empty field
    are left out, so at most three keys are returned.

    Args:
        first: Given name, Latin or Devanagari.
        middle: Middle (father's/husband's) name.
        last: Surname.
        transliterator: Transliterator to canonicalize fields with.

    Returns:
        Ordered list of index keys.
    """
    first_c, middle_c, last_c = (canonicalize(v or "", transliterator) for v in (first, middle, last))

    keys: list[str] = []
    if first_c and middle_c and last_c:
        keys.append(KEY_DELIMITER.join((last_c, first_c, middle_c)))
    if first_c and last_c:
        keys.append(KEY_DELIMITER.join((first_c, last_c)))
    if last_c:
        keys.append(last_c)
    return keys


def split_query(query: str) -> tuple[str, str, str]:
    """Split a free-text name written surname first into ``(first, middle, last)``.

    ``"बधाले दशरथ लक्ष्मण"`` gives first ``दशरथ``, middle ``लक्ष्मण`` and last
    ``बधाले``.  Tokens after the given name all belong to the middle name.
    """
    tokens = query.split()
    if not tokens:
        return "", "", ""
    last = tokens[0]
    first = tokens[1] if len(tokens) > 1 else ""
    middle = " ".join(tokens[2:])
    return first, middle, last
