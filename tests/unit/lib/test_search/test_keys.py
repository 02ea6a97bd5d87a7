"""Unit tests for name index key generation."""

from voter_lookup.lib.search import canonicalize, generate_keys, split_query
from voter_lookup.lib.transliterator import Transliterator


class TestGenerateKeys:
    """Keys are ordered most specific first and never contain empty segments."""

    def test_all_three_fields(self) -> None:
        assert generate_keys("मंगेश", "रामदास", "बधाले") == [
            "बधाले_मंगेश_रामदास",
            "मंगेश_बधाले",
            "बधाले",
        ]

    def test_no_middle_name(self) -> None:
        assert generate_keys("मंगेश", "", "बधाले") == ["मंगेश_बधाले", "बधाले"]

    def test_last_name_only(self) -> None:
        assert generate_keys("", "", "बधाले") == ["बधाले"]

    def test_middle_and_last_only(self) -> None:
        assert generate_keys("", "रामदास", "बधाले") == ["बधाले"]

    def test_no_last_name(self) -> None:
        assert generate_keys("मंगेश", "रामदास", "") == []

    def test_all_empty(self) -> None:
        assert generate_keys("", "", "") == []

    def test_whitespace_fields_are_empty(self) -> None:
        assert generate_keys("  ", "\t", "बधाले ") == ["बधाले"]

    def test_latin_input_transliterated(self) -> None:
        assert generate_keys("Mangesh", "ramdas", "BADALE") == [
            "बधाले_मंगेश_रामदास",
            "मंगेश_बधाले",
            "बधाले",
        ]

    def test_mixed_script_input(self) -> None:
        assert generate_keys("mangesh", "", "बधाले") == ["मंगेश_बधाले", "बधाले"]

    def test_custom_transliterator(self) -> None:
        translit = Transliterator().with_words({"prashant": "प्रशांत"})
        assert generate_keys("prashant", "", "patil", translit) == ["प्रशांत_पाटील", "पाटील"]

    def test_restartable(self) -> None:
        first = generate_keys("मंगेश", "रामदास", "बधाले")
        second = generate_keys("मंगेश", "रामदास", "बधाले")
        assert first == second


class TestCanonicalize:
    """Tests for single-field canonicalization."""

    def test_collapses_internal_whitespace(self) -> None:
        assert canonicalize("  उषा   बाई ") == "उषा बाई"

    def test_empty(self) -> None:
        assert canonicalize("   ") == ""


class TestSplitQuery:
    """Free-text names are written surname first."""

    def test_three_tokens(self) -> None:
        assert split_query("बधाले दशरथ लक्ष्मण") == ("दशरथ", "लक्ष्मण", "बधाले")

    def test_two_tokens(self) -> None:
        assert split_query("Badale Dashrath") == ("Dashrath", "", "Badale")

    def test_surname_only(self) -> None:
        assert split_query("  badale ") == ("", "", "badale")

    def test_extra_tokens_join_middle(self) -> None:
        assert split_query("पाटील रंजना उषा बाई") == ("रंजना", "उषा बाई", "पाटील")

    def test_empty(self) -> None:
        assert split_query("   ") == ("", "", "")

    def test_keys_from_query(self) -> None:
        assert generate_keys(*split_query("Badale Dashrath Laxman")) == [
            "बधाले_दशरथ_लक्ष्मण",
            "दशरथ_बधाले",
            "बधाले",
        ]
