"""Unit tests for the voter-lookup CLI."""

from unittest.mock import patch

from typer.testing import CliRunner

from voter_lookup.cli.app import app
from voter_lookup.lib.search import ProbeFailure, SearchMode, SearchOutcome

runner = CliRunner()


class TestTransliterateCommand:
    def test_dictionary_word(self) -> None:
        result = runner.invoke(app, ["transliterate", "badale"])
        assert result.exit_code == 0
        assert result.output.strip() == "बधाले"

    def test_extra_words(self, tmp_path) -> None:
        words = tmp_path / "words.json"
        words.write_text('{"prashant": "प्रशांत"}', encoding="utf-8")
        result = runner.invoke(app, ["transliterate", "--words", str(words), "Prashant Patil"])
        assert result.exit_code == 0
        assert result.output.strip() == "प्रशांत पाटील"


class TestSearchCommand:
    def test_name_search_against_export(self, roll_file) -> None:
        result = runner.invoke(app, ["search", "--data", str(roll_file), "--first", "mangesh", "--last", "badale"])
        assert result.exit_code == 0
        assert "Keys: मंगेश_बधाले, बधाले" in result.output
        assert "UXM8227381" in result.output
        assert "status: ok" in result.output

    def test_voter_id_search_against_export(self, roll_file) -> None:
        result = runner.invoke(app, ["search", "--data", str(roll_file), "--voter-id", "UXM7902273"])
        assert result.exit_code == 0
        assert "दशरथ लक्ष्मण बधाले" in result.output
        assert "1 result(s)" in result.output

    def test_query_name_against_export(self, roll_file) -> None:
        result = runner.invoke(app, ["search", "--data", str(roll_file), "--query", "Badale Dashrath Laxman"])
        assert result.exit_code == 0
        assert "Keys: बधाले_दशरथ_लक्ष्मण" in result.output
        assert "UXM7902273" in result.output

    def test_query_voter_id_against_export(self, roll_file) -> None:
        result = runner.invoke(app, ["search", "--data", str(roll_file), "-q", "UXM8227381"])
        assert result.exit_code == 0
        assert "मंगेश रामदास बधाले" in result.output
        assert "Keys:" not in result.output

    def test_requires_input(self, roll_file) -> None:
        result = runner.invoke(app, ["search", "--data", str(roll_file)])
        assert result.exit_code == 2

    def test_degraded_exit_code(self, roll_file) -> None:
        outcome = SearchOutcome(
            mode=SearchMode.VOTER_ID,
            failures=[ProbeFailure(path="voters/UXM1", message="Connection to store failed")],
        )
        with patch("voter_lookup.cli.app._search", return_value=outcome):
            result = runner.invoke(app, ["search", "--voter-id", "UXM1"])
        assert result.exit_code == 1
        assert "status: degraded" in result.output

    def test_remote_store_from_settings(self, monkeypatch) -> None:
        monkeypatch.setenv("FIREBASE_DATABASE_URL", "https://voter-roll-test.firebaseio.com")
        outcome = SearchOutcome(mode=SearchMode.NAME)
        with patch("voter_lookup.cli.app._search", return_value=outcome) as mock_search:
            result = runner.invoke(app, ["search", "--last", "badale"])
        assert result.exit_code == 0
        form, data = mock_search.call_args.args
        assert form.last_name == "badale"
        assert data is None
