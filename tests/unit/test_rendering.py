"""Tests for result rendering and presenters."""

from word_lookup.models import (
    Definition,
    EmptyInput,
    Meaning,
    NetworkError,
    NotFound,
    Sense,
    Success,
)
from word_lookup.presenters import ConsolePresenter, render_result, render_result_html


def _chess_definition():
    return Definition(
        word="chess",
        phonetic="/tʃɛs/",
        meanings=(
            Meaning(
                part_of_speech="noun",
                senses=(
                    Sense("A board game for two players.", example="Let's play chess."),
                    Sense("A pontoon in a bridge."),
                ),
                synonyms=("chequers", "draughts"),
            ),
        ),
        source_urls=("https://en.wiktionary.org/wiki/chess", "https://other.test"),
    )


class TestRenderResult:
    """Tests for the plain-text renderer."""

    def test_success(self):
        """Should render word, phonetic, numbered senses, examples and synonyms."""
        text = render_result(Success(_chess_definition()))

        assert text.splitlines()[0] == "chess"
        assert "/tʃɛs/" in text
        assert "noun" in text
        assert "  1. A board game for two players." in text
        assert '"Let\'s play chess."' in text
        assert "  2. A pontoon in a bridge." in text
        assert "Synonyms  chequers, draughts" in text
        assert "Source: https://en.wiktionary.org/wiki/chess" in text
        assert "other.test" not in text

    def test_success_without_optional_parts(self):
        """Should omit phonetic, synonyms and source when absent."""
        text = render_result(Success(Definition(word="rook")))

        assert text == "rook"

    def test_not_found(self):
        """Should render emoji, title and message."""
        text = render_result(NotFound("No Definitions Found", "Sorry pal..."))
        assert text == "😕\nNo Definitions Found\nSorry pal..."

    def test_network_error(self):
        """Should render the generic error text."""
        text = render_result(NetworkError())
        assert "Sorry pal, there was an error." in text

    def test_empty_input_includes_hint(self):
        """Should add the inline hint for empty input."""
        text = render_result(EmptyInput())

        assert text.startswith("😡")
        assert "Whoops... cannot be empty" in text


class TestRenderResultHtml:
    """Tests for the rich-text renderer."""

    def test_escapes_service_text(self):
        """Should escape markup coming from the service."""
        definition = Definition(
            word="<b>x</b>",
            meanings=(Meaning("noun", senses=(Sense("a & b", example="<i>"),)),),
        )
        markup = render_result_html(Success(definition))

        assert "&lt;b&gt;x&lt;/b&gt;" in markup
        assert "a &amp; b" in markup
        assert "&lt;i&gt;" in markup

    def test_source_link(self):
        """Should link the first source URL."""
        markup = render_result_html(Success(_chess_definition()))
        assert "<a href='https://en.wiktionary.org/wiki/chess'>" in markup

    def test_error(self):
        """Should render title and message for error results."""
        markup = render_result_html(NotFound("No Definitions Found", "Sorry pal..."))

        assert "<h2>No Definitions Found</h2>" in markup
        assert "Sorry pal..." in markup


class TestConsolePresenter:
    """Tests for ConsolePresenter output."""

    def test_show_result_prints_rendering(self, capsys):
        """Should print the plain-text rendering."""
        ConsolePresenter().show_result(NetworkError())
        assert "Sorry pal, there was an error." in capsys.readouterr().out

    def test_show_error_prefix(self, capsys):
        """Should prefix errors."""
        ConsolePresenter().show_error("boom")
        assert capsys.readouterr().out == "[ERROR] boom\n"

    def test_null_presenter_is_silent(self, null_presenter, capsys):
        """NullPresenter should print nothing."""
        null_presenter.show_info("x")
        null_presenter.show_error("x")
        null_presenter.show_result(NetworkError())
        assert capsys.readouterr().out == ""
