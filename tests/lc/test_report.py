"""Tests for building and rendering LC diagnostic reports."""

import pytest

from lc import (
    LCCustomError, LCEmphasis, LCExpected, LCParseError, LCReportBuilder, LCReportRenderer, LCSeverity,
    LCSourceMap, LCSpan, LCToken, LCTokenType, LCUnclosedDelimiter, LCUnexpectedToken
)


class TestReportBuilder:
    """Test mapping syntax errors to reports."""

    def test_unclosed_delimiter_report(self):
        """Test that both the opening paren and the failure point are labelled."""
        error = LCUnclosedDelimiter(
            span=LCSpan(2, 3), delimiter=LCTokenType.LPAREN, opening_span=LCSpan(0, 1), found=None
        )
        report = LCReportBuilder().build(error)

        assert report.severity == LCSeverity.ERROR
        assert report.message == "Unclosed delimiter ("
        assert report.offset == 2
        assert [(l.span, l.message, l.emphasis) for l in report.labels] == [
            (LCSpan(0, 1), "Unclosed delimiter (", LCEmphasis.SECONDARY),
            (LCSpan(2, 3), "Must be closed before this end of file", LCEmphasis.PRIMARY),
        ]

    def test_unclosed_delimiter_names_found_token(self):
        """Test the label when a concrete token interrupted the group."""
        found = LCToken(LCTokenType.DOT, ".", LCSpan(3, 4))
        error = LCUnclosedDelimiter(span=found.span, delimiter=LCTokenType.LPAREN, opening_span=LCSpan(0, 1), found=found)
        report = LCReportBuilder().build(error)
        assert report.labels[1].message == "Must be closed before this ."

    def test_unexpected_token_report(self):
        """Test the summary and label for a concrete unexpected token."""
        found = LCToken(LCTokenType.RPAREN, ")", LCSpan(4, 5))
        error = LCUnexpectedToken(
            span=found.span, found=found, expected=(LCExpected.IDENTIFIER, LCExpected.END_OF_INPUT)
        )
        report = LCReportBuilder().build(error)

        assert report.message == "Unexpected token in input, expected identifier, end of input"
        assert len(report.labels) == 1
        assert report.labels[0].message == "Unexpected token )"
        assert report.labels[0].emphasis == LCEmphasis.PRIMARY

    def test_unexpected_end_of_input_report(self):
        """Test the summary when input ran out."""
        error = LCUnexpectedToken(span=LCSpan(0, 1), found=None, expected=(LCExpected.DOT,))
        report = LCReportBuilder().build(error)

        assert report.message == "Unexpected end of input, expected ."
        assert report.labels[0].message == "Unexpected token end of file"

    def test_empty_expected_set(self):
        """Test the wording when nothing specific was expected."""
        error = LCUnexpectedToken(span=LCSpan(0, 1), found=None, expected=())
        assert LCReportBuilder().build(error).message == "Unexpected end of input, expected something else"

    def test_custom_message_is_verbatim(self):
        """Test that custom messages pass through unchanged."""
        error = LCCustomError(span=LCSpan(1, 3), message="Something specific went wrong")
        report = LCReportBuilder().build(error)

        assert report.message == "Something specific went wrong"
        assert [(l.span, l.message) for l in report.labels] == [(LCSpan(1, 3), "Something specific went wrong")]

    def test_expected_order_is_canonical(self):
        """Test that expectations are listed in a fixed order regardless of how they were collected."""
        ordered = LCExpected.ordered({LCExpected.END_OF_INPUT, LCExpected.LPAREN, LCExpected.IDENTIFIER})
        assert ordered == (LCExpected.IDENTIFIER, LCExpected.LPAREN, LCExpected.END_OF_INPUT)


class TestSourceMap:
    """Test byte offset to line/column mapping."""

    def test_single_line(self):
        """Test columns on the first line."""
        source_map = LCSourceMap("abc")
        assert source_map.line_column(0) == (1, 1)
        assert source_map.line_column(2) == (1, 3)

    def test_multi_line(self):
        """Test offsets after newlines."""
        source_map = LCSourceMap("ab\ncd\r\nef")
        assert source_map.line_column(3) == (2, 1)
        assert source_map.line_column(7) == (3, 1)
        assert source_map.line_text(2) == "cd"
        assert source_map.line_text(3) == "ef"

    def test_columns_count_characters(self):
        """Test that multi-byte characters occupy one column."""
        source_map = LCSourceMap("λx.λy")
        assert source_map.line_column(2) == (1, 2)
        assert source_map.line_column(4) == (1, 4)

    def test_end_of_input(self):
        """Test that offsets past the end map to just after the last character."""
        assert LCSourceMap("ab").line_column(3) == (1, 3)
        assert LCSourceMap("ab\n").line_column(4) == (2, 1)


class TestReportRenderer:
    """Test rendering reports against source text."""

    def render_first(self, lc, source):
        with pytest.raises(LCParseError) as exc_info:
            lc.parse(source)

        return lc.render(exc_info.value.errors[0], source)

    def test_render_unclosed_delimiter(self, lc):
        """Test the layout of an unclosed delimiter report."""
        assert self.render_first(lc, "(a") == (
            "Error: Unclosed delimiter (\n"
            " --> 1:3\n"
            "  |\n"
            "1 | (a\n"
            "  | - Unclosed delimiter (\n"
            "  |   ^ Must be closed before this end of file"
        )

    def test_render_unexpected_token_after_lambda(self, lc):
        """Test that columns account for the two-byte λ."""
        assert self.render_first(lc, "λ.") == (
            "Error: Unexpected token in input, expected identifier\n"
            " --> 1:2\n"
            "  |\n"
            "1 | λ.\n"
            "  |  ^ Unexpected token ."
        )

    def test_render_empty_input(self, lc):
        """Test the report for empty input."""
        assert self.render_first(lc, "") == (
            "Error: Unexpected end of input, expected identifier, λ, (\n"
            " --> 1:1\n"
            "  |\n"
            "1 |\n"
            "  | ^ Unexpected token end of file"
        )

    def test_render_on_later_line(self, lc):
        """Test that the report points at the right line."""
        assert self.render_first(lc, "a\n  b )") == (
            "Error: Unexpected token in input, expected identifier, λ, (, end of input\n"
            " --> 2:5\n"
            "  |\n"
            "2 |   b )\n"
            "  |     ^ Unexpected token )"
        )

    def test_render_multi_character_span(self, lc):
        """Test that the underline covers the whole token."""
        rendered = self.render_first(lc, "x := y")
        assert rendered.splitlines()[-1] == "  |   ^^ Definitions with ':=' are not supported here; expected a single expression"

    def test_render_labels_on_different_lines(self, lc):
        """Test an unclosed group whose failure point is on a later line."""
        rendered = self.render_first(lc, "(a\n b")
        assert rendered.splitlines() == [
            "Error: Unclosed delimiter (",
            " --> 2:3",
            "  |",
            "1 | (a",
            "  | - Unclosed delimiter (",
            "2 |  b",
            "  |   ^ Must be closed before this end of file",
        ]

    def test_render_expands_tabs(self, lc_custom):
        """Test that markers stay aligned under tab-indented source."""
        lc = lc_custom(tab_width=2)
        rendered = self.render_first(lc, "\ta )")
        assert rendered.splitlines()[-2:] == [
            "1 |   a )",
            "  |     ^ Unexpected token )",
        ]

    def test_render_all_keeps_order(self, lc):
        """Test that several reports render in discovery order."""
        source = "(λ.a) (b"
        with pytest.raises(LCParseError) as exc_info:
            lc.parse(source)

        reports = [lc.report(error) for error in exc_info.value.errors]
        rendered = LCReportRenderer().render_all(reports, source)
        chunks = rendered.split("\n\n")
        assert len(chunks) == 2
        assert chunks[0].startswith("Error: Unexpected token in input")
        assert chunks[1].startswith("Error: Unclosed delimiter (")
