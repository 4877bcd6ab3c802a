"""Main LC (lambda calculus) front end class."""

import logging
from typing import Optional

from lc.lc_ast import LCASTNode
from lc.lc_error import LCParseError
from lc.lc_parser import LCParser
from lc.lc_pretty_printer import LCPrettyPrinter
from lc.lc_report import LCReport, LCReportBuilder
from lc.lc_report_renderer import LCReportRenderer
from lc.lc_syntax_error import LCSyntaxError
from lc.lc_tokenizer import LCTokenizer


class LC:
    """
    Lambda calculus front end: turns source text into an AST, or into
    source-anchored diagnostics when the text is malformed.

    Instances hold configuration only, so one instance can be shared freely.
    """

    def __init__(self, max_depth: int = 200, tab_width: int = 4, printer: Optional[LCPrettyPrinter] = None):
        """
        Initialize the front end.

        Args:
            max_depth: Maximum nesting of groups and abstractions the parser accepts
            tab_width: Display width of tabs when rendering diagnostics
            printer: Pretty printer used by format_result
        """
        self.max_depth = max_depth
        self.tab_width = tab_width
        self.printer = printer or LCPrettyPrinter()
        self._logger = logging.getLogger("LC")

    def parse(self, expression: str) -> LCASTNode:
        """
        Parse an expression.

        Args:
            expression: Lambda calculus source text

        Returns:
            Root of the AST

        Raises:
            LCParseError: If the expression has syntax errors; `errors` lists all of them
            LCNestingDepthError: If the expression nests deeper than max_depth
        """
        tokenizer = LCTokenizer()
        parser = LCParser(tokenizer.tokenize(expression), expression, max_depth=self.max_depth)
        return parser.parse()

    def report(self, error: LCSyntaxError) -> LCReport:
        """Build the presentation-neutral report for a syntax error."""
        return LCReportBuilder().build(error)

    def render(self, error: LCSyntaxError, expression: str) -> str:
        """
        Render a syntax error as text against the expression it came from.

        Args:
            error: A syntax error from LCParseError.errors
            expression: The source text that was parsed

        Returns:
            The rendered diagnostic
        """
        return LCReportRenderer(tab_width=self.tab_width).render(self.report(error), expression)

    def format_result(self, expression: str) -> str:
        """
        Parse an expression and format the outcome.

        Returns:
            The pretty-printed expression, or every diagnostic in discovery order
        """
        try:
            ast = self.parse(expression)

        except LCParseError as e:
            self._logger.debug("Rendering %d syntax error(s)", len(e.errors))
            renderer = LCReportRenderer(tab_width=self.tab_width)
            return renderer.render_all((self.report(error) for error in e.errors), expression)

        return self.printer.format(ast)
