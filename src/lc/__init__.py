"""LC (lambda calculus) front end: tokenizer, parser and diagnostics."""

# Main API
from lc.lc import LC

# Exceptions
from lc.lc_error import LCError, LCParseError, LCNestingDepthError

# Syntax errors (returned as data inside LCParseError)
from lc.lc_syntax_error import LCSyntaxError, LCUnclosedDelimiter, LCUnexpectedToken, LCCustomError

# AST
from lc.lc_ast import LCASTNode, LCASTName, LCASTApplication, LCASTAbstraction

# Diagnostics
from lc.lc_report import LCReport, LCReportLabel, LCReportBuilder, LCSeverity, LCEmphasis
from lc.lc_report_renderer import LCReportRenderer, LCSourceMap

# Lower-level components (for advanced usage)
from lc.lc_token import LCToken, LCTokenType, LCSpan, LCExpected
from lc.lc_tokenizer import LCTokenizer
from lc.lc_parser import LCParser
from lc.lc_pretty_printer import LCPrettyPrinter, FormatOptions


_default = LC()


def parse(expression: str) -> LCASTNode:
    """Parse an expression with the default configuration."""
    return _default.parse(expression)


def render(error: LCSyntaxError, expression: str) -> str:
    """Render a syntax error with the default configuration."""
    return _default.render(error, expression)


__all__ = [
    # Main API
    "LC", "parse", "render",

    # Exceptions
    "LCError", "LCParseError", "LCNestingDepthError",

    # Syntax errors
    "LCSyntaxError", "LCUnclosedDelimiter", "LCUnexpectedToken", "LCCustomError",

    # AST
    "LCASTNode", "LCASTName", "LCASTApplication", "LCASTAbstraction",

    # Diagnostics
    "LCReport", "LCReportLabel", "LCReportBuilder", "LCSeverity", "LCEmphasis",
    "LCReportRenderer", "LCSourceMap",

    # Lower-level components
    "LCToken", "LCTokenType", "LCSpan", "LCExpected", "LCTokenizer", "LCParser",
    "LCPrettyPrinter", "FormatOptions",
]
