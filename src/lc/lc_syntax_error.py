"""Structured syntax errors produced by the LC parser.

These are plain data. The parser collects them and hands the whole ordered
list back to the caller inside an LCParseError; tooling can inspect them
directly or turn them into reports with LCReportBuilder.
"""

from dataclasses import dataclass
from typing import Tuple

from lc.lc_token import LCExpected, LCSpan, LCToken, LCTokenType


@dataclass(frozen=True)
class LCSyntaxError:
    """Base class for syntax errors; `span` is the primary failure location."""
    span: LCSpan


@dataclass(frozen=True)
class LCUnclosedDelimiter(LCSyntaxError):
    """
    An opening delimiter with no matching close.

    `span` points at the token that could not continue the group, or at the
    end-of-input sentinel when `found` is None.
    """
    delimiter: LCTokenType
    opening_span: LCSpan
    found: LCToken | None


@dataclass(frozen=True)
class LCUnexpectedToken(LCSyntaxError):
    """A token (or end of input when `found` is None) where the grammar wanted one of `expected`."""
    found: LCToken | None
    expected: Tuple[LCExpected, ...]


@dataclass(frozen=True)
class LCCustomError(LCSyntaxError):
    """A grammar-rule specific message, reported verbatim."""
    message: str
