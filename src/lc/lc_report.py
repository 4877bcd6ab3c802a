"""Diagnostic reports built from LC syntax errors.

A report is presentation-neutral data: a summary message plus labelled spans,
each with an emphasis level. LCReportRenderer turns a report into text; other
tooling (editors, language servers) can consume the report directly.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from lc.lc_syntax_error import LCCustomError, LCSyntaxError, LCUnclosedDelimiter, LCUnexpectedToken
from lc.lc_token import LCSpan, LCToken


END_OF_FILE = "end of file"


class LCSeverity(Enum):
    """How serious a report is."""
    ERROR = "Error"


class LCEmphasis(Enum):
    """Role of a label: the failure itself, or supporting context."""
    PRIMARY = 1
    SECONDARY = 2


@dataclass(frozen=True)
class LCReportLabel:
    """Text attached to one span of the source."""
    span: LCSpan
    message: str
    emphasis: LCEmphasis = LCEmphasis.PRIMARY


@dataclass
class LCReport:
    """A single diagnostic, anchored at byte offset `offset` of the source."""
    severity: LCSeverity
    message: str
    offset: int
    labels: List[LCReportLabel] = field(default_factory=list)


class LCReportBuilder:
    """Maps each kind of syntax error to its report."""

    def build(self, error: LCSyntaxError) -> LCReport:
        """
        Build the report for a syntax error.

        Args:
            error: The syntax error to describe

        Returns:
            The report, anchored at the start of the error's primary span
        """
        report = LCReport(LCSeverity.ERROR, "", error.span.start)

        if isinstance(error, LCUnclosedDelimiter):
            delimiter = f"Unclosed delimiter {error.delimiter.value}"
            report.message = delimiter
            report.labels.append(LCReportLabel(error.opening_span, delimiter, LCEmphasis.SECONDARY))
            report.labels.append(LCReportLabel(
                error.span,
                f"Must be closed before this {self._describe_found(error.found)}"
            ))
            return report

        if isinstance(error, LCUnexpectedToken):
            summary = "Unexpected token in input" if error.found is not None else "Unexpected end of input"
            if error.expected:
                expected = ", ".join(item.describe() for item in error.expected)

            else:
                expected = "something else"

            report.message = f"{summary}, expected {expected}"
            report.labels.append(LCReportLabel(
                error.span,
                f"Unexpected token {self._describe_found(error.found)}"
            ))
            return report

        assert isinstance(error, LCCustomError), f"Unknown syntax error type: {type(error).__name__}"
        report.message = error.message
        report.labels.append(LCReportLabel(error.span, error.message))
        return report

    @staticmethod
    def _describe_found(found: LCToken | None) -> str:
        return found.describe() if found is not None else END_OF_FILE
