"""Exception classes for LC (lambda calculus) front end errors with detailed context."""

from typing import List, Optional

from lc.lc_report import LCReportBuilder
from lc.lc_syntax_error import LCSyntaxError


class LCError(Exception):
    """Base exception for LC errors with detailed context information."""

    def __init__(
        self,
        message: str,
        context: Optional[str] = None,
        expected: Optional[str] = None,
        received: Optional[str] = None,
        suggestion: Optional[str] = None,
        position: Optional[int] = None
    ):
        """
        Initialize detailed error.

        Args:
            message: Core error description
            context: Why the limit or rule applies
            expected: What was expected
            received: What was actually found
            suggestion: Suggestion for fixing the error
            position: Byte offset where the error occurred
        """
        self.message = message
        self.context = context
        self.expected = expected
        self.received = received
        self.suggestion = suggestion
        self.position = position

        super().__init__(self._format_detailed_message())

    def _format_detailed_message(self) -> str:
        """Format the error message with the details that were supplied."""
        parts = [f"Error: {self.message}"]

        if self.position is not None:
            parts.append(f"Position: {self.position}")

        # What was found before what should have been there
        if self.received:
            parts.append(f"Received: {self.received}")

        if self.expected:
            parts.append(f"Expected: {self.expected}")

        if self.context:
            parts.append(f"Context: {self.context}")

        if self.suggestion:
            parts.append(f"Suggestion: {self.suggestion}")

        return "\n".join(parts)


class LCParseError(LCError):
    """
    Raised when an expression has one or more syntax errors.

    `errors` holds every syntax error found, in the order it was discovered.
    The exception text summarises the first of them.
    """

    def __init__(self, errors: List[LCSyntaxError], source: str):
        assert errors, "LCParseError needs at least one syntax error"
        self.errors = list(errors)
        self.source = source

        count = len(self.errors)
        first = LCReportBuilder().build(self.errors[0])
        super().__init__(
            message=f"Expression has {count} syntax error{'s' if count != 1 else ''}",
            position=first.offset,
            received=f"First error: {first.message}",
            suggestion="Render the individual errors with LC.render() for details"
        )


class LCNestingDepthError(LCError):
    """Nesting of groups and abstractions exceeded the parser's configured limit."""

    def __init__(self, max_depth: int, position: int):
        self.max_depth = max_depth
        super().__init__(
            message=f"Expression nesting exceeds the maximum depth of {max_depth}",
            position=position,
            received=f"More than {max_depth} nested groups or abstractions",
            expected=f"At most {max_depth} nested groups or abstractions",
            suggestion="Simplify the expression or construct the parser with a larger max_depth",
            context="Parsing is recursive, so nesting depth is bounded to protect the interpreter stack"
        )
