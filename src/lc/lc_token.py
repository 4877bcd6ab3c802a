"""Token types and token representation for lambda calculus expressions."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple


@dataclass(frozen=True)
class LCSpan:
    """Half-open UTF-8 byte range [start, end) into the source text."""
    start: int
    end: int

    def __repr__(self) -> str:
        return f"{self.start}..{self.end}"


class LCTokenType(Enum):
    """Token types for lambda calculus expressions."""
    LAMBDA = "λ"
    DOT = "."
    BINDING = ":="
    LPAREN = "("
    RPAREN = ")"
    IDENTIFIER = "IDENTIFIER"
    INVALID = "INVALID"


class LCExpected(Enum):
    """
    Things the parser can ask for when it reports an unexpected token.

    Declaration order is the order used when listing them in a diagnostic.
    """
    IDENTIFIER = "identifier"
    LAMBDA = "λ"
    LPAREN = "("
    RPAREN = ")"
    DOT = "."
    END_OF_INPUT = "end of input"

    def describe(self) -> str:
        """Human readable description used in diagnostics."""
        return self.value

    @staticmethod
    def ordered(expected: 'Iterable[LCExpected]') -> 'Tuple[LCExpected, ...]':
        """Return the expectations in their canonical display order."""
        wanted = set(expected)
        return tuple(item for item in LCExpected if item in wanted)


@dataclass(frozen=True)
class LCToken:
    """Represents a single token in a lambda calculus expression."""
    type: LCTokenType
    value: str
    span: LCSpan

    def describe(self) -> str:
        """Canonical display text for this token."""
        return self.value

    def starts_expression(self) -> bool:
        """True if this token can begin an atom."""
        return self.type in (LCTokenType.IDENTIFIER, LCTokenType.LAMBDA, LCTokenType.LPAREN)

    def __repr__(self) -> str:
        return f"LCToken({self.type.name}, {self.value!r}, span={self.span!r})"
