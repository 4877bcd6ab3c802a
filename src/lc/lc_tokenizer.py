"""Tokenizer for lambda calculus expressions."""

import logging
from typing import Iterator

from lc.lc_token import LCSpan, LCToken, LCTokenType


class LCTokenizer:
    """
    Tokenizes lambda calculus expressions into spanned tokens.

    The tokenizer never fails: characters that match no rule are emitted as
    INVALID tokens so the parser can report them at a precise location.
    Spans are UTF-8 byte offsets into the source.
    """

    _WHITESPACE_CHARS = frozenset(" \t\r\n")
    _LETTER_CHARS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
    _SINGLE_CHAR_TOKENS = {
        'λ': LCTokenType.LAMBDA,
        '.': LCTokenType.DOT,
        '(': LCTokenType.LPAREN,
        ')': LCTokenType.RPAREN,
    }

    def __init__(self) -> None:
        self._logger = logging.getLogger("LCTokenizer")

    def tokenize(self, expression: str) -> Iterator[LCToken]:
        """
        Lazily tokenize an expression.

        Each call starts a fresh scan from the beginning of the expression.

        Args:
            expression: The expression string to tokenize

        Yields:
            Tokens in source order, whitespace removed
        """
        i = 0
        offset = 0
        length = len(expression)

        while i < length:
            char = expression[i]

            if char in self._WHITESPACE_CHARS:
                i += 1
                offset += 1
                continue

            # ':=' must win over a lone ':'
            if char == ':' and i + 1 < length and expression[i + 1] == '=':
                yield LCToken(LCTokenType.BINDING, ":=", LCSpan(offset, offset + 2))
                i += 2
                offset += 2
                continue

            token_type = self._SINGLE_CHAR_TOKENS.get(char)
            if token_type is not None:
                width = self._byte_width(char)
                yield LCToken(token_type, char, LCSpan(offset, offset + width))
                i += 1
                offset += width
                continue

            if char in self._LETTER_CHARS:
                start = i
                while i < length and expression[i] in self._LETTER_CHARS:
                    i += 1

                # Letters are ASCII, so characters and bytes line up
                yield LCToken(LCTokenType.IDENTIFIER, expression[start:i], LCSpan(offset, offset + i - start))
                offset += i - start
                continue

            width = self._byte_width(char)
            self._logger.debug("Invalid character %r at byte offset %d", char, offset)
            yield LCToken(LCTokenType.INVALID, char, LCSpan(offset, offset + width))
            i += 1
            offset += width

    @staticmethod
    def end_of_input_span(expression: str) -> LCSpan:
        """Return the sentinel span that sits just past the end of the expression."""
        length = len(expression.encode("utf-8"))
        return LCSpan(length, length + 1)

    @staticmethod
    def _byte_width(char: str) -> int:
        return len(char.encode("utf-8"))
