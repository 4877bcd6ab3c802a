"""Parser for LC expressions with error collection and recovery."""

import logging
from typing import Iterable, List, Tuple

from lc.lc_ast import LCASTAbstraction, LCASTApplication, LCASTName, LCASTNode
from lc.lc_error import LCNestingDepthError, LCParseError
from lc.lc_syntax_error import LCCustomError, LCSyntaxError, LCUnclosedDelimiter, LCUnexpectedToken
from lc.lc_token import LCExpected, LCSpan, LCToken, LCTokenType
from lc.lc_tokenizer import LCTokenizer


# What can start an atom
ATOM_START: Tuple[LCExpected, ...] = (LCExpected.IDENTIFIER, LCExpected.LAMBDA, LCExpected.LPAREN)

# What can follow a complete top-level expression
TRAILING: Tuple[LCExpected, ...] = ATOM_START + (LCExpected.END_OF_INPUT,)

BINDING_MESSAGE = "Definitions with ':=' are not supported here; expected a single expression"


class LCParser:
    """
    Recursive descent parser that turns LC tokens into an AST.

    Grammar, as a precedence ladder:

        expression  ::= atom atom*                  ; left-associative application
        atom        ::= IDENTIFIER
                      | '(' expression ')'
                      | 'λ' IDENTIFIER '.' expression

    Abstraction bodies are greedy, so `λx.a b` is `λx.(a b)` and a bare
    abstraction can only ever be the last operand of an application.

    Syntax errors are collected rather than raised one at a time. After each
    local failure the parser recovers and keeps going, and `parse()` raises a
    single LCParseError holding every error in discovery order.
    """

    def __init__(self, tokens: Iterable[LCToken], expression: str, max_depth: int = 200):
        """
        Initialize parser with tokens and original expression.

        Args:
            tokens: Tokens to parse
            expression: Original expression string, used for the end-of-input span and error context
            max_depth: Maximum nesting of groups and abstractions
        """
        self.tokens = list(tokens)
        self.expression = expression
        self.max_depth = max_depth
        self.end_span = LCTokenizer.end_of_input_span(expression)

        self.pos = 0
        self.current_token: LCToken | None = None
        self.errors: List[LCSyntaxError] = []
        self._depth = 0

        self._logger = logging.getLogger("LCParser")

    def parse(self) -> LCASTNode:
        """
        Parse the whole token sequence into a single expression.

        Returns:
            Root of the AST

        Raises:
            LCParseError: If there are syntax errors, carrying all of them
            LCNestingDepthError: If the expression nests deeper than max_depth
        """
        self.pos = 0
        self.current_token = self.tokens[0] if self.tokens else None
        self.errors = []
        self._depth = 0

        expr = self._parse_expression()
        self._parse_trailing()

        if self.errors:
            self._logger.debug("Parse failed with %d syntax error(s)", len(self.errors))
            raise LCParseError(self.errors, self.expression)

        assert expr is not None, "Parser produced no expression and no errors"
        return expr

    def _parse_expression(self) -> LCASTNode | None:
        """Parse a leading atom, then fold each following atom in as an argument."""
        expr = self._parse_atom()

        while self.current_token is not None and self.current_token.starts_expression():
            argument = self._parse_atom()
            if expr is None or argument is None:
                expr = None
                continue

            assert expr.span is not None and argument.span is not None
            expr = LCASTApplication(expr, argument, span=LCSpan(expr.span.start, argument.span.end))

        return expr

    def _parse_atom(self) -> LCASTNode | None:
        token = self.current_token
        if token is None:
            self._unexpected(None, ATOM_START)
            return None

        if token.type == LCTokenType.IDENTIFIER:
            self._advance()
            return LCASTName(token.value, span=token.span)

        if token.type == LCTokenType.LPAREN:
            return self._parse_group()

        if token.type == LCTokenType.LAMBDA:
            return self._parse_abstraction()

        if token.type == LCTokenType.BINDING:
            self.errors.append(LCCustomError(token.span, BINDING_MESSAGE))
            self._advance()
            return None

        self._unexpected(token, ATOM_START)

        # A ')' belongs to an enclosing group (or to the trailing check), so leave it
        if token.type != LCTokenType.RPAREN:
            self._advance()

        return None

    def _parse_group(self) -> LCASTNode | None:
        """Parse '(' expression ')'. The group is transparent: it adds no node of its own."""
        opening = self.current_token
        assert opening is not None and opening.type == LCTokenType.LPAREN
        self._enter(opening)
        try:
            self._advance()  # consume '('
            inner = self._parse_expression()

            # `(a := b)` is a misplaced definition, not an unclosed group
            token = self.current_token
            while token is not None and token.type == LCTokenType.BINDING:
                self.errors.append(LCCustomError(token.span, BINDING_MESSAGE))
                self._advance()
                inner = None
                token = self.current_token
                if token is not None and token.starts_expression():
                    self._parse_expression()
                    token = self.current_token

            if token is not None and token.type == LCTokenType.RPAREN:
                self._advance()  # consume ')'
                return inner

            self.errors.append(LCUnclosedDelimiter(
                span=token.span if token is not None else self.end_span,
                delimiter=LCTokenType.LPAREN,
                opening_span=opening.span,
                found=token
            ))
            self._skip_to_closing_paren()
            return None

        finally:
            self._leave()

    def _parse_abstraction(self) -> LCASTNode | None:
        """Parse 'λ' IDENTIFIER '.' expression, with a greedy body."""
        lambda_token = self.current_token
        assert lambda_token is not None and lambda_token.type == LCTokenType.LAMBDA
        self._enter(lambda_token)
        try:
            self._advance()  # consume 'λ'
            header_ok = True
            params: Tuple[str, ...] = ()

            token = self.current_token
            if token is not None and token.type == LCTokenType.IDENTIFIER:
                params = tuple(token.value)
                self._advance()

            else:
                header_ok = False
                self._unexpected(token, (LCExpected.IDENTIFIER,))

            token = self.current_token
            if token is not None and token.type == LCTokenType.DOT:
                self._advance()

            elif header_ok:
                header_ok = False
                self._unexpected(token, (LCExpected.DOT,))

            if not header_ok:
                # Still look at the body for independent errors, but only when one is present
                if self.current_token is not None and self.current_token.starts_expression():
                    self._parse_expression()

                return None

            body = self._parse_expression()
            if body is None:
                return None

            assert body.span is not None
            return LCASTAbstraction(params, body, span=LCSpan(lambda_token.span.start, body.span.end))

        finally:
            self._leave()

    def _parse_trailing(self) -> None:
        """Report tokens left over after the top-level expression, then resume parsing after them."""
        while self.current_token is not None:
            token = self.current_token
            if token.type == LCTokenType.BINDING:
                self.errors.append(LCCustomError(token.span, BINDING_MESSAGE))
                self._advance()

            else:
                # The atom parser may already have reported this exact token
                if not self.errors or self.errors[-1].span != token.span:
                    self._unexpected(token, TRAILING)

                while (
                    self.current_token is not None
                    and not self.current_token.starts_expression()
                    and self.current_token.type != LCTokenType.BINDING
                ):
                    self._advance()

            if self.current_token is not None and self.current_token.starts_expression():
                self._parse_expression()

    def _skip_to_closing_paren(self) -> None:
        """Skip forward past the ')' that balances the current group, or to end of input."""
        depth = 0
        while self.current_token is not None:
            token_type = self.current_token.type
            if token_type == LCTokenType.LPAREN:
                depth += 1

            elif token_type == LCTokenType.RPAREN:
                if depth == 0:
                    self._advance()
                    return

                depth -= 1

            self._advance()

    def _unexpected(self, token: LCToken | None, expected: Tuple[LCExpected, ...]) -> None:
        self.errors.append(LCUnexpectedToken(
            span=token.span if token is not None else self.end_span,
            found=token,
            expected=LCExpected.ordered(expected)
        ))

    def _enter(self, token: LCToken) -> None:
        self._depth += 1
        if self._depth > self.max_depth:
            raise LCNestingDepthError(self.max_depth, token.span.start)

    def _leave(self) -> None:
        self._depth -= 1

    def _advance(self) -> None:
        """Move to the next token."""
        self.pos += 1
        if self.pos < len(self.tokens):
            self.current_token = self.tokens[self.pos]

        else:
            self.current_token = None
