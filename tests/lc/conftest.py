"""Shared fixtures and utilities for LC tests."""

import pytest
from typing import List

from lc import LC, LCParseError, LCSyntaxError, LCTokenizer
from lc.lc_ast import LCASTAbstraction, LCASTApplication, LCASTName, LCASTNode


@pytest.fixture
def lc():
    """Create a fresh LC front end for each test."""
    return LC()


@pytest.fixture
def lc_custom():
    """Factory for LC instances with custom configuration."""
    def _create_lc(max_depth: int = 200, tab_width: int = 4) -> LC:
        return LC(max_depth=max_depth, tab_width=tab_width)
    return _create_lc


@pytest.fixture
def tokenizer():
    """Create a fresh tokenizer."""
    return LCTokenizer()


class LCTestHelpers:
    """Helper utilities for LC testing."""

    @staticmethod
    def parse_errors(lc: LC, expression: str) -> List[LCSyntaxError]:
        """Parse an expression that must fail and return its syntax errors."""
        with pytest.raises(LCParseError) as exc_info:
            lc.parse(expression)

        return exc_info.value.errors

    @staticmethod
    def name(text: str) -> LCASTName:
        return LCASTName(text)

    @staticmethod
    def app(*nodes: LCASTNode) -> LCASTNode:
        """Build a left-associated application chain: app(a, b, c) is (a b) c."""
        result = nodes[0]
        for node in nodes[1:]:
            result = LCASTApplication(result, node)

        return result

    @staticmethod
    def lam(params: str, body: LCASTNode) -> LCASTAbstraction:
        return LCASTAbstraction(tuple(params), body)

    @staticmethod
    def build_nested_groups(depth: int, inner: str = "a") -> str:
        """Build an expression wrapped in `depth` pairs of parentheses."""
        return "(" * depth + inner + ")" * depth


@pytest.fixture
def helpers():
    """Provide test helper utilities."""
    return LCTestHelpers
