"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from exprlex.lexer import tokenize
from exprlex.tokens import Token, TokenKind


@pytest.fixture
def lex():
    """Return a helper that tokenizes an expression."""

    def _lex(source: str) -> list[Token]:
        return tokenize(source)

    return _lex


def assert_kinds(tokens: list[Token], expected: list[TokenKind]) -> None:
    """Assert that the token kinds match the expected list."""
    actual = [t.kind for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_texts(tokens: list[Token], expected: list[str]) -> None:
    """Assert that the token texts match the expected list."""
    actual = [t.text for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def pairs(tokens: list[Token]) -> list[tuple[TokenKind, str]]:
    """Return (kind, text) pairs, ignoring positions."""
    return [t.pair for t in tokens]
