"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from sprig.lexer import Lexer, tokenize
from sprig.tokens import Token, TokenType


@pytest.fixture
def lex():
    """Return a helper that tokenizes source and returns tokens (excluding EOF)."""

    def _lex(source: str | bytes, **kwargs) -> list[Token]:
        tokens = tokenize(source, **kwargs)
        # Strip trailing EOF for convenience
        return [t for t in tokens if t.type != TokenType.EOF]

    return _lex


@pytest.fixture
def scan():
    """Return a helper that pulls (offset, token) pairs until the first EOF."""

    def _scan(source: str | bytes, **kwargs) -> list[tuple[int, Token]]:
        lexer = Lexer(source, **kwargs)
        pairs = []
        while True:
            offset, tok = lexer.next_token()
            pairs.append((offset, tok))
            if tok.type == TokenType.EOF:
                return pairs

    return _scan


def assert_types(tokens: list[Token], expected: list[TokenType]) -> None:
    """Assert that the token types match the expected list."""
    actual = [t.type for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_values(tokens: list[Token], expected: list[str | float]) -> None:
    """Assert that the token values match the expected list."""
    actual = [t.value for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def find_tokens(tokens: list[Token], tt: TokenType) -> list[Token]:
    """Return all tokens of the given type."""
    return [t for t in tokens if t.type == tt]
