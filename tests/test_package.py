"""Test the package-level tokenize/analyze helpers."""

import pytest

import sprig
from sprig.errors import InvalidByteError
from sprig.tokens import TokenType

from .conftest import assert_types


class TestTokenize:
    def test_default(self):
        assert_types(sprig.tokenize("let"), [TokenType.LET, TokenType.EOF])

    def test_tab_width(self):
        tokens = sprig.tokenize("\n  x", tab_width=2)
        assert_types(tokens, [TokenType.NEWLINE, TokenType.TAB, TokenType.IDENT, TokenType.EOF])

    def test_lenient(self):
        tokens = sprig.tokenize("a\x01", strict=False)
        assert_types(tokens, [TokenType.IDENT, TokenType.EOF])


class TestAnalyze:
    def test_strict_by_default(self):
        with pytest.raises(InvalidByteError):
            sprig.analyze("a\x01")

    def test_lenient(self):
        result = sprig.analyze("a\x01", strict=False)
        assert len(result) == 2

    def test_tab_width(self):
        result = sprig.analyze("\n  x", tab_width=2)
        assert result.tokens[1].raw == "  "
