"""Test identifier lexing and boundaries."""

from sprig.tokens import TokenType, is_digit_byte, is_ident_byte

from .conftest import assert_types, assert_values


class TestIsIdentByte:
    def test_letters(self):
        assert is_ident_byte(ord("a"))
        assert is_ident_byte(ord("Z"))

    def test_underscore(self):
        assert is_ident_byte(ord("_"))

    def test_digits_not_ident(self):
        for ch in "0123456789":
            assert not is_ident_byte(ord(ch)), f"Expected '{ch}' to NOT be ident byte"
            assert is_digit_byte(ord(ch))

    def test_non_ascii_not_ident(self):
        assert not is_ident_byte(0xC3)
        assert not is_ident_byte(ord("@"))
        assert not is_ident_byte(ord("`"))


class TestIdentifierLexing:
    def test_simple_word(self, lex):
        tokens = lex("hello")
        assert_types(tokens, [TokenType.IDENT])
        assert_values(tokens, ["hello"])

    def test_underscores(self, lex):
        tokens = lex("_private_name")
        assert_types(tokens, [TokenType.IDENT])
        assert_values(tokens, ["_private_name"])

    def test_lone_underscore_is_identifier(self, lex):
        tokens = lex("_")
        assert_types(tokens, [TokenType.IDENT])

    def test_digit_splits_identifier(self, lex):
        tokens = lex("foo1")
        assert_types(tokens, [TokenType.IDENT, TokenType.NUMBER])
        assert_values(tokens, ["foo", 1.0])

    def test_identifier_after_digit(self, lex):
        tokens = lex("x1y")
        assert_types(tokens, [TokenType.IDENT, TokenType.NUMBER, TokenType.IDENT])
        assert_values(tokens, ["x", 1.0, "y"])

    def test_dot_access(self, lex):
        tokens = lex("point.x")
        assert_types(tokens, [TokenType.IDENT, TokenType.DOT, TokenType.IDENT])

    def test_call(self, lex):
        tokens = lex("greet(name)")
        assert_types(
            tokens,
            [TokenType.IDENT, TokenType.LPAREN, TokenType.IDENT, TokenType.RPAREN],
        )

    def test_identifier_offsets(self, scan):
        pairs = scan("abc def")
        assert [offset for offset, _ in pairs] == [3, 4, 7, 7]
