"""Test numeric literal lexing."""

from sprig.tokens import TokenType

from .conftest import assert_types, assert_values


class TestIntegers:
    def test_single_digit(self, lex):
        tokens = lex("7")
        assert_types(tokens, [TokenType.NUMBER])
        assert_values(tokens, [7.0])
        assert isinstance(tokens[0].value, float)

    def test_multi_digit(self, lex):
        tokens = lex("12345")
        assert_values(tokens, [12345.0])
        assert tokens[0].raw == "12345"

    def test_leading_zeros(self, lex):
        tokens = lex("007")
        assert_values(tokens, [7.0])


class TestDecimals:
    def test_decimal(self, lex):
        tokens = lex("3.14")
        assert_types(tokens, [TokenType.NUMBER])
        assert_values(tokens, [3.14])

    def test_second_point_ends_literal(self, lex):
        tokens = lex("3.1.4")
        assert_types(tokens, [TokenType.NUMBER, TokenType.DOT, TokenType.NUMBER])
        assert_values(tokens, [3.1, ".", 4.0])

    def test_trailing_point(self, lex):
        tokens = lex("3.")
        assert_types(tokens, [TokenType.NUMBER])
        assert_values(tokens, [3.0])

    def test_leading_point_is_dot(self, lex):
        tokens = lex(".5")
        assert_types(tokens, [TokenType.DOT, TokenType.NUMBER])


class TestUnsigned:
    def test_minus_is_separate(self, lex):
        tokens = lex("-2")
        assert_types(tokens, [TokenType.DASH, TokenType.NUMBER])
        assert_values(tokens, ["-", 2.0])

    def test_no_hex_prefix(self, lex):
        tokens = lex("0x1F")
        assert_types(tokens, [TokenType.NUMBER, TokenType.IDENT, TokenType.NUMBER, TokenType.IDENT])
        assert_values(tokens, [0.0, "x", 1.0, "F"])

    def test_no_exponent(self, lex):
        tokens = lex("1e5")
        assert_types(tokens, [TokenType.NUMBER, TokenType.IDENT, TokenType.NUMBER])

    def test_number_offsets(self, scan):
        pairs = scan("12+3")
        assert [offset for offset, _ in pairs] == [2, 3, 4, 4]
