"""Token types, data structures, and byte classification helpers."""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    # Keywords
    LET = auto()
    MUT = auto()
    DEF = auto()
    STRUCT = auto()
    ENUM = auto()
    OBJECT = auto()
    IF = auto()
    ELIF = auto()
    ELSE = auto()
    MATCH = auto()
    TRUE = auto()
    FALSE = auto()

    # Payload
    IDENT = auto()  # [A-Za-z_]+ not matching a keyword
    STRING = auto()  # '...' or "...", value is the text between the quotes
    NUMBER = auto()  # digits with at most one '.', value is a float

    # Layout
    NEWLINE = auto()  # \n or \r\n
    SPACE = auto()  # single space
    TAB = auto()  # \t, or a run of spaces emulating one at an indent start

    # Surrounding characters
    LPAREN = auto()  # (
    RPAREN = auto()  # )
    LBRACE = auto()  # {
    RBRACE = auto()  # }
    LBRACKET = auto()  # [
    RBRACKET = auto()  # ]
    LANGLE = auto()  # <
    RANGLE = auto()  # >
    SINGLE_QUOTE = auto()  # ' (opens a string literal, never emitted)
    DOUBLE_QUOTE = auto()  # " (opens a string literal, never emitted)

    # Symbols
    COMMA = auto()  # ,
    DOT = auto()  # .
    PIPE = auto()  # |
    PLUS = auto()  # +
    DASH = auto()  # -
    UNDERSCORE = auto()  # _ (starts an identifier, never emitted)
    EQUAL = auto()  # =
    FSLASH = auto()  # /
    BSLASH = auto()  # \
    COLON = auto()  # :
    SEMICOLON = auto()  # ;
    BANG = auto()  # !
    AT = auto()  # @
    HASH = auto()  # #
    DOLLAR = auto()  # $
    PERCENT = auto()  # %
    CARET = auto()  # ^
    AMPERSAND = auto()  # &
    ASTERISK = auto()  # *
    QUESTION = auto()  # ?
    TILDE = auto()  # ~
    GRAVE = auto()  # `

    EOF = auto()


KEYWORDS: dict[str, TokenType] = {
    "let": TokenType.LET,
    "mut": TokenType.MUT,
    "def": TokenType.DEF,
    "struct": TokenType.STRUCT,
    "enum": TokenType.ENUM,
    "object": TokenType.OBJECT,
    "if": TokenType.IF,
    "elif": TokenType.ELIF,
    "else": TokenType.ELSE,
    "match": TokenType.MATCH,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
}

_SYMBOL_CHARS: dict[str, TokenType] = {
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
    "<": TokenType.LANGLE,
    ">": TokenType.RANGLE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "?": TokenType.QUESTION,
    ":": TokenType.COLON,
    ";": TokenType.SEMICOLON,
    "!": TokenType.BANG,
    "@": TokenType.AT,
    "#": TokenType.HASH,
    "$": TokenType.DOLLAR,
    "%": TokenType.PERCENT,
    "^": TokenType.CARET,
    "&": TokenType.AMPERSAND,
    "*": TokenType.ASTERISK,
    "-": TokenType.DASH,
    "=": TokenType.EQUAL,
    "+": TokenType.PLUS,
    "|": TokenType.PIPE,
    "\\": TokenType.BSLASH,
    "/": TokenType.FSLASH,
    "~": TokenType.TILDE,
    "`": TokenType.GRAVE,
}

# Single bytes that map directly to a token, one byte consumed.
SYMBOLS: dict[int, TokenType] = {ord(ch): tt for ch, tt in _SYMBOL_CHARS.items()}

EOF_BYTE = 0x00
TAB_BYTE = 0x09
LF_BYTE = 0x0A
CR_BYTE = 0x0D
SPACE_BYTE = 0x20
DOT_BYTE = 0x2E
QUOTE_BYTES = frozenset(b"'\"")


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based byte offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Span:
    """Source range from start to end position."""

    start: Position
    end: Position


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexer token with its payload and original source text.

    ``value`` is the literal payload for STRING (text) and NUMBER (float),
    the name for IDENT, and the canonical text for every other type.
    """

    type: TokenType
    value: str | float
    raw: str
    span: Span

    @property
    def start(self) -> int:
        return self.span.start.offset

    @property
    def end(self) -> int:
        return self.span.end.offset


def is_ident_byte(b: int) -> bool:
    """Return True if b is an ASCII letter or underscore."""
    return 0x41 <= b <= 0x5A or 0x61 <= b <= 0x7A or b == 0x5F


def is_digit_byte(b: int) -> bool:
    """Return True if b is an ASCII digit."""
    return 0x30 <= b <= 0x39


def newline_offsets(data: bytes) -> list[int]:
    """Return the byte offset of every LF in data, in order."""
    offsets = []
    idx = data.find(b"\n")
    while idx != -1:
        offsets.append(idx)
        idx = data.find(b"\n", idx + 1)
    return offsets


def position_for(newlines: list[int], offset: int) -> Position:
    """Convert a byte offset to a Position given the sorted newline offsets."""
    line_idx = bisect_left(newlines, offset)
    line_start = newlines[line_idx - 1] + 1 if line_idx > 0 else 0
    return Position(line_idx + 1, offset - line_start + 1, offset)
