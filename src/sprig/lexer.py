"""Sprig lexer: a single-pass byte cursor producing a pull-based token stream."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from sprig.errors import InvalidByteError, UnterminatedStringError
from sprig.tokens import (
    CR_BYTE,
    DOT_BYTE,
    EOF_BYTE,
    KEYWORDS,
    LF_BYTE,
    QUOTE_BYTES,
    SPACE_BYTE,
    SYMBOLS,
    TAB_BYTE,
    Position,
    Span,
    Token,
    TokenType,
    is_digit_byte,
    is_ident_byte,
    newline_offsets,
    position_for,
)

logger = logging.getLogger(__name__)

# Canonical value for layout tokens, whatever bytes they were scanned from.
_LAYOUT_VALUES = {
    TokenType.NEWLINE: "\n",
    TokenType.SPACE: " ",
    TokenType.TAB: "\t",
    TokenType.EOF: "",
}


class Lexer:
    """Scan Sprig source one byte at a time.

    The consumer calls :meth:`next_token` until it sees an EOF token; further
    calls keep returning EOF at the same offset.  In strict mode (the default)
    malformed input raises a :class:`~sprig.errors.LexError`.  With
    ``strict=False`` the scanner degrades to EOF instead, and that EOF token
    covers the unscanned remainder of the input.  In both modes a line-start
    run of spaces too short to check for tab emulation ends the stream.
    """

    def __init__(
        self,
        source: str | bytes,
        filename: str = "input.sp",
        *,
        strict: bool = True,
        tab_width: int = 4,
    ) -> None:
        if tab_width < 1:
            raise ValueError(f"tab_width must be at least 1, got {tab_width}")
        self._input = source.encode("utf-8") if isinstance(source, str) else bytes(source)
        self._filename = filename
        self._strict = strict
        self._tab_fill = b" " * (tab_width - 1)
        self._newlines = newline_offsets(self._input)
        self._pos = 0
        self._read_pos = 0
        self._ch = EOF_BYTE
        self._advance()

    def __iter__(self) -> Iterator[Token]:
        while True:
            _, tok = self.next_token()
            yield tok
            if tok.type == TokenType.EOF:
                return

    def tokenize(self) -> list[Token]:
        """Drain the scanner and return every token, EOF included."""
        tokens = list(self)
        logger.debug(f"{self._filename}: {len(tokens)} tokens from {len(self._input)} bytes")
        return tokens

    def position_at(self, offset: int) -> Position:
        """Return the line/column position of a byte offset."""
        return position_for(self._newlines, offset)

    @property
    def newlines(self) -> list[int]:
        """Byte offsets of every LF in the source."""
        return self._newlines

    # ------------------------------------------------------------------
    # Cursor primitives
    # ------------------------------------------------------------------

    def _advance(self) -> None:
        if self._read_pos >= len(self._input):
            self._ch = EOF_BYTE
            self._pos = len(self._input)
        else:
            self._ch = self._input[self._read_pos]
            self._pos = self._read_pos
        self._read_pos = self._pos + 1

    def _at_end(self) -> bool:
        return self._pos >= len(self._input)

    def _peek(self) -> int:
        if self._read_pos < len(self._input):
            return self._input[self._read_pos]
        return EOF_BYTE

    def _peek_match(self, expected: bytes) -> bool | None:
        """Compare the bytes after the cursor with expected.

        Returns None when the input ends before len(expected) bytes.
        """
        end = self._pos + 1 + len(expected)
        if end > len(self._input):
            return None
        return self._input[self._pos + 1 : end] == expected

    def _prev_match(self, b: int) -> bool:
        return 0 < self._pos <= len(self._input) and self._input[self._pos - 1] == b

    def _park(self, reason: str, level: int = logging.WARNING) -> TokenType:
        """Move the cursor to the end and report EOF over the remainder."""
        logger.log(
            level,
            f"{self._filename}:{self.position_at(self._pos).line}: {reason}; "
            f"treating the rest of the input as end-of-input"
        )
        self._pos = len(self._input)
        self._read_pos = self._pos + 1
        self._ch = EOF_BYTE
        return TokenType.EOF

    # ------------------------------------------------------------------
    # Token dispatch
    # ------------------------------------------------------------------

    def next_token(self) -> tuple[int, Token]:
        """Scan one token and return (offset just past it, token)."""
        start = self._pos
        ch = self._ch
        value: str | float | None = None

        tt = SYMBOLS.get(ch)
        if tt is not None:
            pass
        elif ch == TAB_BYTE:
            tt = TokenType.TAB
        elif ch == LF_BYTE:
            tt = TokenType.NEWLINE
        elif ch == CR_BYTE and self._peek() == LF_BYTE:
            self._advance()
            tt = TokenType.NEWLINE
        elif ch == SPACE_BYTE:
            tt = self._read_whitespace()
        elif ch in QUOTE_BYTES:
            value = self._read_string_literal()
            tt = TokenType.STRING if value is not None else TokenType.EOF
        elif is_ident_byte(ch):
            value = self._read_ident()
            tt = KEYWORDS.get(value, TokenType.IDENT)
        elif is_digit_byte(ch):
            value = self._read_number_literal()
            tt = TokenType.NUMBER
        elif ch == EOF_BYTE and self._at_end():
            tt = TokenType.EOF
        elif self._strict:
            raise InvalidByteError(ch, self.position_at(start), self._input)
        else:
            tt = self._park(f"unrecognized byte 0x{ch:02X}")

        self._advance()
        end = self._pos

        raw = self._input[start:end].decode("utf-8", errors="replace")
        if tt in _LAYOUT_VALUES:
            value = _LAYOUT_VALUES[tt]
        elif value is None:
            value = raw
        span = Span(self.position_at(start), self.position_at(end))
        return end, Token(tt, value, raw, span)

    # ------------------------------------------------------------------
    # Multi-byte readers (each leaves the cursor on its last byte)
    # ------------------------------------------------------------------

    def _read_whitespace(self) -> TokenType:
        if not (self._prev_match(TAB_BYTE) or self._prev_match(LF_BYTE)):
            return TokenType.SPACE

        matched = self._peek_match(self._tab_fill)
        if matched is None:
            return self._park("indentation runs past end of input", logging.DEBUG)
        if not matched:
            return TokenType.SPACE

        for _ in self._tab_fill:
            self._advance()
        return TokenType.TAB

    def _read_number_literal(self) -> float:
        start = self._pos
        decimal = False
        while True:
            nxt = self._peek()
            if is_digit_byte(nxt):
                self._advance()
            elif nxt == DOT_BYTE and not decimal:
                decimal = True
                self._advance()
            else:
                break
        return float(self._input[start : self._pos + 1].decode("ascii"))

    def _read_string_literal(self) -> str | None:
        """Scan to the matching quote; None if lenient and the input ends first."""
        quote = self._ch
        start = self._pos
        self._advance()
        while self._ch != quote:
            if self._at_end():
                if self._strict:
                    raise UnterminatedStringError(
                        "unterminated string literal", self.position_at(start), self._input
                    )
                self._pos = start
                self._park("unterminated string literal")
                return None
            self._advance()
        return self._input[start + 1 : self._pos].decode("utf-8", errors="replace")

    def _read_ident(self) -> str:
        start = self._pos
        while is_ident_byte(self._peek()):
            self._advance()
        return self._input[start : self._pos + 1].decode("ascii")


def tokenize(
    source: str | bytes,
    filename: str = "input.sp",
    *,
    strict: bool = True,
    tab_width: int = 4,
) -> list[Token]:
    """Convenience function: tokenize source text and return token list."""
    return Lexer(source, filename, strict=strict, tab_width=tab_width).tokenize()
